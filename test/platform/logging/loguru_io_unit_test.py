"""Unit tests for the Logger.io decorator"""

import pytest

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_utils import mask_sensitive, truncate_content


pytestmark = pytest.mark.unit


@Logger.io
def double(value: int) -> int:
    return value * 2


@Logger.io
def fail_with_domain_error() -> None:
    raise DomainError('Seat already taken')


@Logger.io(reraise=False)
def swallow() -> None:
    raise DomainError('ignored')


@Logger.io
async def async_double(value: int) -> int:
    return value * 2


class TestLoggerIo:
    def test_sync_return_value_passthrough(self):
        assert double(21) == 42
        assert double.__name__ == 'double'

    @pytest.mark.asyncio
    async def test_async_return_value_passthrough(self):
        assert await async_double(4) == 8

    def test_exception_reraised_and_marked_logged(self):
        with pytest.raises(DomainError) as exc_info:
            fail_with_domain_error()

        assert getattr(exc_info.value, '_has_logged', False) is True

    def test_reraise_false_returns_none(self):
        assert swallow() is None


class TestLoggingUtils:
    def test_mask_sensitive_hides_token_value(self):
        assert mask_sensitive("token='abc123'") == "token='********'"

    def test_mask_sensitive_leaves_plain_values(self):
        assert mask_sensitive({'seat': '1A'}) == {'seat': '1A'}

    def test_truncate_long_content(self):
        result = truncate_content('x' * 600)

        assert result.startswith('x' * 500)
        assert 'truncated 100 chars' in result
