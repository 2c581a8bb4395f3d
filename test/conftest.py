"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import, because
settings and the loguru sinks are configured at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'boarding-queue-test')
    os.environ.setdefault('DEBUG', 'false')


_early_setup_test_environment()

import pytest  # noqa: E402

from src.platform.config import di  # noqa: E402


@pytest.fixture(scope='session', autouse=True)
def reset_container_singletons():
    yield
    di.cleanup()
