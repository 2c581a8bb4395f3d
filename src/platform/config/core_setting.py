import json
from pathlib import Path
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    DEBUG: bool = False  # Enables args/return logging in Logger.io

    # Logging
    LOG_FILE_ENABLED: bool = False
    LOG_TIMEZONE: str = 'UTC'

    # Vehicle seating (default catalog is SEAT_ROWS x SEAT_LETTERS, e.g. 1A..8D)
    DEFAULT_VEHICLE_ID: str = 'default-vehicle'
    SEAT_ROWS: int = 8
    SEAT_LETTERS: Annotated[List[str], NoDecode] = ['A', 'B', 'C', 'D']

    @field_validator('SEAT_LETTERS', mode='before')
    @classmethod
    def assemble_seat_letters(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.strip().startswith('['):
            return json.loads(v)
        if isinstance(v, str):
            if ',' in v:
                return [i.strip() for i in v.split(',') if i.strip()]
            return list(v.strip())
        return v

    @field_validator('SEAT_ROWS')
    @classmethod
    def validate_seat_rows(cls, v: int) -> int:
        if v < 1:
            raise ValueError('SEAT_ROWS must be at least 1')
        return v


settings = Settings()  # type: ignore
