"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from FIELDTYPES_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Sanitization
    ALLOW_BASIC_HTML: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FIELDTYPES_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
