# lighthouse/core/config.py
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PAGESPEED_API_ENDPOINT = "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"

class Settings(BaseSettings):
    """Loads environment variables from .env file."""
    PAGESPEED_API_KEY: str = ""
    PAGESPEED_API_ENDPOINT: str = PAGESPEED_API_ENDPOINT
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {value!r}")
        return level

# Create a single instance of the settings to be used across the application
settings = Settings()
