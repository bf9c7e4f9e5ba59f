"""
Configuration management for the scraping checker

Settings come from environment variables, optionally loaded from a
``.env`` file in the working directory.
"""
import logging
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import APP_ENVS, LOG_LEVELS

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when an environment setting has an invalid value."""


class Settings(BaseSettings):
    """Validated application settings.

    Read from ``APP_ENV``, ``LOG_LEVEL`` and ``APP_NAME``. Blank
    ``APP_ENV``/``LOG_LEVEL`` fall back to their defaults.
    """

    model_config = SettingsConfigDict(case_sensitive=False, frozen=True)

    app_env: str = 'development'
    log_level: str = 'info'
    app_name: str = 'scraping-checker'

    @field_validator('app_env', mode='before')
    @classmethod
    def _check_app_env(cls, value):
        value = str(value or '').strip().lower() or 'development'
        if value not in APP_ENVS:
            raise ValueError(f"APP_ENV must be one of {', '.join(APP_ENVS)}, got {value!r}")
        return value

    @field_validator('log_level', mode='before')
    @classmethod
    def _check_log_level(cls, value):
        value = str(value or '').strip().lower() or 'info'
        if value not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return value

    @field_validator('app_name', mode='before')
    @classmethod
    def _check_app_name(cls, value):
        value = str(value).strip()
        if not value:
            raise ValueError("APP_NAME must not be empty")
        return value

    @property
    def is_production(self) -> bool:
        return self.app_env == 'production'

    @property
    def logging_level(self) -> int:
        return LOG_LEVELS[self.log_level]


_settings: Optional[Settings] = None
_dotenv_loaded = False


def _load_dotenv():
    global _dotenv_loaded
    if not _dotenv_loaded:
        load_dotenv()
        _dotenv_loaded = True


def load_settings() -> Settings:
    """Read and validate settings from the environment."""
    _load_dotenv()
    try:
        return Settings()
    except ValidationError as e:
        message = '; '.join(err['msg'].replace('Value error, ', '', 1) for err in e.errors())
        raise ConfigurationError(message) from e


def get_settings() -> Settings:
    """Cached settings, loaded on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings():
    """Forget cached settings (tests)."""
    global _settings
    _settings = None
