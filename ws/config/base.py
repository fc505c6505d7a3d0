"""
Base configuration for ws.

Settings come from WS_* environment variables, optionally preloaded from the
.env file named by LOAD_ENV_FILE.
"""

from __future__ import annotations

import os
import pathlib
from typing import TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings

T = TypeVar('T', bound='BaseWsSettings')


class BaseWsSettings(pydantic_settings.BaseSettings):
    """Shared configuration for every ws entry point."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix='WS_',
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='forbid',  # Reject unknown keys in the .env file
    )

    # Application metadata
    APP_NAME: str = 'ws'
    VERSION: str = '0.1.0'

    # State
    STATE_FILE: pathlib.Path | None = None  # None = platform data dir
    CACHE_TTL_SECONDS: int = 3600
    MAX_HISTORY_SIZE: int = 10

    @pydantic.field_validator('CACHE_TTL_SECONDS')
    @classmethod
    def validate_cache_ttl(cls, v: int) -> int:
        """A zero TTL would rescan on every invocation."""
        if v <= 0:
            raise ValueError('CACHE_TTL_SECONDS must be positive')
        return v

    @pydantic.field_validator('MAX_HISTORY_SIZE')
    @classmethod
    def validate_max_history_size(cls, v: int) -> int:
        """Back navigation needs at least one history slot."""
        if v < 1:
            raise ValueError('MAX_HISTORY_SIZE must be at least 1')
        return v


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Build settings from WS_* variables, plus an env file if one is named.

    The file comes from `env_file` or LOAD_ENV_FILE; a named file that does
    not exist raises FileNotFoundError.
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')
    if not env_file_path:
        return settings_class()

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)


def lazy_settings(settings_class: type[T]) -> T:
    """Settings proxy that reads the environment on first attribute access."""
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))
