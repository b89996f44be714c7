"""
Base configuration for tsh.

Settings come from TSH_-prefixed environment variables only; there is no
configuration file.
"""

from __future__ import annotations

from typing import TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings

T = TypeVar('T', bound='BaseTshSettings')


class BaseTshSettings(pydantic_settings.BaseSettings):
    """Shared configuration for tsh entry points."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix='TSH_',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='forbid',  # Reject unknown fields
    )

    # Application metadata
    APP_NAME: str = 'tsh'
    VERSION: str = '0.1.0'

    # External executables
    SELECTOR_BIN: str = 'fzf'
    MULTIPLEXER_BIN: str = 'tmux'
    FAST_ENUMERATOR_BIN: str = 'fd'
    ENUMERATOR_BIN: str = 'find'

    @pydantic.field_validator('SELECTOR_BIN', 'MULTIPLEXER_BIN', 'FAST_ENUMERATOR_BIN', 'ENUMERATOR_BIN')
    @classmethod
    def validate_binary_name(cls, v: str) -> str:
        """Executable names are looked up on PATH and passed as argv[0]."""
        if not v or any(c.isspace() for c in v):
            raise ValueError('executable name must be non-empty and contain no whitespace')
        return v

    @property
    def required_binaries(self) -> list[str]:
        """Executables that must be on PATH before the pipeline runs."""
        return [self.SELECTOR_BIN, self.MULTIPLEXER_BIN]


def get_settings(settings_class: type[T]) -> T:
    """Create settings from the current environment."""
    return settings_class()


def lazy_settings(settings_class: type[T]) -> T:
    """
    Lazy settings - defers instantiation until first access.

    Args:
        settings_class: Settings class to instantiate

    Returns:
        Proxy that instantiates settings on first access
    """
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))
