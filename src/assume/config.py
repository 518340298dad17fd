"""Process-wide assertion configuration."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssumeSettings(BaseSettings):
    """Defaults applied when a chain is constructed.

    Loads from environment variables automatically:
        ASSUME_INCLUDE_STACK, ASSUME_INCLUDE_DIFF
    """

    include_stack: bool = Field(default=True, description="Attach a stack trace to failures")
    include_diff: bool = Field(default=True, description="Attach expected/actual diff data to failures")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="ASSUME_",
        validate_assignment=True,
    )


settings = AssumeSettings()


def get_settings() -> AssumeSettings:
    """Get the active settings instance."""
    return settings


def configure(**values: Any) -> AssumeSettings:
    """Update the process-wide defaults.

    Values are validated the same way environment values are, so
    ``configure(include_stack="false")`` is accepted.
    """
    for key, value in values.items():
        if key not in AssumeSettings.model_fields:
            raise TypeError(f"Unknown setting: {key!r}")
        setattr(settings, key, value)
    return settings


def reset_settings() -> AssumeSettings:
    """Reload the defaults from the environment."""
    fresh = AssumeSettings()
    for key in AssumeSettings.model_fields:
        setattr(settings, key, getattr(fresh, key))
    return settings


@contextmanager
def config_override(**values: Any) -> Iterator[AssumeSettings]:
    """Temporarily override settings, restoring the previous values on exit."""
    previous = settings.model_dump()
    configure(**values)
    try:
        yield settings
    finally:
        for key, value in previous.items():
            setattr(settings, key, value)
