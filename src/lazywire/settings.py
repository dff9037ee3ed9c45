from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DemoSettings(BaseSettings):
    """Runtime knobs for the demonstration driver.

    Every field has a default, so running without any ``LAZYWIRE_*``
    environment variables reproduces the stock demonstration.
    """

    model_config = SettingsConfigDict(env_prefix="LAZYWIRE_", frozen=True)

    pause_seconds: int = Field(default=5, ge=0)
    """Length of the countdown between deferred steps. ``0`` disables it."""

    time_format: str = "%H:%M:%S"
    """``strftime`` format of the timestamp printed before every message."""

    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value
