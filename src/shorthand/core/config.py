"""Runtime settings for the Shorthand toolkit."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings"]

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    LOG_LEVEL: str = Field("INFO", description="Level for the project logger.")
    LOG_FORMAT: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string for the project log handler.",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {_LEVELS}, got '{value}'.")
        return level

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        ``SHORTHAND_LOG_LEVEL`` wins over the generic ``LOG_LEVEL``; unset
        values fall back to the field defaults.
        """
        environ = os.environ if environ is None else environ

        values = {}
        level = environ.get("SHORTHAND_LOG_LEVEL") or environ.get("LOG_LEVEL")
        if level:
            values["LOG_LEVEL"] = level
        log_format = environ.get("SHORTHAND_LOG_FORMAT")
        if log_format:
            values["LOG_FORMAT"] = log_format

        return cls(**values)


settings = Settings.load()
