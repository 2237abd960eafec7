"""Runtime settings for CodeSketch.

Values come from environment variables and are read once per process.
"""

import os
from functools import lru_cache
from typing import List, Literal, get_args

from pydantic import BaseModel, Field, field_validator

DEFAULT_MAX_CODE_BYTES = 1024 * 1024

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

LOG_LEVELS = get_args(LogLevel)


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    max_code_bytes: int = Field(DEFAULT_MAX_CODE_BYTES, gt=0)
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        """Accept any case and surrounding whitespace."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings() -> ServerSettings:
    """Build settings from CODESKETCH_* environment variables.

    Raises:
        pydantic.ValidationError: If a variable holds an unusable value
            (e.g. an unknown log level)
    """
    origins = [
        o.strip()
        for o in os.getenv("CODESKETCH_CORS_ORIGINS", "*").split(",")
        if o.strip()
    ]
    return ServerSettings(
        cors_origins=origins or ["*"],
        max_code_bytes=os.getenv("CODESKETCH_MAX_CODE_BYTES", DEFAULT_MAX_CODE_BYTES),
        log_level=os.getenv("CODESKETCH_LOG_LEVEL", "INFO"),
    )


@lru_cache(maxsize=1)
def get_settings() -> ServerSettings:
    """Return process-wide settings (cached after the first call)."""
    return load_settings()
