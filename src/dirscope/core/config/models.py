"""Configuration models for dirscope."""

import logging
import os
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_BASE_DIRECTORY = "/dp-apps"


class BrowserConfig(BaseModel):
    """Process-wide configuration for the directory browser.

    Loaded once at startup; the base directory is never configurable per
    request.

    Attributes:
        base_directory: Root all navigation is confined to. "~" is expanded
            and the result normalized to an absolute path.
        host: Interface the HTTP server binds to.
        port: TCP port the HTTP server listens on.
        log_level: Root logger level.

    Example:
        >>> config = BrowserConfig(base_directory="/srv/apps/")
        >>> config.base_directory
        '/srv/apps'

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_directory: str = Field(
        default=DEFAULT_BASE_DIRECTORY,
        description="Directory all browsing is confined to",
    )
    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Listen port")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root logger level",
    )

    @field_validator("base_directory", mode="before")
    @classmethod
    def normalize_base_directory(cls, v: Any) -> str:
        """Expand "~" and normalize; relative paths are rejected."""
        if v is None or str(v).strip() == "":
            raise ValueError("base_directory must not be empty")
        expanded = os.path.expanduser(os.fspath(v))
        if not os.path.isabs(expanded):
            raise ValueError(f"base_directory must be an absolute path, got {v!r}")
        return os.path.normpath(expanded)

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: Any) -> Any:
        """Accept log levels in any case ("debug", "Info")."""
        if isinstance(v, str):
            return v.upper()
        return v
