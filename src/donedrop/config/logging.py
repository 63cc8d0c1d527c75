"""
Logging configuration module.

Contains logging-related Pydantic config models:
- LoggingSettings: Log level and optional log file path
"""

from typing import Literal

from pydantic import BaseModel, Field

__all__ = ["LoggingSettings"]


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["debug", "info", "warning", "error"] = Field(
        default="info",
        description="Log level",
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path (e.g. ~/.donedrop/logs/donedrop.log)",
    )
