"""
Watch configuration module.

Contains timing settings for the file watcher and the debounced sorter.
"""

from pydantic import BaseModel, Field, field_validator

__all__ = ["WatchSettings"]


class WatchSettings(BaseModel):
    """Timing configuration for watching and re-sorting documents."""

    debounce_delay: float = Field(
        default=1.0,
        description="Seconds to wait after the last change before sorting a document",
    )
    toggle_settle_delay: float = Field(
        default=0.2,
        description="Seconds to wait after a checkbox toggle so the toggle lands first",
    )
    poll_interval: float = Field(
        default=0.5,
        description="Seconds between file system polls",
    )

    @field_validator("debounce_delay", "toggle_settle_delay", "poll_interval")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate value is positive."""
        if v <= 0:
            raise ValueError("Value must be positive")
        return v
