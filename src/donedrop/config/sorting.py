"""
Sorting configuration module.

Contains the Pydantic config model for which documents get sorted:
- SortSettings: File extensions, excluded directories, text encoding
"""

from pydantic import BaseModel, Field, field_validator

__all__ = ["SortSettings"]


class SortSettings(BaseModel):
    """Document selection and decoding settings."""

    extensions: list[str] = Field(
        default_factory=lambda: [".md"],
        description="File extensions treated as task documents",
    )
    exclude_dirs: list[str] = Field(
        default_factory=lambda: [".git", ".obsidian", "node_modules"],
        description="Directory names skipped when searching for documents",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding used to read and write documents",
    )

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Lowercase extensions and ensure a leading dot."""
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                raise ValueError("Extensions must not be empty")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    def matches(self, name: str) -> bool:
        """Check whether a file name has one of the configured extensions."""
        return any(name.lower().endswith(ext) for ext in self.extensions)
