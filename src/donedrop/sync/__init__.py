"""Applying the task sorter to documents on disk."""

from donedrop.sync.documents import (
    DebouncedSorter,
    DocumentError,
    DocumentSorter,
    DoneDropError,
    FileWatcher,
)

__all__ = [
    "DebouncedSorter",
    "DocumentError",
    "DocumentSorter",
    "DoneDropError",
    "FileWatcher",
]
