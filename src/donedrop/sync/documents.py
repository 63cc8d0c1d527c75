"""
Document sync module.

Applies the task sorter to documents on disk:
- DocumentSorter: Read, sort, write back only when the content changed
- DebouncedSorter: Coalesces rapid change notifications per document
- FileWatcher: Polls directories and reports modified documents
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterable
from pathlib import Path

from donedrop.config.sorting import SortSettings
from donedrop.tasks.sorter import sort

logger = logging.getLogger(__name__)


class DoneDropError(Exception):
    """Base error for document handling."""


class DocumentError(DoneDropError):
    """A document could not be read or written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class DocumentSorter:
    """
    Sorts task documents on disk.

    Files are read and written with newline translation disabled, so "\\r\\n"
    line endings reach the sorter and are written back untouched.
    """

    def __init__(self, settings: SortSettings | None = None) -> None:
        self.settings = settings or SortSettings()

    def read(self, path: Path | str) -> str:
        """Read a document's text.

        Raises:
            DocumentError: If the file is missing, unreadable, or not decodable
        """
        try:
            with open(path, encoding=self.settings.encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentError(path, f"cannot read: {e}") from e

    def write(self, path: Path | str, content: str) -> None:
        """Write a document's text.

        Raises:
            DocumentError: If the file cannot be written
        """
        try:
            with open(path, "w", encoding=self.settings.encoding, newline="") as f:
                f.write(content)
        except (OSError, UnicodeEncodeError) as e:
            raise DocumentError(path, f"cannot write: {e}") from e

    def sort_file(self, path: Path | str) -> bool:
        """
        Sort a document in place.

        Args:
            path: The document to sort

        Returns:
            True if the file was rewritten, False if it was already sorted

        Raises:
            DocumentError: If the file cannot be read or written
        """
        content = self.read(path)
        sorted_content = sort(content)

        if sorted_content == content:
            logger.debug(f"Already sorted: {path}")
            return False

        self.write(path, sorted_content)
        logger.info(f"Sorted tasks in {path}")
        return True

    def find_documents(self, paths: Iterable[Path | str]) -> list[Path]:
        """
        Expand paths into the documents they contain.

        Files are taken as given. Directories are searched recursively for
        files with a configured extension, skipping excluded directory names.

        Args:
            paths: Files and/or directories

        Returns:
            Document paths in a stable order, without duplicates
        """
        found: list[Path] = []
        seen: set[Path] = set()

        def add(candidate: Path) -> None:
            if candidate not in seen:
                seen.add(candidate)
                found.append(candidate)

        for raw in paths:
            path = Path(raw)
            if not path.is_dir():
                add(path)
                continue

            for root, dirs, files in os.walk(path):
                dirs[:] = sorted(d for d in dirs if d not in self.settings.exclude_dirs)
                for name in sorted(files):
                    if self.settings.matches(name):
                        add(Path(root) / name)

        return found


class DebouncedSorter:
    """
    Schedules document sorts behind a per-document debounce timer.

    Every trigger for a document replaces that document's pending timer, so
    a burst of changes produces a single sort once the document settles.
    All triggers share this one scheduler, which keeps a single authoritative
    sort-and-write per document change.
    """

    def __init__(
        self,
        document_sorter: DocumentSorter,
        debounce_delay: float = 1.0,
        toggle_settle_delay: float = 0.2,
    ) -> None:
        self.document_sorter = document_sorter
        self.debounce_delay = debounce_delay
        self.toggle_settle_delay = toggle_settle_delay
        self._timers: dict[Path, threading.Timer] = {}
        self._lock = threading.Lock()
        self._sort_lock = threading.Lock()

    @property
    def pending(self) -> list[Path]:
        """Documents with a scheduled sort."""
        with self._lock:
            return list(self._timers)

    def trigger(self, path: Path | str) -> None:
        """Sort a document after the debounce delay."""
        self._schedule(Path(path), self.debounce_delay)

    def trigger_toggle(self, path: Path | str) -> None:
        """Sort a document shortly after a checkbox toggle."""
        self._schedule(Path(path), self.toggle_settle_delay)

    def _schedule(self, path: Path, delay: float) -> None:
        timer = threading.Timer(delay, self._fire, args=(path,))
        timer.daemon = True
        with self._lock:
            previous = self._timers.get(path)
            if previous is not None:
                previous.cancel()
            self._timers[path] = timer
        timer.start()

    def _fire(self, path: Path) -> None:
        with self._lock:
            # A newer trigger replaced this timer after it started running
            if self._timers.get(path) is not threading.current_thread():
                return
        try:
            self._sort(path)
        finally:
            # Stay pending until the write lands so join() covers it
            with self._lock:
                if self._timers.get(path) is threading.current_thread():
                    del self._timers[path]

    def _sort(self, path: Path) -> bool:
        with self._sort_lock:
            try:
                return self.document_sorter.sort_file(path)
            except DoneDropError as e:
                logger.warning(f"Failed to sort {path}: {e}")
            except Exception:
                logger.exception(f"Unexpected error sorting {path}")
        return False

    def flush(self) -> list[Path]:
        """
        Run every pending sort now instead of waiting for its timer.

        Returns:
            Documents that were rewritten
        """
        with self._lock:
            timers = self._timers
            self._timers = {}
        for timer in timers.values():
            timer.cancel()
        return [path for path in timers if self._sort(path)]

    def join(self, timeout: float | None = None) -> None:
        """Wait for the currently scheduled sorts to run."""
        with self._lock:
            timers = list(self._timers.values())
        for timer in timers:
            timer.join(timeout)

    def stop(self) -> None:
        """Cancel all pending sorts."""
        with self._lock:
            timers = self._timers
            self._timers = {}
        for timer in timers.values():
            timer.cancel()


class FileWatcher:
    """
    Polls paths for new or modified documents and hands them to a scheduler.

    A document counts as changed when its (mtime_ns, size) signature differs
    from the previous poll. The sorter's own writes show up as changes too;
    re-sorting an already sorted document writes nothing, so they settle.
    """

    def __init__(
        self,
        paths: Iterable[Path | str],
        scheduler: DebouncedSorter,
        poll_interval: float = 0.5,
    ) -> None:
        self.paths = [Path(p) for p in paths]
        self.scheduler = scheduler
        self.poll_interval = poll_interval
        self._snapshot: dict[Path, tuple[int, int]] | None = None
        self._stop_event = threading.Event()

    def scan(self) -> dict[Path, tuple[int, int]]:
        """Collect the current signature of every watched document."""
        signatures: dict[Path, tuple[int, int]] = {}
        for path in self.scheduler.document_sorter.find_documents(self.paths):
            try:
                stat = path.stat()
            except OSError:
                # Deleted between listing and stat
                continue
            signatures[path] = (stat.st_mtime_ns, stat.st_size)
        return signatures

    def prime(self) -> None:
        """Record the current state without triggering any sorts."""
        self._snapshot = self.scan()
        logger.debug(f"Watching {len(self._snapshot)} documents")

    def poll(self) -> list[Path]:
        """
        Compare against the previous scan and trigger sorts for changes.

        Returns:
            Documents that changed since the previous poll
        """
        if self._snapshot is None:
            self.prime()
            return []

        current = self.scan()
        changed = [path for path, sig in current.items() if self._snapshot.get(path) != sig]
        self._snapshot = current

        for path in changed:
            logger.debug(f"Change detected: {path}")
            self.scheduler.trigger(path)
        return changed

    def run(self) -> None:
        """Poll until stop() is called."""
        if self._snapshot is None:
            self.prime()
        while not self._stop_event.wait(self.poll_interval):
            self.poll()

    def stop(self) -> None:
        """Stop the polling loop."""
        self._stop_event.set()
