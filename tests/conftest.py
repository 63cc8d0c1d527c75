"""Pytest configuration and shared fixtures for DoneDrop tests."""

import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def donedrop_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point DONEDROP_HOME at an empty directory so no user config is read."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("DONEDROP_HOME", str(home))
    return home
