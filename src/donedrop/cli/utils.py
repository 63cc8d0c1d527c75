"""
Shared utilities for CLI commands.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, level: str = "info", log_file: str | None = None) -> None:
    """
    Configure logging for CLI.

    Args:
        verbose: If True, enable DEBUG level logging regardless of level
        level: Configured log level name (debug, info, warning, error)
        log_file: Optional file to log to in addition to stderr
    """
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )
