"""
Configuration package for DoneDrop.

Module structure:
- app.py: Main DoneDropConfig and load/save helpers
- logging.py: LoggingSettings
- sorting.py: SortSettings
- watch.py: WatchSettings
"""

from donedrop.config.app import (
    DoneDropConfig,
    apply_cli_overrides,
    generate_default_config,
    get_default_config_file,
    get_donedrop_home,
    load_config,
    load_yaml,
    save_config,
)
from donedrop.config.logging import LoggingSettings
from donedrop.config.sorting import SortSettings
from donedrop.config.watch import WatchSettings

__all__ = [
    "DoneDropConfig",
    "LoggingSettings",
    "SortSettings",
    "WatchSettings",
    "apply_cli_overrides",
    "generate_default_config",
    "get_default_config_file",
    "get_donedrop_home",
    "load_config",
    "load_yaml",
    "save_config",
]
