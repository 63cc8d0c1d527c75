"""
Configuration management for DoneDrop.

Provides YAML-based configuration with CLI overrides,
configuration hierarchy (CLI > YAML > Defaults), and validation.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from donedrop.config.logging import LoggingSettings
from donedrop.config.sorting import SortSettings
from donedrop.config.watch import WatchSettings


class DoneDropConfig(BaseModel):
    """
    Main configuration for DoneDrop.

    Configuration is loaded with the following priority:
    1. CLI arguments (highest)
    2. YAML file (~/.donedrop/config.yaml, or $DONEDROP_HOME/config.yaml)
    3. Defaults (lowest)
    """

    sort: SortSettings = Field(
        default_factory=SortSettings,
        description="Which documents are sorted and how they are decoded",
    )
    watch: WatchSettings = Field(
        default_factory=WatchSettings,
        description="Watcher and debounce timing",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )


def get_donedrop_home() -> Path:
    """Get donedrop home directory, respecting DONEDROP_HOME env var.

    Returns:
        Path to donedrop home (~/.donedrop by default, or DONEDROP_HOME if set)
    """
    donedrop_home = os.environ.get("DONEDROP_HOME")
    if donedrop_home:
        return Path(donedrop_home)
    return Path.home() / ".donedrop"


def get_default_config_file() -> str:
    """Get the default config file path inside the donedrop home."""
    return str(get_donedrop_home() / "config.yaml")


def load_yaml(config_file: str) -> dict[str, Any]:
    """
    Load YAML or JSON configuration file.

    Args:
        config_file: Path to YAML or JSON configuration file

    Returns:
        Dictionary with parsed YAML/JSON content

    Raises:
        ValueError: If YAML/JSON is invalid or file format is wrong
    """
    config_path = Path(config_file).expanduser()

    if not config_path.exists():
        return {}

    # Validate file extension matches format
    file_ext = config_path.suffix.lower()
    if file_ext not in [".yaml", ".yml", ".json"]:
        raise ValueError(
            f"Config file must have .yaml, .yml, or .json extension, got: {file_ext}\n"
            f"File: {config_path}"
        )

    try:
        with open(config_path, encoding="utf-8") as f:
            content = f.read()

        if file_ext == ".json":
            return json.loads(content) if content.strip() else {}

        data = yaml.safe_load(content)
        return data if data is not None else {}

    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}") from e


def apply_cli_overrides(
    config_dict: dict[str, Any],
    cli_overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Apply CLI argument overrides to config dictionary.

    Args:
        config_dict: Configuration dictionary
        cli_overrides: Dictionary of CLI overrides; dotted keys like
            "watch.debounce_delay" address nested settings

    Returns:
        Configuration dictionary with CLI overrides applied
    """
    if cli_overrides is None:
        return config_dict

    for key, value in cli_overrides.items():
        if value is None:
            continue
        if "." in key:
            parts = key.split(".")
            current = config_dict
            for part in parts[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]
            current[parts[-1]] = value
        else:
            config_dict[key] = value

    return config_dict


def generate_default_config(config_file: str) -> None:
    """
    Generate default configuration file from Pydantic model defaults.

    Args:
        config_file: Path where to create the config file
    """
    save_config(DoneDropConfig(), config_file)


def load_config(
    config_file: str | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> DoneDropConfig:
    """
    Load configuration with hierarchy: CLI > YAML > Defaults.

    Args:
        config_file: Path to YAML config file (default: ~/.donedrop/config.yaml)
        cli_overrides: Dictionary of CLI argument overrides

    Returns:
        Validated DoneDropConfig instance

    Raises:
        ValueError: If configuration is invalid
    """
    if config_file is None:
        config_file = get_default_config_file()

    config_dict = load_yaml(config_file)
    config_dict = apply_cli_overrides(config_dict, cli_overrides)

    try:
        return DoneDropConfig(**config_dict)
    except Exception as e:
        raise ValueError(
            f"Configuration validation failed: {e}\n"
            f"Please check your configuration file at {config_file}"
        ) from e


def save_config(config: DoneDropConfig, config_file: str | None = None) -> None:
    """
    Save configuration to YAML file.

    Args:
        config: DoneDropConfig instance to save
        config_file: Path to YAML config file (default: ~/.donedrop/config.yaml)

    Raises:
        OSError: If file operations fail
    """
    if config_file is None:
        config_file = get_default_config_file()

    config_path = Path(config_file).expanduser()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(mode="python", exclude_none=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            config_dict, f, default_flow_style=False, sort_keys=False, allow_unicode=True
        )
