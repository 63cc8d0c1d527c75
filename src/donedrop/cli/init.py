"""
Configuration initialization command.
"""

from pathlib import Path

import click

from donedrop.config.app import generate_default_config, get_default_config_file


@click.command()
@click.option("--path", "config_file", help="Where to write the config file")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init(config_file: str | None, force: bool) -> None:
    """Write a default configuration file."""
    if config_file is None:
        config_file = get_default_config_file()

    config_path = Path(config_file).expanduser()
    if config_path.exists() and not force:
        click.echo(f"Config already exists: {config_path} (use --force to overwrite)")
        return

    generate_default_config(config_file)
    click.echo(f"Wrote default config to {config_path}")
