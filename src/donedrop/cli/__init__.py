"""
DoneDrop CLI entry point.
"""

import sys

import click

from donedrop.config.app import load_config

from .init import init
from .sort import sort_cmd
from .toggle import toggle
from .utils import setup_logging
from .watch import watch


@click.group()
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to custom configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """DoneDrop - sink completed tasks to the bottom of their list."""
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(config)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    ctx.obj["config_file"] = config

    log_settings = ctx.obj["config"].logging
    setup_logging(verbose=verbose, level=log_settings.level, log_file=log_settings.file)


# Register commands
cli.add_command(sort_cmd)
cli.add_command(watch)
cli.add_command(toggle)
cli.add_command(init)
