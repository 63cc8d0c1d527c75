"""
Watch command: keep documents sorted while they are edited.
"""

import logging

import click

from donedrop.config.app import load_config
from donedrop.sync.documents import DebouncedSorter, DocumentSorter, FileWatcher

logger = logging.getLogger(__name__)


@click.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True))
@click.option("--debounce", type=float, help="Seconds to wait after the last change")
@click.option("--interval", type=float, help="Seconds between polls")
@click.pass_context
def watch(
    ctx: click.Context,
    paths: tuple[str, ...],
    debounce: float | None,
    interval: float | None,
) -> None:
    """Watch PATHS (default: current directory) and sort documents as they change."""
    try:
        config = load_config(
            ctx.obj["config_file"],
            cli_overrides={
                "watch.debounce_delay": debounce,
                "watch.poll_interval": interval,
            },
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    watch_settings = config.watch

    scheduler = DebouncedSorter(
        DocumentSorter(config.sort),
        debounce_delay=watch_settings.debounce_delay,
        toggle_settle_delay=watch_settings.toggle_settle_delay,
    )
    watcher = FileWatcher(paths or ["."], scheduler, poll_interval=watch_settings.poll_interval)

    click.echo(f"Watching {', '.join(paths or ['.'])} (Ctrl+C to stop)")
    try:
        watcher.run()
    except KeyboardInterrupt:
        logger.debug("Interrupted, flushing pending sorts")
    finally:
        watcher.stop()
        scheduler.flush()
