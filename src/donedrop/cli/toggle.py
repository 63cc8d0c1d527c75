"""
Toggle command: check or uncheck one task, then re-sort its document.
"""

import sys

import click

from donedrop.config.app import DoneDropConfig
from donedrop.sync.documents import DebouncedSorter, DocumentSorter, DoneDropError
from donedrop.tasks.sorter import toggle_task


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("line", type=click.IntRange(min=1))
@click.option("--mark", default="x", show_default=True, help="Status character for completed")
@click.option("--no-sort", is_flag=True, help="Only flip the checkbox")
@click.pass_context
def toggle(ctx: click.Context, path: str, line: int, mark: str, no_sort: bool) -> None:
    """Flip the checkbox on LINE (1-indexed) of PATH and re-sort the document."""
    config: DoneDropConfig = ctx.obj["config"]
    document_sorter = DocumentSorter(config.sort)

    try:
        content = document_sorter.read(path)
        document_sorter.write(path, toggle_task(content, line, mark=mark))
    except (DoneDropError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Toggled {path}:{line}")
    if no_sort:
        return

    # Sort after the settle delay, the same path an editor checkbox click takes
    scheduler = DebouncedSorter(
        document_sorter,
        debounce_delay=config.watch.debounce_delay,
        toggle_settle_delay=config.watch.toggle_settle_delay,
    )
    scheduler.trigger_toggle(path)
    scheduler.join()
