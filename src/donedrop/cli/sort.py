"""
Sort command: sink completed tasks in files or stdin.
"""

import difflib
import logging
import sys

import click

from donedrop.config.app import DoneDropConfig
from donedrop.sync.documents import DocumentSorter, DoneDropError
from donedrop.tasks.blocks import split_lines
from donedrop.tasks.sorter import sort

logger = logging.getLogger(__name__)


def _diff_lines(text: str) -> list[str]:
    """Split text the way the sorter does, keeping each line's terminator."""
    lines, terminators = split_lines(text)
    return [line + end for line, end in zip(lines, [*terminators, ""]) if line + end]


def _unified_diff(path: str, before: str, after: str) -> str:
    return "".join(
        difflib.unified_diff(
            _diff_lines(before),
            _diff_lines(after),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
        )
    )


@click.command("sort")
@click.argument("paths", nargs=-1, type=click.Path(exists=True))
@click.option("--check", is_flag=True, help="Don't write; exit 1 if any file would change")
@click.option("--diff", "show_diff", is_flag=True, help="Print a diff instead of writing")
@click.pass_context
def sort_cmd(ctx: click.Context, paths: tuple[str, ...], check: bool, show_diff: bool) -> None:
    """Sort tasks in PATHS (files or directories), or stdin to stdout."""
    config: DoneDropConfig = ctx.obj["config"]

    if not paths:
        # Binary streams keep "\r\n" intact
        encoding = config.sort.encoding
        try:
            content = click.get_binary_stream("stdin").read().decode(encoding)
        except UnicodeDecodeError as e:
            click.echo(f"Error: stdin is not valid {encoding}: {e}", err=True)
            sys.exit(1)
        click.echo(sort(content).encode(encoding), nl=False)
        return

    sorter = DocumentSorter(config.sort)
    documents = sorter.find_documents(paths)
    changed: list[str] = []
    failed = False

    for document in documents:
        try:
            if check or show_diff:
                before = sorter.read(document)
                after = sort(before)
                if after != before:
                    changed.append(str(document))
                    if show_diff:
                        click.echo(_unified_diff(str(document), before, after), nl=False)
            elif sorter.sort_file(document):
                changed.append(str(document))
        except DoneDropError as e:
            click.echo(f"Error: {e}", err=True)
            failed = True

    if check:
        for name in changed:
            click.echo(f"Would sort {name}")
    elif not show_diff:
        for name in changed:
            click.echo(f"Sorted {name}")

    logger.debug(f"{len(changed)} of {len(documents)} documents need sorting")

    if failed or (check and changed):
        sys.exit(1)
