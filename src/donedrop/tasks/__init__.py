"""Task block parsing and sorting."""

from donedrop.tasks.blocks import TASK_PATTERN, Block, build_tree, join_lines, split_lines
from donedrop.tasks.sorter import (
    compare_blocks,
    needs_sort,
    render,
    sort,
    sort_blocks,
    sort_level,
    toggle_task,
)

__all__ = [
    "TASK_PATTERN",
    "Block",
    "build_tree",
    "compare_blocks",
    "join_lines",
    "needs_sort",
    "render",
    "sort",
    "sort_blocks",
    "sort_level",
    "split_lines",
    "toggle_task",
]
