"""
Task sorter module.

Sinks completed tasks to the bottom of their sibling group:
- sort_level: Reorder one group of sibling Blocks
- sort_blocks: Apply sort_level to every level of a forest
- render: Flatten a forest back into text
- sort: Text in, sorted text out
- toggle_task: Flip one task's checkbox

Example:
    >>> sort("- [x] done\\n- [ ] todo")
    '- [ ] todo\\n- [x] done'
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from donedrop.tasks.blocks import TASK_PATTERN, Block, build_tree, join_lines, split_lines

logger = logging.getLogger(__name__)


def compare_blocks(a: Block, b: Block) -> int:
    """Order two sibling blocks.

    Returns:
        -1 if a belongs before b, 1 if after, 0 if their order must be kept
    """
    if not a.is_task or not b.is_task:
        return 0
    if a.is_completed == b.is_completed:
        return 0
    return 1 if a.is_completed else -1


def sort_level(siblings: Sequence[Block]) -> list[Block]:
    """
    Stable-sort one sibling group so completed tasks follow incomplete ones.

    Non-task blocks compare equal to everything, so they keep their slots in
    the group. The tasks are stably ordered by completion state and placed
    back into the slots tasks occupied. Children travel with their parent.

    Args:
        siblings: Blocks sharing the same parent (or all roots)

    Returns:
        A new list holding a permutation of siblings
    """
    tasks = sorted((block for block in siblings if block.is_task), key=lambda b: b.is_completed)
    if not tasks:
        return list(siblings)

    ordered = iter(tasks)
    return [next(ordered) if block.is_task else block for block in siblings]


def sort_blocks(blocks: list[Block]) -> list[Block]:
    """Sort every level of the forest in place.

    Args:
        blocks: Sibling group to sort; every descendant group is sorted too

    Returns:
        The same list, reordered
    """
    # Explicit stack so nesting depth is not bounded by the recursion limit
    groups = [blocks]
    while groups:
        group = groups.pop()
        group[:] = sort_level(group)
        groups.extend(block.children for block in group if block.children)
    return blocks


def iter_lines(blocks: Sequence[Block]) -> Iterator[str]:
    """Yield line texts of a forest in pre-order."""
    for block in blocks:
        for node in block.walk():
            yield node.text


def render(blocks: Sequence[Block], terminators: Sequence[str] | None = None) -> str:
    """
    Serialize a forest back into text.

    Exactly one line break goes between adjacent lines, none at the start or
    end. The break after the k-th output line is terminators[k] when given,
    which keeps the document's original line-ending layout.

    Args:
        blocks: Root blocks to render
        terminators: Breaks between lines, as returned by split_lines

    Returns:
        The rendered text
    """
    return join_lines(list(iter_lines(blocks)), terminators)


def sort(text: str) -> str:
    """
    Sort the tasks of a document, completed tasks last in each group.

    Args:
        text: Full document content

    Returns:
        The sorted document; identical to text when nothing needs to move
    """
    if not text:
        return ""

    lines, terminators = split_lines(text)
    roots = build_tree(lines)
    sort_blocks(roots)
    return render(roots, terminators)


def needs_sort(text: str) -> bool:
    """Check whether sorting would change the document."""
    return sort(text) != text


def toggle_task(text: str, line_number: int, mark: str = "x") -> str:
    """
    Flip the checkbox of one task line.

    An incomplete task gets `mark`; any completed task goes back to a space.
    Only the status character changes; the document is not re-sorted.

    Args:
        text: Full document content
        line_number: 1-indexed line to toggle
        mark: Status character for completing a task

    Returns:
        The document with that line's checkbox flipped

    Raises:
        ValueError: If the line does not exist, is not a task, or mark is
            not a single non-whitespace character
    """
    if len(mark) != 1 or mark.isspace():
        raise ValueError(f"Mark must be a single non-whitespace character, got {mark!r}")

    lines, terminators = split_lines(text)
    if not 1 <= line_number <= len(lines):
        raise ValueError(f"Line {line_number} out of range (document has {len(lines)} lines)")

    line = lines[line_number - 1]
    match = TASK_PATTERN.match(line)
    if not match:
        raise ValueError(f"Line {line_number} is not a task: {line!r}")

    status = " " if match.group(2) != " " else mark
    start = match.start(2)
    lines[line_number - 1] = line[:start] + status + line[start + 1 :]
    return join_lines(lines, terminators)
