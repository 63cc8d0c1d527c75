"""
Block tree module.

Parses plain-text task documents into an indentation tree. Includes:
- TASK_PATTERN: Checkbox task line detection (- [ ], * [x], ...)
- Block: One source line plus the lines nested beneath it
- split_lines/join_lines: Text to lines and back, keeping line endings
- build_tree: Lines to a forest of Blocks
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

# Matches: leading whitespace, bullet (- or *), whitespace, [<status>]
# Groups: (indent)(status)
# A single space status means incomplete; any other character means completed.
TASK_PATTERN = re.compile(r"^(\s*)[-*]\s+\[(.)\]")

# Leading whitespace of a line (used for indent width)
INDENT_PATTERN = re.compile(r"^\s*")

# Line terminators: bare LF or CR-prefixed LF
LINE_BREAK_PATTERN = re.compile(r"(\r?\n)")

# Width contributed by a tab character; every other whitespace character counts 1
TAB_WIDTH = 4


def indent_width(line: str) -> int:
    """Compute the indentation width of a line.

    Args:
        line: A single line without its terminator

    Returns:
        Sum of the leading whitespace widths (tab = 4, anything else = 1)
    """
    indent = INDENT_PATTERN.match(line).group(0)  # type: ignore[union-attr]
    return sum(TAB_WIDTH if char == "\t" else 1 for char in indent)


@dataclass
class Block:
    """A single source line and the more deeply indented lines under it.

    Attributes:
        text: The verbatim line content, without its line terminator
        source_index: 0-indexed line number in the original document
        indent_width: Leading whitespace width (tab = 4, other whitespace = 1)
        is_task: True if the line is a checkbox task (- [ ] / * [x] ...)
        is_completed: True if a task's status character is not a space
        children: Nested blocks, in document order
    """

    text: str
    source_index: int = 0
    indent_width: int = field(init=False)
    is_task: bool = field(init=False)
    is_completed: bool = field(init=False)
    children: list[Block] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.indent_width = indent_width(self.text)
        match = TASK_PATTERN.match(self.text)
        self.is_task = match is not None
        self.is_completed = match is not None and match.group(2) != " "

    def walk(self) -> Iterator[Block]:
        """Iterate over this block and all descendants in pre-order."""
        stack = [self]
        while stack:
            block = stack.pop()
            yield block
            stack.extend(reversed(block.children))

    @property
    def line_count(self) -> int:
        """Number of lines in this block's subtree, including itself."""
        return sum(1 for _ in self.walk())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "text": self.text,
            "source_index": self.source_index,
            "indent_width": self.indent_width,
            "is_task": self.is_task,
            "is_completed": self.is_completed,
            "children": [child.to_dict() for child in self.children],
        }


def split_lines(text: str) -> tuple[list[str], list[str]]:
    """Split text into lines, keeping the terminators that separated them.

    Both "\\n" and "\\r\\n" end a line. A lone "\\r" stays part of the line text.

    Args:
        text: The full document

    Returns:
        Tuple of (lines, terminators) where terminators[i] is the break
        that followed lines[i]; len(terminators) == len(lines) - 1
    """
    parts = LINE_BREAK_PATTERN.split(text)
    return parts[0::2], parts[1::2]


def join_lines(lines: Sequence[str], terminators: Sequence[str] | None = None) -> str:
    """Join lines with the given terminators; the inverse of split_lines.

    Args:
        lines: Line texts in output order
        terminators: Breaks between lines; "\\n" everywhere when omitted

    Returns:
        The joined text, with no break before the first or after the last line
    """
    if terminators is None:
        return "\n".join(lines)

    parts: list[str] = []
    for index, line in enumerate(lines):
        if index:
            parts.append(terminators[index - 1])
        parts.append(line)
    return "".join(parts)


def build_tree(lines: Sequence[str]) -> list[Block]:
    """
    Build a forest of Blocks from lines based on indentation.

    A line becomes a child of the nearest preceding line with a strictly
    smaller indent width. Lines with no such predecessor are roots, even if
    they are indented.

    Args:
        lines: Document lines in order, without terminators

    Returns:
        List of root Blocks with nested children
    """
    roots: list[Block] = []
    stack: list[tuple[Block, int]] = []  # Current ancestor chain

    for index, line in enumerate(lines):
        block = Block(line, source_index=index)
        width = block.indent_width

        # Nothing at or deeper than this indentation can be its parent
        while stack and stack[-1][1] >= width:
            stack.pop()

        if stack:
            stack[-1][0].children.append(block)
        else:
            roots.append(block)

        stack.append((block, width))

    logger.debug(f"Built {len(roots)} root blocks from {len(lines)} lines")
    return roots
