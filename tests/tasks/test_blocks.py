"""Tests for the block tree parser."""

import pytest

from donedrop.tasks.blocks import (
    TASK_PATTERN,
    Block,
    build_tree,
    indent_width,
    join_lines,
    split_lines,
)

pytestmark = pytest.mark.unit


def _flatten(blocks: list[Block]) -> list[str]:
    return [node.text for block in blocks for node in block.walk()]


# =============================================================================
# Task Pattern Tests
# =============================================================================


class TestTaskPattern:
    """Tests for the task regex pattern."""

    def test_matches_unchecked_with_dash(self) -> None:
        match = TASK_PATTERN.match("- [ ] Task item")
        assert match is not None
        indent, status = match.groups()
        assert indent == ""
        assert status == " "

    def test_matches_checked_with_asterisk(self) -> None:
        match = TASK_PATTERN.match("* [x] Done")
        assert match is not None
        assert match.group(2) == "x"

    def test_matches_indented(self) -> None:
        match = TASK_PATTERN.match("    - [X] Deep")
        assert match is not None
        assert match.group(1) == "    "
        assert match.group(2) == "X"

    def test_matches_any_status_character(self) -> None:
        for status in ["-", "/", ">", "?"]:
            match = TASK_PATTERN.match(f"- [{status}] Item")
            assert match is not None
            assert match.group(2) == status

    def test_matches_multiple_spaces_after_bullet(self) -> None:
        assert TASK_PATTERN.match("-   [ ] Spaced") is not None

    def test_matches_without_text(self) -> None:
        assert TASK_PATTERN.match("- [ ]") is not None

    def test_no_match_regular_list(self) -> None:
        assert TASK_PATTERN.match("- Regular item") is None

    def test_no_match_empty_brackets(self) -> None:
        assert TASK_PATTERN.match("- [] Empty") is None

    def test_no_match_two_character_status(self) -> None:
        assert TASK_PATTERN.match("- [  ] Two spaces") is None

    def test_no_match_without_space_after_bullet(self) -> None:
        assert TASK_PATTERN.match("-[ ] Tight") is None

    def test_no_match_other_bullets(self) -> None:
        assert TASK_PATTERN.match("+ [ ] Plus") is None
        assert TASK_PATTERN.match("1. [ ] Numbered") is None

    def test_no_match_unterminated_bracket(self) -> None:
        assert TASK_PATTERN.match("- [x") is None

    def test_no_match_mid_line(self) -> None:
        assert TASK_PATTERN.match("See - [ ] inline") is None


# =============================================================================
# Indentation Tests
# =============================================================================


class TestIndentWidth:
    """Tests for indent_width()."""

    def test_no_indent(self) -> None:
        assert indent_width("- [ ] a") == 0

    def test_spaces(self) -> None:
        assert indent_width("  - [ ] a") == 2

    def test_tab_counts_four(self) -> None:
        assert indent_width("\t- [ ] a") == 4

    def test_mixed_tabs_and_spaces(self) -> None:
        assert indent_width("\t  - [ ] a") == 6
        assert indent_width(" \t- [ ] a") == 5

    def test_empty_line(self) -> None:
        assert indent_width("") == 0

    def test_whitespace_only_line(self) -> None:
        assert indent_width("   ") == 3


# =============================================================================
# Block Tests
# =============================================================================


class TestBlock:
    """Tests for the Block dataclass."""

    def test_incomplete_task(self) -> None:
        block = Block("- [ ] Write tests")
        assert block.is_task is True
        assert block.is_completed is False

    def test_completed_task(self) -> None:
        block = Block("- [x] Write tests")
        assert block.is_task is True
        assert block.is_completed is True

    def test_any_non_space_status_is_completed(self) -> None:
        assert Block("- [X] a").is_completed is True
        assert Block("* [-] a").is_completed is True

    def test_non_task_line(self) -> None:
        block = Block("Just some notes")
        assert block.is_task is False
        assert block.is_completed is False

    def test_blank_line(self) -> None:
        block = Block("")
        assert block.is_task is False
        assert block.indent_width == 0

    def test_text_kept_verbatim(self) -> None:
        text = "\t- [x]  trailing   "
        block = Block(text, source_index=3)
        assert block.text == text
        assert block.source_index == 3
        assert block.indent_width == 4

    def test_defaults(self) -> None:
        block = Block("- [ ] a")
        assert block.source_index == 0
        assert block.children == []

    def test_walk_is_pre_order(self) -> None:
        grandchild = Block("    - c")
        child = Block("  - b", children=[grandchild])
        sibling = Block("  - d")
        parent = Block("- a", children=[child, sibling])
        assert [b.text for b in parent.walk()] == ["- a", "  - b", "    - c", "  - d"]

    def test_walk_deep_chain(self) -> None:
        root = Block("- [ ] 0")
        current = root
        for depth in range(1, 2000):
            child = Block(" " * depth + f"- [ ] {depth}")
            current.children.append(child)
            current = child
        assert root.line_count == 2000
        assert [b.text for b in root.walk()][-1] == " " * 1999 + "- [ ] 1999"

    def test_line_count(self) -> None:
        child = Block("  - b", children=[Block("    - c")])
        parent = Block("- a", children=[child])
        assert parent.line_count == 3
        assert Block("x").line_count == 1

    def test_to_dict_with_children(self) -> None:
        parent = Block("- [x] Parent", source_index=1, children=[Block("  - [ ] Child", 2)])
        result = parent.to_dict()
        assert result["text"] == "- [x] Parent"
        assert result["source_index"] == 1
        assert result["is_task"] is True
        assert result["is_completed"] is True
        assert len(result["children"]) == 1
        assert result["children"][0]["indent_width"] == 2
        assert result["children"][0]["is_completed"] is False


# =============================================================================
# Line Splitting Tests
# =============================================================================


class TestSplitLines:
    """Tests for split_lines() and join_lines()."""

    def test_split_lf(self) -> None:
        assert split_lines("a\nb") == (["a", "b"], ["\n"])

    def test_split_crlf_and_mixed(self) -> None:
        assert split_lines("a\r\nb\nc") == (["a", "b", "c"], ["\r\n", "\n"])

    def test_trailing_newline_gives_empty_last_line(self) -> None:
        assert split_lines("a\n") == (["a", ""], ["\n"])

    def test_blank_lines_kept(self) -> None:
        assert split_lines("a\n\n\nb") == (["a", "", "", "b"], ["\n", "\n", "\n"])

    def test_lone_carriage_return_stays_in_line(self) -> None:
        assert split_lines("a\rb") == (["a\rb"], [])

    def test_single_line(self) -> None:
        assert split_lines("only") == (["only"], [])

    def test_join_defaults_to_lf(self) -> None:
        assert join_lines(["a", "b", ""]) == "a\nb\n"

    def test_join_with_terminators(self) -> None:
        assert join_lines(["a", "b", "c"], ["\r\n", "\n"]) == "a\r\nb\nc"

    def test_join_inverts_split(self) -> None:
        for text in ["", "a", "a\r\n", "a\n\r\nb\r\n\n", "\n\n"]:
            lines, terminators = split_lines(text)
            assert join_lines(lines, terminators) == text


# =============================================================================
# Tree Builder Tests
# =============================================================================


class TestBuildTree:
    """Tests for build_tree()."""

    def test_empty(self) -> None:
        assert build_tree([]) == []

    def test_flat_lines_are_roots(self) -> None:
        roots = build_tree(["- [ ] a", "- [x] b", "text"])
        assert [b.text for b in roots] == ["- [ ] a", "- [x] b", "text"]
        assert all(not b.children for b in roots)

    def test_source_index_assigned(self) -> None:
        roots = build_tree(["a", "  b", "c"])
        assert roots[0].source_index == 0
        assert roots[0].children[0].source_index == 1
        assert roots[1].source_index == 2

    def test_nested_children(self) -> None:
        roots = build_tree(["- [ ] a", "  - [x] a1", "  - [ ] a2", "- [x] b"])
        assert len(roots) == 2
        assert [c.text for c in roots[0].children] == ["  - [x] a1", "  - [ ] a2"]
        assert roots[1].children == []

    def test_deep_nesting(self) -> None:
        roots = build_tree(["- a", "  - b", "    - c", "      - d"])
        assert len(roots) == 1
        assert roots[0].children[0].children[0].children[0].text == "      - d"

    def test_dedent_to_intermediate_level(self) -> None:
        # "  c" is shallower than "    b" but deeper than "a"
        roots = build_tree(["a", "    b", "  c"])
        assert len(roots) == 1
        assert [c.text for c in roots[0].children] == ["    b", "  c"]

    def test_equal_indent_is_sibling_not_child(self) -> None:
        roots = build_tree(["  - a", "  - b"])
        assert len(roots) == 2

    def test_indented_first_line_is_root(self) -> None:
        roots = build_tree(["    - [x] a", "- [ ] b", "  - [ ] c"])
        assert [b.text for b in roots] == ["    - [x] a", "- [ ] b"]
        assert roots[1].children[0].text == "  - [ ] c"

    def test_tabs_and_spaces_compare_by_width(self) -> None:
        roots = build_tree(["- a", "\t- b", "    - c", "  - d"])
        assert len(roots) == 1
        # "\t" and four spaces are the same width; two spaces is shallower
        assert [c.text for c in roots[0].children] == ["\t- b", "    - c", "  - d"]

    def test_blank_line_becomes_root_block(self) -> None:
        roots = build_tree(["- a", "  - b", "", "  - c"])
        assert [b.text for b in roots] == ["- a", ""]
        assert roots[1].is_task is False
        assert [c.text for c in roots[1].children] == ["  - c"]

    def test_pre_order_reconstructs_lines(self) -> None:
        lines = [
            "# Project",
            "- [x] one",
            "\t- [ ] one.a",
            "\t\tdetails",
            "  - [x] one.b",
            "",
            "   stray",
            "- [ ] two",
            "",
        ]
        assert _flatten(build_tree(lines)) == lines
