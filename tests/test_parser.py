"""Tests for markdown parser configuration."""

from __future__ import annotations

from md2adf.parser import get_parser, parse_attributes, parse_markdown


class TestParseMarkdown:
    """Tests for parse_markdown function."""

    def test_returns_root_node(self) -> None:
        tree = parse_markdown("hello")

        assert tree.type == "root"
        assert [child.type for child in tree.children] == ["paragraph"]

    def test_gfm_extensions_enabled(self) -> None:
        tree = parse_markdown("~~x~~\n\n| a |\n| - |\n| b |\n")

        assert [child.type for child in tree.children] == ["paragraph", "table"]
        inline = tree.children[0].children[0]
        assert inline.children[0].type == "s"

    def test_parser_is_shared(self) -> None:
        assert get_parser() is get_parser()


class TestHeadingAttributes:
    """Tests for trailing heading attribute syntax."""

    def test_attributes_move_to_heading(self) -> None:
        heading = parse_markdown("## Setup {#setup .wide data-x=1}\n").children[0]

        assert heading.attrs == {"id": "setup", "class": "wide", "data-x": "1"}
        assert heading.children[0].children[0].content == "Setup"

    def test_plain_braces_are_kept(self) -> None:
        """Braces that are not attribute syntax stay in the heading text."""
        heading = parse_markdown("# Use {braces} here\n").children[0]

        assert heading.children[0].children[0].content == "Use {braces} here"
        assert heading.attrs == {}

    def test_attributes_only(self) -> None:
        heading = parse_markdown("# {#anchor}\n").children[0]

        assert heading.attrs == {"id": "anchor"}
        assert heading.children[0].children == []

    def test_escaped_brace_is_heading_text(self) -> None:
        """A backslash before the brace keeps the block as literal text."""
        heading = parse_markdown("# Title \\{#id}\n").children[0]

        text = "".join(child.content for child in heading.children[0].children)
        assert text == "Title {#id}"
        assert heading.attrs == {}


class TestParseAttributes:
    """Tests for parse_attributes function."""

    def test_mixed_attributes(self) -> None:
        assert parse_attributes('#id .a .b key="two words"') == [
            ("id", "id"),
            ("class", "a"),
            ("class", "b"),
            ("key", "two words"),
        ]
