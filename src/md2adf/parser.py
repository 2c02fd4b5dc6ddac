"""Markdown parsing using markdown-it-py.

Configures markdown-it with:
- CommonMark base
- GFM tables, strikethrough and autolinked URLs
- Block attributes (``{#id}`` on the line above a block) and inline
  attributes after links, images and code spans
- Trailing heading attributes (``# Title {#id .class}``)
"""

from __future__ import annotations

import re

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.attrs import attrs_block_plugin, attrs_plugin

_ATTRIBUTE = r"(?:[#.][\w:-]+|[\w:-]+=(?:\"[^\"]*\"|'[^']*'|[^\s}]+))"
_HEADING_ATTRS_RE = re.compile(rf"\s*\{{\s*({_ATTRIBUTE}(?:\s+{_ATTRIBUTE})*)\s*\}}\s*$")
_ATTRIBUTE_RE = re.compile(_ATTRIBUTE)


def create_parser() -> MarkdownIt:
    """Create configured markdown-it parser."""
    md = MarkdownIt("commonmark", {"linkify": True})
    md.enable(["table", "strikethrough", "linkify"])
    attrs_plugin(md)
    attrs_block_plugin(md)
    heading_attrs_plugin(md)
    return md


# Singleton parser instance; markdown-it keeps no state between parses.
_parser: MarkdownIt | None = None


def get_parser() -> MarkdownIt:
    """Get or create the singleton parser instance."""
    global _parser
    if _parser is None:
        _parser = create_parser()
    return _parser


def parse_markdown(text: str) -> SyntaxTreeNode:
    """Parse markdown text into AST.

    Args:
        text: Markdown text to parse

    Returns:
        Root SyntaxTreeNode of the AST
    """
    parser = get_parser()
    tokens = parser.parse(text)
    return SyntaxTreeNode(tokens)


def heading_attrs_plugin(md: MarkdownIt) -> None:
    """Move a trailing ``{...}`` attribute block from heading text onto the heading."""
    md.core.ruler.push("heading_attrs", _heading_attrs_rule)


def _heading_attrs_rule(state: StateCore) -> None:
    tokens = state.tokens
    for index, token in enumerate(tokens[:-1]):
        if token.type != "heading_open":
            continue
        inline = tokens[index + 1]
        if inline.type != "inline" or not inline.children:
            continue

        children = inline.children
        start = len(children)
        while start > 0 and children[start - 1].type == "text":
            start -= 1
        if start == len(children):
            continue

        trailing = "".join(child.content for child in children[start:])
        match = _HEADING_ATTRS_RE.search(trailing)
        if not match or _brace_is_escaped(inline.content):
            continue

        for key, value in parse_attributes(match.group(1)):
            if key == "class":
                token.attrJoin("class", value)
            else:
                token.attrSet(key, value)

        remaining = trailing[: match.start()]
        merged = children[start]
        merged.content = remaining
        inline.children = children[:start] + ([merged] if remaining else [])
        inline.content = _HEADING_ATTRS_RE.sub("", inline.content)


def _brace_is_escaped(source: str) -> bool:
    # Inline content is the raw heading source, so escapes are still visible.
    brace = source.rfind("{")
    return brace > 0 and source[brace - 1] == "\\"


def parse_attributes(source: str) -> list[tuple[str, str]]:
    """Parse ``#id .class key=value`` attribute syntax into pairs."""
    pairs: list[tuple[str, str]] = []
    for item in _ATTRIBUTE_RE.findall(source):
        if item.startswith("#"):
            pairs.append(("id", item[1:]))
        elif item.startswith("."):
            pairs.append(("class", item[1:]))
        else:
            key, _, value = item.partition("=")
            pairs.append((key, value.strip("\"'")))
    return pairs
