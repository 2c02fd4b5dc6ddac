"""Mapping from markdown-it syntax nodes to ADF node types and marks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from md2adf.schemas import Attributes, Mark, MarkAttributes, MarkType, Node, NodeType

if TYPE_CHECKING:
    from markdown_it.tree import SyntaxTreeNode


EMPTY_TEXT_SUBSTITUTE = " "

_NODE_TYPES: dict[str, NodeType] = {
    "paragraph": NodeType.PARAGRAPH,
    "heading": NodeType.HEADING,
    "ordered_list": NodeType.ORDERED_LIST,
    "bullet_list": NodeType.BULLET_LIST,
    "list_item": NodeType.LIST_ITEM,
    "blockquote": NodeType.BLOCKQUOTE,
    "hr": NodeType.RULE,
    "fence": NodeType.CODE_BLOCK,
    "code_block": NodeType.CODE_BLOCK,
    "text": NodeType.TEXT,
    "softbreak": NodeType.TEXT,
    "hardbreak": NodeType.HARD_BREAK,
    "code_inline": NodeType.TEXT,
    "em": NodeType.TEXT,
    "strong": NodeType.TEXT,
    "s": NodeType.TEXT,
    "link": NodeType.TEXT,
    "image": NodeType.MEDIA,
    "html_block": NodeType.PARAGRAPH,
    "html_inline": NodeType.TEXT,
    "table": NodeType.TABLE,
    "tr": NodeType.TABLE_ROW,
    "th": NodeType.TABLE_HEADER,
    "td": NodeType.TABLE_CELL,
}

_MARK_TYPES: dict[str, MarkType] = {
    "code_inline": MarkType.CODE,
    "em": MarkType.EM,
    "strong": MarkType.STRONG,
    "s": MarkType.STRIKE,
    "link": MarkType.LINK,
}

# ADF allows only a link mark next to a code mark.
_CODE_COMPATIBLE = frozenset({MarkType.CODE, MarkType.LINK})


def adf_type_for(node: SyntaxTreeNode) -> NodeType:
    """Return the ADF node type for a markdown-it node, or ``NodeType.NONE``."""
    return _NODE_TYPES.get(node.type, NodeType.NONE)


def attributes_for(node: SyntaxTreeNode) -> Attributes | None:
    """Build type-specific attributes for a block node."""
    if node.type == "heading":
        return Attributes(level=int(node.tag[1:]))

    if node.type == "ordered_list":
        start = node.attrs.get("start", 1)
        if int(start) != 1:
            return Attributes(order=int(start))
        return None

    if node.type in {"fence", "code_block"}:
        language = code_language(node.info)
        return Attributes(language=language) if language else None

    return None


def code_language(info: str) -> str | None:
    """Return the language named by a fence info string."""
    words = info.strip().split()
    return words[0] if words else None


def block_node_for(node: SyntaxTreeNode) -> Node:
    """Create an empty ADF block node for a markdown-it block node."""
    return Node(type=adf_type_for(node), attrs=attributes_for(node))


def mark_for(node: SyntaxTreeNode) -> Mark | None:
    """Return the mark a styling node applies to its text, if any."""
    mark_type = _MARK_TYPES.get(node.type)
    if mark_type is None:
        return None
    if mark_type is MarkType.LINK:
        return link_mark(str(node.attrs.get("href", "")), node.attrs.get("title"))
    return Mark(type=mark_type)


def link_mark(href: str, title: object = None) -> Mark:
    return Mark(
        type=MarkType.LINK,
        attrs=MarkAttributes(href=href, title=str(title) if title else None),
    )


def compose_marks(active: Iterable[Mark], leaf: Mark | None = None) -> list[Mark]:
    """Merge enclosing marks with a leaf's own mark.

    The outermost mark of each type wins. When a code mark is present only a
    link mark may accompany it.
    """
    candidates = list(active)
    if leaf is not None:
        candidates.append(leaf)

    composed: list[Mark] = []
    seen: set[MarkType] = set()
    for mark in candidates:
        if mark.type in seen:
            continue
        seen.add(mark.type)
        composed.append(mark)

    if MarkType.CODE in seen:
        composed = [mark for mark in composed if mark.type in _CODE_COMPATIBLE]
    return composed


def text_node(text: str, marks: list[Mark] | None = None) -> Node:
    """Create a text leaf; empty text becomes a single space."""
    return Node(
        type=NodeType.TEXT,
        text=text or EMPTY_TEXT_SUBSTITUTE,
        marks=marks or None,
    )


def literal_text(node: SyntaxTreeNode) -> str:
    """Collect the plain text below a node, without markdown syntax."""
    if node.type in {"text", "code_inline"}:
        return node.content
    if node.type == "softbreak":
        return " "
    if node.type == "hardbreak":
        return "\n"
    if node.type == "image":
        return node.content
    if node.type == "html_inline":
        return ""
    return "".join(literal_text(child) for child in node.children)
