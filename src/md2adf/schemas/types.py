"""ADF node, mark, and layout identifiers."""

from __future__ import annotations

from enum import Enum


class NodeType(str, Enum):
    """ADF node types.

    ``NONE`` is a sentinel for markdown constructs without an ADF counterpart;
    it is never inserted into a document.
    """

    NONE = "none"
    DOC = "doc"
    BLOCKQUOTE = "blockquote"
    BULLET_LIST = "bulletList"
    CODE_BLOCK = "codeBlock"
    HEADING = "heading"
    MEDIA_GROUP = "mediaGroup"
    MEDIA_SINGLE = "mediaSingle"
    ORDERED_LIST = "orderedList"
    PANEL = "panel"
    PARAGRAPH = "paragraph"
    RULE = "rule"
    TABLE = "table"
    LIST_ITEM = "listItem"
    MEDIA = "media"
    TABLE_CELL = "tableCell"
    TABLE_HEADER = "tableHeader"
    TABLE_ROW = "tableRow"
    EMOJI = "emoji"
    HARD_BREAK = "hardBreak"
    INLINE_CARD = "inlineCard"
    MENTION = "mention"
    TEXT = "text"


class MarkType(str, Enum):
    """Inline formatting marks."""

    CODE = "code"
    EM = "em"
    LINK = "link"
    STRIKE = "strike"
    STRONG = "strong"
    SUBSUP = "subsup"
    TEXT_COLOR = "textColor"
    UNDERLINE = "underline"


class Layout(str, Enum):
    """Layouts for media single nodes."""

    WRAP_LEFT = "wrap-left"
    CENTER = "center"
    WRAP_RIGHT = "wrap-right"
    WIDE = "wide"
    FULL_WIDTH = "full-width"
    ALIGN_START = "align-start"
    ALIGN_END = "align-end"


INLINE_TYPES = frozenset(
    {
        NodeType.EMOJI,
        NodeType.HARD_BREAK,
        NodeType.INLINE_CARD,
        NodeType.MENTION,
        NodeType.TEXT,
    }
)


def is_inline_type(node_type: NodeType) -> bool:
    """Return True for node types that live inside a block's content."""
    return node_type in INLINE_TYPES
