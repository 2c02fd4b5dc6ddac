"""Shared schemas for md2adf."""

from md2adf.schemas.nodes import Attributes, Mark, MarkAttributes, Node
from md2adf.schemas.types import Layout, MarkType, NodeType, is_inline_type

__all__ = [
    "Attributes",
    "Layout",
    "Mark",
    "MarkAttributes",
    "MarkType",
    "Node",
    "NodeType",
    "is_inline_type",
]
