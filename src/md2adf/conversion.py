"""Conversion pipeline for markdown -> ADF."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from md2adf.config import (
    MD2ADF_IMAGES,
    MD2ADF_JSON_INDENT,
    MD2ADF_RAW_HTML,
    MD2ADF_STACK_MARKS,
)
from md2adf.parser import parse_markdown
from md2adf.schemas import Node
from md2adf.serializer import serialize_document
from md2adf.transformer import AdfTransformer
from md2adf.utils.logging_config import get_logger

logger = get_logger(__name__)

_RAW_HTML_POLICIES = ("text", "reject")
_IMAGE_POLICIES = ("link", "reject")


@dataclass
class ConversionOptions:
    """Options for markdown conversion.

    Attributes:
        stack_marks: If True, nested styling accumulates marks on each text
            leaf. If False, each styling construct becomes a single text leaf
            with only its own mark.
        raw_html: "text" keeps the visible text of raw HTML; "reject" fails
            the conversion.
        images: "link" renders images as alt text linked to the image URL;
            "reject" fails the conversion.
        indent: JSON indentation, or None for compact output. A numeric
            string, as read from the environment, is converted.
    """

    stack_marks: bool = MD2ADF_STACK_MARKS
    raw_html: Literal["text", "reject"] = MD2ADF_RAW_HTML  # type: ignore[assignment]
    images: Literal["link", "reject"] = MD2ADF_IMAGES  # type: ignore[assignment]
    indent: int | None = MD2ADF_JSON_INDENT  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.raw_html not in _RAW_HTML_POLICIES:
            raise ValueError(f"raw_html must be one of {_RAW_HTML_POLICIES}, got {self.raw_html!r}")
        if self.images not in _IMAGE_POLICIES:
            raise ValueError(f"images must be one of {_IMAGE_POLICIES}, got {self.images!r}")
        if isinstance(self.indent, str):
            try:
                self.indent = int(self.indent)
            except ValueError:
                raise ValueError(f"indent must be an integer, got {self.indent!r}") from None
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must not be negative, got {self.indent}")


def convert_markdown(source: str, options: ConversionOptions | None = None) -> Node:
    """Parse markdown and build its ADF document tree.

    Args:
        source: Markdown text.
        options: Conversion options. Uses defaults if None.

    Returns:
        The ``doc`` root node.

    Raises:
        UnmappedNodeError: If the parser produced a node type with no mapping.
        UnsupportedNodeError: If the options reject a construct in the source.
    """
    opts = options or ConversionOptions()
    tree = parse_markdown(source)
    transformer = AdfTransformer(
        stack_marks=opts.stack_marks,
        raw_html=opts.raw_html,
        images=opts.images,
    )
    document = transformer.transform(tree)
    logger.debug("Converted markdown into %d top-level ADF nodes", len(document.content or []))
    return document


def render_markdown(source: str, options: ConversionOptions | None = None) -> str:
    """Convert markdown to ADF JSON text."""
    opts = options or ConversionOptions()
    return serialize_document(convert_markdown(source, opts), indent=opts.indent)
