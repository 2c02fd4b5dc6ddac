"""Render ADF documents to JSON."""

from __future__ import annotations

from pydantic_core import PydanticSerializationError

from md2adf.exceptions import SerializationError
from md2adf.schemas import Node


def serialize_document(document: Node, *, indent: int | None = 2) -> str:
    """Serialize an ADF document to JSON.

    Fields that do not apply to a node (``attrs``, ``content``, ``marks``,
    ``text``, ``version``) are omitted rather than written as null.

    Args:
        document: The ``doc`` root node.
        indent: Spaces per indentation level, or None for compact output.

    Returns:
        The JSON text, without a trailing newline.

    Raises:
        SerializationError: If the tree cannot be rendered.
    """
    try:
        return document.model_dump_json(indent=indent, exclude_none=True)
    except PydanticSerializationError as exc:
        raise SerializationError(f"Failed to serialize ADF document: {exc}") from exc


def document_to_dict(document: Node) -> dict:
    """Return the JSON-compatible dict form of an ADF document."""
    return document.model_dump(mode="json", exclude_none=True)
