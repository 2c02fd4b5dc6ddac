"""md2adf: convert markdown into Atlassian Document Format."""

from md2adf.conversion import ConversionOptions, convert_markdown, render_markdown
from md2adf.exceptions import (
    ConversionError,
    InputError,
    Md2adfError,
    SerializationError,
    StackError,
    UnmappedNodeError,
    UnsupportedNodeError,
)
from md2adf.schemas import Mark, Node
from md2adf.transformer import AdfTransformer

__all__ = [
    "AdfTransformer",
    "ConversionError",
    "ConversionOptions",
    "InputError",
    "Mark",
    "Md2adfError",
    "Node",
    "SerializationError",
    "StackError",
    "UnmappedNodeError",
    "UnsupportedNodeError",
    "convert_markdown",
    "render_markdown",
]
