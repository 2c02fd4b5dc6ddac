"""Custom exceptions for md2adf."""


class Md2adfError(Exception):
    """Base exception for md2adf operations."""


class InputError(Md2adfError):
    """Markdown source could not be read."""


class ConversionError(Md2adfError):
    """Error during markdown to ADF conversion."""


class UnmappedNodeError(ConversionError):
    """Markdown node type has no ADF mapping."""


class UnsupportedNodeError(ConversionError):
    """Markdown construct was rejected by the conversion options."""


class StackError(ConversionError):
    """Block context stack was used out of order."""


class SerializationError(Md2adfError):
    """Error while rendering an ADF document to JSON."""
