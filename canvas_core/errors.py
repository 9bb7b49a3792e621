"""Errors raised along the import/export path."""


class CanvasError(Exception):
    """Base class for every error raised by canvas_core."""


class InvalidFormat(CanvasError):
    """Imported document is malformed or structurally wrong."""


class SerializationFailure(CanvasError):
    """Export document could not be encoded."""


class UnreadableFile(CanvasError):
    """Selected or dropped file could not be read."""


class FormDefinitionError(CanvasError):
    """Page definition document is missing or broken."""
