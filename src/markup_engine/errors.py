"""
Exceptions raised by the markup engine and its helpers.
"""


class MarkupError(Exception):
    """Base class for all errors raised by this package."""


class InvalidColorPayload(MarkupError, ValueError):
    """A matched hex color payload could not be parsed."""

    def __init__(self, payload: str):
        super().__init__(f"Invalid color payload: '{payload}'")
        self.payload = payload


class InvalidColorValue(MarkupError, ValueError):
    """A color is not a 32-bit ARGB value."""


class EmptySequence(MarkupError, ValueError):
    """A selection ran over a sequence with no elements."""

    def __init__(self, message: str = "Sequence contains no elements"):
        super().__init__(message)


class NullArgument(MarkupError, TypeError):
    """A required argument was None."""

    def __init__(self, name: str):
        super().__init__(f"Argument '{name}' must not be None")
        self.name = name


class RecordEncodingError(MarkupError, ValueError):
    """A record could not be packed into or unpacked from bytes."""


class RenderError(MarkupError, ValueError):
    """Segment text cannot be written to the output document."""
