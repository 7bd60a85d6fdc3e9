"""Markup engine: color segment extraction and tag stripping."""

from .colors import OPAQUE_WHITE, OPAQUE_BLACK, channels, color_from_payload, parse_color, to_hex
from .color_segments import ColorSegmentExtractor, Segment, extract_color_segments
from .errors import (
    EmptySequence,
    InvalidColorPayload,
    InvalidColorValue,
    MarkupError,
    NullArgument,
    RecordEncodingError,
    RenderError,
)
from .markup_stripper import MarkupStripper, strip_markup, strip_markup_lazy

__all__ = [
    'OPAQUE_WHITE', 'OPAQUE_BLACK', 'channels', 'color_from_payload', 'parse_color', 'to_hex',
    'ColorSegmentExtractor', 'Segment', 'extract_color_segments',
    'MarkupError', 'InvalidColorPayload', 'InvalidColorValue', 'EmptySequence',
    'NullArgument', 'RecordEncodingError', 'RenderError',
    'MarkupStripper', 'strip_markup', 'strip_markup_lazy',
]
