"""
Color segment extraction.
Splits text annotated with <c=RRGGBB>..</c> / <color=AARRGGBB>..</color> tags
into an ordered list of (color, text) segments covering the whole input.
"""

import logging
from typing import List, NamedTuple, Optional

from tag_patterns import TagPatternLibrary, get_tag_patterns

from .colors import OPAQUE_WHITE, color_from_payload, validate_color


logger = logging.getLogger(__name__)


class Segment(NamedTuple):
    """One contiguous span of the input and the color it is drawn in."""
    color: int
    text: Optional[str]


class ColorSegmentExtractor:
    """
    Extracts color segments from markup text.
    Tags are matched once at top level; nested tags of the same alias are left as text.
    """

    def __init__(self, patterns: Optional[TagPatternLibrary] = None):
        """
        Initialize extractor.

        Args:
            patterns: Tag pattern library to use. If None, uses the shared library
        """
        self.patterns = patterns or get_tag_patterns()

    def extract(self, text: Optional[str], default_color: int = OPAQUE_WHITE) -> List[Segment]:
        """
        Decompose text into colored segments.

        Args:
            text: Markup text. None or empty text is returned as a single segment
            default_color: ARGB color for untagged text and tags without a payload

        Returns:
            Segments in source order; their texts concatenate back to the input

        Raises:
            InvalidColorPayload: if a matched payload is not valid hex
            InvalidColorValue: if default_color is not a 32-bit ARGB int
        """
        validate_color(default_color)

        if not text:
            return [Segment(default_color, text)]

        segments = []
        start_index = 0

        for match in self.patterns.color_pair.finditer(text):
            # Untagged text between the previous match and this one
            if match.start() != start_index:
                segments.append(Segment(default_color, text[start_index:match.start()]))

            segments.append(Segment(self._resolve_color(match, default_color), match.group('text')))
            start_index = match.end()

        if start_index != len(text):
            segments.append(Segment(default_color, text[start_index:]))

        logger.debug("Extracted %d segment(s) from %d character(s)", len(segments), len(text))
        return segments

    def _resolve_color(self, match, default_color: int) -> int:
        rgb = match.group('rgb')
        argb = match.group('argb')
        if rgb is None and argb is None:
            return default_color
        return color_from_payload(rgb=rgb, argb=argb)


def extract_color_segments(text: Optional[str], default_color: int = OPAQUE_WHITE) -> List[Segment]:
    """Decompose markup text into (color, text) segments with the shared extractor."""
    return ColorSegmentExtractor().extract(text, default_color)
