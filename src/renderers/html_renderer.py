"""
HTML renderer for color segments.
Builds a <p> element where each colored segment becomes a styled <span>.
"""

from typing import Iterable, Optional, Tuple

from lxml import etree

from markup_engine.colors import OPAQUE_WHITE, channels
from markup_engine.errors import RenderError
from markup_engine.color_segments import extract_color_segments


def css_color(color: int) -> str:
    """Format an ARGB color as a CSS rgba() value."""
    alpha, red, green, blue = channels(color)
    return f"rgba({red}, {green}, {blue}, {round(alpha / 255, 3):g})"


def segments_to_element(segments: Iterable[Tuple[int, Optional[str]]],
                        default_color: int = OPAQUE_WHITE,
                        tag: str = 'p') -> etree._Element:
    """
    Build an element from segments.

    Segments in the default color are added as plain text so the output
    stays close to the input text. Every other segment is wrapped in a span.

    Args:
        segments: (color, text) pairs, as returned by extract_color_segments
        default_color: Color that needs no span
        tag: Name of the wrapping element

    Returns:
        The wrapping element

    Raises:
        RenderError: if a segment holds characters XML cannot represent (NUL, control characters)
    """
    root = etree.Element(tag)
    last = None

    for color, text in segments:
        if not text:
            continue

        style = None if color == default_color else f"color: {css_color(color)}"

        try:
            if style is None:
                # Plain text goes into .text of the root or .tail of the previous span
                if last is None:
                    root.text = (root.text or '') + text
                else:
                    last.tail = (last.tail or '') + text
                continue

            span = etree.SubElement(root, 'span', style=style)
            span.text = text
        except ValueError as e:
            # lxml rejects NUL and most control characters
            raise RenderError(f"Cannot render segment {text!r}: {e}") from e
        last = span

    return root


def segments_to_html(segments: Iterable[Tuple[int, Optional[str]]],
                     default_color: int = OPAQUE_WHITE,
                     tag: str = 'p') -> str:
    """Serialize segments to an HTML string."""
    element = segments_to_element(segments, default_color, tag)
    return etree.tostring(element, encoding='unicode', method='html')


def markup_to_html(text: Optional[str], default_color: int = OPAQUE_WHITE) -> str:
    """Extract color segments from markup text and render them as HTML."""
    return segments_to_html(extract_color_segments(text, default_color), default_color)
