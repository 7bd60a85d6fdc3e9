"""
ARGB color helpers.
Colors are plain ints: alpha in the high byte, then red, green, blue.
"""

from typing import Optional, Tuple

from .errors import InvalidColorPayload, InvalidColorValue


OPAQUE_WHITE = 0xFFFFFFFF
OPAQUE_BLACK = 0xFF000000

_MAX_ARGB = 0xFFFFFFFF
_HEX_DIGITS = set('0123456789abcdefABCDEF')


def validate_color(color: int) -> int:
    """Return color unchanged if it is a 32-bit ARGB int, else raise InvalidColorValue."""
    if isinstance(color, bool) or not isinstance(color, int):
        raise InvalidColorValue(f"Color must be an int, got {type(color).__name__}")
    if color < 0 or color > _MAX_ARGB:
        raise InvalidColorValue(f"Color {color:#x} is outside the 32-bit ARGB range")
    return color


def color_from_payload(rgb: Optional[str] = None, argb: Optional[str] = None) -> int:
    """
    Decode a tag payload into an ARGB color.

    Args:
        rgb: 6 hex digits, read as an opaque color (alpha 0xFF)
        argb: 8 hex digits, read directly as ARGB

    Returns:
        The ARGB color as an int
    """
    if rgb:
        return _parse_hex('FF' + rgb, rgb)
    return _parse_hex(argb or '', argb or '')


def _parse_hex(digits: str, payload: str) -> int:
    # int(..., 16) accepts '0x', '_' and whitespace, so check the charset first
    if len(digits) != 8 or not set(digits) <= _HEX_DIGITS:
        raise InvalidColorPayload(payload)
    return int(digits, 16)


def parse_color(text: str) -> int:
    """
    Parse a user-supplied color such as 'FF0000', '#80FF0000' or '0xFFFFFFFF'.

    Raises:
        InvalidColorValue: if text is not 6 or 8 hex digits
    """
    if not isinstance(text, str):
        raise InvalidColorValue(f"Color must be a string, got {type(text).__name__}")
    value = text.strip()
    if value.lower().startswith('0x'):
        value = value[2:]
    value = value.lstrip('#')
    message = f"Invalid color '{text}' (expected RRGGBB or AARRGGBB)"
    if len(value) not in (6, 8):
        raise InvalidColorValue(message)
    try:
        if len(value) == 6:
            return color_from_payload(rgb=value)
        return color_from_payload(argb=value)
    except InvalidColorPayload as e:
        raise InvalidColorValue(message) from e


def channels(color: int) -> Tuple[int, int, int, int]:
    """Split a color into (alpha, red, green, blue)."""
    validate_color(color)
    return (color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def to_hex(color: int) -> str:
    """Format a color as '#AARRGGBB'."""
    return f"#{validate_color(color):08X}"
