"""
Small text formatting helpers.
"""

from datetime import timedelta

import regex

from markup_engine.errors import NullArgument


# Uppercase ASCII letters and digits 1-9, except at the very start of the string
_UPPER_OR_DIGIT = regex.compile(r'(?<!^)([A-Z1-9])')


def split_at_upper_case(source: str) -> str:
    """
    Insert a space before every uppercase letter or digit 1-9 except the first character.

    Example: 'MaxHealth2' yields 'Max Health 2'
    """
    if source is None:
        raise NullArgument('source')
    return _UPPER_OR_DIGIT.sub(r' \1', source)


def to_short_form(duration: timedelta) -> str:
    """
    Format a duration as m:ss, or H:mm:ss when it lasts an hour or more.

    Minutes are always two digits once hours are shown (1:02:03, not 1:2:03),
    days are folded into the hour count instead of being dropped, and a
    negative duration is formatted by its magnitude.

    Examples: 0:05, 12:30, 1:02:03, 24:01:00
    """
    if duration is None:
        raise NullArgument('duration')

    total_seconds = int(abs(duration.total_seconds()))
    hours = total_seconds // 3600
    minutes = (total_seconds // 60) % 60
    seconds = total_seconds % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"
