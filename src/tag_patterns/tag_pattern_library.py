"""
Tag pattern library for inline markup.
Holds the grammars used to find color tags, paired tags and bare tag tokens.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Tuple

import regex


# Open tag: <c=...> or <color=...>, optional '#', then 6 (RGB) or 8 (ARGB) hex digits.
# The close tag must repeat the exact alias of the open tag (group 1).
COLOR_PAIR = (
    r'<(c|color)=(?:#?(?:(?P<rgb>[a-fA-F0-9]{6})|(?P<argb>[a-fA-F0-9]{8})))?>'
    r'(?P<text>.*?)<\s*/\s*\1\s*>'
)

# Any tag name with arbitrary attributes, closed by the same name.
ANY_PAIR = r'<\s*([^ >]+)[^>]*>(?P<text>.*?)<\s*/\s*\1\s*>'

# Anything between '<' and the next '>'.
ANY_TAG = r'<.*?>'


@dataclass(frozen=True)
class TagPattern:
    """Represents a tag grammar with metadata."""
    name: str
    pattern: str
    description: str = ""
    flags: int = regex.MULTILINE

    @property
    def compiled(self):
        return _compile(self.pattern, self.flags)


@lru_cache(maxsize=None)
def _compile(pattern: str, flags: int):
    return regex.compile(pattern, flags)


@dataclass(frozen=True)
class TagPatternLibrary:
    """
    Immutable set of tag grammars.
    Built once by get_tag_patterns() and shared read-only across calls.
    """
    patterns: Tuple[TagPattern, ...] = field(default_factory=tuple)

    def get(self, name: str) -> TagPattern:
        """Get a pattern by name. Raises KeyError for unknown names."""
        for pattern in self.patterns:
            if pattern.name == name:
                return pattern
        raise KeyError(name)

    def names(self) -> List[str]:
        """Get all pattern names, in library order."""
        return [p.name for p in self.patterns]

    def to_dict(self) -> Dict[str, str]:
        return {p.name: p.pattern for p in self.patterns}

    @property
    def color_pair(self):
        return self.get('color_pair').compiled

    @property
    def any_pair(self):
        return self.get('any_pair').compiled

    @property
    def any_tag(self):
        return self.get('any_tag').compiled


def _builtin_patterns() -> Tuple[TagPattern, ...]:
    return (
        TagPattern(
            name='color_pair',
            pattern=COLOR_PAIR,
            description="Color tag pair <c=RRGGBB>text</c> or <color=AARRGGBB>text</color>",
        ),
        TagPattern(
            name='any_pair',
            pattern=ANY_PAIR,
            description="Any open tag with a matching close tag of the same name",
        ),
        TagPattern(
            name='any_tag',
            pattern=ANY_TAG,
            description="Any single <...> token, paired or not",
        ),
    )


@lru_cache(maxsize=1)
def get_tag_patterns() -> TagPatternLibrary:
    """
    Get the shared tag pattern library.

    The library is created and compiled on first use; later calls return
    the same instance.
    """
    library = TagPatternLibrary(patterns=_builtin_patterns())
    # Compile eagerly so every caller shares ready-to-use patterns.
    for pattern in library.patterns:
        _compile(pattern.pattern, pattern.flags)
    return library
