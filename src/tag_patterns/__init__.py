"""Compiled tag grammars shared by the markup engine."""

from .tag_pattern_library import TagPattern, TagPatternLibrary, get_tag_patterns

__all__ = ['TagPattern', 'TagPatternLibrary', 'get_tag_patterns']
