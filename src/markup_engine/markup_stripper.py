"""
Markup stripper.
Removes tags from text either blindly (lazy mode) or pair by pair until none remain.
"""

import logging
from typing import Optional

from tag_patterns import TagPatternLibrary, get_tag_patterns


logger = logging.getLogger(__name__)


class MarkupStripper:
    """
    Strips markup tags from text.
    """

    def __init__(self, patterns: Optional[TagPatternLibrary] = None):
        self.patterns = patterns or get_tag_patterns()

    def strip_lazy(self, text: Optional[str]) -> Optional[str]:
        """
        Remove every <...> token, paired or not.
        A '<' with no following '>' on the same line is kept.
        """
        if not text:
            return text

        return self.patterns.any_tag.sub('', text)

    def strip(self, text: Optional[str]) -> Optional[str]:
        """
        Remove tags that have a matching closing tag, keeping their inner text.

        Each pass unwraps the leftmost complete pair and rescans, so nested tags
        are removed one layer at a time. Unmatched tags stay in the text.

        Example: '<span style="color:blue">abc</span>' yields 'abc'

        Args:
            text: Text with markup

        Returns:
            Text with no remaining tag pair
        """
        if not text:
            return text

        pattern = self.patterns.any_pair
        rewrites = 0

        match = pattern.search(text)
        while match:
            # Every rewrite drops both delimiters, so the text always shrinks
            text = text[:match.start()] + match.group('text') + text[match.end():]
            rewrites += 1
            match = pattern.search(text)

        logger.debug("Unwrapped %d tag pair(s)", rewrites)
        return text


def strip_markup_lazy(text: Optional[str]) -> Optional[str]:
    """Remove all characters between '<' and '>' from text."""
    return MarkupStripper().strip_lazy(text)


def strip_markup(text: Optional[str]) -> Optional[str]:
    """Remove all paired markup tags from text."""
    return MarkupStripper().strip(text)
