"""Stand-alone helpers used next to the markup engine."""

from .sequence_helpers import distinct_by, is_null_or_empty, max_by, min_by
from .text_helpers import split_at_upper_case, to_short_form

__all__ = [
    'distinct_by', 'is_null_or_empty', 'max_by', 'min_by',
    'split_at_upper_case', 'to_short_form',
]
