"""
Selection helpers over iterables.
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar

from markup_engine.errors import EmptySequence, NullArgument


T = TypeVar('T')


def is_null_or_empty(items: Optional[Iterable[Any]]) -> bool:
    """Return True if items is None or yields no element."""
    if items is None:
        return True
    for _ in items:
        return False
    return True


def max_by(items: Iterable[T], selector: Callable[[T], Any],
           key: Optional[Callable[[Any], Any]] = None) -> T:
    """
    Return the item with the largest selected value.

    Args:
        items: Items to search
        selector: Maps an item to the value to compare
        key: Optional key applied to the selected values before comparing

    Returns:
        The first item holding the maximum

    Raises:
        NullArgument: if items or selector is None
        EmptySequence: if items is empty
    """
    return _most_by(items, selector, key, largest=True)


def min_by(items: Iterable[T], selector: Callable[[T], Any],
           key: Optional[Callable[[Any], Any]] = None) -> T:
    """Return the first item with the smallest selected value. See max_by."""
    return _most_by(items, selector, key, largest=False)


def _most_by(items, selector, key, largest: bool):
    if items is None:
        raise NullArgument('items')
    if selector is None:
        raise NullArgument('selector')

    iterator: Iterator = iter(items)
    try:
        most = next(iterator)
    except StopIteration:
        raise EmptySequence() from None

    compare = key or (lambda value: value)
    most_key = compare(selector(most))

    for candidate in iterator:
        candidate_key = compare(selector(candidate))
        # Strict comparison keeps the first of equal items
        if (candidate_key > most_key) if largest else (candidate_key < most_key):
            most = candidate
            most_key = candidate_key

    return most


def distinct_by(items: Iterable[T], selector: Callable[[T], Any]) -> List[T]:
    """Keep the first item for each selected key, in input order."""
    if items is None:
        raise NullArgument('items')
    if selector is None:
        raise NullArgument('selector')

    seen = set()
    result = []
    for item in items:
        value = selector(item)
        if value in seen:
            continue
        seen.add(value)
        result.append(item)
    return result
