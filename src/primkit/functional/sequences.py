"""Sequence utilities.

This module provides stateless operations over finite, ordered collections:
safe indexing, chunking, key-based deduplication and grouping, extreme
selection, combinatorial enumeration, frequency analysis and set-like
operations. Every function returns a new list (or a scalar) and never mutates
its input.

Empty inputs and out-of-range indices are not errors. Functions return an
absence value (``None``), an empty list or the supplied default instead. The
only checked precondition is a positive chunk size.

Examples:
    >>> from primkit.functional.sequences import chunked, group_by
    >>> chunked([1, 2, 3, 4, 5], 2)
    [[1, 2], [3, 4], [5]]
    >>> group_by([1, 2, 3, 4, 5], lambda x: x % 2)
    {1: [1, 3, 5], 0: [2, 4]}
"""

import random
import typing as tp
from functools import reduce

from primkit.core.types import K, KeySelector, T, validate_positive
from primkit.logger.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "get_or_none",
    "get_or_default",
    "chunked",
    "distinct_by",
    "max_by",
    "min_by",
    "group_by",
    "combinations",
    "shuffled",
    "frequencies",
    "most_frequent",
    "first_or_none",
    "last_or_none",
    "unique",
    "contains_any",
    "intersection",
    "union",
]


def _identity(item):
    return item


class _Membership:
    """Membership test that uses a set for hashable values.

    Unhashable values (lists, dicts) fall back to an equality scan so the
    set-like operations still accept them.
    """

    def __init__(self, items: tp.Iterable = ()):
        self._hashed: set = set()
        self._scanned: list = []
        for item in items:
            self.add(item)

    def add(self, item) -> bool:
        """Record ``item``; return ``True`` if it was not seen before."""
        try:
            if item in self._hashed:
                return False
            self._hashed.add(item)
            return True
        except TypeError:
            if item in self._scanned:
                return False
            self._scanned.append(item)
            return True

    def __contains__(self, item) -> bool:
        try:
            return item in self._hashed
        except TypeError:
            return item in self._scanned


# =============================================================================
# Access
# =============================================================================


def get_or_none(items: tp.Sequence[T], index: int) -> tp.Optional[T]:
    """Return the element at ``index`` or ``None`` when out of bounds.

    Negative indices count as out of bounds.
    """
    if index < 0 or index >= len(items):
        return None
    return items[index]


def get_or_default(items: tp.Sequence[T], index: int, default: T) -> T:
    """Return the element at ``index`` or ``default`` when out of bounds."""
    if index < 0 or index >= len(items):
        return default
    return items[index]


def first_or_none(items: tp.Iterable[T]) -> tp.Optional[T]:
    """First element, or ``None`` for an empty collection."""
    for item in items:
        return item
    return None


def last_or_none(items: tp.Sequence[T]) -> tp.Optional[T]:
    """Last element, or ``None`` for an empty collection."""
    items = items if isinstance(items, tp.Sequence) else list(items)
    return items[-1] if items else None


# =============================================================================
# Partitioning
# =============================================================================


def chunked(items: tp.Sequence[T], size: int) -> tp.List[tp.List[T]]:
    """Split a sequence into consecutive chunks of ``size`` elements.

    Every chunk has exactly ``size`` elements except possibly the last one.
    Concatenating the chunks in order gives back the input.

    Args:
        items: Sequence to split.
        size: Chunk length. Must be greater than zero.

    Returns:
        ``ceil(len(items) / size)`` lists.

    Raises:
        ValueError: If ``size`` is not a positive integer.
    """
    try:
        size = validate_positive(size, "size")
    except ValueError:
        logger.debug(f"chunked called with invalid size {size!r}")
        raise

    items = list(items)
    return [items[i : i + size] for i in range(0, len(items), size)]


def group_by(
    items: tp.Iterable[T], key: KeySelector[T, K]
) -> tp.Dict[K, tp.List[T]]:
    """Group elements by the value of ``key``.

    Keys appear in the order they are first produced, and each group keeps the
    relative order of its elements.

    Args:
        items: Elements to group.
        key: Function projecting an element to a hashable key.

    Returns:
        Mapping from key to the list of elements sharing it.
    """
    result: tp.Dict[K, tp.List[T]] = {}
    for item in items:
        result.setdefault(key(item), []).append(item)
    return result


def combinations(items: tp.Sequence[T], length: int = 2) -> tp.List[tp.List[T]]:
    """All ``length``-sized selections without replacement.

    Each combination keeps the original relative order of its elements, and
    combinations are listed in lexicographic order of their indices, so those
    starting at earlier positions come first.

    Args:
        items: Source elements. Equal elements at different positions count
            as distinct.
        length: Number of elements per combination.

    Returns:
        ``C(len(items), length)`` lists, or an empty list when ``length < 1``
        or ``length > len(items)``.

    Example:
        >>> combinations([1, 2, 3])
        [[1, 2], [1, 3], [2, 3]]
    """
    pool = list(items)
    n = len(pool)
    if length < 1 or length > n:
        return []

    result: tp.List[tp.List[T]] = []
    current: tp.List[T] = []

    def combine(start: int) -> None:
        if len(current) == length:
            result.append(list(current))
            return
        # Stop early once too few elements remain to fill the combination
        for i in range(start, n - (length - len(current)) + 1):
            current.append(pool[i])
            combine(i + 1)
            current.pop()

    combine(0)
    return result


# =============================================================================
# Selection
# =============================================================================


def distinct_by(items: tp.Iterable[T], key: KeySelector[T, K]) -> tp.List[T]:
    """Keep the first element seen for each distinct ``key`` value."""
    seen = _Membership()
    return [item for item in items if seen.add(key(item))]


def unique(items: tp.Iterable[T]) -> tp.List[T]:
    """Remove duplicates, keeping first occurrences in order."""
    return distinct_by(items, _identity)


def max_by(items: tp.Iterable[T], key: KeySelector[T, K]) -> tp.Optional[T]:
    """Element with the greatest ``key`` value, or ``None`` when empty.

    A later element replaces the current best only when its key is strictly
    greater, so the earliest element wins ties.
    """
    items = list(items)
    if not items:
        return None
    return reduce(lambda a, b: b if key(b) > key(a) else a, items)


def min_by(items: tp.Iterable[T], key: KeySelector[T, K]) -> tp.Optional[T]:
    """Element with the smallest ``key`` value, or ``None`` when empty.

    The earliest element wins ties.
    """
    items = list(items)
    if not items:
        return None
    return reduce(lambda a, b: b if key(b) < key(a) else a, items)


def frequencies(items: tp.Iterable[T]) -> tp.Dict[T, int]:
    """Count occurrences of each element, in first-occurrence order."""
    counts: tp.Dict[T, int] = {}
    for item in items:
        counts[item] = counts.get(item, 0) + 1
    return counts


def most_frequent(items: tp.Iterable[T]) -> tp.Optional[T]:
    """Element with the highest occurrence count, or ``None`` when empty.

    Among elements tied for the highest count, the one whose first occurrence
    comes earliest in ``items`` is returned.
    """
    counts = frequencies(items)
    if not counts:
        return None
    # dicts iterate in insertion order, which is first-occurrence order
    best, best_count = None, 0
    for item, count in counts.items():
        if count > best_count:
            best, best_count = item, count
    return best


def shuffled(
    items: tp.Iterable[T], rng: tp.Optional[random.Random] = None
) -> tp.List[T]:
    """Return a randomly reordered copy of ``items``.

    Args:
        items: Elements to shuffle. Not modified.
        rng: Random source. Defaults to the ``random`` module's shared
            generator.

    Returns:
        New list holding the same elements in uniformly random order.
    """
    result = list(items)
    (rng or random).shuffle(result)
    return result


# =============================================================================
# Set-like operations
# =============================================================================


def contains_any(items: tp.Iterable[T], others: tp.Iterable[T]) -> bool:
    """Whether ``items`` shares at least one element with ``others``."""
    members = _Membership(items)
    return any(other in members for other in others)


def intersection(items: tp.Iterable[T], others: tp.Iterable[T]) -> tp.List[T]:
    """Elements of ``items`` that also appear in ``others``.

    The receiver's order is kept and its duplicates are kept per occurrence.
    """
    members = _Membership(others)
    return [item for item in items if item in members]


def union(items: tp.Iterable[T], others: tp.Iterable[T]) -> tp.List[T]:
    """Elements of ``items`` followed by elements of ``others`` not in ``items``.

    Only membership in ``items`` is checked, so repeated values of ``others``
    that are absent from ``items`` are all appended.

    Example:
        >>> union([1, 2, 3], [2, 3, 4, 4])
        [1, 2, 3, 4, 4]
    """
    items = list(items)
    members = _Membership(items)
    return items + [other for other in others if other not in members]
