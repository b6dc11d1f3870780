"""Collection query predicates.

Every predicate accepts None wherever an iterable is expected and treats it
as an empty iterable. Iterables are never measured with len(); they are only
stepped through with iter()/next(), so generators and other one-shot
iterators are supported.

Iterables must not be mutated while a predicate is traversing them.

Membership and intersection predicates come in three forms:
- natural equality (``==``, with the string default for str/str pairs),
- ``*_by``: an explicit comparer, which is required,
- ``*_str``: string sequences, ordinal case-insensitive unless a comparer is given.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import chain
from typing import Any, TypeVar

from seqcheck.core.comparers import (
    DEFAULT_STRING_COMPARER,
    ComparerLike,
    NaturalComparer,
    resolve_comparer,
)

T = TypeVar("T")

_MISSING = object()

_NATURAL = NaturalComparer(DEFAULT_STRING_COMPARER)


def probe(seq: Iterable[T] | None) -> tuple[bool, Iterator[T]]:
    """Check for emptiness without losing the probed element.

    Args:
        seq: Iterable to probe, or None.

    Returns:
        Tuple of (is_empty, iterator). The iterator yields every element
        of seq, including the one taken by the probe.

    Example:
        >>> empty, items = probe(x for x in "ab")
        >>> empty, list(items)
        (False, ['a', 'b'])
    """
    if seq is None:
        return True, iter(())
    iterator = iter(seq)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        return True, iterator
    return False, chain((first,), iterator)


def is_null_or_empty(seq: Iterable[Any] | None) -> bool:
    """Determine whether an iterable is None or has no elements.

    A single element is requested from a fresh iterator. For one-shot
    iterators that element is consumed; use probe() to keep it.

    Args:
        seq: Iterable to check, or None.

    Returns:
        True if seq is None or empty.
    """
    if seq is None:
        return True
    return next(iter(seq), _MISSING) is _MISSING


def has_same_length_as(
    first: Iterable[Any] | None, second: Iterable[Any] | None
) -> bool:
    """Determine whether two iterables have the same number of elements.

    The iterables may hold different element types. None counts as length 0.
    Both are stepped in lock-step, so neither needs to support len().

    Args:
        first: First iterable, or None.
        second: Second iterable, or None.

    Returns:
        True if both run out at the same step.
    """
    if first is None:
        return is_null_or_empty(second)
    if second is None:
        return is_null_or_empty(first)

    second_iterator = iter(second)
    for _ in first:
        if next(second_iterator, _MISSING) is _MISSING:
            return False
    return next(second_iterator, _MISSING) is _MISSING


def is_empty_or_contains_by(
    first: Iterable[T] | None, item: T, comparer: ComparerLike
) -> bool:
    """Determine whether first is empty or contains item, using comparer.

    Args:
        first: Elements to search, or None.
        item: Value to look for.
        comparer: EqualityComparer or callable taking (element, item).

    Returns:
        True if first is None or empty, or an element equals item.

    Raises:
        ComparerRequiredError: If comparer is None, even when first is empty.
        InvalidComparerError: If comparer is not usable.
    """
    equals = resolve_comparer(comparer, "is_empty_or_contains_by")

    empty, elements = probe(first)
    if empty:
        return True

    for element in elements:
        if equals(element, item):
            return True
    return False


def is_empty_or_contains_str(
    first: Iterable[str] | None, item: str, comparer: ComparerLike | None = None
) -> bool:
    """Determine whether first is empty or contains the string item.

    Without a comparer, strings are compared ordinally, ignoring case
    (ORDINAL_IGNORE_CASE).

    Example:
        >>> is_empty_or_contains_str(["foo", "bar", "baz"], "BAR")
        True
    """
    if comparer is None:
        comparer = DEFAULT_STRING_COMPARER
    return is_empty_or_contains_by(first, item, comparer)


def is_empty_or_contains(first: Iterable[T] | None, item: T) -> bool:
    """Determine whether first is empty or contains item.

    Elements are compared with ``element == item``. A str item is looked up
    with is_empty_or_contains_str(), i.e. case-insensitively by default.
    """
    if isinstance(item, str):
        return is_empty_or_contains_str(first, item)
    return is_empty_or_contains_by(first, item, _NATURAL)


def is_empty_or_intersection_contains_any_by(
    first: Iterable[T] | None, second: Iterable[T] | None, comparer: ComparerLike
) -> bool:
    """Determine whether both iterables are empty or they share an element.

    Truth table:
    - both None/empty: True
    - exactly one None/empty: False
    - neither empty: True if any pair of elements is equal under comparer

    Every element of first is tested against every element of second, so
    elements only need equality, not hashing. A one-shot iterator passed
    as second is buffered once so each pass sees all of its elements.

    Args:
        first: First iterable, or None.
        second: Second iterable, or None.
        comparer: EqualityComparer or callable taking (first_el, second_el).

    Returns:
        True for two empty iterables or a non-empty intersection.

    Raises:
        ComparerRequiredError: If comparer is None.
        InvalidComparerError: If comparer is not usable.
    """
    equals = resolve_comparer(comparer, "is_empty_or_intersection_contains_any_by")

    first_empty, first_elements = probe(first)
    if first_empty:
        return is_null_or_empty(second)

    if second is not None and iter(second) is second:
        second = tuple(second)
    if is_null_or_empty(second):
        return first_empty

    for left in first_elements:
        for right in second:
            if equals(left, right):
                return True
    return False


def is_empty_or_intersection_contains_any_str(
    first: Iterable[str] | None,
    second: Iterable[str] | None,
    comparer: ComparerLike | None = None,
) -> bool:
    """String form of is_empty_or_intersection_contains_any_by().

    Without a comparer, strings are compared ordinally, ignoring case
    (ORDINAL_IGNORE_CASE).
    """
    if comparer is None:
        comparer = DEFAULT_STRING_COMPARER
    return is_empty_or_intersection_contains_any_by(first, second, comparer)


def is_empty_or_intersection_contains_any(
    first: Iterable[T] | None, second: Iterable[T] | None
) -> bool:
    """Natural-equality form of is_empty_or_intersection_contains_any_by().

    Pairs of strings are compared with the default string comparer;
    everything else with ``==``.
    """
    return is_empty_or_intersection_contains_any_by(first, second, _NATURAL)
