"""Equality comparers.

A comparer decides whether two elements are equal for the purpose of the
membership and intersection predicates. Anything with an ``equals(x, y)``
method qualifies, and so does any plain two-argument callable.

Built-in string comparers:
- ORDINAL: exact, case-sensitive comparison.
- ORDINAL_IGNORE_CASE: case-insensitive using simple upper-case mapping
  (the default for strings).
- CASEFOLD: case-insensitive using full Unicode case folding.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias, runtime_checkable

from seqcheck.core.string_utils import compare_strings_ci, compare_strings_ordinal_ci
from seqcheck.exceptions import ComparerRequiredError, InvalidComparerError


@runtime_checkable
class EqualityComparer(Protocol):
    """Protocol for objects that compare two values for equality."""

    def equals(self, x: Any, y: Any) -> bool:
        """Return True if x and y are considered equal."""
        ...


ComparerLike: TypeAlias = EqualityComparer | Callable[[Any, Any], bool]


class _StringComparer:
    """Compares strings with a fixed comparison function.

    None is equal only to None. Non-string operands fall back to ==.
    """

    def __init__(self, name: str, compare: Callable[[str, str], bool]) -> None:
        self.name = name
        self._compare = compare

    def equals(self, x: Any, y: Any) -> bool:
        if x is None or y is None:
            return x is y
        if isinstance(x, str) and isinstance(y, str):
            return self._compare(x, y)
        return x == y

    def __call__(self, x: Any, y: Any) -> bool:
        return self.equals(x, y)

    def __repr__(self) -> str:
        return f"<StringComparer {self.name}>"


def _ordinal(a: str, b: str) -> bool:
    return a == b


ORDINAL = _StringComparer("ordinal", _ordinal)
ORDINAL_IGNORE_CASE = _StringComparer("ordinal_ignore_case", compare_strings_ordinal_ci)
CASEFOLD = _StringComparer("casefold", compare_strings_ci)

# Used by the string predicates when no comparer is given
DEFAULT_STRING_COMPARER = ORDINAL_IGNORE_CASE


class KeyComparer:
    """Compares values by a derived key.

    Example:
        >>> from seqcheck.core.string_utils import normalize_string
        >>> KeyComparer(normalize_string).equals(" Foo ", "foo")
        True
    """

    def __init__(self, key: Callable[[Any], Any]) -> None:
        if not callable(key):
            raise InvalidComparerError(key)
        self.key = key

    def equals(self, x: Any, y: Any) -> bool:
        return self.key(x) == self.key(y)

    def __call__(self, x: Any, y: Any) -> bool:
        return self.equals(x, y)

    def __repr__(self) -> str:
        return f"KeyComparer({self.key!r})"


class NaturalComparer:
    """Compares values with their own ``==``.

    When both operands are strings, the given string comparer is used
    instead, so that plain string sequences get the string default.
    """

    def __init__(
        self, string_comparer: EqualityComparer = DEFAULT_STRING_COMPARER
    ) -> None:
        self.string_comparer = string_comparer

    def equals(self, x: Any, y: Any) -> bool:
        if isinstance(x, str) and isinstance(y, str):
            return self.string_comparer.equals(x, y)
        return x == y

    def __call__(self, x: Any, y: Any) -> bool:
        return self.equals(x, y)

    def __repr__(self) -> str:
        return f"NaturalComparer({self.string_comparer!r})"


def resolve_comparer(
    comparer: ComparerLike | None, operation: str = "comparison"
) -> Callable[[Any, Any], bool]:
    """Turn a comparer argument into a two-argument equality function.

    Args:
        comparer: An EqualityComparer, or a callable taking (element, item).
        operation: Name of the calling predicate, used in error messages.

    Returns:
        Callable returning True when its two arguments are equal.

    Raises:
        ComparerRequiredError: If comparer is None.
        InvalidComparerError: If comparer has no equals() and is not callable.
    """
    if comparer is None:
        raise ComparerRequiredError(operation)
    if isinstance(comparer, EqualityComparer):
        return comparer.equals
    if callable(comparer):
        return comparer
    raise InvalidComparerError(comparer)

