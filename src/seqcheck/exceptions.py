"""Custom exceptions for seqcheck.

None iterables are valid input to every predicate and never raise. The
exceptions below cover misuse of the comparer arguments.
"""

from __future__ import annotations

from typing import Any


class SeqCheckError(Exception):
    """Base exception for seqcheck errors.

    All library exceptions inherit from this class, allowing callers
    to catch every seqcheck error with a single except clause if desired.
    """


class ComparerRequiredError(SeqCheckError, ValueError):
    """Raised when a required equality comparer is None.

    Attributes:
        operation: Name of the predicate that was called.
    """

    def __init__(self, operation: str) -> None:
        """Initialize the exception.

        Args:
            operation: Name of the predicate that was called.
        """
        self.operation = operation
        super().__init__(f"{operation} requires a comparer, got None")


class InvalidComparerError(SeqCheckError, TypeError):
    """Raised when a comparer is neither an EqualityComparer nor callable.

    Attributes:
        comparer: The rejected object.
    """

    def __init__(self, comparer: Any) -> None:
        self.comparer = comparer
        super().__init__(
            f"Expected an object with an equals(x, y) method or a two-argument "
            f"callable, got {type(comparer).__name__}"
        )

