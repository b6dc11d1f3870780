"""seqcheck: emptiness, length, membership and intersection predicates.

Every predicate works on any iterable (including generators) and accepts
None in place of an iterable.
"""

from seqcheck.core import (
    CASEFOLD,
    ORDINAL,
    ORDINAL_IGNORE_CASE,
    EqualityComparer,
    KeyComparer,
    has_same_length_as,
    is_empty_or_contains,
    is_empty_or_contains_by,
    is_empty_or_contains_str,
    is_empty_or_intersection_contains_any,
    is_empty_or_intersection_contains_any_by,
    is_empty_or_intersection_contains_any_str,
    is_null_or_empty,
)
from seqcheck.exceptions import (
    ComparerRequiredError,
    InvalidComparerError,
    SeqCheckError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # comparers
    "CASEFOLD",
    "ORDINAL",
    "ORDINAL_IGNORE_CASE",
    "EqualityComparer",
    "KeyComparer",
    # predicates
    "is_null_or_empty",
    "has_same_length_as",
    "is_empty_or_contains",
    "is_empty_or_contains_by",
    "is_empty_or_contains_str",
    "is_empty_or_intersection_contains_any",
    "is_empty_or_intersection_contains_any_by",
    "is_empty_or_intersection_contains_any_str",
    # exceptions
    "SeqCheckError",
    "ComparerRequiredError",
    "InvalidComparerError",
]
