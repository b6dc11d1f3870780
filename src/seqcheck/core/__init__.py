"""Core predicates package.

This package contains the collection query predicates together with the
equality comparers and string helpers they are built on. Everything here
is pure: no I/O, no shared mutable state.
"""

from seqcheck.core.comparers import (
    CASEFOLD,
    DEFAULT_STRING_COMPARER,
    ORDINAL,
    ORDINAL_IGNORE_CASE,
    ComparerLike,
    EqualityComparer,
    KeyComparer,
    NaturalComparer,
    resolve_comparer,
)
from seqcheck.core.predicates import (
    has_same_length_as,
    is_empty_or_contains,
    is_empty_or_contains_by,
    is_empty_or_contains_str,
    is_empty_or_intersection_contains_any,
    is_empty_or_intersection_contains_any_by,
    is_empty_or_intersection_contains_any_str,
    is_null_or_empty,
    probe,
)
from seqcheck.core.string_utils import (
    compare_strings_ci,
    compare_strings_ordinal_ci,
    normalize_string,
    to_upper_ordinal,
)

__all__ = [
    # comparers - instances
    "ORDINAL",
    "ORDINAL_IGNORE_CASE",
    "CASEFOLD",
    "DEFAULT_STRING_COMPARER",
    # comparers - types and functions
    "ComparerLike",
    "EqualityComparer",
    "KeyComparer",
    "NaturalComparer",
    "resolve_comparer",
    # predicates
    "probe",
    "is_null_or_empty",
    "has_same_length_as",
    "is_empty_or_contains",
    "is_empty_or_contains_by",
    "is_empty_or_contains_str",
    "is_empty_or_intersection_contains_any",
    "is_empty_or_intersection_contains_any_by",
    "is_empty_or_intersection_contains_any_str",
    # string_utils
    "normalize_string",
    "compare_strings_ci",
    "compare_strings_ordinal_ci",
    "to_upper_ordinal",
]
