"""String comparison utilities.

Two flavours of case-insensitive comparison are provided:

- Ordinal ignore-case: each character is mapped through its simple
  (one-to-one) upper-case form, then the code points are compared. This
  never changes string length, so "Straße" and "STRASSE" stay different.
- Case folding: full Unicode casefold(), which does expand characters
  like German eszett (ß → ss).
"""

from __future__ import annotations


def _simple_upper(char: str) -> str:
    """Upper-case a single character only when the mapping is one-to-one."""
    upper = char.upper()
    if len(upper) == 1:
        return upper
    return char


def to_upper_ordinal(s: str) -> str:
    """Upper-case a string using simple per-character case mapping.

    Characters whose upper-case form expands to several characters
    (for example "ß" → "SS") are left unchanged.

    Args:
        s: String to convert.

    Returns:
        String of the same length as s.

    Example:
        >>> to_upper_ordinal("Straße")
        'STRAßE'
    """
    return "".join(_simple_upper(char) for char in s)


def normalize_string(s: str) -> str:
    """Normalize string for case-insensitive comparison.

    Uses casefold() for proper Unicode case folding, which handles
    special characters like German eszett (ß → ss) correctly.

    Args:
        s: String to normalize.

    Returns:
        Normalized string (casefolded and stripped of leading/trailing whitespace).

    Example:
        >>> normalize_string("  Hello World  ")
        'hello world'
    """
    return s.casefold().strip()


def compare_strings_ci(a: str, b: str) -> bool:
    """Compare strings case-insensitively using full case folding.

    Args:
        a: First string.
        b: Second string.

    Returns:
        True if strings are equal after casefold().

    Example:
        >>> compare_strings_ci("STRASSE", "Straße")
        True
    """
    return a.casefold() == b.casefold()


def compare_strings_ordinal_ci(a: str, b: str) -> bool:
    """Compare strings ordinally, ignoring case.

    Args:
        a: First string.
        b: Second string.

    Returns:
        True if strings are equal after simple upper-case mapping.

    Example:
        >>> compare_strings_ordinal_ci("ABC", "abc")
        True
        >>> compare_strings_ordinal_ci("STRASSE", "Straße")
        False
    """
    if len(a) != len(b):
        return False
    return to_upper_ordinal(a) == to_upper_ordinal(b)
