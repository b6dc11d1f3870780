"""Tests for core string utilities."""

from seqcheck.core.string_utils import (
    compare_strings_ci,
    compare_strings_ordinal_ci,
    normalize_string,
    to_upper_ordinal,
)


class TestNormalizeString:
    """Tests for normalize_string function."""

    def test_lowercases_basic_string(self):
        """normalize_string lowercases ASCII characters."""
        assert normalize_string("Hello World") == "hello world"

    def test_strips_both_ends(self):
        """normalize_string strips whitespace from both ends."""
        assert normalize_string("  Hello World  ") == "hello world"

    def test_handles_empty_string(self):
        """normalize_string handles empty string."""
        assert normalize_string("") == ""

    def test_german_eszett_to_ss(self):
        """normalize_string converts German eszett (ß) to ss via casefold."""
        assert normalize_string("Straße") == "strasse"

    def test_preserves_internal_whitespace(self):
        """normalize_string preserves internal whitespace."""
        assert normalize_string("hello   world") == "hello   world"

    def test_handles_tabs_and_newlines(self):
        """normalize_string strips tabs and newlines at ends."""
        assert normalize_string("\tHello\n") == "hello"


class TestCompareStringsCi:
    """Tests for compare_strings_ci function."""

    def test_equal_different_case(self):
        """compare_strings_ci returns True for same string different case."""
        assert compare_strings_ci("Hello", "hello") is True
        assert compare_strings_ci("hello", "HELLO") is True

    def test_not_equal(self):
        """compare_strings_ci returns False for different strings."""
        assert compare_strings_ci("hello", "world") is False

    def test_empty_strings_equal(self):
        """compare_strings_ci returns True for two empty strings."""
        assert compare_strings_ci("", "") is True

    def test_german_eszett_comparison(self):
        """compare_strings_ci handles German eszett via casefold."""
        assert compare_strings_ci("STRASSE", "Straße") is True

    def test_different_unicode_characters(self):
        """compare_strings_ci distinguishes different Unicode chars."""
        assert compare_strings_ci("hello", "hellö") is False


class TestToUpperOrdinal:
    """Tests for to_upper_ordinal function."""

    def test_upper_cases_ascii(self):
        """ASCII letters are upper-cased, digits untouched."""
        assert to_upper_ordinal("abc123") == "ABC123"

    def test_keeps_length(self):
        """Characters with multi-character upper forms are left alone."""
        assert to_upper_ordinal("straße") == "STRAßE"
        assert len(to_upper_ordinal("ß")) == 1

    def test_accented_letters(self):
        """One-to-one Unicode mappings are applied."""
        assert to_upper_ordinal("café") == "CAFÉ"


class TestCompareStringsOrdinalCi:
    """Tests for compare_strings_ordinal_ci function."""

    def test_equal_different_case(self):
        """Case differences are ignored."""
        assert compare_strings_ordinal_ci("ABC", "abc") is True
        assert compare_strings_ordinal_ci("CAFÉ", "café") is True

    def test_different_lengths(self):
        """Strings of different length never match."""
        assert compare_strings_ordinal_ci("abc", "abcd") is False

    def test_eszett_not_expanded(self):
        """Unlike casefold, ß is not treated as ss."""
        assert compare_strings_ordinal_ci("STRASSE", "Straße") is False

    def test_empty_strings_equal(self):
        """Two empty strings are equal."""
        assert compare_strings_ordinal_ci("", "") is True
