"""Tests for the character classification helpers."""

import pytest

from context_manipulator.character.classifier import (
    combine_sets,
    is_alpha_numeric,
    is_in_set,
    is_same,
    iter_code_units,
    slash_escape,
    to_hex,
)


class TestIsAlphaNumeric:
    """Test the ASCII alphanumeric check."""

    @pytest.mark.parametrize("char", ["0", "9", "a", "z", "A", "Z", "m"])
    def test_ascii_letters_and_digits(self, char):
        """Test that ASCII letters and digits are alphanumeric."""
        assert is_alpha_numeric(char) is True

    @pytest.mark.parametrize("char", ["/", ":", "@", "[", "`", "{", " ", "_", "\u00e9", "\u0661"])
    def test_everything_else(self, char):
        """Test that neighbours of the ASCII ranges and non-ASCII letters are not."""
        assert is_alpha_numeric(char) is False


class TestIsInSet:
    """Test character set membership with missing values."""

    def test_member(self):
        assert is_in_set("a", frozenset("abc")) is True

    def test_non_member(self):
        assert is_in_set("d", frozenset("abc")) is False

    def test_both_missing(self):
        """Test that a missing character matches a missing set."""
        assert is_in_set(None, None) is True

    def test_one_missing(self):
        """Test that a missing value on one side never matches."""
        assert is_in_set(None, frozenset("abc")) is False
        assert is_in_set("a", None) is False


class TestToHex:
    """Test hex formatting of code units."""

    @pytest.mark.parametrize("char,expected", [
        ("\t", "9"),
        (" ", "20"),
        ("}", "7d"),
        ("\u0732", "732"),
        ("\uffff", "ffff"),
    ])
    def test_unpadded_lowercase(self, char, expected):
        """Test that hex output is lowercase with no prefix or padding."""
        assert to_hex(char) == expected


class TestSlashEscape:
    """Test backslash escaping."""

    @pytest.mark.parametrize("char,expected", [
        ("\b", "\\b"),
        ("\t", "\\t"),
        ("\n", "\\n"),
        ("\f", "\\f"),
        ("\r", "\\r"),
    ])
    def test_mnemonics(self, char, expected):
        """Test that control characters use their two-character mnemonics."""
        assert slash_escape(char) == expected

    @pytest.mark.parametrize("char", ['"', "'", "\\", "/", "-"])
    def test_other_characters(self, char):
        """Test that other characters are prefixed with a backslash."""
        assert slash_escape(char) == "\\" + char


class TestIsSame:
    """Test the unchanged-character check used by filtering."""

    def test_identical(self):
        assert is_same("a", "a") is True

    def test_different(self):
        assert is_same("a", "b") is False

    def test_longer_replacement(self):
        """Test that a replacement starting with the character does not match."""
        assert is_same("&", "&amp;") is False

    def test_empty_replacement(self):
        assert is_same("a", "") is False


class TestCombineSets:
    """Test union of optional character sets."""

    def test_both_present(self):
        assert combine_sets("ab", frozenset("bc")) == frozenset("abc")

    def test_one_missing(self):
        assert combine_sets(None, "xy") == frozenset("xy")
        assert combine_sets("xy", None) == frozenset("xy")

    def test_both_missing(self):
        assert combine_sets(None, None) is None


class TestIterCodeUnits:
    """Test UTF-16 code unit iteration."""

    def test_basic_multilingual_plane(self):
        """Test that BMP characters are yielded unchanged."""
        assert list(iter_code_units("a\u00e9\uffff")) == ["a", "\u00e9", "\uffff"]

    def test_supplementary_character(self):
        """Test that astral characters are split into surrogate pairs."""
        assert list(iter_code_units("\U0001F600")) == ["\ud83d", "\ude00"]

    def test_highest_code_point(self):
        assert list(iter_code_units("\U0010FFFF")) == ["\udbff", "\udfff"]

    def test_empty(self):
        assert list(iter_code_units("")) == []
