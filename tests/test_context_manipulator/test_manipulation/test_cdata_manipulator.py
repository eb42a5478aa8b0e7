"""Tests for the CDATA section rules."""

import io

import pytest
from lxml import etree

from context_manipulator.manipulation.cdata_manipulator import (
    SPLIT_TERMINATOR,
    CDATAManipulator,
    CDATAOption,
    is_illegal_cdata_character,
)

MARKUP = (
    "<!--this! is/ a; comment: --><foo attribute=value>text</foo>"
    "<bar attribute=\"doublevalue\">text2</bar>"
    "<baz attribute='singlevalue'>)(*#$!@#?</baz>"
)

INJECTION = (
    "Invalid expand parameter 'pri<>'c]]><x:script xmlns:x=\"http://www.w3.org/1999/xhtml\">"
    "alert('xss')</x:script>es' found."
)


@pytest.fixture
def manipulator():
    return CDATAManipulator()


class TestCDATAFilter:
    """Test terminator and control character removal."""

    @pytest.mark.parametrize("text,expected", [
        ("]", "]"),
        ("]]", "]]"),
        ("]]>", ""),
        ("]]]>", "]"),
        ("]]]>]", "]]"),
        ("]]>]]", "]]"),
        ("]" * 10, "]" * 10),
        ("] ]>", "] ]>"),
        ("]>", "]>"),
        ("<\"&'>", "<\"&'>"),
        ("\u2022", "\u2022"),
        ("\u0001", ""),
        ("foo]]]]>]]", "foo]]]]"),
        ("a]]>b]]>c", "abc"),
        ("]]\u0001>", ""),
    ])
    def test_cases(self, manipulator, text, expected):
        assert manipulator.filter(text) == expected

    def test_injection(self, manipulator):
        assert manipulator.filter(INJECTION) == INJECTION.replace("]]>", "")

    def test_markup_unchanged(self, manipulator):
        assert manipulator.filter(MARKUP) == MARKUP

    def test_whitespace_controls_kept(self, manipulator):
        assert manipulator.filter("a\tb\nc\rd") == "a\tb\nc\rd"

    def test_terminator_against_written_brackets(self, manipulator):
        """Test that a > after an already-removed terminator is also dropped."""
        assert manipulator.filter("]]]]>>") == "]]"
        assert "]]>" not in manipulator.filter("]]]]>>")

    @pytest.mark.parametrize("text", ["]]]]>>", "]]]>]>>", "x]]>]]>>]]]>", "]\u0001]>"])
    def test_output_never_contains_terminator(self, manipulator, text):
        filtered = manipulator.filter(text)
        assert "]]>" not in filtered
        assert manipulator.filter(filtered) == filtered

    def test_is_illegal_cdata_character(self):
        assert is_illegal_cdata_character("\u0000") is True
        assert is_illegal_cdata_character("\u001f") is True
        assert is_illegal_cdata_character("\n") is False
        assert is_illegal_cdata_character(" ") is False


class TestCDATAEncode:
    """Test terminator splitting."""

    def test_default_option(self, manipulator):
        assert manipulator.option is CDATAOption.CONTENT

    def test_split_terminator(self, manipulator):
        assert manipulator.encode("]]>") == SPLIT_TERMINATOR == "]]>]]<![CDATA[>"

    def test_longer_run(self, manipulator):
        assert manipulator.encode("foo]]]]>]]") == "foo]]]]>]]<![CDATA[>]]"

    def test_adjacent_terminators(self, manipulator):
        """Test that terminators are replaced left to right without overlap."""
        assert manipulator.encode("]]]]>>") == "]]]]>]]<![CDATA[>>"

    @pytest.mark.parametrize("text", [
        "]]>",
        "foo]]]]>]]",
        "]]>]]>",
        "]]]]>>",
        "a]]b]]>c]",
        MARKUP,
        INJECTION,
    ])
    def test_same_as_plain_replacement(self, manipulator, text):
        assert manipulator.encode(text) == text.replace("]]>", SPLIT_TERMINATOR)

    def test_markup_and_controls_unchanged(self, manipulator):
        assert manipulator.encode(MARKUP) == MARKUP
        assert manipulator.encode("a\u0001b") == "a\u0001b"

    def test_streaming_matches_string_form(self, manipulator):
        out = io.StringIO()
        manipulator.encode_to(INJECTION, out)
        assert out.getvalue() == manipulator.encode(INJECTION)


class TestCDATAParsesBack:
    """Test that lxml reads encoded sections back as the original text."""

    @pytest.mark.parametrize("text", [INJECTION, "foo]]]]>]]", "]]]]>>", MARKUP])
    def test_round_trip(self, manipulator, text):
        root = etree.fromstring(f"<root><![CDATA[{manipulator.encode(text)}]]></root>")
        assert root.text == text
        assert len(root) == 0

    def test_filtered_text_stays_inside_section(self, manipulator):
        root = etree.fromstring(f"<root><![CDATA[{manipulator.filter(INJECTION)}]]></root>")
        assert len(root) == 0
        assert root.text == INJECTION.replace("]]>", "")
