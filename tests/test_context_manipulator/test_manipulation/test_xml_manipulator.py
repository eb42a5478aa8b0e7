"""Tests for the XML context rules."""

import pytest
from lxml import etree

from context_manipulator.manipulation.xml_manipulator import (
    XMLManipulator,
    XMLOption,
    is_illegal_xml_character,
)

MARKUP = (
    "<!--this! is/ a; comment: --><foo attribute=value>text</foo>"
    "<bar attribute=\"doublevalue\">text2</bar>"
    "<baz attribute='singlevalue'>)(*#$!@#?</baz>"
)

ENCODED_CONTENT = (
    "&lt;&#x21;--this&#x21; is&#x2f; a; comment: --&gt;"
    "&lt;foo attribute&#x3d;value&gt;text&lt;&#x2f;foo&gt;"
    "&lt;bar attribute&#x3d;&quot;doublevalue&quot;&gt;text2&lt;&#x2f;bar&gt;"
    "&lt;baz attribute&#x3d;&apos;singlevalue&apos;&gt;"
    ")(&#x2a;&#x23;&#x24;&#x21;&#x40;&#x23;&#x3f;&lt;&#x2f;baz&gt;"
)

FILTERED_CONTENT = (
    "--this is a; comment: --foo attributevaluetextfoo"
    "bar attributedoublevaluetext2barbaz attributesinglevalue)(baz"
)

ROUND_TRIP = "Tom & Jerry <said> \"hi\" it's 5 > 3 -- a=b @#$%! \u00e9\u2022 ]]> {ok}"


class TestXMLEncode:
    """Test XML encoding."""

    def test_content(self):
        assert XMLManipulator(XMLOption.CONTENT).encode(MARKUP) == ENCODED_CONTENT

    def test_double_quote_attribute_keeps_apostrophe(self):
        manipulator = XMLManipulator(XMLOption.DOUBLE_QUOTE_ATTRIBUTE)
        assert manipulator.encode(MARKUP) == ENCODED_CONTENT.replace("&apos;", "'")

    def test_single_quote_attribute_keeps_quote(self):
        manipulator = XMLManipulator(XMLOption.SINGLE_QUOTE_ATTRIBUTE)
        assert manipulator.encode(MARKUP) == ENCODED_CONTENT.replace("&quot;", '"')

    def test_comment_escapes_only_hyphens(self):
        manipulator = XMLManipulator(XMLOption.COMMENT_CONTENT)
        assert manipulator.encode(MARKUP) == (
            "<!&#x2d;&#x2d;this! is/ a; comment: &#x2d;&#x2d;>"
            "<foo attribute=value>text</foo>"
            "<bar attribute=\"doublevalue\">text2</bar>"
            "<baz attribute='singlevalue'>)(*#$!@#?</baz>"
        )

    @pytest.mark.parametrize("char,expected", [
        ("&", "&amp;"),
        ("'", "&apos;"),
        ("\u00a0", "&#xa0;"),
        ("\u2022", "&#x2022;"),
        ("\u0085", "&#x85;"),
    ])
    def test_single_characters(self, char, expected):
        assert XMLManipulator(XMLOption.CONTENT).encode(char) == expected

    @pytest.mark.parametrize("char", ["\u0000", "\u0008", "\u007f", "\u0084", "\u0086", "\ufdd0", "\ufddf"])
    def test_illegal_characters_removed(self, char):
        """Test that discouraged characters are dropped from the output."""
        manipulator = XMLManipulator(XMLOption.CONTENT)
        assert manipulator.encode(f"a{char}b") == "ab"
        assert XMLManipulator.replacement() == ""

    def test_whitespace_controls_kept(self):
        assert XMLManipulator(XMLOption.CONTENT).encode("a\tb\nc\rd") == "a\tb\nc\rd"

    def test_is_illegal_xml_character(self):
        assert is_illegal_xml_character("\u0001") is True
        assert is_illegal_xml_character("\u0085") is False
        assert is_illegal_xml_character("\ufdd5") is True
        assert is_illegal_xml_character("\ufde0") is False


class TestXMLFilter:
    """Test XML filtering."""

    def test_content(self):
        assert XMLManipulator(XMLOption.CONTENT).filter(MARKUP) == FILTERED_CONTENT

    def test_double_quote_attribute(self):
        manipulator = XMLManipulator(XMLOption.DOUBLE_QUOTE_ATTRIBUTE)
        assert manipulator.filter(MARKUP) == (
            "--this is a; comment: --foo attributevaluetextfoo"
            "bar attributedoublevaluetext2barbaz attribute'singlevalue')(baz"
        )

    def test_single_quote_attribute(self):
        manipulator = XMLManipulator(XMLOption.SINGLE_QUOTE_ATTRIBUTE)
        assert manipulator.filter(MARKUP) == (
            "--this is a; comment: --foo attributevaluetextfoo"
            "bar attribute\"doublevalue\"text2barbaz attributesinglevalue)(baz"
        )

    def test_comment(self):
        manipulator = XMLManipulator(XMLOption.COMMENT_CONTENT)
        assert manipulator.filter(MARKUP) == (
            "<!this! is/ a; comment: ><foo attribute=value>text</foo>"
            "<bar attribute=\"doublevalue\">text2</bar>"
            "<baz attribute='singlevalue'>)(*#$!@#?</baz>"
        )


class TestXMLParsesBack:
    """Test that lxml reads encoded output back as the original text."""

    def test_content(self):
        encoded = XMLManipulator(XMLOption.CONTENT).encode(ROUND_TRIP)
        root = etree.fromstring(f"<root>{encoded}</root>")
        assert root.text == ROUND_TRIP
        assert len(root) == 0

    def test_double_quote_attribute(self):
        encoded = XMLManipulator(XMLOption.DOUBLE_QUOTE_ATTRIBUTE).encode(ROUND_TRIP)
        root = etree.fromstring(f'<root value="{encoded}"/>')
        assert root.get("value") == ROUND_TRIP

    def test_single_quote_attribute(self):
        encoded = XMLManipulator(XMLOption.SINGLE_QUOTE_ATTRIBUTE).encode(ROUND_TRIP)
        root = etree.fromstring(f"<root value='{encoded}'/>")
        assert root.get("value") == ROUND_TRIP

    def test_comment(self):
        """Test that hyphens cannot terminate the comment early."""
        encoded = XMLManipulator(XMLOption.COMMENT_CONTENT).encode("a -- b --> <c/> -")
        root = etree.fromstring(f"<root><!--{encoded}--></root>")
        assert len(root) == 1
        assert root[0].tag is etree.Comment
        assert "--" not in root[0].text
        assert not root[0].text.endswith("-")
