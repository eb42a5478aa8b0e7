"""Tests for the JSON context rules."""

import json

import pytest

from context_manipulator.manipulation.json_manipulator import JSONManipulator, JSONOption

PAYLOAD = '"}{"CustomData":["foo bar"]}'


@pytest.fixture
def manipulator():
    return JSONManipulator()


class TestJSONEncode:
    """Test JSON value encoding."""

    def test_default_option(self, manipulator):
        assert manipulator.option is JSONOption.JSON_VALUE

    def test_breakout_payload(self, manipulator):
        assert manipulator.encode(PAYLOAD) == (
            '\\"\\u007d\\u007b\\"CustomData\\"\\u003a\\u005b\\"foo\\u0020bar\\"\\u005d\\u007d'
        )

    @pytest.mark.parametrize("char,expected", [
        ("\b", "\\b"),
        ("\t", "\\t"),
        ("\n", "\\n"),
        ("\f", "\\f"),
        ("\r", "\\r"),
        ('"', '\\"'),
        ("\\", "\\\\"),
        ("/", "\\/"),
        ("'", "\\u0027"),
        ("<", "\\u003c"),
        ("\u0000", "\\u0000"),
        ("\u2222", "\\u2222"),
    ])
    def test_single_characters(self, manipulator, char, expected):
        assert manipulator.encode(char) == expected

    def test_astral_character(self, manipulator):
        assert manipulator.encode("\U0001F600") == "\\ud83d\\ude00"

    @pytest.mark.parametrize("text", [
        PAYLOAD,
        "</script><script>alert(1)</script>",
        "tab\there\r\nline   \u00e9 \U0001F600 \\ / \u0001",
    ])
    def test_json_loads_recovers_original(self, manipulator, text):
        """Test that a JSON parser reads the encoded value back unchanged."""
        assert json.loads(f'"{manipulator.encode(text)}"') == text

    def test_embedded_in_document(self, manipulator):
        document = f'{{"name": "{manipulator.encode(PAYLOAD)}", "admin": false}}'
        assert json.loads(document) == {"name": PAYLOAD, "admin": False}


class TestJSONFilter:
    """Test JSON value filtering."""

    def test_breakout_payload(self, manipulator):
        assert manipulator.filter(PAYLOAD) == "CustomDatafoobar"

    def test_keeps_only_ascii_alphanumerics(self, manipulator):
        assert manipulator.filter("a-b_c d\u00e9f9") == "abcdf9"
