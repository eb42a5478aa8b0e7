"""JavaScript string context rules.

Decision order for each code unit:

1. alphanumeric: pass through
2. in the variant's escape set: backslash escape
3. in the variant's ignore set: pass through
4. anything else: ``\\xHH`` below 128, ``\\uHHHH`` otherwise

Escaping is checked before ignoring, so a character in both sets (``-`` and
``/`` for the HTML and BLOCK variants) is always escaped.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional

from context_manipulator.character.classifier import (
    combine_sets,
    is_alpha_numeric,
    slash_escape,
    to_hex,
)

from .base import CharacterManipulator

# Always backslash escaped
BASE_ESCAPE: FrozenSet[str] = frozenset("\b\t\n\f\r\\")

# Always allowed through
BASE_IGNORE: FrozenSet[str] = frozenset("~`!@#$%^*()_+={}|[]:;<>?,.-/ ")

ASCII_LIMIT = 128


class JavaScriptOption(Enum):
    """JavaScript embedding contexts."""

    HTML = "html"
    ATTRIBUTE = "attribute"
    BLOCK = "block"
    SOURCE = "source"

    @property
    def escape_characters(self) -> FrozenSet[str]:
        """Characters written as a backslash escape."""
        return _ESCAPE[self]

    @property
    def ignore_characters(self) -> FrozenSet[str]:
        """Non-alphanumeric characters passed through unchanged."""
        return _IGNORE[self]


_ESCAPE: Dict[JavaScriptOption, FrozenSet[str]] = {
    # "-" and "/" so "-->" and "</script>" cannot close the surrounding element
    JavaScriptOption.HTML: combine_sets(BASE_ESCAPE, "-/"),
    JavaScriptOption.ATTRIBUTE: BASE_ESCAPE,
    JavaScriptOption.BLOCK: combine_sets(BASE_ESCAPE, "\"'-/"),
    JavaScriptOption.SOURCE: combine_sets(BASE_ESCAPE, "\"'"),
}

_IGNORE: Dict[JavaScriptOption, FrozenSet[str]] = {
    JavaScriptOption.HTML: BASE_IGNORE,
    JavaScriptOption.ATTRIBUTE: BASE_IGNORE,
    JavaScriptOption.BLOCK: BASE_IGNORE,
    JavaScriptOption.SOURCE: combine_sets(BASE_IGNORE, "&"),
}


def hex_escape(char: str) -> str:
    """Zero-padded ``\\x`` or ``\\u`` escape for a code unit."""
    if ord(char) < ASCII_LIMIT:
        return "\\x" + to_hex(char).zfill(2)
    return "\\u" + to_hex(char).zfill(4)


class JavaScriptManipulator(CharacterManipulator):
    """Encoder and filter for JavaScript string literals."""

    def __init__(
        self, option: JavaScriptOption, correlation_id: Optional[str] = None
    ) -> None:
        super().__init__(option, correlation_id)
        self._escape = option.escape_characters
        self._ignore = option.ignore_characters

    def correct_character(self, char: str) -> str:
        if is_alpha_numeric(char):
            return char
        if char in self._escape:
            return slash_escape(char)
        if char in self._ignore:
            return char
        return hex_escape(char)
