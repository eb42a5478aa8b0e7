"""HTML context rules.

Decision order for each code unit:

1. alphanumeric or immune for the variant: pass through
2. present in the entity table: named (or numeric) entity
3. C0/C1 control character: replacement marker
4. anything else: ``&#x<hex>;``
"""

from enum import Enum
from html.entities import codepoint2name
from typing import Dict, FrozenSet, Optional

from context_manipulator.character.classifier import (
    WHITESPACE_CONTROLS,
    is_alpha_numeric,
    to_hex,
)

from .base import CharacterManipulator

# Safe in every HTML variant
BASE_IMMUNE: FrozenSet[str] = frozenset(",;:._()") | WHITESPACE_CONTROLS

# Punctuation with no markup meaning outside of quotes and angle brackets.
# The backtick is left out since some browsers treat it as an attribute quote.
PUNCTUATION_IMMUNE: FrozenSet[str] = frozenset("!#$%*+-/=?@[\\]^{|}~")

# Marker for control characters that must never reach the document
REPLACEMENT_ENTITY = "&#xfffd;"

C0_CONTROL_END = 0x1F
C1_CONTROL_START = 0x7F
C1_CONTROL_END = 0x9F

# Lowest code point taken from the HTML 4 named entity table
NAMED_ENTITY_START = 0xA0


class HTMLOption(Enum):
    """HTML output contexts."""

    CONTENT = "content"
    UNQUOTED_ATTRIBUTE = "unquoted_attribute"
    SINGLE_QUOTE_ATTRIBUTE = "single_quote_attribute"
    DOUBLE_QUOTE_ATTRIBUTE = "double_quote_attribute"

    @property
    def immune_characters(self) -> FrozenSet[str]:
        """Non-alphanumeric characters passed through unchanged."""
        return _IMMUNE[self]


_QUOTED_IMMUNE = BASE_IMMUNE | PUNCTUATION_IMMUNE | {" "}

_IMMUNE: Dict[HTMLOption, FrozenSet[str]] = {
    HTMLOption.CONTENT: _QUOTED_IMMUNE,
    # a space would end the attribute value
    HTMLOption.UNQUOTED_ATTRIBUTE: BASE_IMMUNE | PUNCTUATION_IMMUNE,
    HTMLOption.SINGLE_QUOTE_ATTRIBUTE: _QUOTED_IMMUNE | {'"'},
    HTMLOption.DOUBLE_QUOTE_ATTRIBUTE: _QUOTED_IMMUNE | {"'"},
}


def _create_entity_map() -> Dict[str, str]:
    entities = {
        '"': "&quot;",
        "&": "&amp;",
        "'": "&#x27;",  # &apos; is not an HTML 4 entity
        "<": "&lt;",
        ">": "&gt;",
    }
    for code, name in codepoint2name.items():
        if code >= NAMED_ENTITY_START:
            entities[chr(code)] = f"&{name};"
    return entities


ENTITY_MAP: Dict[str, str] = _create_entity_map()


def is_illegal_html_character(char: str) -> bool:
    """Check for C0 and C1 control characters (DEL included)."""
    code = ord(char)
    return code <= C0_CONTROL_END or C1_CONTROL_START <= code <= C1_CONTROL_END


class HTMLManipulator(CharacterManipulator):
    """Encoder and filter for HTML content and attribute values."""

    def __init__(self, option: HTMLOption, correlation_id: Optional[str] = None) -> None:
        super().__init__(option, correlation_id)
        self._immune = option.immune_characters

    @staticmethod
    def replacement_entity() -> str:
        """Marker written in place of illegal control characters."""
        return REPLACEMENT_ENTITY

    def correct_character(self, char: str) -> str:
        if is_alpha_numeric(char) or char in self._immune:
            return char

        entity = ENTITY_MAP.get(char)
        if entity is not None:
            return entity

        if is_illegal_html_character(char):
            return REPLACEMENT_ENTITY

        return f"&#x{to_hex(char)};"
