"""XML context rules.

Follows the same decision order as the HTML rules, but with only the five
predefined XML entities and a wider set of discouraged characters, which are
deleted outright rather than replaced.
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple

from context_manipulator.character.classifier import (
    WHITESPACE_CONTROLS,
    combine_sets,
    is_alpha_numeric,
    to_hex,
)

from .base import CharacterManipulator

# Safe in every XML variant
BASE_IMMUNE: FrozenSet[str] = combine_sets(",;:._() ", WHITESPACE_CONTROLS)

# Discouraged or forbidden characters, from the XML 1.0 recommendation.
# NEL (0x85) is allowed through.
ILLEGAL_RANGES: List[Tuple[int, int]] = [
    (0x0000, 0x001F),
    (0x007F, 0x0084),
    (0x0086, 0x009F),
    (0xFDD0, 0xFDDF),
]

# Control characters are dropped, not replaced
REPLACEMENT = ""

ENTITY_MAP: Dict[str, str] = {
    '"': "&quot;",
    "&": "&amp;",
    "'": "&apos;",
    "<": "&lt;",
    ">": "&gt;",
}


class XMLOption(Enum):
    """XML output contexts."""

    CONTENT = "content"
    SINGLE_QUOTE_ATTRIBUTE = "single_quote_attribute"
    DOUBLE_QUOTE_ATTRIBUTE = "double_quote_attribute"
    COMMENT_CONTENT = "comment_content"

    @property
    def immune_characters(self) -> FrozenSet[str]:
        """Non-alphanumeric characters passed through unchanged."""
        return _IMMUNE[self]


_IMMUNE: Dict[XMLOption, FrozenSet[str]] = {
    XMLOption.CONTENT: combine_sets(BASE_IMMUNE, "-"),
    XMLOption.SINGLE_QUOTE_ATTRIBUTE: combine_sets(BASE_IMMUNE, "-\""),
    XMLOption.DOUBLE_QUOTE_ATTRIBUTE: combine_sets(BASE_IMMUNE, "-'"),
    # "--" may not appear inside a comment, so "-" is never immune here
    XMLOption.COMMENT_CONTENT: combine_sets(BASE_IMMUNE, "\"'<!>#$%^*+/=?@[\\]{|}~"),
}


def is_illegal_xml_character(char: str) -> bool:
    """Check whether a character falls in one of the discouraged ranges."""
    code = ord(char)
    return any(start <= code <= end for start, end in ILLEGAL_RANGES)


class XMLManipulator(CharacterManipulator):
    """Encoder and filter for XML content, attribute values and comments."""

    def __init__(self, option: XMLOption, correlation_id: Optional[str] = None) -> None:
        super().__init__(option, correlation_id)
        self._immune = option.immune_characters

    @staticmethod
    def replacement() -> str:
        """Text written in place of illegal characters."""
        return REPLACEMENT

    def correct_character(self, char: str) -> str:
        if is_alpha_numeric(char) or char in self._immune:
            return char

        entity = ENTITY_MAP.get(char)
        if entity is not None:
            return entity

        if is_illegal_xml_character(char):
            return REPLACEMENT

        return f"&#x{to_hex(char)};"
