"""URI component rules.

Characters outside the variant's immune set are percent-encoded from their
code unit value. The hex digits are not padded and not split into UTF-8
octets (U+0732 becomes ``%732``); existing consumers depend on this form.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional

from context_manipulator.character.classifier import is_alpha_numeric, to_hex

from .base import CharacterManipulator


class URIOption(Enum):
    """URI component contexts."""

    COMPONENT = "component"
    COMPONENT_STRICT = "component_strict"

    @property
    def immune_characters(self) -> FrozenSet[str]:
        """Non-alphanumeric characters passed through unchanged."""
        return _IMMUNE[self]


_IMMUNE: Dict[URIOption, FrozenSet[str]] = {
    # mirrors JavaScript's encodeURIComponent
    URIOption.COMPONENT: frozenset("-_.~!*'()"),
    # RFC 3986 unreserved characters
    URIOption.COMPONENT_STRICT: frozenset("-_.~"),
}


class URIManipulator(CharacterManipulator):
    """Encoder and filter for URI components."""

    def __init__(self, option: URIOption, correlation_id: Optional[str] = None) -> None:
        super().__init__(option, correlation_id)
        self._immune = option.immune_characters

    def correct_character(self, char: str) -> str:
        if is_alpha_numeric(char) or char in self._immune:
            return char
        return "%" + to_hex(char)
