"""JSON string value rules.

Only ASCII letters and digits survive untouched. The JSON short escapes are
used where they exist; everything else becomes ``\\uHHHH`` so encoded values
can never smuggle markup or script into a page.
"""

from enum import Enum
from typing import FrozenSet, Optional

from context_manipulator.character.classifier import (
    is_alpha_numeric,
    slash_escape,
    to_hex,
)

from .base import CharacterManipulator


class JSONOption(Enum):
    """JSON output contexts."""

    JSON_VALUE = "json_value"

    @property
    def escape_characters(self) -> FrozenSet[str]:
        """Characters written as a backslash escape."""
        return ESCAPE_CHARACTERS


ESCAPE_CHARACTERS: FrozenSet[str] = frozenset('\b\t\n\f\r"\\/')


class JSONManipulator(CharacterManipulator):
    """Encoder and filter for JSON string values."""

    def __init__(
        self,
        option: JSONOption = JSONOption.JSON_VALUE,
        correlation_id: Optional[str] = None
    ) -> None:
        super().__init__(option, correlation_id)
        self._escape = option.escape_characters

    def correct_character(self, char: str) -> str:
        if is_alpha_numeric(char):
            return char
        if char in self._escape:
            return slash_escape(char)
        return "\\u" + to_hex(char).zfill(4)
