"""CDATA section rules.

The only sequence that can end a CDATA section early is ``]]>``, so unlike the
other contexts the decision depends on neighbouring characters. Both
transforms scan the input once and hold back at most two ``]`` at a time.

Encoding splits every terminator across two sections: ``]]>`` becomes
``]]>]]<![CDATA[>``, which parses back to the original text. Filtering
removes the whole terminator along with C0 control characters other than
tab, newline and carriage return.
"""

from enum import Enum
from typing import Optional

from context_manipulator.character.classifier import WHITESPACE_CONTROLS

from .base import Manipulator, Writer

CLOSE_BRACKET = "]"
GREATER_THAN = ">"

# Brackets needed in front of ">" to end the section
TERMINATOR_BRACKETS = 2

# Written in place of each "]]>" when encoding
SPLIT_TERMINATOR = "]]>]]<![CDATA[>"

C0_CONTROL_END = 0x1F


class CDATAOption(Enum):
    """CDATA output contexts."""

    CONTENT = "content"


def is_illegal_cdata_character(char: str) -> bool:
    """Check for C0 control characters other than tab, newline and CR."""
    return ord(char) <= C0_CONTROL_END and char not in WHITESPACE_CONTROLS


class CDATAManipulator(Manipulator):
    """Encoder and filter for text placed inside ``<![CDATA[ ... ]]>``."""

    def __init__(
        self,
        option: CDATAOption = CDATAOption.CONTENT,
        correlation_id: Optional[str] = None
    ) -> None:
        super().__init__(option, correlation_id)

    def _encode_into(self, text: str, write: Writer) -> None:
        pending = 0
        for char in text:
            if char == CLOSE_BRACKET:
                if pending == TERMINATOR_BRACKETS:
                    write(CLOSE_BRACKET)
                else:
                    pending += 1
                continue

            if char == GREATER_THAN and pending == TERMINATOR_BRACKETS:
                write(SPLIT_TERMINATOR)
            else:
                if pending:
                    write(CLOSE_BRACKET * pending)
                write(char)
            pending = 0

        if pending:
            write(CLOSE_BRACKET * pending)

    def _filter_into(self, text: str, write: Writer) -> None:
        # pending: brackets held back; trailing: brackets already written
        # directly before the current position
        pending = 0
        trailing = 0
        for char in text:
            if is_illegal_cdata_character(char):
                continue

            if char == CLOSE_BRACKET:
                if pending == TERMINATOR_BRACKETS:
                    write(CLOSE_BRACKET)
                    trailing = min(trailing + 1, TERMINATOR_BRACKETS)
                else:
                    pending += 1
                continue

            if char == GREATER_THAN and pending + trailing >= TERMINATOR_BRACKETS:
                # Drop the terminator; the written brackets stay in front of
                # whatever comes next
                pending = 0
                continue

            if pending:
                write(CLOSE_BRACKET * pending)
            write(char)
            pending = 0
            trailing = 0

        if pending:
            write(CLOSE_BRACKET * pending)
