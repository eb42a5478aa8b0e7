"""Character classification helpers shared by every context rule module.

Characters are handled as UTF-16 code units: a code point above the Basic
Multilingual Plane is split into its surrogate pair and each half is
classified and escaped on its own, so numeric escapes never exceed four hex
digits.
"""

from typing import Collection, FrozenSet, Iterator, Optional

# ASCII bounds for the alphanumeric fast check
_DIGIT_RANGE = (0x30, 0x39)
_UPPER_RANGE = (0x41, 0x5A)
_LOWER_RANGE = (0x61, 0x7A)

# Supplementary plane split constants
BMP_MAX = 0xFFFF
SUPPLEMENTARY_OFFSET = 0x10000
HIGH_SURROGATE_START = 0xD800
LOW_SURROGATE_START = 0xDC00

# Two-character backslash mnemonics
SLASH_MNEMONICS = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}

# Control characters every markup context tolerates
WHITESPACE_CONTROLS: FrozenSet[str] = frozenset("\t\n\r")


def is_alpha_numeric(char: str) -> bool:
    """Check whether a character is an ASCII letter or digit.

    Args:
        char: Single character (code unit)

    Returns:
        True for 0-9, A-Z and a-z only
    """
    code = ord(char)
    return (
        _LOWER_RANGE[0] <= code <= _LOWER_RANGE[1]
        or _UPPER_RANGE[0] <= code <= _UPPER_RANGE[1]
        or _DIGIT_RANGE[0] <= code <= _DIGIT_RANGE[1]
    )


def is_in_set(char: Optional[str], chars: Optional[Collection[str]]) -> bool:
    """Check membership of a character in a character collection.

    A missing character matches a missing collection; a missing value on
    only one side never matches.
    """
    if char is None and chars is None:
        return True
    if char is None or chars is None:
        return False
    return char in chars


def to_hex(char: str) -> str:
    """Lowercase hex digits of a code unit, without prefix or padding."""
    return format(ord(char), "x")


def slash_escape(char: str) -> str:
    """Backslash-escape a character.

    Backspace, tab, newline, form feed and carriage return map to their
    mnemonics; anything else becomes a backslash followed by the character.
    """
    return SLASH_MNEMONICS.get(char, "\\" + char)


def is_same(char: str, corrected: str) -> bool:
    """Check whether a transform left a character exactly as it was.

    The length check keeps ``"&"`` from matching ``"&amp;"``.
    """
    return len(corrected) == 1 and corrected == char


def combine_sets(
    first: Optional[Collection[str]],
    second: Optional[Collection[str]]
) -> Optional[FrozenSet[str]]:
    """Union two optional character collections.

    Returns:
        The union as a frozenset, or None when both inputs are None
    """
    if first is None and second is None:
        return None
    return frozenset(first or ()) | frozenset(second or ())


def iter_code_units(text: str) -> Iterator[str]:
    """Yield the UTF-16 code units of a string as one-character strings."""
    for char in text:
        code = ord(char)
        if code <= BMP_MAX:
            yield char
        else:
            code -= SUPPLEMENTARY_OFFSET
            yield chr(HIGH_SURROGATE_START + (code >> 10))
            yield chr(LOW_SURROGATE_START + (code & 0x3FF))
