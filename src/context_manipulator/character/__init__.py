"""Character processing layer for the context manipulator.

This module provides the character classification helpers the context rule
modules are built on.
"""

from .classifier import (
    WHITESPACE_CONTROLS,
    combine_sets,
    is_alpha_numeric,
    is_in_set,
    is_same,
    iter_code_units,
    slash_escape,
    to_hex,
)

__all__ = [
    "WHITESPACE_CONTROLS",
    "combine_sets",
    "is_alpha_numeric",
    "is_in_set",
    "is_same",
    "iter_code_units",
    "slash_escape",
    "to_hex",
]
