"""Command-line interface module for the context manipulator.

This module provides the ``context-manipulator`` tool for encoding and
filtering text from the shell.
"""

from .main import main

__all__ = ["main"]
