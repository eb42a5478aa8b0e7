"""Exception types raised by the context manipulator.

Every error raised by the library derives from ManipulationError so callers
can catch the whole family with a single clause.
"""

from typing import Any, Hashable, Optional


class ManipulationError(Exception):
    """Base exception for all context manipulator errors."""


class InvalidArgumentError(ManipulationError, ValueError):
    """Raised when a required argument, such as an output sink, is missing."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument


class SinkWriteError(ManipulationError):
    """Raised when the caller-supplied sink fails while being written to.

    The underlying exception is chained as ``__cause__``. The sink is left
    in whatever partially-written state it reached.
    """

    def __init__(self, message: str, manipulator: Optional[str] = None) -> None:
        super().__init__(message)
        self.manipulator = manipulator


class UnknownContextError(ManipulationError, LookupError):
    """Raised when no manipulator is registered for a context identifier."""

    def __init__(self, context: Hashable) -> None:
        super().__init__(f"No manipulator registered for context: {context!r}")
        self.context: Any = context
