"""Transform contract shared by every context manipulator.

A manipulator is bound to one option (a context variant) at construction and
holds only read-only rule tables, so a single instance can serve any number
of concurrent callers. Each manipulator offers four operations:

- ``encode(text)`` / ``encode_to(text, sink)`` substitute unsafe characters
- ``filter(text)`` / ``filter_to(text, sink)`` drop unsafe characters

``None`` text is a no-op everywhere: the string forms return ``None`` and
the sink forms write nothing.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, List, Optional, TextIO

from context_manipulator.character.classifier import is_same, iter_code_units
from context_manipulator.shared.errors import InvalidArgumentError, SinkWriteError
from context_manipulator.shared.logging import get_logger

Writer = Callable[[str], Any]

# Exceptions a text sink may raise from write(): OSError for I/O failures,
# ValueError for operations on a closed stream
SINK_FAILURES = (OSError, ValueError)


class Manipulator(ABC):
    """Base class for all context manipulators."""

    def __init__(self, option: Enum, correlation_id: Optional[str] = None) -> None:
        """Initialize the manipulator.

        Args:
            option: Context variant whose rule tables this instance applies
            correlation_id: Optional correlation ID for request tracking
        """
        self._option = option
        self._logger = get_logger(__name__, correlation_id, self.__class__.__name__)

    @property
    def option(self) -> Enum:
        """Context variant this manipulator is bound to."""
        return self._option

    @property
    def name(self) -> str:
        """Human-readable name used in logs and error messages."""
        return f"{self.__class__.__name__}({self._option.name})"

    def __repr__(self) -> str:
        return f"<{self.name}>"

    def encode(self, text: Optional[str]) -> Optional[str]:
        """Encode text for this manipulator's context.

        Args:
            text: Untrusted input text

        Returns:
            Encoded text, or None when text is None
        """
        if text is None:
            return None
        parts: List[str] = []
        self._encode_into(text, parts.append)
        return "".join(parts)

    def encode_to(self, text: Optional[str], sink: Optional[TextIO]) -> None:
        """Encode text and write the result to a text sink.

        Raises:
            InvalidArgumentError: If sink is None
            SinkWriteError: If the sink fails while being written to
        """
        self._require_sink(sink)
        if text is None:
            return
        self._encode_into(text, self._sink_writer(sink))

    def filter(self, text: Optional[str]) -> Optional[str]:
        """Filter text for this manipulator's context.

        Args:
            text: Untrusted input text

        Returns:
            Text with every unsafe character removed, or None when text is None
        """
        if text is None:
            return None
        parts: List[str] = []
        self._filter_into(text, parts.append)
        return "".join(parts)

    def filter_to(self, text: Optional[str], sink: Optional[TextIO]) -> None:
        """Filter text and write the result to a text sink.

        Raises:
            InvalidArgumentError: If sink is None
            SinkWriteError: If the sink fails while being written to
        """
        self._require_sink(sink)
        if text is None:
            return
        self._filter_into(text, self._sink_writer(sink))

    @abstractmethod
    def _encode_into(self, text: str, write: Writer) -> None:
        """Encode ``text``, passing each output chunk to ``write``."""

    @abstractmethod
    def _filter_into(self, text: str, write: Writer) -> None:
        """Filter ``text``, passing each kept chunk to ``write``."""

    def _require_sink(self, sink: Optional[TextIO]) -> None:
        if sink is None:
            raise InvalidArgumentError(
                f"{self.name} requires an output sink, got None", argument="sink"
            )

    def _sink_writer(self, sink: TextIO) -> Writer:
        """Wrap ``sink.write`` so sink failures surface as SinkWriteError."""
        def write(chunk: str) -> None:
            try:
                sink.write(chunk)
            except SINK_FAILURES as e:
                self._logger.error(
                    "Sink write failed",
                    extra={"manipulator": self.name, "sink_type": type(sink).__name__},
                )
                raise SinkWriteError(
                    f"An error occurred while writing {self.name} output: {e}",
                    manipulator=self.name,
                ) from e

        return write


class CharacterManipulator(Manipulator):
    """Manipulator whose rules decide each code unit in isolation.

    Subclasses implement ``correct_character``. Encoding concatenates the
    corrected form of every unit; filtering keeps a unit only when its
    corrected form is exactly the unit itself.
    """

    @abstractmethod
    def correct_character(self, char: str) -> str:
        """Return the context-safe form of a single code unit."""

    def _encode_into(self, text: str, write: Writer) -> None:
        for unit in iter_code_units(text):
            write(self.correct_character(unit))

    def _filter_into(self, text: str, write: Writer) -> None:
        for unit in iter_code_units(text):
            if is_same(unit, self.correct_character(unit)):
                write(unit)
