"""Context identifiers and the manipulator registry.

The registry maps context identifiers to shared manipulator instances. It is
created holding one binding for every ``ManipulationType`` and can be
extended with caller-defined contexts at runtime.
"""

import threading
from enum import Enum
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from context_manipulator.manipulation import (
    CDATAManipulator,
    CDATAOption,
    HTMLManipulator,
    HTMLOption,
    JavaScriptManipulator,
    JavaScriptOption,
    JSONManipulator,
    JSONOption,
    Manipulator,
    URIManipulator,
    URIOption,
    XMLManipulator,
    XMLOption,
)
from context_manipulator.shared.logging import get_logger

Binding = Tuple[Optional[Hashable], Optional[Manipulator]]


class ManipulationType(Enum):
    """Default output contexts."""

    HTML_CONTENT = "html_content"
    HTML_UNQUOTED_ATTRIBUTE = "html_unquoted_attribute"
    HTML_SINGLE_QUOTE_ATTRIBUTE = "html_single_quote_attribute"
    HTML_DOUBLE_QUOTE_ATTRIBUTE = "html_double_quote_attribute"
    JAVASCRIPT_HTML = "javascript_html"
    JAVASCRIPT_ATTRIBUTE = "javascript_attribute"
    JAVASCRIPT_BLOCK = "javascript_block"
    JAVASCRIPT_SOURCE = "javascript_source"
    JSON_VALUE = "json_value"
    URI_COMPONENT = "uri_component"
    URI_STRICT_COMPONENT = "uri_strict_component"
    XML_CONTENT = "xml_content"
    XML_SINGLE_QUOTE_ATTRIBUTE = "xml_single_quote_attribute"
    XML_DOUBLE_QUOTE_ATTRIBUTE = "xml_double_quote_attribute"
    XML_COMMENT = "xml_comment"
    CDATA_CONTENT = "cdata_content"

    @property
    def option(self) -> Enum:
        """Rule module variant this context is built from."""
        return _BUILDERS[self][1]

    def create_manipulator(self, correlation_id: Optional[str] = None) -> Manipulator:
        """Build a new manipulator for this context."""
        manipulator_class, option = _BUILDERS[self]
        return manipulator_class(option, correlation_id)

    @classmethod
    def from_name(cls, name: str) -> "ManipulationType":
        """Look up a context by name.

        Matching ignores case and treats ``-`` and ``_`` alike, so
        ``"html-content"`` and ``"HTML_CONTENT"`` name the same context.

        Raises:
            ValueError: If no context has that name
        """
        normalized = name.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown context name: {name!r}") from None


_BUILDERS: Dict[ManipulationType, Tuple[type, Enum]] = {
    ManipulationType.HTML_CONTENT: (HTMLManipulator, HTMLOption.CONTENT),
    ManipulationType.HTML_UNQUOTED_ATTRIBUTE: (
        HTMLManipulator, HTMLOption.UNQUOTED_ATTRIBUTE
    ),
    ManipulationType.HTML_SINGLE_QUOTE_ATTRIBUTE: (
        HTMLManipulator, HTMLOption.SINGLE_QUOTE_ATTRIBUTE
    ),
    ManipulationType.HTML_DOUBLE_QUOTE_ATTRIBUTE: (
        HTMLManipulator, HTMLOption.DOUBLE_QUOTE_ATTRIBUTE
    ),
    ManipulationType.JAVASCRIPT_HTML: (JavaScriptManipulator, JavaScriptOption.HTML),
    ManipulationType.JAVASCRIPT_ATTRIBUTE: (
        JavaScriptManipulator, JavaScriptOption.ATTRIBUTE
    ),
    ManipulationType.JAVASCRIPT_BLOCK: (JavaScriptManipulator, JavaScriptOption.BLOCK),
    ManipulationType.JAVASCRIPT_SOURCE: (JavaScriptManipulator, JavaScriptOption.SOURCE),
    ManipulationType.JSON_VALUE: (JSONManipulator, JSONOption.JSON_VALUE),
    ManipulationType.URI_COMPONENT: (URIManipulator, URIOption.COMPONENT),
    ManipulationType.URI_STRICT_COMPONENT: (URIManipulator, URIOption.COMPONENT_STRICT),
    ManipulationType.XML_CONTENT: (XMLManipulator, XMLOption.CONTENT),
    ManipulationType.XML_SINGLE_QUOTE_ATTRIBUTE: (
        XMLManipulator, XMLOption.SINGLE_QUOTE_ATTRIBUTE
    ),
    ManipulationType.XML_DOUBLE_QUOTE_ATTRIBUTE: (
        XMLManipulator, XMLOption.DOUBLE_QUOTE_ATTRIBUTE
    ),
    ManipulationType.XML_COMMENT: (XMLManipulator, XMLOption.COMMENT_CONTENT),
    ManipulationType.CDATA_CONTENT: (CDATAManipulator, CDATAOption.CONTENT),
}


class ManipulatorRegistry:
    """Registry mapping context identifiers to manipulators."""

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        """Initialize the registry with a binding for every default context.

        Args:
            correlation_id: Optional correlation ID for request tracking
        """
        self._manipulators: Dict[Hashable, Manipulator] = {}
        self._lock = threading.RLock()
        self._logger = get_logger(__name__, correlation_id, "registry")

        for context in ManipulationType:
            self.register(context, context.create_manipulator(correlation_id))

    def register(self, context: Hashable, manipulator: Manipulator) -> None:
        """Install or replace the manipulator for a context.

        Args:
            context: Any hashable context identifier
            manipulator: Manipulator to serve that context
        """
        with self._lock:
            previous = self._manipulators.get(context)
            self._manipulators[context] = manipulator

        extra = {"context": repr(context), "manipulator": manipulator.name}
        if previous is None:
            self._logger.debug("Manipulator registered", extra=extra)
        else:
            extra["previous"] = previous.name
            self._logger.info("Manipulator replaced", extra=extra)

    def register_all(self, bindings: Optional[Iterable[Optional[Binding]]]) -> None:
        """Install several bindings at once.

        ``None`` bindings, ``None`` elements and pairs with a ``None`` part
        are skipped.

        Args:
            bindings: Iterable of ``(context, manipulator)`` pairs
        """
        if bindings is None:
            return

        with self._lock:
            for binding in bindings:
                if binding is None or binding[0] is None or binding[1] is None:
                    self._logger.debug(
                        "Skipping incomplete binding", extra={"binding": repr(binding)}
                    )
                    continue
                context, manipulator = binding
                self.register(context, manipulator)

    def get(self, context: Hashable) -> Optional[Manipulator]:
        """Get the manipulator bound to a context.

        Returns:
            The manipulator, or None if the context is not bound
        """
        with self._lock:
            return self._manipulators.get(context)

    def contexts(self) -> List[Hashable]:
        """Snapshot of the bound context identifiers, in registration order."""
        with self._lock:
            return list(self._manipulators)

    def __contains__(self, context: Hashable) -> bool:
        with self._lock:
            return context in self._manipulators

    def __len__(self) -> int:
        with self._lock:
            return len(self._manipulators)


# Global registry instance
_default_registry = ManipulatorRegistry()


def default_registry() -> ManipulatorRegistry:
    """Process-wide registry used by the module-level facade functions."""
    return _default_registry


def register_manipulator(context: Hashable, manipulator: Manipulator) -> None:
    """Register a manipulator in the default registry."""
    _default_registry.register(context, manipulator)


def get_manipulator(context: Hashable) -> Optional[Manipulator]:
    """Get a manipulator from the default registry."""
    return _default_registry.get(context)
