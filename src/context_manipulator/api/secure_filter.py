"""Filtering facade.

Mirrors ``secure_encoder`` but removes unsafe characters instead of
substituting them. Useful where no escape syntax exists, or where the
consumer would mangle escapes.
"""

from typing import Hashable, Optional, TextIO

from context_manipulator.manipulation import Manipulator
from context_manipulator.shared.errors import UnknownContextError
from context_manipulator.shared.logging import get_logger

from .registry import ManipulationType, ManipulatorRegistry, default_registry


class SecureFilter:
    """Strips unsafe characters from untrusted text for an output context."""

    def __init__(
        self,
        registry: Optional[ManipulatorRegistry] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        self._logger = get_logger(__name__, correlation_id, "secure_filter")

    def _resolve(self, context: Hashable) -> Manipulator:
        manipulator = self.registry.get(context)
        if manipulator is None:
            self._logger.error(
                "No manipulator for context",
                extra={"context": repr(context), "operation": "filter"},
                exc_info=False,
            )
            raise UnknownContextError(context)
        return manipulator

    def filter(
        self,
        context: Hashable,
        text: Optional[str],
        out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Filter text for any registered context.

        Args:
            context: Context identifier bound in the registry
            text: Untrusted input text
            out: Optional text sink to write the result to

        Returns:
            The filtered text, or None when writing to ``out`` or when text
            is None

        Raises:
            UnknownContextError: If the context is not registered
            SinkWriteError: If ``out`` fails while being written to
        """
        manipulator = self._resolve(context)
        if out is None:
            return manipulator.filter(text)
        manipulator.filter_to(text, out)
        return None

    def filter_html_content(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.HTML_CONTENT, text, out)

    def filter_html_unquoted_attribute(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.HTML_UNQUOTED_ATTRIBUTE, text, out)

    def filter_html_in_single_quote_attribute(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.HTML_SINGLE_QUOTE_ATTRIBUTE, text, out)

    def filter_html_in_double_quote_attribute(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.HTML_DOUBLE_QUOTE_ATTRIBUTE, text, out)

    def filter_javascript_in_html(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.JAVASCRIPT_HTML, text, out)

    def filter_javascript_in_attribute(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.JAVASCRIPT_ATTRIBUTE, text, out)

    def filter_javascript_in_block(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.JAVASCRIPT_BLOCK, text, out)

    def filter_javascript_in_source(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.JAVASCRIPT_SOURCE, text, out)

    def filter_json_value(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.JSON_VALUE, text, out)

    def filter_uri_component(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.URI_COMPONENT, text, out)

    def filter_uri_component_strict(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.URI_STRICT_COMPONENT, text, out)

    def filter_xml_content(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.XML_CONTENT, text, out)

    def filter_xml_in_single_quote_attribute(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.XML_SINGLE_QUOTE_ATTRIBUTE, text, out)

    def filter_xml_in_double_quote_attribute(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.XML_DOUBLE_QUOTE_ATTRIBUTE, text, out)

    def filter_xml_comment_content(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.XML_COMMENT, text, out)

    def filter_cdata_content(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        return self.filter(ManipulationType.CDATA_CONTENT, text, out)


_default_filter = SecureFilter()


def filter_text(
    context: Hashable, text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    """Filter text for a context bound in the default registry."""
    return _default_filter.filter(context, text, out)


def filter_html_content(text: Optional[str], out: Optional[TextIO] = None) -> Optional[str]:
    """Strip markup characters from text placed between HTML tags.

    Example:
        >>> filter_html_content("<b>hi</b>")
        'bhi/b'
    """
    return _default_filter.filter_html_content(text, out)


def filter_html_unquoted_attribute(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    return _default_filter.filter_html_unquoted_attribute(text, out)


def filter_html_in_single_quote_attribute(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    return _default_filter.filter_html_in_single_quote_attribute(text, out)


def filter_html_in_double_quote_attribute(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    return _default_filter.filter_html_in_double_quote_attribute(text, out)


def filter_javascript_in_html(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    return _default_filter.filter_javascript_in_html(text, out)


def filter_javascript_in_attribute(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    return _default_filter.filter_javascript_in_attribute(text, out)


def filter_javascript_in_block(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    return _default_filter.filter_javascript_in_block(text, out)


def filter_javascript_in_source(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    return _default_filter.filter_javascript_in_source(text, out)


def filter_json_value(text: Optional[str], out: Optional[TextIO] = None) -> Optional[str]:
    return _default_filter.filter_json_value(text, out)


def filter_uri_component(text: Optional[str], out: Optional[TextIO] = None) -> Optional[str]:
    return _default_filter.filter_uri_component(text, out)


def filter_uri_component_strict(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    return _default_filter.filter_uri_component_strict(text, out)


def filter_xml_content(text: Optional[str], out: Optional[TextIO] = None) -> Optional[str]:
    return _default_filter.filter_xml_content(text, out)


def filter_xml_in_single_quote_attribute(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    return _default_filter.filter_xml_in_single_quote_attribute(text, out)


def filter_xml_in_double_quote_attribute(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    return _default_filter.filter_xml_in_double_quote_attribute(text, out)


def filter_xml_comment_content(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    return _default_filter.filter_xml_comment_content(text, out)


def filter_cdata_content(text: Optional[str], out: Optional[TextIO] = None) -> Optional[str]:
    """Remove CDATA terminators and control characters."""
    return _default_filter.filter_cdata_content(text, out)
