"""Encoding facade.

Progressive API disclosure:
- Level 1: module-level functions such as ``encode_html_content(text)``
- Level 2: ``SecureEncoder`` bound to a caller-owned registry
- Level 3: ``SecureEncoder.encode(context, text)`` for custom contexts

Every function has a string form and a sink form: pass ``out`` to stream the
result into any object with a ``write(str)`` method.
"""

from typing import Hashable, Optional, TextIO

from context_manipulator.manipulation import Manipulator
from context_manipulator.shared.errors import UnknownContextError
from context_manipulator.shared.logging import get_logger

from .registry import ManipulationType, ManipulatorRegistry, default_registry


class SecureEncoder:
    """Encodes untrusted text for a chosen output context."""

    def __init__(
        self,
        registry: Optional[ManipulatorRegistry] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the encoder.

        Args:
            registry: Registry to resolve contexts from; the default registry
                when omitted
            correlation_id: Optional correlation ID for request tracking
        """
        self.registry = registry if registry is not None else default_registry()
        self._logger = get_logger(__name__, correlation_id, "secure_encoder")

    def _resolve(self, context: Hashable) -> Manipulator:
        manipulator = self.registry.get(context)
        if manipulator is None:
            self._logger.error(
                "No manipulator for context",
                extra={"context": repr(context), "operation": "encode"},
                exc_info=False,
            )
            raise UnknownContextError(context)
        return manipulator

    def encode(
        self,
        context: Hashable,
        text: Optional[str],
        out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode text for any registered context.

        Args:
            context: Context identifier bound in the registry
            text: Untrusted input text
            out: Optional text sink to write the result to

        Returns:
            The encoded text, or None when writing to ``out`` or when text
            is None

        Raises:
            UnknownContextError: If the context is not registered
            SinkWriteError: If ``out`` fails while being written to
        """
        manipulator = self._resolve(context)
        if out is None:
            return manipulator.encode(text)
        manipulator.encode_to(text, out)
        return None

    def encode_html_content(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode text placed between HTML tags."""
        return self.encode(ManipulationType.HTML_CONTENT, text, out)

    def encode_html_unquoted_attribute(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode an unquoted HTML attribute value."""
        return self.encode(ManipulationType.HTML_UNQUOTED_ATTRIBUTE, text, out)

    def encode_html_in_single_quote_attribute(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode a single-quoted HTML attribute value."""
        return self.encode(ManipulationType.HTML_SINGLE_QUOTE_ATTRIBUTE, text, out)

    def encode_html_in_double_quote_attribute(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode a double-quoted HTML attribute value."""
        return self.encode(ManipulationType.HTML_DOUBLE_QUOTE_ATTRIBUTE, text, out)

    def encode_javascript_in_html(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode a JavaScript string embedded in HTML.

        Covers both <script> elements and event handler attributes; "-" and
        "/" are escaped so the value cannot form "</script>" or "-->".
        """
        return self.encode(ManipulationType.JAVASCRIPT_HTML, text, out)

    def encode_javascript_in_attribute(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode a JavaScript string inside a quoted attribute."""
        return self.encode(ManipulationType.JAVASCRIPT_ATTRIBUTE, text, out)

    def encode_javascript_in_block(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode a JavaScript string inside a ``<script>`` block."""
        return self.encode(ManipulationType.JAVASCRIPT_BLOCK, text, out)

    def encode_javascript_in_source(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode a JavaScript string in a standalone source file."""
        return self.encode(ManipulationType.JAVASCRIPT_SOURCE, text, out)

    def encode_json_value(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode a JSON string value."""
        return self.encode(ManipulationType.JSON_VALUE, text, out)

    def encode_uri_component(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode a URI component, keeping ``- _ . ~ ! * ' ( )``."""
        return self.encode(ManipulationType.URI_COMPONENT, text, out)

    def encode_uri_component_strict(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode a URI component, keeping only unreserved characters."""
        return self.encode(ManipulationType.URI_STRICT_COMPONENT, text, out)

    def encode_xml_content(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode text placed between XML tags."""
        return self.encode(ManipulationType.XML_CONTENT, text, out)

    def encode_xml_in_single_quote_attribute(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode a single-quoted XML attribute value."""
        return self.encode(ManipulationType.XML_SINGLE_QUOTE_ATTRIBUTE, text, out)

    def encode_xml_in_double_quote_attribute(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode a double-quoted XML attribute value."""
        return self.encode(ManipulationType.XML_DOUBLE_QUOTE_ATTRIBUTE, text, out)

    def encode_xml_comment_content(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode text placed inside an XML comment."""
        return self.encode(ManipulationType.XML_COMMENT, text, out)

    def encode_cdata_content(
        self, text: Optional[str], out: Optional[TextIO] = None
    ) -> Optional[str]:
        """Encode text placed inside a CDATA section."""
        return self.encode(ManipulationType.CDATA_CONTENT, text, out)


_default_encoder = SecureEncoder()


def encode(
    context: Hashable, text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    """Encode text for a context bound in the default registry."""
    return _default_encoder.encode(context, text, out)


def encode_html_content(text: Optional[str], out: Optional[TextIO] = None) -> Optional[str]:
    """Encode text placed between HTML tags.

    Example:
        >>> encode_html_content("<b>Tom & Jerry</b>")
        '&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;'
    """
    return _default_encoder.encode_html_content(text, out)


def encode_html_unquoted_attribute(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    """Encode an unquoted HTML attribute value."""
    return _default_encoder.encode_html_unquoted_attribute(text, out)


def encode_html_in_single_quote_attribute(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    """Encode a single-quoted HTML attribute value."""
    return _default_encoder.encode_html_in_single_quote_attribute(text, out)


def encode_html_in_double_quote_attribute(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    """Encode a double-quoted HTML attribute value."""
    return _default_encoder.encode_html_in_double_quote_attribute(text, out)


def encode_javascript_in_html(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    """Encode a JavaScript string embedded in HTML, in a <script> element or a handler."""
    return _default_encoder.encode_javascript_in_html(text, out)


def encode_javascript_in_attribute(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    """Encode a JavaScript string inside a quoted attribute."""
    return _default_encoder.encode_javascript_in_attribute(text, out)


def encode_javascript_in_block(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    """Encode a JavaScript string inside a ``<script>`` block."""
    return _default_encoder.encode_javascript_in_block(text, out)


def encode_javascript_in_source(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    """Encode a JavaScript string in a standalone source file."""
    return _default_encoder.encode_javascript_in_source(text, out)


def encode_json_value(text: Optional[str], out: Optional[TextIO] = None) -> Optional[str]:
    """Encode a JSON string value."""
    return _default_encoder.encode_json_value(text, out)


def encode_uri_component(text: Optional[str], out: Optional[TextIO] = None) -> Optional[str]:
    """Encode a URI component.

    Example:
        >>> encode_uri_component("a b&c")
        'a%20b%26c'
    """
    return _default_encoder.encode_uri_component(text, out)


def encode_uri_component_strict(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    """Encode a URI component, keeping only unreserved characters."""
    return _default_encoder.encode_uri_component_strict(text, out)


def encode_xml_content(text: Optional[str], out: Optional[TextIO] = None) -> Optional[str]:
    """Encode text placed between XML tags."""
    return _default_encoder.encode_xml_content(text, out)


def encode_xml_in_single_quote_attribute(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    """Encode a single-quoted XML attribute value."""
    return _default_encoder.encode_xml_in_single_quote_attribute(text, out)


def encode_xml_in_double_quote_attribute(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    """Encode a double-quoted XML attribute value."""
    return _default_encoder.encode_xml_in_double_quote_attribute(text, out)


def encode_xml_comment_content(
    text: Optional[str], out: Optional[TextIO] = None
) -> Optional[str]:
    """Encode text placed inside an XML comment."""
    return _default_encoder.encode_xml_comment_content(text, out)


def encode_cdata_content(text: Optional[str], out: Optional[TextIO] = None) -> Optional[str]:
    """Encode text placed inside a CDATA section."""
    return _default_encoder.encode_cdata_content(text, out)
