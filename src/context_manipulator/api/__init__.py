"""Public API for the context manipulator.

Progressive API disclosure:
- Level 1: module-level ``encode_*`` and ``filter_*`` functions
- Level 2: ``SecureEncoder`` and ``SecureFilter`` bound to a registry
- Level 3: ``ManipulatorRegistry`` for custom contexts and manipulators
"""

from .registry import (
    ManipulationType,
    ManipulatorRegistry,
    default_registry,
    get_manipulator,
    register_manipulator,
)
from .secure_encoder import (
    SecureEncoder,
    encode,
    encode_html_content,
    encode_html_unquoted_attribute,
    encode_html_in_single_quote_attribute,
    encode_html_in_double_quote_attribute,
    encode_javascript_in_html,
    encode_javascript_in_attribute,
    encode_javascript_in_block,
    encode_javascript_in_source,
    encode_json_value,
    encode_uri_component,
    encode_uri_component_strict,
    encode_xml_content,
    encode_xml_in_single_quote_attribute,
    encode_xml_in_double_quote_attribute,
    encode_xml_comment_content,
    encode_cdata_content,
)
from .secure_filter import (
    SecureFilter,
    filter_html_content,
    filter_html_unquoted_attribute,
    filter_html_in_single_quote_attribute,
    filter_html_in_double_quote_attribute,
    filter_javascript_in_html,
    filter_javascript_in_attribute,
    filter_javascript_in_block,
    filter_javascript_in_source,
    filter_json_value,
    filter_uri_component,
    filter_uri_component_strict,
    filter_xml_content,
    filter_xml_in_single_quote_attribute,
    filter_xml_in_double_quote_attribute,
    filter_xml_comment_content,
    filter_cdata_content,
    filter_text,
)

__all__ = [
    "ManipulationType",
    "ManipulatorRegistry",
    "default_registry",
    "get_manipulator",
    "register_manipulator",
    "SecureEncoder",
    "SecureFilter",
    "encode",
    "filter_text",
    "encode_html_content",
    "encode_html_unquoted_attribute",
    "encode_html_in_single_quote_attribute",
    "encode_html_in_double_quote_attribute",
    "encode_javascript_in_html",
    "encode_javascript_in_attribute",
    "encode_javascript_in_block",
    "encode_javascript_in_source",
    "encode_json_value",
    "encode_uri_component",
    "encode_uri_component_strict",
    "encode_xml_content",
    "encode_xml_in_single_quote_attribute",
    "encode_xml_in_double_quote_attribute",
    "encode_xml_comment_content",
    "encode_cdata_content",
    "filter_html_content",
    "filter_html_unquoted_attribute",
    "filter_html_in_single_quote_attribute",
    "filter_html_in_double_quote_attribute",
    "filter_javascript_in_html",
    "filter_javascript_in_attribute",
    "filter_javascript_in_block",
    "filter_javascript_in_source",
    "filter_json_value",
    "filter_uri_component",
    "filter_uri_component_strict",
    "filter_xml_content",
    "filter_xml_in_single_quote_attribute",
    "filter_xml_in_double_quote_attribute",
    "filter_xml_comment_content",
    "filter_cdata_content",
]
