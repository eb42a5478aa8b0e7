"""Context Manipulator.

Context-aware output encoding and filtering for untrusted text placed into
HTML, XML, JavaScript, JSON, URI and CDATA output.

Progressive API Disclosure:
- Level 1: Simple functions - encode_html_content(), filter_uri_component(), ...
- Level 2: Configured facades - SecureEncoder and SecureFilter classes
- Level 3: Custom contexts - ManipulatorRegistry and Manipulator subclasses
"""

__version__ = "0.1.0"
__author__ = "Context Manipulator Team"

# Progressive API disclosure - Level 1: Simple functions
# Progressive API disclosure - Level 2: Configured facades
# Progressive API disclosure - Level 3: Registry and manipulators
from .api import (
    ManipulationType,
    ManipulatorRegistry,
    SecureEncoder,
    SecureFilter,
    default_registry,
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
from .manipulation import CharacterManipulator, Manipulator

# Configuration and errors for advanced usage
from .shared.config import ConfigError, ConfigValidationError, ManipulationConfig
from .shared.errors import (
    InvalidArgumentError,
    ManipulationError,
    SinkWriteError,
    UnknownContextError,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple encode and filter functions
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

    # Level 2: Facade classes
    "SecureEncoder",
    "SecureFilter",

    # Level 3: Registry and manipulator base classes
    "ManipulationType",
    "ManipulatorRegistry",
    "default_registry",
    "Manipulator",
    "CharacterManipulator",

    # Configuration and errors
    "ManipulationConfig",
    "ConfigError",
    "ConfigValidationError",
    "ManipulationError",
    "InvalidArgumentError",
    "SinkWriteError",
    "UnknownContextError",
]
