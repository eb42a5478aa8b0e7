"""Context rule layer for the context manipulator.

Each module implements the encode and filter rules for one output context
family. Manipulators are immutable after construction and safe to share.
"""

from .base import CharacterManipulator, Manipulator
from .cdata_manipulator import CDATAManipulator, CDATAOption
from .html_manipulator import HTMLManipulator, HTMLOption
from .javascript_manipulator import JavaScriptManipulator, JavaScriptOption
from .json_manipulator import JSONManipulator, JSONOption
from .uri_manipulator import URIManipulator, URIOption
from .xml_manipulator import XMLManipulator, XMLOption

__all__ = [
    "Manipulator",
    "CharacterManipulator",
    "CDATAManipulator",
    "CDATAOption",
    "HTMLManipulator",
    "HTMLOption",
    "JavaScriptManipulator",
    "JavaScriptOption",
    "JSONManipulator",
    "JSONOption",
    "URIManipulator",
    "URIOption",
    "XMLManipulator",
    "XMLOption",
]
