"""📝 Documentation Parsers - Build the DocModel from documentation sources.

Parsers for:
- Asterisk XML documentation → configuration files, sections and options
"""

from .xmldoc import XmlDocParser, parse_xml_documentation

__all__ = [
    "XmlDocParser",
    "parse_xml_documentation",
]
