"""📝 confsample - Sample configuration files from XML documentation.

Quick Start:
    from confsample import ConfigRenderer, parse_xml_documentation

    docs = parse_xml_documentation("doc/core-en_US.xml")
    renderer = ConfigRenderer(wrap_width=100)
    print(renderer.render_text(docs.get_file("confbridge.conf")))

Command line:
    confsample -c confbridge.conf doc/core-en_US.xml
"""

__version__ = "1.0.0"

from confsample.models import ConfigFile, ConfigOption, ConfigSection, DocModel
from confsample.parsers import parse_xml_documentation
from confsample.render import ConfigRenderer, SampleValueResolver

__all__ = [
    "ConfigFile",
    "ConfigOption",
    "ConfigRenderer",
    "ConfigSection",
    "DocModel",
    "SampleValueResolver",
    "parse_xml_documentation",
    "__version__",
]
