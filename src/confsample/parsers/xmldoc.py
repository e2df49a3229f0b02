"""🔍 XML Documentation Parser - Build the DocModel from XML docs.

Reads the documentation XML produced by the Asterisk build (e.g.
``doc/core-en_US.xml``) and keeps only ``configInfo`` entries:

    <configInfo name="app_confbridge">
      <synopsis>Conference Bridge Application</synopsis>
      <configFile name="confbridge.conf">
        <configObject name="global">
          <synopsis>Unused, but reserved.</synopsis>
          <configOption name="type" default="global">
            <synopsis>Define this configuration category as 'global'.</synopsis>
            <description>
              <para>The section type.</para>
              <enumlist>
                <enum name="global"><para>Global settings</para></enum>
              </enumlist>
            </description>
          </configOption>
        </configObject>
      </configFile>
    </configInfo>

Inline markup (``<literal>``, ``<replaceable>``, ...) is wrapped in CDATA
before parsing so it survives as paragraph text instead of becoming child
elements.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path

from ..errors import DocumentationInputError
from ..models import ConfigFile, ConfigOption, ConfigSection, DocModel
from ..render.wrap import collapse_whitespace

PROTECTED_TAGS = ("literal", "replaceable", "filename", "emphasis")

# <variable> also wraps nodes; only bare upper-case names are text
VARIABLE_PATTERN = re.compile(r"<variable>([A-Z_]+)</variable>")


def protect_inline_markup(xml: str) -> str:
    """Wrap inline markup tags in CDATA so they parse as text."""
    for tag in PROTECTED_TAGS:
        xml = xml.replace(f"<{tag}>", f"<![CDATA[<{tag}>")
        xml = xml.replace(f"</{tag}>", f"</{tag}>]]>")
    return VARIABLE_PATTERN.sub(r"<![CDATA[<variable>\1</variable>]]>", xml)


def element_text(element: ET.Element | None) -> str:
    """Direct text of an element: its text plus the tails of its children."""
    if element is None:
        return ""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


class XmlDocParser:
    """Parse XML documentation into a DocModel."""

    def parse_file(self, path: Path | str) -> DocModel:
        """Parse a documentation file.

        Args:
            path: Path to the XML documentation

        Returns:
            DocModel

        Raises:
            DocumentationInputError: If the file is missing or not valid XML
        """
        path = Path(path)
        if not path.exists():
            raise DocumentationInputError(f"Input file does not exist: {path}")

        try:
            xml = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentationInputError(f"Cannot read {path}: {e}") from e

        return self.parse_string(xml, source=str(path))

    def parse_string(self, xml: str, source: str = "<string>") -> DocModel:
        """Parse documentation XML content."""
        try:
            root = ET.fromstring(protect_inline_markup(xml))
        except ET.ParseError as e:
            raise DocumentationInputError(f"Invalid XML in {source}: {e}") from e

        files = []
        for config_info in root.findall("configInfo"):
            files.extend(self._parse_config_info(config_info))
        return DocModel(files=files)

    def _parse_config_info(self, config_info: ET.Element) -> list[ConfigFile]:
        module = config_info.get("name", "")
        synopsis = element_text(config_info.find("synopsis"))

        return [
            ConfigFile(
                name=config_file.get("name", ""),
                module=module,
                synopsis=synopsis,
                sections=[
                    self._parse_section(config_object)
                    for config_object in config_file.findall("configObject")
                ],
            )
            for config_file in config_info.findall("configFile")
        ]

    def _parse_section(self, config_object: ET.Element) -> ConfigSection:
        return ConfigSection(
            name=config_object.get("name", ""),
            synopsis=element_text(config_object.find("synopsis")),
            options=[
                self._parse_option(config_option)
                for config_option in config_object.findall("configOption")
            ],
        )

    def _parse_option(self, config_option: ET.Element) -> ConfigOption:
        description = config_option.find("description")
        paragraphs: list[str] = []
        enum_values: dict[str, str] = {}

        if description is not None:
            paragraphs = [element_text(para) for para in description.findall("para")]
            for enumlist in description.findall("enumlist"):
                for entry in enumlist:
                    key = collapse_whitespace(entry.get("name", ""))
                    # Later duplicates win, keeping the first position
                    enum_values[key] = collapse_whitespace(element_text(entry.find("para")))

        return ConfigOption(
            name=config_option.get("name", ""),
            default=config_option.get("default"),
            synopsis=element_text(config_option.find("synopsis")),
            description=paragraphs,
            enum_values=enum_values,
        )


def parse_xml_documentation(path: Path | str) -> DocModel:
    """Convenience function to parse a documentation file.

    Args:
        path: Path to the XML documentation

    Returns:
        DocModel
    """
    return XmlDocParser().parse_file(path)
