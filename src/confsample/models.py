"""📋 Documentation Models - Typed tree of documented configuration files.

The tree mirrors the documentation source:

    DocModel
    └── ConfigFile (e.g. confbridge.conf)
        └── ConfigSection ([general], [default_user], ...)
            └── ConfigOption (name, default, synopsis, description, enums)

All models are frozen; the renderer only ever reads them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ConfigOption(BaseModel):
    """A single documented option.

    Example:
        ConfigOption(
            name="dtmf_mode",
            default="rfc4733",
            synopsis="DTMF mode",
            description=["Sets the DTMF mode for the endpoint."],
            enum_values={"rfc4733": "DTMF is sent out of band", "inband": "DTMF is sent in band"},
        )
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Option name as written in the config file")
    default: str | None = Field(default=None, description="Documented default value")
    synopsis: str = Field(default="", description="One-line summary")
    description: list[str] = Field(
        default_factory=list,
        description="Description paragraphs, whitespace preserved",
    )
    enum_values: dict[str, str] = Field(
        default_factory=dict,
        description="Enumerated values in documentation order (key -> text)",
    )

    @property
    def description_length(self) -> int:
        """Total character length of all description paragraphs."""
        return sum(len(para) for para in self.description)

    @property
    def first_enum_key(self) -> str | None:
        """First enum key in insertion order."""
        return next(iter(self.enum_values), None)


class ConfigSection(BaseModel):
    """A documented ``[section]`` of a configuration file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Section name")
    synopsis: str = Field(default="", description="Section summary")
    options: list[ConfigOption] = Field(default_factory=list)

    def get_option(self, name: str) -> ConfigOption | None:
        """Get an option by name."""
        for option in self.options:
            if option.name == name:
                return option
        return None


class ConfigFile(BaseModel):
    """A documented configuration file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Configuration file name (e.g. 'confbridge.conf')")
    module: str = Field(default="", description="Module that documents this file")
    synopsis: str = Field(default="", description="File summary")
    sections: list[ConfigSection] = Field(default_factory=list)

    @property
    def sample_name(self) -> str:
        """Name of the generated sample file."""
        return f"{self.name}.sample"

    def get_section(self, name: str) -> ConfigSection | None:
        """Get a section by name."""
        for section in self.sections:
            if section.name == name:
                return section
        return None


class DocModel(BaseModel):
    """All configuration files found in one documentation source."""

    model_config = ConfigDict(frozen=True)

    files: list[ConfigFile] = Field(default_factory=list)

    def get_file(self, name: str) -> ConfigFile | None:
        """Get a configuration file by name."""
        for config_file in self.files:
            if config_file.name == name:
                return config_file
        return None
