"""⚙️ Generator Settings - Pydantic settings for sample generation.

Settings come from three layers, later ones winning:
1. Environment variables (``CONFSAMPLE_WRAP_WIDTH=100``)
2. An optional YAML file (``--settings confsample.yaml``)
3. Command-line flags

Example YAML:
    wrap_width: 100
    max_description_length: 200
    link_prefix: "https://example.org/docs/#config-"
    allow_fallback: false
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .modules import DEFAULT_CACHE_PATH, MODULE_LIST_URL
from .render.renderer import (
    DEFAULT_LINK_PREFIX,
    DEFAULT_MAX_DESCRIPTION_LENGTH,
    DEFAULT_WRAP_WIDTH,
)
from .render.values import DEFAULT_FALLBACK_VALUE


class GeneratorSettings(BaseSettings):
    """Configuration surface of the sample generator."""

    model_config = SettingsConfigDict(env_prefix="CONFSAMPLE_", case_sensitive=False)

    # Selection
    config_filter: str | None = Field(
        default=None,
        description="Only generate the sample for this config file (e.g. 'confbridge.conf')",
    )

    # Layout
    max_description_length: int = Field(
        default=DEFAULT_MAX_DESCRIPTION_LENGTH,
        ge=0,
        description="Longest option description (in characters) included in comments",
    )
    wrap_width: int = Field(
        default=DEFAULT_WRAP_WIDTH,
        ge=1,
        description="Wrap config comments at this many columns",
    )
    link_prefix: str = Field(
        default=DEFAULT_LINK_PREFIX,
        description="Documentation link prefix for out-of-tree modules",
    )

    # Sample values
    allow_fallback: bool = Field(
        default=True,
        description="Use the fallback sample value when no better value exists",
    )
    fallback_value: str = Field(
        default=DEFAULT_FALLBACK_VALUE,
        description="Dummy sample value for options without default or enums",
    )

    # Output
    output_dir: Path | None = Field(
        default=None,
        description="Directory for sample files (default: current directory)",
    )
    no_clobber: bool = Field(default=False, description="Don't overwrite existing files")
    fail_fast: bool = Field(
        default=False,
        description="Stop the whole run at the first file that fails to render",
    )
    verbose: bool = Field(default=False, description="Enable verbose log messages")

    # Module index
    module_list_url: str = Field(default=MODULE_LIST_URL)
    module_cache_path: Path = Field(default=DEFAULT_CACHE_PATH)
    offline: bool = Field(
        default=False,
        description="Skip the module list fetch and link every module to the custom prefix",
    )

    @classmethod
    def from_yaml(cls, path: Path | str) -> "GeneratorSettings":
        """Load settings from a YAML file (environment still applies)."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data.get("confsample", data))

    def with_overrides(self, **overrides: Any) -> "GeneratorSettings":
        """Return a copy with the non-None overrides applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        return self.model_validate({**self.model_dump(), **values})

