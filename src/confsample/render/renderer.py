"""🖨️ Config Renderer - Lay out one sample configuration file.

Output (``;``-comment INI dialect):

    ; confbridge.conf - Conference Bridge Application
    ; See https://docs.asterisk.org/.../app_confbridge/ for detailed documentation

    ;[global] ; Unused, but reserved.
    ;type = global ; Define this configuration category as 'global'.
     ...

Rendering is all in memory: a file either renders completely or raises,
so nothing partial is ever handed to the writer.
"""

from __future__ import annotations

from ..errors import SampleValueError
from ..models import ConfigFile, ConfigOption, ConfigSection
from .layout import SectionLayout, compute_layout
from .values import DEFAULT_FALLBACK_VALUE, SampleValueResolver
from .wrap import collapse_whitespace, strip_markup, wrap

IN_TREE_LINK_TEMPLATE = (
    "https://docs.asterisk.org/Latest_API/API_Documentation/Module_Configuration/{module}/"
)
DEFAULT_LINK_PREFIX = "https://asterisk.phreaknet.org/#configuration-"
DEFAULT_WRAP_WIDTH = 135
DEFAULT_MAX_DESCRIPTION_LENGTH = 360


class ConfigRenderer:
    """Render a ConfigFile into sample configuration lines.

    Example:
        renderer = ConfigRenderer(wrap_width=100)
        lines = renderer.render(config_file, in_tree=True)
        text = renderer.render_text(config_file, in_tree=True)
    """

    def __init__(
        self,
        resolver: SampleValueResolver | None = None,
        wrap_width: int = DEFAULT_WRAP_WIDTH,
        max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
        link_prefix: str = DEFAULT_LINK_PREFIX,
    ) -> None:
        """Initialize the renderer.

        Args:
            resolver: Sample value resolver (defaults to fallback "abc123")
            wrap_width: Total column width for comment wrapping
            max_description_length: Longest description (in characters) still included
            link_prefix: Documentation link prefix for out-of-tree modules
        """
        self.resolver = resolver or SampleValueResolver(DEFAULT_FALLBACK_VALUE)
        self.wrap_width = wrap_width
        self.max_description_length = max_description_length
        self.link_prefix = link_prefix

    def render(self, config_file: ConfigFile, in_tree: bool = False) -> list[str]:
        """Render a configuration file.

        Args:
            config_file: File to render
            in_tree: Whether the documenting module is part of the core tree

        Returns:
            Output lines, without line terminators

        Raises:
            SampleValueError: Naming file, section and option, if a sample
                value cannot be determined
        """
        lines = [
            f"; {config_file.name} - {collapse_whitespace(config_file.synopsis)}",
            f"; See {self.documentation_link(config_file.module, in_tree)} for detailed documentation",
        ]

        for section in config_file.sections:
            try:
                lines.extend(self._render_section(section))
            except SampleValueError as e:
                raise e.in_context(section.name, config_file.sample_name) from e

        return lines

    def render_text(self, config_file: ConfigFile, in_tree: bool = False) -> str:
        """Render a configuration file as text with a trailing newline."""
        return "\n".join(self.render(config_file, in_tree)) + "\n"

    def documentation_link(self, module: str, in_tree: bool) -> str:
        """Link to the full documentation of a module."""
        if in_tree:
            return IN_TREE_LINK_TEMPLATE.format(module=module)
        return f"{self.link_prefix}{module}"

    def _render_section(self, section: ConfigSection) -> list[str]:
        lines = ["", f";[{section.name}] ; {collapse_whitespace(section.synopsis)}"]

        # First pass: every line in the section shares the widest pair
        layout = compute_layout(section.options, self.resolver, self.wrap_width)

        for option in section.options:
            lines.extend(self._render_option(option, layout))
        return lines

    def _render_option(self, option: ConfigOption, layout: SectionLayout) -> list[str]:
        value = self.resolver.resolve(option)
        pair = f"{option.name} = {value}"
        synopsis = collapse_whitespace(option.synopsis)
        wrapped = wrap(synopsis, layout.comment_width, layout.continuation_prefix)
        text = f";{pair:<{layout.alignment_width}} ; {wrapped}"

        description_length = option.description_length
        if option.description and description_length <= self.max_description_length:
            if len(synopsis) + description_length < layout.comment_width:
                # Short enough to share the option line
                inline = " ".join(
                    collapse_whitespace(strip_markup(para)).strip()
                    for para in option.description
                )
                text += f": {inline}"
            else:
                for para in option.description:
                    para = collapse_whitespace(strip_markup(para))
                    para = wrap(para, layout.comment_width, layout.continuation_prefix)
                    text += "\n" + layout.comment_indent + para.strip()

        if option.enum_values:
            enum_indent = " " + " " * layout.alignment_width + " ; "
            text += f"\n{enum_indent}Possible values are:"
            for key, description in option.enum_values.items():
                text += f"\n{enum_indent}{key} - {description}"

        return text.split("\n")
