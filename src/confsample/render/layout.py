"""📐 Column Layout - Per-section alignment of option lines.

Every option line in a section is padded to the same width, so the widest
``name = value`` pair has to be known before the first line is written.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..models import ConfigOption
from .values import SampleValueResolver

# Length of the " = " between name and value
SEPARATOR_WIDTH = 3
COMMENT_MARKER = "  ; "


@dataclass(frozen=True)
class SectionLayout:
    """Alignment computed for one section."""

    alignment_width: int
    comment_width: int

    @property
    def continuation_prefix(self) -> str:
        """Break inserted by the wrapper to start an aligned comment line."""
        return "\n" + self.comment_indent

    @property
    def comment_indent(self) -> str:
        """Leading text of a comment line under the comment column."""
        return " " * self.alignment_width + COMMENT_MARKER


def pair_width(option: ConfigOption, value: str) -> int:
    """Width of ``name = value`` for an option."""
    return len(option.name) + len(value) + SEPARATOR_WIDTH


def compute_layout(
    options: Iterable[ConfigOption],
    resolver: SampleValueResolver,
    wrap_width: int,
) -> SectionLayout:
    """Compute the layout for a section.

    Args:
        options: All options of the section
        resolver: Resolver used for the sample values
        wrap_width: Total configured line width

    Returns:
        SectionLayout

    Raises:
        SampleValueError: If any option has no permissible sample value
    """
    alignment_width = 0
    for option in options:
        alignment_width = max(alignment_width, pair_width(option, resolver.resolve(option)))

    # Narrow wrap widths degrade to one word per line
    comment_width = max(1, wrap_width - alignment_width)
    return SectionLayout(alignment_width=alignment_width, comment_width=comment_width)
