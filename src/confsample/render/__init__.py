"""🖨️ Rendering Engine - Turn documented options into sample config text.

Pieces:
- SampleValueResolver - pick the value shown for each option
- compute_layout - per-section alignment of option lines
- wrap - greedy word wrapping into aligned comment lines
- ConfigRenderer - assemble the lines of one sample file
"""

from .layout import SectionLayout, compute_layout
from .renderer import ConfigRenderer
from .values import SampleValueResolver
from .wrap import collapse_whitespace, strip_markup, wrap

__all__ = [
    "ConfigRenderer",
    "SampleValueResolver",
    "SectionLayout",
    "compute_layout",
    "collapse_whitespace",
    "strip_markup",
    "wrap",
]
