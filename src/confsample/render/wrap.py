"""↩️ Text Wrapping - Fold comment text into aligned lines.

Greedy wrapping over single-space separated text: a line takes as many words
as fit in ``width`` columns, and each break swaps the separating space for a
continuation prefix (newline + indent + ``;``). Words are never split; a word
wider than ``width`` gets a line of its own.

Example:
    wrap("one two three", 7, "\\n    ; ")
    # → "one two\\n    ; three"
"""

from __future__ import annotations

import re

WHITESPACE_PATTERN = re.compile(r"\s+", re.ASCII)

# Inline DocBook-style tags kept as text by the parser
INLINE_TAGS = ("literal", "replaceable", "filename", "emphasis", "variable")
MARKUP_PATTERN = re.compile(r"</?(?:%s)>" % "|".join(INLINE_TAGS))


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run (newlines included) with one space."""
    return WHITESPACE_PATTERN.sub(" ", text)


def strip_markup(text: str) -> str:
    """Remove inline markup tags, keeping their content."""
    return MARKUP_PATTERN.sub("", text)


def wrap(text: str, width: int, continuation_prefix: str) -> str:
    """Wrap collapsed text at ``width`` columns.

    Args:
        text: Text with whitespace already collapsed
        width: Maximum columns per line
        continuation_prefix: Inserted in place of the space at each break

    Returns:
        The wrapped text
    """
    pieces: list[str] = []
    line_start = 0
    last_space = 0

    for pos, char in enumerate(text):
        if char == " ":
            # The line up to here is full: break on this space
            if pos - line_start >= width:
                pieces.append(text[line_start:pos])
                pieces.append(continuation_prefix)
                line_start = pos + 1
            last_space = pos
        elif pos - line_start >= width and line_start < last_space:
            # This word overflows: back up to the previous space
            pieces.append(text[line_start:last_space])
            pieces.append(continuation_prefix)
            line_start = last_space = last_space + 1

    if line_start != len(text):
        pieces.append(text[line_start:])

    return "".join(pieces)
