"""
Input template for `itermgen new`: every iTerm2 color slot set to black.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

COLOR_NAMES = (
    "Selected Text Color", "Selection Color", "Cursor Guide Color",
    "Cursor Text Color", "Cursor Color", "Bold Color",
    "Link Color", "Foreground Color", "Background Color",
    "Ansi 15 Color", "Ansi 14 Color", "Ansi 13 Color",
    "Ansi 12 Color", "Ansi 11 Color", "Ansi 10 Color",
    "Ansi 9 Color", "Ansi 8 Color", "Ansi 7 Color",
    "Ansi 6 Color", "Ansi 5 Color", "Ansi 4 Color",
    "Ansi 3 Color", "Ansi 2 Color", "Ansi 1 Color",
    "Ansi 0 Color",
)

VARIANT_SUFFIXES = ("", " (Light)", " (Dark)")

PLACEHOLDER = "#000000"


def template_lines() -> Iterator[str]:
    for suffix in VARIANT_SUFFIXES:
        for name in COLOR_NAMES:
            yield f"{name}{suffix}: {PLACEHOLDER}"


def write_template(stream: TextIO) -> int:
    """Write the template, one color per line. Returns the line count."""
    count = 0
    for line in template_lines():
        stream.write(line + "\n")
        count += 1
    return count
