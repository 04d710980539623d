"""
Conversion driver: color lines in, plist document out.

The whole tree is built before anything is written, so an invalid line
aborts the run without producing partial output.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TextIO

from .config import Config, get_config
from .dom import Node
from .errors import ColorParseError, InputDecodeError
from .plist import append_color, new_plist
from .records import parse_line
from .serialize import write_document

logger = logging.getLogger(__name__)


def decode_lines(stream: Iterable[bytes], encoding: str = "utf-8") -> Iterator[str]:
    """Decode a binary line stream, naming the line that fails to decode."""
    for line_number, raw in enumerate(stream, start=1):
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError as e:
            raise InputDecodeError(line_number, e.reason) from e
        yield text.replace("\r\n", "\n")


def read_lines(stream: Iterable[str], max_columns: int = 80) -> Iterator[tuple[int, str]]:
    """
    Yield (line_number, text) with the terminator removed.

    Lines longer than max_columns are cut at that column.
    """
    if max_columns < 1:
        raise ValueError(f"max_columns must be at least 1, got {max_columns}")
    for line_number, raw in enumerate(stream, start=1):
        text = raw.removesuffix("\n")
        if len(text) > max_columns:
            logger.warning(
                "Line %d too long, ignoring the characters after column %d",
                line_number, max_columns,
            )
            text = text[:max_columns]
        yield line_number, text


def build_plist(stream: Iterable[str], max_columns: int | None = None) -> Node:
    """Parse every line of stream into a plist tree."""
    if max_columns is None:
        max_columns = get_config().input.max_columns

    root, top = new_plist()
    for line_number, text in read_lines(stream, max_columns):
        try:
            record = parse_line(text)
        except ColorParseError as e:
            e.line_number = line_number
            raise
        append_color(top, record)

    logger.debug("Built %d color entries", len(top.children) // 2)
    return root


def convert(istream: Iterable[str], ostream: TextIO, config: Config | None = None) -> int:
    """Convert istream to a plist document on ostream; returns the entry count."""
    cfg = config or get_config()
    root = build_plist(istream, cfg.input.max_columns)
    write_document(root, ostream, indent=cfg.output.indent, escape=cfg.output.escape_text)
    return len(root.children[0].children) // 2
