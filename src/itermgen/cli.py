"""
CLI interface for itermgen.

Generates .itermcolors files for iTerm2 theming from `Label: #RRGGBB` lines.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from .config import get_config
from .convert import build_plist, decode_lines
from .errors import ItermgenError
from .serialize import write_document
from .template import write_template

logger = logging.getLogger(__name__)

STDIO = "-"


def positive_int(value: str) -> int:
    """argparse type: an integer of at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser, with defaults taken from config."""
    cfg = get_config()

    parser = argparse.ArgumentParser(
        prog="itermgen",
        description="A simple tool that generates .itermcolors file for iTerm2 theming",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    build = sub.add_parser("build", help="Compile an input file to a .itermcolors file")
    build.add_argument("input", help="Input file ('-' for stdin)")
    build.add_argument("output", help="Output file ('-' for stdout)")
    build.add_argument(
        "--max-columns",
        type=positive_int,
        default=cfg.input.max_columns,
        help=f"Truncate input lines longer than this (default: {cfg.input.max_columns})",
    )
    build.add_argument(
        "--escape",
        action="store_true",
        default=cfg.output.escape_text,
        help="Escape &, < and > in labels (off by default)",
    )

    new = sub.add_parser("new", help="Create an input template")
    new.add_argument("output", help="Output file ('-' for stdout)")

    return parser


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(args)


def resolve_log_level(name: str) -> int:
    """Map a level name to its number; unknown names fall back to WARNING."""
    return logging.getLevelNamesMapping().get(name.upper(), logging.WARNING)


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else resolve_log_level(get_config().logging.level)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def _write(output: str, emit) -> None:
    """Call emit(stream) on stdout or on a freshly opened file."""
    if output == STDIO:
        emit(sys.stdout)
        return
    with open(output, "w", encoding="utf-8") as f:
        emit(f)


def cmd_build(input_path: str, output: str, max_columns: int, escape: bool) -> int:
    """Build the plist from input_path and write it to output."""
    if input_path == STDIO:
        root = build_plist(decode_lines(sys.stdin.buffer), max_columns)
    else:
        with open(input_path, "rb") as f:
            root = build_plist(decode_lines(f), max_columns)

    indent = get_config().output.indent

    def emit(stream: TextIO) -> None:
        write_document(root, stream, indent=indent, escape=escape)

    _write(output, emit)
    logger.debug("Wrote %s", "stdout" if output == STDIO else output)
    return 0


def cmd_new(output: str) -> int:
    """Write the input template to output."""
    _write(output, write_template)
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    parsed = parser.parse_args(args)
    configure_logging(parsed.verbose)

    if parsed.command is None:
        parser.print_help()
        return 0

    try:
        if parsed.command == "build":
            return cmd_build(parsed.input, parsed.output, parsed.max_columns, parsed.escape)
        return cmd_new(parsed.output)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return 1
    except (ItermgenError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
