"""Command-line tools that convert or reformat JTML files in place."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from .converter import convert, format_jtml
from .errors import ConversionError


def _parse_filenames(prog: str, description: str, argv: Sequence[str] | None) -> list[str]:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("filenames", nargs="+", help="JTML files to process")
    return parser.parse_args(argv).filenames


def _process_files(
    filenames: Sequence[str],
    transform: Callable[[str], str],
    suffix: str,
) -> None:
    for filename in filenames:
        path = Path(filename)
        if path.is_dir():
            print(f"{filename} is a directory", file=sys.stderr)
            continue

        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            print(f"Error reading from {filename}", file=sys.stderr)
            continue

        try:
            output = transform(source)
        except ConversionError as error:
            print(f"Error compiling '{filename}' ({error})", file=sys.stderr)
            continue

        try:
            target = open(path.with_suffix(suffix), "w", encoding="utf-8")
        except (OSError, ValueError):
            print(f"Error creating file {filename}", file=sys.stderr)
            continue
        with target:
            target.write(output)


def convert_main(argv: Sequence[str] | None = None) -> int:
    """Convert each given JTML file to an ``.html`` file beside it."""
    filenames = _parse_filenames(
        "jtml-convert", "Convert JTML files to HTML.", argv
    )
    _process_files(filenames, lambda text: convert(text, True), ".html")
    return 0


def format_main(argv: Sequence[str] | None = None) -> int:
    """Write a formatted copy of each given JTML file with a ``.formatted_jtml`` suffix."""
    filenames = _parse_filenames("jtml-format", "Format JTML files.", argv)
    _process_files(filenames, format_jtml, ".formatted_jtml")
    return 0