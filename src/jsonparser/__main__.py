"""
Command line entry point: parse one JSON file and print the result.

Exits 0 after printing the parsed value, 1 on a usage error, an unreadable
file or a syntax error.
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from jsonparser import parse_text

EXIT_OK = 0
EXIT_FAILURE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """Reports usage errors with the failure exit status."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="jsonparser",
        description="Parse a JSON document and print the parsed value.",
    )
    parser.add_argument("path", type=Path, help="path to a JSON document")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    try:
        text = args.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"error reading file {args.path}: {e}")
        return EXIT_FAILURE

    value, error = parse_text(text)
    if error is not None:
        print(error)
        return EXIT_FAILURE

    print(repr(value))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
