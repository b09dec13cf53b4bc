"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Sequence

from .processor import Config, Processor, ProcessorError

_DESCRIPTION = (
    "Scan a directory and output files content based on include/exclude patterns.\n\n"
    "Text files are selected under a directory by include/exclude glob rules and\n"
    "their contents written to a single output stream or file, each preceded by a\n"
    "header naming its path. Hidden directories and files (starting with '.'),\n"
    "including .git and .gitignore, are always ignored."
)


class _UsageError(Exception):
    """Raised when the command line cannot be parsed."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise _UsageError(message)


def split_patterns(patterns: str) -> list[str]:
    """Split a comma-separated list of patterns, dropping blank entries."""
    return [piece.strip() for piece in patterns.split(",") if piece.strip()]


def _build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(
        prog="dir2prompt",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--dir",
        dest="dir_path",
        required=True,
        help="Root directory path to scan (required)",
    )
    parser.add_argument(
        "--include-files",
        default="",
        help="Comma-separated list of glob patterns to include files "
        "(defaults to all files if not specified)",
    )
    parser.add_argument(
        "--exclude-files",
        default="",
        help="Comma-separated list of glob patterns to exclude files",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="-",
        help="Output destination (file path or '-' for stdout)",
    )
    parser.add_argument(
        "--estimate-tokens",
        action="store_true",
        help="Estimate and display the number of tokens in the output",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError as err:
        sys.stderr.write(f"Error: {err}\n")
        sys.stderr.write(parser.format_usage())
        return 1
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0

    if not args.dir_path:
        sys.stderr.write("Error: --dir flag is required\n")
        return 1

    include = split_patterns(args.include_files) if args.include_files else ["*"]
    config = Config(
        dir_path=args.dir_path,
        include_files=include,
        exclude_files=split_patterns(args.exclude_files),
        output=args.output,
        estimate_tokens=args.estimate_tokens,
    )

    try:
        Processor(config).process()
    except (ProcessorError, OSError) as err:
        sys.stderr.write(f"Error: {err}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())