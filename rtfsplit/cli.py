"""Command line entry point for splitting RTF files."""

from __future__ import annotations

import argparse
import sys

from .divider import DEFAULT_PAGE_SIZE, RTFDivider


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rtfsplit",
        description="Split an RTF output file into parts of a fixed number of pages.",
    )
    parser.add_argument("-t", "--target", required=True, help="RTF file to split")
    parser.add_argument(
        "-p",
        "--pagesize",
        type=int,
        default=DEFAULT_PAGE_SIZE,
        help="pages per part (default: %(default)s)",
    )
    parser.add_argument("-d", "--dest", required=True, help="directory for the parts")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = _parser().parse_args(argv)
    try:
        RTFDivider(args.target, args.pagesize).divide(args.dest)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())