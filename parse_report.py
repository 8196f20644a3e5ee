"""CLI for parsing QuickAccount report definitions."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from quickaccount import ParseError, ReportFormatter, parse
from quickaccount.logger import configure_logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse a report definition and print its syntax tree, or the first syntax error."
    )
    parser.add_argument("input", help="Path to a report definition file, or - to read standard input.")
    parser.add_argument(
        "--format",
        choices=("json", "dsl"),
        default="json",
        help="Output the tree as JSON or as canonical report definition text (default: json).",
    )
    parser.add_argument(
        "--strategy",
        choices=("recursive", "iterative"),
        default="recursive",
        help="Parse nested blocks recursively or with an explicit stack (default: recursive).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parser progress to stderr.")
    return parser.parse_args(argv)


def read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"Input path does not exist: {path}")
    return path.read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        configure_logger({"level": logging.DEBUG})
    text = read_input(args.input)
    try:
        document = parse(
            text,
            config={"strategy": args.strategy, "enable_logger": args.verbose},
        )
    except ParseError as exc:
        print(exc.to_display_string(), file=sys.stderr)
        return 1
    if args.format == "dsl":
        sys.stdout.write(ReportFormatter().format_document(document))
    else:
        print(document.model_dump_json(indent=2, by_alias=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
