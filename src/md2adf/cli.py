"""Command-line entry point for md2adf."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from md2adf.config import MD2ADF_LOG_LEVEL
from md2adf.conversion import ConversionOptions, render_markdown
from md2adf.exceptions import InputError, Md2adfError
from md2adf.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2adf",
        description="Convert a markdown file to Atlassian Document Format JSON.",
    )
    parser.add_argument("path", help="Markdown file to convert")
    parser.add_argument(
        "-o", "--output", help="Output file to write, defaults to stdout if not set"
    )
    parser.add_argument(
        "--single-mark",
        action="store_true",
        help="Give each styled run only its own mark instead of stacking nested marks",
    )
    parser.add_argument(
        "--raw-html",
        choices=("text", "reject"),
        help="Keep the text of raw HTML or fail on it",
    )
    parser.add_argument(
        "--images", choices=("link", "reject"), help="Render images as links or fail on them"
    )
    indent = parser.add_mutually_exclusive_group()
    indent.add_argument("--indent", type=int, help="JSON indentation width")
    indent.add_argument("--compact", action="store_true", help="Write compact JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser


def read_source(path: Path) -> str:
    """Read a UTF-8 markdown file.

    Raises:
        InputError: If the file is missing, unreadable, or not UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Reading file failed: {exc}") from exc


def options_from_args(args: argparse.Namespace) -> ConversionOptions:
    overrides: dict[str, object] = {}
    if args.single_mark:
        overrides["stack_marks"] = False
    if args.raw_html:
        overrides["raw_html"] = args.raw_html
    if args.images:
        overrides["images"] = args.images
    if args.compact:
        overrides["indent"] = None
    elif args.indent is not None:
        overrides["indent"] = args.indent
    return ConversionOptions(**overrides)  # type: ignore[arg-type]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging("INFO" if args.verbose else MD2ADF_LOG_LEVEL)
        options = options_from_args(args)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    source_path = Path(args.path)
    try:
        source = read_source(source_path)
        logger.info("Converting %s (%d characters)", source_path, len(source))
        document = render_markdown(source, options)
    except InputError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except Md2adfError as exc:
        print(f"Rendering adf failed: {exc}", file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(document + "\n")
        return 0

    try:
        Path(args.output).write_text(document + "\n", encoding="utf-8")
    except OSError as exc:
        print(f"Creating output file failed: {exc}", file=sys.stderr)
        return 1

    logger.info("Wrote %d bytes to %s", len(document) + 1, args.output)
    print("Output file created successfully.")
    return 0
