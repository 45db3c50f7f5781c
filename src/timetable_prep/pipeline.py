"""
Preprocessing pipeline for timetable text.

Takes the raw text recovered from a timetable document (PDF text layer, OCR,
or word-processor export) and applies three steps in order:
  1. clean_text        -- whitespace, line-break, bar, dash and page-number cleanup
  2. detect_format     -- grid/list classification, layout, conventions, activities
  3. add_format_hints  -- optional header summarising step 2 for the extraction prompt

Usage:
  python -m timetable_prep path/to/timetable.txt [--json] [--no-hints]
"""

import argparse
import json
import logging
import sys

from timetable_prep import config
from timetable_prep.detection.classify import detect_format
from timetable_prep.detection.schema import PreprocessResult
from timetable_prep.hints import add_format_hints
from timetable_prep.text_cleaning.clean import clean_text

logger = logging.getLogger(__name__)


def preprocess(text: str, add_hints: bool = True) -> PreprocessResult:
    """Clean *text*, detect its format, and optionally prepend format hints.

    Never raises for string input.  The detection record is always returned,
    whether or not hints were added.
    """
    cleaned = clean_text(text)
    format_result = detect_format(cleaned)
    logger.info(
        "Format detected: %s (layout=%s, confidence=%.2f)",
        format_result.format_type.value,
        format_result.layout_type.value if format_result.layout_type else "none",
        format_result.confidence,
    )

    processed_text = add_format_hints(cleaned, format_result) if add_hints else cleaned
    return PreprocessResult(processed_text=processed_text, format=format_result)


def _read_input(parser: argparse.ArgumentParser, path: str) -> str:
    """Read the input file (or stdin for '-'), reporting failures through argparse."""
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path, "r", encoding="utf-8") as fopen:
            return fopen.read()
    except (OSError, UnicodeDecodeError) as exc:
        parser.error(f"cannot read {path}: {exc}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timetable-prep",
        description="Clean timetable text and detect its structural format.",
    )
    parser.add_argument("input", help="Text file recovered from a timetable document, or '-' for stdin")
    parser.add_argument("--json", action="store_true", help="Print the detection record as JSON instead of the text")
    parser.add_argument("--no-hints", action="store_true", help="Output cleaned text without the detection header")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        level = config.log_level()
        add_hints = False if args.no_hints else config.add_hints_default()
    except ValueError as exc:
        parser.error(str(exc))
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")

    text = _read_input(parser, args.input)
    result = preprocess(text, add_hints=add_hints)

    if args.json:
        print(json.dumps(result.format.to_json_dict(), indent=2, ensure_ascii=False))
    else:
        print(result.processed_text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
