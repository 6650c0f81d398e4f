"""Command-line interface for the title break analyzer.

WHY: Designers and template authors want to check where a title would be
allowed to break without writing code. The CLI runs the full pipeline on
one title and prints the analysis record, or a quick visual with the
break candidates marked.

HOW: argparse collects the title (positional words, or "-" for stdin),
the output format, an optional user dictionary, and the log level. Stdin
is read as bytes and decoded through the codec so bad input is reported
the same way as in the byte-level API.

RULES:
- Usage:
    python -m ja_title_wrap 長いタイトルを自然に改行する
    echo 長いタイトル | python -m ja_title_wrap -
    python -m ja_title_wrap --format lines 長いタイトルを自然に改行する
- Output goes to stdout; errors go to stderr as "Error: ...".
- Exit codes: 0 = success, 1 = decoding, analyzer, or serialization error.
- --format json (default) prints the record; --format lines prints the
  tokens with "|" at every break candidate.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ja_title_wrap.analyzer import BaseSegmenter, JanomeSegmenter
from ja_title_wrap.codec import analysis_to_json, decode_title
from ja_title_wrap.config import LOG_LEVEL, USER_DICT_ENCODING, USER_DICT_PATH
from ja_title_wrap.errors import TitleWrapError
from ja_title_wrap.models import Analysis
from ja_title_wrap.pipeline import analyze_title

logger = logging.getLogger(__name__)

BREAK_MARK = "|"


def render_lines(analysis: Analysis) -> str:
    """Join tokens, inserting BREAK_MARK after every break candidate."""
    breaks = set(analysis.break_after)
    parts: List[str] = []
    for i, token in enumerate(analysis.tokens):
        parts.append(token)
        if i in breaks:
            parts.append(BREAK_MARK)
    return "".join(parts)


def _read_title(args: argparse.Namespace) -> str:
    if args.title == ["-"]:
        return decode_title(sys.stdin.buffer.read()).strip()
    return " ".join(args.title)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="ja_title_wrap",
        description="Find where a Japanese title may be broken into lines.",
    )

    parser.add_argument(
        "title",
        nargs="+",
        help="Title text. Several words are joined with a space. Use '-' to read stdin.",
    )

    parser.add_argument(
        "--format",
        choices=("json", "lines"),
        default="json",
        help="Output format (default: %(default)s).",
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent JSON output by this many spaces.",
    )

    parser.add_argument(
        "--user-dict",
        default=USER_DICT_PATH,
        help="Path to a janome user dictionary CSV (default: $JA_TITLE_WRAP_USER_DICT).",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None, segmenter: Optional[BaseSegmenter] = None) -> None:
    """Entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
        segmenter: Analyzer override, used by tests.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if segmenter is None:
        segmenter = JanomeSegmenter(
            user_dict=args.user_dict,
            user_dict_encoding=USER_DICT_ENCODING,
        )

    try:
        title = _read_title(args)
        analysis = analyze_title(title, segmenter)
        if args.format == "lines":
            output = render_lines(analysis)
        else:
            output = analysis_to_json(analysis, indent=args.indent)
    except TitleWrapError as e:
        logger.debug("Analysis failed", exc_info=True)
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
