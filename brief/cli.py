"""Command-line interface for brief.

Entry point: ``brief`` (configured in ``pyproject.toml``).

Usage:
    brief --file NOTES.txt [options]   # summarize a text file
    brief --text "..." [options]       # summarize an inline string
    cat NOTES.txt | brief [options]    # summarize stdin

Key options:
    --length, --format, --delay, --json,
    --verbose/--no-verbose, --quiet, --log-file.

``--file`` and ``--text`` are mutually exclusive; with neither, the text is
read from stdin.  Defaults for ``--length`` and ``--format`` come from the
``BRIEF_LENGTH`` and ``BRIEF_FORMAT`` environment variables (a ``.env`` file
in the working directory is honoured).
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from brief.ingest import read_text_file
from brief.log import setup_logging
from brief.models import (
    SENTENCE_COUNTS,
    Config,
    SummaryRequest,
    UnsupportedFormatError,
)
from brief.pipeline import summarize
from brief.renderer import render_report

logger = logging.getLogger(__name__)


def _non_negative_float(value: str) -> float:
    parsed = float(value)
    if parsed < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return parsed


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Parse CLI arguments, read the input text, and print the summary."""
    load_dotenv()

    parser = _build_parser()
    args = parser.parse_args()
    # argparse does not check env-provided defaults against choices
    if args.length not in SENTENCE_COUNTS:
        parser.error(f"invalid BRIEF_LENGTH: {args.length!r}")
    if args.format not in ("paragraph", "bullets"):
        parser.error(f"invalid BRIEF_FORMAT: {args.format!r}")

    setup_logging(
        verbose=args.verbose,
        log_file=Path(args.log_file) if args.log_file else None,
        quiet=args.quiet,
    )

    config = Config(
        length=args.length,
        format=args.format,
        delay_s=args.delay,
        verbose=args.verbose,
    )

    text = _read_input(args)
    request = SummaryRequest(text=text, length=config.length, format=config.format)
    result = summarize(request, config)

    if args.json:
        print(result.model_dump_json(indent=2))
    elif result.ok:
        print(render_report(result))

    if not result.ok:
        logger.error("%s", result.error)
        sys.exit(1)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


def _read_input(args: argparse.Namespace) -> str:
    """Return the text to summarize from --text, --file, or stdin."""
    if args.text is not None:
        return args.text

    if args.file is None:
        return sys.stdin.read()

    path = Path(args.file)
    if not path.exists():
        logger.error("File not found: %s", path)
        sys.exit(1)
    try:
        return read_text_file(path)
    except UnsupportedFormatError as exc:
        logger.error("%s", exc)
        sys.exit(1)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brief",
        description=(
            "Summarize plain text by picking its most representative sentences "
            "and list its most frequent keywords. Runs fully offline."
        ),
    )

    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--file",
        metavar="PATH",
        help="Plain-text (.txt) file to summarize.",
    )
    source_group.add_argument(
        "--text",
        metavar="TEXT",
        help="Text to summarize, passed inline.",
    )

    _default_length = os.environ.get("BRIEF_LENGTH", "medium")
    parser.add_argument(
        "--length",
        choices=list(SENTENCE_COUNTS),
        default=_default_length,
        help=(
            "Summary length: short (2 sentences), medium (4) or long (6). "
            f"Default: BRIEF_LENGTH env var, currently {_default_length!r}."
        ),
    )
    _default_format = os.environ.get("BRIEF_FORMAT", "paragraph")
    parser.add_argument(
        "--format",
        choices=["paragraph", "bullets"],
        default=_default_format,
        help=(
            "Render the summary as one paragraph or as a numbered list. "
            f"Default: BRIEF_FORMAT env var, currently {_default_format!r}."
        ),
    )
    parser.add_argument(
        "--delay",
        metavar="S",
        type=_non_negative_float,
        default=0.0,
        help="Artificial processing delay in seconds (default: 0).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the full result (summary, sentences, keywords, error) as JSON.",
    )
    parser.add_argument(
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Show DEBUG-level log output on stderr (default: off).",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        default=False,
        help="Only show warnings and errors on stderr.",
    )
    parser.add_argument(
        "--log-file",
        metavar="FILE",
        default=None,
        help="Also write log output to FILE.",
    )

    return parser


if __name__ == "__main__":
    main()
