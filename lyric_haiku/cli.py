"""Command-line front end for lyric haiku generation.

Usage:
    lyric-haiku <lyrics_file> [--mode {best,exact,closest}] [--json]
    lyric-haiku <lyrics_file> --analyze
    cat lyrics.txt | lyric-haiku -

Exit status is 0 on success, 1 for unreadable input and 2 when no haiku
could be built.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from lyric_haiku.analyzer import analyze_lyrics
from lyric_haiku.matcher import generate_best_haiku, generate_closest_haiku, generate_haiku
from lyric_haiku.models import HaikuResult, LineAnalysis

MODES: dict[str, Callable[[str | None], HaikuResult]] = {
    "best": generate_best_haiku,
    "exact": generate_haiku,
    "closest": generate_closest_haiku,
}


def read_lyrics(source: str) -> str:
    """Read lyrics from a file path, or from stdin when ``source`` is "-"."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def format_result(result: HaikuResult) -> str:
    """Render a result as plain text, marking approximate haikus."""
    if not result.success:
        return ""
    rendered = [f"{line.text}  ({line.syllable_count})" for line in result.lines]
    if not result.is_exact:
        rendered.append("~ approximate")
    return "\n".join(rendered)


def format_analysis(analysis: Sequence[LineAnalysis]) -> str:
    """Render the analyzer output as one ``count  text`` row per line."""
    return "\n".join(f"{entry.syllable_count:>3}  {entry.text}" for entry in analysis)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lyric-haiku",
        description="Build a 5-7-5 haiku from song lyrics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s testdata/evening_song.txt
  %(prog)s testdata/evening_song.txt --mode closest --json --pretty
  %(prog)s testdata/evening_song.txt --analyze
        """,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Lyrics text file (default: read stdin)",
    )
    parser.add_argument(
        "--mode",
        choices=sorted(MODES),
        default="best",
        help="exact only, closest match only, or exact then closest (default: best)",
    )
    parser.add_argument(
        "--analyze",
        action="store_true",
        help="List every candidate line with its syllable count instead",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of plain text",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each line selection to stderr",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        lyrics = read_lyrics(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read lyrics from {args.input}: {e}", file=sys.stderr)
        return 1

    status = 0
    data: Any
    if args.analyze:
        analysis = analyze_lyrics(lyrics)
        data = [entry.to_dict() for entry in analysis]
        text_output = format_analysis(analysis)
    else:
        result = MODES[args.mode](lyrics)
        data = result.to_dict()
        text_output = format_result(result)
        if not result.success:
            print(f"No haiku found: {result.failure_reason}", file=sys.stderr)
            status = 2

    if args.json:
        indent = 2 if args.pretty else None
        output = json.dumps(data, indent=indent, ensure_ascii=False)
    else:
        output = text_output

    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
        print(f"Wrote output to {args.output}")
    elif output:
        print(output)

    return status


if __name__ == "__main__":
    sys.exit(main())
