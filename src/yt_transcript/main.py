#!/usr/bin/env python3
"""
yt-transcript command-line interface.
Prints the captions of a YouTube video as plain or timestamped text.
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core.config import APP_VERSION
from .core.exceptions import TimestampsRequiredError, TranscriptError
from .models import CaptionTrack, SelectionRequest
from .services import TranscriptService
from .utils.logging import get_logger, set_log_level
from .utils.time_utils import parse_exclude_ranges, parse_only_times, parse_time

logger = get_logger("cli")

# Diagnostics go to stderr; stdout carries only the transcript
console = Console(stderr=True)


def setup_argument_parser() -> argparse.ArgumentParser:
    """Setup command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="yt-transcript",
        description="Print the transcript of a YouTube video.",
        epilog="Times are MM:SS or HH:MM:SS. Exclude ranges are START-END, space-separated."
    )

    parser.add_argument(
        "video",
        help="YouTube URL or 11-character video ID"
    )

    parser.add_argument(
        "-t", "--timestamps",
        action="store_true",
        help="Prefix each line with its start time"
    )

    parser.add_argument(
        "-l", "--lang",
        nargs="+",
        metavar="LANG",
        help="Preferred caption languages, most preferred first (default: en)"
    )

    parser.add_argument(
        "--from",
        dest="start",
        metavar="TIME",
        help="Only include lines starting at or after TIME (requires --timestamps)"
    )

    parser.add_argument(
        "--to",
        dest="end",
        metavar="TIME",
        help="Only include lines starting at or before TIME (requires --timestamps)"
    )

    parser.add_argument(
        "--only",
        nargs="+",
        metavar="TIME",
        help="Only include lines starting at these exact seconds (requires --timestamps)"
    )

    parser.add_argument(
        "--exclude",
        nargs="+",
        metavar="RANGE",
        help="Drop lines starting inside these ranges, e.g. '0:00-0:30 5:00-5:10' (requires --timestamps)"
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        metavar="FILE",
        help="Write the transcript to FILE instead of stdout"
    )

    parser.add_argument(
        "--list-tracks",
        action="store_true",
        help="List the available caption tracks and exit"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log pipeline progress to stderr"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"yt-transcript v{APP_VERSION}"
    )

    return parser


def build_selection(args: argparse.Namespace) -> SelectionRequest:
    """Turn the selection flags into a validated request."""
    selection = SelectionRequest.build(
        start=parse_time(args.start) if args.start is not None else None,
        end=parse_time(args.end) if args.end is not None else None,
        only=parse_only_times(args.only) if args.only else None,
        exclude=parse_exclude_ranges(args.exclude) if args.exclude else None,
    )
    if not selection.is_empty and not args.timestamps:
        raise TimestampsRequiredError()
    return selection


def print_tracks(tracks: List[CaptionTrack]) -> None:
    """Show the caption tracks of a video as a table."""
    table = Table(title="Caption tracks")
    table.add_column("#", justify="right")
    table.add_column("Language")
    table.add_column("Name")
    table.add_column("Type")
    for index, track in enumerate(tracks):
        table.add_row(str(index), track.language_code, escape(track.name or ""), track.kind_label)
    Console().print(table)


def write_output(transcript: str, output: Optional[Path]) -> None:
    """Send the transcript to stdout or to a file."""
    if output is None:
        sys.stdout.write(transcript + "\n")
        sys.stdout.flush()
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, 'w', encoding='utf-8') as f:
        f.write(transcript + "\n")
    logger.info(f"Transcript written to {output}")
    console.print(f"✓ Transcript saved to {escape(str(output))}")


def run(args: argparse.Namespace, service: Optional[TranscriptService] = None) -> None:
    """Execute one invocation. Raises ``TranscriptError`` on failure."""
    service = service or TranscriptService()

    if args.list_tracks:
        print_tracks(service.list_tracks(args.video))
        return

    selection = build_selection(args)
    transcript = service.get_transcript(
        args.video,
        languages=args.lang,
        selection=selection,
        timestamps=args.timestamps
    )
    write_output(transcript, args.output)


def main(argv: Optional[List[str]] = None, service: Optional[TranscriptService] = None) -> int:
    """Main entry point."""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level("DEBUG")

    try:
        run(args, service)
    except TranscriptError as e:
        logger.debug(f"{e.error_code}: {e.message}", exc_info=True)
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        return 1
    except KeyboardInterrupt:
        console.print("\nInterrupted.")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
