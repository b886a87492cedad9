"""Command-line interface for the UKG roster exporter."""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from ukgroster.domain.policies import DefaultBreakRulePolicy
from ukgroster.domain.temporal import format_day_label
from ukgroster.exceptions import InvalidDateError
from ukgroster.extraction.config import DEFAULT_MESSAGE_PREFIX, ExtractionConfig
from ukgroster.output.delivery import DirectoryDelivery
from ukgroster.session import EXPORT_FORMATS, RosterSession


def read_frames(capture_path: Path) -> list[str]:
    """Read a capture file holding one raw frame per line."""
    text = capture_path.read_text(encoding="utf-8")
    return [line.rstrip("\r") for line in text.split("\n") if line.strip()]


def build_session(args: argparse.Namespace) -> RosterSession:
    """Create a session configured from command-line flags."""
    config = ExtractionConfig(
        message_prefix=args.prefix,
        max_dates=args.max_dates,
    )
    policy = DefaultBreakRulePolicy(threshold_hours=args.break_threshold)
    return RosterSession(config=config, break_policy=policy)


def replay(session: RosterSession, frames: list[str], filter_messages: bool) -> int:
    """Feed captured frames through the session.

    Returns:
        Number of frames that replaced the snapshot.
    """
    accepted = 0
    for frame in frames:
        if session.handle_message(frame, filter_messages=filter_messages):
            accepted += 1
    return accepted


def run_dates(args: argparse.Namespace) -> int:
    """Print the exportable dates found in a capture."""
    session = build_session(args)
    frames = read_frames(Path(args.capture))
    accepted = replay(session, frames, not args.no_filter)

    dates = session.published_dates
    if not dates:
        print(f"No schedule payloads found in {args.capture} ({len(frames)} frames).")
        return 1

    print(f"{len(frames)} frames read, {accepted} schedule payloads used.")
    print(f"Shifts in latest payload: {len(session.snapshot.shifts)}")
    print("\nDates available for export:")
    for d in dates:
        print(f"  {d}  {format_day_label(date.fromisoformat(d))}")
    return 0


def run_export(args: argparse.Namespace) -> int:
    """Export one date from a capture to a CSV or PDF file."""
    notices: list[str] = []
    session = build_session(args)
    session.on_notice = notices.append
    session.delivery = DirectoryDelivery(args.output_dir)

    frames = read_frames(Path(args.capture))
    replay(session, frames, not args.no_filter)

    try:
        path = session.export_and_deliver(args.date, fmt=args.format)
    except InvalidDateError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if path is None:
        for notice in notices:
            print(notice)
        return 1

    print(f"Exported {args.date}: {path}")
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "capture",
        type=str,
        help="Capture file with one raw WebSocket frame per line",
    )
    parser.add_argument(
        "--prefix",
        type=str,
        default=DEFAULT_MESSAGE_PREFIX,
        help="Message name prefix of schedule payloads",
    )
    parser.add_argument(
        "--no-filter",
        action="store_true",
        help="Process every frame regardless of message name",
    )
    parser.add_argument(
        "--break-threshold",
        type=float,
        default=6.0,
        help="Shifts longer than this many hours require a break (default: 6)",
    )
    parser.add_argument(
        "--max-dates",
        type=int,
        default=7,
        help="Maximum number of dates offered for export (default: 7)",
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="UKG Roster - export captured schedules to per-day CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s dates capture.txt                      List exportable dates
  %(prog)s export capture.txt --date 2025-08-11   Write ukg_roster_2025-08-11.csv
  %(prog)s export capture.txt -d 2025-08-11 -o out --format pdf
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    dates_parser = subparsers.add_parser("dates", help="List dates available for export")
    _add_common_arguments(dates_parser)

    export_parser = subparsers.add_parser("export", help="Export the roster for one date")
    _add_common_arguments(export_parser)
    export_parser.add_argument(
        "--date", "-d",
        type=str,
        required=True,
        help="Date to export (YYYY-MM-DD)",
    )
    export_parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default=".",
        help="Directory for the exported file (default: current directory)",
    )
    export_parser.add_argument(
        "--format", "-f",
        type=str,
        default="csv",
        choices=list(EXPORT_FORMATS),
        help="Output format (default: csv)",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "dates":
        return run_dates(args)
    elif args.command == "export":
        return run_export(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
