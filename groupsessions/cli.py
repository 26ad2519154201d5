#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Command-line entry point for Group Sessions.

Usage:
    group-sessions                        # Full TUI (same as 'browse')
    group-sessions browse --data-file F   # TUI against a specific store file
    group-sessions list --group Math      # One-shot text listing
    group-sessions list --start 2024-01-01 --end 2024-03-31 --sort-duration desc
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from groupsessions._version import __version__
from groupsessions.models import NO_MATCHES_TEXT, NO_SESSIONS_TEXT, SessionInfo, SortState
from groupsessions.tui.formatting import format_duration, format_participants

SORT_CHOICES = {
    "none": SortState.NEUTRAL,
    "asc": SortState.INCREASING,
    "desc": SortState.DECREASING,
}


def format_session_table(sessions: List[SessionInfo]) -> str:
    """Render sessions as aligned plain-text columns."""
    if not sessions:
        return NO_SESSIONS_TEXT

    headers = ["Group Name", "Date", "Duration (hours)", "Participants"]
    rows = [
        [s.group_name, s.date_str, format_duration(s.duration), format_participants(s.participants)]
        for s in sessions
    ]
    widths = [max(len(headers[i]), *(len(row[i]) for row in rows)) for i in range(len(headers))]

    def fmt(cells: List[str]) -> str:
        return "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)).rstrip()

    lines = [fmt(headers), fmt(["-" * w for w in widths])]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="group-sessions",
        description="Group Sessions - record and browse group sessions",
    )
    parser.add_argument(
        "--version", action="version", version=f"group-sessions {__version__}"
    )
    parser.add_argument(
        "--data-file", type=Path, help="Session store file (default: from settings)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("browse", help="Launch the session browser TUI")

    list_parser = subparsers.add_parser("list", help="Print filtered, sorted sessions")
    list_parser.add_argument("--group", "-g", default="", help="Group name prefix")
    list_parser.add_argument("--start", default="", help="Range start date (needs --end)")
    list_parser.add_argument("--end", default="", help="Range end date (needs --start)")
    list_parser.add_argument(
        "--sort-date", choices=SORT_CHOICES, default="desc", help="Date sort (default: desc)"
    )
    list_parser.add_argument(
        "--sort-group", choices=SORT_CHOICES, default="none", help="Group name sort"
    )
    list_parser.add_argument(
        "--sort-duration", choices=SORT_CHOICES, default="none", help="Duration sort"
    )
    return parser


def run_list(args: argparse.Namespace) -> int:
    from groupsessions.controller import SessionSearchController
    from groupsessions.store import JsonSessionStore

    controller = SessionSearchController(JsonSessionStore(args.data_file))
    controller.set_group_name_filter(args.group)
    controller.set_date_range(args.start, args.end)
    controller.sort.date = SORT_CHOICES[args.sort_date]
    controller.sort.group = SORT_CHOICES[args.sort_group]
    controller.sort.duration = SORT_CHOICES[args.sort_duration]

    if not controller.has_sessions:
        print(NO_SESSIONS_TEXT)
        return 0
    sessions = controller.list_view()
    if not sessions:
        print(NO_MATCHES_TEXT)
        return 0
    print(format_session_table(sessions))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Default to browse (TUI) when no subcommand given
    if not args.command:
        args.command = "browse"

    try:
        if args.command == "list":
            return run_list(args)

        from groupsessions.tui.app import GroupSessionsApp

        GroupSessionsApp(data_file=args.data_file).run()
        return 0
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
