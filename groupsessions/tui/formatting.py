#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Shared formatting utilities for TUI components.

Converts between SessionInfo fields and the text shown in list cells and
form inputs, and builds the sort-aware column header labels.
"""

from typing import List, Sequence

from groupsessions.models import SortColumn, SortState
from groupsessions.sorting import SORT_GLYPHS

# Column order in the session list (display order, not sort priority)
LIST_COLUMNS = [
    (SortColumn.GROUP, "Group Name"),
    (SortColumn.DATE, "Date"),
    (SortColumn.DURATION, "Duration (hours)"),
]


def sort_label(title: str, state: SortState) -> str:
    """Column header text with the current sort glyph, e.g. "Date ▼"."""
    return f"{title} {SORT_GLYPHS.get(state, SORT_GLYPHS[SortState.NEUTRAL])}"


def format_duration(hours: float) -> str:
    """Format hours without a trailing ".0" for whole numbers.

    Fractions use the shortest text that parses back to the same float.

    Examples:
        2.0 -> "2"
        1.5 -> "1.5"
        4/3 -> "1.3333333333333333"
    """
    hours = float(hours)
    if hours.is_integer():
        return str(int(hours))
    return repr(hours)


def parse_duration(text: str) -> float:
    """Parse the duration input.

    Raises:
        ValueError: If the text is empty, not a number, or negative
    """
    text = text.strip()
    if not text:
        raise ValueError("Duration is required")
    try:
        hours = float(text)
    except ValueError:
        raise ValueError(f"Duration must be a number of hours, got '{text}'") from None
    if hours < 0 or hours != hours:
        raise ValueError("Duration must be zero or more hours")
    return hours


def format_participants(participants: Sequence[str]) -> str:
    return ", ".join(participants)


def parse_participants(text: str) -> List[str]:
    """Split a comma-separated participant list, keeping order, dropping blanks."""
    return [part.strip() for part in text.split(",") if part.strip()]
