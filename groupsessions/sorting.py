# SPDX-License-Identifier: MIT
"""Sort engine for the session list.

Three tri-state toggles drive one comparator with a fixed key priority:
date, then group name, then duration. A NEUTRAL key is skipped, a tie on
an active key falls through to the next one, and the sort itself is
stable so full ties keep their input order.
"""
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, List

from groupsessions.models import (
    SessionInfo,
    SortColumn,
    SortState,
    date_sort_value,
    next_sort_state,
)


SORT_GLYPHS = {
    SortState.NEUTRAL: "-",
    SortState.INCREASING: "▲",
    SortState.DECREASING: "▼",
}


def _sign(a, b) -> int:
    """Three-way comparison that also ties two -inf sentinels."""
    return (a > b) - (a < b)


def _apply_direction(state: SortState, comparison: int) -> int:
    if state == SortState.DECREASING:
        return -comparison
    return comparison


@dataclass
class SortSettings:
    """Current toggle per column. The list opens sorted newest-first."""

    date: SortState = SortState.DECREASING
    group: SortState = SortState.NEUTRAL
    duration: SortState = SortState.NEUTRAL

    def state_for(self, column: SortColumn) -> SortState:
        return getattr(self, SortColumn(column).value)

    def toggle(self, column: SortColumn) -> SortState:
        """Advance one column's toggle and return its new state."""
        column = SortColumn(column)
        new_state = next_sort_state(getattr(self, column.value))
        setattr(self, column.value, new_state)
        return new_state


def compare_sessions(a: SessionInfo, b: SessionInfo, settings: SortSettings) -> int:
    """Compare two sessions under the given sort settings.

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 on a tie
        across every active key.
    """
    if settings.date != SortState.NEUTRAL:
        comparison = _sign(date_sort_value(a.date_str), date_sort_value(b.date_str))
        if comparison != 0:
            return _apply_direction(settings.date, comparison)

    if settings.group != SortState.NEUTRAL:
        comparison = _sign(a.group_name, b.group_name)
        if comparison != 0:
            return _apply_direction(settings.group, comparison)

    if settings.duration != SortState.NEUTRAL:
        comparison = _sign(a.duration, b.duration)
        if comparison != 0:
            return _apply_direction(settings.duration, comparison)

    return 0


def sort_sessions(sessions: Iterable[SessionInfo], settings: SortSettings) -> List[SessionInfo]:
    """Return a new, stably sorted list of sessions."""
    return sorted(sessions, key=cmp_to_key(lambda a, b: compare_sessions(a, b, settings)))
