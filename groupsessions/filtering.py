# SPDX-License-Identifier: MIT
"""Filter engine for the session list.

A session passes when its group name starts with the group filter and,
only if both range bounds are supplied, its date lies inside the inclusive
range. A single bound disables date filtering entirely.
"""
from dataclasses import dataclass

from groupsessions.models import SessionInfo, parse_session_date


def matches_filter(
    session: SessionInfo,
    group_name_filter: str = "",
    start_date: str = "",
    end_date: str = "",
) -> bool:
    """Check whether a session passes the group and date filters.

    Args:
        session: The session to test
        group_name_filter: Case-sensitive prefix; empty matches everything
        start_date: Inclusive lower bound, or "" for none
        end_date: Inclusive upper bound, or "" for none

    Returns:
        True if the session should be listed
    """
    if not session.group_name.startswith(group_name_filter):
        return False

    if not start_date or not end_date:
        return True

    start_ms = parse_session_date(start_date)
    end_ms = parse_session_date(end_date)
    session_ms = parse_session_date(session.date_str)
    # Anything unparseable on either side never falls inside a range
    if start_ms is None or end_ms is None or session_ms is None:
        return False
    return start_ms <= session_ms <= end_ms


@dataclass
class SessionFilter:
    """The three filter inputs shown above the session list."""

    group_name: str = ""
    start_date: str = ""
    end_date: str = ""

    @property
    def is_active(self) -> bool:
        """True when the filter can exclude anything."""
        return bool(self.group_name) or bool(self.start_date and self.end_date)

    def matches(self, session: SessionInfo) -> bool:
        return matches_filter(session, self.group_name, self.start_date, self.end_date)

    def reset(self) -> None:
        self.group_name = ""
        self.start_date = ""
        self.end_date = ""
