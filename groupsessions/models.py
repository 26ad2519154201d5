#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Data models for group sessions.

Contains the SessionInfo record, the sort and confirmation enums, and the
date parsing helpers shared by the filter and sort engines.
"""

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Sequence


# =============================================================================
# Constants
# =============================================================================

# Ordering value for dates that cannot be parsed: sorts before everything
UNPARSEABLE_DATE = float("-inf")

CONFIRM_TITLE = "Are you Sure?"
NO_SESSIONS_TEXT = "No Saved Sessions"
NO_MATCHES_TEXT = "No matching sessions"


# =============================================================================
# Enums
# =============================================================================


class SortState(str, Enum):
    """Tri-state sort toggle for a list column."""
    NEUTRAL = "neutral"
    INCREASING = "increasing"
    DECREASING = "decreasing"


class SortColumn(str, Enum):
    """Sortable list columns, in fixed priority order."""
    DATE = "date"
    GROUP = "group"
    DURATION = "duration"


class ModalState(str, Enum):
    """Which action, if any, is waiting on a yes/no confirmation."""
    NOT_SHOWING = "not_showing"
    CONFIRM_DELETE = "confirm_delete"
    CONFIRM_SAVE = "confirm_save"
    CONFIRM_BACK = "confirm_back"


def next_sort_state(state: SortState) -> SortState:
    """Advance a column toggle: NEUTRAL -> INCREASING -> DECREASING -> NEUTRAL.

    Any value outside the three known states normalizes to NEUTRAL.
    """
    if state == SortState.NEUTRAL:
        return SortState.INCREASING
    if state == SortState.INCREASING:
        return SortState.DECREASING
    return SortState.NEUTRAL


# =============================================================================
# Date parsing
# =============================================================================


def parse_session_date(text: str) -> Optional[float]:
    """Parse a session date string into epoch milliseconds.

    Date-only values ("2024-01-31") are taken as midnight UTC, as are naive
    datetimes. Aware datetimes keep their offset.

    Args:
        text: ISO date or datetime string

    Returns:
        Milliseconds since the epoch, or None if the text is empty or
        cannot be parsed.
    """
    if not text:
        return None
    text = text.strip()
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp() * 1000


def date_sort_value(text: str) -> float:
    """Ordering value for a session date, UNPARSEABLE_DATE on failure."""
    parsed = parse_session_date(text)
    if parsed is None:
        return UNPARSEABLE_DATE
    return parsed


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True, eq=False)
class SessionInfo:
    """A recorded group session.

    Identity is the session_id alone; two records with the same id are the
    same session even if their other fields differ.
    """
    session_id: str
    group_name: str = ""
    date_str: str = ""
    duration: float = 0.0
    participants: Sequence[str] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Stored as a tuple so a snapshot record can't be changed in place
        object.__setattr__(self, "participants", tuple(self.participants))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SessionInfo):
            return NotImplemented
        return self.session_id == other.session_id

    def __hash__(self) -> int:
        return hash(self.session_id)

    @classmethod
    def new(cls, group_name: str = "", date_str: str = "") -> "SessionInfo":
        """Create a blank, not yet saved session with a fresh id."""
        return cls(
            session_id=new_session_id(),
            group_name=group_name,
            date_str=date_str,
        )

    def with_changes(self, **changes: Any) -> "SessionInfo":
        """Return a copy with the given fields replaced, keeping the id."""
        changes.pop("session_id", None)
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the stored camelCase keys."""
        return {
            "sessionID": self.session_id,
            "groupName": self.group_name,
            "dateStr": self.date_str,
            "duration": self.duration,
            "participants": list(self.participants),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionInfo":
        """Build a SessionInfo from its stored dict form.

        Raises:
            ValueError: If sessionID is missing or duration is not numeric
        """
        session_id = data.get("sessionID")
        if not session_id:
            raise ValueError("Stored session is missing sessionID")
        try:
            duration = float(data.get("duration", 0) or 0)
        except (TypeError, ValueError):
            raise ValueError(f"Session {session_id} has a non-numeric duration")
        return cls(
            session_id=str(session_id),
            group_name=str(data.get("groupName", "")),
            date_str=str(data.get("dateStr", "")),
            duration=duration,
            participants=[str(p) for p in data.get("participants", [])],
        )


def new_session_id() -> str:
    """Generate an opaque unique session id."""
    return uuid.uuid4().hex
