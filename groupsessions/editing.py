#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Edit-mode helpers: dirty checking and the confirmation state machine.

Leaving edit mode with changes, saving, and deleting all go through a
yes/no prompt. The prompt's pending action is held as a single tagged
value so the state and the data it needs can never drift apart.
"""

from dataclasses import dataclass
from typing import Optional

from groupsessions.models import ModalState, SessionInfo


PROMPTS = {
    ModalState.CONFIRM_DELETE: "Delete this session?",
    ModalState.CONFIRM_SAVE: "Overwrite this session?",
    ModalState.CONFIRM_BACK: "Disregard current changes?",
}


def is_dirty(original: SessionInfo, candidate: SessionInfo) -> bool:
    """Check whether an edit differs from the record it started from.

    Participants are compared by position, so a reorder counts as a change.

    Args:
        original: The record as it was when editing began
        candidate: The record as currently shown in the form

    Returns:
        True if any field or participant differs
    """
    if (
        original.group_name != candidate.group_name
        or original.date_str != candidate.date_str
        or original.duration != candidate.duration
    ):
        return True
    if len(original.participants) != len(candidate.participants):
        return True
    return any(
        before != after
        for before, after in zip(original.participants, candidate.participants)
    )


@dataclass(frozen=True)
class PendingAction:
    """An action waiting on confirmation.

    Only CONFIRM_SAVE carries a candidate; delete and back act on the
    record currently being edited.
    """
    kind: ModalState
    candidate: Optional[SessionInfo] = None


class ConfirmationMachine:
    """Tracks which action, if any, is waiting on the yes/no prompt."""

    def __init__(self) -> None:
        self._pending: Optional[PendingAction] = None

    @property
    def state(self) -> ModalState:
        if self._pending is None:
            return ModalState.NOT_SHOWING
        return self._pending.kind

    @property
    def pending(self) -> Optional[PendingAction]:
        return self._pending

    @property
    def prompt(self) -> str:
        return PROMPTS.get(self.state, "")

    def request_save(self, candidate: SessionInfo) -> None:
        self._pending = PendingAction(ModalState.CONFIRM_SAVE, candidate)

    def request_delete(self) -> None:
        self._pending = PendingAction(ModalState.CONFIRM_DELETE)

    def request_back(self) -> None:
        self._pending = PendingAction(ModalState.CONFIRM_BACK)

    def resolve(self) -> Optional[PendingAction]:
        """Take the pending action and return to NOT_SHOWING."""
        pending, self._pending = self._pending, None
        return pending

    def cancel(self) -> None:
        """Drop the pending action without running it."""
        self._pending = None
