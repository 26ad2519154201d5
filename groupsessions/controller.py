#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Search/edit controller for the session list.

Owns the in-memory snapshot of the store, the filter inputs, the sort
toggles, the confirmation state machine and the record being edited.
Views call into it and re-render from its state; it never talks to a
widget.

The snapshot is loaded once. Only confirmed saves and deletes made through
this controller change it afterwards.
"""

from typing import Dict, List, Optional

from groupsessions.debug_logger import DebugLogger, get_logger
from groupsessions.editing import ConfirmationMachine, PendingAction, is_dirty
from groupsessions.filtering import SessionFilter
from groupsessions.models import ModalState, SessionInfo, SortColumn, SortState
from groupsessions.sorting import SortSettings, sort_sessions
from groupsessions.store import SessionStore


class SessionSearchController:
    """View-facing operations for finding, editing and deleting sessions."""

    def __init__(self, store: SessionStore, logger: Optional[DebugLogger] = None) -> None:
        """Load the snapshot from the store.

        Args:
            store: Persistence backend; its errors propagate unchanged
            logger: Debug logger, defaults to the process-wide one
        """
        self.store = store
        self.logger = logger or get_logger()

        self._snapshot: Dict[str, SessionInfo] = {
            session.session_id: session for session in store.get_all_sessions()
        }
        self._group_names: List[str] = list(store.get_all_group_names())

        self.filter = SessionFilter()
        self.sort = SortSettings()
        self.confirmation = ConfirmationMachine()
        self.editing: Optional[SessionInfo] = None

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def sessions(self) -> List[SessionInfo]:
        """Snapshot in insertion order, unfiltered and unsorted."""
        return list(self._snapshot.values())

    @property
    def group_names(self) -> List[str]:
        return list(self._group_names)

    @property
    def has_sessions(self) -> bool:
        return bool(self._snapshot)

    @property
    def is_editing(self) -> bool:
        return self.editing is not None

    @property
    def modal_state(self) -> ModalState:
        return self.confirmation.state

    @property
    def prompt(self) -> str:
        return self.confirmation.prompt

    def get_session(self, session_id: str) -> Optional[SessionInfo]:
        return self._snapshot.get(session_id)

    def list_view(self) -> List[SessionInfo]:
        """Filter the snapshot, then sort what is left."""
        visible = [s for s in self._snapshot.values() if self.filter.matches(s)]
        return sort_sessions(visible, self.sort)

    # -------------------------------------------------------------------------
    # Filters and sorting
    # -------------------------------------------------------------------------

    def set_group_name_filter(self, prefix: str) -> None:
        self.filter.group_name = prefix

    def set_date_range(self, start_date: str = "", end_date: str = "") -> None:
        self.filter.start_date = start_date
        self.filter.end_date = end_date

    def reset_filters(self) -> None:
        """Clear group and date filters. Sort toggles are left alone."""
        self.filter.reset()

    def toggle_sort(self, column: SortColumn) -> SortState:
        return self.sort.toggle(column)

    # -------------------------------------------------------------------------
    # Edit mode
    # -------------------------------------------------------------------------

    def select_for_edit(self, session: SessionInfo) -> None:
        self.editing = session

    def new_session(self) -> SessionInfo:
        """Start editing a blank session with a fresh id."""
        session = SessionInfo.new()
        self.editing = session
        return session

    def request_save(self, candidate: SessionInfo) -> None:
        """Ask before saving. New and existing records both confirm."""
        self.confirmation.request_save(candidate)
        self.logger.confirm_requested("save", candidate.session_id)

    def request_delete(self, candidate: Optional[SessionInfo] = None) -> None:
        """Ask before deleting the record being edited.

        The candidate is accepted for the form callback signature but not
        used: deletion always targets the editing record.
        """
        self.confirmation.request_delete()
        self.logger.confirm_requested("delete", self._editing_id())

    def request_back(self, candidate: Optional[SessionInfo]) -> None:
        """Leave edit mode, asking first only if the form has changes.

        Args:
            candidate: The form's current record, or None when the form
                cannot produce one (e.g. a half-typed duration), which
                counts as a change.
        """
        dirty = False
        if self.editing is not None:
            dirty = candidate is None or is_dirty(self.editing, candidate)

        if dirty:
            self.confirmation.request_back()
            self.logger.confirm_requested("back", self._editing_id())
        else:
            self._do_back(dirty=False)

    def confirm(self) -> None:
        """Run the pending action, then return to NOT_SHOWING."""
        pending = self.confirmation.resolve()
        if pending is None:
            return
        session_id = self._pending_id(pending)

        if pending.kind == ModalState.CONFIRM_SAVE:
            self._do_save(pending.candidate)
        elif pending.kind == ModalState.CONFIRM_DELETE:
            self._do_delete()
        elif pending.kind == ModalState.CONFIRM_BACK:
            self._do_back(dirty=True)
        # Only reached when the store call above succeeded
        self.logger.confirm_resolved(pending.kind.value, True, session_id)

    def cancel(self) -> None:
        """Dismiss the prompt without running anything."""
        pending = self.confirmation.pending
        if pending is None:
            return
        self.confirmation.cancel()
        self.logger.confirm_resolved(pending.kind.value, False, self._pending_id(pending))

    def _do_save(self, candidate: Optional[SessionInfo]) -> None:
        if candidate is None:
            return
        self.store.save_session(candidate)
        # Re-saved records move to the end, like a fresh insert
        self._snapshot.pop(candidate.session_id, None)
        self._snapshot[candidate.session_id] = candidate
        if candidate.group_name and candidate.group_name not in self._group_names:
            self._group_names.append(candidate.group_name)
        self.editing = None

    def _do_delete(self) -> None:
        if self.editing is None:
            return
        self.store.delete_session(self.editing.session_id)
        self._snapshot.pop(self.editing.session_id, None)
        self.editing = None

    def _do_back(self, dirty: bool) -> None:
        if self.editing is not None:
            self.logger.edit_discarded(self.editing.session_id, dirty)
        self.editing = None

    def _editing_id(self) -> str:
        return self.editing.session_id if self.editing is not None else ""

    def _pending_id(self, pending: PendingAction) -> str:
        if pending.candidate is not None:
            return pending.candidate.session_id
        return self._editing_id()
