#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""Tests for dirty checking and the confirmation state machine."""

import pytest

from groupsessions.editing import PROMPTS, ConfirmationMachine, PendingAction, is_dirty
from groupsessions.models import ModalState, SessionInfo


@pytest.fixture
def original():
    return SessionInfo("s1", "Math", "2024-01-01", 2.0, ["ann", "bob", "cat"])


class TestIsDirty:
    """Tests for is_dirty."""

    def test_identical_copy_is_clean(self, original):
        copy = SessionInfo(
            original.session_id,
            original.group_name,
            original.date_str,
            original.duration,
            list(original.participants),
        )
        assert not is_dirty(original, copy)
        assert not is_dirty(original, original)

    @pytest.mark.parametrize(
        "changes",
        [
            {"group_name": "Art"},
            {"date_str": "2024-01-02"},
            {"duration": 2.5},
        ],
    )
    def test_field_change_is_dirty(self, original, changes):
        assert is_dirty(original, original.with_changes(**changes))

    def test_reordered_participants_is_dirty(self, original):
        assert is_dirty(original, original.with_changes(participants=["bob", "ann", "cat"]))

    def test_added_participant_is_dirty(self, original):
        assert is_dirty(original, original.with_changes(participants=["ann", "bob", "cat", "dan"]))

    def test_removed_participant_is_dirty(self, original):
        assert is_dirty(original, original.with_changes(participants=["ann", "bob"]))

    def test_renamed_participant_is_dirty(self, original):
        assert is_dirty(original, original.with_changes(participants=["ann", "bob", "cal"]))

    def test_int_and_float_duration_equal(self, original):
        assert not is_dirty(original, original.with_changes(duration=2))


class TestConfirmationMachine:
    """Tests for ConfirmationMachine state transitions."""

    def test_initial_state(self):
        machine = ConfirmationMachine()
        assert machine.state == ModalState.NOT_SHOWING
        assert machine.pending is None
        assert machine.prompt == ""

    def test_request_save_holds_candidate(self, original):
        machine = ConfirmationMachine()
        machine.request_save(original)
        assert machine.state == ModalState.CONFIRM_SAVE
        assert machine.pending == PendingAction(ModalState.CONFIRM_SAVE, original)
        assert machine.prompt == "Overwrite this session?"

    def test_request_delete(self):
        machine = ConfirmationMachine()
        machine.request_delete()
        assert machine.state == ModalState.CONFIRM_DELETE
        assert machine.pending.candidate is None
        assert machine.prompt == "Delete this session?"

    def test_request_back(self):
        machine = ConfirmationMachine()
        machine.request_back()
        assert machine.state == ModalState.CONFIRM_BACK
        assert machine.prompt == "Disregard current changes?"

    def test_later_request_replaces_earlier(self, original):
        machine = ConfirmationMachine()
        machine.request_save(original)
        machine.request_delete()
        assert machine.state == ModalState.CONFIRM_DELETE
        assert machine.pending.candidate is None

    def test_resolve_returns_pending_and_resets(self, original):
        machine = ConfirmationMachine()
        machine.request_save(original)
        pending = machine.resolve()
        assert pending.kind == ModalState.CONFIRM_SAVE
        assert pending.candidate is original
        assert machine.state == ModalState.NOT_SHOWING
        assert machine.resolve() is None

    def test_cancel_drops_payload(self, original):
        machine = ConfirmationMachine()
        machine.request_save(original)
        machine.cancel()
        assert machine.state == ModalState.NOT_SHOWING
        assert machine.pending is None

    def test_every_confirm_state_has_prompt(self):
        confirm_states = set(ModalState) - {ModalState.NOT_SHOWING}
        assert set(PROMPTS) == confirm_states
