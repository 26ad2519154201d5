#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Tests for ConfirmModal.

ConfirmModal is the yes/no prompt shown before a save, a delete, or
discarding unsaved changes. It dismisses with True for yes and False for
no/escape.
"""

import pytest

pytest.importorskip("textual")

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)

from textual.app import App, ComposeResult
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from groupsessions.tui.app import ConfirmModal


# ============================================================================
# Test App for Hosting the Modal
# ============================================================================


class ModalTestApp(App):
    """Test app that records the modal's result."""

    def __init__(self) -> None:
        super().__init__()
        self.results = []

    def compose(self) -> ComposeResult:
        yield Static("Test App")

    def ask(self, prompt: str) -> None:
        self.push_screen(ConfirmModal(prompt), callback=self.results.append)


# ============================================================================
# Tests
# ============================================================================


class TestConfirmModalCompose:
    """Tests for ConfirmModal widget composition."""

    def test_is_modal_screen(self):
        assert issubclass(ConfirmModal, ModalScreen)

    @pytest.mark.asyncio
    async def test_has_title_prompt_and_buttons(self):
        app = ModalTestApp()

        async with app.run_test() as pilot:
            app.ask("Delete this session?")
            await pilot.pause()

            assert isinstance(app.screen, ConfirmModal)
            assert app.screen.prompt == "Delete this session?"
            assert len(app.screen.query(".modal-title")) == 1
            assert app.screen.query_one("#confirm-prompt", Static) is not None
            assert app.screen.query_one("#confirm-yes", Button) is not None
            assert app.screen.query_one("#confirm-no", Button) is not None


class TestConfirmModalResult:
    """Tests for how the modal is answered."""

    @pytest.mark.asyncio
    async def test_yes_button(self):
        app = ModalTestApp()

        async with app.run_test() as pilot:
            app.ask("Overwrite this session?")
            await pilot.pause()
            app.screen.query_one("#confirm-yes", Button).press()
            await pilot.pause()

            assert app.results == [True]
            assert not isinstance(app.screen, ConfirmModal)

    @pytest.mark.asyncio
    async def test_no_button(self):
        app = ModalTestApp()

        async with app.run_test() as pilot:
            app.ask("Overwrite this session?")
            await pilot.pause()
            app.screen.query_one("#confirm-no", Button).press()
            await pilot.pause()

            assert app.results == [False]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key,expected", [("y", True), ("n", False), ("escape", False)])
    async def test_key_bindings(self, key, expected):
        app = ModalTestApp()

        async with app.run_test() as pilot:
            app.ask("Disregard current changes?")
            await pilot.pause()
            await pilot.press(key)
            await pilot.pause()

            assert app.results == [expected]
