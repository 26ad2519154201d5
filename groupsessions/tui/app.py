#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Main TUI application for browsing and editing group sessions.

Screens:
- SessionSearchScreen: filterable, sortable list of saved sessions
- EditSessionScreen: form for one session with Save / Delete / Back
- ConfirmModal: yes/no prompt for any pending save, delete or discard

All state lives in SessionSearchController; screens only render it and
forward user actions.
"""

from pathlib import Path
from typing import Any, Callable, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import ModalScreen, Screen
from textual.suggester import SuggestFromList
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Label,
    Static,
)

from groupsessions.controller import SessionSearchController
from groupsessions.models import (
    CONFIRM_TITLE,
    NO_MATCHES_TEXT,
    NO_SESSIONS_TEXT,
    ModalState,
    SessionInfo,
    SortColumn,
    parse_session_date,
)
from groupsessions.store import JsonSessionStore, SessionStore
from groupsessions.tui.formatting import (
    LIST_COLUMNS,
    format_duration,
    format_participants,
    parse_duration,
    parse_participants,
    sort_label,
)


class ConfirmModal(ModalScreen[bool]):
    """Yes/no prompt. Dismisses with True for yes, False otherwise."""

    BINDINGS = [
        Binding("y", "confirm", "Yes"),
        Binding("n", "cancel", "No"),
        Binding("escape", "cancel", "No"),
    ]

    def __init__(self, prompt: str) -> None:
        super().__init__()
        self.prompt = prompt

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-modal"):
            yield Static(f"[bold]{CONFIRM_TITLE}[/bold]", classes="modal-title")
            yield Static(self.prompt, id="confirm-prompt")
            with Horizontal(classes="modal-button-row"):
                yield Button("Yes", id="confirm-yes", variant="error")
                yield Button("No", id="confirm-no", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "confirm-yes":
            self.action_confirm()
        elif event.button.id == "confirm-no":
            self.action_cancel()

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)


class EditSessionScreen(Screen):
    """Form for one session.

    Save, Delete and Back hand the form's current record to the controller;
    whatever the controller decides (prompt or leave) is then reflected here.
    """

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("ctrl+s", "save", "Save", priority=True),
        # Input binds ctrl+d to delete-right; the form always has one focused
        Binding("ctrl+d", "delete", "Delete", priority=True),
    ]

    def __init__(
        self,
        controller: SessionSearchController,
        session: SessionInfo,
        title: str = "Edit Group Session",
    ) -> None:
        super().__init__()
        self.controller = controller
        self.session = session
        self.page_title = title

    def compose(self) -> ComposeResult:
        session = self.session
        yield Header()
        with Vertical(id="edit-form"):
            yield Static(f"[bold]{self.page_title}[/bold]", classes="page-title")
            yield Label("Group Name:")
            yield Input(
                value=session.group_name,
                placeholder="Group Name",
                id="group-name",
                suggester=SuggestFromList(self.controller.group_names, case_sensitive=True),
            )
            yield Label("Date:")
            yield Input(value=session.date_str, placeholder="YYYY-MM-DD", id="session-date")
            yield Label("Duration (hours):")
            yield Input(
                value=format_duration(session.duration),
                placeholder="0",
                id="session-duration",
            )
            yield Label("Participants:")
            yield Input(
                value=format_participants(session.participants),
                placeholder="Comma separated names",
                id="session-participants",
            )
            with Horizontal(classes="form-button-row"):
                yield Button("Save", id="save-button", variant="success")
                yield Button("Delete", id="delete-button", variant="error")
                yield Button("Back", id="back-button")
        yield Footer()

    def _input_value(self, input_id: str) -> str:
        return self.query_one(f"#{input_id}", Input).value

    def _field(self, input_id: str, shown: str, original: Any, parse: Callable[[str], Any]) -> Any:
        """Parse an input, or return the original value if its text is untouched."""
        text = self._input_value(input_id)
        if text == shown:
            return original
        return parse(text)

    def candidate(self) -> SessionInfo:
        """Build a record from the form, keeping the session's id.

        Inputs still showing their initial text yield the stored value
        unchanged, so an untouched form is never dirty.

        Raises:
            ValueError: If the duration cannot be parsed
        """
        session = self.session
        return session.with_changes(
            group_name=self._field("group-name", session.group_name, session.group_name, str.strip),
            date_str=self._field("session-date", session.date_str, session.date_str, str.strip),
            duration=self._field(
                "session-duration",
                format_duration(session.duration),
                session.duration,
                parse_duration,
            ),
            participants=self._field(
                "session-participants",
                format_participants(session.participants),
                session.participants,
                parse_participants,
            ),
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save-button":
            self.action_save()
        elif event.button.id == "delete-button":
            self.action_delete()
        elif event.button.id == "back-button":
            self.action_back()

    def action_save(self) -> None:
        try:
            candidate = self.candidate()
        except ValueError as e:
            self.notify(str(e), severity="error")
            return
        if not candidate.group_name:
            self.notify("Group name is required", severity="error")
            return
        if parse_session_date(candidate.date_str) is None:
            self.notify("Date must be YYYY-MM-DD", severity="error")
            return
        self.controller.request_save(candidate)
        self._show_prompt()

    def action_delete(self) -> None:
        self.controller.request_delete(self.session)
        self._show_prompt()

    def action_back(self) -> None:
        try:
            candidate: Optional[SessionInfo] = self.candidate()
        except ValueError:
            candidate = None
        self.controller.request_back(candidate)
        if self.controller.is_editing:
            self._show_prompt()
        else:
            self._leave()

    def _show_prompt(self) -> None:
        if self.controller.modal_state == ModalState.NOT_SHOWING:
            return
        self.app.push_screen(
            ConfirmModal(self.controller.prompt),
            callback=self._on_confirm_result,
        )

    def _on_confirm_result(self, confirmed: Optional[bool]) -> None:
        if not confirmed:
            self.controller.cancel()
            return
        try:
            self.controller.confirm()
        except (OSError, ValueError) as e:
            self.notify(f"Error: {e}", severity="error")
            return
        if not self.controller.is_editing:
            self._leave()

    def _leave(self) -> None:
        self.app.pop_screen()


class SessionSearchScreen(Screen):
    """Filterable, sortable list of saved sessions."""

    BINDINGS = [
        Binding("q", "app.quit", "Quit"),
        Binding("n", "new_session", "New"),
        Binding("r", "reset_filters", "Reset Filters"),
        Binding("g", "toggle_sort('group')", "Sort Group"),
        Binding("d", "toggle_sort('date')", "Sort Date"),
        Binding("u", "toggle_sort('duration')", "Sort Duration"),
    ]

    def __init__(self, controller: SessionSearchController) -> None:
        super().__init__()
        self.controller = controller

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="search-page"):
            yield Static("[bold]Find a Session[/bold]", classes="page-title")
            with Horizontal(classes="search-container"):
                yield Label("Filter:")
                yield Input(
                    placeholder="Group Name",
                    id="group-filter",
                    suggester=SuggestFromList(self.controller.group_names, case_sensitive=True),
                )
            with Horizontal(classes="search-container"):
                yield Label("Date Range:")
                yield Input(placeholder="YYYY-MM-DD", id="start-date")
                yield Label("to")
                yield Input(placeholder="YYYY-MM-DD", id="end-date")
            yield Button("Reset Filters", id="reset-filters")
            yield Static(f"[bold]{NO_SESSIONS_TEXT}[/bold]", id="no-sessions")
            yield Static(NO_MATCHES_TEXT, id="no-matches")
            yield DataTable(id="session-list", cursor_type="row", zebra_stripes=True)
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_list()
        self.query_one("#session-list", DataTable).focus()

    def on_screen_resume(self) -> None:
        # Back from the edit screen: group names and the snapshot may have changed
        try:
            group_filter = self.query_one("#group-filter", Input)
        except NoMatches:
            return
        group_filter.suggester = SuggestFromList(self.controller.group_names, case_sensitive=True)
        self.refresh_list()

    def refresh_list(self) -> None:
        """Rebuild headers and rows from the controller's list view."""
        table = self.query_one("#session-list", DataTable)
        table.clear(columns=True)
        for column, title in LIST_COLUMNS:
            table.add_column(
                sort_label(title, self.controller.sort.state_for(column)),
                key=column.value,
            )
        for session in self.controller.list_view():
            table.add_row(
                session.group_name,
                session.date_str,
                format_duration(session.duration),
                key=session.session_id,
            )

        empty = not self.controller.has_sessions
        self.query_one("#no-sessions", Static).display = empty
        self.query_one("#no-matches", Static).display = (
            not empty and self.controller.filter.is_active and table.row_count == 0
        )
        table.display = not empty

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "group-filter":
            self.controller.set_group_name_filter(event.value)
        elif event.input.id in ("start-date", "end-date"):
            self.controller.set_date_range(
                self.query_one("#start-date", Input).value.strip(),
                self.query_one("#end-date", Input).value.strip(),
            )
        else:
            return
        self.refresh_list()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "reset-filters":
            self.action_reset_filters()

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        """Clicking a column header advances that column's sort toggle."""
        if event.column_key is None or event.column_key.value is None:
            return
        self.action_toggle_sort(event.column_key.value)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        if event.row_key is None or event.row_key.value is None:
            return
        session = self.controller.get_session(event.row_key.value)
        if session is not None:
            self.app.edit_session(session)

    def action_toggle_sort(self, column: str) -> None:
        self.controller.toggle_sort(SortColumn(column))
        self.refresh_list()

    def action_reset_filters(self) -> None:
        self.controller.reset_filters()
        for input_id in ("group-filter", "start-date", "end-date"):
            self.query_one(f"#{input_id}", Input).value = ""
        self.refresh_list()

    def action_new_session(self) -> None:
        self.app.new_session()


class GroupSessionsApp(App):
    """Textual application for recording and browsing group sessions."""

    TITLE = "Group Sessions"
    CSS_PATH = "styles/app.tcss"

    def __init__(
        self,
        store: Optional[SessionStore] = None,
        data_file: Optional[Path] = None,
    ) -> None:
        """Load the session snapshot.

        Args:
            store: Session store to use (optional, defaults to the JSON store)
            data_file: Override the JSON store path (optional)
        """
        super().__init__()
        self.store = store if store is not None else JsonSessionStore(data_file)
        self.controller = SessionSearchController(self.store)

    def get_default_screen(self) -> Screen:
        return SessionSearchScreen(self.controller)

    def edit_session(self, session: SessionInfo) -> None:
        self.controller.select_for_edit(session)
        self.push_screen(EditSessionScreen(self.controller, session))

    def new_session(self) -> None:
        session = self.controller.new_session()
        self.push_screen(EditSessionScreen(self.controller, session, title="Add Group Session"))


def run_app(data_file: Optional[Path] = None) -> None:
    """
    Run the TUI application.

    Args:
        data_file: Override the session store path (optional)
    """
    app = GroupSessionsApp(data_file=data_file)
    app.run()


if __name__ == "__main__":
    run_app()
