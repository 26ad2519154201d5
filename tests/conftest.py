"""
Pytest configuration and fixtures for group-sessions tests.
"""

from pathlib import Path
from typing import Dict, List

import pytest

from groupsessions.debug_logger import reset_logger
from groupsessions.models import SessionInfo
from groupsessions.store import SessionStore


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "tui: marks TUI tests")


@pytest.fixture
def temp_state_dir(tmp_path: Path, monkeypatch) -> Path:
    """Create and return a temporary state directory.

    Sets GROUP_SESSIONS_STATE env var and resets the debug logger.
    """
    state_dir = tmp_path / ".local" / "state" / "group-sessions"
    state_dir.mkdir(parents=True)
    monkeypatch.setenv("GROUP_SESSIONS_STATE", str(state_dir))
    reset_logger()
    return state_dir


@pytest.fixture(autouse=True)
def isolate_dirs(tmp_path: Path, temp_state_dir: Path, monkeypatch):
    """Keep every test away from the real settings, data and log files."""
    monkeypatch.setenv("GROUP_SESSIONS_SETTINGS", str(tmp_path / "settings.json"))
    monkeypatch.setenv("GROUP_SESSIONS_DATA", str(tmp_path / "data"))
    monkeypatch.delenv("GROUP_SESSIONS_DEBUG", raising=False)
    yield temp_state_dir
    reset_logger()


class MemorySessionStore(SessionStore):
    """In-memory store double that records every call."""

    def __init__(self, sessions: List[SessionInfo] = ()) -> None:
        self.records: Dict[str, SessionInfo] = {s.session_id: s for s in sessions}
        self.saved: List[SessionInfo] = []
        self.deleted: List[str] = []

    def get_all_sessions(self) -> List[SessionInfo]:
        return list(self.records.values())

    def get_all_group_names(self) -> List[str]:
        return sorted({s.group_name for s in self.records.values()})

    def save_session(self, session: SessionInfo) -> None:
        self.saved.append(session)
        self.records[session.session_id] = session

    def delete_session(self, session_id: str) -> None:
        self.deleted.append(session_id)
        self.records.pop(session_id, None)


@pytest.fixture
def sample_sessions() -> List[SessionInfo]:
    """Two sessions: id 1 in group A (older, longer), id 2 in group B."""
    return [
        SessionInfo("1", "A", "2024-01-01", 2.0, ["ann", "bob"]),
        SessionInfo("2", "B", "2024-02-01", 1.0, ["cat"]),
    ]


@pytest.fixture
def make_store():
    """Factory for MemorySessionStore, so tests don't import conftest."""
    return MemorySessionStore


@pytest.fixture
def memory_store(sample_sessions) -> MemorySessionStore:
    return MemorySessionStore(sample_sessions)
