#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Session store: the persistence contract and a local JSON implementation.

The store is a synchronous, single-process key-value collection of
sessions keyed by session id. It does no retrying; failures propagate to
the caller.
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, List, Optional

from groupsessions.debug_logger import get_logger
from groupsessions.file_lock import FileLock
from groupsessions.models import SessionInfo, parse_session_date
from groupsessions.paths import PathResolver


class SessionStore(ABC):
    """Persistence contract used by the search/edit controller."""

    @abstractmethod
    def get_all_sessions(self) -> List[SessionInfo]:
        """Return every stored session, in no particular order."""

    @abstractmethod
    def get_all_group_names(self) -> List[str]:
        """Return the distinct group names across stored sessions."""

    @abstractmethod
    def save_session(self, session: SessionInfo) -> None:
        """Create or overwrite a session by its id."""

    @abstractmethod
    def delete_session(self, session_id: str) -> None:
        """Remove a session. Unknown ids are ignored."""


class JsonSessionStore(SessionStore):
    """Sessions kept in one JSON document: {"sessions": {id: record}}.

    Every mutation is a locked read-modify-write with an atomic replace,
    so a crash mid-write leaves the previous file intact.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else PathResolver.sessions_file()

    def _read_records(self) -> Dict[str, dict]:
        if not self.path.exists():
            return {}
        text = self.path.read_text()
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Session store {self.path} is corrupt: {e}") from e
        records = data.get("sessions", {}) if isinstance(data, dict) else None
        if not isinstance(records, dict):
            raise ValueError(f"Session store {self.path} has no sessions mapping")
        return records

    def _write_records(self, records: Dict[str, dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_name(self.path.name + ".tmp")
        temp_path.write_text(json.dumps({"sessions": records}, indent=2) + "\n")
        os.replace(temp_path, self.path)

    def _atomic_update(self, update_fn: Callable[[Dict[str, dict]], None]) -> None:
        with FileLock(self.path):
            records = self._read_records()
            update_fn(records)
            self._write_records(records)

    def get_all_sessions(self) -> List[SessionInfo]:
        sessions = [SessionInfo.from_dict(record) for record in self._read_records().values()]

        logger = get_logger()
        for session in sessions:
            if parse_session_date(session.date_str) is None:
                logger.error(
                    operation="load_session",
                    error="Unparseable date, sorting it first",
                    context={"session_id": session.session_id, "date": session.date_str[:40]},
                )
        logger.store_loaded(
            session_count=len(sessions),
            group_count=len({s.group_name for s in sessions}),
            source=str(self.path),
        )
        return sessions

    def get_all_group_names(self) -> List[str]:
        names = {record.get("groupName", "") for record in self._read_records().values()}
        return sorted(name for name in names if name)

    def save_session(self, session: SessionInfo) -> None:
        """Create or overwrite a session.

        Raises:
            ValueError: If the session has no id
        """
        if not session.session_id:
            raise ValueError("Cannot save a session without an id")

        state = {"created": True}

        def update_fn(records: Dict[str, dict]) -> None:
            state["created"] = session.session_id not in records
            records[session.session_id] = session.to_dict()

        self._atomic_update(update_fn)

        get_logger().mutation(
            "save",
            session.session_id,
            {"created": state["created"], "participants": len(session.participants)},
        )

    def delete_session(self, session_id: str) -> None:
        state = {"found": False}

        def update_fn(records: Dict[str, dict]) -> None:
            state["found"] = records.pop(session_id, None) is not None

        self._atomic_update(update_fn)

        if state["found"]:
            get_logger().mutation("delete", session_id)
