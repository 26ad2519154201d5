#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Structured debug logger for Group Sessions.

Writes one JSON object per line to debug.log in the state directory.
The level comes from GROUP_SESSIONS_DEBUG, then the
groupSessions.debugLevel setting, and defaults to 1:

    0 - disabled
    1 - store loads, mutations, errors
    2 - also confirmation flow (requested / resolved / discarded)
"""

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from groupsessions.config import DEBUG_LEVEL_KEY, get_int_setting
from groupsessions.paths import PathResolver

DEFAULT_LEVEL = 1
LEVEL_TRACE = 2


def _resolve_level() -> int:
    env_level = os.environ.get("GROUP_SESSIONS_DEBUG")
    if env_level is not None:
        try:
            return int(env_level)
        except ValueError:
            return DEFAULT_LEVEL
    return get_int_setting(DEBUG_LEVEL_KEY, DEFAULT_LEVEL, minimum=0, maximum=LEVEL_TRACE)


class DebugLogger:
    """Appends structured events to the debug log."""

    def __init__(self, log_path: Optional[Path] = None, level: Optional[int] = None) -> None:
        self.log_path = log_path or PathResolver.debug_log()
        self.level = _resolve_level() if level is None else level

    def _write(self, event: Dict[str, Any]) -> None:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": "error" if event.get("event") == "error" else "info",
            "pid": os.getpid(),
        }
        entry.update(event)
        try:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_path, "a") as f:
                f.write(json.dumps(entry) + "\n")
        except OSError:
            # Never let logging take the app down
            pass

    def _enabled(self, min_level: int = DEFAULT_LEVEL) -> bool:
        return self.level >= min_level

    def store_loaded(self, session_count: int, group_count: int, source: str = "") -> None:
        if not self._enabled():
            return
        self._write({
            "event": "store_loaded",
            "session_count": session_count,
            "group_count": group_count,
            "source": source,
        })

    def mutation(self, op: str, session_id: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log a store mutation ("save" or "delete")."""
        if not self._enabled():
            return
        event = {"event": "mutation", "op": op, "session_id": session_id}
        if details:
            event["details"] = details
        self._write(event)

    def confirm_requested(self, action: str, session_id: str = "") -> None:
        if not self._enabled(LEVEL_TRACE):
            return
        self._write({"event": "confirm_requested", "action": action, "session_id": session_id})

    def confirm_resolved(self, action: str, confirmed: bool, session_id: str = "") -> None:
        if not self._enabled(LEVEL_TRACE):
            return
        self._write({
            "event": "confirm_resolved",
            "action": action,
            "confirmed": confirmed,
            "session_id": session_id,
        })

    def edit_discarded(self, session_id: str, dirty: bool) -> None:
        if not self._enabled(LEVEL_TRACE):
            return
        self._write({"event": "edit_discarded", "session_id": session_id, "dirty": dirty})

    def error(self, operation: str, error: str, context: Optional[Dict[str, Any]] = None) -> None:
        if not self._enabled():
            return
        event = {"event": "error", "op": operation, "err": error}
        if context:
            event["context"] = context
        self._write(event)


_logger: Optional[DebugLogger] = None


def get_logger() -> DebugLogger:
    """Get the process-wide logger, creating it on first use."""
    global _logger
    if _logger is None:
        _logger = DebugLogger()
    return _logger


def reset_logger() -> None:
    """Forget the cached logger so env/settings changes are picked up."""
    global _logger
    _logger = None
