# SPDX-License-Identifier: MIT
"""Centralized path resolution for Group Sessions.

All path resolution should go through this module to ensure consistency.
"""
import os
from pathlib import Path

from groupsessions.config import DATA_FILE_KEY, get_path_setting


class PathResolver:
    """Resolves paths for Group Sessions components."""

    @staticmethod
    def state_dir() -> Path:
        """Get the state directory for logs.

        Resolution order:
        1. GROUP_SESSIONS_STATE env var
        2. XDG_STATE_HOME/group-sessions
        3. ~/.local/state/group-sessions
        """
        state = os.environ.get("GROUP_SESSIONS_STATE")
        if state:
            return Path(state)
        xdg_state = os.environ.get("XDG_STATE_HOME")
        if xdg_state:
            return Path(xdg_state) / "group-sessions"
        return Path.home() / ".local" / "state" / "group-sessions"

    @staticmethod
    def data_dir() -> Path:
        """Get the data directory holding the session store.

        Resolution order:
        1. GROUP_SESSIONS_DATA env var
        2. XDG_DATA_HOME/group-sessions
        3. ~/.local/share/group-sessions
        """
        data = os.environ.get("GROUP_SESSIONS_DATA")
        if data:
            return Path(data)
        xdg_data = os.environ.get("XDG_DATA_HOME")
        if xdg_data:
            return Path(xdg_data) / "group-sessions"
        return Path.home() / ".local" / "share" / "group-sessions"

    @staticmethod
    def sessions_file() -> Path:
        """Get the session store file.

        The groupSessions.dataFile setting wins over the data directory.
        """
        configured = get_path_setting(DATA_FILE_KEY)
        if configured is not None:
            return configured
        return PathResolver.data_dir() / "sessions.json"

    @staticmethod
    def debug_log() -> Path:
        return PathResolver.state_dir() / "debug.log"
