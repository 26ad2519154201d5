# SPDX-License-Identifier: MIT
"""Settings for Group Sessions.

All settings sit under one "groupSessions" object in a JSON file:

    {
      "groupSessions": {
        "dataFile": "~/Documents/sessions.json",
        "debugLevel": 2
      }
    }

The file is re-read on every lookup so edits apply without a restart.
A missing, unreadable or malformed file behaves like an empty one.
"""
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

SETTINGS_NAMESPACE = "groupSessions"
DATA_FILE_KEY = f"{SETTINGS_NAMESPACE}.dataFile"
DEBUG_LEVEL_KEY = f"{SETTINGS_NAMESPACE}.debugLevel"


def get_settings_path() -> Path:
    """Settings file location: GROUP_SESSIONS_SETTINGS, else ~/.config/group-sessions."""
    custom = os.environ.get("GROUP_SESSIONS_SETTINGS")
    if custom:
        return Path(custom)
    return Path.home() / ".config" / "group-sessions" / "settings.json"


def load_settings() -> Dict[str, Any]:
    """Read the whole settings document, or {} if there is nothing usable."""
    try:
        data = json.loads(get_settings_path().read_text())
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def get_setting(key: str, default: Any = None) -> Any:
    """Look up a dot-notation key such as "groupSessions.dataFile"."""
    current: Any = load_settings()
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def get_int_setting(
    key: str,
    default: int,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    """Integer setting, or default when it is not an integer within bounds.

    Args:
        key: Dot-notation key
        default: Returned for a missing, non-integer or out-of-range value
        minimum: Smallest accepted value (optional)
        maximum: Largest accepted value (optional)
    """
    value = get_setting(key, default)
    # JSON true/false would otherwise pass as 1/0
    if isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if minimum is not None and number < minimum:
        return default
    if maximum is not None and number > maximum:
        return default
    return number


def get_path_setting(key: str) -> Optional[Path]:
    """Path setting with "~" expanded, or None if unset or not a string."""
    value = get_setting(key)
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value.strip()).expanduser()
