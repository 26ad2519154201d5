# SPDX-License-Identifier: MIT
"""Advisory file locking for read-modify-write updates of data files."""
import fcntl
from pathlib import Path
from typing import IO, Optional


class FileLock:
    """Exclusive lock held on a sidecar ``<name>.lock`` file.

    Usage:
        with FileLock(path):
            data = read(path)
            write(path, data)
    """

    def __init__(self, path: Path) -> None:
        self.lock_path = Path(path).with_name(Path(path).name + ".lock")
        self._handle: Optional[IO[str]] = None

    def __enter__(self) -> "FileLock":
        self.lock_path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = open(self.lock_path, "w")
        fcntl.flock(self._handle.fileno(), fcntl.LOCK_EX)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._handle is not None:
            fcntl.flock(self._handle.fileno(), fcntl.LOCK_UN)
            self._handle.close()
            self._handle = None
