"""Watching a scene file for changes."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union


def scene_path_for(filename: str) -> str:
    """The scene file under ./scenes/ that an output file name came from."""
    dot = filename.rfind(".")
    base = filename[:dot] if dot != -1 else filename
    return "./scenes/" + base + ".cfg"


class FileObserver:
    """Reports whether a file's modification time has changed."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        self._last_modified: Optional[int] = None

    def __repr__(self) -> str:
        return f"FileObserver({self.path!r})"

    def _mtime(self) -> Optional[int]:
        try:
            return os.stat(self.path).st_mtime_ns
        except OSError:
            return None

    def start(self) -> None:
        """Record the file's current modification time."""
        self._last_modified = self._mtime()

    def is_modified(self) -> bool:
        """True if the modification time changed since the last check; records it."""
        current = self._mtime()
        if current != self._last_modified:
            self._last_modified = current
            return True
        return False