"""Small operating-system helpers."""

from __future__ import annotations

import os
import sys
import tempfile
import time
from datetime import timedelta
from pathlib import Path

__all__ = ["temp_file_name", "current_path", "sleep"]


def temp_file_name(prefix: str = "TMP") -> Path:
    """Create a new, empty temporary file and return its path.

    Raises OSError if the file cannot be created.
    """
    fd, name = tempfile.mkstemp(prefix=prefix)
    os.close(fd)
    return Path(name)


def current_path() -> Path:
    """Return the location of the running executable.

    On Windows this is the directory holding it; elsewhere the
    executable itself. ``Path("NOPATH")`` when it cannot be found.
    """
    executable = sys.executable
    if not executable:
        return Path("NOPATH")
    path = Path(executable)
    if os.name == "nt":
        return path.parent
    return path


def sleep(duration: timedelta | float) -> None:
    """Block the calling thread for ``duration`` (a timedelta or seconds)."""
    seconds = (
        duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
    )
    time.sleep(max(seconds, 0.0))