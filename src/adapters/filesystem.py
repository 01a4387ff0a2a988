"""Host filesystem access.

Why a thin adapter:
- The only place that touches `os` for directories, cwd and permissions.
- Tests can monkeypatch these three functions to simulate OS failures.
"""

from __future__ import annotations

import os


def current_directory() -> str:
    """Return the process working directory (raises `OSError` if unreadable)."""

    return os.getcwd()


def make_directory(raw_path: str, *, parents: bool) -> None:
    """Create `raw_path`, recursively when `parents` is set.

    With `parents`, an existing directory is not an error (`exist_ok=True`);
    without it, exactly one level is created and the parent must exist.
    """

    if parents:
        os.makedirs(raw_path, exist_ok=True)
    else:
        os.mkdir(raw_path)


def set_mode(path: str, mode: int) -> None:
    os.chmod(path, mode)
