"""Filesystem checks for the application storage directory."""

from __future__ import annotations

import os


def is_writable(path: str | os.PathLike[str]) -> bool:
    """Return True if *path* exists and the process may write to it."""
    return os.access(path, os.W_OK)
