"""Filesystem locations used by bm-tui.

Everything lives under ``~/.bm`` unless ``BM_HOME`` points elsewhere.  The
bookmarks file can be relocated on its own with ``BM_BOOKMARKS_FILE``.
"""

from __future__ import annotations

import os
from pathlib import Path

BOOKMARKS_FILENAME = "bookmarks.toml"
PREFERENCES_FILENAME = "preferences.yaml"
LOG_FILENAME = "bm.log"


def bm_home() -> Path:
    """Return the per-user data directory (``~/.bm`` by default)."""
    override = os.environ.get("BM_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".bm"


def bookmarks_path() -> Path:
    """Return the bookmarks file, honouring ``BM_BOOKMARKS_FILE``."""
    override = os.environ.get("BM_BOOKMARKS_FILE")
    if override:
        return Path(override).expanduser()
    return bm_home() / BOOKMARKS_FILENAME


def preferences_path() -> Path:
    return bm_home() / PREFERENCES_FILENAME


def log_path() -> Path:
    return bm_home() / LOG_FILENAME


def debug_requested() -> bool:
    """True when ``BM_DEBUG`` is set to a truthy value."""
    return os.environ.get("BM_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}
