"""Shared test fixtures for the bm-tui test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from bm_tui.models import Bookmark
from bm_tui.persistence import BookmarkStore
from bm_tui.session import Session


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every default path at a temp dir so nothing touches the real ~/.bm."""
    home = tmp_path / "bm-home"
    monkeypatch.setenv("BM_HOME", str(home))
    monkeypatch.delenv("BM_BOOKMARKS_FILE", raising=False)
    monkeypatch.delenv("BM_DEBUG", raising=False)
    return home


@pytest.fixture
def store(tmp_path: Path) -> BookmarkStore:
    return BookmarkStore(tmp_path / "store" / "bookmarks.toml")


def _bookmarks_for(*paths: str) -> list[Bookmark]:
    return [Bookmark(name=f"bookmark_{i}", path=p) for i, p in enumerate(paths, 1)]


@pytest.fixture
def make_bookmarks():
    """Build bookmarks named the way the app would have named them."""
    return _bookmarks_for


@pytest.fixture
def abc_session(store: BookmarkStore) -> Session:
    """Session over ``/a``, ``/b``, ``/c`` backed by a temp store."""
    bookmarks = _bookmarks_for("/a", "/b", "/c")
    store.save(bookmarks)
    return Session.from_store(store)
