"""Tests for persistence stores.

Each store is tested for:
  1. load() on non-existent file returns correct default
  2. save() then load() round-trips correctly
  3. load() on corrupt TOML returns default (graceful degradation)
  4. Store-specific features
"""

from __future__ import annotations

import os
import stat
import tomllib

import pytest

from bm_tui.models import Bookmark
from bm_tui.persistence import BookmarkStore
from bm_tui.persistence._base import TomlStore


# ---------------------------------------------------------------------------
# Base TomlStore
# ---------------------------------------------------------------------------


class TestTomlStore:
    def test_load_raw_nonexistent(self, tmp_path):
        store = TomlStore(tmp_path / "nope.toml")
        assert store.load_raw() == {}

    def test_save_and_load_raw(self, tmp_path):
        store = TomlStore(tmp_path / "data.toml")
        store.save_raw({"key": "value", "items": [1, 2, 3]})
        assert store.load_raw() == {"key": "value", "items": [1, 2, 3]}

    def test_load_raw_corrupt_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("this is = = not toml [[[")
        store = TomlStore(path)
        assert store.load_raw() == {}

    def test_load_raw_invalid_utf8(self, tmp_path):
        path = tmp_path / "binary.toml"
        path.write_bytes(b"\xff\xfe\x00garbage")
        assert TomlStore(path).load_raw() == {}

    def test_save_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "deep" / "nested" / "store.toml"
        store = TomlStore(path)
        store.save_raw({"a": 1})
        assert path.exists()
        assert store.load_raw() == {"a": 1}

    def test_save_leaves_no_temp_files(self, tmp_path):
        store = TomlStore(tmp_path / "data.toml")
        store.save_raw({"a": 1})
        store.save_raw({"a": 2})
        assert os.listdir(tmp_path) == ["data.toml"]

    def test_save_replaces_existing_content(self, tmp_path):
        path = tmp_path / "data.toml"
        path.write_text('old = "value"\n')
        TomlStore(path).save_raw({"new": "value"})
        assert tomllib.loads(path.read_text()) == {"new": "value"}

    def test_save_keeps_existing_file_mode(self, tmp_path):
        path = tmp_path / "data.toml"
        path.write_text("a = 1\n")
        path.chmod(0o640)
        TomlStore(path).save_raw({"a": 2})
        assert stat.S_IMODE(path.stat().st_mode) == 0o640

    def test_new_file_mode_follows_umask(self, tmp_path):
        path = tmp_path / "data.toml"
        old = os.umask(0o022)
        try:
            TomlStore(path).save_raw({"a": 1})
        finally:
            os.umask(old)
        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_save_failure_raises_and_keeps_old_file(self, tmp_path):
        path = tmp_path / "data.toml"
        store = TomlStore(path)
        store.save_raw({"a": 1})
        with pytest.raises(TypeError):
            store.save_raw({"bad": object()})
        assert store.load_raw() == {"a": 1}
        assert os.listdir(tmp_path) == ["data.toml"]

    def test_default_returns_dict(self):
        store = TomlStore.__new__(TomlStore)
        assert store._default() == {}


# ---------------------------------------------------------------------------
# BookmarkStore
# ---------------------------------------------------------------------------


class TestBookmarkStore:
    def test_load_missing_file_is_empty(self, tmp_path):
        store = BookmarkStore(tmp_path / "missing" / "bookmarks.toml")
        assert store.load() == []
        assert not store.path.exists()

    def test_load_corrupt_file_is_empty(self, tmp_path):
        path = tmp_path / "bookmarks.toml"
        path.write_text("[[bookmarks]\nname = ")
        assert BookmarkStore(path).load() == []

    def test_round_trip_preserves_order(self, store, make_bookmarks):
        bookmarks = make_bookmarks("/z", "/a", "/m")
        store.save(bookmarks)
        assert store.load() == bookmarks

    def test_save_of_load_is_a_no_op(self, store, make_bookmarks):
        store.save(make_bookmarks("/one", "/two"))
        before = store.load()
        store.save(store.load())
        assert store.load() == before

    def test_on_disk_format(self, store):
        store.save([Bookmark(name="bookmark_1", path="/tmp/proj")])
        data = tomllib.loads(store.path.read_text())
        assert data == {"bookmarks": [{"name": "bookmark_1", "path": "/tmp/proj"}]}

    def test_reads_hand_written_file(self, tmp_path):
        path = tmp_path / "bookmarks.toml"
        path.write_text(
            "[[bookmarks]]\n"
            'name = "home"\n'
            'path = "/home/me"\n'
            "\n"
            "[[bookmarks]]\n"
            'name = "src"\n'
            'path = "/home/me/src"\n'
        )
        assert BookmarkStore(path).load() == [
            Bookmark(name="home", path="/home/me"),
            Bookmark(name="src", path="/home/me/src"),
        ]

    def test_save_empty_list(self, store):
        store.save([])
        assert store.path.exists()
        assert store.load() == []

    def test_paths_with_quotes_and_unicode(self, store, make_bookmarks):
        bookmarks = make_bookmarks('/tmp/with "quotes"', "/tmp/ünïcödé", "C:\\dir")
        store.save(bookmarks)
        assert store.load() == bookmarks

    def test_bookmarks_key_not_an_array(self, tmp_path):
        path = tmp_path / "bookmarks.toml"
        path.write_text('bookmarks = "nope"\n')
        assert BookmarkStore(path).load() == []

    def test_malformed_records_are_skipped(self, tmp_path):
        path = tmp_path / "bookmarks.toml"
        path.write_text(
            'bookmarks = [{ name = "ok", path = "/ok" }, { name = "no-path" },'
            ' { path = 42 }, "string"]\n'
        )
        assert BookmarkStore(path).load() == [Bookmark(name="ok", path="/ok")]

    def test_missing_name_is_generated(self, tmp_path):
        path = tmp_path / "bookmarks.toml"
        path.write_text('bookmarks = [{ path = "/x" }, { path = "/y" }]\n')
        loaded = BookmarkStore(path).load()
        assert [b.name for b in loaded] == ["bookmark_1", "bookmark_2"]

    def test_unrelated_top_level_keys_ignored(self, tmp_path):
        path = tmp_path / "bookmarks.toml"
        path.write_text('version = 2\nbookmarks = [{ name = "a", path = "/a" }]\n')
        assert BookmarkStore(path).load() == [Bookmark(name="a", path="/a")]
