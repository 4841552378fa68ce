"""Directory bookmark persistence store."""

from __future__ import annotations

from pathlib import Path

from ..log import logger
from ..models import Bookmark
from ._base import TomlStore


class BookmarkStore(TomlStore):
    """Ordered directory bookmarks.

    On-disk format::

        [[bookmarks]]
        name = "bookmark_1"
        path = "/home/me/src"
    """

    KEY = "bookmarks"

    def __init__(self, path: Path) -> None:
        super().__init__(path)

    def load(self) -> list[Bookmark]:
        """Load bookmarks in file order.  Missing or corrupt file gives ``[]``."""
        raw = self.load_raw().get(self.KEY, [])
        if not isinstance(raw, list):
            logger.debug("%s: %r is not an array, ignoring", self.path, self.KEY)
            return []
        bookmarks: list[Bookmark] = []
        for index, item in enumerate(raw):
            if not isinstance(item, dict) or not isinstance(item.get("path"), str):
                logger.debug("%s: skipping malformed record #%d", self.path, index)
                continue
            name = item.get("name")
            if not isinstance(name, str):
                name = f"bookmark_{len(bookmarks) + 1}"
            bookmarks.append(Bookmark(name=name, path=item["path"]))
        return bookmarks

    def save(self, bookmarks: list[Bookmark]) -> None:
        """Overwrite the file with *bookmarks*.  Raises ``OSError`` on failure."""
        self.save_raw({self.KEY: [b.to_dict() for b in bookmarks]})
