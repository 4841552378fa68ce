"""In-memory bookmark session: the list, the cursor, and the input mode.

Every mutation goes through :class:`Session`, which flushes the whole list
to its store after each successful add or delete.  Save failures are logged
and swallowed; the in-memory change stands for the rest of the session.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .log import logger
from .models import Bookmark

if TYPE_CHECKING:
    from .persistence import BookmarkStore

_AUTO_NAME_RE = re.compile(r"^bookmark_(\d+)$")


class InputMode(Enum):
    """Which key table is active."""

    NORMAL = "normal"
    CONFIRMING_DELETE = "confirming_delete"


class Command(Enum):
    """Everything a key press can ask the session to do."""

    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    ADD_CURRENT_DIRECTORY = "add_current_directory"
    REQUEST_DELETE = "request_delete"
    CONFIRM_YES = "confirm_yes"
    CONFIRM_NO = "confirm_no"
    SELECT_CURRENT = "select_current"
    QUIT = "quit"


# Commands accepted in each mode; anything else is a silent no-op.
MODE_COMMANDS: dict[InputMode, frozenset[Command]] = {
    InputMode.NORMAL: frozenset(
        {
            Command.MOVE_DOWN,
            Command.MOVE_UP,
            Command.ADD_CURRENT_DIRECTORY,
            Command.REQUEST_DELETE,
            Command.SELECT_CURRENT,
            Command.QUIT,
        }
    ),
    InputMode.CONFIRMING_DELETE: frozenset({Command.CONFIRM_YES, Command.CONFIRM_NO}),
}


@dataclass(frozen=True)
class Outcome:
    """Result of applying a command.

    ``done`` ends the session; ``selection`` is the path to emit, if any.
    """

    done: bool = False
    selection: str | None = None


CONTINUE = Outcome()


def next_auto_name(bookmarks: list[Bookmark], naming: str = "length") -> str:
    """Return the label for a bookmark about to be appended.

    ``length`` reproduces the historical ``bookmark_<count + 1>`` scheme,
    which can hand out a name that is already taken after a delete.
    ``monotonic`` uses one past the highest existing ``bookmark_<n>``.
    """
    if naming == "monotonic":
        highest = 0
        for bookmark in bookmarks:
            match = _AUTO_NAME_RE.match(bookmark.name)
            if match:
                highest = max(highest, int(match.group(1)))
        return f"bookmark_{max(highest, len(bookmarks)) + 1}"
    return f"bookmark_{len(bookmarks) + 1}"


class Session:
    """Ordered bookmarks plus a selection cursor and an input mode.

    Invariant: ``0 <= selected < len(bookmarks)`` whenever the list is
    non-empty.  On an empty list ``selected`` is 0 and meaningless.
    """

    def __init__(
        self,
        bookmarks: list[Bookmark] | None = None,
        store: BookmarkStore | None = None,
        naming: str = "length",
    ) -> None:
        self.bookmarks: list[Bookmark] = list(bookmarks or [])
        self.selected: int = 0
        self.mode: InputMode = InputMode.NORMAL
        self.naming = naming
        self._store = store

    @classmethod
    def from_store(cls, store: BookmarkStore, naming: str = "length") -> Session:
        """Create a session seeded from *store*."""
        bookmarks = store.load()
        logger.debug("loaded %d bookmark(s) from %s", len(bookmarks), store.path)
        return cls(bookmarks, store=store, naming=naming)

    # -- queries --------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.bookmarks

    @property
    def confirming(self) -> bool:
        return self.mode is InputMode.CONFIRMING_DELETE

    @property
    def current(self) -> Bookmark | None:
        """The bookmark under the cursor, or None on an empty list."""
        if self.is_empty:
            return None
        return self.bookmarks[self.selected]

    # -- dispatch -------------------------------------------------------------

    def apply(self, command: Command) -> Outcome:
        """Apply *command* if the current mode accepts it."""
        if command not in MODE_COMMANDS[self.mode]:
            return CONTINUE
        if command is Command.MOVE_DOWN:
            self.move_down()
        elif command is Command.MOVE_UP:
            self.move_up()
        elif command is Command.ADD_CURRENT_DIRECTORY:
            self.add_directory()
        elif command is Command.REQUEST_DELETE:
            self.request_delete()
        elif command is Command.CONFIRM_YES:
            self.confirm_delete(True)
        elif command is Command.CONFIRM_NO:
            self.confirm_delete(False)
        elif command is Command.SELECT_CURRENT:
            path = self.select_current()
            if path is not None:
                return Outcome(done=True, selection=path)
        elif command is Command.QUIT:
            return Outcome(done=True)
        return CONTINUE

    # -- commands -------------------------------------------------------------

    def move_down(self) -> None:
        if self.is_empty:
            return
        self.selected = min(self.selected + 1, len(self.bookmarks) - 1)

    def move_up(self) -> None:
        if self.is_empty:
            return
        self.selected = max(self.selected - 1, 0)

    def add_directory(self, cwd: str | None = None) -> bool:
        """Bookmark *cwd* (default: the process working directory).

        Returns False without touching anything when the path is already
        bookmarked or the working directory cannot be determined.
        """
        if cwd is None:
            try:
                cwd = os.getcwd()
            except OSError:
                logger.debug("cannot determine working directory", exc_info=True)
                return False
        try:
            cwd.encode("utf-8")
        except UnicodeEncodeError:
            logger.debug("skipping non-UTF-8 path %r", cwd)
            return False
        if any(b.path == cwd for b in self.bookmarks):
            return False

        bookmark = Bookmark(name=next_auto_name(self.bookmarks, self.naming), path=cwd)
        self.bookmarks.append(bookmark)
        self._persist()
        self.selected = len(self.bookmarks) - 1
        logger.debug("added %s as %s", bookmark.path, bookmark.name)
        return True

    def request_delete(self) -> None:
        """Enter confirmation mode; the delete happens in confirm_delete()."""
        if self.is_empty:
            return
        self.mode = InputMode.CONFIRMING_DELETE

    def confirm_delete(self, yes: bool) -> None:
        """Resolve a pending delete request and return to normal mode."""
        if not self.confirming:
            return
        self.mode = InputMode.NORMAL
        if not yes or self.is_empty:
            return
        removed = self.bookmarks.pop(self.selected)
        self._persist()
        if self.selected == len(self.bookmarks) and self.bookmarks:
            self.selected -= 1
        logger.debug("deleted %s", removed.path)

    def select_current(self) -> str | None:
        """Return the selected path, or None on an empty list."""
        bookmark = self.current
        return bookmark.path if bookmark is not None else None

    # -- persistence ----------------------------------------------------------

    def _persist(self) -> None:
        if self._store is None:
            return
        try:
            self._store.save(self.bookmarks)
        except OSError:
            logger.warning(
                "failed to save bookmarks to %s", self._store.path, exc_info=True
            )
