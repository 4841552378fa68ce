"""Main bm-tui application: the render / read-key / apply loop."""

from __future__ import annotations

from textual import events
from textual.app import App, ComposeResult

from .keymap import key_token, resolve_command
from .log import logger
from .persistence import BookmarkStore
from .preferences import Preferences, load_preferences
from .render import build_frame
from .session import Session
from .theme import textual_theme
from .widgets import BookmarkList, FooterBar

_BM_CSS = """\
Screen {
    background: $background;
}

#bookmark-list {
    width: 1fr;
    height: 1fr;
    border: round $primary;
    border-title-color: $primary;
    border-title-style: bold;
}

#footer-bar {
    dock: bottom;
    height: 1;
    padding: 0 1;
}

#footer-bar.confirming {
    height: 3;
    border: round $warning;
    border-title-color: $warning;
}
"""


class BookmarkApp(App[str]):
    """Full-screen bookmark picker.

    Exits with the selected path as its result, or ``None`` on quit.
    Terminal takeover and restoration are handled by ``App.run()``, which
    puts the terminal back on every exit path, including exceptions.
    """

    CSS = _BM_CSS
    TITLE = "bm"
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, session: Session, prefs: Preferences | None = None) -> None:
        super().__init__()
        self.session = session
        self._prefs = prefs or Preferences()

    # ── Layout ──────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        yield BookmarkList(self._prefs.colors, id="bookmark-list")
        yield FooterBar(self._prefs.colors, id="footer-bar")

    def on_mount(self) -> None:
        theme = textual_theme(self._prefs.theme_name)
        self.register_theme(theme)
        self.theme = theme.name
        self._redraw()

    # ── Input ───────────────────────────────────────────────────

    def on_key(self, event: events.Key) -> None:
        command = resolve_command(key_token(event), self.session.mode)
        if command is None:
            return
        event.stop()
        event.prevent_default()
        outcome = self.session.apply(command)
        if outcome.done:
            logger.debug("session finished, selection=%r", outcome.selection)
            self.exit(outcome.selection)
            return
        self._redraw()

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        # Only y/n get through while a delete is pending, built-in quit included.
        if action == "quit" and self.session.confirming:
            return False
        return True

    # ── Rendering ───────────────────────────────────────────────

    def _redraw(self) -> None:
        frame = build_frame(self.session)
        self.query_one("#bookmark-list", BookmarkList).show(frame)
        self.query_one("#footer-bar", FooterBar).show(frame)


# ── Entry Point ─────────────────────────────────────────────────────


def build_app(store: BookmarkStore, prefs: Preferences | None = None) -> BookmarkApp:
    """Load bookmarks from *store* and wire up an app around them."""
    prefs = prefs or load_preferences()
    session = Session.from_store(store, naming=prefs.naming)
    return BookmarkApp(session, prefs)
