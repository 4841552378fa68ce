"""Pure presentation: session state in, frame description out.

Nothing here touches the session or the terminal.  Calling any of these
functions twice with the same arguments yields equal results, which is what
lets the widgets redraw freely.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style
from rich.text import Text

from .preferences import ColorPreferences
from .session import Session

LIST_TITLE = "Bookmarks"
CONFIRM_TITLE = "Confirm"
HELP_TEXT = "j/k: move  u: add bookmark  !: delete  Enter: select  q: quit"
CONFIRM_TEXT = "Delete this bookmark? (y/n)"
HIGHLIGHT_SYMBOL = "→ "
BLANK_SYMBOL = " " * len(HIGHLIGHT_SYMBOL)


@dataclass(frozen=True)
class Row:
    marker: str
    text: str
    highlighted: bool = False


@dataclass(frozen=True)
class Frame:
    """Everything needed to draw one screen."""

    title: str
    rows: tuple[Row, ...]
    selected: int
    footer_text: str
    footer_title: str | None = None

    @property
    def confirming(self) -> bool:
        return self.footer_title == CONFIRM_TITLE


def build_frame(session: Session) -> Frame:
    """Describe the screen for *session* in its current mode."""
    rows = tuple(
        Row(HIGHLIGHT_SYMBOL, b.path, True)
        if i == session.selected
        else Row(BLANK_SYMBOL, b.path)
        for i, b in enumerate(session.bookmarks)
    )
    if session.confirming:
        return Frame(LIST_TITLE, rows, session.selected, CONFIRM_TEXT, CONFIRM_TITLE)
    return Frame(LIST_TITLE, rows, session.selected, HELP_TEXT)


def scroll_offset(selected: int, offset: int, height: int, total: int) -> int:
    """Return the first visible row so that *selected* stays on screen.

    The offset never leaves blank rows at the bottom when *total* rows
    would fill the view, which matters after a delete near the end.
    """
    if height <= 0:
        return 0
    offset = max(0, min(offset, total - height))
    if selected < offset:
        return selected
    if selected >= offset + height:
        return selected - height + 1
    return offset


def render_rows(
    frame: Frame,
    colors: ColorPreferences,
    offset: int = 0,
    height: int | None = None,
) -> Text:
    """Render the visible slice of *frame*'s rows as styled text."""
    highlight = Style(color=colors.highlight_text, bgcolor=colors.highlight_background)
    end = None if height is None else offset + height
    text = Text(no_wrap=True, overflow="ellipsis")
    for i, row in enumerate(frame.rows[offset:end]):
        if i:
            text.append("\n")
        text.append(row.marker + row.text, style=highlight if row.highlighted else "")
    return text


def render_footer(frame: Frame, colors: ColorPreferences) -> Text:
    """Render the help line or the confirmation prompt."""
    if frame.confirming:
        return Text(frame.footer_text, style=Style(color=colors.confirm_text))
    return Text(frame.footer_text, style=Style(color=colors.help_text))
