"""Bordered bookmark list panel."""

from __future__ import annotations

from rich.console import RenderableType
from rich.text import Text
from textual.widget import Widget

from ..preferences import ColorPreferences
from ..render import LIST_TITLE, Frame, render_rows, scroll_offset


class BookmarkList(Widget):
    """Displays a frame's rows, scrolled so the selected row is visible.

    Holds no bookmark state of its own; call :meth:`show` with a fresh
    frame whenever the session changes.
    """

    BORDER_TITLE = LIST_TITLE

    def __init__(self, colors: ColorPreferences, **kwargs: object) -> None:
        super().__init__(**kwargs)  # type: ignore[arg-type]
        self._colors = colors
        self._frame: Frame | None = None
        self._offset = 0

    @property
    def frame(self) -> Frame | None:
        return self._frame

    @property
    def offset(self) -> int:
        """Index of the first visible row."""
        return self._offset

    def show(self, frame: Frame) -> None:
        self._frame = frame
        self.border_title = frame.title
        self.refresh()

    def render(self) -> RenderableType:
        if self._frame is None:
            return Text()
        height = self.content_size.height
        self._offset = scroll_offset(
            self._frame.selected, self._offset, height, len(self._frame.rows)
        )
        return render_rows(self._frame, self._colors, self._offset, height)
