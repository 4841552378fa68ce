"""Bottom bar: key binding help, or the delete confirmation prompt."""

from __future__ import annotations

from textual.widgets import Static

from ..preferences import ColorPreferences
from ..render import Frame, render_footer


class FooterBar(Static):
    """Single-line help in normal mode, a bordered ``Confirm`` box otherwise."""

    def __init__(self, colors: ColorPreferences, **kwargs: object) -> None:
        super().__init__("", **kwargs)  # type: ignore[arg-type]
        self._colors = colors

    def show(self, frame: Frame) -> None:
        self.set_class(frame.confirming, "confirming")
        self.border_title = frame.footer_title
        self.update(render_footer(frame, self._colors))
