"""Key-press to command mapping.

Keys are identified by a *token*: the printed character when the key
produces one (``"j"``, ``"!"``, ``"Y"``), otherwise the Textual key name
(``"down"``, ``"enter"``).  Textual only delivers press events, so there is
no release or repeat filtering to do here.
"""

from __future__ import annotations

from textual import events

from .session import Command, InputMode

KEY_TABLES: dict[InputMode, dict[str, Command]] = {
    InputMode.NORMAL: {
        "j": Command.MOVE_DOWN,
        "down": Command.MOVE_DOWN,
        "k": Command.MOVE_UP,
        "up": Command.MOVE_UP,
        "u": Command.ADD_CURRENT_DIRECTORY,
        "!": Command.REQUEST_DELETE,
        "enter": Command.SELECT_CURRENT,
        "q": Command.QUIT,
    },
    InputMode.CONFIRMING_DELETE: {
        "y": Command.CONFIRM_YES,
        "Y": Command.CONFIRM_YES,
        "n": Command.CONFIRM_NO,
        "N": Command.CONFIRM_NO,
    },
}


def key_token(event: events.Key) -> str:
    """Return the lookup token for a Textual key event."""
    if event.is_printable and event.character is not None:
        return event.character
    return event.key


def resolve_command(token: str, mode: InputMode) -> Command | None:
    """Map *token* to a command in *mode*; unknown keys give None."""
    return KEY_TABLES[mode].get(token)
