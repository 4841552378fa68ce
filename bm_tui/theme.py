"""Theme definitions for bm-tui.

Each preset in ``preferences.THEMES`` has a Textual Theme controlling the
base UI colors ($background, $primary, $panel, ...) used by the app CSS.
Row highlight and prompt colors come from ColorPreferences instead.
"""

from textual.theme import Theme

# Keys match the theme names in preferences.THEMES.
TEXTUAL_THEMES: dict[str, Theme] = {
    "dark": Theme(
        name="bm-dark",
        primary="#90ee90",
        secondary="#5599dd",
        accent="#445566",
        background="black",
        surface="#111111",
        panel="#555555",
        success="#5599dd",
        warning="#e5c07b",
        error="#cc3333",
        dark=True,
    ),
    "light": Theme(
        name="bm-light",
        primary="#338855",
        secondary="#4488aa",
        accent="#667788",
        background="#fafafa",
        surface="#f0f0f0",
        panel="#cccccc",
        success="#338855",
        warning="#aa6600",
        error="#cc3333",
        dark=False,
    ),
    "solarized": Theme(
        name="bm-solarized",
        primary="#859900",
        secondary="#268bd2",
        accent="#6c71c4",
        background="#002b36",
        surface="#073642",
        panel="#586e75",
        success="#859900",
        warning="#b58900",
        error="#dc322f",
        dark=True,
    ),
    "high-contrast": Theme(
        name="bm-high-contrast",
        primary="#ffff00",
        secondary="#00ff00",
        accent="#00ffff",
        background="#000000",
        surface="#0a0a0a",
        panel="#333333",
        success="#00ff00",
        warning="#ff0000",
        error="#ff0000",
        dark=True,
    ),
}

DEFAULT_THEME = TEXTUAL_THEMES["dark"]


def textual_theme(name: str) -> Theme:
    """Return the Textual Theme for preset *name*, falling back to dark."""
    return TEXTUAL_THEMES.get(name, DEFAULT_THEME)
