"""User preferences for bm-tui.

Loads theme, colors, and naming policy from ~/.bm/preferences.yaml.
Falls back to sensible defaults if the file doesn't exist or is invalid.
The file is never created implicitly; ``DEFAULT_YAML`` documents the
available keys and is what ``bm --print-preferences`` writes out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml
from rich.color import Color, ColorParseError

from .environment import preferences_path
from .log import logger

# How auto-generated bookmark names are chosen.
#   length     "bookmark_" + (count + 1); can repeat after a delete
#   monotonic  one past the highest existing bookmark_<n>; never repeats
NAMING_POLICIES = ("length", "monotonic")

# Built-in theme presets: each maps color preference keys to hex values.
THEMES: dict[str, dict[str, str]] = {
    "dark": {
        "highlight_text": "#000000",
        "highlight_background": "#90ee90",
        "confirm_text": "#e5c07b",
        "help_text": "#888888",
    },
    "light": {
        "highlight_text": "#ffffff",
        "highlight_background": "#338855",
        "confirm_text": "#aa6600",
        "help_text": "#555555",
    },
    "solarized": {
        "highlight_text": "#002b36",
        "highlight_background": "#859900",
        "confirm_text": "#b58900",
        "help_text": "#839496",
    },
    "high-contrast": {
        "highlight_text": "#000000",
        "highlight_background": "#ffff00",
        "confirm_text": "#ff0000",
        "help_text": "#ffffff",
    },
}

DEFAULT_YAML = """\
# bm preferences
# Delete this file to reset to defaults.

theme: dark                      # dark, light, solarized, high-contrast

colors:                          # overrides on top of the theme
  highlight_text: "#000000"      # selected row text
  highlight_background: "#90ee90"  # selected row background
  confirm_text: "#e5c07b"        # delete confirmation prompt
  help_text: "#888888"           # key binding help line

bookmarks:
  naming: length                 # length (bookmark_<count+1>) or monotonic
"""


@dataclass
class ColorPreferences:
    """Colors for the bookmark list and the bottom bar."""

    highlight_text: str = "#000000"
    highlight_background: str = "#90ee90"
    confirm_text: str = "#e5c07b"
    help_text: str = "#888888"


@dataclass
class Preferences:
    """Top-level preferences."""

    theme_name: str = "dark"
    colors: ColorPreferences = field(default_factory=ColorPreferences)
    naming: str = "length"

    def apply_theme(self, name: str) -> bool:
        """Apply a built-in theme by name. Returns False if unknown."""
        theme = THEMES.get(name)
        if theme is None:
            return False
        for key, value in theme.items():
            if hasattr(self.colors, key):
                setattr(self.colors, key, value)
        self.theme_name = name
        return True


def _valid_color(key: str, value: object) -> bool:
    # An unquoted "#rrggbb" is a YAML comment, so the value arrives as None.
    if not isinstance(value, str):
        logger.debug("ignoring color %s=%r: not a string", key, value)
        return False
    try:
        Color.parse(value)
    except ColorParseError:
        logger.debug("ignoring color %s=%r: not a valid color", key, value)
        return False
    return True


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to defaults if the file doesn't exist or is invalid.  Theme
    colors are applied first so explicit ``colors`` entries win.
    """
    path = path or preferences_path()
    prefs = Preferences()

    if not path.exists():
        return prefs

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        logger.debug("failed to read preferences from %s", path, exc_info=True)
        return prefs
    if not isinstance(data, dict):
        logger.debug("ignoring preferences in %s: not a mapping", path)
        return prefs

    theme = data.get("theme")
    if isinstance(theme, str) and not prefs.apply_theme(theme):
        logger.debug("unknown theme %r, keeping %r", theme, prefs.theme_name)
    if isinstance(data.get("colors"), dict):
        for key, value in data["colors"].items():
            if hasattr(prefs.colors, key) and _valid_color(key, value):
                setattr(prefs.colors, key, value)
    if isinstance(data.get("bookmarks"), dict):
        naming = data["bookmarks"].get("naming")
        if naming in NAMING_POLICIES:
            prefs.naming = naming
        elif naming is not None:
            logger.debug("unknown naming policy %r, keeping %r", naming, prefs.naming)

    return prefs
