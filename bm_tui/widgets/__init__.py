"""Widgets that display render frames."""

from .bars import FooterBar
from .bookmark_list import BookmarkList

__all__ = [
    "BookmarkList",
    "FooterBar",
]
