"""Bookmark data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bookmark:
    """A named reference to a directory path.

    ``path`` is what gets emitted on selection and is never checked for
    existence.  ``name`` is an auto-generated display label.
    """

    name: str
    path: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "path": self.path}
