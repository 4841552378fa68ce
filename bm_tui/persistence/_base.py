"""Base TOML persistence store."""

from __future__ import annotations

import os
import stat
import tempfile
import tomllib
from pathlib import Path

import tomli_w

from ..log import logger


class TomlStore:
    """Simple TOML file store with atomic write.

    TOML documents are always tables, so the empty state is ``{}``.
    Subclasses override ``_default()`` to seed a richer empty value.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def load_raw(self) -> dict:
        """Read and parse the TOML file, returning ``_default()`` on any error."""
        try:
            if self.path.exists():
                return tomllib.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
            logger.debug("failed to load TOML store from %s", self.path, exc_info=True)
        return self._default()

    def save_raw(self, data: dict) -> None:
        """Write *data* as TOML, creating parents as needed.

        The document is written to a temp file in the same directory and
        renamed over the target, so readers never observe a partial file.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        text = tomli_w.dumps(data)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                os.fchmod(fh.fileno(), self._file_mode())
                fh.write(text)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _file_mode(self) -> int:
        """Mode for the rewritten file: the existing one, else 0o666 less umask."""
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    # -- override point -------------------------------------------------------

    def _default(self) -> dict:  # noqa: PLR6301
        """Return the empty-state value for this store."""
        return {}
