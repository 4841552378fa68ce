"""Package-wide logger.

Standard output carries the selected bookmark path, so records never go to
stdout or the terminal.  A file handler is attached only on request.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger("bm_tui")
logger.addHandler(logging.NullHandler())

_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def enable_file_logging(path: Path, level: int = logging.DEBUG) -> logging.Handler:
    """Attach a file handler writing to *path* and lower the logger level."""
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
