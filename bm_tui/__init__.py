"""bm-tui: a terminal directory bookmark picker."""

__version__ = "0.1.0"
