"""Logging configuration.

The terminal belongs to the game while it is being played, so a log file can
be given to keep records off stdout.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger with a single stdout or file handler."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    for old in root.handlers:
        old.close()
    root.handlers.clear()
    root.addHandler(handler)
