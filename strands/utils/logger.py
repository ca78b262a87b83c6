"""Logging setup for editing sessions.

Session output (grid, word list, click results) goes to stdout through the
command runner; log records go to stderr so scripted sessions can be piped
without the two mixing.
"""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.WARNING) -> None:
    """Install one stderr handler on the root logger.

    At the default level only failed side effects (an unavailable completion
    chime, say) are shown. ``INFO`` adds word list changes, completed words
    and exports; ``DEBUG`` traces every rejected click with its reason.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``strands`` namespace, configuring defaults on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "strands")
