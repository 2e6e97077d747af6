"""Logging setup shared by the app factory and the scripts."""

from __future__ import annotations

import logging


def setup_logging(level: str = "INFO", logfile: str | None = None) -> None:
    """Send records to stderr, or to ``logfile`` when LOG_FILE is set.

    basicConfig leaves an already configured root logger alone, so repeated
    create_app calls (and pytest's own handlers) are not duplicated.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        filename=logfile,
        encoding="utf-8",
    )
