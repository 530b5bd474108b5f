"""Logging setup for the server process."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Install a single stream handler on the root logger.

    Calling this more than once replaces the previous configuration.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    # Access lines only when explicitly debugging.
    access_level = level if level <= logging.DEBUG else logging.WARNING
    logging.getLogger("uvicorn.access").setLevel(access_level)
