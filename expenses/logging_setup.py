"""Logging for the ``expenses`` package.

Library modules only ask for ``get_logger("expenses.<module>")``; the console
runner and the dashboard call ``configure_logging`` once. Records go to
stderr so stdout carries nothing but demo text.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

from expenses.config import LOG_LEVEL_ENV

_ROOT = "expenses"


def _resolve_level(level: int | str | None) -> int:
    """Explicit level first, then ``EXPENSES_LOG_LEVEL``, then WARNING."""
    for candidate in (level, os.getenv(LOG_LEVEL_ENV)):
        if isinstance(candidate, int):
            return candidate
        if isinstance(candidate, str):
            named = logging.getLevelName(candidate.strip().upper())
            if isinstance(named, int):
                return named
    return logging.WARNING


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str = "%(asctime)s %(name)s %(levelname)s %(message)s",
    stream: IO[str] | None = None,
) -> None:
    logger = logging.getLogger(_ROOT)
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    logger.handlers = [handler]
    logger.setLevel(_resolve_level(level))
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)
