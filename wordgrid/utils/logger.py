"""Logging utilities for the word grid generator."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Route index statistics, search timings and read failures to ``stream``.

    Stdout carries nothing but grids so it can be piped straight into other
    tools; diagnostics therefore default to stderr. Reconfiguring replaces the
    previous handler, which lets the CLI apply ``--log-level`` after modules
    have already requested their loggers.
    """

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger.

    Library use without the CLI only sees warnings (an empty index, a failed
    grid check) until the caller configures logging itself.
    """

    if not logging.getLogger().handlers:
        configure_logging(logging.WARNING)
    return logging.getLogger(name or "wordgrid")
