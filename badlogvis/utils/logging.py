"""
Logging helpers for badlogvis.

Library modules only ever call ``get_logger(__name__)``; handlers are
installed by the command line entry point through ``configure_logging``.
When badlogvis is imported by another application, its records flow into
that application's handlers untouched.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

DEFAULT_FMT = "%(levelname)s: %(message)s"
VERBOSE_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure the ``badlogvis`` logger (never root).

    Parameters
    ----------
    level:
        Logging level (e.g. "DEBUG", "INFO"). Defaults to the
        BADLOGVIS_LOG_LEVEL env var, or "WARNING" if unset.
    fmt:
        Log message format. Defaults to ``"<LEVEL>: <message>"``.
    datefmt:
        Date format, only relevant when ``fmt`` uses asctime.
    force:
        If True, drop existing handlers first. If False, keep the current
        stderr handler, with its level updated, when one is already installed.
    """
    if level is None:
        level = os.environ.get("BADLOGVIS_LOG_LEVEL", "WARNING")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("badlogvis")
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt=fmt if fmt is not None else DEFAULT_FMT,
        datefmt=datefmt if datefmt is not None else DEFAULT_DATEFMT,
    )

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                h.setLevel(level)
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``logging.getLogger(name)``, or the package logger when name is None."""
    if name is None:
        name = "badlogvis"
    return logging.getLogger(name)
