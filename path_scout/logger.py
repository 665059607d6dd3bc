# === FILE: path_scout/logger.py ===
"""Project‑wide logging configuration for **PathScout**.

Highlights
----------
* Unified format for console and optional file output (with rotation).
* Single, importable instance :data:`logger` – simply::

      from path_scout.logger import logger
      logger.info("Scanning started")
* Re‑configurable at runtime via :func:`configure`.
* Append-only journals (``error.log``, ``scan.log``) via :func:`file_logger`.

Console output goes to *stderr*: stdout is reserved for scan results.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

# --------------------------------------------------------------------------- #
# Constants & basic types                                                     #
# --------------------------------------------------------------------------- #

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_JOURNAL_FORMAT: Final[str] = "%(asctime)s %(message)s"
_JOURNAL_DATEFMT: Final[str] = "%Y/%m/%d %H:%M:%S"
_LOGGER_NAME: Final[str] = "PathScout"

ERROR_LOG_NAME: Final[str] = f"{_LOGGER_NAME}.errors"
SCAN_LOG_NAME: Final[str] = f"{_LOGGER_NAME}.results"

_LevelT = Union[int, str]


# --------------------------------------------------------------------------- #
# Helper builders                                                             #
# --------------------------------------------------------------------------- #


def _stderr_handler(fmt: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _journal_handler(file: Path | str, delay: bool) -> logging.FileHandler:
    handler = logging.FileHandler(str(file), mode="a", encoding="utf-8", delay=delay)
    handler.setFormatter(logging.Formatter(_JOURNAL_FORMAT, datefmt=_JOURNAL_DATEFMT))
    return handler


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #


def configure(
    *,
    level: _LevelT = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Re)configure the global project logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Path to a logfile. *None* → console‑only output.
    log_format
        Format string for :class:`logging.Formatter`.
    replace_handlers
        *True* – remove existing handlers; *False* – just append new one(s).
    """
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()

    lg.addHandler(_stderr_handler(log_format))

    if log_file is not None:
        lg.addHandler(_file_handler(log_file, log_format))

    lg.propagate = False
    return lg


def init_logging(
    level: _LevelT = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """Shorthand used by the CLI: replace handlers and apply *level*."""
    return configure(level=level, log_file=log_file, log_format=log_format, replace_handlers=True)


def file_logger(name: str, path: str | Path, *, delay: bool = True) -> logging.Logger:
    """Return logger *name* appending timestamped lines to *path* only.

    With *delay* the file is opened lazily on the first record, so an
    unused journal never creates an empty file; without it an unwritable
    path raises OSError right here. Calling again with another *path*
    re-targets the logger.
    """
    lg = logging.getLogger(name)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()
    lg.addHandler(_journal_handler(path, delay))
    lg.setLevel(logging.INFO)
    lg.propagate = False
    return lg


def error_logger(path: str | Path = "error.log") -> logging.Logger:
    """Journal for fatal and notable conditions (connectivity, file I/O)."""
    return file_logger(ERROR_LOG_NAME, path)


def scan_logger(path: str | Path = "scan.log") -> logging.Logger:
    """Journal receiving one ``"<url> <status>"`` line per probe result."""
    return file_logger(SCAN_LOG_NAME, path, delay=False)


# --------------------------------------------------------------------------- #
# Ready‑to‑use instance                                                       #
# --------------------------------------------------------------------------- #

logger: logging.Logger = init_logging()

__all__ = [
    "logger",
    "configure",
    "init_logging",
    "file_logger",
    "error_logger",
    "scan_logger",
    "ERROR_LOG_NAME",
    "SCAN_LOG_NAME",
]
