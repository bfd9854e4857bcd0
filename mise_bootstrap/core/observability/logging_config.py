"""
Logging configuration for the ``mise-bootstrap`` CLI.

Diagnostics only: the ``[mise-setup]`` progress lines users see are
written by ``mise_bootstrap.core.observability.console``. This module
decides how much of the ``logger.debug/info`` chatter from the steps and
adapters (commands run, receipts that failed, variables loaded from
``shellenv``) reaches stderr or a log file.

Level precedence:
    --debug / --verbose / --quiet  >  MISE_BOOTSTRAP_LOG_LEVEL  >  WARNING

A log file is written only when MISE_BOOTSTRAP_LOG_FILE is set; its
level comes from MISE_BOOTSTRAP_LOG_FILE_LEVEL (default: console level).
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "MISE_BOOTSTRAP_LOG_LEVEL"
ENV_FILE = "MISE_BOOTSTRAP_LOG_FILE"
ENV_FILE_LEVEL = "MISE_BOOTSTRAP_LOG_FILE_LEVEL"

# (max level, format, datefmt), most detailed first.
_CONSOLE_TIERS = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
)
_CONSOLE_DEFAULT = ("%(message)s", None)

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def level_from_flags(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Map the global CLI flags onto a level name, falling back to the env."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def _console_format(level: int) -> tuple[str, str | None]:
    for max_level, fmt, datefmt in _CONSOLE_TIERS:
        if level <= max_level:
            return fmt, datefmt
    return _CONSOLE_DEFAULT


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger once, at CLI start.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file; defaults to
            ``$MISE_BOOTSTRAP_LOG_FILE``.
        log_file_level: Level for the log file; defaults to
            ``$MISE_BOOTSTRAP_LOG_FILE_LEVEL``, then to ``level``.
    """
    numeric_level = _parse_level(level)
    log_file = log_file or os.environ.get(ENV_FILE)
    log_file_level = log_file_level or os.environ.get(ENV_FILE_LEVEL)

    fmt, datefmt = _console_format(numeric_level)
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    effective_level = numeric_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(effective_level)
    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Level name → numeric constant; unknown names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
