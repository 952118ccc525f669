"""
Logging setup for the datescaffold CLI.

``main.cli`` calls ``setup_logging()`` once; library modules only ever
do ``logging.getLogger(__name__)``.  The console level comes from the
first of ``--debug``, ``--verbose``, ``--quiet``, ``DSC_LOG_LEVEL``,
falling back to WARNING.  Setting ``DSC_LOG_FILE`` adds a file handler
with its own level (``DSC_LOG_FILE_LEVEL``).
"""

from __future__ import annotations

import logging
import sys

_DETAILED = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"

# (upper bound on level, format, date format) — first match wins
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, _DETAILED, "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    (logging.CRITICAL, "%(message)s", None),
)

_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _console_formatter(level: int) -> logging.Formatter:
    for bound, fmt, datefmt in _CONSOLE_FORMATS:
        if level <= bound:
            return logging.Formatter(fmt, datefmt=datefmt)
    return logging.Formatter("%(message)s")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with a stderr handler (and a file one).

    Args:
        level: Console level name, e.g. ``"INFO"``.
        log_file: Path of an optional log file.
        log_file_level: Level for ``log_file``; ``level`` when not given.
    """
    console_level = parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_console_formatter(console_level))

    handlers: list[logging.Handler] = [console]
    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(parse_level(log_file_level) if log_file_level else console_level)
        fh.setFormatter(logging.Formatter(_DETAILED, datefmt=_FILE_DATEFMT))
        handlers.append(fh)

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(min(h.level for h in handlers))

    # A closed stderr must not turn a log call into a traceback
    logging.raiseExceptions = False


def parse_level(level: str | None) -> int:
    """Numeric value of a level name; unknown or empty names give WARNING."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
