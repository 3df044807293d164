"""Append-only diagnostic log kept in the vault.

Entries look like::

    === 2024-05-01T12:00:00.000000+00:00 ===
    collect started

The log is best-effort: a failure to write it is reported on stderr by the
logging machinery and never interrupts the run.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path


class DebugLogFormatter(logging.Formatter):
    """Formats records as timestamped blocks separated by a blank line."""

    def __init__(self) -> None:
        super().__init__("=== %(asctime)s ===\n%(message)s")

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return datetime.fromtimestamp(record.created, UTC).isoformat()

    def format(self, record: logging.LogRecord) -> str:
        return super().format(record) + "\n\n"


class DebugLogHandler(logging.Handler):
    """Logging handler appending formatted records to a file in the vault."""

    def __init__(self, log_path: Path, level: int = logging.DEBUG) -> None:
        super().__init__(level=level)
        self.log_path = log_path
        self.setFormatter(DebugLogFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = self.format(record)
            with self.log_path.open("a", encoding="utf-8") as f:
                f.write(entry)
        except Exception:
            self.handleError(record)


@contextmanager
def attach_debug_log(log_path: Path, logger_name: str = "expsum") -> Iterator[DebugLogHandler]:
    """Record everything logged under ``logger_name`` to ``log_path`` while active."""
    logger = logging.getLogger(logger_name)
    handler = DebugLogHandler(log_path)
    previous_level = logger.level

    logger.addHandler(handler)
    if logger.getEffectiveLevel() > logging.DEBUG:
        logger.setLevel(logging.DEBUG)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
        handler.close()
