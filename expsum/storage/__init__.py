"""Vault file output: generated summaries and the diagnostic log."""

from .debug_log import DebugLogFormatter, DebugLogHandler, attach_debug_log
from .writer import SummaryWriter, WriteOutcome

__all__ = [
    "DebugLogFormatter",
    "DebugLogHandler",
    "SummaryWriter",
    "WriteOutcome",
    "attach_debug_log",
]
