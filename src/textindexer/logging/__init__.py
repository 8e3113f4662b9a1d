"""
Logging module - Structured logging system.

Adds a HUMAN level (25) for indexing progress, with its own handler.
Until configure_logging() runs, events are routed through stdlib logging
and produce no output.
"""

import structlog

from .human import HumanFormatter, HumanLog, HumanLogHandler
from .levels import HUMAN
from .setup import configure_default_logging, configure_logging, get_logger

if not structlog.is_configured():
    configure_default_logging()

__all__ = [
    "configure_default_logging",
    "configure_logging",
    "get_logger",
    "HUMAN",
    "HumanFormatter",
    "HumanLog",
    "HumanLogHandler",
]
