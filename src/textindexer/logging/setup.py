"""
Complete configuration of the structured logging system.

Three independent pipelines:
1. File (JSON) - If config.file is set. Captures everything (DEBUG+).
2. Human handler (stderr) - HUMAN events only: what the indexer does.
3. Technical console (stderr) - DEBUG/INFO, controlled by -v. Excludes HUMAN.

Default behaviour (no -v):
- The user sees only HUMAN logs (indexing progress) and warnings.
- No technical INFO/DEBUG noise.

With -v: adds INFO. With -vv: adds DEBUG. With --quiet: silences everything.
"""

import logging
import sys
from pathlib import Path

import structlog

from ..config.schema import LoggingConfig
from .human import HumanLogHandler
from .levels import HUMAN


def configure_logging(
    config: LoggingConfig,
    quiet: bool = False,
) -> None:
    """Configure the complete logging system with three pipelines.

    Args:
        config: Logging configuration (level, file, verbose)
        quiet: If True, disables the human and console handlers
    """
    # Drop any previous configuration
    logging.root.handlers.clear()
    structlog.reset_defaults()

    # Root logger captures everything; handlers filter by level
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[],
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    # ── Pipeline 1: JSON file ─────────────────────────────────────────────
    if config.file:
        file_path = Path(config.file)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(str(file_path), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.format_exc_info,
                    structlog.processors.JSONRenderer(),
                ],
                foreign_pre_chain=shared_processors,
            )
        )
        logging.root.addHandler(file_handler)

    if not quiet:
        # ── Pipeline 2: Human handler ─────────────────────────────────────
        human_handler = HumanLogHandler(stream=sys.stderr)
        # Exactly HUMAN (25), neither INFO nor DEBUG
        human_handler.setLevel(HUMAN)
        human_handler.addFilter(lambda record: record.levelno == HUMAN)
        logging.root.addHandler(human_handler)

        # ── Pipeline 3: Technical console ─────────────────────────────────
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(_console_level(config))
        # HUMAN events are already shown by the human handler
        console_handler.addFilter(lambda record: record.levelno != HUMAN)
        console_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
                ],
                foreign_pre_chain=shared_processors,
            )
        )
        logging.root.addHandler(console_handler)

    # --quiet without a log file: keep the last-resort handler from printing
    if not logging.root.handlers:
        logging.root.addHandler(logging.NullHandler())

    # Every handler receives the event dict and renders it itself
    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_default_logging() -> None:
    """Route structlog through stdlib logging until configure_logging() runs.

    Events go to the `textindexer` stdlib loggers, which carry a
    NullHandler: code that embeds the indexer sees no output unless it
    configures logging itself.
    """
    structlog.reset_defaults()
    package_logger = logging.getLogger("textindexer")
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _console_level(config: LoggingConfig) -> int:
    """Level of the technical console handler.

    Without -v → WARNING (problems only; human has its own handler)
    -v         → INFO
    -vv+       → DEBUG

    An explicit "debug"/"info" level in the configuration also lowers the
    threshold; "error" raises it.
    """
    levels = {
        0: logging.WARNING,
        1: logging.INFO,
        2: logging.DEBUG,
    }
    level = levels.get(config.verbose, logging.DEBUG)

    configured = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "error": logging.ERROR,
    }.get(config.level)
    if configured is None:
        return level
    if configured == logging.ERROR:
        return max(level, configured)
    return min(level, configured)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog structured logger
    """
    return structlog.get_logger(name)
