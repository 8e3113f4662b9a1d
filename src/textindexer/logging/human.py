"""
Human Log - Formatter and helper for indexing progress logs.

Produces readable output with a consistent structure so the user can
follow what the indexer does, file by file, without technical noise.

Example output:
    Indexing 3 files
      indexed /docs/a.txt (12 tokens)
      indexed /docs/b.txt (0 tokens)
      ✗ /docs/c.bin: Not a text file: /docs/c.bin (undetermined type)
    ✗ Batch aborted at /docs/c.bin: index cleared
"""

import logging
import sys

from .levels import HUMAN

# Attributes every LogRecord carries; anything else came from the event
_RECORD_ATTRS = frozenset({
    "msg", "args", "levelname", "levelno", "pathname",
    "filename", "module", "exc_info", "exc_text", "stack_info",
    "lineno", "funcName", "created", "msecs", "relativeCreated",
    "thread", "threadName", "processName", "process", "message",
    "taskName", "name", "event",
})


class HumanFormatter:
    """Formatter for indexing progress events.

    Turns structured events into readable text. Each event type has its
    own format; unknown events are not shown.
    """

    def format_event(self, event: str, **kw) -> str | None:
        """Format an event as readable text.

        Args:
            event: Event name (e.g.: "index.file.done")
            **kw: Event parameters

        Returns:
            Formatted text, or None if the event has no human format
        """
        match event:

            # ── FILES ────────────────────────────────────────────────────
            case "index.file.done":
                file = kw.get("file", "?")
                tokens = kw.get("tokens", "?")
                return f"  indexed {file} ({tokens} tokens)"

            case "index.file.failed":
                file = kw.get("file", "?")
                error = kw.get("error", "unknown error")
                return f"  ✗ {file}: {error}"

            case "index.file.updated":
                return f"  updated {kw.get('file', '?')}"

            case "index.file.removed":
                return f"  removed {kw.get('file', '?')}"

            # ── BATCHES ──────────────────────────────────────────────────
            case "index.batch.start":
                count = kw.get("files", "?")
                return f"Indexing {count} files"

            case "index.batch.done":
                count = kw.get("files", "?")
                vocabulary = kw.get("vocabulary", "?")
                return f"✓ Indexed {count} files ({vocabulary} distinct tokens)"

            case "index.batch.aborted":
                file = kw.get("file", "?")
                outcome = "index cleared" if kw.get("policy") == "clear" else "batch discarded"
                return f"✗ Batch aborted at {file}: {outcome}"

            # ── INDEX ────────────────────────────────────────────────────
            case "index.cleared":
                return "Index cleared"

            case _:
                return None


class HumanLogHandler(logging.Handler):
    """Logging handler that filters HUMAN events and formats them.

    Only processes records at the HUMAN level (25); ignores the rest.
    Writes to stderr so stdout pipes stay clean.
    """

    def __init__(self, stream=None) -> None:
        super().__init__(level=HUMAN)
        self.stream = stream or sys.stderr
        self.formatter_inst = HumanFormatter()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            if record.levelno != HUMAN:
                return

            # ProcessorFormatter.wrap_for_formatter leaves the event dict in msg
            if isinstance(record.msg, dict):
                kw = dict(record.msg)
                event = kw.pop("event", None)
            else:
                event = getattr(record, "event", None) or record.getMessage()
                kw = {
                    k: v for k, v in record.__dict__.items()
                    if not k.startswith("_") and k not in _RECORD_ATTRS
                }

            if event is None:
                return

            formatted = self.formatter_inst.format_event(str(event), **kw)
            if formatted is not None:
                self.stream.write(formatted + "\n")
                self.stream.flush()
        except Exception:
            self.handleError(record)


class HumanLog:
    """Typed helper to emit HUMAN-level logs from the code.

    Instead of calling log.log(HUMAN, "event", ...) directly,
    use methods with clear semantic names.

    Usage:
        hlog = HumanLog(structlog.get_logger())
        hlog.batch_start(files=3)
        hlog.file_done("/docs/a.txt", tokens=12)
    """

    def __init__(self, logger) -> None:
        self._log = logger

    def file_done(self, file: str, tokens: int) -> None:
        self._log.log(HUMAN, "index.file.done", file=file, tokens=tokens)

    def file_failed(self, file: str, error: str) -> None:
        self._log.log(HUMAN, "index.file.failed", file=file, error=error)

    def file_updated(self, file: str) -> None:
        self._log.log(HUMAN, "index.file.updated", file=file)

    def file_removed(self, file: str) -> None:
        self._log.log(HUMAN, "index.file.removed", file=file)

    def batch_start(self, files: int) -> None:
        self._log.log(HUMAN, "index.batch.start", files=files)

    def batch_done(self, files: int, vocabulary: int) -> None:
        self._log.log(HUMAN, "index.batch.done", files=files, vocabulary=vocabulary)

    def batch_aborted(self, file: str, policy: str) -> None:
        self._log.log(HUMAN, "index.batch.aborted", file=file, policy=policy)

    def cleared(self) -> None:
        self._log.log(HUMAN, "index.cleared")
