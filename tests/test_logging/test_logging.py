"""
Tests for the logging system.

Covers:
- HUMAN level registration
- HumanFormatter output per event
- HumanLogHandler filtering
- configure_logging: JSON file pipeline and human pipeline end to end
- Default routing: no output before configure_logging
"""

import io
import json
import logging
from pathlib import Path

import pytest
import structlog

from textindexer.config.schema import LoggingConfig
from textindexer.indexing import HashMapIndex, SimpleFileIndexer
from textindexer.logging import (
    HUMAN,
    HumanFormatter,
    HumanLog,
    HumanLogHandler,
    configure_default_logging,
    configure_logging,
)


@pytest.fixture
def formatter() -> HumanFormatter:
    return HumanFormatter()


class TestHumanLevel:
    def test_level_value(self):
        assert HUMAN == 25
        assert logging.getLevelName(HUMAN) == "HUMAN"

    def test_logger_has_human_method(self):
        assert hasattr(logging.getLogger("textindexer.test"), "human")


class TestHumanFormatter:
    def test_file_done(self, formatter: HumanFormatter):
        text = formatter.format_event("index.file.done", file="/docs/a.txt", tokens=3)
        assert text == "  indexed /docs/a.txt (3 tokens)"

    def test_file_failed(self, formatter: HumanFormatter):
        text = formatter.format_event("index.file.failed", file="/x.bin", error="Not a text file")
        assert "/x.bin" in text
        assert "Not a text file" in text

    def test_batch_done(self, formatter: HumanFormatter):
        text = formatter.format_event("index.batch.done", files=2, vocabulary=5)
        assert "2 files" in text
        assert "5 distinct tokens" in text

    def test_batch_aborted_clear(self, formatter: HumanFormatter):
        text = formatter.format_event("index.batch.aborted", file="/x.bin", policy="clear")
        assert "index cleared" in text

    def test_batch_aborted_rollback(self, formatter: HumanFormatter):
        text = formatter.format_event("index.batch.aborted", file="/x.bin", policy="rollback")
        assert "batch discarded" in text

    def test_unknown_event(self, formatter: HumanFormatter):
        assert formatter.format_event("something.else") is None


class TestHumanLogHandler:
    def _record(self, level: int, msg) -> logging.LogRecord:
        return logging.LogRecord("test", level, __file__, 1, msg, None, None)

    def test_formats_event_dict(self):
        stream = io.StringIO()
        handler = HumanLogHandler(stream=stream)
        handler.emit(self._record(HUMAN, {"event": "index.cleared"}))
        assert stream.getvalue() == "Index cleared\n"

    def test_ignores_other_levels(self):
        stream = io.StringIO()
        handler = HumanLogHandler(stream=stream)
        handler.emit(self._record(logging.INFO, {"event": "index.cleared"}))
        assert stream.getvalue() == ""


class TestConfigureLogging:
    def test_json_file_pipeline(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "textindexer.jsonl"
        configure_logging(LoggingConfig(file=log_file), quiet=True)

        structlog.get_logger("test").warning("indexer.file.read_failed", file="/x.txt")
        for handler in logging.root.handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        entry = json.loads(lines[-1])
        assert entry["event"] == "indexer.file.read_failed"
        assert entry["file"] == "/x.txt"
        assert entry["level"] == "warning"

    def test_human_pipeline(self, monkeypatch: pytest.MonkeyPatch):
        stream = io.StringIO()
        monkeypatch.setattr("sys.stderr", stream)
        configure_logging(LoggingConfig())

        HumanLog(structlog.get_logger("test")).file_done("/docs/a.txt", tokens=3)

        assert "indexed /docs/a.txt (3 tokens)" in stream.getvalue()

    def test_quiet_has_no_console_handlers(self):
        configure_logging(LoggingConfig(), quiet=True)
        assert not any(isinstance(h, HumanLogHandler) for h in logging.root.handlers)
        assert all(isinstance(h, logging.NullHandler) for h in logging.root.handlers)


class TestDefaultLogging:
    def test_library_use_prints_nothing(self, tmp_path: Path, capsys: pytest.CaptureFixture):
        configure_default_logging()
        doc = tmp_path / "doc.txt"
        doc.write_text("hello world", encoding="utf-8")

        index = HashMapIndex()
        index.add_to_index("hello", doc)
        index.remove_file_from_index(doc)

        indexer = SimpleFileIndexer()
        indexer.index_file(doc)
        indexer.index_file(tmp_path / "missing.txt")
        indexer.search("hello")
        indexer.remove_file_from_index(doc)
        indexer.clear_index()

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_routes_through_stdlib(self):
        configure_default_logging()
        logger = structlog.get_logger("textindexer.test")
        assert isinstance(logger.bind(), structlog.stdlib.BoundLogger)
        assert any(
            isinstance(h, logging.NullHandler)
            for h in logging.getLogger("textindexer").handlers
        )
