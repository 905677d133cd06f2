"""
Unit tests for logging setup.
"""

import json
import logging
import logging.handlers

from utils.logging import (
    JSONFormatter, QuizLoggerAdapter, setup_logging, get_quiz_logger, _parse_size
)


class TestParseSize:
    """Test cases for _parse_size."""

    def test_units(self):
        """Test each supported unit."""
        assert _parse_size("10MB") == 10 * 1024 * 1024
        assert _parse_size("1KB") == 1024
        assert _parse_size("2gb") == 2 * 1024 ** 3
        assert _parse_size("5B") == 5

    def test_fallback(self):
        """Test that unparseable sizes default to 10MB."""
        assert _parse_size("lots") == 10 * 1024 * 1024
        assert _parse_size("xMB") == 10 * 1024 * 1024


class TestJSONFormatter:
    """Test cases for JSONFormatter."""

    def test_includes_quiz_context(self):
        """Test that session context ends up in the JSON record."""
        record = logging.LogRecord("quiz", logging.INFO, __file__, 10, "answered", None, None)
        record.session_id = "abc123"
        record.question_index = 2

        entry = json.loads(JSONFormatter().format(record))

        assert entry["message"] == "answered"
        assert entry["level"] == "INFO"
        assert entry["session_id"] == "abc123"
        assert entry["question_index"] == 2
        assert "client_id" not in entry


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_handlers(self, test_config, temp_dir):
        """Test console and rotating file handlers."""
        setup_logging(test_config)

        handlers = logging.getLogger().handlers
        file_handlers = [h for h in handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
        assert len(handlers) == 2
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert (temp_dir / "test.log").exists()

    def test_creates_log_directory(self, test_config, temp_dir):
        """Test that a missing log directory is created."""
        test_config.logging.file = str(temp_dir / "nested" / "dir" / "vocab.log")
        setup_logging(test_config)
        assert (temp_dir / "nested" / "dir").is_dir()

    def test_json_output(self, test_config, temp_dir):
        """Test JSON formatted file output."""
        setup_logging(test_config, enable_json=True)
        logging.getLogger("test").info("structured")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = (temp_dir / "test.log").read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["message"] == "structured"


class TestQuizLogger:
    """Test cases for get_quiz_logger."""

    def test_adapter_context(self):
        """Test that the adapter carries session context."""
        adapter = get_quiz_logger("abc123", question_index=4)
        assert isinstance(adapter, QuizLoggerAdapter)
        assert adapter.extra == {"session_id": "abc123", "question_index": 4}

    def test_context_merged_into_extra(self):
        """Test that call-site extras are kept alongside session context."""
        adapter = get_quiz_logger("abc123")
        _, kwargs = adapter.process("msg", {"extra": {"question_index": 1}})
        assert kwargs["extra"] == {"question_index": 1, "session_id": "abc123"}
