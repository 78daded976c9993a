"""
Tests for logging_manager module.

Covers the safe_logger function and NullLogger class that provide
null-safe logging, plus TimelogLogger's file output.
"""
import json
import logging
from unittest.mock import MagicMock

from timelog.core.logging_manager import (
    NullLogger,
    TimelogLogger,
    safe_logger,
)


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_null_logger_methods_are_no_ops(self):
        logger = NullLogger()
        logger.log_operation("test_op", {"key": "value"})
        logger.log_error(ValueError("test error"), {"context": "test"})
        logger.log_debug("debug message", {"key": "value"})
        logger.log_warning("warning message")

    def test_null_logger_log_cli_error_returns_formatted(self):
        """NullLogger.log_cli_error should return formatted error string."""
        result = NullLogger().log_cli_error(ValueError("test error"), {"context": "test"})
        assert "ValueError" in result
        assert "test error" in result


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_safe_logger_returns_logger_when_provided(self):
        mock_logger = MagicMock(spec=TimelogLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_safe_logger_returns_null_logger_when_none(self):
        assert isinstance(safe_logger(None), NullLogger)

    def test_safe_logger_null_logger_is_singleton(self):
        assert safe_logger(None) is safe_logger(None)

    def test_works_with_log_details(self):
        mock_logger = MagicMock(spec=TimelogLogger)
        details = {"label": "focus", "scope": "work"}

        safe_logger(mock_logger).log_operation("create_label", details)
        mock_logger.log_operation.assert_called_once_with("create_label", details)


class TestTimelogLogger:
    """Tests for TimelogLogger file output."""

    def test_operation_written_as_json(self, tmp_path):
        logger = TimelogLogger(tmp_path / "logs", "database")
        try:
            logger.log_operation("create_label_completed", {"success": True})
        finally:
            logger.close()

        content = (tmp_path / "logs" / "database.log").read_text(encoding="utf-8")
        assert "OPERATION - create_label_completed" in content
        assert json.dumps({"success": True}) in content

    def test_errors_go_to_errors_log(self, tmp_path):
        logger = TimelogLogger(tmp_path, "database")
        try:
            logger.log_error(RuntimeError("boom"), {"operation": "init"})
        finally:
            logger.close()

        content = (tmp_path / "errors.log").read_text(encoding="utf-8")
        assert "RuntimeError: boom" in content
        assert "operation=init" in content

    def test_log_cli_error_message(self, tmp_path):
        logger = TimelogLogger(tmp_path, "cli")
        try:
            message = logger.log_cli_error(ValueError("bad input"))
        finally:
            logger.close()

        assert message == "❌ ValueError: bad input"

    def test_warning_written_to_component_log(self, tmp_path):
        logger = TimelogLogger(tmp_path, "database")
        try:
            logger.log_warning("Insert affected unexpected row count for label", {"rowcount": 0})
        finally:
            logger.close()

        content = (tmp_path / "database.log").read_text(encoding="utf-8")
        assert 'WARNING - Insert affected unexpected row count for label: {"rowcount": 0}' in content

    def test_close_releases_handlers(self, tmp_path):
        logger = TimelogLogger(tmp_path, "closing")
        logger.close()

        assert logging.getLogger("timelog.closing").handlers == []
        assert logging.getLogger("timelog.closing.errors").handlers == []

    def test_same_component_rebinds_to_latest_directory(self, tmp_path):
        first = TimelogLogger(tmp_path / "first", "shared")
        second = TimelogLogger(tmp_path / "second", "shared")
        try:
            first.log_operation("written_by_first")
        finally:
            second.close()

        assert "written_by_first" in (tmp_path / "second" / "shared.log").read_text(encoding="utf-8")
        assert "written_by_first" not in (tmp_path / "first" / "shared.log").read_text(encoding="utf-8")

    def test_cli_error_with_traceback(self, tmp_path):
        logger = TimelogLogger(tmp_path, "cli")
        try:
            try:
                raise ValueError("bad input")
            except ValueError as e:
                message = logger.log_cli_error(e, show_traceback=True)
        finally:
            logger.close()

        assert message.startswith("❌ ValueError: bad input")
        assert "Traceback" in message
