"""
Structured logging tests - operation messages and fail-open verification visibility.
"""

import logging

import pytest

from modtags.util.logging import StructuredLogger


@pytest.fixture
def structured_logger():
    return StructuredLogger("modtags.test")


class TestStructuredLogger:
    """Test structured operation logging."""

    def test_log_operation_format(self, structured_logger, caplog):
        with caplog.at_level(logging.INFO, logger="modtags.test"):
            structured_logger.log_operation("store.write", "success", {"mods": 3})
        assert "Operation: store.write, Status: success, Details: {'mods': 3}" in caplog.text

    def test_unknown_verification_is_warning(self, structured_logger, caplog):
        with caplog.at_level(logging.INFO, logger="modtags.test"):
            structured_logger.log_verification("sodium", "unknown", {"reason": "timeout"})
        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert "verify.modrinth" in record.getMessage()

    def test_confirmed_verification_is_info(self, structured_logger, caplog):
        with caplog.at_level(logging.INFO, logger="modtags.test"):
            structured_logger.log_verification("sodium", "confirmed")
        assert caplog.records[-1].levelno == logging.INFO

    def test_dispute_explanation_truncated(self, structured_logger, caplog):
        with caplog.at_level(logging.INFO, logger="modtags.test"):
            structured_logger.log_dispute_applied("Alpha", "Wrong tags", "4", "x" * 200)
        message = caplog.records[-1].getMessage()
        assert "x" * 50 + "..." in message
        assert "x" * 51 not in message

    def test_validation_errors_logged_as_warning(self, structured_logger, caplog):
        with caplog.at_level(logging.INFO, logger="modtags.test"):
            structured_logger.log_validation_errors("submission", ["Mod name is required"])
        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert "submission.rejected" in record.getMessage()
        assert "'error_count': 1" in record.getMessage()

    def test_failed_validation_report_is_error(self, structured_logger, caplog):
        with caplog.at_level(logging.INFO, logger="modtags.test"):
            structured_logger.log_validation_report(10, 2, 1)
        assert caplog.records[-1].levelno == logging.ERROR
