"""
Unit tests for structured logging configuration.
"""

import json
import logging
from pathlib import Path

from zerotrust.logging_config import (
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    log_api_request,
    log_api_retry,
    set_correlation_id,
    setup_logging,
)


def _read_entries(log_file: Path) -> list:
    return [json.loads(line) for line in log_file.read_text().strip().split("\n") if line]


class TestLoggingConfiguration:
    """Test structured logging configuration functionality."""

    def test_setup_logging_default(self):
        """Test setup_logging with default parameters."""
        setup_logging()

        logger = get_logger("test")
        assert hasattr(logger, 'info') and hasattr(logger, 'warning') and hasattr(logger, 'error')

    def test_setup_logging_with_level(self):
        """Test setup_logging with custom log level."""
        setup_logging(level="DEBUG")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG

    def test_setup_logging_replaces_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_setup_logging_json_format(self, temp_dir: Path):
        """Test setup_logging with JSON format."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        logger = get_logger("test")
        logger.info("test_message", key="value")

        log_entry = _read_entries(log_file)[0]
        assert log_entry["event"] == "test_message"
        assert log_entry["key"] == "value"
        assert "timestamp" in log_entry
        assert log_entry["level"] == "info"

    def test_setup_logging_human_format(self, temp_dir: Path):
        """Test setup_logging with human-readable format."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=False)

        logger = get_logger("test")
        logger.info("test_message", key="value")

        log_content = log_file.read_text()
        assert "test_message" in log_content
        assert "key" in log_content

    def test_setup_logging_creates_parent_dirs(self, temp_dir: Path):
        log_file = temp_dir / "nested" / "dir" / "sdk.log"
        setup_logging(log_file=log_file)
        get_logger("test").info("hello")
        assert log_file.exists()

    def test_level_filters_events(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="WARNING", log_file=log_file)

        logger = get_logger("test")
        logger.info("quiet")
        logger.warning("loud")

        events = [entry["event"] for entry in _read_entries(log_file)]
        assert events == ["loud"]


class TestCorrelationId:
    def test_correlation_id_management(self):
        """Test correlation ID context management."""
        assert get_correlation_id() is None

        correlation_id = set_correlation_id("test-correlation-id")
        assert correlation_id == "test-correlation-id"
        assert get_correlation_id() == "test-correlation-id"

        clear_correlation_id()
        assert get_correlation_id() is None

    def test_correlation_id_auto_generation(self):
        correlation_id = set_correlation_id()
        assert correlation_id
        assert get_correlation_id() == correlation_id

    def test_correlation_id_in_logs(self, temp_dir: Path):
        """Test correlation ID appears in log output."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        set_correlation_id("test-correlation-123")
        get_logger("test").info("test_message")

        assert _read_entries(log_file)[0]["correlation_id"] == "test-correlation-123"


class TestApiLogHelpers:
    def test_log_api_request_success_is_debug(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="DEBUG", log_file=log_file)

        log_api_request(
            get_logger("test"),
            method="GET",
            path="/accounts/abc/gateway",
            status_code=200,
            duration_ms=12.5,
        )

        entry = _read_entries(log_file)[0]
        assert entry["event_type"] == "api_request"
        assert entry["method"] == "GET"
        assert entry["path"] == "/accounts/abc/gateway"
        assert entry["status_code"] == 200
        assert entry["duration_ms"] == 12.5
        assert entry["attempt"] == 1
        assert entry["level"] == "debug"

    def test_log_api_request_server_error_is_warning(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file)

        log_api_request(
            get_logger("test"),
            method="PUT",
            path="/zones/z/settings/zaraz/v2/config",
            status_code=503,
            duration_ms=3.0,
            attempt=2,
            ray_id="7f-SJC",
        )

        entry = _read_entries(log_file)[0]
        assert entry["level"] == "warning"
        assert entry["attempt"] == 2
        assert entry["ray_id"] == "7f-SJC"

    def test_log_api_request_without_response(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file)

        log_api_request(
            get_logger("test"), method="GET", path="/x", status_code=None, duration_ms=1.0
        )

        entry = _read_entries(log_file)[0]
        assert entry["status_code"] is None
        assert entry["level"] == "warning"

    def test_log_api_retry(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file)

        log_api_retry(
            get_logger("test"),
            method="GET",
            path="/accounts/abc/gateway/rules",
            attempt=2,
            delay_s=1.23456,
            reason="HTTP 429",
        )

        entry = _read_entries(log_file)[0]
        assert entry["event_type"] == "api_retry"
        assert entry["attempt"] == 2
        assert entry["delay_s"] == 1.235
        assert entry["reason"] == "HTTP 429"
        assert entry["level"] == "info"
