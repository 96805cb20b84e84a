"""Unit tests for logging and tracing setup."""

import logging
import sys

import pytest
from loguru import logger
from opentelemetry.instrumentation.logging import LoggingInstrumentor

from orderguard.observability import init_observability
from orderguard.observability.logging import (
    InterceptHandler,
    get_logger,
    init_logging,
    log_business_event,
)
from orderguard.observability.tracing import _parse_headers, init_tracing
from orderguard.settings import Settings


@pytest.mark.unit
class TestTracing:
    """Test cases for tracing setup."""

    def test_no_endpoint_skips_setup(self):
        assert init_tracing("orderguard", Settings(OTEL_EXPORTER_OTLP_ENDPOINT=None)) is False

    def test_parse_headers(self):
        assert _parse_headers("api-key=abc, team = ops,broken") == {
            "api-key": "abc",
            "team": "ops",
        }

    def test_parse_empty_headers(self):
        assert _parse_headers(None) == {}


@pytest.mark.unit
class TestContextualLogger:
    """Test cases for the contextual logger."""

    def test_binds_logger_name_and_extra(self, log_records):
        get_logger("orderguard.tests").info("hello", order_id=7)

        record = log_records[-1]
        assert record["message"] == "hello"
        assert record["extra"]["logger_name"] == "orderguard.tests"
        assert record["extra"]["order_id"] == 7
        assert "trace_id" not in record["extra"]

    def test_business_event(self, log_records):
        log_business_event("order_checked", order_id=1)

        record = log_records[-1]
        assert record["message"] == "Business event: order_checked"
        assert record["extra"]["business_event"] is True


@pytest.mark.unit
class TestInitLogging:
    """Test cases for logging initialization."""

    @pytest.fixture
    def restore_logging(self):
        yield
        logger.remove()
        logger.add(sys.stderr)
        for handler in list(logging.root.handlers):
            if isinstance(handler, InterceptHandler):
                logging.root.removeHandler(handler)
        LoggingInstrumentor().uninstrument()

    def test_file_sinks_and_stdlib_bridge(self, tmp_path, restore_logging):
        """Test log files are created and stdlib logging reaches loguru."""
        log_dir = tmp_path / "logs"
        init_logging("DEBUG", log_dir=str(log_dir))

        records = []
        logger.add(lambda message: records.append(message.record), level="DEBUG")
        logging.getLogger("thirdparty").warning("from stdlib")

        assert log_dir.is_dir()
        assert any(r["message"] == "from stdlib" for r in records)

    def test_init_observability_reads_settings(self, tmp_path, restore_logging):
        """Test logging and tracing are configured from settings."""
        log_dir = tmp_path / "service-logs"
        config = Settings(LOG_LEVEL="DEBUG", LOG_DIR=str(log_dir), OTEL_EXPORTER_OTLP_ENDPOINT=None)

        tracing_enabled = init_observability(config)

        assert tracing_enabled is False
        assert log_dir.is_dir()

    def test_init_observability_without_log_dir(self, tmp_path, monkeypatch, restore_logging):
        """Test no file sinks are created when LOG_DIR is unset."""
        monkeypatch.chdir(tmp_path)

        init_observability(Settings(LOG_DIR=None))

        assert list(tmp_path.iterdir()) == []
