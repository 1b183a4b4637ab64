"""Unit tests for logging configuration and settings"""

import io
import json
import logging

import pytest

from order_validation import transition_order
from order_validation.config import Settings, get_settings
from order_validation.domain.validation import ValidationEngine
from order_validation.observability import (
    NO_ORDER,
    JSONFormatter,
    OrderContextFilter,
    bind_order,
    configure_logging,
    current_order_var,
    get_current_order,
)


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def json_log_lines():
    """Capture order_validation log records as parsed JSON lines"""
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter(environment="test"))
    handler.addFilter(OrderContextFilter())

    package_logger = logging.getLogger("order_validation")
    level = package_logger.level
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)

    def read():
        return [json.loads(line) for line in stream.getvalue().splitlines()]

    yield read

    package_logger.removeHandler(handler)
    package_logger.setLevel(level)


class TestSettings:
    """Test environment-driven settings"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_JSON", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON is True
        assert settings.ENVIRONMENT == "development"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_JSON", "false")
        monkeypatch.setenv("ENVIRONMENT", "staging")

        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_JSON is False
        assert settings.ENVIRONMENT == "staging"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestOrderContext:
    """Test order number binding"""

    def test_default_when_unbound(self):
        assert current_order_var.get() is None
        assert get_current_order() == NO_ORDER

    def test_binding_is_restored_on_exit(self):
        with bind_order("ORD-001") as outer:
            with bind_order("ORD-002") as inner:
                assert inner == get_current_order() == "ORD-002"
            assert outer == get_current_order() == "ORD-001"

        assert get_current_order() == NO_ORDER

    def test_unnumbered_order_uses_placeholder(self):
        with bind_order(None) as label:
            assert label == NO_ORDER

    def test_binding_is_restored_after_error(self):
        with pytest.raises(RuntimeError):
            with bind_order("ORD-001"):
                raise RuntimeError("boom")

        assert get_current_order() == NO_ORDER


class TestJSONLogging:
    """Test JSON formatter and filter"""

    def test_formats_record_as_json(self):
        record = logging.LogRecord(
            name="order_validation.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="validated %s",
            args=("ORD-001",),
            exc_info=None,
        )
        with bind_order("ORD-001"):
            OrderContextFilter().filter(record)

        data = json.loads(JSONFormatter(environment="production").format(record))

        assert data["level"] == "INFO"
        assert data["message"] == "validated ORD-001"
        assert data["order_number"] == "ORD-001"
        assert data["logger"] == "order_validation.test"
        assert data["environment"] == "production"

    def test_environment_omitted_when_unset(self):
        record = logging.LogRecord(
            name="order_validation.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="hello",
            args=(),
            exc_info=None,
        )

        data = json.loads(JSONFormatter().format(record))

        assert "environment" not in data
        assert data["order_number"] == NO_ORDER

    def test_engine_logs_carry_order_number(self, valid_order_data, json_log_lines):
        ValidationEngine().validate(valid_order_data)

        lines = json_log_lines()
        assert lines
        assert all(line["order_number"] == "ORD-001" for line in lines)
        assert all(line["environment"] == "test" for line in lines)
        assert any(
            line["message"].startswith("Validation completed") for line in lines
        )
        assert get_current_order() == NO_ORDER

    def test_transition_logs_carry_order_number(self, valid_order_data, json_log_lines):
        transition_order(valid_order_data, "processing")

        lines = json_log_lines()
        assert [line["order_number"] for line in lines] == ["ORD-001"]
        assert "pending -> processing" in lines[0]["message"]

    def test_configure_logging_installs_single_handler(self, restore_root_logger, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "staging")
        get_settings.cache_clear()
        try:
            configure_logging(level="debug", json_format=True)
        finally:
            get_settings.cache_clear()

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        handler = restore_root_logger.handlers[0]
        assert isinstance(handler.formatter, JSONFormatter)
        assert handler.formatter.environment == "staging"
        assert any(isinstance(f, OrderContextFilter) for f in handler.filters)

    def test_configure_logging_plain_format(self, restore_root_logger):
        configure_logging(level="WARNING", json_format=False)

        handler = restore_root_logger.handlers[0]
        assert not isinstance(handler.formatter, JSONFormatter)
        assert restore_root_logger.level == logging.WARNING
