"""Testes de config.logging: configure_logging, log_fallback e formatação JSON."""

from __future__ import annotations

import io
import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="app.use_cases.confluence.pages",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


def _capture_root_output() -> io.StringIO:
    stream = io.StringIO()
    logging.getLogger().handlers[0].setStream(stream)
    return stream


class TestConfigureLogging:
    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
        ],
    )
    def test_sets_root_level(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_existing_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging()

        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_emits_json_with_service_correlation_and_extras(self) -> None:
        configure_logging(
            level="INFO",
            service_name="confluence_mcp_test",
            correlation_id_getter=lambda: "corr-42",
        )
        stream = _capture_root_output()

        logging.getLogger("api.tools.registry").info(
            "tool_call_completed",
            extra={"tool_name": "confluence_get_page", "page_id": "123", "latency_ms": 12.5},
        )

        payload = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert payload["message"] == "tool_call_completed"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "api.tools.registry"
        assert payload["service"] == "confluence_mcp_test"
        assert payload["correlation_id"] == "corr-42"
        assert payload["tool_name"] == "confluence_get_page"
        assert payload["page_id"] == "123"

    def test_default_service_name(self) -> None:
        configure_logging()
        stream = _capture_root_output()

        logging.getLogger("app").warning("gateway_not_ready")

        payload = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert payload["service"] == DEFAULT_SERVICE_NAME == "confluence_mcp"
        assert payload["correlation_id"] == ""


class TestLogFallback:
    def test_comment_count_fallback(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "comment_count", reason="not_found", elapsed_ms=8.0)

        args, kwargs = logger.info.call_args
        assert args == ("Fallback applied for %s", "comment_count")
        assert kwargs["extra"] == {
            "fallback_used": True,
            "component": "comment_count",
            "reason": "not_found",
            "elapsed_ms": 8.0,
        }

    def test_optional_fields_are_omitted(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "page_context")

        extra = logger.info.call_args[1]["extra"]
        assert "reason" not in extra
        assert "elapsed_ms" not in extra


class TestCorrelationIdFilter:
    def test_injects_service_and_correlation_id(self) -> None:
        record = _record()

        assert CorrelationIdFilter("confluence_mcp", lambda: "corr-1").filter(record) is True
        assert record.correlation_id == "corr-1"
        assert record.service == "confluence_mcp"

    def test_explicit_correlation_id_wins(self) -> None:
        record = _record()
        record.correlation_id = "explicit-id"

        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)

        assert record.correlation_id == "explicit-id"

    def test_without_getter_uses_empty_string(self) -> None:
        record = _record(level=logging.ERROR)

        assert CorrelationIdFilter("svc").filter(record) is True
        assert record.correlation_id == ""


def test_required_fields_cover_correlation_and_service() -> None:
    assert {"correlation_id", "service", "message"} <= REQUIRED_LOG_FIELDS
