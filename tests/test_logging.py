"""Tests for the structured logging system (invoice_kernel/logging_config.py)."""

import json
import logging
from decimal import Decimal
from io import StringIO

from invoice_engines.amounts import PriceSource, resolve_breakdown
from invoice_engines.tracer import compute_input_fingerprint
from invoice_kernel.domain.records import OrderRecord
from invoice_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    get_logger,
)


def _make_handler() -> tuple[logging.Handler, StringIO]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    return handler, stream


def _parse_log(stream: StringIO) -> dict:
    """Parse the first JSON log line from a stream."""
    line = stream.getvalue().strip().split("\n")[0]
    return json.loads(line)


def _parse_all_logs(stream: StringIO) -> list[dict]:
    """Parse all JSON log lines from a stream."""
    lines = stream.getvalue().strip().split("\n")
    return [json.loads(line) for line in lines if line]


# ---------------------------------------------------------------------------
# StructuredFormatter tests
# ---------------------------------------------------------------------------


class TestStructuredFormatter:
    """Tests for JSON log output format."""

    def test_basic_json_output(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("hello")

        record = _parse_log(stream)
        assert record["level"] == "INFO"
        assert record["message"] == "hello"
        assert record["logger"] == "invoice_kernel.test"
        assert "ts" in record

    def test_extra_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("resolved", extra={"final_total": 9000, "paid": True})

        record = _parse_log(stream)
        assert record["final_total"] == 9000
        assert record["paid"] is True

    def test_decimal_and_enum_serialized(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info(
            "values", extra={"price": Decimal("99.50"), "source": PriceSource.PLAN}
        )

        record = _parse_log(stream)
        assert record["price"] == "99.50"
        assert record["source"] == "plan"

    def test_context_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        LogContext.set(correlation_id="abc-123", trade_no="T-1")
        get_logger("test").info("test_msg")

        record = _parse_log(stream)
        assert record["correlation_id"] == "abc-123"
        assert record["trade_no"] == "T-1"

    def test_invoice_exception_code_extracted(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        from invoice_kernel.exceptions import PrintSurfaceUnavailableError

        try:
            raise PrintSurfaceUnavailableError("popup", "blocked")
        except PrintSurfaceUnavailableError:
            logger.error("print_failed", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_code"] == "PRINT_SURFACE_UNAVAILABLE"
        assert record["exc_type"] == "PrintSurfaceUnavailableError"
        assert record["exc_surface"] == "popup"
        assert record["exc_reason"] == "blocked"
        assert "traceback" in record

    def test_no_context_fields_when_empty(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info("bare_message")

        record = _parse_log(stream)
        assert "correlation_id" not in record
        assert "trade_no" not in record

    def test_debug_filtered_at_info(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("first")
        logger.warning("second", extra={"k": "v"})
        logger.debug("third")

        logs = _parse_all_logs(stream)
        assert [r["message"] for r in logs] == ["first", "second"]


# ---------------------------------------------------------------------------
# LogContext tests
# ---------------------------------------------------------------------------


class TestLogContext:
    """Tests for context propagation."""

    def test_set_and_get(self):
        LogContext.set(correlation_id="x", trade_no="y")
        assert LogContext.get_all() == {"correlation_id": "x", "trade_no": "y"}

    def test_clear(self):
        LogContext.set(correlation_id="x")
        LogContext.clear()
        assert LogContext.get_all() == {}

    def test_bind_restores_previous(self):
        LogContext.set(trade_no="outer")
        with LogContext.bind(trade_no="inner"):
            assert LogContext.get_all()["trade_no"] == "inner"
        assert LogContext.get_all()["trade_no"] == "outer"

    def test_bind_none_is_ignored(self):
        with LogContext.bind(trade_no=None):
            assert "trade_no" not in LogContext.get_all()


# ---------------------------------------------------------------------------
# configure_logging tests
# ---------------------------------------------------------------------------


class TestConfigureLogging:
    def test_idempotent(self):
        handler, _ = _make_handler()
        configure_logging(handler=handler)
        configure_logging(handler=handler)
        assert len(logging.getLogger("invoice_kernel").handlers) == 1


# ---------------------------------------------------------------------------
# Engine tracer tests
# ---------------------------------------------------------------------------


class TestEngineTracer:
    def test_trace_emitted_at_debug(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler, level=logging.DEBUG)
        resolve_breakdown(OrderRecord(total_amount=100))

        traces = [r for r in _parse_all_logs(stream) if r["message"] == "INVOICE_ENGINE_TRACE"]
        assert len(traces) == 1
        assert traces[0]["engine_name"] == "amounts"
        assert len(traces[0]["input_fingerprint"]) == 16

    def test_fingerprint_deterministic(self):
        args = {"order": OrderRecord(total_amount=100)}
        assert compute_input_fingerprint(("order",), args) == compute_input_fingerprint(("order",), args)

    def test_fingerprint_sensitive_to_input(self):
        first = compute_input_fingerprint(("order",), {"order": OrderRecord(total_amount=100)})
        second = compute_input_fingerprint(("order",), {"order": OrderRecord(total_amount=101)})
        assert first != second

    def test_missing_field_is_null(self):
        assert compute_input_fingerprint(("order",), {}) == compute_input_fingerprint(
            ("order",), {"order": None}
        )
