"""
Pytest fixtures for the invoice kernel test suite.

Provides:
- Order/user payload factories in the order API's snake_case shape
- Document settings pinned to UTC so dates are deterministic
- Dict-backed translators
- Logging reset between tests
"""

from typing import Any

import pytest
from hypothesis import HealthCheck
from hypothesis import settings as hypothesis_settings

from invoice_kernel.domain.records import OrderRecord, UserRecord
from invoice_kernel.domain.settings import DocumentSettings
from invoice_kernel.logging_config import LogContext, reset_logging

# 2024-01-15 10:30:00 UTC / 2024-01-15 11:30:00 UTC
CREATED_AT = 1705314600
PAID_AT = 1705318200

# _clean_logging is autouse and function-scoped; it only resets global state.
hypothesis_settings.register_profile(
    "invoice",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
hypothesis_settings.load_profile("invoice")


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


@pytest.fixture
def settings() -> DocumentSettings:
    return DocumentSettings(site_name="Acme VPN", currency_symbol="¥", timezone="UTC")


@pytest.fixture
def order_payload():
    """Factory for order payloads; keyword overrides replace defaults."""

    def _make(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "trade_no": "2024011510300012345",
            "created_at": CREATED_AT,
            "paid_at": PAID_AT,
            "status": 3,
            "period": "month_price",
            "plan": {"id": 7, "name": "Pro", "month_price": 10000, "year_price": 100000},
            "total_amount": 9000,
            "discount_amount": 1000,
            "balance_amount": 0,
            "handling_amount": 0,
            "payment": {"name": "Alipay"},
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def make_order(order_payload):
    """Factory for normalized OrderRecords."""

    def _make(**overrides: Any) -> OrderRecord:
        return OrderRecord.from_payload(order_payload(**overrides))

    return _make


@pytest.fixture
def user() -> UserRecord:
    return UserRecord(email="alice@example.com")


@pytest.fixture
def dict_translate():
    """Factory for a bare translate function backed by a dict."""

    def _make(entries: dict[str, str]):
        return entries.get

    return _make
