"""
Records -- normalized order and user input.

Responsibility:
    The order API hands over JSON-shaped payloads in which almost every
    field may be missing or null. ``OrderRecord.from_payload`` and
    ``UserRecord.from_payload`` are the single normalization step: defaults
    are applied here once, so the engines never null-check.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Invariants enforced:
    - Monetary fields are int minor units, 0 when absent or null.
    - Timestamps are int epoch seconds or None (0 reads as absent).
    - ``status`` is an int or None; a non-numeric status is treated as
      unknown rather than rejected.
    - Empty strings for ``trade_no``, ``period``, names and email read as
      absent.
    - Records are frozen; the source payload is never mutated.

Failure modes:
    - InvalidRecordError if a payload is not a mapping.
    - InvalidAmountError if a monetary field, a timestamp, or the plan price
      for the order's own period holds a non-numeric value.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any

from invoice_kernel.domain.values import (
    coerce_decimal,
    coerce_minor_units,
    coerce_timestamp,
)
from invoice_kernel.exceptions import InvalidRecordError


def _require_mapping(payload: Any, record_type: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise InvalidRecordError(record_type, type(payload).__name__)
    return payload


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_status(value: Any) -> int | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class PlanRecord:
    """
    Plan attached to an order.

    ``entries`` holds the plan payload as sent, keyed by attribute name.
    The price for an order is whatever entry the order's period names, so
    periods outside the known code table still price from the plan. Prices
    are read on demand; junk in an entry no order uses is never inspected.
    """

    name: str | None = None
    entries: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_payload(cls, payload: Any) -> PlanRecord:
        data = _require_mapping(payload, "PlanRecord")
        return cls(
            name=_optional_text(data.get("name")),
            entries=MappingProxyType(
                {key: value for key, value in data.items() if isinstance(key, str)}
            ),
        )

    def price_for(self, period: str | None) -> Decimal | None:
        """
        Price for a period in minor units, or None when the plan has none.

        A missing, null or blank entry reads as no price.

        Raises:
            InvalidAmountError: If the entry is present but not numeric.
        """
        if period is None:
            return None
        value = self.entries.get(period)
        if isinstance(value, str) and not value.strip():
            return None
        return coerce_decimal(value, f"plan.{period}")


@dataclass(frozen=True)
class PaymentRecord:
    """Payment method used for the order."""

    name: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> PaymentRecord:
        data = _require_mapping(payload, "PaymentRecord")
        return cls(name=_optional_text(data.get("name")))


@dataclass(frozen=True)
class OrderRecord:
    """
    A single-line order as read from the order API.

    All monetary amounts are int minor units (e.g. cents).
    """

    trade_no: str | None = None
    created_at: int | None = None
    paid_at: int | None = None
    status: int | None = None
    period: str | None = None
    plan: PlanRecord | None = None
    total_amount: int = 0
    discount_amount: int = 0
    balance_amount: int = 0
    handling_amount: int = 0
    payment: PaymentRecord | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> OrderRecord:
        """
        Normalize an order payload.

        Args:
            payload: Mapping with the order API's snake_case keys.

        Returns:
            Frozen OrderRecord with every default applied.

        Raises:
            InvalidRecordError: If payload (or plan/payment) is not a mapping.
            InvalidAmountError: If an amount, price or timestamp is not numeric.
        """
        data = _require_mapping(payload, "OrderRecord")

        plan_data = data.get("plan")
        payment_data = data.get("payment")
        period = _optional_text(data.get("period"))
        plan = PlanRecord.from_payload(plan_data) if plan_data else None
        if plan is not None:
            # Only the price this order uses is checked; it must be numeric.
            plan.price_for(period)

        return cls(
            trade_no=_optional_text(data.get("trade_no")),
            created_at=coerce_timestamp(data.get("created_at"), "created_at"),
            paid_at=coerce_timestamp(data.get("paid_at"), "paid_at"),
            status=_optional_status(data.get("status")),
            period=period,
            plan=plan,
            total_amount=coerce_minor_units(data.get("total_amount"), "total_amount"),
            discount_amount=coerce_minor_units(data.get("discount_amount"), "discount_amount"),
            balance_amount=coerce_minor_units(data.get("balance_amount"), "balance_amount"),
            handling_amount=coerce_minor_units(data.get("handling_amount"), "handling_amount"),
            payment=PaymentRecord.from_payload(payment_data) if payment_data else None,
        )

    @property
    def invoice_timestamp(self) -> int | None:
        """Paid time when known, otherwise creation time."""
        return self.paid_at if self.paid_at else self.created_at


@dataclass(frozen=True)
class UserRecord:
    """The customer the invoice is billed to."""

    email: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> UserRecord:
        """Normalize a user payload; None reads as an anonymous user."""
        if payload is None:
            return cls()
        data = _require_mapping(payload, "UserRecord")
        return cls(email=_optional_text(data.get("email")))
