"""Order status and billing period code enumerations."""

from __future__ import annotations

from enum import Enum, IntEnum


class OrderStatus(IntEnum):
    """Order status codes as sent by the order API."""

    PENDING = 0
    PROCESSING = 1
    CANCELLED = 2
    COMPLETED = 3
    DISCOUNTED = 4


# Statuses under which the invoice is stamped as paid
PAID_STATUSES: frozenset[int] = frozenset(
    {OrderStatus.COMPLETED, OrderStatus.DISCOUNTED}
)


class PeriodCode(str, Enum):
    """Billing cadence and special order categories."""

    MONTH = "month_price"
    QUARTER = "quarter_price"
    HALF_YEAR = "half_year_price"
    YEAR = "year_price"
    TWO_YEAR = "two_year_price"
    THREE_YEAR = "three_year_price"
    ONETIME = "onetime_price"
    RESET = "reset_price"
    DEPOSIT = "deposit"


def is_paid_status(status: int | None) -> bool:
    """True iff the status marks the order as settled."""
    return status in PAID_STATUSES
