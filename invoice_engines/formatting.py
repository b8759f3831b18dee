"""
Display formatting for amounts and timestamps.

Pure functions. Amounts arrive as int minor units and are shown in major
units with exactly two decimals behind a fixed currency symbol. Timestamps
arrive as epoch seconds and are shown as ``YYYY/MM/DD HH:MM`` in the
deployment's time zone.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from invoice_kernel.domain.settings import DEFAULT_CURRENCY_SYMBOL
from invoice_kernel.domain.values import minor_to_major
from invoice_kernel.logging_config import get_logger

logger = get_logger("engines.formatting")

DATE_FORMAT = "%Y/%m/%d %H:%M"
MISSING_DATE = "-"

_UTC = ZoneInfo("UTC")


def format_amount(amount: int | None, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """
    Format minor units for display.

    Example:
        format_amount(1050, "¥") -> "¥10.50"
        format_amount(None, "¥") -> "¥0.00"
    """
    return f"{symbol}{minor_to_major(amount)}"


def format_deduction(amount: int | None, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format an amount taken off the subtotal, e.g. "-¥10.00"."""
    return f"-{format_amount(amount, symbol)}"


def format_timestamp(timestamp: int | None, tz: tzinfo | None = None) -> str:
    """
    Format epoch seconds; "-" when absent (None or 0).

    A timestamp outside the platform's datetime range (e.g. milliseconds
    sent where seconds are expected) is logged and shown as "-".
    """
    if not timestamp:
        return MISSING_DATE
    try:
        moment = datetime.fromtimestamp(timestamp, tz=tz or _UTC)
    except (OverflowError, OSError, ValueError):
        logger.warning("timestamp_out_of_range", extra={"timestamp": timestamp})
        return MISSING_DATE
    return moment.strftime(DATE_FORMAT)
