"""
Values -- minor-unit amount helpers.

Responsibility:
    Every monetary field in an order payload is an integer count of minor
    currency units (cents, fen). This module is the single place where such
    values are read from loosely typed input, rounded, and converted to major
    units for display.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Invariants enforced:
    - Amounts inside the kernel are always ``int`` minor units.
    - Rounding is ROUND_HALF_UP on Decimal, i.e. half away from zero
      (2.5 -> 3, -2.5 -> -3). Python's built-in ``round`` is never used.
    - Conversion to major units goes through Decimal, never float.

Failure modes:
    - InvalidAmountError when a value cannot be read as a number.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from invoice_kernel.exceptions import InvalidAmountError

MINOR_UNIT_DECIMAL_PLACES = 2

_UNIT = Decimal("1")


def _to_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise InvalidAmountError(field_name, value) from e
        if not result.is_finite():
            raise InvalidAmountError(field_name, value)
        return result
    raise InvalidAmountError(field_name, value)


def round_half_away_from_zero(value: Any, field_name: str = "value") -> int:
    """
    Round a numeric value to the nearest integer, halves away from zero.

    Args:
        value: int, float, Decimal or numeric string.
        field_name: Name reported in InvalidAmountError.

    Returns:
        The rounded integer.

    Raises:
        InvalidAmountError: If value is not numeric.
    """
    return int(_to_decimal(value, field_name).quantize(_UNIT, rounding=ROUND_HALF_UP))


def coerce_minor_units(value: Any, field_name: str) -> int:
    """
    Read an optional minor-unit amount from a payload field.

    None (absent or JSON null) reads as 0. Integral values pass through
    unchanged; a fractional value is rounded half away from zero.
    """
    if value is None:
        return 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return round_half_away_from_zero(value, field_name)


def coerce_timestamp(value: Any, field_name: str) -> int | None:
    """
    Read an optional epoch-second timestamp.

    None and 0 both mean "absent" (the order API sends 0 for unset times).
    """
    if value is None:
        return None
    seconds = round_half_away_from_zero(value, field_name)
    return seconds or None


def coerce_decimal(value: Any, field_name: str) -> Decimal | None:
    """Read an optional numeric field without rounding; None stays None."""
    if value is None:
        return None
    return _to_decimal(value, field_name)


def minor_to_major(
    amount: int | None,
    decimal_places: int = MINOR_UNIT_DECIMAL_PLACES,
) -> Decimal:
    """
    Convert minor units to a major-unit Decimal quantized to the currency.

    Example:
        minor_to_major(1050) -> Decimal("10.50")
    """
    divisor = Decimal(10) ** decimal_places
    quantize_str = "0." + "0" * decimal_places if decimal_places > 0 else "1"
    return (Decimal(amount or 0) / divisor).quantize(
        Decimal(quantize_str), rounding=ROUND_HALF_UP
    )
