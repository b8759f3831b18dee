"""
Amount Resolver Engine.

Pure functions with deterministic behavior. No I/O.

Derives the canonical monetary breakdown of a single-line order: what the
line originally cost (subtotal), what was taken off (discount, account
balance), what was added (handling fee) and what was finally charged.

Rules:
1. If the order's plan carries a truthy price for the order's period, that
   price is the subtotal (rounded half away from zero).
2. Otherwise the subtotal is reconstructed as
   total_amount + discount_amount + balance_amount.
   handling_amount is NOT part of the reconstructed subtotal.
3. final_total = total_amount + handling_amount.

Usage:
    from invoice_engines.amounts import resolve_breakdown
    from invoice_kernel.domain.records import OrderRecord

    order = OrderRecord.from_payload(payload)
    breakdown = resolve_breakdown(order)
    breakdown.final_total
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from invoice_engines.tracer import traced_engine
from invoice_kernel.domain.records import OrderRecord
from invoice_kernel.domain.values import round_half_away_from_zero
from invoice_kernel.logging_config import get_logger

logger = get_logger("engines.amounts")


class PriceSource(str, Enum):
    """Where the subtotal of a breakdown came from."""

    PLAN = "plan"
    RECONSTRUCTED = "reconstructed"


@dataclass(frozen=True)
class MonetaryBreakdown:
    """
    Monetary breakdown of a single-line order, all in int minor units.

    Attributes:
        original_price: Subtotal of the line before adjustments
        discount_amount: Promotional discount taken off
        balance_amount: Account balance applied to the order
        handling_amount: Payment handling fee added on top
        order_amount: Amount of the order itself (the order's total_amount)
        final_total: order_amount + handling_amount
        price_source: Whether original_price came from the plan table
    """

    original_price: int
    discount_amount: int
    balance_amount: int
    handling_amount: int
    order_amount: int
    final_total: int
    price_source: PriceSource

    @property
    def expected_total(self) -> int:
        """Total implied by the subtotal and the adjustments."""
        return (
            self.original_price
            - self.discount_amount
            - self.balance_amount
            + self.handling_amount
        )

    @property
    def is_reconciled(self) -> bool:
        """True when final_total agrees with the subtotal and adjustments."""
        return self.final_total == self.expected_total


def _plan_price(order: OrderRecord) -> int | None:
    if order.plan is None or not order.period:
        return None
    price = order.plan.price_for(order.period)
    if not price:
        return None
    return round_half_away_from_zero(price, f"plan.{order.period}")


@traced_engine("amounts", "1.0", fingerprint_fields=("order",))
def resolve_breakdown(order: OrderRecord) -> MonetaryBreakdown:
    """
    Resolve the monetary breakdown of an order.

    Pure function - total over any normalized OrderRecord, never raises.
    A plan-priced order whose amounts do not reconcile is logged as a
    warning and returned unchanged.

    Args:
        order: Normalized order record

    Returns:
        MonetaryBreakdown with subtotal, adjustments and final total
    """
    discount_amount = order.discount_amount
    balance_amount = order.balance_amount
    handling_amount = order.handling_amount
    order_amount = order.total_amount

    plan_price = _plan_price(order)
    if plan_price is not None:
        original_price = plan_price
        source = PriceSource.PLAN
    else:
        original_price = order_amount + discount_amount + balance_amount
        source = PriceSource.RECONSTRUCTED

    breakdown = MonetaryBreakdown(
        original_price=original_price,
        discount_amount=discount_amount,
        balance_amount=balance_amount,
        handling_amount=handling_amount,
        order_amount=order_amount,
        final_total=order_amount + handling_amount,
        price_source=source,
    )

    if not breakdown.is_reconciled:
        logger.warning("amount_breakdown_unreconciled", extra={
            "trade_no": order.trade_no,
            "period": order.period,
            "original_price": breakdown.original_price,
            "final_total": breakdown.final_total,
            "expected_total": breakdown.expected_total,
        })

    logger.debug("amount_breakdown_resolved", extra={
        "trade_no": order.trade_no,
        "price_source": source.value,
        "original_price": breakdown.original_price,
        "final_total": breakdown.final_total,
    })

    return breakdown


class AmountResolver:
    """
    Stateless resolver for order breakdowns.

    Thin object wrapper over ``resolve_breakdown`` for callers that inject
    collaborators as objects.
    """

    def resolve(self, order: OrderRecord) -> MonetaryBreakdown:
        return resolve_breakdown(order)
