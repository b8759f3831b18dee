"""
Label keys and the fixed English default table.

Every display string on an invoice is looked up by key through the
injected translator first; the table below is the fallback used when the
translator is missing or has nothing for the key. Status and period labels
are finite mapping tables with an explicit default arm: adding a code is a
one-line change here.
"""

from __future__ import annotations

from types import MappingProxyType

from invoice_kernel.domain.codes import OrderStatus, PeriodCode
from invoice_kernel.domain.translation import Translator, translate_or_default


class LabelKey:
    """Translation keys used by the document assembler."""

    TITLE = "invoice.title"
    BILL_TO = "invoice.bill_to"
    INVOICE_NO = "invoice.invoice_no"
    INVOICE_DATE = "invoice.invoice_date"
    DESCRIPTION = "invoice.description"
    PERIOD = "invoice.period"
    QTY = "invoice.qty"
    AMOUNT = "invoice.amount"
    SUBTOTAL = "invoice.subtotal"
    DISCOUNT = "invoice.discount"
    BALANCE_USED = "invoice.balance_used"
    HANDLING_FEE = "invoice.handling_fee"
    TOTAL = "invoice.total"
    PAID_NOTICE = "invoice.paid_notice"
    PAYMENT_METHOD = "invoice.payment_method"
    FOOTER_TEXT = "invoice.footer_text"
    GENERATED_BY = "invoice.generated_by"
    POPUP_BLOCKED = "invoice.popup_blocked"
    DEPOSIT_TITLE = "wallet.deposit.title"
    STATUS_UNKNOWN = "payment.status.unknown"


DEFAULT_LABELS: MappingProxyType[str, str] = MappingProxyType({
    LabelKey.TITLE: "INVOICE",
    LabelKey.BILL_TO: "BILL TO",
    LabelKey.INVOICE_NO: "INVOICE NO",
    LabelKey.INVOICE_DATE: "DATE",
    LabelKey.DESCRIPTION: "DESCRIPTION",
    LabelKey.PERIOD: "PERIOD",
    LabelKey.QTY: "QTY",
    LabelKey.AMOUNT: "AMOUNT",
    LabelKey.SUBTOTAL: "Subtotal",
    LabelKey.DISCOUNT: "Discount",
    LabelKey.BALANCE_USED: "Balance Used",
    LabelKey.HANDLING_FEE: "Handling Fee",
    LabelKey.TOTAL: "TOTAL",
    LabelKey.PAID_NOTICE: "PAID",
    LabelKey.PAYMENT_METHOD: "Via",
    LabelKey.FOOTER_TEXT: "Thank you for your business!",
    LabelKey.GENERATED_BY: "Generated by",
    LabelKey.POPUP_BLOCKED: "Please allow pop-up windows to print the invoice",
    LabelKey.DEPOSIT_TITLE: "Account top-up",
    LabelKey.STATUS_UNKNOWN: "Unknown status",
})

# code -> (translation key, default label)
PERIOD_LABELS: MappingProxyType[str, tuple[str, str]] = MappingProxyType({
    PeriodCode.MONTH.value: ("shop.plan.price_options.month", "Monthly"),
    PeriodCode.QUARTER.value: ("shop.plan.price_options.quarter", "Quarterly"),
    PeriodCode.HALF_YEAR.value: ("shop.plan.price_options.half_year", "Semi-annual"),
    PeriodCode.YEAR.value: ("shop.plan.price_options.year", "Annual"),
    PeriodCode.TWO_YEAR.value: ("shop.plan.price_options.two_year", "Biennial"),
    PeriodCode.THREE_YEAR.value: ("shop.plan.price_options.three_year", "Triennial"),
    PeriodCode.ONETIME.value: ("shop.plan.price_options.onetime", "One-time"),
    PeriodCode.RESET.value: ("payment.period_types.reset_price", "Data reset pack"),
    PeriodCode.DEPOSIT.value: ("payment.period_types.deposit", "Top-up"),
})

# status code -> (translation key, default label)
STATUS_LABELS: MappingProxyType[int, tuple[str, str]] = MappingProxyType({
    OrderStatus.PENDING.value: ("payment.status.pending", "Pending"),
    OrderStatus.PROCESSING.value: ("payment.status.processing", "Processing"),
    OrderStatus.CANCELLED.value: ("payment.status.cancelled", "Cancelled"),
    OrderStatus.COMPLETED.value: ("payment.status.completed", "Completed"),
    OrderStatus.DISCOUNTED.value: ("payment.status.discounted", "Discounted"),
})

MISSING_VALUE = "-"


def label(translator: Translator, key: str) -> str:
    """Display text for a fixed label key."""
    return translate_or_default(translator, key, DEFAULT_LABELS[key])


def period_label(period: str | None, translator: Translator) -> str:
    """Display text for a period code; raw code when unknown, "-" when absent."""
    if not period:
        return MISSING_VALUE
    entry = PERIOD_LABELS.get(period)
    if entry is None:
        return period
    key, default = entry
    return translate_or_default(translator, key, default)


def status_label(status: int | None, translator: Translator) -> str:
    """Display text for a status code; the unknown-status label otherwise."""
    entry = STATUS_LABELS.get(status) if status is not None else None
    if entry is None:
        return label(translator, LabelKey.STATUS_UNKNOWN)
    key, default = entry
    return translate_or_default(translator, key, default)
