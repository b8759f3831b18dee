"""
Invoice Document Assembler.

Pure functions with deterministic behavior. No I/O.

Combines a resolved MonetaryBreakdown with order metadata, user metadata
and an injected translator into a complete, self-contained InvoiceDocument.
Renderers consume the document as-is: every amount appears both as int
minor units and as its formatted display string, so nothing needs to be
re-derived downstream.

Totals policy:
- Subtotal and Total rows are always present.
- Discount, Balance Used and Handling Fee rows are present only when the
  corresponding amount is strictly greater than zero.

Paid stamp policy:
- Present iff the order status is completed (3) or discounted (4).

Usage:
    from invoice_engines.amounts import resolve_breakdown
    from invoice_engines.document import assemble_document

    breakdown = resolve_breakdown(order)
    document = assemble_document(order, user, breakdown, translate)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any

from invoice_engines.amounts import MonetaryBreakdown
from invoice_engines.formatting import (
    format_amount,
    format_deduction,
    format_timestamp,
)
from invoice_engines.labels import (
    MISSING_VALUE,
    LabelKey,
    label,
    period_label,
    status_label,
)
from invoice_engines.tracer import traced_engine
from invoice_kernel.domain.codes import PeriodCode, is_paid_status
from invoice_kernel.domain.records import OrderRecord, UserRecord
from invoice_kernel.domain.settings import DocumentSettings
from invoice_kernel.domain.translation import (
    TranslateFn,
    Translator,
    as_translator,
)
from invoice_kernel.logging_config import get_logger

logger = get_logger("engines.document")

LINE_QUANTITY = 1


# ============================================================================
# Document Value Objects
# ============================================================================


class TotalsRowKind(str, Enum):
    """Rows that can appear in the totals block, in display order."""

    SUBTOTAL = "subtotal"
    DISCOUNT = "discount"
    BALANCE_USED = "balance_used"
    HANDLING_FEE = "handling_fee"
    TOTAL = "total"


@dataclass(frozen=True)
class TotalsRow:
    """One row of the totals block; amount is unsigned minor units."""

    kind: TotalsRowKind
    label: str
    amount: int
    display: str
    is_final: bool = False


@dataclass(frozen=True)
class InvoiceHeader:
    site_name: str
    title: str


@dataclass(frozen=True)
class BillTo:
    label: str
    email: str


@dataclass(frozen=True)
class InvoiceMeta:
    """Invoice number, date and status block."""

    invoice_no_label: str
    invoice_no: str
    date_label: str
    invoice_date: str
    status: int | None
    status_label: str


@dataclass(frozen=True)
class ColumnHeaders:
    description: str
    period: str
    quantity: str
    amount: str


@dataclass(frozen=True)
class LineItem:
    """The single line of the invoice."""

    description: str
    period: str | None
    period_label: str
    quantity: int
    amount: int
    amount_display: str


@dataclass(frozen=True)
class PaidStamp:
    notice: str
    payment_method_label: str
    payment_method: str | None = None

    @property
    def payment_line(self) -> str | None:
        """e.g. "Via: Alipay"; None when the payment method is unknown."""
        if not self.payment_method:
            return None
        return f"{self.payment_method_label}: {self.payment_method}"


@dataclass(frozen=True)
class Footer:
    text: str
    generated_by: str


@dataclass(frozen=True)
class InvoiceDocument:
    """
    Complete invoice, ready for a renderer.

    Immutable value object; built in one piece by assemble_document.
    """

    header: InvoiceHeader
    bill_to: BillTo
    meta: InvoiceMeta
    columns: ColumnHeaders
    line_item: LineItem
    totals: tuple[TotalsRow, ...]
    paid_stamp: PaidStamp | None
    footer: Footer
    breakdown: MonetaryBreakdown

    @property
    def is_paid(self) -> bool:
        return self.paid_stamp is not None

    def row(self, kind: TotalsRowKind) -> TotalsRow | None:
        """The totals row of the given kind, or None if it was omitted."""
        for row in self.totals:
            if row.kind == kind:
                return row
        return None

    def has_row(self, kind: TotalsRowKind) -> bool:
        return self.row(kind) is not None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view with enums flattened to their values."""
        return _jsonable(dataclasses.asdict(self))


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


# ============================================================================
# Assembly
# ============================================================================


def _description(order: OrderRecord, translator: Translator) -> str:
    if order.plan is not None and order.plan.name:
        return order.plan.name
    if order.period == PeriodCode.DEPOSIT.value:
        return label(translator, LabelKey.DEPOSIT_TITLE)
    return MISSING_VALUE


def build_totals(
    breakdown: MonetaryBreakdown,
    translator: Translator,
    symbol: str,
) -> tuple[TotalsRow, ...]:
    """
    Build the totals block for a breakdown.

    Subtotal and Total always; each adjustment row only when its amount
    is strictly positive.
    """
    rows = [
        TotalsRow(
            kind=TotalsRowKind.SUBTOTAL,
            label=label(translator, LabelKey.SUBTOTAL),
            amount=breakdown.original_price,
            display=format_amount(breakdown.original_price, symbol),
        )
    ]

    if breakdown.discount_amount > 0:
        rows.append(TotalsRow(
            kind=TotalsRowKind.DISCOUNT,
            label=label(translator, LabelKey.DISCOUNT),
            amount=breakdown.discount_amount,
            display=format_deduction(breakdown.discount_amount, symbol),
        ))

    if breakdown.balance_amount > 0:
        rows.append(TotalsRow(
            kind=TotalsRowKind.BALANCE_USED,
            label=label(translator, LabelKey.BALANCE_USED),
            amount=breakdown.balance_amount,
            display=format_deduction(breakdown.balance_amount, symbol),
        ))

    if breakdown.handling_amount > 0:
        rows.append(TotalsRow(
            kind=TotalsRowKind.HANDLING_FEE,
            label=label(translator, LabelKey.HANDLING_FEE),
            amount=breakdown.handling_amount,
            display=format_amount(breakdown.handling_amount, symbol),
        ))

    rows.append(TotalsRow(
        kind=TotalsRowKind.TOTAL,
        label=label(translator, LabelKey.TOTAL),
        amount=breakdown.final_total,
        display=format_amount(breakdown.final_total, symbol),
        is_final=True,
    ))
    return tuple(rows)


def build_paid_stamp(order: OrderRecord, translator: Translator) -> PaidStamp | None:
    """Paid stamp for settled orders; None for every other status."""
    if not is_paid_status(order.status):
        return None
    return PaidStamp(
        notice=label(translator, LabelKey.PAID_NOTICE),
        payment_method_label=label(translator, LabelKey.PAYMENT_METHOD),
        payment_method=order.payment.name if order.payment is not None else None,
    )


@traced_engine("document", "1.0", fingerprint_fields=("order", "user", "breakdown"))
def assemble_document(
    order: OrderRecord,
    user: UserRecord,
    breakdown: MonetaryBreakdown,
    translate: Translator | TranslateFn | None = None,
    *,
    settings: DocumentSettings | None = None,
) -> InvoiceDocument:
    """
    Assemble the invoice document.

    Pure function - never raises for normalized input; every lookup falls
    back to its documented default.

    Args:
        order: Normalized order record
        user: Normalized user record
        breakdown: Breakdown resolved from the same order
        translate: Translator, bare translate function, or None
        settings: Site identity and display conventions (defaults apply)

    Returns:
        InvoiceDocument
    """
    settings = settings or DocumentSettings()
    translator = as_translator(translate)
    symbol = settings.currency_symbol

    document = InvoiceDocument(
        header=InvoiceHeader(
            site_name=settings.site_name,
            title=label(translator, LabelKey.TITLE),
        ),
        bill_to=BillTo(
            label=label(translator, LabelKey.BILL_TO),
            email=user.email or MISSING_VALUE,
        ),
        meta=InvoiceMeta(
            invoice_no_label=label(translator, LabelKey.INVOICE_NO),
            invoice_no=order.trade_no or MISSING_VALUE,
            date_label=label(translator, LabelKey.INVOICE_DATE),
            invoice_date=format_timestamp(order.invoice_timestamp, settings.tzinfo),
            status=order.status,
            status_label=status_label(order.status, translator),
        ),
        columns=ColumnHeaders(
            description=label(translator, LabelKey.DESCRIPTION),
            period=label(translator, LabelKey.PERIOD),
            quantity=label(translator, LabelKey.QTY),
            amount=label(translator, LabelKey.AMOUNT),
        ),
        line_item=LineItem(
            description=_description(order, translator),
            period=order.period,
            period_label=period_label(order.period, translator),
            quantity=LINE_QUANTITY,
            amount=breakdown.original_price,
            amount_display=format_amount(breakdown.original_price, symbol),
        ),
        totals=build_totals(breakdown, translator, symbol),
        paid_stamp=build_paid_stamp(order, translator),
        footer=Footer(
            text=label(translator, LabelKey.FOOTER_TEXT),
            generated_by=f"{label(translator, LabelKey.GENERATED_BY)} {settings.site_name}",
        ),
        breakdown=breakdown,
    )

    logger.debug("invoice_document_assembled", extra={
        "trade_no": order.trade_no,
        "status": order.status,
        "totals_rows": [row.kind.value for row in document.totals],
        "paid": document.is_paid,
    })

    return document


class DocumentAssembler:
    """
    Document assembler bound to one deployment's settings.

    Holds no per-call state; safe to share between threads.
    """

    def __init__(self, settings: DocumentSettings | None = None):
        self._settings = settings or DocumentSettings()

    @property
    def settings(self) -> DocumentSettings:
        return self._settings

    def assemble(
        self,
        order: OrderRecord,
        user: UserRecord,
        breakdown: MonetaryBreakdown,
        translate: Translator | TranslateFn | None = None,
    ) -> InvoiceDocument:
        return assemble_document(
            order, user, breakdown, translate, settings=self._settings
        )
