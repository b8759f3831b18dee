"""
Module: invoice_engines
Responsibility:
    Package entrypoint that re-exports the public symbols of the pure
    calculation engines. This is the canonical import surface for higher
    layers (invoice_services, scripts).

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import invoice_kernel (and sibling engine modules).
    MUST NOT import invoice_services or invoice_config.

Invariants enforced:
    - Purity: engines never read the clock; timestamps come from the order.
    - Integer minor units for every amount; Decimal only for display.
    - Determinism: identical inputs always produce identical outputs.

Usage:
    from invoice_engines import resolve_breakdown, assemble_document
"""

from invoice_engines.amounts import (
    AmountResolver,
    MonetaryBreakdown,
    PriceSource,
    resolve_breakdown,
)
from invoice_engines.document import (
    BillTo,
    ColumnHeaders,
    DocumentAssembler,
    Footer,
    InvoiceDocument,
    InvoiceHeader,
    InvoiceMeta,
    LineItem,
    PaidStamp,
    TotalsRow,
    TotalsRowKind,
    assemble_document,
    build_paid_stamp,
    build_totals,
)
from invoice_engines.formatting import (
    format_amount,
    format_deduction,
    format_timestamp,
)
from invoice_engines.labels import (
    DEFAULT_LABELS,
    PERIOD_LABELS,
    STATUS_LABELS,
    LabelKey,
    label,
    period_label,
    status_label,
)

__all__ = [
    "AmountResolver",
    "BillTo",
    "ColumnHeaders",
    "DEFAULT_LABELS",
    "DocumentAssembler",
    "Footer",
    "InvoiceDocument",
    "InvoiceHeader",
    "InvoiceMeta",
    "LabelKey",
    "LineItem",
    "MonetaryBreakdown",
    "PERIOD_LABELS",
    "PaidStamp",
    "PriceSource",
    "STATUS_LABELS",
    "TotalsRow",
    "TotalsRowKind",
    "assemble_document",
    "build_paid_stamp",
    "build_totals",
    "format_amount",
    "format_deduction",
    "format_timestamp",
    "label",
    "period_label",
    "resolve_breakdown",
    "status_label",
]
