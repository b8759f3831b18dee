"""
Plain-text print surface.

Renders an InvoiceDocument as fixed-width text and writes it to a stream.
Used by the command line script and by tests; richer surfaces (HTML, PDF,
a browser print dialog) implement the same ``present`` method.
"""

from __future__ import annotations

import sys
from typing import TextIO

from invoice_engines.document import InvoiceDocument
from invoice_kernel.exceptions import PrintSurfaceUnavailableError

DEFAULT_WIDTH = 56


def _spread(left: str, right: str, width: int) -> str:
    gap = max(width - len(left) - len(right), 1)
    return f"{left}{' ' * gap}{right}"


def render_text(document: InvoiceDocument, width: int = DEFAULT_WIDTH) -> str:
    """Render the document as plain text lines joined by newlines."""
    rule = "-" * width
    lines = [
        _spread(document.header.site_name, document.header.title, width),
        "=" * width,
        f"{document.bill_to.label}: {document.bill_to.email}",
        f"{document.meta.invoice_no_label}: {document.meta.invoice_no}",
        f"{document.meta.date_label}: {document.meta.invoice_date}",
        rule,
    ]

    columns = document.columns
    item = document.line_item
    desc_width = max(width // 2 - 2, 8)
    lines.append(
        f"{columns.description:<{desc_width}} {columns.period:<10} {columns.quantity:>4}"
        f"{columns.amount:>{max(width - desc_width - 16, 8)}}"
    )
    lines.append(
        f"{item.description:<{desc_width}} {item.period_label:<10} {item.quantity:>4}"
        f"{item.amount_display:>{max(width - desc_width - 16, 8)}}"
    )
    lines.append(rule)

    for row in document.totals:
        if row.is_final:
            lines.append("-" * (width // 2))
        lines.append(_spread(row.label, row.display, width))

    if document.paid_stamp is not None:
        lines.append("")
        lines.append(f"[ {document.paid_stamp.notice} ]")
        payment_line = document.paid_stamp.payment_line
        if payment_line:
            lines.append(payment_line)

    lines.append(rule)
    lines.append(document.footer.text)
    lines.append(document.footer.generated_by)
    return "\n".join(lines)


class TextPrintSurface:
    """Writes rendered invoices to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None, width: int = DEFAULT_WIDTH):
        self._stream = stream
        self._width = width

    def present(self, document: InvoiceDocument) -> None:
        stream = self._stream or sys.stdout
        if getattr(stream, "closed", False):
            raise PrintSurfaceUnavailableError("text", "stream is closed")
        stream.write(render_text(document, self._width))
        stream.write("\n")
        stream.flush()
