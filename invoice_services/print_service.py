"""
Invoice print service.

Runs the full pipeline for one order: normalize the payloads, resolve the
monetary breakdown, assemble the document, and hand the finished document
to a print surface. The surface only ever receives a complete document.

When the surface cannot be acquired (a blocked popup, a closed stream) it
raises PrintSurfaceUnavailableError; the service turns that into a
user-facing notice and a False result. There is no retry and nothing to
release.

Usage:
    from invoice_services import InvoicePrinter, TextPrintSurface

    printer = InvoicePrinter(TextPrintSurface(), translate=catalog)
    printer.print_invoice(order_payload, user_payload)
"""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from invoice_engines.amounts import resolve_breakdown
from invoice_engines.document import InvoiceDocument, assemble_document
from invoice_engines.labels import LabelKey, label
from invoice_kernel.domain.records import OrderRecord, UserRecord
from invoice_kernel.domain.settings import DocumentSettings
from invoice_kernel.domain.translation import TranslateFn, Translator, as_translator
from invoice_kernel.exceptions import PrintSurfaceUnavailableError
from invoice_kernel.logging_config import LogContext, get_logger

logger = get_logger("services.print")

Notifier = Callable[[str], None]


class PrintSurface(Protocol):
    """Anything that can show or print a finished invoice."""

    def present(self, document: InvoiceDocument) -> None:
        """Render the document. Raises PrintSurfaceUnavailableError if it cannot."""
        ...


def _stderr_notify(message: str) -> None:
    print(message, file=sys.stderr)


def _as_order(order: OrderRecord | Mapping[str, Any]) -> OrderRecord:
    if isinstance(order, OrderRecord):
        return order
    return OrderRecord.from_payload(order)


def _as_user(user: UserRecord | Mapping[str, Any] | None) -> UserRecord:
    if isinstance(user, UserRecord):
        return user
    return UserRecord.from_payload(user)


class InvoicePrinter:
    """
    Builds invoices and hands them to a print surface.

    Holds only its collaborators; every call recomputes the document.
    """

    def __init__(
        self,
        surface: PrintSurface,
        *,
        settings: DocumentSettings | None = None,
        translate: Translator | TranslateFn | None = None,
        notify: Notifier | None = None,
    ):
        self._surface = surface
        self._settings = settings or DocumentSettings()
        self._translator = as_translator(translate)
        self._notify = notify or _stderr_notify

    def build(
        self,
        order: OrderRecord | Mapping[str, Any],
        user: UserRecord | Mapping[str, Any] | None,
    ) -> InvoiceDocument:
        """Build the document without printing it."""
        order_record = _as_order(order)
        user_record = _as_user(user)
        breakdown = resolve_breakdown(order_record)
        return assemble_document(
            order_record,
            user_record,
            breakdown,
            self._translator,
            settings=self._settings,
        )

    def print_invoice(
        self,
        order: OrderRecord | Mapping[str, Any],
        user: UserRecord | Mapping[str, Any] | None,
        *,
        correlation_id: str | None = None,
    ) -> bool:
        """
        Build the invoice and present it on the surface.

        Args:
            order: Order payload or normalized record
            user: User payload, normalized record, or None
            correlation_id: Caller's request id, attached to every log line
                emitted while this invoice is printed

        Returns:
            True once the surface accepted the document, False if the
            surface was unavailable (the user has been notified).

        Raises:
            InvalidRecordError: If a payload is not a mapping.
            InvalidAmountError: If a payload carries a non-numeric amount.
        """
        order_record = _as_order(order)
        t0 = time.monotonic()

        with LogContext.bind(
            trade_no=order_record.trade_no, correlation_id=correlation_id
        ):
            document = self.build(order_record, user)
            try:
                self._surface.present(document)
            except PrintSurfaceUnavailableError as e:
                logger.warning("invoice_print_surface_unavailable", extra={
                    "surface": e.surface,
                    "reason": e.reason,
                })
                self._notify(label(self._translator, LabelKey.POPUP_BLOCKED))
                return False

            logger.info("invoice_printed", extra={
                "final_total": document.breakdown.final_total,
                "paid": document.is_paid,
                "duration_ms": round((time.monotonic() - t0) * 1000, 2),
            })
        return True


def print_invoice(
    order: OrderRecord | Mapping[str, Any],
    user: UserRecord | Mapping[str, Any] | None,
    translate: Translator | TranslateFn | None = None,
    *,
    surface: PrintSurface,
    settings: DocumentSettings | None = None,
    notify: Notifier | None = None,
    correlation_id: str | None = None,
) -> bool:
    """One-shot convenience wrapper around InvoicePrinter.print_invoice."""
    printer = InvoicePrinter(
        surface, settings=settings, translate=translate, notify=notify
    )
    return printer.print_invoice(order, user, correlation_id=correlation_id)


# Older callers import the invoice entrypoint under this name.
generate_invoice_pdf = print_invoice
