"""
Invoice services -- orchestration above the pure engines.

Normalizes payloads, runs the engines, and delivers the result to a print
surface. This is the only layer that touches a stream.
"""

from invoice_services.print_service import (
    InvoicePrinter,
    PrintSurface,
    generate_invoice_pdf,
    print_invoice,
)
from invoice_services.text_surface import TextPrintSurface, render_text

__all__ = [
    "InvoicePrinter",
    "PrintSurface",
    "TextPrintSurface",
    "generate_invoice_pdf",
    "print_invoice",
    "render_text",
]
