"""
Config -> Kernel Bridges.

Converts a loaded InvoiceConfigurationSet into kernel inputs. Lives in
invoice_config because the kernel must never import invoice_config.

Usage:
    from invoice_config import get_active_config
    from invoice_config.bridges import build_document_settings

    settings = build_document_settings(get_active_config())
"""

from __future__ import annotations

from invoice_config.schema import InvoiceConfigurationSet
from invoice_kernel.domain.settings import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_SITE_NAME,
    DEFAULT_TIMEZONE,
    DocumentSettings,
)


def build_document_settings(config: InvoiceConfigurationSet) -> DocumentSettings:
    """Build DocumentSettings, filling unset values with kernel defaults."""
    return DocumentSettings(
        site_name=config.site.name or DEFAULT_SITE_NAME,
        currency_symbol=(
            config.display.currency_symbol
            if config.display.currency_symbol is not None
            else DEFAULT_CURRENCY_SYMBOL
        ),
        timezone=config.display.timezone or DEFAULT_TIMEZONE,
    )
