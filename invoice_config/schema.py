"""
InvoiceConfigurationSet schema.

The human-authored source artifact for a deployment: site identity,
display conventions and the default translation catalog. YAML files are
parsed into these types by the loader; bridges turn them into kernel
inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SiteDef:
    """Site identity shown in the invoice header and footer."""

    name: str | None = None


@dataclass(frozen=True)
class DisplayDef:
    """How amounts and dates are displayed."""

    currency_symbol: str | None = None
    timezone: str | None = None


@dataclass(frozen=True)
class InvoiceConfigurationSet:
    """A loaded configuration set."""

    config_id: str
    version: int
    site: SiteDef
    display: DisplayDef
    default_locale: str | None = None
    locale_dir: Path | None = None
    checksum: str = ""
