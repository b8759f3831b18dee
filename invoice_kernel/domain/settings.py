"""Deployment-level document settings consumed by the engines."""

from __future__ import annotations

from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from invoice_kernel.exceptions import InvalidSettingsError

DEFAULT_SITE_NAME = "EZ-Theme"
DEFAULT_CURRENCY_SYMBOL = "¥"
DEFAULT_TIMEZONE = "UTC"


@dataclass(frozen=True)
class DocumentSettings:
    """
    Site identity and display conventions for a deployment.

    Guarantees:
        - site_name is never blank (falls back to DEFAULT_SITE_NAME)
        - timezone names a zone known to zoneinfo
    """

    site_name: str = DEFAULT_SITE_NAME
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    timezone: str = DEFAULT_TIMEZONE

    def __post_init__(self) -> None:
        name = (self.site_name or "").strip()
        object.__setattr__(self, "site_name", name or DEFAULT_SITE_NAME)
        if self.currency_symbol is None:
            object.__setattr__(self, "currency_symbol", DEFAULT_CURRENCY_SYMBOL)
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
            raise InvalidSettingsError("timezone", self.timezone, "unknown time zone") from e

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)
