"""
Pure domain layer.

Normalized input records, code enumerations, minor-unit helpers, the
translation capability and document settings. No I/O, no clock, no
dependency on engines or configuration.

All domain objects are immutable and deterministic.
"""

from invoice_kernel.domain.codes import (
    PAID_STATUSES,
    OrderStatus,
    PeriodCode,
    is_paid_status,
)
from invoice_kernel.domain.records import (
    OrderRecord,
    PaymentRecord,
    PlanRecord,
    UserRecord,
)
from invoice_kernel.domain.settings import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_SITE_NAME,
    DEFAULT_TIMEZONE,
    DocumentSettings,
)
from invoice_kernel.domain.translation import (
    CallableTranslator,
    NullTranslator,
    TranslateFn,
    Translator,
    as_translator,
    translate_or_default,
)
from invoice_kernel.domain.values import (
    MINOR_UNIT_DECIMAL_PLACES,
    coerce_minor_units,
    minor_to_major,
    round_half_away_from_zero,
)

__all__ = [
    "CallableTranslator",
    "DEFAULT_CURRENCY_SYMBOL",
    "DEFAULT_SITE_NAME",
    "DEFAULT_TIMEZONE",
    "DocumentSettings",
    "MINOR_UNIT_DECIMAL_PLACES",
    "NullTranslator",
    "OrderRecord",
    "OrderStatus",
    "PAID_STATUSES",
    "PaymentRecord",
    "PeriodCode",
    "PlanRecord",
    "TranslateFn",
    "Translator",
    "UserRecord",
    "as_translator",
    "coerce_minor_units",
    "is_paid_status",
    "minor_to_major",
    "round_half_away_from_zero",
    "translate_or_default",
]
