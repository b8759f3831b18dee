"""
Typed Exception Hierarchy for the Invoice Kernel.

The monetary core never raises for well-typed input: every lookup degrades
to a documented default and absent numbers default to zero. The exceptions
below cover the boundaries around it (payload normalization, settings
loading, and the print surface hand-off).

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    InvoiceKernelError (base)
    |
    +-- RecordError
    |   +-- InvalidRecordError
    |   +-- InvalidAmountError
    |
    +-- ConfigError
    |   +-- InvalidSettingsError
    |
    +-- PrintError
        +-- PrintSurfaceUnavailableError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Record          | INVALID_RECORD              | Payload is not a mapping
                | INVALID_AMOUNT              | Amount/timestamp is not numeric
----------------|-----------------------------|-----------------------------------------
Config          | INVALID_SETTINGS            | Settings file holds an unusable value
----------------|-----------------------------|-----------------------------------------
Print           | PRINT_SURFACE_UNAVAILABLE   | Surface could not be acquired (popup
                |                             | blocked, no printer, closed stream)

===============================================================================
HANDLING PATTERNS
===============================================================================

    try:
        order = OrderRecord.from_payload(payload)
    except InvalidAmountError as e:
        return {"error": e.code, "field": e.field_name, "value": e.value}

The print service handles PrintSurfaceUnavailableError itself and turns it
into a user-facing notice; callers only see a False result.
"""

from typing import Any


class InvoiceKernelError(Exception):
    """
    Base exception for all invoice kernel errors.

    All subclasses carry a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "INVOICE_KERNEL_ERROR"


# Record-related exceptions


class RecordError(InvoiceKernelError):
    """Base exception for order/user payload errors."""

    code: str = "RECORD_ERROR"


class InvalidRecordError(RecordError):
    """Payload handed to normalization is not a mapping."""

    code: str = "INVALID_RECORD"

    def __init__(self, record_type: str, received_type: str):
        self.record_type = record_type
        self.received_type = received_type
        super().__init__(
            f"{record_type} payload must be a mapping, got {received_type}"
        )


class InvalidAmountError(RecordError):
    """A numeric field holds a value that cannot be read as a number."""

    code: str = "INVALID_AMOUNT"

    def __init__(self, field_name: str, value: Any):
        self.field_name = field_name
        self.value = repr(value)
        super().__init__(f"Field '{field_name}' is not numeric: {value!r}")


# Configuration exceptions


class ConfigError(InvoiceKernelError):
    """Base exception for settings and catalog errors."""

    code: str = "CONFIG_ERROR"


class InvalidSettingsError(ConfigError):
    """A settings value is present but unusable."""

    code: str = "INVALID_SETTINGS"

    def __init__(self, setting: str, value: Any, reason: str):
        self.setting = setting
        self.value = repr(value)
        self.reason = reason
        super().__init__(f"Invalid setting '{setting}'={value!r}: {reason}")


# Print surface exceptions


class PrintError(InvoiceKernelError):
    """Base exception for print surface errors."""

    code: str = "PRINT_ERROR"


class PrintSurfaceUnavailableError(PrintError):
    """The print surface could not be acquired."""

    code: str = "PRINT_SURFACE_UNAVAILABLE"

    def __init__(self, surface: str, reason: str = "surface unavailable"):
        self.surface = surface
        self.reason = reason
        super().__init__(f"Print surface '{surface}' unavailable: {reason}")
