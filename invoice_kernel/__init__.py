"""
Invoice Kernel

Pure core for turning an order record into a printable invoice:
- Record normalization of loosely typed order/user payloads
- Monetary breakdown with an auditable reconciliation identity
- Structured JSON logging and typed exceptions
"""

__version__ = "0.1.0"
