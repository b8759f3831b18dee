#!/usr/bin/env python3
"""
Print an invoice for one order as plain text (or as the JSON document).

Reads the order and user payloads from JSON files in the order API's
snake_case shape, resolves the breakdown, assembles the invoice, and writes
it to stdout.

Usage:
    python3 scripts/print_invoice.py --order order.json [options]

Examples:
    # English defaults, bundled configuration
    python3 scripts/print_invoice.py --order order.json --user user.json

    # Chinese labels from the bundled zh-CN catalog
    python3 scripts/print_invoice.py --order order.json --locale zh-CN

    # Structured document for another renderer
    python3 scripts/print_invoice.py --order order.json --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Project root on sys.path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print an invoice for one order.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--order",
        required=True,
        type=Path,
        help="Path to the order payload (JSON).",
    )
    parser.add_argument(
        "--user",
        type=Path,
        default=None,
        help="Path to the user payload (JSON). Default: anonymous.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (YAML). Default: bundled default set.",
    )
    parser.add_argument(
        "--locale",
        default=None,
        help="Translation catalog locale (e.g. zh-CN). Default: the config's default.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the structured document as JSON instead of text.",
    )
    parser.add_argument(
        "--correlation-id",
        default=None,
        help="Request id attached to every log line for this invoice.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Emit structured logs to stderr.",
    )
    return parser.parse_args()


def _read_json(path: Path) -> dict:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def main() -> int:
    args = _parse_args()

    from invoice_config import (
        build_document_settings,
        get_active_config,
        load_default_catalog,
        load_locale,
    )
    from invoice_kernel.exceptions import InvoiceKernelError
    from invoice_kernel.logging_config import configure_logging
    from invoice_services import InvoicePrinter, TextPrintSurface

    if args.verbose:
        configure_logging(level=logging.DEBUG)

    config = get_active_config(args.config)
    settings = build_document_settings(config)
    if args.locale:
        translator = load_locale(args.locale, config.locale_dir)
    else:
        translator = load_default_catalog(config)

    order = _read_json(args.order)
    user = _read_json(args.user) if args.user else None

    printer = InvoicePrinter(TextPrintSurface(), settings=settings, translate=translator)
    try:
        if args.json:
            document = printer.build(order, user)
            print(json.dumps(document.to_dict(), ensure_ascii=False, indent=2))
            return 0
        printed = printer.print_invoice(order, user, correlation_id=args.correlation_id)
        return 0 if printed else 1
    except InvoiceKernelError as e:
        print(f"error [{e.code}]: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
