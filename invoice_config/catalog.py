"""
Translation catalogs.

A catalog is a YAML file of nested mappings, the same shape front-end i18n
bundles use::

    invoice:
      bill_to: 账单寄送至
    payment:
      status:
        pending: 待支付

Nested keys are flattened to dotted keys ("invoice.bill_to") and served
through the kernel's Translator protocol. Keys a catalog does not carry
are reported as absent so the assembler falls back to its defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from invoice_config.loader import load_yaml_file
from invoice_kernel.logging_config import get_logger

logger = get_logger("config.catalog")

_DEFAULT_LOCALE_DIR = Path(__file__).parent / "sets" / "default" / "locales"


def flatten_catalog(data: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested catalog mappings to dotted keys; None leaves are dropped."""
    flat: dict[str, str] = {}
    for key, value in data.items():
        dotted = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_catalog(value, dotted))
        elif value is not None:
            flat[dotted] = str(value)
    return flat


@dataclass(frozen=True)
class CatalogTranslator:
    """Translator backed by a flattened catalog."""

    locale: str
    entries: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def lookup(self, key: str) -> str | None:
        return self.entries.get(key)

    def __len__(self) -> int:
        return len(self.entries)


def load_catalog(path: Path, locale: str | None = None) -> CatalogTranslator:
    """
    Load a catalog file.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file is not valid YAML.
    """
    entries = flatten_catalog(load_yaml_file(path))
    locale = locale or path.stem
    logger.info("translation_catalog_loaded", extra={
        "locale": locale,
        "path": str(path),
        "entry_count": len(entries),
    })
    return CatalogTranslator(locale=locale, entries=MappingProxyType(entries))


def load_locale(locale: str, locale_dir: Path | None = None) -> CatalogTranslator:
    """
    Load the catalog for a locale code (e.g. "zh-CN") from a locale directory.

    Raises:
        FileNotFoundError: if no ``<locale>.yaml`` exists in the directory.
    """
    directory = locale_dir or _DEFAULT_LOCALE_DIR
    path = directory / f"{locale}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"No translation catalog for locale '{locale}' in {directory}")
    return load_catalog(path, locale)
