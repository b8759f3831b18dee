"""
invoice_config -- single public entrypoint for deployment configuration.

Responsibility:
    Provides the only way to obtain configuration at runtime through
    ``get_active_config()``. Returns an ``InvoiceConfigurationSet`` read from
    YAML; ``build_document_settings`` bridges it into the kernel's
    ``DocumentSettings``. Translation catalogs are loaded with
    ``load_locale`` / ``load_catalog``.

Architecture position:
    Configuration -- sits above ``invoice_kernel`` and beside
    ``invoice_engines``. The kernel and the engines MUST NEVER import from
    ``invoice_config``.

Failure modes:
    - ``FileNotFoundError`` -- the configuration file or catalog is missing.
    - ``yaml.YAMLError`` -- a file is not valid YAML.
    - ``InvalidSettingsError`` -- a value has the wrong type or names an
      unknown time zone.

Audit relevance:
    Every successful ``get_active_config()`` call emits an
    ``INVOICE_CONFIG_TRACE`` log entry with config_id, version and checksum,
    tying every printed invoice back to the configuration that shaped it.
"""

from __future__ import annotations

from pathlib import Path

from invoice_config.bridges import build_document_settings
from invoice_config.catalog import (
    CatalogTranslator,
    flatten_catalog,
    load_catalog,
    load_locale,
)
from invoice_config.loader import load_yaml_file, parse_configuration_set
from invoice_config.schema import DisplayDef, InvoiceConfigurationSet, SiteDef
from invoice_kernel.logging_config import get_logger

_logger = get_logger("config")

# Default configuration set
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "sets" / "default" / "root.yaml"


def get_active_config(config_path: Path | None = None) -> InvoiceConfigurationSet:
    """The only public configuration entrypoint.

    Does NOT cache; callers hold the returned set for as long as they need
    it.

    Args:
        config_path: Path to a ``root.yaml``-style file. Defaults to the
            bundled ``invoice_config/sets/default/root.yaml``.

    Returns:
        InvoiceConfigurationSet

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        InvalidSettingsError: If a value is unusable.
    """
    path = Path(config_path) if config_path is not None else _DEFAULT_CONFIG_PATH
    config = parse_configuration_set(load_yaml_file(path), source=path)

    # Rejects an unknown time zone at load time.
    build_document_settings(config)

    _logger.info(
        "INVOICE_CONFIG_TRACE",
        extra={
            "trace_type": "INVOICE_CONFIG_TRACE",
            "config_set_id": config.config_id,
            "config_set_version": config.version,
            "checksum": config.checksum,
            "default_locale": config.default_locale,
        },
    )
    return config


def load_default_catalog(config: InvoiceConfigurationSet) -> CatalogTranslator | None:
    """Catalog for the set's default locale; None when the set names none."""
    if not config.default_locale:
        return None
    return load_locale(config.default_locale, config.locale_dir)


__all__ = [
    "CatalogTranslator",
    "DisplayDef",
    "InvoiceConfigurationSet",
    "SiteDef",
    "build_document_settings",
    "flatten_catalog",
    "get_active_config",
    "load_catalog",
    "load_default_catalog",
    "load_locale",
]
