"""
Configuration Loader (``invoice_config.loader``).

Responsibility
--------------
Loads YAML configuration files and parses them into typed
``invoice_config.schema`` dataclass instances. The single public entry
point for runtime config is ``invoice_config.get_active_config()``.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Wrongly typed values -> ``InvalidSettingsError``.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from invoice_config.schema import DisplayDef, InvoiceConfigurationSet, SiteDef
from invoice_kernel.exceptions import InvalidSettingsError


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        InvalidSettingsError: if the document is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidSettingsError(str(path), type(data).__name__, "expected a mapping")
    return data


def _optional_str(data: dict[str, Any], key: str, section: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidSettingsError(f"{section}.{key}", value, "expected a string")
    return value


def parse_site(data: dict[str, Any]) -> SiteDef:
    """Parse a SiteDef from a dict."""
    return SiteDef(name=_optional_str(data, "name", "site"))


def parse_display(data: dict[str, Any]) -> DisplayDef:
    """Parse a DisplayDef from a dict."""
    return DisplayDef(
        currency_symbol=_optional_str(data, "currency_symbol", "display"),
        timezone=_optional_str(data, "timezone", "display"),
    )


def parse_configuration_set(data: dict[str, Any], source: Path | None = None) -> InvoiceConfigurationSet:
    """
    Parse a full configuration set.

    ``locales.directory`` is resolved relative to the file the set was
    loaded from.
    """
    locales = data.get("locales") or {}
    locale_dir: Path | None = None
    directory = locales.get("directory")
    if directory:
        locale_dir = Path(directory)
        if source is not None and not locale_dir.is_absolute():
            locale_dir = source.parent / locale_dir

    return InvoiceConfigurationSet(
        config_id=str(data.get("config_id") or (source.parent.name if source else "inline")),
        version=int(data.get("version", 1)),
        site=parse_site(data.get("site") or {}),
        display=parse_display(data.get("display") or {}),
        default_locale=locales.get("default"),
        locale_dir=locale_dir,
        checksum=compute_checksum(data),
    )


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Identical ``data`` always produces identical checksums.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
