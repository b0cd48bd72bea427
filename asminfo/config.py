"""Settings loading for asminfo (YAML attribute descriptions)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .models import AssemblyInfoSettings, CustomAttribute, MetadataAttribute

_STRING_FIELDS = (
    "title",
    "description",
    "company",
    "product",
    "version",
    "file_version",
    "informational_version",
    "copyright",
    "trademark",
    "configuration",
    "guid",
)

_BOOL_FIELDS = ("com_visible", "cls_compliant")


class ConfigError(RuntimeError):
    """Raised when configuration inputs are missing or cannot be parsed."""


def load_settings(config_path: Path) -> AssemblyInfoSettings:
    """Load attribute settings from a YAML file on disk."""
    config_file = Path(config_path).expanduser().resolve()
    if not config_file.is_file():
        raise ConfigError(f"Settings file '{config_file}' does not exist.")

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")
    return settings_from_mapping(data)


def settings_from_mapping(data: Dict[str, Any]) -> AssemblyInfoSettings:
    """Build settings from an already-loaded mapping, ignoring unknown keys."""
    settings = AssemblyInfoSettings()
    for name in _STRING_FIELDS:
        setattr(settings, name, _as_str(data.get(name)))
    for name in _BOOL_FIELDS:
        setattr(settings, name, _as_bool(data.get(name)))

    if "internals_visible_to" in data:
        settings.internals_visible_to = _as_str_list(data.get("internals_visible_to"))

    custom_data = data.get("custom_attributes")
    if isinstance(custom_data, list):
        settings.custom_attributes = [
            CustomAttribute(
                name=_as_str(item.get("name")),
                namespace=_as_str(item.get("namespace")),
                value=item.get("value"),
            )
            for item in custom_data
            if isinstance(item, dict)
        ]

    metadata_data = data.get("metadata_attributes")
    if isinstance(metadata_data, list):
        metadata: List[Optional[MetadataAttribute]] = []
        for item in metadata_data:
            if not isinstance(item, dict):
                continue
            entry = MetadataAttribute(key=_as_str(item.get("key")), value=_as_str(item.get("value")))
            if "name" in item:
                entry.name = _as_str(item.get("name"))
            if "namespace" in item:
                entry.namespace = _as_str(item.get("namespace"))
            metadata.append(entry)
        settings.metadata_attributes = metadata

    return settings


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["ConfigError", "load_settings", "settings_from_mapping"]
