"""Core data models shared across asminfo components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

DEFAULT_VERSION = "1.0.0.0"


@dataclass
class CustomAttribute:
    """User supplied attribute emitted as ``Name(value)``.

    ``value`` is either text, rendered quoted, or any other structured value,
    rendered through a compact JSON encoding.
    """

    name: Optional[str] = None
    namespace: Optional[str] = None
    value: Any = None


@dataclass
class MetadataAttribute:
    """Keyed attribute emitted as ``AssemblyMetadata("key", "value")``."""

    name: Optional[str] = "AssemblyMetadata"
    namespace: Optional[str] = "System.Reflection"
    key: Optional[str] = None
    value: Optional[str] = None


@dataclass
class AssemblyInfoSettings:
    """Desired attribute values for a generated assembly info file."""

    title: Optional[str] = None
    description: Optional[str] = None
    company: Optional[str] = None
    product: Optional[str] = None
    version: Optional[str] = None
    file_version: Optional[str] = None
    informational_version: Optional[str] = None
    copyright: Optional[str] = None
    trademark: Optional[str] = None
    configuration: Optional[str] = None
    guid: Optional[str] = None
    com_visible: Optional[bool] = None
    cls_compliant: Optional[bool] = None
    internals_visible_to: Optional[List[Optional[str]]] = None
    custom_attributes: Optional[List[Optional[CustomAttribute]]] = None
    metadata_attributes: Optional[List[Optional[MetadataAttribute]]] = None


@dataclass(frozen=True)
class AssemblyInfoCustomAttribute:
    """Unrecognised attribute found while parsing, with its raw argument text."""

    name: str
    value: str


@dataclass(frozen=True)
class AssemblyInfoParseResult:
    """Attribute values extracted from an assembly info source file."""

    cls_compliant: Optional[str] = None
    company: Optional[str] = None
    com_visible: Optional[str] = None
    configuration: Optional[str] = None
    copyright: Optional[str] = None
    description: Optional[str] = None
    file_version: str = DEFAULT_VERSION
    guid: Optional[str] = None
    informational_version: str = DEFAULT_VERSION
    product: Optional[str] = None
    title: Optional[str] = None
    trademark: Optional[str] = None
    version: str = DEFAULT_VERSION
    internals_visible_to: Tuple[str, ...] = field(default_factory=tuple)
    custom_attributes: Tuple[AssemblyInfoCustomAttribute, ...] = field(default_factory=tuple)

    @property
    def is_cls_compliant(self) -> bool:
        return _is_true(self.cls_compliant)

    @property
    def is_com_visible(self) -> bool:
        return _is_true(self.com_visible)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready mapping of the parsed values."""
        return {
            "title": self.title,
            "description": self.description,
            "company": self.company,
            "product": self.product,
            "version": self.version,
            "file_version": self.file_version,
            "informational_version": self.informational_version,
            "copyright": self.copyright,
            "trademark": self.trademark,
            "configuration": self.configuration,
            "guid": self.guid,
            "com_visible": self.com_visible,
            "cls_compliant": self.cls_compliant,
            "internals_visible_to": list(self.internals_visible_to),
            "custom_attributes": [
                {"name": item.name, "value": item.value} for item in self.custom_attributes
            ],
        }


def _is_true(literal: Optional[str]) -> bool:
    return literal is not None and literal.strip().lower() == "true"


__all__ = [
    "DEFAULT_VERSION",
    "AssemblyInfoCustomAttribute",
    "AssemblyInfoParseResult",
    "AssemblyInfoSettings",
    "CustomAttribute",
    "MetadataAttribute",
]
