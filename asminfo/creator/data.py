"""Normalised attribute model built from assembly info settings."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, Iterator, MutableMapping, MutableSet, Optional, Tuple

from ..logging import get_logger
from ..models import AssemblyInfoSettings

_LOGGER = get_logger("creator.data")

_REFLECTION = "System.Reflection"
_INTEROP = "System.Runtime.InteropServices"
_SYSTEM = "System"
_COMPILER_SERVICES = "System.Runtime.CompilerServices"


class CaseInsensitiveDict(MutableMapping[str, str]):
    """Insertion-ordered mapping whose keys compare case-insensitively.

    The spelling used on first insertion is kept when a key is overwritten.
    """

    def __init__(self) -> None:
        self._items: Dict[str, Tuple[str, str]] = {}

    def __getitem__(self, key: str) -> str:
        return self._items[key.lower()][1]

    def __setitem__(self, key: str, value: str) -> None:
        folded = key.lower()
        existing = self._items.get(folded)
        self._items[folded] = (existing[0] if existing else key, value)

    def __delitem__(self, key: str) -> None:
        del self._items[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"


class CaseInsensitiveSet(MutableSet[str]):
    """Insertion-ordered set of strings compared case-insensitively."""

    def __init__(self) -> None:
        self._items: Dict[str, str] = {}

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and value.lower() in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def add(self, value: str) -> None:
        self._items.setdefault(value.lower(), value)

    def discard(self, value: str) -> None:
        self._items.pop(value.lower(), None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items.values())!r})"


class AssemblyInfoCreatorData:
    """Deduplicated attributes and required namespaces for one settings value."""

    def __init__(self, settings: AssemblyInfoSettings) -> None:
        self._attributes = CaseInsensitiveDict()
        self._custom_attributes = CaseInsensitiveDict()
        self._metadata_attributes = CaseInsensitiveDict()
        self._namespaces = CaseInsensitiveSet()
        self._internals_visible_to = CaseInsensitiveSet()

        self._add_attribute("AssemblyTitle", _REFLECTION, settings.title)
        self._add_attribute("AssemblyDescription", _REFLECTION, settings.description)
        self._add_attribute("AssemblyCompany", _REFLECTION, settings.company)
        self._add_attribute("AssemblyProduct", _REFLECTION, settings.product)
        self._add_attribute("AssemblyVersion", _REFLECTION, settings.version)
        self._add_attribute("AssemblyFileVersion", _REFLECTION, settings.file_version)
        self._add_attribute(
            "AssemblyInformationalVersion", _REFLECTION, settings.informational_version
        )
        self._add_attribute("AssemblyCopyright", _REFLECTION, settings.copyright)
        self._add_attribute("AssemblyTrademark", _REFLECTION, settings.trademark)
        self._add_attribute("AssemblyConfiguration", _REFLECTION, settings.configuration)
        self._add_attribute("Guid", _INTEROP, settings.guid)
        self._add_attribute("ComVisible", _INTEROP, settings.com_visible)
        self._add_attribute("CLSCompliant", _SYSTEM, settings.cls_compliant)

        if settings.internals_visible_to is not None:
            for item in settings.internals_visible_to:
                if item is None:
                    continue
                self._internals_visible_to.add(f'InternalsVisibleTo("{_unquote(item)}")')
            if self._internals_visible_to:
                self._namespaces.add(_COMPILER_SERVICES)

        if settings.custom_attributes is not None:
            for custom in settings.custom_attributes:
                if custom is None:
                    continue
                self._add_custom_attribute(custom.name, custom.namespace, custom.value)

        if settings.metadata_attributes is not None:
            for metadata in settings.metadata_attributes:
                if metadata is None:
                    continue
                self._add_metadata_attribute(metadata.namespace, metadata.key, metadata.value)

        _LOGGER.debug(
            "Built attribute model: %d well-known, %d custom, %d metadata, %d namespace(s)",
            len(self._attributes),
            len(self._custom_attributes),
            len(self._metadata_attributes),
            len(self._namespaces),
        )

    @property
    def attributes(self) -> MutableMapping[str, str]:
        return self._attributes

    @property
    def custom_attributes(self) -> MutableMapping[str, str]:
        return self._custom_attributes

    @property
    def metadata_attributes(self) -> MutableMapping[str, str]:
        return self._metadata_attributes

    @property
    def namespaces(self) -> MutableSet[str]:
        return self._namespaces

    @property
    def internals_visible_to(self) -> MutableSet[str]:
        return self._internals_visible_to

    def _add_attribute(self, name: str, namespace: str, value: str | bool | None) -> None:
        if value is None:
            return
        if isinstance(value, bool):
            self._add_attribute_core(self._attributes, name, namespace, "true" if value else "false")
        else:
            self._add_attribute_core(self._attributes, name, namespace, _quote(value))

    def _add_custom_attribute(self, name: Optional[str], namespace: Optional[str], value: Any) -> None:
        if name is None or value is None:
            return
        if isinstance(value, str):
            self._add_attribute_core(self._custom_attributes, name, namespace, _quote(value))
        else:
            self._add_attribute_core(self._custom_attributes, name, namespace, _serialise(value))

    def _add_metadata_attribute(
        self, namespace: Optional[str], key: Optional[str], value: Optional[str]
    ) -> None:
        if key is None or value is None:
            return
        self._add_attribute_core(self._metadata_attributes, _quote(key), namespace, _quote(value))

    def _add_attribute_core(
        self,
        target: MutableMapping[str, str],
        name: str,
        namespace: Optional[str],
        value: str,
    ) -> None:
        # Single mutation point keeping each dictionary and the namespaces in step.
        target[name] = value
        if namespace:
            self._namespaces.add(namespace)


def build_model(settings: AssemblyInfoSettings) -> AssemblyInfoCreatorData:
    """Return the normalised attribute model for ``settings``."""
    return AssemblyInfoCreatorData(settings)


def _quote(value: str) -> str:
    return f'"{value}"'


def _unquote(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value.strip('"')
    return value


def _serialise(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), default=_json_default)


def _json_default(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    if hasattr(value, "__dict__"):
        return vars(value)
    return str(value)


__all__ = [
    "AssemblyInfoCreatorData",
    "CaseInsensitiveDict",
    "CaseInsensitiveSet",
    "build_model",
]
