"""Regex-based extraction of assembly-level attributes from source files."""

from __future__ import annotations

import codecs
import re
from functools import lru_cache
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .config import ConfigError
from .dialects import CSHARP, CUSTOM_ATTRIBUTE_PATTERN, Dialect, dialect_for_path
from .logging import get_logger
from .models import DEFAULT_VERSION, AssemblyInfoCustomAttribute, AssemblyInfoParseResult

_LOGGER = get_logger("parser")

# Attribute names the parser understands; none of these are reported as custom.
KNOWN_ATTRIBUTE_NAMES: Tuple[str, ...] = (
    "CLSCompliant",
    "AssemblyCompany",
    "ComVisible",
    "AssemblyConfiguration",
    "AssemblyCopyright",
    "AssemblyDescription",
    "AssemblyFileVersion",
    "Guid",
    "AssemblyInformationalVersion",
    "AssemblyProduct",
    "AssemblyTitle",
    "AssemblyTrademark",
    "AssemblyVersion",
    "InternalsVisibleTo",
)

_ATTRIBUTE_SUFFIX = "Attribute"

# Checked longest first so a UTF-32 mark is not mistaken for UTF-16.
_BYTE_ORDER_MARKS: Tuple[Tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)
_CUSTOM_ATTRIBUTE_RE = re.compile(CUSTOM_ATTRIBUTE_PATTERN, re.MULTILINE)


class MissingAssemblyInfoError(ConfigError):
    """Raised when the assembly info file to parse does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Assembly info file '{path}' does not exist.")
        self.path = path


class AssemblyInfoParser:
    """Reads well-known and custom attribute values out of assembly info files."""

    def __init__(self, working_directory: Path | str | None = None) -> None:
        self.working_directory = Path(working_directory) if working_directory is not None else None

    def parse(self, path: Path | str) -> AssemblyInfoParseResult:
        """Parse the file at ``path``, resolving relative paths first."""
        if path is None:
            raise TypeError("path must not be None")

        resolved = self._resolve(Path(path))
        if not resolved.is_file():
            raise MissingAssemblyInfoError(resolved)

        dialect = dialect_for_path(resolved)
        _LOGGER.debug("Parsing %s using %s patterns", resolved, dialect.name)
        with resolved.open("rb") as handle:
            raw = handle.read()
        return self.parse_text(_decode(raw), dialect)

    def parse_text(self, content: str, dialect: Dialect = CSHARP) -> AssemblyInfoParseResult:
        """Extract attribute values from in-memory source text."""
        quoted = dialect.quoted_template
        unquoted = dialect.unquoted_template

        custom_attributes = tuple(_parse_custom_attributes(content, KNOWN_ATTRIBUTE_NAMES))
        _LOGGER.debug("Found %d custom attribute(s)", len(custom_attributes))

        return AssemblyInfoParseResult(
            cls_compliant=_parse_single(unquoted, "CLSCompliant", content),
            company=_parse_single(quoted, "AssemblyCompany", content),
            com_visible=_parse_single(unquoted, "ComVisible", content),
            configuration=_parse_single(quoted, "AssemblyConfiguration", content),
            copyright=_parse_single(quoted, "AssemblyCopyright", content),
            description=_parse_single(quoted, "AssemblyDescription", content),
            file_version=_parse_single(quoted, "AssemblyFileVersion", content) or DEFAULT_VERSION,
            guid=_parse_single(quoted, "Guid", content),
            informational_version=(
                _parse_single(quoted, "AssemblyInformationalVersion", content) or DEFAULT_VERSION
            ),
            product=_parse_single(quoted, "AssemblyProduct", content),
            title=_parse_single(quoted, "AssemblyTitle", content),
            trademark=_parse_single(quoted, "AssemblyTrademark", content),
            version=_parse_single(quoted, "AssemblyVersion", content) or DEFAULT_VERSION,
            internals_visible_to=tuple(_parse_multiple(quoted, "InternalsVisibleTo", content)),
            custom_attributes=custom_attributes,
        )

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        base = self.working_directory or Path.cwd()
        return base.absolute() / path


@lru_cache(maxsize=None)
def _compile(template: str, attribute_name: str) -> re.Pattern[str]:
    return re.compile(template.format(name=re.escape(attribute_name)), re.MULTILINE)


def _parse_multiple(template: str, attribute_name: str, content: str) -> Iterator[str]:
    for match in _compile(template, attribute_name).finditer(content):
        value = match.group("value")
        if value and value.strip():
            yield value


def _parse_single(template: str, attribute_name: str, content: str) -> Optional[str]:
    values: List[str] = list(_parse_multiple(template, attribute_name, content))
    if not values:
        return None
    if len(values) > 1:
        _LOGGER.debug(
            "Attribute %s declared %d times; using the first declaration",
            attribute_name,
            len(values),
        )
    return values[0]


def _parse_custom_attributes(
    content: str, ignored_names: Tuple[str, ...]
) -> Iterator[AssemblyInfoCustomAttribute]:
    ignored = set(ignored_names)
    for match in _CUSTOM_ATTRIBUTE_RE.finditer(content):
        name = match.group("name")
        value = match.group("value")
        if _base_name(name) in ignored:
            continue
        if value and value.strip():
            yield AssemblyInfoCustomAttribute(name=name, value=value)


def _decode(raw: bytes) -> str:
    for mark, encoding in _BYTE_ORDER_MARKS:
        if raw.startswith(mark):
            return raw[len(mark) :].decode(encoding, errors="replace")
    return raw.decode("utf-8", errors="replace")


def _base_name(name: str) -> str:
    if name.endswith(_ATTRIBUTE_SUFFIX) and len(name) > len(_ATTRIBUTE_SUFFIX):
        return name[: -len(_ATTRIBUTE_SUFFIX)]
    return name


__all__ = ["AssemblyInfoParser", "KNOWN_ATTRIBUTE_NAMES", "MissingAssemblyInfoError"]
