"""Surface syntaxes for assembly-level attribute declarations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class Dialect:
    """Pattern templates and delimiters for one attribute declaration syntax.

    Templates contain a single ``{name}`` placeholder for the attribute name
    and capture the argument text in the ``value`` group.
    """

    name: str
    extension: str
    open: str
    close: str
    quoted_template: str
    unquoted_template: str


CSHARP = Dialect(
    name="csharp",
    extension=".cs",
    open="[assembly: ",
    close="]",
    quoted_template=r'^\s*\[assembly: (?:System\.Reflection\.)?{name}(?:Attribute)? ?\("(?P<value>.*)"\)',
    unquoted_template=r"^\s*\[assembly: (?:System\.Reflection\.)?{name}(?:Attribute)? ?\((?P<value>.*)\)",
)

VISUAL_BASIC = Dialect(
    name="vb",
    extension=".vb",
    open="<Assembly: ",
    close=">",
    quoted_template=r'^\s*<Assembly: (?:System\.Reflection\.)?{name}(?:Attribute)? ?\("(?P<value>.*)"\)',
    unquoted_template=r"^\s*<Assembly: (?:System\.Reflection\.)?{name}(?:Attribute)? ?\((?P<value>.*)\)",
)

# Unrecognised attributes are only discovered in the bracket syntax, at column
# zero and without the namespace prefix.
CUSTOM_ATTRIBUTE_PATTERN = r"^\[assembly: (?P<name>\w*)(?:Attribute)? ?\((?P<value>.*)\)"


def dialect_for_path(path: PurePath | str) -> Dialect:
    """Return the angle-bracket dialect for ``.vb`` files, brackets otherwise."""
    suffix = PurePath(path).suffix.lower()
    if suffix == VISUAL_BASIC.extension:
        return VISUAL_BASIC
    return CSHARP


__all__ = ["CSHARP", "CUSTOM_ATTRIBUTE_PATTERN", "Dialect", "VISUAL_BASIC", "dialect_for_path"]
