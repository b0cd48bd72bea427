"""Read and generate .NET assembly info attribute files."""

from __future__ import annotations

from .config import ConfigError, load_settings
from .creator import AssemblyInfoCreator, AssemblyInfoCreatorData, build_model
from .dialects import CSHARP, VISUAL_BASIC, Dialect, dialect_for_path
from .models import (
    AssemblyInfoCustomAttribute,
    AssemblyInfoParseResult,
    AssemblyInfoSettings,
    CustomAttribute,
    MetadataAttribute,
)
from .parser import AssemblyInfoParser, MissingAssemblyInfoError

__all__ = [
    "AssemblyInfoCreator",
    "AssemblyInfoCreatorData",
    "AssemblyInfoCustomAttribute",
    "AssemblyInfoParseResult",
    "AssemblyInfoParser",
    "AssemblyInfoSettings",
    "CSHARP",
    "ConfigError",
    "CustomAttribute",
    "Dialect",
    "MetadataAttribute",
    "MissingAssemblyInfoError",
    "VISUAL_BASIC",
    "build_model",
    "dialect_for_path",
    "load_settings",
]
