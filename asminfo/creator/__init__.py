"""Attribute model building and assembly info emission."""

from __future__ import annotations

from .data import AssemblyInfoCreatorData, build_model
from .renderer import AssemblyInfoCreator

__all__ = ["AssemblyInfoCreator", "AssemblyInfoCreatorData", "build_model"]
