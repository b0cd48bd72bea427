"""Tests for asminfo.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from asminfo.config import ConfigError, load_settings, settings_from_mapping
from asminfo.models import AssemblyInfoSettings, CustomAttribute, MetadataAttribute


def test_load_settings_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / "assemblyinfo.yml"
    config_file.write_text(
        """
title: "Demo"
company: Acme
version: "1.2.3.4"
com_visible: false
cls_compliant: "yes"
internals_visible_to: [Demo.Tests, '"Demo.Benchmarks"']
custom_attributes:
  - name: NeutralResourcesLanguage
    namespace: System.Resources
    value: en-GB
  - name: BuildNumber
    namespace: Demo.Build
    value: 42
  - "not a mapping"
metadata_attributes:
  - key: Channel
    value: nightly
  - name: CustomMetadata
    namespace: Demo.Metadata
    key: Owner
    value: build-team
unknown_key: ignored
""",
        encoding="utf-8",
    )

    settings = load_settings(config_file)

    assert settings.title == "Demo"
    assert settings.company == "Acme"
    assert settings.version == "1.2.3.4"
    assert settings.description is None
    assert settings.com_visible is False
    assert settings.cls_compliant is True
    assert settings.internals_visible_to == ["Demo.Tests", '"Demo.Benchmarks"']
    assert settings.custom_attributes == [
        CustomAttribute("NeutralResourcesLanguage", "System.Resources", "en-GB"),
        CustomAttribute("BuildNumber", "Demo.Build", 42),
    ]
    assert settings.metadata_attributes == [
        MetadataAttribute(key="Channel", value="nightly"),
        MetadataAttribute(name="CustomMetadata", namespace="Demo.Metadata", key="Owner", value="build-team"),
    ]


def test_load_settings_empty_file_yields_absent_values(tmp_path: Path) -> None:
    config_file = tmp_path / "assemblyinfo.yml"
    config_file.write_text("\n", encoding="utf-8")

    assert load_settings(config_file) == AssemblyInfoSettings()


def test_load_settings_missing_file_raises(tmp_path: Path) -> None:
    missing = tmp_path / "missing.yml"

    with pytest.raises(ConfigError) as excinfo:
        load_settings(missing)

    assert str(missing.resolve()) in str(excinfo.value)


def test_load_settings_rejects_non_mapping(tmp_path: Path) -> None:
    config_file = tmp_path / "assemblyinfo.yml"
    config_file.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(config_file)


def test_load_settings_reports_invalid_yaml(tmp_path: Path) -> None:
    config_file = tmp_path / "assemblyinfo.yml"
    config_file.write_text("title: [unterminated\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_settings(config_file)


def test_settings_from_mapping_accepts_single_internals_visible_to() -> None:
    settings = settings_from_mapping({"internals_visible_to": "Demo.Tests", "com_visible": "maybe"})

    assert settings.internals_visible_to == ["Demo.Tests"]
    assert settings.com_visible is None
    assert settings.custom_attributes is None
