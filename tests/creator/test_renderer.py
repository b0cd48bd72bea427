"""Tests for assembly info rendering."""

from __future__ import annotations

from pathlib import Path

from asminfo.creator import AssemblyInfoCreator
from asminfo.dialects import VISUAL_BASIC
from asminfo.models import AssemblyInfoSettings, CustomAttribute, MetadataAttribute
from asminfo.parser import AssemblyInfoParser


def _settings() -> AssemblyInfoSettings:
    return AssemblyInfoSettings(
        title="Demo",
        company="Acme",
        version="1.2.3.4",
        file_version="1.2.3.5",
        guid="0f8fad5b-d9cb-469f-a165-70867728950e",
        com_visible=False,
        cls_compliant=True,
        internals_visible_to=["Demo.Tests", "Demo.Benchmarks"],
        custom_attributes=[CustomAttribute("BuildNumber", "Demo.Build", 42)],
        metadata_attributes=[MetadataAttribute(key="Channel", value="nightly")],
    )


def test_render_csharp_emits_usings_and_attributes() -> None:
    content = AssemblyInfoCreator().render(_settings())
    lines = content.splitlines()

    assert "using Demo.Build;" in lines
    assert "using System;" in lines
    assert "using System.Reflection;" in lines
    assert "using System.Runtime.CompilerServices;" in lines
    assert "using System.Runtime.InteropServices;" in lines
    assert lines.count("using System.Reflection;") == 1
    assert '[assembly: AssemblyTitle("Demo")]' in lines
    assert "[assembly: ComVisible(false)]" in lines
    assert '[assembly: InternalsVisibleTo("Demo.Tests")]' in lines
    assert "[assembly: BuildNumber(42)]" in lines
    assert '[assembly: AssemblyMetadata("Channel", "nightly")]' in lines
    assert content.endswith(")]\n")


def test_render_visual_basic_uses_angle_brackets() -> None:
    content = AssemblyInfoCreator().render(_settings(), VISUAL_BASIC)
    lines = content.splitlines()

    assert "Imports System.Reflection" in lines
    assert '<Assembly: AssemblyTitle("Demo")>' in lines
    assert '<Assembly: InternalsVisibleTo("Demo.Benchmarks")>' in lines
    assert not any(line.startswith("[assembly:") for line in lines)


def test_created_csharp_file_parses_back(tmp_path: Path) -> None:
    path = AssemblyInfoCreator().create(tmp_path / "Properties" / "AssemblyInfo.cs", _settings())

    result = AssemblyInfoParser().parse(path)

    assert result.title == "Demo"
    assert result.company == "Acme"
    assert result.version == "1.2.3.4"
    assert result.file_version == "1.2.3.5"
    assert result.informational_version == "1.0.0.0"
    assert result.guid == "0f8fad5b-d9cb-469f-a165-70867728950e"
    assert result.com_visible == "false"
    assert result.cls_compliant == "true"
    assert result.internals_visible_to == ("Demo.Tests", "Demo.Benchmarks")
    assert ("BuildNumber", "42") in [(item.name, item.value) for item in result.custom_attributes]


def test_created_visual_basic_file_parses_back(tmp_path: Path) -> None:
    path = AssemblyInfoCreator().create(tmp_path / "AssemblyInfo.vb", _settings())

    result = AssemblyInfoParser().parse(path)

    assert path.read_text(encoding="utf-8").startswith("'---")
    assert result.title == "Demo"
    assert result.version == "1.2.3.4"
    assert result.com_visible == "false"
    assert result.internals_visible_to == ("Demo.Tests", "Demo.Benchmarks")


def test_create_resolves_relative_output_against_working_directory(tmp_path: Path) -> None:
    creator = AssemblyInfoCreator(working_directory=tmp_path)

    written = creator.create("out/AssemblyInfo.cs", AssemblyInfoSettings(title="Relative"))

    assert written == tmp_path / "out" / "AssemblyInfo.cs"
    assert '[assembly: AssemblyTitle("Relative")]' in written.read_text(encoding="utf-8")


def test_quoted_internals_visible_to_names_round_trip(tmp_path: Path) -> None:
    settings = AssemblyInfoSettings(internals_visible_to=['"A"', "B"])
    path = AssemblyInfoCreator().create(tmp_path / "AssemblyInfo.cs", settings)

    result = AssemblyInfoParser().parse(path)

    assert result.internals_visible_to == ("A", "B")


def test_creator_accepts_str_working_directory(tmp_path: Path) -> None:
    creator = AssemblyInfoCreator(working_directory=str(tmp_path))

    written = creator.create("AssemblyInfo.cs", AssemblyInfoSettings(title="Text"))

    assert written == tmp_path / "AssemblyInfo.cs"
