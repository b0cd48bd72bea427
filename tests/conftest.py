from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

SourceWriter = Callable[[str, str], Path]


@pytest.fixture
def write_source(tmp_path: Path) -> SourceWriter:
    """Write dedented source text under tmp_path and return the file path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    return _write
