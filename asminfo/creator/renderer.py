"""Renders attribute models back into assembly info source files."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ..dialects import CSHARP, Dialect, dialect_for_path
from ..logging import get_logger
from ..models import AssemblyInfoSettings
from .data import AssemblyInfoCreatorData, build_model

_LOGGER = get_logger("creator.renderer")


class AssemblyInfoCreator:
    """Emits C# or Visual Basic assembly info files from settings."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        working_directory: Path | str | None = None,
    ) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self.working_directory = Path(working_directory) if working_directory is not None else None
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, settings: AssemblyInfoSettings, dialect: Dialect = CSHARP) -> str:
        """Return the source text for ``settings`` in the given dialect."""
        return self.render_model(build_model(settings), dialect)

    def render_model(self, model: AssemblyInfoCreatorData, dialect: Dialect = CSHARP) -> str:
        template = self._env.get_template(f"{dialect.name}.j2")
        rendered = template.render(
            open=dialect.open,
            close=dialect.close,
            namespaces=sorted(model.namespaces),
            attributes=list(model.attributes.items()),
            internals_visible_to=list(model.internals_visible_to),
            custom_attributes=list(model.custom_attributes.items()),
            metadata_attributes=list(model.metadata_attributes.items()),
        )
        return rendered.rstrip("\n") + "\n"

    def create(self, output_path: Path | str, settings: AssemblyInfoSettings) -> Path:
        """Write the rendered file, choosing the dialect from its extension."""
        path = Path(output_path)
        if not path.is_absolute():
            base = self.working_directory or Path.cwd()
            path = base.absolute() / path

        dialect = dialect_for_path(path)
        content = self.render(settings, dialect)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        _LOGGER.debug("Wrote %s assembly info to %s", dialect.name, path)
        return path


__all__ = ["AssemblyInfoCreator"]
