"""CLI entrypoints for asminfo commands."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from .config import ConfigError, load_settings
from .creator import AssemblyInfoCreator
from .logging import configure_logging
from .parser import AssemblyInfoParser


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asminfo",
        description="Read and generate .NET assembly info attribute files.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records, with timestamps, to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser(
        "parse",
        help="Print the attributes declared in an assembly info file as JSON.",
    )
    _add_verbose_option(parse_parser, suppress_default=True)
    parse_parser.add_argument("path", help="Path to the AssemblyInfo.cs or AssemblyInfo.vb file.")

    create_parser = subparsers.add_parser(
        "create",
        help="Generate an assembly info file from a YAML settings file.",
    )
    _add_verbose_option(create_parser, suppress_default=True)
    create_parser.add_argument(
        "output",
        help="Destination file; a .vb extension selects Visual Basic syntax.",
    )
    create_parser.add_argument(
        "--config",
        required=True,
        help="YAML file describing the attributes to emit.",
    )
    create_parser.add_argument("--version", dest="assembly_version", help="Override AssemblyVersion.")
    create_parser.add_argument("--file-version", help="Override AssemblyFileVersion.")
    create_parser.add_argument(
        "--informational-version",
        help="Override AssemblyInformationalVersion.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for asminfo commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "parse":
        try:
            result = AssemblyInfoParser().parse(args.path)
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        print(json.dumps(result.to_dict(), indent=2))
    elif args.command == "create":
        try:
            settings = load_settings(Path(args.config))
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        if args.assembly_version:
            settings.version = args.assembly_version
        if args.file_version:
            settings.file_version = args.file_version
        if args.informational_version:
            settings.informational_version = args.informational_version
        written = AssemblyInfoCreator().create(args.output, settings)
        print(f"Assembly info written to {_relativize(written)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
