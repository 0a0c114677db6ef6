"""Angularity generator command line.

Usage::

    python -m angularity.cli list
    python -m angularity.cli generate es5-minimal
    python -m angularity.cli global-config --set serverHttpPort=9000
    python -m angularity.cli validate ./my-project
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from angularity.config import GeneratorSettings
from angularity.generator.catalogue import list_entries
from angularity.generator.errors import ExternalProcessError, GeneratorError
from angularity.generator.facade import Generator
from angularity.generator.filesystem import validate_existing_project
from angularity.generator.resolver import create_global_config, deep_merge
from angularity.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


def parse_overrides(pairs: list[str]) -> dict[str, Any]:
    """Turn ``KEY=VALUE`` pairs into a nested override mapping.

    Dotted keys build nested mappings (``a.b=1`` -> ``{"a": {"b": 1}}``).
    Values are decoded as JSON when possible and kept as strings otherwise.

    Raises:
        ValueError: If a pair has no ``=`` or an empty key.
    """
    overrides: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        try:
            value: Any = json.loads(raw)
        except json.JSONDecodeError:
            value = raw
        for segment in reversed(key.strip().split(".")):
            value = {segment: value}
        overrides = deep_merge(overrides, value)
    return overrides


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="angularity-generator",
        description="Angularity generator -- scaffold projects from generator projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  angularity-generator list\n"
            "  angularity-generator generate es5-minimal\n"
            "  angularity-generator global-config --set serverHttpPort=9000\n"
        ),
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List the available generator projects")

    generate = commands.add_parser("generate", help="Generate a project without prompting")
    generate.add_argument("name", help="Generator project name (e.g. es5-minimal)")

    global_config = commands.add_parser("global-config", help="Write ~/.angularity")
    global_config.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a default value (repeatable, dotted keys allowed)",
    )

    validate = commands.add_parser("validate", help="Check for an existing Angularity project")
    validate.add_argument("directory", nargs="?", default=".", help="Directory (default: .)")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m angularity.cli``."""
    args = _build_parser().parse_args(argv)
    settings = GeneratorSettings.from_env()

    try:
        if args.command == "list":
            entries = list_entries(settings)
            print_summary_table(
                {
                    entry.name: "valid" if entry.has_entry_point else "missing index.py"
                    for entry in entries
                },
                title="Generator projects",
            )
            for entry in entries:
                if not entry.has_entry_point:
                    print_warning(
                        f"{entry.name} is not a generator project: "
                        f"no {settings.entry_point} in {entry.root_path}"
                    )

        elif args.command == "generate":
            project = Generator(settings).generate_project(args.name)
            if project is None:
                sys.exit(1)

        elif args.command == "global-config":
            try:
                overrides = parse_overrides(args.overrides)
            except ValueError as exc:
                print_error(f"Error: {exc}")
                sys.exit(2)
            path = create_global_config(overrides or None, settings=settings)
            print_success(f"Wrote {path}")

        elif args.command == "validate":
            directory = Path(args.directory).resolve()
            if validate_existing_project(directory, settings):
                print_success(f"{directory} is an Angularity project")
            else:
                print_error(f"{directory} is not an Angularity project")
                sys.exit(1)

    except ExternalProcessError as exc:
        print_error(str(exc))
        sys.exit(exc.returncode)
    except GeneratorError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
