"""Command-line entry point.

Usage::

    rest-api-generator --name blog
    rest-api-generator -n blog --auth
    python -m rest_api_generator -n blog -o ./projects
"""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

from pydantic import ValidationError

from rest_api_generator import __version__
from rest_api_generator.config import DatabaseKind, ProjectConfig
from rest_api_generator.errors import ConfigurationError, ScaffoldError
from rest_api_generator.scaffolder import ProjectGenerator
from rest_api_generator.utils import (
    print_error,
    print_next_steps,
    print_success,
    print_summary_table,
    print_warning,
)

# Model field -> flag, for validation messages.
_FIELD_FLAGS: dict[str, str] = {
    "name": "--name",
    "include_auth": "--auth",
    "database": "--database",
}

_NPM_NAME_RE = re.compile(r"^(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*$")


# ---------------------------------------------------------------------------
# Option resolution
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the generator."""
    parser = argparse.ArgumentParser(
        prog="rest-api-generator",
        description="Generate a REST API boilerplate",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  rest-api-generator --name blog\n"
            "  rest-api-generator -n blog --auth\n"
            "  rest-api-generator -n blog -o ./projects\n"
        ),
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=__version__,
    )
    parser.add_argument(
        "--name", "-n",
        default=None,
        help="Project name (required)",
    )
    parser.add_argument(
        "--auth", "-a",
        action="store_true",
        help="Include authentication",
    )
    parser.add_argument(
        "--database", "-d",
        default=DatabaseKind.MONGODB.value,
        help="Database type (mongodb/postgres, default: mongodb)",
    )
    parser.add_argument(
        "--output", "-o",
        default=".",
        help="Directory the project folder is created in (default: .)",
    )
    return parser


def resolve_options(args: argparse.Namespace) -> ProjectConfig:
    """Turn parsed arguments into a validated ``ProjectConfig``.

    Raises:
        ConfigurationError: If the name is missing or the options do not
            form a valid configuration.
    """
    if not args.name or not args.name.strip():
        raise ConfigurationError("Project name is required")

    try:
        return ProjectConfig(
            name=args.name,
            include_auth=args.auth,
            database=args.database,
        )
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_error(exc)) from exc


def _format_validation_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else ""
        flag = _FIELD_FLAGS.get(field, field)
        message = error["msg"].removeprefix("Value error, ")
        messages.append(f"{flag}: {message}" if flag else message)
    return "; ".join(messages)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """Run the generator and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = resolve_options(args)
    except ConfigurationError as exc:
        print_error(f"Error: {exc}")
        return 1

    if not _NPM_NAME_RE.match(config.name):
        print_warning(
            f"Warning: '{config.name}' is not a valid npm package name"
        )

    generator = ProjectGenerator(config)
    try:
        project_root = generator.generate(args.output)
    except ScaffoldError as exc:
        print_error(f"Error creating project: {exc}")
        return 1

    _report(config, project_root, generator.written_files)
    return 0


def _report(config: ProjectConfig, project_root: Path, written: list[Path]) -> None:
    print_success(f"\n✨ Project {config.name} created successfully!")
    print_summary_table(
        {
            "Location": str(project_root),
            "Database": config.database.value,
            "Authentication": "enabled" if config.include_auth else "disabled",
            "Files written": str(len(written)),
        },
        title=config.name,
    )
    print_next_steps(
        [
            f"cd {project_root}",
            "npm install",
            "Update .env file with your configuration",
            "npm run dev",
        ]
    )


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
