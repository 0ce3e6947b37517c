"""Command-line entry point.

Usage::

    rainsrc
    rainsrc --profile legacy
    rainsrc --list-profiles
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from pydantic import ValidationError
from rich.table import Table

from rainsrc import __version__
from rainsrc.config import Config
from rainsrc.prompts import collect_request
from rainsrc.scaffolder import PROFILES, ProjectGenerator, ScaffoldError, get_profile
from rainsrc.utils import (
    console,
    print_error,
    print_step,
    print_summary_table,
    print_warning,
)


def _build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rainsrc",
        description="rainsrc -- scaffold a TypeScript project interactively",
    )
    parser.add_argument(
        "--profile",
        default=config.profile,
        help=f"Scaffold profile to use (default: {config.profile})",
    )
    parser.add_argument(
        "--list-profiles",
        action="store_true",
        help="List the available profiles and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _print_profiles() -> None:
    table = Table(title="Profiles", show_header=True, header_style="bold cyan")
    table.add_column("Name", no_wrap=True)
    table.add_column("Target")
    table.add_column("Scripts")
    table.add_column("Description", style="dim")
    for profile in PROFILES.values():
        table.add_row(
            profile.name,
            f"{profile.compiler_target}/{profile.compiler_module}",
            ", ".join(profile.scripts),
            profile.description,
        )
    console.print(table)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``rainsrc`` and ``python -m rainsrc``."""
    try:
        config = Config.from_env()
    except ValidationError as exc:
        print_error(f"Error: invalid configuration: {exc}")
        sys.exit(1)
    args = _build_parser(config).parse_args(argv)

    if args.list_profiles:
        _print_profiles()
        return

    try:
        profile = get_profile(args.profile)
        request = collect_request(config.defaults)

        print_step("Terminal running")
        generator = ProjectGenerator(
            request, profile=profile, init_timeout=config.init_timeout
        )
        result = asyncio.run(generator.generate())
    except KeyboardInterrupt:
        print_warning("Aborted.")
        sys.exit(130)
    except (ScaffoldError, ValidationError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    except Exception:
        console.print_exception()
        sys.exit(1)

    if not result.success:
        print_warning(result.reason)
        sys.exit(1)

    print_summary_table(
        {
            str(path.relative_to(result.project_root)): "written"
            for path in result.files_written
        },
        title=str(result.project_root),
    )


if __name__ == "__main__":
    main()
