"""CLI application entry point and command routing for crystallize-setup.

This module is the **sole error boundary** for the entire application.
It catches :class:`~crystallize_setup.exceptions.CrystallizeSetupError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from crystallize_setup.cli import exit_codes
from crystallize_setup.cli.console import console, escape_markup
from crystallize_setup.exceptions import CrystallizeSetupError
from crystallize_setup.version import __version__

if TYPE_CHECKING:
    from crystallize_setup.cli.prompts import QuestionaryPrompter
    from crystallize_setup.core.models import TenantContext
    from crystallize_setup.infra.graphql_client import CrystallizeGraphQLClient


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``crystallize-setup tenant [--skip-language]``
    * ``crystallize-setup info``
    * ``crystallize-setup shape [--type TYPE ...] [--message TEXT]``
    * ``crystallize-setup doctor``
    """
    parser = argparse.ArgumentParser(
        prog="crystallize-setup",
        description="Resolve the Crystallize tenant, language and shape for onboarding scripts.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=Path(".env"),
        help="File holding CRYSTALLIZE_* values; rewritten after a successful lookup.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log API requests and configuration loading.",
    )

    commands = parser.add_subparsers(dest="command")

    tenant = commands.add_parser("tenant", help="Resolve tenant id and language.")
    tenant.add_argument(
        "--skip-language",
        action="store_true",
        help="Do not ask for a language; use the default.",
    )

    commands.add_parser("info", help="Show shapes and VAT types of the tenant.")

    shape = commands.add_parser("shape", help="Pick one of the tenant's shapes.")
    shape.add_argument(
        "--type",
        dest="shape_types",
        action="append",
        default=None,
        metavar="TYPE",
        help="Only offer shapes of this type (repeatable), e.g. product.",
    )
    shape.add_argument("--message", default=None, help="Custom prompt text.")

    commands.add_parser("doctor", help="Show configuration status.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _resolve_context(
    env_file: Path,
    *,
    skip_language: bool,
) -> tuple[CrystallizeGraphQLClient, QuestionaryPrompter, TenantContext]:
    """Build the collaborators and resolve the tenant context."""
    from crystallize_setup.cli.prompts import QuestionaryPrompter
    from crystallize_setup.core.tenant_service import TenantResolver
    from crystallize_setup.infra.graphql_client import PIM_API_URL, CrystallizeGraphQLClient
    from crystallize_setup.infra.settings import EnvFileStore, load_settings

    settings = load_settings(env_file)
    client = CrystallizeGraphQLClient(settings.api_url or PIM_API_URL)
    prompter = QuestionaryPrompter()
    resolver = TenantResolver(
        client,
        prompter,
        EnvFileStore(env_file),
        settings,
        notify=console.notify,
    )
    return client, prompter, resolver.resolve(skip_language=skip_language)


def _handle_tenant(env_file: Path, skip_language: bool) -> int:
    _, _, context = _resolve_context(env_file, skip_language=skip_language)
    console.print(
        f"[bold green]Tenant[/bold green] {context.tenant_identifier}  "
        f"id={context.tenant_id}  language={context.language}"
    )
    return exit_codes.SUCCESS


def _handle_info(env_file: Path) -> int:
    from crystallize_setup.cli.console import load_rich_table
    from crystallize_setup.cli.progress import spinner
    from crystallize_setup.core.tenant_info import fetch_tenant_info

    table_class = load_rich_table()
    client, _, context = _resolve_context(env_file, skip_language=True)
    with spinner("Getting tenant info"):
        info = fetch_tenant_info(client, context)

    console.print(f"[bold cyan]Tenant:[/bold cyan]    {info.identifier}")
    console.print(f"[bold cyan]Root item:[/bold cyan] {info.root_item_id}")

    shapes = table_class(title="Shapes", header_style="bold magenta", border_style="dim")
    shapes.add_column("Id")
    shapes.add_column("Name")
    shapes.add_column("Type")
    shapes.add_column("Components", justify="right")
    for shape in info.shapes:
        shapes.add_row(shape.id, shape.name, shape.type, str(len(shape.components)))
    console.print(shapes)

    vat_types = table_class(title="VAT types", header_style="bold magenta", border_style="dim")
    vat_types.add_column("Id")
    vat_types.add_column("Name")
    vat_types.add_column("Percent", justify="right")
    for vat in info.vat_types:
        vat_types.add_row(vat.id, vat.name, f"{vat.percent:g}%")
    console.print(vat_types)
    return exit_codes.SUCCESS


def _handle_shape(env_file: Path, shape_types: list[str] | None, message: str | None) -> int:
    from crystallize_setup.cli.progress import spinner
    from crystallize_setup.core.shape_service import select_shape

    client, prompter, context = _resolve_context(env_file, skip_language=False)

    wanted = set(shape_types or ())
    filter_shapes = (lambda shape: shape.type in wanted) if wanted else None

    selected = select_shape(
        client,
        context,
        prompter,
        filter_shapes=filter_shapes,
        message=message,
        status=spinner,
        notify=console.notify,
    )
    # Machine-readable result on stdout; everything else goes to stderr.
    print(json.dumps(selected.as_dict(), indent=2))
    return exit_codes.SUCCESS


def _handle_doctor(env_file: Path) -> int:
    from crystallize_setup.cli.doctor import run_doctor
    from crystallize_setup.infra.settings import load_settings

    return run_doctor(load_settings(env_file), env_file)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the crystallize-setup CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    from crystallize_setup.cli.logging_setup import configure_logging

    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "doctor":
        return _handle_doctor(args.env_file)
    if args.command == "tenant":
        return _handle_tenant(args.env_file, args.skip_language)
    if args.command == "info":
        return _handle_info(args.env_file)
    return _handle_shape(args.env_file, args.shape_types, args.message)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CrystallizeSetupError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
