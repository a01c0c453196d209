"""``crystallize-setup doctor`` — configuration diagnostics.

Shows which inputs will come from the environment or the ``.env`` file
and which will be prompted for, plus the optional UI libraries.  Never
talks to the API.
"""

from __future__ import annotations

import importlib.util
import platform
import sys
from pathlib import Path

from crystallize_setup.cli import exit_codes
from crystallize_setup.cli.console import console
from crystallize_setup.core.models import Settings
from crystallize_setup.infra.graphql_client import PIM_API_URL
from crystallize_setup.infra.settings import (
    TENANT_IDENTIFIER_KEY,
    TOKEN_ID_KEY,
    TOKEN_SECRET_KEY,
)
from crystallize_setup.version import __version__

Check = tuple[str, str, str]
"""(label, value, status) where status is ``OK``, ``WARN`` or ``FAIL``."""


def mask_secret(value: str) -> str:
    """Keep the last four characters of *value* visible."""
    if len(value) <= 4:
        return "*" * len(value)
    return "*" * (len(value) - 4) + value[-4:]


def _python_check() -> Check:
    ok = sys.version_info >= (3, 10)
    return "Python", platform.python_version(), "OK" if ok else "FAIL"


def _module_check(name: str) -> Check:
    if importlib.util.find_spec(name) is None:
        return name, "not installed", "WARN"
    return name, "installed", "OK"


def _setting_check(key: str, value: str | None, *, secret: bool = False) -> Check:
    if not value:
        return key, "not set (will prompt)", "WARN"
    return key, mask_secret(value) if secret else value, "OK"


def collect_checks(settings: Settings, env_file: Path) -> list[Check]:
    return [
        ("crystallize-setup", __version__, "OK"),
        _python_check(),
        _module_check("questionary"),
        _module_check("rich"),
        (".env file", str(env_file), "OK" if env_file.is_file() else "WARN"),
        ("API endpoint", settings.api_url or PIM_API_URL, "OK"),
        _setting_check(TENANT_IDENTIFIER_KEY, settings.tenant_identifier),
        _setting_check(TOKEN_ID_KEY, settings.token_id),
        _setting_check(TOKEN_SECRET_KEY, settings.token_secret, secret=True),
    ]


_STATUS_STYLE: dict[str, str] = {
    "OK": "[green]OK[/green]",
    "WARN": "[yellow]WARN[/yellow]",
    "FAIL": "[red]FAIL[/red]",
}


def _print_plain(checks: list[Check]) -> None:
    print("\ncrystallize-setup doctor", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<34} {value:<30} {status:<6}", file=sys.stderr)
    print(file=sys.stderr)


def run_doctor(settings: Settings, env_file: Path) -> int:
    """Render the diagnostics table.

    Returns :data:`exit_codes.GENERAL_ERROR` if any check failed,
    otherwise :data:`exit_codes.SUCCESS`.  Warnings do not fail.
    """
    checks = collect_checks(settings, env_file)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain(checks)
    else:
        table = Table(
            title="crystallize-setup doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Check", style="bold", min_width=20)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=6)
        for label, value, status in checks:
            table.add_row(label, value, _STATUS_STYLE.get(status, status))
        console.print(table)

    if any(status == "FAIL" for _, _, status in checks):
        console.print("Some checks failed.")
        return exit_codes.GENERAL_ERROR
    return exit_codes.SUCCESS
