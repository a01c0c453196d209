"""Tests for the ``crystallize-setup doctor`` command (cli/doctor.py).

No network, no prompts.  Coverage:
* Secret masking.
* Individual checks for settings and optional modules.
* Exit code: warnings pass, failures fail.
* CLI routing dispatches to ``run_doctor``.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from crystallize_setup.cli import exit_codes
from crystallize_setup.cli.doctor import collect_checks, mask_secret, run_doctor
from crystallize_setup.core.models import Settings


class TestMaskSecret:
    def test_keeps_last_four(self) -> None:
        assert mask_secret("abcdefgh") == "****efgh"

    def test_short_secret_fully_masked(self) -> None:
        assert mask_secret("abc") == "***"


class TestCollectChecks:
    def test_unset_settings_warn(self, tmp_path: Path) -> None:
        checks = {label: (value, status) for label, value, status in collect_checks(
            Settings(), tmp_path / ".env",
        )}

        assert checks["CRYSTALLIZE_TENANT_IDENTIFIER"] == ("not set (will prompt)", "WARN")
        assert checks[".env file"][1] == "WARN"

    def test_secret_value_is_masked(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("", encoding="utf-8")
        settings = Settings(
            tenant_identifier="furniture",
            token_id="id-1",
            token_secret="super-secret-value",
        )

        checks = {label: (value, status) for label, value, status in collect_checks(
            settings, env_file,
        )}

        assert checks["CRYSTALLIZE_TENANT_IDENTIFIER"] == ("furniture", "OK")
        assert checks["CRYSTALLIZE_ACCESS_TOKEN_SECRET"][0].endswith("alue")
        assert "super" not in checks["CRYSTALLIZE_ACCESS_TOKEN_SECRET"][0]
        assert checks[".env file"][1] == "OK"

    def test_api_url_override_shown(self, tmp_path: Path) -> None:
        checks = {label: value for label, value, _ in collect_checks(
            Settings(api_url="https://staging/graphql"), tmp_path / ".env",
        )}
        assert checks["API endpoint"] == "https://staging/graphql"


class TestRunDoctor:
    def test_warnings_only_is_success(self, tmp_path: Path) -> None:
        assert run_doctor(Settings(), tmp_path / ".env") == exit_codes.SUCCESS

    @patch(
        "crystallize_setup.cli.doctor._python_check",
        return_value=("Python", "3.8.0", "FAIL"),
    )
    def test_failure_returns_general_error(self, _mock: object, tmp_path: Path) -> None:
        assert run_doctor(Settings(), tmp_path / ".env") == exit_codes.GENERAL_ERROR

    def test_cli_routes_to_doctor(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from crystallize_setup.cli.app import main

        monkeypatch.delenv("CRYSTALLIZE_TENANT_IDENTIFIER", raising=False)
        with patch("crystallize_setup.cli.doctor.run_doctor", return_value=0) as mock_run:
            code = main(["--env-file", str(tmp_path / ".env"), "doctor"])

        assert code == exit_codes.SUCCESS
        settings, env_file = mock_run.call_args.args
        assert env_file == tmp_path / ".env"
        assert isinstance(settings, Settings)
