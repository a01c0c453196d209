"""Shared pytest fixtures and configuration for the crystallize-setup suite.

Guidelines
----------
* No internet access in any test; ``requests`` is mocked at the infra
  boundary.
* Prompts are scripted — no terminal interaction.
* Files are written only under ``tmp_path``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import pytest

from crystallize_setup.core.models import Choice, Credentials, TenantContext


class ScriptedPrompter:
    """:class:`Prompter` fake that replays queued answers and records calls."""

    def __init__(self) -> None:
        self.text_answers: list[str] = []
        self.choice_answers: list[str] = []
        self.text_calls: list[str] = []
        self.choice_calls: list[tuple[str, list[Choice]]] = []

    def ask_text(self, message: str) -> str:
        self.text_calls.append(message)
        return self.text_answers.pop(0)

    def ask_choice(self, message: str, choices: Sequence[Choice]) -> str:
        self.choice_calls.append((message, list(choices)))
        return self.choice_answers.pop(0)


class RecordingClient:
    """:class:`GraphQLExecutor` fake returning canned ``data`` objects."""

    def __init__(self, *responses: dict[str, Any]) -> None:
        self.responses: list[dict[str, Any]] = list(responses)
        self.calls: list[tuple[str, dict[str, Any], Credentials]] = []

    def execute(
        self,
        query: str,
        variables: Mapping[str, Any],
        credentials: Credentials,
    ) -> dict[str, Any]:
        self.calls.append((query, dict(variables), credentials))
        return self.responses.pop(0)


class MemoryStore:
    """:class:`SettingsStore` fake."""

    def __init__(self) -> None:
        self.saved: list[tuple[str, Credentials]] = []

    def save(self, tenant_identifier: str, credentials: Credentials) -> None:
        self.saved.append((tenant_identifier, credentials))


@pytest.fixture()
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def credentials() -> Credentials:
    return Credentials(token_id="token-id", token_secret="token-secret")


@pytest.fixture()
def context(credentials: Credentials) -> TenantContext:
    return TenantContext(
        tenant_id="tenant-1",
        tenant_identifier="furniture",
        language="en",
        credentials=credentials,
    )


@pytest.fixture()
def make_client():
    """Factory fixture: ``make_client(data1, data2, ...)``."""
    return RecordingClient
