"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and CLI adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — so every flow can be driven by scripted fakes in
tests.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from contextlib import AbstractContextManager
from typing import Any, Protocol

from crystallize_setup.core.models import Choice, Credentials


class GraphQLExecutor(Protocol):
    """Contract for GraphQL transports.

    Any object that implements :meth:`execute` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def execute(
        self,
        query: str,
        variables: Mapping[str, Any],
        credentials: Credentials,
    ) -> dict[str, Any]:
        """Send *query* with *variables* and return the ``data`` object.

        Raises
        ------
        MissingCredentialsError
            When *credentials* are incomplete.  No request is sent.
        GraphQLTransportError
            When the request fails or the body is not JSON.
        GraphQLResponseError
            When the response carries no ``data``.
        """
        ...  # pragma: no cover


class Prompter(Protocol):
    """Contract for the interactive prompt collaborator."""

    def ask_text(self, message: str) -> str:
        """Ask for a free-text answer.

        Raises
        ------
        SelectionCancelledError
            When the user aborts the prompt.
        """
        ...  # pragma: no cover

    def ask_choice(self, message: str, choices: Sequence[Choice]) -> str:
        """Ask the user to pick one of *choices*; return its ``value``.

        Raises
        ------
        SelectionCancelledError
            When the user aborts the prompt.
        """
        ...  # pragma: no cover


class SettingsStore(Protocol):
    """Contract for persisting the resolved identifier and credentials."""

    def save(self, tenant_identifier: str, credentials: Credentials) -> None:
        ...  # pragma: no cover


StatusFactory = Callable[[str], AbstractContextManager[Any]]
"""Creates a transient progress indicator around a long-running call."""

Notifier = Callable[[str], None]
"""Receives short informational messages for the user."""
