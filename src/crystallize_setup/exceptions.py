"""Custom exception hierarchy for crystallize-setup.

Every failure that crosses a layer boundary is a subclass of
:class:`CrystallizeSetupError`.  Raw third-party exceptions (e.g. from
``requests``) never propagate beyond the infrastructure layer; they are
caught there and re-raised as a typed subclass defined here.  Only the
CLI error boundary decides whether a failure ends the process.

Hierarchy
---------
CrystallizeSetupError
├── MissingCredentialsError
├── GraphQLError
│   ├── GraphQLTransportError
│   └── GraphQLResponseError
├── TenantNotFoundError
├── NoShapesAvailableError
├── SelectionCancelledError
├── ConfigWriteError
└── MissingDependencyError
"""

from __future__ import annotations

from typing import Any


class CrystallizeSetupError(Exception):
    """Base exception for all crystallize-setup errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Authentication --------------------------------------------------------

class MissingCredentialsError(CrystallizeSetupError):
    """Raised when the access token id or secret is missing or empty."""


# --- GraphQL transport / response ------------------------------------------

class GraphQLError(CrystallizeSetupError):
    """Base class for failures talking to the GraphQL endpoint."""


class GraphQLTransportError(GraphQLError):
    """Raised when the request fails or the body is not valid JSON."""


class GraphQLResponseError(GraphQLError):
    """Raised when the parsed response carries no ``data`` field."""

    def __init__(
        self,
        message: str,
        *,
        payload: Any = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.payload: Any = payload
        """The decoded response body, kept for callers that inspect errors."""


# --- Tenant / shape lookup -------------------------------------------------

class TenantNotFoundError(CrystallizeSetupError):
    """Raised when no tenant matches the identifier exactly."""

    def __init__(self, tenant_identifier: str) -> None:
        super().__init__(
            f'Cannot find a tenant with the identifier "{tenant_identifier}"',
            hint="Check the spelling, and that the access token can see this tenant.",
        )
        self.tenant_identifier: str = tenant_identifier


class NoShapesAvailableError(CrystallizeSetupError):
    """Raised when no shape survives the caller's filter."""


class SelectionCancelledError(CrystallizeSetupError):
    """Raised when an interactive prompt is cancelled or has no options."""


# --- Local configuration ---------------------------------------------------

class ConfigWriteError(CrystallizeSetupError):
    """Raised when the local ``.env`` file cannot be written."""


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(CrystallizeSetupError):
    """Raised when an optional runtime dependency is not installed."""
