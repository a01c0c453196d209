"""``requests`` backed implementation of :class:`~crystallize_setup.core.protocols.GraphQLExecutor`.

This module is the **only** place in the codebase that imports
``requests``.  All transport exceptions are caught here and re-raised as
typed :class:`~crystallize_setup.exceptions.GraphQLError` subclasses —
nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import requests

from crystallize_setup.core.models import Credentials
from crystallize_setup.exceptions import (
    GraphQLResponseError,
    GraphQLTransportError,
    MissingCredentialsError,
)

logger = logging.getLogger(__name__)

PIM_API_URL: str = "https://pim.crystallize.com/graphql"

TOKEN_ID_HEADER: str = "X-Crystallize-Access-Token-Id"
TOKEN_SECRET_HEADER: str = "X-Crystallize-Access-Token-Secret"


class CrystallizeGraphQLClient:
    """Concrete :class:`GraphQLExecutor` for the PIM API.

    Usage::

        client = CrystallizeGraphQLClient()
        data = client.execute(query, {"tenantId": "..."}, credentials)

    Parameters
    ----------
    url:
        Endpoint to POST to.  Defaults to :data:`PIM_API_URL`.
    session:
        Optional pre-configured :class:`requests.Session`.
    timeout:
        Seconds passed to ``requests``; ``None`` waits indefinitely.
    """

    def __init__(
        self,
        url: str = PIM_API_URL,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.url: str = url
        self._session: requests.Session = session or requests.Session()
        self._timeout: float | None = timeout

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def execute(
        self,
        query: str,
        variables: Mapping[str, Any],
        credentials: Credentials,
    ) -> dict[str, Any]:
        """POST *query* and *variables*; return the response ``data``.

        Raises
        ------
        MissingCredentialsError
            When the token id or secret is empty.  No request is sent.
        GraphQLTransportError
            When the request fails or the body is not JSON.
        GraphQLResponseError
            When the decoded body has no ``data``.
        """
        self._check_credentials(credentials)

        headers = {
            "Content-Type": "application/json",
            TOKEN_ID_HEADER: credentials.token_id,
            TOKEN_SECRET_HEADER: credentials.token_secret,
        }
        payload = {"query": query, "variables": dict(variables)}

        logger.debug("POST %s (%d chars of query)", self.url, len(query))
        try:
            response = self._session.post(
                self.url,
                json=payload,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise GraphQLTransportError(
                f"Request to {self.url} failed: {exc}",
                hint="Check your network connection and try again.",
            ) from exc

        try:
            body: Any = response.json()
        except ValueError as exc:
            raise GraphQLTransportError(
                f"Response from {self.url} is not valid JSON "
                f"(HTTP {response.status_code}).",
            ) from exc

        if not isinstance(body, dict) or body.get("data") is None:
            raise GraphQLResponseError(
                json.dumps(body, indent=2),
                payload=body,
                hint="Verify the access token and the tenant permissions.",
            )

        logger.debug("Response received from %s", self.url)
        return body["data"]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _check_credentials(credentials: Credentials) -> None:
        """Reject requests with an empty token id or secret."""
        missing = credentials.missing_fields()
        if missing:
            raise MissingCredentialsError(
                "You must insert your token ID and Secret "
                f"(missing: {', '.join(missing)}).",
                hint="Set CRYSTALLIZE_ACCESS_TOKEN_ID and "
                "CRYSTALLIZE_ACCESS_TOKEN_SECRET, or enter them when prompted.",
            )
