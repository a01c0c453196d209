"""Tenant resolution — identifier, credentials and working language.

:class:`TenantResolver` turns the human-readable tenant identifier into
the internal tenant id, picks the language to work in, and persists the
identifier and credentials for the next run.  Missing inputs are asked
for through the injected :class:`~crystallize_setup.core.protocols.Prompter`.

Guarantees
----------
* Pure orchestration — no ``print()``, no direct network or file I/O.
* Only :class:`~crystallize_setup.exceptions.CrystallizeSetupError`
  subclasses escape from collaborators that honour their protocols.
* No caching: every call to :meth:`TenantResolver.resolve` prompts and
  queries again.
"""

from __future__ import annotations

import logging
from typing import Any

from crystallize_setup.core import queries
from crystallize_setup.core.models import (
    Choice,
    Credentials,
    Language,
    Settings,
    TenantContext,
    TenantMatch,
)
from crystallize_setup.core.protocols import (
    GraphQLExecutor,
    Notifier,
    Prompter,
    SettingsStore,
)
from crystallize_setup.exceptions import SelectionCancelledError, TenantNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE: str = "en"
"""Language used when language selection is skipped."""

TENANT_IDENTIFIER_PROMPT: str = 'Please enter the tenant identifier (e.g. "furniture"):'
TOKEN_ID_PROMPT: str = "Please enter Access Token ID:"
TOKEN_SECRET_PROMPT: str = "Please enter Access Token Secret:"
LANGUAGE_PROMPT: str = "Select the language target in Crystallize"


def _ignore(_message: str) -> None:
    return None


class TenantResolver:
    """Resolve the tenant context for one run of an onboarding script.

    Parameters
    ----------
    client:
        Any object satisfying :class:`GraphQLExecutor`.
    prompter:
        Asks for values missing from *settings*.
    store:
        Receives the identifier and credentials after a successful lookup.
    settings:
        Values read from the environment / ``.env`` file.
    notify:
        Optional callback for short informational messages.
    """

    def __init__(
        self,
        client: GraphQLExecutor,
        prompter: Prompter,
        store: SettingsStore,
        settings: Settings,
        *,
        notify: Notifier | None = None,
    ) -> None:
        self._client: GraphQLExecutor = client
        self._prompter: Prompter = prompter
        self._store: SettingsStore = store
        self._settings: Settings = settings
        self._notify: Notifier = notify or _ignore

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, *, skip_language: bool = False) -> TenantContext:
        """Resolve tenant id and language, then persist the inputs.

        Raises
        ------
        TenantNotFoundError
            If no tenant returned by the lookup has exactly the given
            identifier.
        SelectionCancelledError
            If a prompt is aborted.
        ConfigWriteError
            If the ``.env`` file cannot be written.
        """
        tenant_identifier = self._value_or_prompt(
            self._settings.tenant_identifier,
            label="tenantIdentifier",
            message=TENANT_IDENTIFIER_PROMPT,
        )
        credentials = Credentials(
            token_id=self._value_or_prompt(
                self._settings.token_id,
                label="Access Token ID",
                message=TOKEN_ID_PROMPT,
            ),
            token_secret=self._value_or_prompt(
                self._settings.token_secret,
                label="Access Token Secret",
                message=TOKEN_SECRET_PROMPT,
            ),
        )

        tenant = self._find_tenant(tenant_identifier, credentials)

        language = DEFAULT_LANGUAGE
        if not skip_language:
            language = self._choose_language(tenant.available_languages)

        self._store.save(tenant_identifier, credentials)

        return TenantContext(
            tenant_id=tenant.id,
            tenant_identifier=tenant_identifier,
            language=language,
            credentials=credentials,
        )

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _value_or_prompt(self, value: str | None, *, label: str, message: str) -> str:
        if value:
            self._notify(f"Using {label} from .env")
            return value
        return self._prompter.ask_text(message)

    def _find_tenant(self, tenant_identifier: str, credentials: Credentials) -> TenantMatch:
        data = self._client.execute(
            queries.GET_TENANT_ID,
            {"tenantIdentifier": tenant_identifier},
            credentials,
        )
        matches = self._parse_matches(data)
        logger.debug(
            "Tenant lookup for %r returned %d candidate(s)",
            tenant_identifier,
            len(matches),
        )
        for match in matches:
            if match.identifier == tenant_identifier:
                return match
        raise TenantNotFoundError(tenant_identifier)

    def _choose_language(self, languages: tuple[Language, ...]) -> str:
        if len(languages) == 1:
            return languages[0].code
        if not languages:
            raise SelectionCancelledError(
                "The tenant has no available languages to choose from.",
                hint="Add a language to the tenant, or skip language selection.",
            )
        return self._prompter.ask_choice(
            LANGUAGE_PROMPT,
            [Choice(label=lang.name, value=lang.code) for lang in languages],
        )

    # ------------------------------------------------------------------
    # Raw-dict → domain-model parsers (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_matches(data: dict[str, Any]) -> list[TenantMatch]:
        raw = (data.get("tenant") or {}).get("getMany") or []
        return [
            TenantMatch(
                id=str(entry.get("id", "")),
                identifier=str(entry.get("identifier", "")),
                available_languages=tuple(
                    Language(code=str(lang.get("code", "")), name=str(lang.get("name", "")))
                    for lang in entry.get("availableLanguages") or []
                ),
            )
            for entry in raw
            if isinstance(entry, dict)
        ]
