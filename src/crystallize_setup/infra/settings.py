"""Environment and ``.env`` file handling.

Reading uses ``python-dotenv``; the process environment wins over the
file, the same precedence as a plain ``load_dotenv()``.  Writing
replaces the file with exactly three unquoted ``KEY=value`` lines, so a
value containing whitespace followed by ``#`` does not survive a reload.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from crystallize_setup.core.models import Credentials, Settings
from crystallize_setup.exceptions import ConfigWriteError

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE: str = ".env"

TENANT_IDENTIFIER_KEY: str = "CRYSTALLIZE_TENANT_IDENTIFIER"
TOKEN_ID_KEY: str = "CRYSTALLIZE_ACCESS_TOKEN_ID"
TOKEN_SECRET_KEY: str = "CRYSTALLIZE_ACCESS_TOKEN_SECRET"
API_URL_KEY: str = "CRYSTALLIZE_API_URL"


def load_settings(
    env_file: str | os.PathLike[str] = DEFAULT_ENV_FILE,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Read the tenant identifier, credentials and endpoint override.

    A key present in *environ* (``os.environ`` by default) shadows
    *env_file* even when its value is empty.  Empty strings are then
    treated as absent.  ``${VAR}`` references are not expanded.
    """
    path = Path(env_file)
    file_values: dict[str, str | None] = {}
    if path.is_file():
        file_values = dict(dotenv_values(path, interpolate=False))
        logger.debug("Loaded %d value(s) from %s", len(file_values), path)

    env = os.environ if environ is None else environ

    def lookup(key: str) -> str | None:
        value = env[key] if key in env else file_values.get(key)
        return value or None

    return Settings(
        tenant_identifier=lookup(TENANT_IDENTIFIER_KEY),
        token_id=lookup(TOKEN_ID_KEY),
        token_secret=lookup(TOKEN_SECRET_KEY),
        api_url=lookup(API_URL_KEY),
    )


class EnvFileStore:
    """Concrete :class:`~crystallize_setup.core.protocols.SettingsStore`.

    The file is overwritten on every save; keys other than the three
    written here are not preserved.
    """

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_ENV_FILE) -> None:
        self.path: Path = Path(path)

    @staticmethod
    def render(tenant_identifier: str, credentials: Credentials) -> str:
        return "\n".join(
            (
                f"{TENANT_IDENTIFIER_KEY}={tenant_identifier}",
                f"{TOKEN_ID_KEY}={credentials.token_id}",
                f"{TOKEN_SECRET_KEY}={credentials.token_secret}",
            )
        )

    def save(self, tenant_identifier: str, credentials: Credentials) -> None:
        """Write the identifier and credentials to :attr:`path`.

        Raises
        ------
        ConfigWriteError
            When the file cannot be written.
        """
        try:
            self.path.write_text(
                self.render(tenant_identifier, credentials),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigWriteError(
                f"Could not write {self.path}: {exc}",
                hint="Check that the directory exists and is writable.",
            ) from exc
        logger.debug("Saved tenant identifier and credentials to %s", self.path)
