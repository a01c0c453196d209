"""Infrastructure layer — external system integration.

This layer wraps the PIM GraphQL endpoint and the local ``.env`` file.
Every raw third-party exception is caught here and re-raised as a
:class:`~crystallize_setup.exceptions.CrystallizeSetupError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from crystallize_setup.infra.graphql_client import PIM_API_URL, CrystallizeGraphQLClient
from crystallize_setup.infra.settings import EnvFileStore, load_settings

__all__: list[str] = [
    "PIM_API_URL",
    "CrystallizeGraphQLClient",
    "EnvFileStore",
    "load_settings",
]
