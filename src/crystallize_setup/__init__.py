"""crystallize-setup — tenant, language and shape resolution for Crystallize.

Helper layer for onboarding scripts that talk to the Crystallize PIM
GraphQL API.
"""

from crystallize_setup.version import __version__

__all__: list[str] = ["__version__"]
