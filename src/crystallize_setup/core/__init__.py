"""Core / service layer — orchestration and pure data transformations.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or network I/O; collaborators are injected.
* No imports from ``cli`` or ``infra``.
"""

from crystallize_setup.core.chunking import chunk_array
from crystallize_setup.core.models import (
    Choice,
    Credentials,
    Language,
    SelectedShape,
    Settings,
    Shape,
    ShapeComponent,
    TenantContext,
    TenantInfo,
    TenantMatch,
    VatType,
)
from crystallize_setup.core.protocols import GraphQLExecutor, Prompter, SettingsStore
from crystallize_setup.core.shape_service import select_shape
from crystallize_setup.core.tenant_info import fetch_tenant_info
from crystallize_setup.core.tenant_service import TenantResolver

__all__: list[str] = [
    "Choice",
    "Credentials",
    "GraphQLExecutor",
    "Language",
    "Prompter",
    "SelectedShape",
    "Settings",
    "SettingsStore",
    "Shape",
    "ShapeComponent",
    "TenantContext",
    "TenantInfo",
    "TenantMatch",
    "TenantResolver",
    "VatType",
    "chunk_array",
    "fetch_tenant_info",
    "select_shape",
]
