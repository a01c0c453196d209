"""Domain models for crystallize-setup.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and trivial conversion.  They carry zero
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Credentials and configuration inputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Credentials:
    """Access token pair authenticating requests to the PIM API."""

    token_id: str
    token_secret: str = field(repr=False)

    def missing_fields(self) -> tuple[str, ...]:
        """Return the names of empty fields, in header order."""
        missing: list[str] = []
        if not self.token_id:
            missing.append("token id")
        if not self.token_secret:
            missing.append("token secret")
        return tuple(missing)


@dataclass(frozen=True, slots=True)
class Settings:
    """Values read from the environment and the local ``.env`` file.

    ``None`` means the value was absent (or empty) and must be prompted
    for.
    """

    tenant_identifier: str | None = None
    token_id: str | None = None
    token_secret: str | None = field(default=None, repr=False)
    api_url: str | None = None


# ---------------------------------------------------------------------------
# Tenant lookup
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Language:
    """A language enabled on a tenant."""

    code: str
    """ISO-like language code, e.g. ``"en"``."""

    name: str
    """Display name shown in prompts."""


@dataclass(frozen=True, slots=True)
class TenantMatch:
    """One entry of the ``tenant.getMany`` lookup."""

    id: str
    identifier: str
    available_languages: tuple[Language, ...]


@dataclass(frozen=True, slots=True)
class TenantContext:
    """Resolved tenant, language and credentials for one process run.

    Created once by the tenant resolver and passed explicitly to every
    operation that talks to the API.
    """

    tenant_id: str
    tenant_identifier: str
    language: str
    credentials: Credentials


# ---------------------------------------------------------------------------
# Tenant info
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ShapeComponent:
    id: str
    type: str


@dataclass(frozen=True, slots=True)
class Shape:
    """A content-type schema owned by a tenant."""

    id: str
    type: str
    name: str
    components: tuple[ShapeComponent, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "name": self.name,
            "components": [
                {"id": component.id, "type": component.type}
                for component in self.components
            ],
        }


@dataclass(frozen=True, slots=True)
class VatType:
    id: str
    percent: float
    name: str


@dataclass(frozen=True, slots=True)
class TenantInfo:
    """Snapshot of a tenant's metadata.  Never cached."""

    identifier: str
    root_item_id: str
    shapes: tuple[Shape, ...]
    vat_types: tuple[VatType, ...]


@dataclass(frozen=True, slots=True)
class SelectedShape:
    """A shape chosen by the user, paired with the tenant root item."""

    shape: Shape
    root_item_id: str

    @property
    def shape_id(self) -> str:
        return self.shape.id

    def as_dict(self) -> dict[str, Any]:
        """Return the merged record handed to calling scripts.

        Keys follow the API's camelCase naming:
        ``shapeId``, ``id``, ``type``, ``name``, ``components``,
        ``rootItemId``.
        """
        return {
            "shapeId": self.shape_id,
            **self.shape.as_dict(),
            "rootItemId": self.root_item_id,
        }


# ---------------------------------------------------------------------------
# Prompt options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Choice:
    """A labelled option in a single-choice prompt."""

    label: str
    value: str
