"""Tenant info query — shapes, root item and VAT types of a tenant."""

from __future__ import annotations

from typing import Any

from crystallize_setup.core import queries
from crystallize_setup.core.models import (
    Shape,
    ShapeComponent,
    TenantContext,
    TenantInfo,
    VatType,
)
from crystallize_setup.core.protocols import GraphQLExecutor


def fetch_tenant_info(client: GraphQLExecutor, context: TenantContext) -> TenantInfo:
    """Fetch a fresh :class:`TenantInfo` snapshot for ``context.tenant_id``.

    Errors are whatever *client* raises.
    """
    data = client.execute(
        queries.TENANT_INFO,
        {"tenantId": context.tenant_id},
        context.credentials,
    )
    return parse_tenant_info((data.get("tenant") or {}).get("get") or {})


def parse_tenant_info(raw: dict[str, Any]) -> TenantInfo:
    """Convert the raw ``tenant.get`` object into a :class:`TenantInfo`."""
    return TenantInfo(
        identifier=str(raw.get("identifier", "")),
        root_item_id=str(raw.get("rootItemId", "")),
        shapes=tuple(_parse_shape(entry) for entry in raw.get("shapes") or []),
        vat_types=tuple(_parse_vat_type(entry) for entry in raw.get("vatTypes") or []),
    )


def _parse_shape(raw: dict[str, Any]) -> Shape:
    return Shape(
        id=str(raw.get("id", "")),
        type=str(raw.get("type", "")),
        name=str(raw.get("name", "")),
        components=tuple(
            ShapeComponent(id=str(c.get("id", "")), type=str(c.get("type", "")))
            for c in raw.get("components") or []
        ),
    )


def _parse_vat_type(raw: dict[str, Any]) -> VatType:
    percent = raw.get("percent")
    return VatType(
        id=str(raw.get("id", "")),
        percent=float(percent) if percent is not None else 0.0,
        name=str(raw.get("name", "")),
    )
