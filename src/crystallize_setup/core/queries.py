"""GraphQL documents sent to the PIM API."""

from __future__ import annotations

GET_TENANT_ID: str = """
query GET_TENANT_ID($tenantIdentifier: String!) {
  tenant {
    getMany(identifier: $tenantIdentifier) {
      id
      identifier
      availableLanguages {
        code
        name
      }
    }
  }
}
"""

TENANT_INFO: str = """
query TENANT_INFO($tenantId: ID!) {
  tenant {
    get(id: $tenantId) {
      identifier
      rootItemId
      shapes {
        id
        type
        name
        components {
          id
          type
        }
      }
      vatTypes {
        id
        percent
        name
      }
    }
  }
}
"""
