"""
Multi-tenancy: request scoping context and tenant-scoped queries.
"""

from .context import TenantContext, bearer_scheme, get_tenant_context, get_token_issuer
from .queries import (
    create_scoped,
    delete_scoped,
    get_scoped_many_or_404,
    get_scoped_or_404,
    scoped_query,
    tenant_filter,
)

__all__ = [
    "TenantContext",
    "bearer_scheme",
    "get_tenant_context",
    "get_token_issuer",
    "create_scoped",
    "delete_scoped",
    "get_scoped_many_or_404",
    "get_scoped_or_404",
    "scoped_query",
    "tenant_filter",
]
