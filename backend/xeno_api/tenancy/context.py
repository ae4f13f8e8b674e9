"""
Tenant-scoping context for authenticated requests.

Every protected route depends on get_tenant_context. It is the only place a
tenant identity is established: the verified session claim. Handlers never
read a tenant id from the body, query string or path.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from xeno_api.core.errors import Forbidden, Unauthorized
from xeno_api.core.security import SessionClaims, TokenIssuer, TokenRejected

logger = logging.getLogger(__name__)

# auto_error=False: a missing or non-Bearer header reaches us as None
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class TenantContext:
    """
    Immutable identity of the caller for one request.

    Attributes:
        user_id: Authenticated user
        tenant_id: Tenant every data access is scoped to
        email: User email from the claim
        role: User role from the claim
    """

    user_id: uuid.UUID
    tenant_id: uuid.UUID
    email: str
    role: str

    @classmethod
    def from_claims(cls, claims: SessionClaims) -> "TenantContext":
        return cls(
            user_id=claims.user_id,
            tenant_id=claims.tenant_id,
            email=claims.email,
            role=claims.role,
        )


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_tenant_context(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> TenantContext:
    """
    FastAPI dependency: verify the bearer token and attach the scoping context.

    Raises:
        Unauthorized: no bearer credential on the request
        Forbidden: credential present but invalid, tampered or expired
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Access token required")

    try:
        claims = issuer.verify(credentials.credentials)
    except TokenRejected as e:
        logger.warning(f"Token rejected on {request.url.path}: reason={e.reason}")
        raise Forbidden("Invalid or expired token")

    ctx = TenantContext.from_claims(claims)
    request.state.tenant_context = ctx
    return ctx
