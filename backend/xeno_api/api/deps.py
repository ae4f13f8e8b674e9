"""
Shared FastAPI dependencies for the API routers
"""

from fastapi import Request

from xeno_api.core.config import Settings
from xeno_api.core.database import Database, get_db
from xeno_api.core.encryption import TokenEncryption
from xeno_api.services.auth_service import AuthService
from xeno_api.services.sync_providers import SyncProvider
from xeno_api.tenancy import TenantContext, get_tenant_context

__all__ = [
    "TenantContext",
    "get_db",
    "get_tenant_context",
    "get_settings_from_app",
    "get_database",
    "get_auth_service",
    "get_encryption",
    "get_sync_provider",
]


def get_settings_from_app(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_encryption(request: Request) -> TokenEncryption:
    return request.app.state.encryption


def get_sync_provider(request: Request) -> SyncProvider:
    return request.app.state.sync_provider
