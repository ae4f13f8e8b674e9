"""
Pydantic schemas for storefront sync
"""

from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from xeno_api.models.tenant import normalize_shop_domain
from xeno_api.schemas.base import CamelModel


class ShopifySyncRequest(CamelModel):
    """Credential and domain to store on the tenant before syncing"""

    access_token: str = Field(..., min_length=1, max_length=512)
    shop_domain: str = Field(..., min_length=1, max_length=255)

    @field_validator('shop_domain')
    @classmethod
    def validate_shop_domain(cls, v: str) -> str:
        return normalize_shop_domain(v)


class SyncStartResponse(CamelModel):
    message: str
    sync_log_id: UUID
    status: str
    provider: str
    note: Optional[str] = None


class SyncLogResponse(CamelModel):
    id: UUID
    resource_type: str
    status: str
    records_processed: int
    error_message: Optional[str] = None
    created_at: datetime
    completed_at: Optional[datetime] = None
