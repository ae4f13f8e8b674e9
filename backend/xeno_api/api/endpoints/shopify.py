"""
Storefront sync endpoints
"""

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from uuid import UUID
import logging

from xeno_api.api.deps import (
    TenantContext,
    get_db,
    get_encryption,
    get_sync_provider,
    get_tenant_context,
)
from xeno_api.core.encryption import TokenEncryption
from xeno_api.core.errors import Conflict, NotFound
from xeno_api.models import SyncLog, Tenant
from xeno_api.models.base import utcnow
from xeno_api.models.sync_log import SYNC_FAILED, SYNC_IN_PROGRESS
from xeno_api.schemas.shopify import ShopifySyncRequest, SyncLogResponse, SyncStartResponse
from xeno_api.services.sync_providers import SyncProvider
from xeno_api.tenancy import create_scoped, get_scoped_or_404

logger = logging.getLogger(__name__)

router = APIRouter()


def shop_domain_taken(db: Session, shop_domain: str, ctx: TenantContext) -> bool:
    """True when another tenant already owns the domain"""
    return (
        db.query(Tenant.id)
        .filter(Tenant.shop_domain == shop_domain, Tenant.id != ctx.tenant_id)
        .first()
    ) is not None


@router.post("/sync", response_model=SyncStartResponse)
def start_sync(
    payload: ShopifySyncRequest,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
    encryption: TokenEncryption = Depends(get_encryption),
    provider: SyncProvider = Depends(get_sync_provider),
):
    """
    Store the encrypted credential on the caller's tenant, record a sync log
    and hand it to the configured sync provider
    """
    if shop_domain_taken(db, payload.shop_domain, ctx):
        raise Conflict("Shop domain already registered")

    tenant = db.get(Tenant, ctx.tenant_id)
    if tenant is None:
        raise NotFound("Tenant not found")

    tenant.shop_domain = payload.shop_domain
    tenant.access_token = encryption.encrypt(payload.access_token)
    sync_log = create_scoped(db, SyncLog, ctx, resource_type="all", status=SYNC_IN_PROGRESS)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Sync domain conflict for tenant {ctx.tenant_id}: {e.orig}")
        raise Conflict("Shop domain already registered")

    try:
        status = provider.start(sync_log)
    except Exception as e:
        logger.error(f"Sync provider {provider.name} failed to start sync {sync_log.id}: {e}", exc_info=e)
        sync_log.status = SYNC_FAILED
        sync_log.error_message = "Sync could not be started"
        sync_log.completed_at = utcnow()
        db.commit()
        status = SYNC_FAILED

    return {
        "message": "Sync started" if status == SYNC_IN_PROGRESS else "Sync failed to start",
        "sync_log_id": sync_log.id,
        "status": status,
        "provider": provider.name,
        "note": provider.note(),
    }


@router.get("/sync/{sync_log_id}", response_model=SyncLogResponse)
async def get_sync_status(
    sync_log_id: UUID,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
    provider: SyncProvider = Depends(get_sync_provider),
):
    sync_log = get_scoped_or_404(db, SyncLog, ctx, sync_log_id, "Sync log")
    return SyncLogResponse.model_validate(sync_log).model_copy(update={"status": provider.status(sync_log)})
