"""
Campaign analytics endpoint
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from xeno_api.api.deps import TenantContext, get_db, get_tenant_context
from xeno_api.schemas.analytics import AnalyticsResponse
from xeno_api.services.reporting import build_analytics

router = APIRouter()


@router.get("", response_model=AnalyticsResponse)
async def analytics(
    days: int = Query(30, ge=1, le=365, description="Only campaigns created in this window"),
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    return build_analytics(db, ctx, days)
