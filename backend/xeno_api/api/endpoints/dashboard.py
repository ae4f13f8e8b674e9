"""
Dashboard endpoint
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from xeno_api.api.deps import TenantContext, get_db, get_tenant_context
from xeno_api.schemas.analytics import DashboardStats
from xeno_api.services.reporting import build_dashboard_stats

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(
    days: int = Query(30, ge=1, le=365, description="Window for order totals"),
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    KPIs, campaign funnel, lifecycle breakdown, segments and journeys
    """
    return build_dashboard_stats(db, ctx, days)
