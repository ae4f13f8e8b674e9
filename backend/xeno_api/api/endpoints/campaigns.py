"""
Campaign endpoints
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, joinedload
from typing import List
from uuid import UUID
import logging

from xeno_api.api.deps import TenantContext, get_db, get_tenant_context
from xeno_api.models import Campaign, Segment
from xeno_api.models.base import utcnow
from xeno_api.schemas.base import MessageResponse
from xeno_api.schemas.campaign import CampaignCreate, CampaignResponse, CampaignUpdate, CampaignWithSegment
from xeno_api.tenancy import create_scoped, delete_scoped, get_scoped_or_404, scoped_query

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[CampaignWithSegment])
async def list_campaigns(
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    All campaigns of the tenant, newest first
    """
    return (
        scoped_query(db, Campaign, ctx)
        .options(joinedload(Campaign.segment))
        .order_by(Campaign.created_at.desc())
        .all()
    )


@router.post("", response_model=CampaignResponse)
async def create_campaign(
    payload: CampaignCreate,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Launch a campaign. It starts live with its budget booked as cost.
    """
    if payload.segment_id is not None:
        get_scoped_or_404(db, Segment, ctx, payload.segment_id, "Segment")

    campaign = create_scoped(
        db, Campaign, ctx,
        name=payload.name,
        channel=payload.channel,
        segment_id=payload.segment_id,
        status="live",
        cost=payload.budget,
        started_at=utcnow(),
    )
    db.commit()
    db.refresh(campaign)

    logger.info(f"Created campaign {campaign.id} for tenant {ctx.tenant_id}")
    return campaign


@router.get("/{campaign_id}", response_model=CampaignWithSegment)
async def get_campaign(
    campaign_id: UUID,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    return get_scoped_or_404(db, Campaign, ctx, campaign_id, "Campaign")


@router.put("/{campaign_id}", response_model=CampaignResponse)
async def update_campaign(
    campaign_id: UUID,
    payload: CampaignUpdate,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Update name, channel, status or segment of one of the tenant's campaigns
    """
    campaign = get_scoped_or_404(db, Campaign, ctx, campaign_id, "Campaign")

    changes = payload.model_dump(exclude_unset=True)
    if changes.get("segment_id") is not None:
        get_scoped_or_404(db, Segment, ctx, changes["segment_id"], "Segment")
    if changes.get("status") == "completed" and campaign.completed_at is None:
        changes["completed_at"] = utcnow()
    if changes.get("status") == "live" and campaign.started_at is None:
        changes["started_at"] = utcnow()

    campaign.update_from_dict(changes)
    db.commit()
    db.refresh(campaign)
    return campaign


@router.delete("/{campaign_id}", response_model=MessageResponse)
async def delete_campaign(
    campaign_id: UUID,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    delete_scoped(db, Campaign, ctx, campaign_id, "Campaign")
    db.commit()
    logger.info(f"Deleted campaign {campaign_id} for tenant {ctx.tenant_id}")
    return {"message": "Campaign deleted successfully"}
