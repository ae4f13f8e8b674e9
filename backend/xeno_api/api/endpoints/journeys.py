"""
Journey endpoints
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from xeno_api.api.deps import TenantContext, get_db, get_tenant_context
from xeno_api.models import Journey
from xeno_api.schemas.journey import JourneyCreate, JourneyResponse, JourneyUpdate
from xeno_api.tenancy import create_scoped, get_scoped_or_404, scoped_query

router = APIRouter()


@router.get("", response_model=List[JourneyResponse])
async def list_journeys(
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    return scoped_query(db, Journey, ctx).order_by(Journey.created_at.desc()).all()


@router.post("", response_model=JourneyResponse)
async def create_journey(
    payload: JourneyCreate,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    journey = create_scoped(db, Journey, ctx, **payload.model_dump())
    db.commit()
    db.refresh(journey)
    return journey


@router.get("/{journey_id}", response_model=JourneyResponse)
async def get_journey(
    journey_id: UUID,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    return get_scoped_or_404(db, Journey, ctx, journey_id, "Journey")


@router.put("/{journey_id}", response_model=JourneyResponse)
async def update_journey(
    journey_id: UUID,
    payload: JourneyUpdate,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    journey = get_scoped_or_404(db, Journey, ctx, journey_id, "Journey")
    journey.update_from_dict(payload.model_dump(exclude_unset=True))
    db.commit()
    db.refresh(journey)
    return journey
