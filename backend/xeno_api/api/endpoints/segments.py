"""
Segment endpoints
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, selectinload
from typing import List
from uuid import UUID
import logging

from xeno_api.api.deps import TenantContext, get_db, get_tenant_context
from xeno_api.models import Customer, Segment, SegmentMember
from xeno_api.schemas.base import MessageResponse
from xeno_api.schemas.segment import SegmentCreate, SegmentMembersAdd, SegmentResponse
from xeno_api.tenancy import (
    create_scoped,
    delete_scoped,
    get_scoped_many_or_404,
    get_scoped_or_404,
    scoped_query,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[SegmentResponse])
async def list_segments(
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    return (
        scoped_query(db, Segment, ctx)
        .options(selectinload(Segment.members))
        .order_by(Segment.created_at.desc())
        .all()
    )


@router.post("", response_model=SegmentResponse)
async def create_segment(
    payload: SegmentCreate,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    segment = create_scoped(db, Segment, ctx, **payload.model_dump())
    db.commit()
    db.refresh(segment)
    return segment


@router.get("/{segment_id}", response_model=SegmentResponse)
async def get_segment(
    segment_id: UUID,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    return get_scoped_or_404(db, Segment, ctx, segment_id, "Segment")


@router.delete("/{segment_id}", response_model=MessageResponse)
async def delete_segment(
    segment_id: UUID,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    delete_scoped(db, Segment, ctx, segment_id, "Segment")
    db.commit()
    return {"message": "Segment deleted successfully"}


@router.post("/{segment_id}/members", response_model=SegmentResponse)
async def add_segment_members(
    segment_id: UUID,
    payload: SegmentMembersAdd,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Add the tenant's customers to a segment and refresh its customer count.

    Customers already in the segment are skipped; any id outside the tenant
    fails the whole request.
    """
    segment = get_scoped_or_404(db, Segment, ctx, segment_id, "Segment")
    customers = get_scoped_many_or_404(db, Customer, ctx, payload.customer_ids, "Customer")

    existing = {member.customer_id for member in segment.members}
    added = 0
    for customer in customers:
        if customer.id in existing:
            continue
        segment.members.append(SegmentMember(customer_id=customer.id))
        added += 1

    segment.customer_count = len(segment.members)
    db.commit()
    db.refresh(segment)

    logger.info(f"Added {added} members to segment {segment.id} for tenant {ctx.tenant_id}")
    return segment
