"""
Order endpoints
"""

from datetime import datetime
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session, joinedload, selectinload
from typing import List, Optional
from uuid import UUID

from xeno_api.api.deps import TenantContext, get_db, get_tenant_context
from xeno_api.core.errors import NotFound
from xeno_api.models import Order
from xeno_api.schemas.order import OrderResponse
from xeno_api.tenancy import scoped_query

router = APIRouter()


def _orders_with_details(db: Session, ctx: TenantContext):
    return scoped_query(db, Order, ctx).options(
        joinedload(Order.customer),
        selectinload(Order.items),
    )


@router.get("", response_model=List[OrderResponse])
async def list_orders(
    from_: Optional[datetime] = Query(None, alias="from", description="Range start, inclusive"),
    to: Optional[datetime] = Query(None, description="Range end, inclusive"),
    limit: int = Query(100, ge=1, le=1000),
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Orders with customer summary and line items, newest first.
    The date range applies only when both ends are given.
    """
    query = _orders_with_details(db, ctx)
    if from_ is not None and to is not None:
        query = query.filter(Order.created_at >= from_, Order.created_at <= to)
    return query.order_by(Order.created_at.desc()).limit(limit).all()


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: UUID,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    order = _orders_with_details(db, ctx).filter(Order.id == order_id).one_or_none()
    if order is None:
        raise NotFound("Order not found")
    return order
