"""
Customer endpoints
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID

from xeno_api.api.deps import TenantContext, get_db, get_tenant_context
from xeno_api.models import Customer
from xeno_api.schemas.customer import CustomerCreate, CustomerResponse, Lifecycle
from xeno_api.tenancy import create_scoped, get_scoped_or_404, scoped_query

router = APIRouter()


@router.get("", response_model=List[CustomerResponse])
async def list_customers(
    lifecycle: Optional[Lifecycle] = Query(None, description="Only customers in this lifecycle stage"),
    limit: int = Query(100, ge=1, le=1000),
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Customers ordered by lifetime value, highest first
    """
    query = scoped_query(db, Customer, ctx)
    if lifecycle:
        query = query.filter(Customer.lifecycle == lifecycle)
    return query.order_by(Customer.lifetime_value.desc()).limit(limit).all()


@router.get("/top", response_model=List[CustomerResponse])
async def top_customers(
    limit: int = Query(10, ge=1, le=1000),
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    return (
        scoped_query(db, Customer, ctx)
        .order_by(Customer.total_spent.desc())
        .limit(limit)
        .all()
    )


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: UUID,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    return get_scoped_or_404(db, Customer, ctx, customer_id, "Customer")


@router.post("", response_model=CustomerResponse)
async def create_customer(
    payload: CustomerCreate,
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    customer = create_scoped(db, Customer, ctx, **payload.model_dump())
    db.commit()
    db.refresh(customer)
    return customer
