"""
Tenant-scoped query helpers.

All reads and writes of tenant-owned rows go through these helpers so the
tenant predicate is never forgotten:

    stmt = scoped_query(db, Campaign, ctx).filter(Campaign.status == "live")
    campaign = get_scoped_or_404(db, Campaign, ctx, campaign_id, "Campaign")
"""

import uuid
from typing import Any, Iterable, List, Type, TypeVar

from sqlalchemy.orm import Query, Session

from xeno_api.core.errors import NotFound
from xeno_api.models.base import TenantScopedModel
from xeno_api.tenancy.context import TenantContext

T = TypeVar("T", bound=TenantScopedModel)


def tenant_filter(model: Type[T], ctx: TenantContext):
    """Filter clause restricting model rows to the caller's tenant"""
    return model.tenant_id == ctx.tenant_id


def scoped_query(db: Session, model: Type[T], ctx: TenantContext) -> Query:
    """Query pre-filtered by tenant. Further filters can only narrow it."""
    return db.query(model).filter(tenant_filter(model, ctx))


def get_scoped_or_404(
    db: Session,
    model: Type[T],
    ctx: TenantContext,
    obj_id: uuid.UUID,
    label: str,
) -> T:
    """
    Fetch one row by id within the caller's tenant.

    A row owned by another tenant is reported exactly like a missing row.
    """
    obj = scoped_query(db, model, ctx).filter(model.id == obj_id).one_or_none()
    if obj is None:
        raise NotFound(f"{label} not found")
    return obj


def get_scoped_many_or_404(
    db: Session,
    model: Type[T],
    ctx: TenantContext,
    obj_ids: Iterable[uuid.UUID],
    label: str,
) -> List[T]:
    """Fetch several rows by id; any id outside the tenant is NotFound"""
    wanted = set(obj_ids)
    if not wanted:
        return []
    rows = scoped_query(db, model, ctx).filter(model.id.in_(wanted)).all()
    if len(rows) != len(wanted):
        raise NotFound(f"{label} not found")
    return rows


def create_scoped(db: Session, model: Type[T], ctx: TenantContext, **fields: Any) -> T:
    """
    Add a new row owned by the caller's tenant.

    Any tenant_id in fields is overwritten.
    """
    fields["tenant_id"] = ctx.tenant_id
    obj = model(**fields)
    db.add(obj)
    return obj


def delete_scoped(db: Session, model: Type[T], ctx: TenantContext, obj_id: uuid.UUID, label: str) -> None:
    """Delete by id and tenant; zero matched rows is NotFound"""
    obj = get_scoped_or_404(db, model, ctx, obj_id, label)
    db.delete(obj)
