"""
Dashboard and analytics aggregation over a tenant's own rows
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from sqlalchemy import func
from sqlalchemy.orm import Session

from xeno_api.models import Campaign, Customer, Journey, Order, Segment
from xeno_api.services import metrics
from xeno_api.tenancy import TenantContext, scoped_query

logger = logging.getLogger(__name__)


def window_start(days: int, now: datetime = None) -> datetime:
    return (now or datetime.now(timezone.utc)) - timedelta(days=days)


def build_dashboard_stats(db: Session, ctx: TenantContext, days: int) -> Dict[str, Any]:
    """
    KPIs, campaign funnel, lifecycle buckets, segments and journeys for the
    dashboard. Order totals are limited to the last `days` days.
    """
    since = window_start(days)

    campaigns = scoped_query(db, Campaign, ctx).order_by(Campaign.created_at.desc()).all()

    customers = (
        scoped_query(db, Customer, ctx)
        .with_entities(Customer.lifecycle, Customer.orders_count, Customer.email_engaged)
        .all()
    )
    lifecycle = metrics.lifecycle_breakdown(row.lifecycle for row in customers)

    order_count, order_revenue = (
        scoped_query(db, Order, ctx)
        .filter(Order.created_at >= since)
        .with_entities(func.count(Order.id), func.coalesce(func.sum(Order.total_price), 0.0))
        .one()
    )

    segments = scoped_query(db, Segment, ctx).order_by(Segment.created_at.desc()).all()
    journeys = scoped_query(db, Journey, ctx).order_by(Journey.created_at.desc()).all()

    logger.debug(
        f"Dashboard stats tenant={ctx.tenant_id} campaigns={len(campaigns)} "
        f"customers={len(customers)} orders={order_count}"
    )

    return {
        "kpis": {
            "revenue_influenced": metrics.total_revenue(campaigns),
            "active_campaigns": sum(1 for c in campaigns if c.status == "live"),
            "total_customers": len(customers),
            "total_orders": order_count or 0,
            "order_revenue": float(order_revenue or 0.0),
            "repeat_rate": metrics.repeat_rate(customers),
            "loyalty_engagement": metrics.engagement_rate(customers),
            "customer_growth": lifecycle["new"],
            "top_channel": metrics.top_channel(campaigns),
        },
        "campaigns": [
            {
                "id": c.id,
                "name": c.name,
                "channel": c.channel,
                "status": c.status,
                "revenue": c.revenue,
                "roi": metrics.campaign_roi(c, precision=1),
                "ctr": metrics.campaign_ctr(c),
                "sent": c.sent,
                "opened": c.opened,
                "clicked": c.clicked,
                "converted": c.converted,
            }
            for c in campaigns
        ],
        "lifecycle": lifecycle,
        "segments": segments,
        "journeys": journeys,
    }


def build_analytics(db: Session, ctx: TenantContext, days: int) -> Dict[str, Any]:
    """
    Channel rollups and top campaigns by revenue for campaigns created in the
    last `days` days.
    """
    campaigns = (
        scoped_query(db, Campaign, ctx)
        .filter(Campaign.created_at >= window_start(days))
        .all()
    )

    return {
        "channel_performance": metrics.channel_performance(campaigns),
        "top_campaigns": metrics.top_campaigns(campaigns),
        "total_revenue": metrics.total_revenue(campaigns),
        "total_cost": metrics.total_cost(campaigns),
        "avg_roi": metrics.average_roi(campaigns),
    }
