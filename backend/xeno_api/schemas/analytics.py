"""
Pydantic schemas for dashboard and analytics aggregates
"""

from pydantic import Field
from typing import Dict, List, Optional
from uuid import UUID

from xeno_api.schemas.base import CamelModel
from xeno_api.schemas.journey import JourneySummary
from xeno_api.schemas.segment import SegmentSummary


class DashboardKpis(CamelModel):
    revenue_influenced: float
    active_campaigns: int
    total_customers: int
    total_orders: int
    order_revenue: float
    repeat_rate: float
    loyalty_engagement: float
    customer_growth: int
    top_channel: Optional[str] = None


class DashboardCampaign(CamelModel):
    id: UUID
    name: str
    channel: str
    status: str
    revenue: float
    roi: float
    ctr: float
    sent: int
    opened: int
    clicked: int
    converted: int


class LifecycleBreakdown(CamelModel):
    new: int = 0
    active: int = 0
    at_risk: int = Field(0, alias="at_risk")
    churned: int = 0


class DashboardStats(CamelModel):
    kpis: DashboardKpis
    campaigns: List[DashboardCampaign]
    lifecycle: LifecycleBreakdown
    segments: List[SegmentSummary]
    journeys: List[JourneySummary]


class ChannelPerformance(CamelModel):
    revenue: float = 0.0
    cost: float = 0.0
    count: int = 0


class TopCampaign(CamelModel):
    name: str
    revenue: float
    channel: str
    roi: float


class AnalyticsResponse(CamelModel):
    channel_performance: Dict[str, ChannelPerformance]
    top_campaigns: List[TopCampaign]
    total_revenue: float
    total_cost: float
    avg_roi: float = Field(..., alias="avgROI")
