"""
Pydantic schemas for API request/response validation
"""

from .base import CamelModel, MessageResponse
from .auth import RegisterRequest, LoginRequest, UserProfile, AuthResponse
from .campaign import CampaignCreate, CampaignUpdate, CampaignResponse, CampaignWithSegment
from .customer import CustomerCreate, CustomerResponse
from .segment import SegmentCreate, SegmentMembersAdd, SegmentSummary, SegmentResponse
from .order import OrderResponse, OrderItemResponse, OrderCustomer
from .journey import JourneyCreate, JourneyUpdate, JourneySummary, JourneyResponse
from .analytics import (
    DashboardKpis, DashboardCampaign, LifecycleBreakdown, DashboardStats,
    ChannelPerformance, TopCampaign, AnalyticsResponse
)
from .shopify import ShopifySyncRequest, SyncStartResponse, SyncLogResponse

__all__ = [
    "CamelModel", "MessageResponse",
    # Auth schemas
    "RegisterRequest", "LoginRequest", "UserProfile", "AuthResponse",
    # Resource schemas
    "CampaignCreate", "CampaignUpdate", "CampaignResponse", "CampaignWithSegment",
    "CustomerCreate", "CustomerResponse",
    "SegmentCreate", "SegmentMembersAdd", "SegmentSummary", "SegmentResponse",
    "OrderResponse", "OrderItemResponse", "OrderCustomer",
    "JourneyCreate", "JourneyUpdate", "JourneySummary", "JourneyResponse",
    # Aggregate schemas
    "DashboardKpis", "DashboardCampaign", "LifecycleBreakdown", "DashboardStats",
    "ChannelPerformance", "TopCampaign", "AnalyticsResponse",
    # Sync schemas
    "ShopifySyncRequest", "SyncStartResponse", "SyncLogResponse",
]
