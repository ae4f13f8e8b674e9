"""
Database models package
"""

from .base import Base, BaseModel, TenantScopedModel
from .tenant import Tenant, User
from .customer import Customer
from .segment import Segment, SegmentMember
from .campaign import Campaign
from .order import Order, OrderItem
from .journey import Journey
from .sync_log import SyncLog

__all__ = [
    "Base", "BaseModel", "TenantScopedModel", "Tenant", "User", "Customer",
    "Segment", "SegmentMember", "Campaign", "Order", "OrderItem", "Journey", "SyncLog",
]
