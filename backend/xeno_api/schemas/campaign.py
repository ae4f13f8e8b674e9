"""
Pydantic schemas for campaigns
"""

from pydantic import Field, field_validator
from typing import Literal, Optional
from datetime import datetime
from uuid import UUID

from xeno_api.schemas.base import CamelModel
from xeno_api.schemas.segment import SegmentSummary

Channel = Literal["Email", "SMS", "WhatsApp", "Push", "RCS"]
CampaignStatus = Literal["draft", "live", "paused", "completed"]


class CampaignCreate(CamelModel):
    """
    Schema for launching a campaign. The budget becomes the campaign cost.
    """

    name: str = Field(..., min_length=1, max_length=255)
    channel: Channel
    segment_id: Optional[UUID] = None
    budget: float = Field(0.0, ge=0, description="Planned spend")


class CampaignUpdate(CamelModel):
    """Schema for updating a campaign; only supplied fields change"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    channel: Optional[Channel] = None
    status: Optional[CampaignStatus] = None
    segment_id: Optional[UUID] = None

    @field_validator("name", "channel", "status")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Value cannot be null")
        return v


class CampaignResponse(CamelModel):
    id: UUID
    tenant_id: UUID
    segment_id: Optional[UUID] = None
    name: str
    channel: str
    status: str
    sent: int
    delivered: int
    opened: int
    clicked: int
    converted: int
    revenue: float
    cost: float
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class CampaignWithSegment(CampaignResponse):
    segment: Optional[SegmentSummary] = None
