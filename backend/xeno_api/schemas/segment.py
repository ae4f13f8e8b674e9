"""
Pydantic schemas for segments
"""

from pydantic import Field
from typing import List, Literal, Optional
from datetime import datetime
from uuid import UUID

from xeno_api.schemas.base import CamelModel

SegmentType = Literal["custom", "behavioral", "rfm", "lifecycle"]


class SegmentCreate(CamelModel):
    """Schema for creating a segment"""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=2000)
    type: SegmentType = Field("custom", description="Segment type")


class SegmentMembersAdd(CamelModel):
    """Customers to add to a segment"""

    customer_ids: List[UUID] = Field(..., min_length=1, max_length=1000)


class SegmentSummary(CamelModel):
    id: UUID
    name: str
    description: Optional[str] = None
    customer_count: int
    type: str


class SegmentResponse(SegmentSummary):
    tenant_id: UUID
    member_count: int = 0
    created_at: datetime
    updated_at: datetime
