"""
Pydantic schemas for journeys
"""

from pydantic import Field, field_validator
from typing import Literal, Optional
from datetime import datetime
from uuid import UUID

from xeno_api.schemas.base import CamelModel

JourneyStatus = Literal["draft", "active", "paused"]


class JourneyCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=2000)
    status: JourneyStatus = "draft"


class JourneyUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=2000)
    status: Optional[JourneyStatus] = None

    @field_validator("name", "status")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Value cannot be null")
        return v


class JourneySummary(CamelModel):
    id: UUID
    name: str
    status: str
    enrolled_count: int
    conversion_rate: float


class JourneyResponse(JourneySummary):
    tenant_id: UUID
    description: Optional[str] = None
    completed_count: int
    created_at: datetime
    updated_at: datetime
