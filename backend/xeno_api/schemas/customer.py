"""
Pydantic schemas for customers
"""

from pydantic import EmailStr, Field
from typing import Literal, Optional
from datetime import datetime
from uuid import UUID

from xeno_api.schemas.base import CamelModel

Lifecycle = Literal["new", "active", "at_risk", "churned"]


class CustomerCreate(CamelModel):
    email: EmailStr
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    total_spent: float = Field(0.0, ge=0)
    orders_count: int = Field(0, ge=0)
    lifetime_value: float = Field(0.0, ge=0)
    lifecycle: Lifecycle = "new"
    email_engaged: bool = False


class CustomerResponse(CamelModel):
    id: UUID
    tenant_id: UUID
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    total_spent: float
    orders_count: int
    lifetime_value: float
    lifecycle: str
    email_engaged: bool
    last_order_at: Optional[datetime] = None
    created_at: datetime
