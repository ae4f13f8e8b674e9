"""
Pydantic schemas for orders
"""

from typing import List, Optional
from datetime import datetime
from uuid import UUID

from xeno_api.schemas.base import CamelModel


class OrderItemResponse(CamelModel):
    id: UUID
    title: str
    quantity: int
    price: float


class OrderCustomer(CamelModel):
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class OrderResponse(CamelModel):
    id: UUID
    tenant_id: UUID
    customer_id: Optional[UUID] = None
    order_number: Optional[str] = None
    total_price: float
    currency: str
    financial_status: Optional[str] = None
    created_at: datetime
    customer: Optional[OrderCustomer] = None
    items: List[OrderItemResponse] = []
