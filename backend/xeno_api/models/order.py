"""
Order models imported from the storefront
"""

from sqlalchemy import Column, String, Integer, Float, Uuid, ForeignKey, Index
from sqlalchemy.orm import relationship

from xeno_api.models.base import BaseModel, TenantScopedModel


class Order(TenantScopedModel):
    """
    Storefront order, optionally linked to a customer
    """
    __tablename__ = "orders"

    customer_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("customers.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    order_number = Column(String(50), nullable=True)
    total_price = Column(Float, default=0.0, nullable=False)
    currency = Column(String(3), default="INR", nullable=False)
    financial_status = Column(String(50), nullable=True)

    customer = relationship("Customer")
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")

    __table_args__ = (
        Index('ix_orders_tenant_created', 'tenant_id', 'created_at'),
    )


class OrderItem(BaseModel):
    """
    Line item of an order
    """
    __tablename__ = "order_items"

    order_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    title = Column(String(255), nullable=False)
    quantity = Column(Integer, default=1, nullable=False)
    price = Column(Float, default=0.0, nullable=False)

    order = relationship("Order", back_populates="items")
