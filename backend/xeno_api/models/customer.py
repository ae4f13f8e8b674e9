"""
Customer model: storefront shoppers owned by a tenant
"""

from sqlalchemy import Column, String, Boolean, DateTime, Integer, Float, Index
from sqlalchemy.orm import validates

from xeno_api.models.base import TenantScopedModel

LIFECYCLE_STAGES = ("new", "active", "at_risk", "churned")


class Customer(TenantScopedModel):
    """
    Customer record with spend and engagement metrics
    """
    __tablename__ = "customers"

    email = Column(String(255), nullable=False, index=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)

    # Spend metrics (denormalized from orders)
    total_spent = Column(Float, default=0.0, nullable=False)
    orders_count = Column(Integer, default=0, nullable=False)
    lifetime_value = Column(Float, default=0.0, nullable=False)

    lifecycle = Column(
        String(20),
        default="new",
        nullable=False,
        comment="Lifecycle stage (new, active, at_risk, churned)"
    )

    email_engaged = Column(Boolean, default=False, nullable=False)
    last_order_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index('ix_customers_tenant_lifecycle', 'tenant_id', 'lifecycle'),
    )

    @validates('lifecycle')
    def validate_lifecycle(self, key: str, stage: str) -> str:
        if stage not in LIFECYCLE_STAGES:
            raise ValueError(f"Lifecycle must be one of: {', '.join(LIFECYCLE_STAGES)}")
        return stage
