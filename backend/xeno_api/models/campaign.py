"""
Campaign model with delivery funnel and spend
"""

from sqlalchemy import Column, String, Integer, Float, DateTime, Uuid, ForeignKey, Index
from sqlalchemy.orm import relationship

from xeno_api.models.base import TenantScopedModel

CAMPAIGN_CHANNELS = ("Email", "SMS", "WhatsApp", "Push", "RCS")
CAMPAIGN_STATUSES = ("draft", "live", "paused", "completed")


class Campaign(TenantScopedModel):
    """
    Marketing campaign sent over one channel
    """
    __tablename__ = "campaigns"

    segment_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("segments.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    name = Column(String(255), nullable=False)
    channel = Column(String(50), nullable=False, comment="Email, SMS, WhatsApp, Push, RCS")
    status = Column(String(20), default="draft", nullable=False, index=True)

    # Delivery funnel
    sent = Column(Integer, default=0, nullable=False)
    delivered = Column(Integer, default=0, nullable=False)
    opened = Column(Integer, default=0, nullable=False)
    clicked = Column(Integer, default=0, nullable=False)
    converted = Column(Integer, default=0, nullable=False)

    # Money
    revenue = Column(Float, default=0.0, nullable=False)
    cost = Column(Float, default=0.0, nullable=False)

    started_at = Column(DateTime(timezone=True), nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    segment = relationship("Segment", back_populates="campaigns")

    __table_args__ = (
        Index('ix_campaigns_tenant_created', 'tenant_id', 'created_at'),
    )
