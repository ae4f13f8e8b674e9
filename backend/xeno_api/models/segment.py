"""
Segment models: named audiences and their members
"""

from sqlalchemy import Column, String, Text, Integer, Uuid, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from xeno_api.models.base import BaseModel, TenantScopedModel

SEGMENT_TYPES = ("custom", "behavioral", "rfm", "lifecycle")


class Segment(TenantScopedModel):
    """
    Audience segment used to target campaigns
    """
    __tablename__ = "segments"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String(50), default="custom", nullable=False)
    customer_count = Column(Integer, default=0, nullable=False)

    members = relationship("SegmentMember", back_populates="segment", cascade="all, delete-orphan")
    campaigns = relationship("Campaign", back_populates="segment")

    @property
    def member_count(self) -> int:
        return len(self.members)


class SegmentMember(BaseModel):
    """
    Membership of a customer in a segment
    """
    __tablename__ = "segment_members"

    segment_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("segments.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    customer_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    segment = relationship("Segment", back_populates="members")
    customer = relationship("Customer")

    __table_args__ = (
        UniqueConstraint('segment_id', 'customer_id', name='uq_segment_members_segment_customer'),
    )
