"""
Journey model: automated multi-step customer flows
"""

from sqlalchemy import Column, String, Text, Integer, Float

from xeno_api.models.base import TenantScopedModel

JOURNEY_STATUSES = ("draft", "active", "paused")


class Journey(TenantScopedModel):
    __tablename__ = "journeys"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), default="draft", nullable=False)
    enrolled_count = Column(Integer, default=0, nullable=False)
    completed_count = Column(Integer, default=0, nullable=False)
    conversion_rate = Column(Float, default=0.0, nullable=False)
