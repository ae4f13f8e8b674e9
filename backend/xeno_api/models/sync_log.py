"""
Sync log model recording storefront sync requests
"""

from sqlalchemy import Column, String, Text, Integer, DateTime

from xeno_api.models.base import TenantScopedModel

SYNC_IN_PROGRESS = "in_progress"
SYNC_COMPLETED = "completed"
SYNC_FAILED = "failed"


class SyncLog(TenantScopedModel):
    """
    One sync request and its outcome
    """
    __tablename__ = "sync_logs"

    resource_type = Column(String(50), default="all", nullable=False)
    status = Column(String(20), default=SYNC_IN_PROGRESS, nullable=False, index=True)
    records_processed = Column(Integer, default=0, nullable=False)
    error_message = Column(Text, nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
