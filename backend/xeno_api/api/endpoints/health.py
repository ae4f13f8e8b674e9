"""
Health check endpoint
"""

from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from xeno_api.api.deps import get_database, get_settings_from_app
from xeno_api.core.config import Settings
from xeno_api.core.database import Database
from xeno_api.core.database_utils import DatabaseHealthCheck

router = APIRouter()


@router.get("/health")
async def health_check(
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings_from_app),
):
    """Health check endpoint for monitoring"""
    db_health = DatabaseHealthCheck(database).check_connection()
    connected = db_health["connected"]
    return {
        "status": "healthy" if connected else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected" if connected else "disconnected",
        "version": settings.VERSION,
    }
