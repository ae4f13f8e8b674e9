"""
Database health check used by the health endpoint
"""

from sqlalchemy import text
from typing import Any, Dict
import logging
import time

from xeno_api.core.database import Database

logger = logging.getLogger(__name__)


class DatabaseHealthCheck:
    """Round-trips a trivial query through the app's engine"""

    def __init__(self, database: Database):
        self.database = database

    def check_connection(self) -> Dict[str, Any]:
        """
        Returns:
            {"connected": bool, "latency_ms": float | None}
        """
        started = time.perf_counter()
        try:
            with self.database.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return {"connected": False, "latency_ms": None}

        return {
            "connected": True,
            "latency_ms": round((time.perf_counter() - started) * 1000, 2),
        }
