"""
Health check endpoint
"""
import logging
from datetime import datetime, timezone

import psutil
from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from travel_tracker.config import get_settings
from travel_tracker.core.db import engine
from travel_tracker.core.error_handlers import error_handler

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """Application and database status"""
    settings = get_settings()
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        database = {"status": "healthy", "connection": "ok"}
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        database = {"status": "unhealthy", "error": str(e)}

    return {
        "status": "healthy" if database["status"] == "healthy" else "unhealthy",
        "version": settings.app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "details": {
            "database": database,
            "process": {
                "memory_mb": round(psutil.Process().memory_info().rss / 1024 / 1024, 2),
            },
        },
        "error_statistics": error_handler.get_error_statistics(),
    }
