"""
Health Check Endpoints

Database connectivity probe for container orchestration.
"""

import asyncio

from fastapi import APIRouter, HTTPException, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from config.constants import Timeouts
from observability import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/health", tags=["health"])


async def _ping(engine) -> None:
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


@router.get("/db")
async def database_health(request: Request):
    """
    Check that the database answers a trivial query.

    Raises:
        HTTPException: 503 if the database is unreachable or too slow
    """
    try:
        await asyncio.wait_for(_ping(request.app.state.engine), timeout=Timeouts.DB_HEALTH_CHECK)
    except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
        logger.error(f"Database health check failed: {e}")
        raise HTTPException(status_code=503, detail="Database unavailable") from e

    return {"status": "healthy", "database": "connected"}
