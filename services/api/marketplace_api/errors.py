"""
Store failure handling shared by the search routers.

Search endpoints never retry; a failed query becomes a 500 whose detail
carries the underlying message for diagnostics.
"""

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from observability import get_logger, record_search_error

logger = get_logger(__name__)


def store_error(search_type: str, msg: str, exc: SQLAlchemyError) -> HTTPException:
    """Log a store failure and build the HTTPException to raise."""
    logger.error(f"{msg}: {exc}", extra={"search_type": search_type})
    record_search_error(search_type)
    return HTTPException(
        status_code=500,
        detail={"success": False, "msg": msg, "error": str(exc)},
    )
