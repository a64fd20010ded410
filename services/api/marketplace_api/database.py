"""
Database Session Management

Provides async database session dependency for FastAPI endpoints.
The session factory is created at startup and kept on app.state.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    On PostgreSQL the session gets a server-side statement_timeout
    (DB_STATEMENT_TIMEOUT_MS) so a slow search is cancelled by the
    database itself.

    Yields:
        AsyncSession for database operations

    Usage:
        @router.get("/endpoint")
        async def endpoint(db: AsyncSession = Depends(get_db)):
            result = await db.execute(select(Model))
            ...
    """
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        timeout_ms = settings.DB_STATEMENT_TIMEOUT_MS
        if timeout_ms > 0 and session.bind.dialect.name == "postgresql":
            # SET does not accept bind parameters; value is a validated int
            await session.execute(text(f"SET statement_timeout = {int(timeout_ms)}"))
        yield session
