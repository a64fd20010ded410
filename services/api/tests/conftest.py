"""
Fixtures for API tests.

Each test gets a fresh in-memory SQLite database (aiosqlite) and an app
whose state points at it. ASGITransport does not run the lifespan, so
the state is filled in here.
"""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from locations import LocationMatcher, build_default_registry
from models import Base, Equipment, ManpowerProfile, build_session_factory
from marketplace_api.main import create_app

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def location_matcher():
    return LocationMatcher(build_default_registry())


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def app(engine, session_factory, location_matcher):
    app = create_app()
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.location_matcher = location_matcher
    return app


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def add_equipment(session_factory):
    """Insert an equipment listing; later inserts are newer."""
    ticks = count(1)

    async def _add(**overrides) -> Equipment:
        values = {
            "user_id": 1,
            "equipment_name": "Excavator",
            "equipment_type": "Earthmoving",
            "location": "Chennai",
            "contact_person": "Owner",
            "contact_number": "9800000000",
            "contact_email": "owner@example.com",
            "availability": "available",
            "created_at": BASE_TIME + timedelta(minutes=next(ticks)),
        }
        values.update(overrides)
        async with session_factory() as session:
            item = Equipment(**values)
            session.add(item)
            await session.commit()
            return item

    return _add


@pytest.fixture
def add_profile(session_factory):
    """Insert a manpower profile; later inserts are newer."""
    ticks = count(1)

    async def _add(**overrides) -> ManpowerProfile:
        n = next(ticks)
        values = {
            "user_id": n,
            "first_name": "Worker",
            "last_name": str(n),
            "email": f"worker{n}@example.com",
            "mobile_number": "9800000000",
            "location": "Chennai",
            "job_title": "Technician",
            "availability_status": "available",
            "created_at": BASE_TIME + timedelta(minutes=n),
        }
        values.update(overrides)
        async with session_factory() as session:
            profile = ManpowerProfile(**values)
            session.add(profile)
            await session.commit()
            return profile

    return _add
