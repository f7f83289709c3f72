"""Shared fixtures: a fresh SQLite database per test and the HTTP client."""

import os
import tempfile
from datetime import datetime, timedelta

# Settings and the module-level engine read these on import
_TEST_DIR = tempfile.mkdtemp(prefix="drivesafe-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DIR}/app.db")
os.environ.setdefault("LOG_DIR", os.path.join(_TEST_DIR, "logs"))

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import drivesafe.models  # noqa: F401
from drivesafe.database.base import Base
from drivesafe.database.connection import get_db
from drivesafe.services.drive_session_service import DriveSessionService
from drivesafe.utils.user_locks import UserLockRegistry


class FakeClock:
    """Callable clock the tests move by hand."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False
    )


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 10, 19, 8, 0, 0))


@pytest.fixture
def locks():
    return UserLockRegistry()


@pytest.fixture
def service(db, clock, locks):
    return DriveSessionService(db, clock=clock, locks=locks)


@pytest_asyncio.fixture
async def client(session_factory):
    from drivesafe.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
