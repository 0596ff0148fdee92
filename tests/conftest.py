"""Pytest configuration for all tests."""

import os
from typing import AsyncGenerator

os.environ.setdefault("NOVA_ENVIRONMENT", "testing")
os.environ.setdefault("NOVA_LOG_FORMAT", "console")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from nova_users.core.i18n import get_translator, set_locale
from nova_users.infrastructure.persistence import models  # noqa: F401
from nova_users.infrastructure.persistence.database import Base, enable_sqlite_foreign_keys
from nova_users.infrastructure.persistence.models import RoleModel, UserModel


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    enable_sqlite_foreign_keys(engine.sync_engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database dependency."""
    from nova_users.infrastructure.persistence.database import get_db_session
    from nova_users.infrastructure.web.app import app

    app.dependency_overrides[get_db_session] = lambda: db_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def admin_role(db_session: AsyncSession) -> RoleModel:
    """Create an 'Administrator' role with two users."""
    role = RoleModel(name="Administrator", slug="administrator", description="Website Administrator")
    db_session.add(role)
    await db_session.flush()

    db_session.add_all(
        [
            UserModel(username="admin", email="admin@novaframework.dev", role_id=role.id),
            UserModel(username="marcus", email="marcus@novaframework.dev", role_id=role.id),
        ]
    )
    await db_session.commit()
    await db_session.refresh(role)
    return role


@pytest.fixture(autouse=True)
def _reset_i18n():
    """Each test starts with the default locale and no catalogs."""
    set_locale(None)
    get_translator().clear()
    yield
    set_locale(None)
    get_translator().clear()
