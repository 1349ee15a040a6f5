"""Shared fixtures: test settings, in-memory SQLite and an HTTP client."""

import os

# Must be set before wallet_service reads its cached settings.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE__URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECURITY__SECRET_KEY", "test-secret-key-for-wallet-service")
os.environ.setdefault("SECURITY__BCRYPT_ROUNDS", "4")

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from wallet_service.db import models  # noqa: F401
from wallet_service.infrastructure.database.base import Base
from wallet_service.interfaces.http.deps import get_db_session
from wallet_service.main import create_app

from tests.fakes import InMemoryUserRepository, InMemoryWalletRepository


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    app = create_app()

    async def override_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_session
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def wallet_repository():
    return InMemoryWalletRepository()
