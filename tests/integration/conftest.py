import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from main import app
from app.core.database import get_async_session
from app.models import *  # Import all models
from app.models.base import Base
from app.db.seeds.initial_data import create_initial_data

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite://"

@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()

@pytest.fixture
def session_maker(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

@pytest.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session

@pytest.fixture
async def catalog(session_maker) -> dict:
    """Demo store, locations and products"""
    async with session_maker() as session:
        data = await create_initial_data(session)

    store = data["store"]
    bar, kitchen, cooler = data["locations"]
    vodka, olive_oil, lemons = data["products"]
    return {
        "store_id": store.id,
        "bar_id": bar.id,
        "kitchen_id": kitchen.id,
        "cooler_id": cooler.id,
        "vodka_id": vodka.id,
        "olive_oil_id": olive_oil.id,
        "lemons_id": lemons.id,
    }

@pytest.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Create test client"""
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        """Override database dependency for testing"""
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
