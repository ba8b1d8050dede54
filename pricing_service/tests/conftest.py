import pytest
from decimal import Decimal
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pricing_service.main import app
from pricing_service.db.session import get_db
from pricing_service.models.base import Base
from pricing_service.models.price import Price


TEST_DATABASE_URL = "sqlite+aiosqlite://"


class FakeRedis:
    def __init__(self):
        self.store = {}
        self.expiry = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.store[key] = value.encode() if isinstance(value, str) else value
        self.expiry[key] = ex


class FailingRedis:
    def __init__(self):
        self.calls = []

    async def get(self, key):
        self.calls.append(("get", key))
        raise ConnectionError("redis unavailable")

    async def set(self, key, value, ex=None):
        self.calls.append(("set", key))
        raise ConnectionError("redis unavailable")


@pytest.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def price_factory(db):
    async def _create_price(vehicle_id, price="20000.00", currency="USD"):
        row = Price(vehicle_id=vehicle_id, currency=currency, price=Decimal(price))
        db.add(row)
        await db.commit()
        return row

    return _create_price


@pytest.fixture
def fake_redis(monkeypatch):
    redis = FakeRedis()
    monkeypatch.setattr("pricing_service.api.prices.get_redis", lambda: redis)
    return redis


@pytest.fixture
async def test_client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def failing_redis(monkeypatch):
    redis = FailingRedis()
    monkeypatch.setattr("pricing_service.api.prices.get_redis", lambda: redis)
    return redis
