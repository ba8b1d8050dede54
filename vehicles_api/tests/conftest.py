import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vehicles_api.main import app
from vehicles_api.db.session import get_db
from vehicles_api.models.base import Base
from vehicles_api.models.car import Car  # noqa: F401
from vehicles_api.services.cars import CarService, get_price_client, get_maps_client
from vehicles_api.services.price_client import PRICE_UNAVAILABLE


TEST_DATABASE_URL = "sqlite+aiosqlite://"


class FakePriceClient:
    def __init__(self, prices=None):
        self.prices = dict(prices or {})
        self.calls = []

    async def get_price(self, vehicle_id):
        self.calls.append(vehicle_id)
        return self.prices.get(vehicle_id, PRICE_UNAVAILABLE)


class FakeMapsClient:
    def __init__(self, addresses=None):
        self.addresses = dict(addresses or {})
        self.calls = []

    async def get_address(self, location):
        self.calls.append((location.lat, location.lon))
        found = self.addresses.get((location.lat, location.lon))
        if found is None:
            return location.model_copy()
        return location.model_copy(update=found)


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
def price_client():
    return FakePriceClient({1: "$20,000.00"})


@pytest.fixture
def maps_client():
    return FakeMapsClient({
        (1.0, 1.0): {"address": "123 Main St", "city": "Springfield", "state": "IL", "zip": "62701"},
    })


@pytest.fixture
def car_service(db, price_client, maps_client):
    return CarService(db, price_client, maps_client)


@pytest.fixture
async def test_client(session_factory, price_client, maps_client):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_price_client] = lambda: price_client
    app.dependency_overrides[get_maps_client] = lambda: maps_client

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def valid_car_data():
    return {
        "condition": "USED",
        "details": {
            "body": "sedan",
            "model": "Impala",
            "manufacturer": "Chevrolet",
            "number_of_doors": 4,
            "fuel_type": "Gasoline",
            "engine": "3.6L V6",
            "mileage": 32280,
            "model_year": 2018,
            "production_year": 2018,
            "external_color": "white",
        },
        "location": {"lat": 1.0, "lon": 1.0},
    }
