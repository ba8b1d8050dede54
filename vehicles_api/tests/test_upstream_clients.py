import httpx
import pytest
from vehicles_api.schemas.car import Location
from vehicles_api.services.price_client import PriceClient, PRICE_UNAVAILABLE
from vehicles_api.services.maps_client import MapsClient


def pricing_handler(request: httpx.Request) -> httpx.Response:
    assert request.url.path == "/services/price"
    vehicle_id = request.url.params["vehicleId"]
    if vehicle_id == "1":
        return httpx.Response(200, json={"currency": "USD", "price": "20000.00", "vehicle_id": 1})
    if vehicle_id == "2":
        return httpx.Response(200, json={"unexpected": True})
    if vehicle_id == "3":
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.Response(404, json={"detail": f"Price for vehicle {vehicle_id} not found"})


def maps_handler(request: httpx.Request) -> httpx.Response:
    assert request.url.path == "/maps"
    lat = float(request.url.params["lat"])
    lon = float(request.url.params["lon"])
    if (lat, lon) == (1.0, 1.0):
        return httpx.Response(200, json={
            "address": "123 Main St", "city": "Springfield", "state": "IL", "zip": "62701",
        })
    if (lat, lon) == (2.0, 2.0):
        return httpx.Response(200, content=b"not json")
    return httpx.Response(503)


@pytest.fixture
async def pricing_http():
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(pricing_handler), base_url="http://pricing"
    ) as client:
        yield client


@pytest.fixture
async def maps_http():
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(maps_handler), base_url="http://maps"
    ) as client:
        yield client


class TestPriceClient:

    async def test_formats_currency_and_amount(self, pricing_http):
        assert await PriceClient(pricing_http).get_price(1) == "USD 20000.00"

    @pytest.mark.parametrize("vehicle_id", [2, 3, 99])
    async def test_failures_degrade_to_placeholder(self, pricing_http, vehicle_id):
        assert await PriceClient(pricing_http).get_price(vehicle_id) == PRICE_UNAVAILABLE


class TestMapsClient:

    async def test_fills_address_fields(self, maps_http):
        location = Location(lat=1.0, lon=1.0)

        resolved = await MapsClient(maps_http).get_address(location)

        assert resolved.address == "123 Main St"
        assert resolved.city == "Springfield"
        assert resolved.state == "IL"
        assert resolved.zip == "62701"
        assert (resolved.lat, resolved.lon) == (1.0, 1.0)
        assert location.address is None

    @pytest.mark.parametrize("lat,lon", [(2.0, 2.0), (5.0, 5.0)])
    async def test_failures_leave_address_empty(self, maps_http, lat, lon):
        location = Location(lat=lat, lon=lon, address="stale", city="stale")

        resolved = await MapsClient(maps_http).get_address(location)

        assert resolved.address is None
        assert resolved.city is None
        assert (resolved.lat, resolved.lon) == (lat, lon)
