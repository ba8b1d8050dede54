"""Car service: create, read, update and delete cars, and gather
price and location data for single-car reads."""
import asyncio
import logging
from typing import List
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from vehicles_api.db.session import get_db
from vehicles_api.models.car import Car
from vehicles_api.schemas.car import CarIn, CarOut
from vehicles_api.core.exceptions import CarNotFoundError
from vehicles_api.core.http import get_pricing_http, get_maps_http
from vehicles_api.core.response_builders import build_car_response, build_location
from vehicles_api.services.price_client import PriceClient
from vehicles_api.services.maps_client import MapsClient

logger = logging.getLogger(__name__)


class CarService:

    def __init__(self, db: AsyncSession, price_client: PriceClient, maps_client: MapsClient):
        self.db = db
        self.price_client = price_client
        self.maps_client = maps_client

    async def list(self) -> List[Car]:
        """All stored cars, without price or address."""
        res = await self.db.execute(select(Car).order_by(Car.id))
        return res.scalars().all()

    async def _get(self, car_id: int) -> Car:
        car = await self.db.get(Car, car_id)
        if car is None:
            raise CarNotFoundError(car_id)
        return car

    async def find_by_id(self, car_id: int) -> CarOut:
        """Load a car and attach its current price and resolved address.

        Price and address are fetched on every call and never persisted.
        """
        car = await self._get(car_id)

        price, location = await asyncio.gather(
            self.price_client.get_price(car_id),
            self.maps_client.get_address(build_location(car)),
        )
        return build_car_response(car, price=price, location=location)

    async def save(self, payload: CarIn) -> Car:
        """Create a car, or update details, location and condition of an existing one."""
        if payload.id is not None:
            car = await self._get(payload.id)
        else:
            car = Car()

        car.condition = payload.condition
        for field, value in payload.details.model_dump().items():
            setattr(car, field, value)
        car.lat = payload.location.lat
        car.lon = payload.location.lon

        self.db.add(car)
        await self.db.commit()
        await self.db.refresh(car)

        logger.info(f"Saved car {car.id}")
        return car

    async def delete(self, car_id: int) -> None:
        car = await self._get(car_id)
        await self.db.delete(car)
        await self.db.commit()
        logger.info(f"Deleted car {car_id}")


def get_price_client() -> PriceClient:
    return PriceClient(get_pricing_http())


def get_maps_client() -> MapsClient:
    return MapsClient(get_maps_http())


def get_car_service(
    db: AsyncSession = Depends(get_db),
    price_client: PriceClient = Depends(get_price_client),
    maps_client: MapsClient = Depends(get_maps_client),
) -> CarService:
    return CarService(db, price_client, maps_client)
