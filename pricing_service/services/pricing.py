import logging
import random
from decimal import Decimal
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from pricing_service.models.price import Price
from pricing_service.schemas.price import PriceOut
from pricing_service.core.exceptions import PriceNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "USD"
MIN_PRICE = 1
MAX_PRICE = 100000


async def get_price(db: AsyncSession, vehicle_id: int) -> PriceOut:
    res = await db.execute(select(Price).where(Price.vehicle_id == vehicle_id))
    price = res.scalars().first()
    if price is None:
        raise PriceNotFoundError(vehicle_id)
    return PriceOut.model_validate(price)


def random_price() -> Decimal:
    return Decimal(str(random.uniform(MIN_PRICE, MAX_PRICE))).quantize(Decimal("0.01"))


async def seed_prices(db: AsyncSession, count: int) -> int:
    """Give vehicles 1..count a random quote if the store is empty.

    Returns the number of quotes inserted.
    """
    existing = await db.scalar(select(func.count()).select_from(Price))
    if existing:
        logger.info(f"Price store already holds {existing} quotes, skipping seed")
        return 0

    for vehicle_id in range(1, count + 1):
        db.add(Price(vehicle_id=vehicle_id, currency=DEFAULT_CURRENCY, price=random_price()))
    await db.commit()

    logger.info(f"Seeded {count} random quotes")
    return count
