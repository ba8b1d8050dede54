"""Price quote endpoint with Redis caching"""
import json
import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from pricing_service.db.session import get_db
from pricing_service.schemas.price import PriceOut
from pricing_service.services.pricing import get_price
from pricing_service.core.redis import get_redis
from pricing_service.core.config import settings
from pricing_service.core.metrics import cache_hits, cache_misses

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/services", tags=["prices"])


def _generate_cache_key(vehicle_id: int) -> str:
    return f"price:{vehicle_id}"


@router.get("/price", response_model=PriceOut)
async def get_vehicle_price(
    vehicle_id: int = Query(..., alias="vehicleId"),
    db: AsyncSession = Depends(get_db)
):

    cache_key = _generate_cache_key(vehicle_id)
    redis = get_redis()

    if redis is not None:
        try:
            cached = await redis.get(cache_key)
            if cached:
                cache_hits.inc()
                return PriceOut.model_validate(json.loads(cached))
        except Exception as e:
            logger.warning(f"Cache retrieval failed: {e}")

    cache_misses.inc()
    result = await get_price(db, vehicle_id)

    if redis is not None:
        try:
            await redis.set(
                cache_key,
                json.dumps(result.model_dump(mode="json")),
                ex=settings.PRICE_CACHE_TTL
            )
        except Exception as e:
            logger.warning(f"Cache write failed: {e}")

    return result
