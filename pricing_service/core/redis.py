import logging
from typing import Optional
from redis.asyncio import Redis
from pricing_service.core.config import settings

logger = logging.getLogger(__name__)

redis: Optional[Redis] = None

async def init_redis() -> Optional[Redis]:
    global redis
    if not settings.REDIS_URL:
        logger.info("REDIS_URL not set, price caching disabled")
        return None
    client = Redis.from_url(settings.REDIS_URL, decode_responses=False)
    try:
        await client.ping()
    except Exception as e:
        logger.error(f"Failed to connect to Redis: {e}")
        await client.close()
        redis = None
        raise
    redis = client
    logger.info("Connected to Redis")
    return redis

async def close_redis():
    global redis
    if redis:
        await redis.close()
        redis = None

def get_redis() -> Optional[Redis]:
    """Shared Redis client, or None when caching is disabled."""
    return redis
