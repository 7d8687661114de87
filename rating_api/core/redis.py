import logging
from typing import Optional
from redis.asyncio import Redis
from rating_api.core.config import settings

logger = logging.getLogger(__name__)

redis: Optional[Redis] = None

async def init_redis(url: Optional[str] = None) -> Optional[Redis]:
    """Connect the premium cache. Returns None when no Redis URL is configured."""
    global redis
    url = url or settings.REDIS_URL
    if not url:
        logger.info("REDIS_URL not set, premium cache disabled")
        return None
    client = Redis.from_url(url, decode_responses=True)
    try:
        await client.ping()
    except Exception as e:
        logger.error(f"Failed to connect to Redis: {e}")
        await client.aclose()
        redis = None
        raise
    redis = client
    logger.info("Connected to Redis")
    return redis

async def close_redis():
    global redis
    if redis:
        await redis.aclose()
        redis = None

def get_redis() -> Optional[Redis]:
    return redis
