"""WMS API — Redis client for rate limiting."""
from typing import Optional

import redis.asyncio as redis

from wms.config import get_settings

_settings = get_settings()
_redis: Optional[redis.Redis] = None


async def get_redis() -> redis.Redis:
    """Get the shared Redis connection (created lazily)."""
    global _redis
    if _redis is None:
        _redis = redis.from_url(_settings.REDIS_URL, decode_responses=True)
    return _redis


async def close_redis() -> None:
    global _redis
    if _redis is not None:
        await _redis.aclose()
        _redis = None


def rate_limit_key(limit_type: str, caller_id: str) -> str:
    """Fixed-window counter key: rl:{type}:{caller}"""
    return f"rl:{limit_type}:{caller_id}"
