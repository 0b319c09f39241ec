"""WMS API — Rate limiting (fixed window in Redis)."""
import logging
import time
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError
from starlette.middleware.base import BaseHTTPMiddleware

from wms.core.redis import get_redis, rate_limit_key
from wms.core.responses import error_response

logger = logging.getLogger(__name__)

# Requests per window: bearer-token callers vs anonymous (per client IP)
LIMITS = {
    "auth": 1000,
    "default": 100,
}
WINDOW = 60


class RateLimitMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        caller_id = request.client.host if request.client else "unknown"
        limit_type = "default"

        auth_header = request.headers.get("Authorization", "")
        if auth_header.startswith("Bearer "):
            # token tail: the head is the same JWT header for every caller
            caller_id = auth_header[7:].strip()[-32:]
            limit_type = "auth"

        limit = LIMITS[limit_type]
        key = rate_limit_key(limit_type, caller_id)

        try:
            r = await get_redis()
            current = await r.get(key)
            if current is None:
                await r.setex(key, WINDOW, 1)
                count = 1
            else:
                count = int(current) + 1
                if count > limit:
                    content = error_response("Too many requests. Please slow down.", "RATE_LIMIT_EXCEEDED")
                    content["meta"] = {"limit": limit, "remaining": 0}
                    return JSONResponse(
                        status_code=429,
                        content=content,
                        headers={"Retry-After": str(WINDOW)},
                    )
                await r.incr(key)
            ttl = await r.ttl(key)
        except RedisError as exc:
            # Fail open: an unavailable limiter must not take the API down.
            logger.warning("Rate limiter unavailable: %s", exc)
            return await call_next(request)

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(limit)
        response.headers["X-RateLimit-Remaining"] = str(max(0, limit - count))
        response.headers["X-RateLimit-Reset"] = str(int(time.time()) + (ttl if ttl > 0 else WINDOW))

        return response
