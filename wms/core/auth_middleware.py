"""WMS API — JWT auth middleware: extracts the bearer token, sets request.state.user."""
import logging
from typing import Callable
from uuid import UUID

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from wms.api.deps import CurrentUser
from wms.core.security import decode_token

logger = logging.getLogger(__name__)


class JWTAuthMiddleware(BaseHTTPMiddleware):
    """Decode the Authorization bearer token and populate request.state.user.

    Invalid tokens leave the user unset; route dependencies decide whether
    that is a 401.
    """

    PUBLIC_PATHS = {
        "/api/auth/login",
        "/api/auth/refresh",
        "/health",
        "/docs",
        "/redoc",
        "/openapi.json",
    }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request.state.user = None

        path = request.url.path
        if path in self.PUBLIC_PATHS or path.startswith("/docs"):
            return await call_next(request)

        auth = request.headers.get("Authorization", "")
        if auth.startswith("Bearer "):
            token = auth[7:].strip()
            payload = decode_token(token)
            if payload and payload.get("type") == "access":
                sub = payload.get("sub")
                try:
                    user_id = UUID(sub) if sub else None
                except ValueError:
                    logger.warning("Rejected token with malformed subject")
                    user_id = None
                if user_id:
                    request.state.user = CurrentUser(
                        id=user_id,
                        email=payload.get("email") or "unknown",
                        username=payload.get("username"),
                        roles=payload.get("roles") or [],
                    )
            else:
                logger.debug("Invalid or expired bearer token on %s", path)

        return await call_next(request)
