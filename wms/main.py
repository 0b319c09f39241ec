"""
WMS API — FastAPI ASGI Entry Point
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wms.api.router import api_router
from wms.config import get_settings
from wms.core.auth_middleware import JWTAuthMiddleware
from wms.core.rate_limit import RateLimitMiddleware
from wms.core.redis import close_redis
from wms.core.request_logger import RequestLoggingMiddleware
from wms.core.responses import register_exception_handlers
from wms.db.session import engine, init_models

settings = get_settings()
logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and tables on startup, release connections on shutdown."""
    configure_logging()
    if settings.AUTO_CREATE_TABLES:
        await init_models()
    logger.info("WMS API started (environment=%s)", settings.ENVIRONMENT)
    yield
    if settings.RATE_LIMIT_ENABLED:
        await close_redis()
    await engine.dispose()


app = FastAPI(
    title="WMS API",
    description="Warehouse Management System: warehouse structure, bins, inventory, products and users",
    version="0.1.0",
    lifespan=lifespan,
)
# Last added runs first: CORS, request log, rate limit, then auth.
app.add_middleware(JWTAuthMiddleware)
if settings.RATE_LIMIT_ENABLED:
    app.add_middleware(RateLimitMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health():
    """Health check for load balancers and Docker."""
    return {"status": "ok", "service": "wms-api"}
