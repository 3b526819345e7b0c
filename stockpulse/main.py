"""
StockPulse HTTP entry point.

`create_app()` builds the service: logging, rate limiter, security
headers, domain error mapping, and the health and forecasting routers
under /api/v1. The lifespan hook closes the live quote client on
shutdown.

Run locally:
    uvicorn stockpulse.main:app --reload --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from stockpulse.core.config import settings
from stockpulse.interfaces.forecasting.dependencies import get_series_provider
from stockpulse.interfaces.forecasting.router import router as forecasting_router
from stockpulse.interfaces.health import router as health_router
from stockpulse.shared.errors.handlers import register_error_handlers
from stockpulse.shared.logging import configure_logging
from stockpulse.shared.security.headers import SecurityHeadersMiddleware
from stockpulse.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(_app: FastAPI):
    logger.info("%s %s starting", settings.project_name, settings.version)
    yield
    # Only close a provider that was actually built
    if get_series_provider.cache_info().currsize:
        get_series_provider().close()
        # A restarted app in this process must not reuse the closed client
        get_series_provider.cache_clear()
    logger.info("%s stopped", settings.project_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, debug=settings.debug)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        description="Heuristic BUY/SELL/HOLD signals from daily price series.",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    # Added before the headers middleware so 429s still carry security headers
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    register_error_handlers(app)

    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(forecasting_router, prefix=API_PREFIX)

    return app


app = create_app()
