"""
Rate limiting configuration and setup.

Uses slowapi, keyed by client address. The prediction endpoint carries
its own tighter limit because every cache miss may call out to the
quote provider; every other route falls under the default limit
enforced by SlowAPIMiddleware.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from stockpulse.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
)


def rate_limit_exceeded_handler(_request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Answer 429 in the same `{"error", "detail"}` shape as domain errors.

    Synchronous so SlowAPIMiddleware can call it directly as well as the
    route decorator path; `detail` names the limit that was hit, for
    example "30 per 1 minute" on predict.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
