"""
Health check router.

Reports liveness plus which quote source backs predictions and how
many series are currently cached.
"""

from fastapi import APIRouter, Depends

from stockpulse.core.config import settings
from stockpulse.infrastructure.forecasting.series_cache import SeriesCache
from stockpulse.interfaces.forecasting.dependencies import get_series_cache
from stockpulse.interfaces.forecasting.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns status, version, quote source mode and cache size.",
)
def health_check(cache: SeriesCache = Depends(get_series_cache)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=settings.version,
        quote_source="alpha_vantage" if settings.has_live_quotes() else "synthetic",
        cached_series=len(cache),
    )
