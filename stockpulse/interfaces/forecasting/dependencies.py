"""
Dependency injection for the forecasting bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the forecasting context.

The series cache and provider are process-wide singletons so that
every request shares one cache.
"""

import logging
from functools import lru_cache

from stockpulse.application.forecasting.predict_signal import PredictSignalUseCase
from stockpulse.application.forecasting.search_symbols import SearchSymbolsUseCase
from stockpulse.core.config import settings
from stockpulse.infrastructure.forecasting.alpha_vantage_client import (
    AlphaVantageQuoteSource,
)
from stockpulse.infrastructure.forecasting.series_cache import SeriesCache
from stockpulse.infrastructure.forecasting.series_provider import CachedSeriesProvider
from stockpulse.infrastructure.forecasting.symbol_catalog import StaticSymbolCatalog
from stockpulse.infrastructure.forecasting.synthetic_series import (
    SyntheticSeriesGenerator,
)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_series_cache() -> SeriesCache:
    """Return the process-wide series cache."""
    return SeriesCache(
        ttl_seconds=settings.series_cache_ttl_seconds,
        max_entries=settings.series_cache_max_entries,
    )


@lru_cache(maxsize=1)
def get_series_provider() -> CachedSeriesProvider:
    """Build the process-wide series provider.

    Without an Alpha Vantage key every series is synthetic.
    """
    live_source = None
    if settings.has_live_quotes():
        live_source = AlphaVantageQuoteSource(
            api_key=settings.alpha_vantage_api_key,
            base_url=settings.alpha_vantage_base_url,
            timeout=settings.quote_fetch_timeout_seconds,
        )
        logger.info("Live quotes enabled (Alpha Vantage)")
    else:
        logger.info("No quote API key configured; serving synthetic series")

    return CachedSeriesProvider(
        cache=get_series_cache(),
        synthetic_source=SyntheticSeriesGenerator(),
        live_source=live_source,
        series_length=settings.series_length,
    )


def get_predict_signal_use_case() -> PredictSignalUseCase:
    """Build PredictSignalUseCase with its infrastructure dependencies."""
    return PredictSignalUseCase(series_provider=get_series_provider())


def get_search_symbols_use_case() -> SearchSymbolsUseCase:
    """Build SearchSymbolsUseCase with its infrastructure dependencies."""
    return SearchSymbolsUseCase(catalog=StaticSymbolCatalog())
