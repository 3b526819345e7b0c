"""
Adapter: Cached series provider.

Implements SeriesProviderPort.
Resolution order: cache → live quote source (if configured) →
synthetic generator. Whatever is resolved is cached before returning.
Live-source failures are logged and absorbed; callers never see them.
"""

import logging
from typing import Optional

from stockpulse.domain.forecasting.entities import Bar
from stockpulse.domain.forecasting.errors import SourceUnavailableError
from stockpulse.domain.forecasting.ports import QuoteSourcePort, SeriesProviderPort
from stockpulse.infrastructure.forecasting.series_cache import SeriesCache

logger = logging.getLogger(__name__)

DEFAULT_SERIES_LENGTH = 100


class CachedSeriesProvider(SeriesProviderPort):
    """Resolves symbols to daily series with caching and synthetic fallback.

    Concurrent requests for the same uncached symbol may each fetch;
    the last write wins. There is no request coalescing.

    Args:
        cache: Shared series cache.
        synthetic_source: Source used when live data is unavailable.
        live_source: Optional live quote source. None means synthetic mode.
        series_length: Number of most recent bars to keep.
    """

    def __init__(
        self,
        cache: SeriesCache,
        synthetic_source: QuoteSourcePort,
        live_source: Optional[QuoteSourcePort] = None,
        series_length: int = DEFAULT_SERIES_LENGTH,
    ) -> None:
        self._cache = cache
        self._synthetic_source = synthetic_source
        self._live_source = live_source
        self._series_length = series_length

    def get_series(self, symbol: str) -> list[Bar]:
        """Return the daily series for `symbol`, oldest first.

        Args:
            symbol: Normalized (uppercase, trimmed) ticker symbol.

        Returns:
            At most `series_length` bars.
        """
        key = SeriesCache.key_for(symbol)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Series cache hit for %s", symbol)
            return cached

        series = self._resolve(symbol)
        self._cache.set(key, series)
        return series

    def _resolve(self, symbol: str) -> list[Bar]:
        if self._live_source is None:
            return self._synthetic(symbol)

        try:
            series = self._live_source.fetch_daily_series(symbol, limit=self._series_length)
        except SourceUnavailableError as exc:
            logger.warning(
                "Live quotes unavailable for %s, using synthetic series: %s",
                symbol,
                exc.reason,
            )
            return self._synthetic(symbol)
        except Exception as exc:
            # Any live failure degrades to synthetic; the request still succeeds
            logger.warning(
                "Live quote source failed for %s, using synthetic series: %s: %s",
                symbol,
                type(exc).__name__,
                exc,
            )
            return self._synthetic(symbol)

        if not series:
            logger.warning(
                "Live quotes empty for %s, using synthetic series", symbol
            )
            return self._synthetic(symbol)

        ordered = sorted(series, key=lambda b: b.date)
        return ordered[-self._series_length:]

    def _synthetic(self, symbol: str) -> list[Bar]:
        return self._synthetic_source.fetch_daily_series(symbol, limit=self._series_length)

    def close(self) -> None:
        """Close the live source, if one is configured."""
        if self._live_source is not None:
            self._live_source.close()
