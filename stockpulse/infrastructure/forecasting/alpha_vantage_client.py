"""
Adapter: Alpha Vantage daily time series.

Implements QuoteSourcePort over the TIME_SERIES_DAILY endpoint.
Every failure mode (network error, timeout, non-2xx status, malformed
JSON, rate-limit notice, error message, missing series block) is
translated into SourceUnavailableError. No retries are attempted.
"""

import logging
from datetime import date
from typing import Any, Optional

import httpx

from stockpulse.domain.forecasting.entities import Bar
from stockpulse.domain.forecasting.errors import SourceUnavailableError
from stockpulse.domain.forecasting.ports import QuoteSourcePort

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"
DEFAULT_TIMEOUT_SECONDS = 10.0
SERIES_KEY = "Time Series (Daily)"
# Alpha Vantage answers 200 with one of these keys when it refuses a request
REFUSAL_KEYS = ("Error Message", "Note", "Information")


class AlphaVantageQuoteSource(QuoteSourcePort):
    """Fetches daily OHLCV bars from Alpha Vantage.

    Args:
        api_key: Alpha Vantage API key.
        base_url: Query endpoint.
        timeout: Request timeout in seconds.
        client: Optional pre-built httpx client (tests inject a mock transport).
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._client = client or httpx.Client(timeout=timeout)

    def fetch_daily_series(self, symbol: str, limit: int = 100) -> list[Bar]:
        """Return the `limit` most recent daily bars for `symbol`, oldest first.

        Raises:
            SourceUnavailableError: On any transport or payload problem.
        """
        payload = self._request(symbol)

        for key in REFUSAL_KEYS:
            if key in payload:
                raise SourceUnavailableError(symbol, f"{key}: {payload[key]}")

        time_series = payload.get(SERIES_KEY)
        if not isinstance(time_series, dict) or not time_series:
            raise SourceUnavailableError(symbol, f"missing '{SERIES_KEY}' block")

        try:
            bars = [_parse_bar(day, values) for day, values in time_series.items()]
        except (KeyError, TypeError, ValueError) as exc:
            raise SourceUnavailableError(symbol, f"malformed bar: {exc}") from exc

        bars.sort(key=lambda b: b.date)
        logger.info("Fetched %d daily bars for %s from Alpha Vantage", len(bars), symbol)
        return bars[-limit:]

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self._client.close()

    def _request(self, symbol: str) -> dict[str, Any]:
        params = {
            "function": "TIME_SERIES_DAILY",
            "symbol": symbol,
            "apikey": self._api_key,
        }
        try:
            response = self._client.get(self._base_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise SourceUnavailableError(symbol, f"{type(exc).__name__}: {exc}") from exc
        except ValueError as exc:
            raise SourceUnavailableError(symbol, "response is not valid JSON") from exc

        if not isinstance(payload, dict):
            raise SourceUnavailableError(symbol, "unexpected payload shape")
        return payload


def _parse_bar(day: str, values: dict[str, str]) -> Bar:
    return Bar(
        date=date.fromisoformat(day),
        open=float(values["1. open"]),
        high=float(values["2. high"]),
        low=float(values["3. low"]),
        close=float(values["4. close"]),
        volume=int(values["5. volume"]),
    )
