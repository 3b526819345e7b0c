"""
Adapter: Synthetic daily series generator.

Implements QuoteSourcePort without any network access. Used whenever
no live quote source is configured, and as the fallback when the live
source fails.

The walk combines a slow sinusoidal cycle, a faster sinusoidal
fluctuation and bounded uniform noise. All randomness comes from the
injected random.Random, so a seeded generator reproduces its output.
"""

import math
import random
from collections.abc import Callable
from datetime import date, timedelta
from typing import Optional

from stockpulse.domain.forecasting.entities import Bar
from stockpulse.domain.forecasting.ports import QuoteSourcePort

BASE_PRICES: dict[str, float] = {
    "AAPL": 175, "MSFT": 350, "GOOGL": 140, "AMZN": 155, "TSLA": 250,
    "NVDA": 800, "META": 350, "NFLX": 450, "BABA": 90, "V": 270,
    "RELIANCE": 2800, "TCS": 3500, "HDFCBANK": 1600, "INFY": 1800,
    "HINDUNILVR": 2400, "ITC": 450, "SBIN": 750, "BHARTIARTL": 1200,
    "KOTAKBANK": 1800, "LT": 3200, "ASIANPAINT": 3000, "MARUTI": 11000,
}
DEFAULT_BASE_PRICE = 150.0
MIN_PRICE = 1.0

LONG_CYCLE_FREQ = 0.05
LONG_CYCLE_AMPLITUDE = 0.003
SHORT_CYCLE_FREQ = 0.2
SHORT_CYCLE_AMPLITUDE = 0.001
DAILY_JITTER = 0.005

DEFAULT_LENGTH = 100


def volatility_for(symbol: str) -> float:
    """Random-walk amplitude for a symbol class."""
    if "CRYPTO" in symbol:
        return 0.05
    if symbol.startswith(("TESLA", "NVDA")):
        return 0.03
    return 0.02


def base_volume_for(symbol: str) -> int:
    """Typical daily share volume for a symbol class."""
    if symbol.startswith("RELIANCE"):
        return 5_000_000
    if symbol.startswith("AAPL"):
        return 50_000_000
    return 2_000_000


class SyntheticSeriesGenerator(QuoteSourcePort):
    """Generates plausible daily OHLCV bars for any symbol.

    Args:
        rng: Random source. Pass a seeded instance for reproducible output.
        today: Returns the date of the last generated bar.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._rng = rng or random.Random()
        self._today = today

    def fetch_daily_series(self, symbol: str, limit: int = DEFAULT_LENGTH) -> list[Bar]:
        """Return `limit` synthetic bars; never raises SourceUnavailableError."""
        return self.generate(symbol, length=limit)

    def generate(self, symbol: str, length: int = DEFAULT_LENGTH) -> list[Bar]:
        """Walk `length` days forward, ending today, oldest first."""
        rng = self._rng
        end = self._today()
        volatility = volatility_for(symbol)
        base_volume = base_volume_for(symbol)

        price = BASE_PRICES.get(symbol, DEFAULT_BASE_PRICE)
        price *= 0.9 + rng.random() * 0.2

        bars: list[Bar] = []
        for i in range(length):
            long_trend = math.sin(i * LONG_CYCLE_FREQ) * LONG_CYCLE_AMPLITUDE
            short_trend = math.sin(i * SHORT_CYCLE_FREQ) * SHORT_CYCLE_AMPLITUDE
            random_walk = (rng.random() - 0.5) * volatility

            price *= 1 + long_trend + short_trend + random_walk
            price = max(price, MIN_PRICE)

            open_ = price * (1 + (rng.random() - 0.5) * DAILY_JITTER)
            close = price * (1 + (rng.random() - 0.5) * DAILY_JITTER)
            high = max(open_, close) * (1 + rng.random() * DAILY_JITTER * 2)
            low = min(open_, close) * (1 - rng.random() * DAILY_JITTER * 2)

            # Bigger moves trade more shares
            price_change = abs(close - open_) / open_
            volume = math.floor(
                base_volume * (1 + price_change * 5) * (0.5 + rng.random())
            )

            bars.append(
                Bar(
                    date=end - timedelta(days=length - 1 - i),
                    open=round(open_, 2),
                    high=round(high, 2),
                    low=round(low, 2),
                    close=round(close, 2),
                    volume=volume,
                )
            )

        return bars
