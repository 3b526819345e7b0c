"""
Shared fixtures for the forecasting test suite.

Provides bar builders, a controllable clock, and stub ports so tests
never touch the network or the ambient random generator.
"""

import random
from datetime import date, timedelta
from typing import Optional

import pytest

from stockpulse.domain.forecasting.entities import Bar
from stockpulse.domain.forecasting.errors import SourceUnavailableError
from stockpulse.domain.forecasting.ports import QuoteSourcePort, SeriesProviderPort
from stockpulse.infrastructure.forecasting.synthetic_series import (
    SyntheticSeriesGenerator,
)

FIXED_TODAY = date(2026, 1, 30)


def make_bars(
    closes: list[float],
    volumes: Optional[list[int]] = None,
    end: date = FIXED_TODAY,
) -> list[Bar]:
    """Build a daily series ending on `end` from closes (and volumes)."""
    volumes = volumes or [1_000] * len(closes)
    start = end - timedelta(days=len(closes) - 1)
    return [
        Bar(
            date=start + timedelta(days=i),
            open=close,
            high=close * 1.01,
            low=close * 0.99,
            close=close,
            volume=volume,
        )
        for i, (close, volume) in enumerate(zip(closes, volumes))
    ]


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubSeriesProvider(SeriesProviderPort):
    """Returns a fixed series and records requested symbols."""

    def __init__(self, series: list[Bar]) -> None:
        self._series = series
        self.requested: list[str] = []

    def get_series(self, symbol: str) -> list[Bar]:
        self.requested.append(symbol)
        return list(self._series)


class CountingSource(QuoteSourcePort):
    """Quote source that returns a fixed series and counts calls."""

    def __init__(self, series: list[Bar]) -> None:
        self._series = series
        self.calls = 0

    def fetch_daily_series(self, symbol: str, limit: int = 100) -> list[Bar]:
        self.calls += 1
        return list(self._series)


class FailingSource(QuoteSourcePort):
    """Quote source that is always unavailable."""

    def __init__(self) -> None:
        self.calls = 0

    def fetch_daily_series(self, symbol: str, limit: int = 100) -> list[Bar]:
        self.calls += 1
        raise SourceUnavailableError(symbol, "Note: API call frequency exceeded")


class RaisingSource(QuoteSourcePort):
    """Quote source that raises an arbitrary exception."""

    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    def fetch_daily_series(self, symbol: str, limit: int = 100) -> list[Bar]:
        raise self._exc


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def generator() -> SyntheticSeriesGenerator:
    """Seeded synthetic generator pinned to a fixed 'today'."""
    return SyntheticSeriesGenerator(rng=random.Random(42), today=lambda: FIXED_TODAY)


@pytest.fixture
def synthetic_series(generator: SyntheticSeriesGenerator) -> list[Bar]:
    return generator.generate("AAPL")
