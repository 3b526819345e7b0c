"""
Domain service: Feature extraction.

Turns a daily OHLCV series into the fixed set of classified features
consumed by the signal scorer.
No framework imports. No IO. No side effects.
"""

from stockpulse.domain.forecasting import indicators
from stockpulse.domain.forecasting.entities import (
    Bar,
    Features,
    Trend,
    Volatility,
    VolumeTrend,
)
from stockpulse.domain.forecasting.errors import EmptySeriesError

SHORT_SMA_WINDOW = 10
LONG_SMA_WINDOW = 50
RECENT_VOLUME_WINDOW = 5
PRIOR_VOLUME_WINDOW = 15


def extract_features(series: list[Bar], symbol: str = "") -> Features:
    """Extract RSI, trend, volatility and volume-trend features.

    Args:
        series: Daily bars, oldest first. Must not be empty.
        symbol: Symbol the series belongs to, used in error messages.

    Returns:
        The classified features for the latest bar.

    Raises:
        EmptySeriesError: If the series has no bars.
    """
    if not series:
        raise EmptySeriesError(symbol)

    closes = [bar.close for bar in series]
    volumes = [float(bar.volume) for bar in series]

    return Features(
        rsi=round(indicators.rsi(closes), 2),
        trend=_classify_trend(closes),
        volatility=_classify_volatility(closes),
        volume_trend=_classify_volume_trend(volumes),
    )


def _classify_trend(closes: list[float]) -> Trend:
    short = indicators.sma(closes, SHORT_SMA_WINDOW)
    long = indicators.sma(closes, LONG_SMA_WINDOW)
    return Trend.BULLISH if short > long else Trend.BEARISH


def _classify_volatility(closes: list[float]) -> Volatility:
    bands = indicators.bollinger_bands(closes)
    latest = closes[-1]
    if latest > bands.upper:
        return Volatility.HIGH
    if latest < bands.lower:
        return Volatility.LOW
    return Volatility.NORMAL


def _classify_volume_trend(volumes: list[float]) -> VolumeTrend:
    """Compare the last 5 days of volume to the 15 days before them."""
    prior = volumes[-(RECENT_VOLUME_WINDOW + PRIOR_VOLUME_WINDOW):-RECENT_VOLUME_WINDOW]
    if not prior:
        # Nothing to compare against
        return VolumeTrend.DECREASING
    recent = indicators.sma(volumes, RECENT_VOLUME_WINDOW)
    older = indicators.sma(prior, PRIOR_VOLUME_WINDOW)
    return VolumeTrend.INCREASING if recent > older else VolumeTrend.DECREASING
