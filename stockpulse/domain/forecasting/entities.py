"""
Domain entities for the forecasting bounded context.

Entities represent core business objects of the signal pipeline.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Signal(Enum):
    """Discrete trading signal produced by the scorer."""

    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


class Trend(Enum):
    """Direction of the short vs. long moving average."""

    BULLISH = "BULLISH"
    BEARISH = "BEARISH"


class Volatility(Enum):
    """Position of the latest close relative to the Bollinger Bands."""

    LOW = "LOW"
    NORMAL = "NORMAL"
    HIGH = "HIGH"


class VolumeTrend(Enum):
    """Direction of recent volume vs. the preceding weeks."""

    INCREASING = "INCREASING"
    DECREASING = "DECREASING"


class Timeframe(Enum):
    """Forecast horizon."""

    TODAY = "today"
    TOMORROW = "tomorrow"


@dataclass(frozen=True)
class Bar:
    """A single trading day's OHLCV observation."""

    date: date
    open: float
    high: float
    low: float
    close: float
    volume: int


@dataclass(frozen=True)
class Features:
    """Classified indicator features extracted from a daily series.

    Attributes:
        rsi: Relative strength index (0-100), rounded to two decimals.
        trend: SMA(10) vs. SMA(50) direction.
        volatility: Latest close relative to the Bollinger Bands.
        volume_trend: SMA(5) of volume vs. the 15 days preceding it.
    """

    rsi: float
    trend: Trend
    volatility: Volatility
    volume_trend: VolumeTrend


@dataclass(frozen=True)
class SignalScore:
    """Outcome of scoring a set of features.

    Attributes:
        score: Final weighted score after volatility and timeframe adjustments.
        signals: Number of indicator signals that contributed to the score.
        raw_confidence: Confidence in [0, 1] before percentage rounding.
        confidence: Confidence as an integer percentage (0-100).
        prediction: The discrete signal.
    """

    score: float
    signals: int
    raw_confidence: float
    confidence: int
    prediction: Signal


@dataclass(frozen=True)
class PredictionResult:
    """A prediction for one symbol and timeframe.

    The accuracy figure is synthesized for display; it is not derived
    from backtesting and carries no statistical meaning.
    """

    symbol: str
    prediction: Signal
    confidence: int
    accuracy: float
    timeframe: Timeframe
    features: Features


@dataclass(frozen=True)
class SymbolInfo:
    """A listing in the static symbol reference list."""

    symbol: str
    name: str
    market: str
