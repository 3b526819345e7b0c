"""
Data Transfer Objects for the forecasting application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PredictSignalCommand:
    """Input DTO for requesting a trading signal.

    Attributes:
        symbol: Ticker symbol, any case, surrounding whitespace allowed.
        timeframe: Forecast horizon, "today" or "tomorrow".
    """

    symbol: Optional[str]
    timeframe: Optional[str] = "tomorrow"


@dataclass(frozen=True)
class FeaturesResult:
    """Output DTO for the indicator features behind a signal.

    Attributes:
        rsi: Relative strength index (0-100).
        trend: BULLISH or BEARISH.
        volatility: LOW, NORMAL or HIGH.
        volume_trend: INCREASING or DECREASING.
    """

    rsi: float
    trend: str
    volatility: str
    volume_trend: str


@dataclass(frozen=True)
class PredictionResultDTO:
    """Output DTO for a trading signal.

    Attributes:
        symbol: Normalized ticker symbol.
        prediction: BUY, SELL or HOLD.
        confidence: Integer percentage (0-100).
        accuracy: Illustrative accuracy percentage, not backtested.
        timeframe: "today" or "tomorrow".
        features: Indicator features the signal was derived from.
    """

    symbol: str
    prediction: str
    confidence: int
    accuracy: float
    timeframe: str
    features: FeaturesResult


@dataclass(frozen=True)
class SearchSymbolsQuery:
    """Input DTO for symbol autocomplete.

    Attributes:
        query: Substring to look for in symbols and company names.
        limit: Maximum number of matches.
    """

    query: str
    limit: int = 8


@dataclass(frozen=True)
class SymbolMatchResult:
    """Output DTO for a matching listing."""

    symbol: str
    name: str
    market: str
