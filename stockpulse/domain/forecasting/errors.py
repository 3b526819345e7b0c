"""
Domain-specific errors for the forecasting bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from typing import Optional


class ForecastingDomainError(Exception):
    """Base error for all forecasting domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(ForecastingDomainError):
    """Raised when a prediction request carries malformed input."""


class InvalidSymbolError(ValidationError):
    """Raised when the requested symbol is missing or blank."""

    def __init__(self, symbol: Optional[str]) -> None:
        super().__init__("Stock symbol is required")
        self.symbol = symbol


class InvalidTimeframeError(ValidationError):
    """Raised when the timeframe is not 'today' or 'tomorrow'."""

    def __init__(self, timeframe: Optional[str]) -> None:
        super().__init__(
            f"Invalid timeframe: {timeframe!r}. Must be 'today' or 'tomorrow'."
        )
        self.timeframe = timeframe


class EmptySeriesError(ForecastingDomainError):
    """Raised when a resolved series contains no bars."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"No price data for symbol: {symbol}")
        self.symbol = symbol


class SourceUnavailableError(ForecastingDomainError):
    """Raised by a quote source when live data cannot be obtained.

    Never surfaced to callers: the series provider absorbs it and
    falls back to synthetic data.
    """

    def __init__(self, symbol: str, reason: str) -> None:
        super().__init__(f"Quote source unavailable for {symbol}: {reason}")
        self.symbol = symbol
        self.reason = reason
