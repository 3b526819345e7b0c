"""
Pydantic schemas for forecasting API request/response validation.

These schemas define the API contract. Symbol normalization and
timeframe validation happen in the use case so that malformed values
are reported the same way for HTTP and in-process callers.
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, Field

SYMBOL_MAX_LEN = 20
QUERY_MAX_LEN = 50


class PredictRequest(BaseModel):
    """Request schema for the prediction endpoint.

    Attributes:
        symbol: Ticker symbol (case-insensitive). Null or missing is
            rejected with 400 by the use case.
        timeframe: "today" or "tomorrow". Defaults to "tomorrow" when
            omitted; an explicit null is rejected with 400.
    """

    symbol: Optional[str] = Field(
        default=None,
        max_length=SYMBOL_MAX_LEN,
        description="Ticker symbol, e.g. AAPL or RELIANCE",
    )
    timeframe: Optional[str] = Field(
        default="tomorrow", description="Forecast horizon: today or tomorrow"
    )


class FeaturesSchema(BaseModel):
    """Indicator features behind a prediction."""

    rsi: float
    trend: str
    volatility: str
    volume_trend: str


class PredictResponse(BaseModel):
    """Response schema for the prediction endpoint.

    The accuracy value is illustrative and not backtested.
    """

    symbol: str
    prediction: str
    confidence: int
    accuracy: float
    timeframe: str
    features: FeaturesSchema


class SymbolItem(BaseModel):
    """A single listing returned by symbol search."""

    symbol: str
    name: str
    market: str


class SymbolSearchResponse(BaseModel):
    """Response schema for symbol search."""

    results: list[SymbolItem]


class ErrorResponse(BaseModel):
    """Standard error response schema.

    Attributes:
        error: Short error description.
        detail: Optional additional detail (never includes internals).
    """

    error: str
    detail: str | None = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint.

    Attributes:
        quote_source: "alpha_vantage" when live quotes are configured,
            otherwise "synthetic".
        cached_series: Number of series currently held in the cache.
    """

    status: str
    version: str
    quote_source: str
    cached_series: int
