"""
FastAPI router for the forecasting bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Query, Request

from stockpulse.application.forecasting.dtos import (
    PredictSignalCommand,
    SearchSymbolsQuery,
)
from stockpulse.application.forecasting.predict_signal import PredictSignalUseCase
from stockpulse.application.forecasting.search_symbols import SearchSymbolsUseCase
from stockpulse.core.config import settings
from stockpulse.interfaces.forecasting.dependencies import (
    get_predict_signal_use_case,
    get_search_symbols_use_case,
)
from stockpulse.interfaces.forecasting.schemas import (
    QUERY_MAX_LEN,
    ErrorResponse,
    FeaturesSchema,
    PredictRequest,
    PredictResponse,
    SymbolItem,
    SymbolSearchResponse,
)
from stockpulse.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/forecasting", tags=["forecasting"])


@router.post(
    "/predict",
    response_model=PredictResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
    },
    summary="Predict a trading signal",
    description=(
        "Score RSI, moving-average trend, Bollinger volatility and volume "
        "trend into a BUY/SELL/HOLD signal for today or tomorrow."
    ),
)
@limiter.limit(settings.rate_limit_heavy)
def predict(
    request: Request,
    body: PredictRequest,
    use_case: PredictSignalUseCase = Depends(get_predict_signal_use_case),
) -> PredictResponse:
    """Predict a trading signal for a given symbol and timeframe."""
    result = use_case.execute(
        PredictSignalCommand(symbol=body.symbol, timeframe=body.timeframe)
    )
    return PredictResponse(
        symbol=result.symbol,
        prediction=result.prediction,
        confidence=result.confidence,
        accuracy=result.accuracy,
        timeframe=result.timeframe,
        features=FeaturesSchema(
            rsi=result.features.rsi,
            trend=result.features.trend,
            volatility=result.features.volatility,
            volume_trend=result.features.volume_trend,
        ),
    )


@router.get(
    "/symbols",
    response_model=SymbolSearchResponse,
    summary="Search symbols",
    description="Case-insensitive substring search over known listings (max 8).",
)
def search_symbols(
    q: str = Query(default="", max_length=QUERY_MAX_LEN, description="Search text"),
    use_case: SearchSymbolsUseCase = Depends(get_search_symbols_use_case),
) -> SymbolSearchResponse:
    """Return listings matching the query for autocomplete."""
    matches = use_case.execute(SearchSymbolsQuery(query=q))
    return SymbolSearchResponse(
        results=[
            SymbolItem(symbol=m.symbol, name=m.name, market=m.market)
            for m in matches
        ]
    )
