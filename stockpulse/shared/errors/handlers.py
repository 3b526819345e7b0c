"""
Centralized error handlers for FastAPI.

Maps forecasting domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stockpulse.domain.forecasting.errors import (
    EmptySeriesError,
    ForecastingDomainError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation(
        _request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle malformed symbol or timeframe."""
        logger.warning("Rejected prediction request: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(EmptySeriesError)
    async def handle_empty_series(
        _request: Request, exc: EmptySeriesError
    ) -> JSONResponse:
        """Handle a symbol that resolved to no price data."""
        logger.warning("Empty series for symbol: %s", exc.symbol)
        return _error_response(HTTP_404, "Stock data not found")

    @app.exception_handler(ForecastingDomainError)
    async def handle_forecasting_domain(
        _request: Request, exc: ForecastingDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled forecasting domain errors."""
        logger.error("Unhandled forecasting domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
