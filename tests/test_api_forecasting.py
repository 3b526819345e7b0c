"""
Tests for the forecasting API endpoints.

Tests FastAPI routes with the series provider pinned to a fixed series.
Validates request handling, response schemas, and error mapping.
"""

import random

import pytest
from fastapi.testclient import TestClient

from stockpulse.application.forecasting.predict_signal import PredictSignalUseCase
from stockpulse.interfaces.forecasting.dependencies import (
    get_predict_signal_use_case,
    get_series_provider,
)
from stockpulse.main import app
from stockpulse.shared.security.headers import SECURE_HEADERS
from stockpulse.shared.security.rate_limiting import limiter
from tests.conftest import StubSeriesProvider

PREDICT_URL = "/api/v1/forecasting/predict"
SYMBOLS_URL = "/api/v1/forecasting/symbols"

client = TestClient(app)


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def pinned_series(synthetic_series):
    """Serve every prediction from the seeded synthetic series."""
    provider = StubSeriesProvider(synthetic_series)
    app.dependency_overrides[get_predict_signal_use_case] = lambda: PredictSignalUseCase(
        provider, rng=random.Random(1)
    )
    return provider


class TestPredictionEndpoint:
    """Tests for POST /api/v1/forecasting/predict."""

    def test_valid_request(self, pinned_series) -> None:
        response = client.post(PREDICT_URL, json={"symbol": "AAPL", "timeframe": "tomorrow"})

        assert response.status_code == 200
        body = response.json()
        assert body["symbol"] == "AAPL"
        assert body["timeframe"] == "tomorrow"
        assert body["prediction"] in {"BUY", "SELL", "HOLD"}
        assert 0 <= body["confidence"] <= 100
        assert 0 <= body["accuracy"] <= 100
        assert set(body["features"]) == {"rsi", "trend", "volatility", "volume_trend"}
        assert 0 <= body["features"]["rsi"] <= 100

    def test_symbol_is_uppercased(self, pinned_series) -> None:
        response = client.post(PREDICT_URL, json={"symbol": "msft"})
        assert response.status_code == 200
        assert response.json()["symbol"] == "MSFT"
        assert pinned_series.requested == ["MSFT"]

    def test_timeframe_defaults_to_tomorrow(self, pinned_series) -> None:
        response = client.post(PREDICT_URL, json={"symbol": "AAPL"})
        assert response.json()["timeframe"] == "tomorrow"

    def test_missing_symbol_rejected(self, pinned_series) -> None:
        response = client.post(PREDICT_URL, json={"timeframe": "today"})
        assert response.status_code == 400
        assert response.json()["error"] == "Stock symbol is required"

    def test_invalid_timeframe_rejected(self, pinned_series) -> None:
        response = client.post(PREDICT_URL, json={"symbol": "AAPL", "timeframe": "nextweek"})
        assert response.status_code == 400
        assert "nextweek" in response.json()["error"]

    def test_empty_series_is_not_found(self) -> None:
        app.dependency_overrides[get_predict_signal_use_case] = lambda: PredictSignalUseCase(
            StubSeriesProvider([])
        )
        response = client.post(PREDICT_URL, json={"symbol": "ZZZZ"})
        assert response.status_code == 404
        assert response.json() == {"error": "Stock data not found"}

    def test_null_symbol_rejected(self, pinned_series) -> None:
        response = client.post(PREDICT_URL, json={"symbol": None})
        assert response.status_code == 400
        assert response.json() == {"error": "Stock symbol is required"}

    def test_null_timeframe_rejected(self, pinned_series) -> None:
        response = client.post(PREDICT_URL, json={"symbol": "AAPL", "timeframe": None})
        assert response.status_code == 400
        assert "today" in response.json()["error"]

    def test_overlong_symbol_rejected(self, pinned_series) -> None:
        response = client.post(PREDICT_URL, json={"symbol": "A" * 50})
        assert response.status_code == 422


class TestSymbolSearchEndpoint:
    """Tests for GET /api/v1/forecasting/symbols."""

    def test_matches(self) -> None:
        response = client.get(SYMBOLS_URL, params={"q": "bank"})
        assert response.status_code == 200
        symbols = [item["symbol"] for item in response.json()["results"]]
        assert symbols == ["HDFCBANK", "SBIN", "KOTAKBANK", "AXISBANK"]

    def test_empty_query(self) -> None:
        response = client.get(SYMBOLS_URL)
        assert response.status_code == 200
        assert response.json() == {"results": []}

    def test_capped_at_eight(self) -> None:
        response = client.get(SYMBOLS_URL, params={"q": "a"})
        assert len(response.json()["results"]) == 8


class TestHealthEndpoint:
    """Tests for GET /api/v1/health."""

    def test_health(self) -> None:
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["quote_source"] in {"alpha_vantage", "synthetic"}
        assert body["cached_series"] >= 0


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self) -> None:
        response = client.get("/api/v1/health")
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value

    def test_headers_on_error_responses(self, pinned_series) -> None:
        response = client.post(PREDICT_URL, json={"symbol": ""})
        assert response.status_code == 400
        assert response.headers["X-Frame-Options"] == "DENY"


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_prediction_rate_limit_returns_429(self, pinned_series) -> None:
        statuses = [
            client.post(PREDICT_URL, json={"symbol": "AAPL"}).status_code
            for _ in range(40)
        ]
        assert statuses[0] == 200
        assert statuses[-1] == 429

    def test_default_limit_applies_to_other_routes(self) -> None:
        statuses = [
            client.get(SYMBOLS_URL, params={"q": "bank"}).status_code
            for _ in range(70)
        ]
        assert statuses[0] == 200
        assert statuses[-1] == 429

    def test_default_limit_response_shape(self) -> None:
        for _ in range(60):
            client.get("/api/v1/health")
        response = client.get("/api/v1/health")
        assert response.status_code == 429
        assert response.json()["error"] == "Rate limit exceeded"
        assert response.headers["X-Frame-Options"] == "DENY"


class TestLifespan:
    """Tests for startup/shutdown handling."""

    def test_restart_builds_a_fresh_provider(self) -> None:
        with TestClient(app) as first:
            assert first.post(PREDICT_URL, json={"symbol": "AAPL"}).status_code == 200
        assert get_series_provider.cache_info().currsize == 0

        with TestClient(app) as second:
            response = second.post(PREDICT_URL, json={"symbol": "MSFT"})
            assert response.status_code == 200
            assert response.json()["symbol"] == "MSFT"
