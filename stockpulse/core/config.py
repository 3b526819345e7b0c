"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here. No scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Placeholder key that means "no live source configured"
DEMO_API_KEY = "demo"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for the prediction endpoint.
        alpha_vantage_api_key: Optional live quote credential. When unset
            (or "demo") every series is synthetic.
        alpha_vantage_base_url: Alpha Vantage query endpoint.
        quote_fetch_timeout_seconds: Upper bound on one live fetch.
        series_cache_ttl_seconds: How long a resolved series is reused.
        series_cache_max_entries: Cache capacity before FIFO eviction.
        series_length: Number of most recent daily bars kept per symbol.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "StockPulse"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "30/minute"

    alpha_vantage_api_key: Optional[str] = None
    alpha_vantage_base_url: str = "https://www.alphavantage.co/query"
    quote_fetch_timeout_seconds: float = 10.0

    series_cache_ttl_seconds: float = 300.0
    series_cache_max_entries: int = 100
    series_length: int = 100

    def has_live_quotes(self) -> bool:
        """Return True when a real Alpha Vantage key is configured."""
        key = (self.alpha_vantage_api_key or "").strip()
        return bool(key) and key != DEMO_API_KEY


settings = Settings()
