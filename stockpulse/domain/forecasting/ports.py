"""
Port interfaces (ABCs) for the forecasting bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from stockpulse.domain.forecasting.entities import Bar, SymbolInfo


class QuoteSourcePort(ABC):
    """Port for a source of daily OHLCV bars (live API or synthetic)."""

    @abstractmethod
    def fetch_daily_series(self, symbol: str, limit: int = 100) -> list[Bar]:
        """Return up to `limit` most recent daily bars, oldest first.

        Raises:
            SourceUnavailableError: If the source cannot deliver data.
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release any held resources. Sources without any keep this no-op."""


class SeriesProviderPort(ABC):
    """Port for resolving a symbol to its daily series.

    Implementations never fail for data-source reasons; they fall back
    to substitute data instead.
    """

    @abstractmethod
    def get_series(self, symbol: str) -> list[Bar]:
        """Return the daily series for a normalized symbol, oldest first."""
        raise NotImplementedError


class SymbolCatalogPort(ABC):
    """Port for looking up known symbols."""

    @abstractmethod
    def search(self, query: str, limit: int = 8) -> list[SymbolInfo]:
        """Return listings whose symbol or name contains `query`."""
        raise NotImplementedError
