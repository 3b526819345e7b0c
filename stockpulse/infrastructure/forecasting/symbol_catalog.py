"""
Adapter: Static symbol catalog.

Implements SymbolCatalogPort over a fixed list of popular US and
Indian listings. Pure and stateless.
"""

from stockpulse.domain.forecasting.entities import SymbolInfo
from stockpulse.domain.forecasting.ports import SymbolCatalogPort

POPULAR_SYMBOLS: tuple[SymbolInfo, ...] = (
    # US
    SymbolInfo("AAPL", "Apple Inc.", "US"),
    SymbolInfo("MSFT", "Microsoft Corporation", "US"),
    SymbolInfo("GOOGL", "Alphabet Inc.", "US"),
    SymbolInfo("AMZN", "Amazon.com Inc.", "US"),
    SymbolInfo("TSLA", "Tesla Inc.", "US"),
    SymbolInfo("NVDA", "NVIDIA Corporation", "US"),
    SymbolInfo("META", "Meta Platforms Inc.", "US"),
    SymbolInfo("NFLX", "Netflix Inc.", "US"),
    SymbolInfo("BABA", "Alibaba Group", "US"),
    SymbolInfo("V", "Visa Inc.", "US"),
    # India
    SymbolInfo("RELIANCE", "Reliance Industries Ltd.", "IN"),
    SymbolInfo("TCS", "Tata Consultancy Services", "IN"),
    SymbolInfo("HDFCBANK", "HDFC Bank Ltd.", "IN"),
    SymbolInfo("INFY", "Infosys Ltd.", "IN"),
    SymbolInfo("HINDUNILVR", "Hindustan Unilever Ltd.", "IN"),
    SymbolInfo("ITC", "ITC Ltd.", "IN"),
    SymbolInfo("SBIN", "State Bank of India", "IN"),
    SymbolInfo("BHARTIARTL", "Bharti Airtel Ltd.", "IN"),
    SymbolInfo("KOTAKBANK", "Kotak Mahindra Bank", "IN"),
    SymbolInfo("LT", "Larsen & Toubro Ltd.", "IN"),
    SymbolInfo("ASIANPAINT", "Asian Paints Ltd.", "IN"),
    SymbolInfo("MARUTI", "Maruti Suzuki India", "IN"),
    SymbolInfo("AXISBANK", "Axis Bank Ltd.", "IN"),
    SymbolInfo("HCLTECH", "HCL Technologies Ltd.", "IN"),
    SymbolInfo("ULTRACEMCO", "UltraTech Cement Ltd.", "IN"),
    SymbolInfo("SUNPHARMA", "Sun Pharmaceutical", "IN"),
    SymbolInfo("TITAN", "Titan Company Ltd.", "IN"),
    SymbolInfo("BAJFINANCE", "Bajaj Finance Ltd.", "IN"),
    SymbolInfo("NESTLEIND", "Nestle India Ltd.", "IN"),
    SymbolInfo("WIPRO", "Wipro Ltd.", "IN"),
)


class StaticSymbolCatalog(SymbolCatalogPort):
    """Case-insensitive substring search over a fixed listing table."""

    def __init__(self, symbols: tuple[SymbolInfo, ...] = POPULAR_SYMBOLS) -> None:
        self._symbols = symbols

    def search(self, query: str, limit: int = 8) -> list[SymbolInfo]:
        """Return listings whose symbol or name contains `query`, in table order."""
        if not query.strip():
            return []
        # Surrounding whitespace is part of the term
        term = query.lower()
        matches = [
            s for s in self._symbols
            if term in s.symbol.lower() or term in s.name.lower()
        ]
        return matches[:limit]
