"""
Use case: Search known ticker symbols for autocomplete.

Input: SearchSymbolsQuery (query, limit)
Output: list[SymbolMatchResult]
Side effects: None.
Failure cases: None. A blank query yields no matches.
"""

from stockpulse.application.forecasting.dtos import (
    SearchSymbolsQuery,
    SymbolMatchResult,
)
from stockpulse.domain.forecasting.ports import SymbolCatalogPort


class SearchSymbolsUseCase:
    """Looks up listings by symbol or company-name substring."""

    def __init__(self, catalog: SymbolCatalogPort) -> None:
        self._catalog = catalog

    def execute(self, query: SearchSymbolsQuery) -> list[SymbolMatchResult]:
        """Return at most `query.limit` matching listings in catalog order."""
        if not query.query or not query.query.strip():
            return []

        return [
            SymbolMatchResult(symbol=s.symbol, name=s.name, market=s.market)
            for s in self._catalog.search(query.query, limit=query.limit)
        ]
