"""Abstract base class for quote providers."""
from abc import ABC, abstractmethod

from finance_dashboard.schemas import MarketIndex, SearchResult, StockQuote


class QuoteProviderABC(ABC):
    """Read-only source of stock snapshots and market indices.

    Lookups are synchronous; an unknown symbol is reported as None rather
    than raised, so callers can fall back to defaults.
    """

    @abstractmethod
    def get_quote(self, symbol: str) -> StockQuote | None:
        """Return the snapshot for symbol, or None if it is unknown.

        Args:
            symbol: Ticker, any case (e.g. "aapl", "AAPL").
        """

    @abstractmethod
    def get_market_overview(self) -> dict[str, MarketIndex]:
        """Return the market indices keyed by display name (e.g. "S&P 500")."""

    @abstractmethod
    def search(self, query: str) -> list[SearchResult]:
        """Return symbols whose ticker or name contains query (case-insensitive)."""
