"""Stocks service: search, quote, history and market overview."""
from finance_dashboard.errors import InvalidRequestError, RecordNotFoundError
from finance_dashboard.providers import HistoryGenerator, QuoteProviderABC
from finance_dashboard.providers.core import normalize_stock_symbol
from finance_dashboard.schemas import (HistoryPoint, MarketIndex, SearchResult,
                                       StockQuote)


class StocksService:
    """Thin service over the quote provider and history generator."""

    def __init__(self, quotes: QuoteProviderABC, history: HistoryGenerator) -> None:
        self._quotes = quotes
        self._history = history

    def search(self, query: str | None) -> list[SearchResult]:
        """Substring search over symbols and names. Raises InvalidRequestError on a blank query."""
        if query is None or not query.strip():
            raise InvalidRequestError("Query parameter 'q' is required")
        return self._quotes.search(query)

    def get_quote(self, symbol: str) -> StockQuote:
        """Get the snapshot for a symbol. Raises RecordNotFoundError if unknown."""
        quote = self._quotes.get_quote(symbol)
        if quote is None:
            raise RecordNotFoundError("Stock", normalize_stock_symbol(symbol))
        return quote

    def get_history(self, symbol: str, timeframe: str | None) -> list[HistoryPoint]:
        """Synthetic history for a known symbol. Raises RecordNotFoundError if unknown."""
        quote = self.get_quote(symbol)
        return self._history.for_timeframe(quote.symbol, timeframe)

    def get_market_overview(self) -> dict[str, MarketIndex]:
        return self._quotes.get_market_overview()
