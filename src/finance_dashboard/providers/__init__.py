"""Market data providers.

- StaticQuoteProvider: fixed quote and market-index tables
- HistoryGenerator: synthetic daily price series seeded from a quote

Example:
    quotes = StaticQuoteProvider()
    history = HistoryGenerator(quotes, rng=random.Random(7))
    points = history.for_timeframe("AAPL", "1W")
"""
from finance_dashboard.providers.core import QuoteProviderABC
from finance_dashboard.providers.history import (HistoryGenerator,
                                                 days_for_timeframe)
from finance_dashboard.providers.quotes import StaticQuoteProvider

__all__ = [
    "HistoryGenerator",
    "QuoteProviderABC",
    "StaticQuoteProvider",
    "days_for_timeframe",
]
