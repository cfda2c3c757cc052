"""Service layer: domain rules over the store and providers.

Services raise finance_dashboard.errors exceptions; the app maps them to HTTP.
"""
from finance_dashboard.services.portfolio import PortfolioService
from finance_dashboard.services.preferences import PreferencesService
from finance_dashboard.services.stocks import StocksService
from finance_dashboard.services.watchlist import WatchlistService

__all__ = [
    "PortfolioService",
    "PreferencesService",
    "StocksService",
    "WatchlistService",
]
