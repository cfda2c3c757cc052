"""FastAPI dependency injection: app.state holds singletons; Depends() resolves them.

The lifespan (main.py) creates the store, providers and services once and
attaches them to app.state; these getters are used by Depends().
"""
from typing import Annotated

from fastapi import Depends, Request

from finance_dashboard.services import (PortfolioService, PreferencesService,
                                        StocksService, WatchlistService)


def get_current_user_id(request: Request) -> int:
    """Id of the acting user. Always the demo user seeded at startup."""
    return request.app.state.demo_user_id


def get_stocks_service(request: Request) -> StocksService:
    return request.app.state.stocks_service


def get_portfolio_service(request: Request) -> PortfolioService:
    return request.app.state.portfolio_service


def get_watchlist_service(request: Request) -> WatchlistService:
    return request.app.state.watchlist_service


def get_preferences_service(request: Request) -> PreferencesService:
    return request.app.state.preferences_service


# Type aliases for route injection
CurrentUserId = Annotated[int, Depends(get_current_user_id)]
StocksServiceDep = Annotated[StocksService, Depends(get_stocks_service)]
PortfolioServiceDep = Annotated[PortfolioService, Depends(get_portfolio_service)]
WatchlistServiceDep = Annotated[WatchlistService, Depends(get_watchlist_service)]
PreferencesServiceDep = Annotated[PreferencesService, Depends(get_preferences_service)]
