"""API routers.

Includes routes for:
- /api/search, /api/stocks - Symbol search, quotes and synthetic history
- /api/market - Market index overview
- /api/portfolio - Holdings CRUD, enrichment and summary
- /api/watchlist - Watched symbols
- /api/preferences - Display preferences
"""
from finance_dashboard.routers.markets import router as markets_router
from finance_dashboard.routers.portfolio import router as portfolio_router
from finance_dashboard.routers.preferences import router as preferences_router
from finance_dashboard.routers.stocks import router as stocks_router
from finance_dashboard.routers.watchlist import router as watchlist_router

__all__ = [
    "markets_router",
    "portfolio_router",
    "preferences_router",
    "stocks_router",
    "watchlist_router",
]
