"""Storage package: entity models, the in-memory store and demo seeding."""
from finance_dashboard.db.models import (PortfolioItem, Timeframe, User,
                                         UserPreferences, WatchlistItem)
from finance_dashboard.db.seed import seed_demo_data
from finance_dashboard.db.store import Collection, MemoryStore

__all__ = [
    "Collection",
    "MemoryStore",
    "PortfolioItem",
    "Timeframe",
    "User",
    "UserPreferences",
    "WatchlistItem",
    "seed_demo_data",
]
