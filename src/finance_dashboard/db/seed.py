"""Bootstrap data: the demo user and their sample holdings."""
import logging
from datetime import date, datetime, timezone

from finance_dashboard.db.models import (PortfolioItem, User, UserPreferences,
                                         WatchlistItem)
from finance_dashboard.db.store import MemoryStore

logger = logging.getLogger(__name__)

DEMO_USERNAME = "demo"
DEMO_PASSWORD = "demo"

_SAMPLE_HOLDINGS = (
    ("AAPL", "Apple Inc.", 10, 150.50, date(2023, 1, 15)),
    ("MSFT", "Microsoft Corporation", 5, 280.75, date(2023, 2, 10)),
    ("GOOGL", "Alphabet Inc.", 3, 2150.20, date(2023, 3, 5)),
)
_SAMPLE_WATCHLIST = ("TSLA", "AMZN")


def seed_demo_data(store: MemoryStore, *, with_samples: bool = True) -> User:
    """Create the demo user (once) and, optionally, their sample data.

    Safe to call repeatedly: if the demo user already exists it is returned
    unchanged and nothing else is added.

    Args:
        store: Store to populate.
        with_samples: Also add sample portfolio items, watchlist and preferences.

    Returns:
        The demo user.
    """
    existing = store.get_user_by_username(DEMO_USERNAME)
    if existing is not None:
        return existing

    user = store.create_user(User(username=DEMO_USERNAME, password=DEMO_PASSWORD))
    logger.info("Created demo user id=%s", user.id)
    if not with_samples:
        return user

    for symbol, name, shares, price, purchased in _SAMPLE_HOLDINGS:
        store.add_portfolio_item(
            PortfolioItem(
                user_id=user.id,
                symbol=symbol,
                company_name=name,
                shares=shares,
                purchase_price=price,
                purchase_date=purchased,
            )
        )
    now = datetime.now(timezone.utc)
    for symbol in _SAMPLE_WATCHLIST:
        store.add_watchlist_item(
            WatchlistItem(user_id=user.id, symbol=symbol, date_added=now)
        )
    store.create_user_preferences(
        UserPreferences(
            user_id=user.id,
            default_timeframe="1W",
            theme="light",
            favorite_indicators=["SMA", "EMA", "MACD"],
        )
    )
    logger.info(
        "Seeded demo data: %d holdings, %d watchlist symbols",
        len(_SAMPLE_HOLDINGS),
        len(_SAMPLE_WATCHLIST),
    )
    return user
