"""Watchlist service: one entry per symbol per user, enriched with quote data."""
import logging
from datetime import datetime, timezone

from finance_dashboard.db import MemoryStore, WatchlistItem
from finance_dashboard.errors import (DuplicateSymbolError, OwnershipError,
                                      RecordNotFoundError)
from finance_dashboard.providers import QuoteProviderABC
from finance_dashboard.providers.core import normalize_stock_symbol
from finance_dashboard.schemas import (EnrichedWatchlistItem,
                                       WatchlistItemCreate, WatchlistItemRead)
from finance_dashboard.services.enrichment import enrich_watchlist

logger = logging.getLogger(__name__)

RESOURCE = "Watchlist item"


class WatchlistService:
    """Operates on one user's watchlist.

    Symbols need not exist in the quote table; unknown ones are reported as
    "Unknown" when listed.
    """

    def __init__(self, store: MemoryStore, quotes: QuoteProviderABC) -> None:
        self._store = store
        self._quotes = quotes

    def list_items(self, user_id: int) -> list[EnrichedWatchlistItem]:
        return enrich_watchlist(self._store.get_watchlist_items(user_id), self._quotes)

    def add_item(self, user_id: int, payload: WatchlistItemCreate) -> WatchlistItemRead:
        """Add a symbol. Raises DuplicateSymbolError if the user already follows it."""
        symbol = normalize_stock_symbol(payload.symbol)
        if self._store.get_watchlist_item_by_symbol(user_id, symbol) is not None:
            logger.warning("User %s already watches %s", user_id, symbol)
            raise DuplicateSymbolError(symbol)
        item = self._store.add_watchlist_item(
            WatchlistItem(
                user_id=user_id, symbol=symbol, date_added=datetime.now(timezone.utc)
            )
        )
        logger.info("Added %s to watchlist of user %s (id=%s)", symbol, user_id, item.id)
        return WatchlistItemRead.model_validate(item.model_dump())

    def delete_item(self, user_id: int, item_id: int) -> None:
        """Remove an entry.

        Raises:
            RecordNotFoundError: No entry with item_id.
            OwnershipError: Entry belongs to another user.
        """
        item = self._store.get_watchlist_item(item_id)
        if item is None:
            logger.warning("Watchlist item %s not found", item_id)
            raise RecordNotFoundError(RESOURCE, item_id)
        if item.user_id != user_id:
            logger.warning("User %s denied access to watchlist item %s", user_id, item_id)
            raise OwnershipError(RESOURCE, item_id)
        self._store.delete_watchlist_item(item_id)
        logger.info("Removed %s from watchlist of user %s", item.symbol, user_id)
