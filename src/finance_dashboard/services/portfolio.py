"""Portfolio service: holdings CRUD with ownership checks and enrichment."""
import logging

from finance_dashboard.db import MemoryStore, PortfolioItem
from finance_dashboard.errors import OwnershipError, RecordNotFoundError
from finance_dashboard.providers import QuoteProviderABC
from finance_dashboard.providers.core import normalize_stock_symbol
from finance_dashboard.schemas import (EnrichedPortfolioItem,
                                       PortfolioItemCreate, PortfolioItemRead,
                                       PortfolioItemUpdate, PortfolioSummary)
from finance_dashboard.services.enrichment import (enrich_portfolio,
                                                   summarize_portfolio)

logger = logging.getLogger(__name__)

RESOURCE = "Portfolio item"


class PortfolioService:
    """Operates on one user's holdings.

    Every mutation checks existence, then ownership, before the store is
    touched, so a rejected request never leaves a partial change behind.
    """

    def __init__(self, store: MemoryStore, quotes: QuoteProviderABC) -> None:
        self._store = store
        self._quotes = quotes

    def _owned_item(self, user_id: int, item_id: int) -> PortfolioItem:
        item = self._store.get_portfolio_item(item_id)
        if item is None:
            logger.warning("Portfolio item %s not found", item_id)
            raise RecordNotFoundError(RESOURCE, item_id)
        if item.user_id != user_id:
            logger.warning("User %s denied access to portfolio item %s", user_id, item_id)
            raise OwnershipError(RESOURCE, item_id)
        return item

    def list_items(self, user_id: int) -> list[EnrichedPortfolioItem]:
        """User's holdings in insertion order, with current-price metrics."""
        return enrich_portfolio(self._store.get_portfolio_items(user_id), self._quotes)

    def summary(self, user_id: int) -> PortfolioSummary:
        """Portfolio-wide value, cost, profit and percent change."""
        return summarize_portfolio(self.list_items(user_id))

    def add_item(self, user_id: int, payload: PortfolioItemCreate) -> PortfolioItemRead:
        fields = payload.model_dump()
        fields["symbol"] = normalize_stock_symbol(fields["symbol"])
        item = self._store.add_portfolio_item(PortfolioItem(user_id=user_id, **fields))
        logger.info("Added portfolio item %s (%s) for user %s", item.id, item.symbol, user_id)
        return PortfolioItemRead.model_validate(item.model_dump())

    def update_item(
        self, user_id: int, item_id: int, payload: PortfolioItemUpdate
    ) -> PortfolioItemRead:
        """Merge the fields present in payload into the item.

        Raises:
            RecordNotFoundError: No item with item_id.
            OwnershipError: Item belongs to another user.
        """
        self._owned_item(user_id, item_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if "symbol" in changes:
            changes["symbol"] = normalize_stock_symbol(changes["symbol"])
        updated = self._store.update_portfolio_item(item_id, changes)
        logger.info("Updated portfolio item %s: %s", item_id, sorted(changes))
        return PortfolioItemRead.model_validate(updated.model_dump())

    def delete_item(self, user_id: int, item_id: int) -> None:
        """Remove the item. Raises RecordNotFoundError / OwnershipError like update_item."""
        self._owned_item(user_id, item_id)
        self._store.delete_portfolio_item(item_id)
        logger.info("Deleted portfolio item %s", item_id)
