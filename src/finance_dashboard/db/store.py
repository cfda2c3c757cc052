"""In-memory entity store.

Each entity kind lives in its own Collection: a dict from id to record plus
a next-id counter starting at 1. Ids are never reused after deletion.
Absence is reported as None/False, never raised.
"""
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from sqlmodel import SQLModel

from finance_dashboard.db.models import (PortfolioItem, User, UserPreferences,
                                         WatchlistItem)

ModelT = TypeVar("ModelT", bound=SQLModel)


class Collection(Generic[ModelT]):
    """Keyed records of one kind with monotonically increasing integer ids."""

    def __init__(self) -> None:
        self._records: dict[int, ModelT] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: int) -> ModelT | None:
        return self._records.get(record_id)

    def values(self) -> list[ModelT]:
        """All records in insertion order."""
        return list(self._records.values())

    def filter(self, predicate: Callable[[ModelT], bool]) -> list[ModelT]:
        return [r for r in self._records.values() if predicate(r)]

    def find(self, predicate: Callable[[ModelT], bool]) -> ModelT | None:
        """First record (in insertion order) matching predicate, or None."""
        return next((r for r in self._records.values() if predicate(r)), None)

    def add(self, record: ModelT) -> ModelT:
        """Store a copy of record under the next id and return it.

        Any id already set on record is ignored.
        """
        stored = record.model_copy(update={"id": self._next_id}, deep=True)
        self._next_id += 1
        self._records[stored.id] = stored
        return stored

    def update(self, record_id: int, fields: Mapping[str, Any]) -> ModelT | None:
        """Shallow-merge fields into the record; None if it does not exist."""
        existing = self._records.get(record_id)
        if existing is None:
            return None
        changes = {k: v for k, v in fields.items() if k != "id"}
        updated = existing.model_copy(update=changes)
        self._records[record_id] = updated
        return updated

    def delete(self, record_id: int) -> bool:
        return self._records.pop(record_id, None) is not None


class MemoryStore:
    """Process-local store for users, portfolio items, watchlist items and preferences."""

    def __init__(self) -> None:
        self.users: Collection[User] = Collection()
        self.portfolio_items: Collection[PortfolioItem] = Collection()
        self.watchlist_items: Collection[WatchlistItem] = Collection()
        self.user_preferences: Collection[UserPreferences] = Collection()

    # ---- Users ----
    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.users.find(lambda u: u.username == username)

    def create_user(self, user: User) -> User:
        """Add a user. Raises ValueError if the username is taken."""
        if self.get_user_by_username(user.username) is not None:
            raise ValueError(f"Username '{user.username}' already exists")
        return self.users.add(user)

    # ---- Portfolio ----
    def get_portfolio_items(self, user_id: int) -> list[PortfolioItem]:
        return self.portfolio_items.filter(lambda i: i.user_id == user_id)

    def get_portfolio_item(self, item_id: int) -> PortfolioItem | None:
        return self.portfolio_items.get(item_id)

    def add_portfolio_item(self, item: PortfolioItem) -> PortfolioItem:
        return self.portfolio_items.add(item)

    def update_portfolio_item(
        self, item_id: int, fields: Mapping[str, Any]
    ) -> PortfolioItem | None:
        return self.portfolio_items.update(item_id, fields)

    def delete_portfolio_item(self, item_id: int) -> bool:
        return self.portfolio_items.delete(item_id)

    # ---- Watchlist ----
    def get_watchlist_items(self, user_id: int) -> list[WatchlistItem]:
        return self.watchlist_items.filter(lambda i: i.user_id == user_id)

    def get_watchlist_item(self, item_id: int) -> WatchlistItem | None:
        return self.watchlist_items.get(item_id)

    def get_watchlist_item_by_symbol(
        self, user_id: int, symbol: str
    ) -> WatchlistItem | None:
        return self.watchlist_items.find(
            lambda i: i.user_id == user_id and i.symbol == symbol
        )

    def add_watchlist_item(self, item: WatchlistItem) -> WatchlistItem:
        return self.watchlist_items.add(item)

    def delete_watchlist_item(self, item_id: int) -> bool:
        return self.watchlist_items.delete(item_id)

    # ---- Preferences ----
    def get_user_preferences(self, user_id: int) -> UserPreferences | None:
        return self.user_preferences.find(lambda p: p.user_id == user_id)

    def create_user_preferences(self, preferences: UserPreferences) -> UserPreferences:
        return self.user_preferences.add(preferences)

    def update_user_preferences(
        self, user_id: int, fields: Mapping[str, Any]
    ) -> UserPreferences | None:
        existing = self.get_user_preferences(user_id)
        if existing is None:
            return None
        changes = {k: v for k, v in fields.items() if k != "user_id"}
        return self.user_preferences.update(existing.id, changes)
