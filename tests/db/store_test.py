"""Tests for the in-memory entity store."""
from datetime import datetime, timezone

import pytest

from finance_dashboard.db import (Collection, MemoryStore, User, UserPreferences,
                                  WatchlistItem)


class TestCollection:
    """Tests for the generic keyed collection."""

    def test_ids_start_at_one_and_increase(self, user, make_holding):
        items: Collection = Collection()
        first = items.add(make_holding(user.id))
        second = items.add(make_holding(user.id, "MSFT"))
        assert first.id == 1
        assert second.id == 2

    def test_ids_not_reused_after_delete(self, user, make_holding):
        items: Collection = Collection()
        items.add(make_holding(user.id))
        second = items.add(make_holding(user.id))
        assert items.delete(second.id) is True
        third = items.add(make_holding(user.id))
        assert third.id == 3

    def test_add_ignores_preset_id(self, user, make_holding):
        items: Collection = Collection()
        stored = items.add(make_holding(user.id, id=99))
        assert stored.id == 1
        assert items.get(99) is None

    def test_add_stores_a_copy(self, user, make_holding):
        items: Collection = Collection()
        original = make_holding(user.id)
        stored = items.add(original)
        original.symbol = "CHANGED"
        assert items.get(stored.id).symbol == "AAPL"

    def test_update_merges_only_given_fields(self, user, make_holding):
        items: Collection = Collection()
        stored = items.add(make_holding(user.id, shares=5))
        updated = items.update(stored.id, {"shares": 8})
        assert updated.shares == 8
        assert updated.symbol == stored.symbol
        assert updated.purchase_price == stored.purchase_price
        assert items.get(stored.id).shares == 8

    def test_update_never_changes_id(self, user, make_holding):
        items: Collection = Collection()
        stored = items.add(make_holding(user.id))
        updated = items.update(stored.id, {"id": 50, "shares": 1})
        assert updated.id == stored.id

    def test_update_missing_returns_none(self):
        items: Collection = Collection()
        assert items.update(7, {"shares": 1}) is None

    def test_delete_missing_returns_false(self):
        items: Collection = Collection()
        assert items.delete(123) is False

    def test_values_preserve_insertion_order(self, user, make_holding):
        items: Collection = Collection()
        for symbol in ("NVDA", "AAPL", "JPM"):
            items.add(make_holding(user.id, symbol))
        assert [i.symbol for i in items.values()] == ["NVDA", "AAPL", "JPM"]
        assert len(items) == 3


class TestUsers:
    def test_lookup_by_id_and_username(self, store: MemoryStore, user):
        assert store.get_user(user.id) == user
        assert store.get_user_by_username("alice") == user
        assert store.get_user_by_username("nobody") is None

    def test_duplicate_username_raises(self, store: MemoryStore, user):
        with pytest.raises(ValueError, match="already exists"):
            store.create_user(User(username="alice", password="x"))


class TestPortfolioItems:
    def test_list_is_scoped_to_user(self, store, user, other_user, make_holding):
        store.add_portfolio_item(make_holding(user.id, "AAPL"))
        store.add_portfolio_item(make_holding(other_user.id, "MSFT"))
        store.add_portfolio_item(make_holding(user.id, "TSLA"))
        assert [i.symbol for i in store.get_portfolio_items(user.id)] == ["AAPL", "TSLA"]
        assert [i.symbol for i in store.get_portfolio_items(other_user.id)] == ["MSFT"]

    def test_new_item_id_exceeds_all_previous(self, store, user, make_holding):
        ids = [store.add_portfolio_item(make_holding(user.id)).id for _ in range(3)]
        newest = store.add_portfolio_item(make_holding(user.id))
        assert all(newest.id > i for i in ids)

    def test_update_and_delete(self, store, user, make_holding):
        item = store.add_portfolio_item(make_holding(user.id))
        assert store.update_portfolio_item(item.id, {"company_name": "Apple"}).company_name == "Apple"
        assert store.delete_portfolio_item(item.id) is True
        assert store.get_portfolio_item(item.id) is None
        assert store.delete_portfolio_item(item.id) is False


class TestWatchlistItems:
    def _watch(self, store, user_id, symbol):
        return store.add_watchlist_item(
            WatchlistItem(user_id=user_id, symbol=symbol, date_added=datetime.now(timezone.utc))
        )

    def test_get_by_symbol(self, store, user, other_user):
        item = self._watch(store, user.id, "AAPL")
        self._watch(store, other_user.id, "MSFT")
        assert store.get_watchlist_item_by_symbol(user.id, "AAPL") == item
        assert store.get_watchlist_item_by_symbol(user.id, "MSFT") is None
        assert store.get_watchlist_item_by_symbol(other_user.id, "AAPL") is None

    def test_delete(self, store, user):
        item = self._watch(store, user.id, "AAPL")
        assert store.delete_watchlist_item(item.id) is True
        assert store.get_watchlist_items(user.id) == []
        assert store.delete_watchlist_item(item.id) is False


class TestUserPreferences:
    def test_defaults(self, store, user):
        prefs = store.create_user_preferences(UserPreferences(user_id=user.id))
        assert prefs.default_timeframe == "1D"
        assert prefs.theme == "light"
        assert prefs.favorite_indicators == ["SMA", "EMA"]

    def test_update_found_by_user_id(self, store, user, other_user):
        store.create_user_preferences(UserPreferences(user_id=other_user.id))
        mine = store.create_user_preferences(UserPreferences(user_id=user.id))
        updated = store.update_user_preferences(user.id, {"theme": "dark"})
        assert updated.id == mine.id
        assert updated.theme == "dark"
        assert store.get_user_preferences(other_user.id).theme == "light"

    def test_update_cannot_reassign_owner(self, store, user, other_user):
        store.create_user_preferences(UserPreferences(user_id=user.id))
        updated = store.update_user_preferences(user.id, {"user_id": other_user.id})
        assert updated.user_id == user.id

    def test_update_missing_returns_none(self, store, user):
        assert store.update_user_preferences(user.id, {"theme": "dark"}) is None
