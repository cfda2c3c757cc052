"""Shared pytest fixtures for finance dashboard tests."""
import random
from datetime import date

import pytest
from fastapi.testclient import TestClient

from finance_dashboard.config import Settings
from finance_dashboard.db import MemoryStore, PortfolioItem, User
from finance_dashboard.main import create_app
from finance_dashboard.providers import StaticQuoteProvider


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def quotes() -> StaticQuoteProvider:
    return StaticQuoteProvider()


@pytest.fixture
def reproducible_rng() -> random.Random:
    """Provide a seeded random source for deterministic history tests."""
    return random.Random(42)


@pytest.fixture
def user(store: MemoryStore) -> User:
    return store.create_user(User(username="alice", password="secret"))


@pytest.fixture
def other_user(store: MemoryStore) -> User:
    return store.create_user(User(username="bob", password="hunter2"))


@pytest.fixture
def make_holding():
    """Build an unsaved portfolio item with sensible defaults."""

    def _make(user_id: int, symbol: str = "AAPL", **overrides) -> PortfolioItem:
        fields = {
            "user_id": user_id,
            "symbol": symbol,
            "company_name": f"{symbol} Corp",
            "shares": 10,
            "purchase_price": 100.0,
            "purchase_date": date(2024, 1, 2),
        }
        fields.update(overrides)
        return PortfolioItem(**fields)

    return _make


@pytest.fixture
def client():
    """App seeded with the demo user's sample data and a fixed history seed."""
    app = create_app(Settings(seed_demo=True, history_seed=7))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def empty_client():
    """App with only the demo user: no holdings, watchlist or preferences."""
    app = create_app(Settings(seed_demo=False, history_seed=7))
    with TestClient(app) as test_client:
        yield test_client
