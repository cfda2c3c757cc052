"""Pydantic schemas for API payloads and responses. Serialized with camelCase keys."""
import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from finance_dashboard.db import Timeframe


class CamelModel(BaseModel):
    """Base for API models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


# ---- Market data ----
class StockQuote(CamelModel):
    """Point-in-time snapshot of a symbol."""

    symbol: str
    name: str
    price: float
    change: float
    market_cap: str
    pe_ratio: float
    dividend_yield: float


class SearchResult(CamelModel):
    symbol: str
    name: str
    price: float
    change: float


class MarketIndex(CamelModel):
    value: float
    change: float  # percent
    change_amount: float


class HistoryPoint(CamelModel):
    """One day of a synthetic price series."""

    date: dt.date
    value: float


# ---- Portfolio ----
class PortfolioItemCreate(CamelModel):
    symbol: str = Field(min_length=1)
    company_name: str = Field(min_length=1)
    shares: float = Field(gt=0, allow_inf_nan=False)
    purchase_price: float = Field(gt=0, allow_inf_nan=False)
    purchase_date: dt.date


class PortfolioItemUpdate(CamelModel):
    """Partial update; only fields present in the payload are applied."""

    symbol: str | None = Field(default=None, min_length=1)
    company_name: str | None = Field(default=None, min_length=1)
    shares: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    purchase_price: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    purchase_date: dt.date | None = None


class PortfolioItemRead(CamelModel):
    id: int
    user_id: int
    symbol: str
    company_name: str
    shares: float
    purchase_price: float
    purchase_date: dt.date


class EnrichedPortfolioItem(PortfolioItemRead):
    """Portfolio item with metrics derived from the current quote."""

    current_price: float
    total_value: float
    total_cost: float
    profit: float
    percent_change: float


class PortfolioSummary(CamelModel):
    total_value: float
    total_cost: float
    profit: float
    percent_change: float
    item_count: int


# ---- Watchlist ----
class WatchlistItemCreate(CamelModel):
    symbol: str = Field(min_length=1)


class WatchlistItemRead(CamelModel):
    id: int
    user_id: int
    symbol: str
    date_added: dt.datetime


class EnrichedWatchlistItem(WatchlistItemRead):
    name: str
    price: float
    change: float


# ---- Preferences ----
class PreferencesUpdate(CamelModel):
    model_config = ConfigDict(use_enum_values=True)

    default_timeframe: Timeframe | None = None
    theme: str | None = Field(default=None, min_length=1)
    favorite_indicators: list[str] | None = None


class PreferencesRead(CamelModel):
    id: int
    user_id: int
    default_timeframe: str
    theme: str
    favorite_indicators: list[str]


__all__ = [
    "CamelModel",
    "EnrichedPortfolioItem",
    "EnrichedWatchlistItem",
    "HistoryPoint",
    "MarketIndex",
    "PortfolioItemCreate",
    "PortfolioItemRead",
    "PortfolioItemUpdate",
    "PortfolioSummary",
    "PreferencesRead",
    "PreferencesUpdate",
    "SearchResult",
    "StockQuote",
    "WatchlistItemCreate",
    "WatchlistItemRead",
]
