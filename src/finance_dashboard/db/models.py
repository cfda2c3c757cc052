"""Entity models for the dashboard's in-memory store.

Records are plain SQLModel models (no table mapping): ids are assigned by
the store, not by a database.
"""
from datetime import date, datetime
from enum import Enum

from sqlmodel import Field, SQLModel

DEFAULT_TIMEFRAME = "1D"
DEFAULT_THEME = "light"
DEFAULT_FAVORITE_INDICATORS = ("SMA", "EMA")


class Timeframe(str, Enum):
    """Chart timeframe buckets."""

    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"


class User(SQLModel):
    """Demo account; created once at startup."""

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True)
    password: str


class PortfolioItem(SQLModel):
    """A holding: shares of a symbol bought at a price on a date."""

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(index=True)
    symbol: str
    company_name: str
    shares: float
    purchase_price: float
    purchase_date: date


class WatchlistItem(SQLModel):
    """A symbol the user follows; at most one per (user_id, symbol)."""

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(index=True)
    symbol: str
    date_added: datetime


class UserPreferences(SQLModel):
    """Display preferences; at most one record per user."""

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(unique=True, index=True)
    default_timeframe: str = DEFAULT_TIMEFRAME
    theme: str = DEFAULT_THEME
    favorite_indicators: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FAVORITE_INDICATORS)
    )
