"""Derived metrics for portfolio and watchlist records.

Joins stored records with quote data before they are returned to callers.
"""
from finance_dashboard.db import PortfolioItem, WatchlistItem
from finance_dashboard.providers.core import QuoteProviderABC, round2
from finance_dashboard.schemas import (EnrichedPortfolioItem,
                                       EnrichedWatchlistItem, PortfolioSummary)

UNKNOWN_NAME = "Unknown"


def enrich_portfolio_item(
    item: PortfolioItem, quotes: QuoteProviderABC
) -> EnrichedPortfolioItem:
    """Add currentPrice, totalValue, totalCost, profit and percentChange.

    An unknown symbol is valued at its purchase price.
    """
    quote = quotes.get_quote(item.symbol)
    current_price = quote.price if quote is not None else item.purchase_price
    total_value = current_price * item.shares
    total_cost = item.purchase_price * item.shares
    percent_change = (current_price - item.purchase_price) / item.purchase_price * 100
    return EnrichedPortfolioItem(
        **item.model_dump(),
        current_price=current_price,
        total_value=total_value,
        total_cost=total_cost,
        profit=total_value - total_cost,
        percent_change=round2(percent_change),
    )


def enrich_portfolio(
    items: list[PortfolioItem], quotes: QuoteProviderABC
) -> list[EnrichedPortfolioItem]:
    return [enrich_portfolio_item(item, quotes) for item in items]


def summarize_portfolio(items: list[EnrichedPortfolioItem]) -> PortfolioSummary:
    """Totals across enriched items; percentChange is 0 for an empty portfolio."""
    total_value = sum(i.total_value for i in items)
    total_cost = sum(i.total_cost for i in items)
    profit = total_value - total_cost
    percent_change = round2(profit / total_cost * 100) if total_cost > 0 else 0.0
    return PortfolioSummary(
        total_value=total_value,
        total_cost=total_cost,
        profit=profit,
        percent_change=percent_change,
        item_count=len(items),
    )


def enrich_watchlist_item(
    item: WatchlistItem, quotes: QuoteProviderABC
) -> EnrichedWatchlistItem:
    """Add name, price and change; unknown symbols get ("Unknown", 0, 0)."""
    quote = quotes.get_quote(item.symbol)
    if quote is None:
        name, price, change = UNKNOWN_NAME, 0.0, 0.0
    else:
        name, price, change = quote.name, quote.price, quote.change
    return EnrichedWatchlistItem(
        **item.model_dump(), name=name, price=price, change=change
    )


def enrich_watchlist(
    items: list[WatchlistItem], quotes: QuoteProviderABC
) -> list[EnrichedWatchlistItem]:
    return [enrich_watchlist_item(item, quotes) for item in items]
