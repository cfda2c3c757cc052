"""Stock lookup routes: search, quote and synthetic history.

Lookup logic lives in StocksService; these are thin HTTP handlers.
"""
from fastapi import APIRouter, Query

from finance_dashboard.deps import StocksServiceDep
from finance_dashboard.schemas import HistoryPoint, SearchResult, StockQuote

router = APIRouter(prefix="/api", tags=["stocks"])


@router.get("/search", response_model=list[SearchResult])
async def search_stocks(
    service: StocksServiceDep,
    q: str | None = Query(default=None, description="Symbol or company name fragment"),
) -> list[SearchResult]:
    """Search the quote table by symbol or name (case-insensitive substring).

    Returns 400 when q is missing or blank.
    """
    return service.search(q)


@router.get("/stocks/{symbol}", response_model=StockQuote)
async def get_stock_quote(symbol: str, service: StocksServiceDep) -> StockQuote:
    """Get the snapshot for a stock symbol.

    Args:
        symbol: Stock ticker (e.g., "AAPL"); case-insensitive.
    """
    return service.get_quote(symbol)


@router.get("/stocks/{symbol}/history", response_model=list[HistoryPoint])
async def get_stock_history(
    symbol: str,
    service: StocksServiceDep,
    timeframe: str = Query(default="1M", description="1D, 1W, 1M, 6M or 1Y"),
) -> list[HistoryPoint]:
    """Get a synthetic daily price series for a stock.

    Unrecognized timeframes fall back to 30 days. The series differs between
    calls unless the server runs with a fixed history seed.
    """
    return service.get_history(symbol, timeframe)
