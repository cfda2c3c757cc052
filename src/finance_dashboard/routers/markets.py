"""Market-wide views."""
from fastapi import APIRouter

from finance_dashboard.deps import StocksServiceDep
from finance_dashboard.schemas import MarketIndex

router = APIRouter(prefix="/api/market", tags=["markets"])


@router.get("/overview", response_model=dict[str, MarketIndex])
async def get_market_overview(service: StocksServiceDep) -> dict[str, MarketIndex]:
    """Get the major indices keyed by name (S&P 500, NASDAQ, ...)."""
    return service.get_market_overview()
