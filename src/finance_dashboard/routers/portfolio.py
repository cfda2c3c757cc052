"""Portfolio routes for the acting user."""
from fastapi import APIRouter, Response, status

from finance_dashboard.deps import CurrentUserId, PortfolioServiceDep
from finance_dashboard.schemas import (EnrichedPortfolioItem,
                                       PortfolioItemCreate, PortfolioItemRead,
                                       PortfolioItemUpdate, PortfolioSummary)

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


@router.get("", response_model=list[EnrichedPortfolioItem])
async def list_portfolio(
    user_id: CurrentUserId, service: PortfolioServiceDep
) -> list[EnrichedPortfolioItem]:
    """List holdings with current price, value, cost, profit and percent change."""
    return service.list_items(user_id)


@router.get("/summary", response_model=PortfolioSummary)
async def get_portfolio_summary(
    user_id: CurrentUserId, service: PortfolioServiceDep
) -> PortfolioSummary:
    """Get totals across all holdings."""
    return service.summary(user_id)


@router.post("", response_model=PortfolioItemRead, status_code=status.HTTP_201_CREATED)
async def add_portfolio_item(
    payload: PortfolioItemCreate, user_id: CurrentUserId, service: PortfolioServiceDep
) -> PortfolioItemRead:
    return service.add_item(user_id, payload)


@router.put("/{item_id}", response_model=PortfolioItemRead)
async def update_portfolio_item(
    item_id: int,
    payload: PortfolioItemUpdate,
    user_id: CurrentUserId,
    service: PortfolioServiceDep,
) -> PortfolioItemRead:
    """Partially update a holding; omitted fields keep their values."""
    return service.update_item(user_id, item_id, payload)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_portfolio_item(
    item_id: int, user_id: CurrentUserId, service: PortfolioServiceDep
) -> Response:
    service.delete_item(user_id, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
