"""Watchlist routes for the acting user."""
from fastapi import APIRouter, Response, status

from finance_dashboard.deps import CurrentUserId, WatchlistServiceDep
from finance_dashboard.schemas import (EnrichedWatchlistItem,
                                       WatchlistItemCreate, WatchlistItemRead)

router = APIRouter(prefix="/api/watchlist", tags=["watchlist"])


@router.get("", response_model=list[EnrichedWatchlistItem])
async def list_watchlist(
    user_id: CurrentUserId, service: WatchlistServiceDep
) -> list[EnrichedWatchlistItem]:
    """List watched symbols with name, price and change."""
    return service.list_items(user_id)


@router.post("", response_model=WatchlistItemRead, status_code=status.HTTP_201_CREATED)
async def add_watchlist_item(
    payload: WatchlistItemCreate, user_id: CurrentUserId, service: WatchlistServiceDep
) -> WatchlistItemRead:
    """Watch a symbol. Returns 409 if it is already on the watchlist."""
    return service.add_item(user_id, payload)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_watchlist_item(
    item_id: int, user_id: CurrentUserId, service: WatchlistServiceDep
) -> Response:
    service.delete_item(user_id, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
