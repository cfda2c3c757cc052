"""Display preference routes for the acting user."""
from fastapi import APIRouter

from finance_dashboard.deps import CurrentUserId, PreferencesServiceDep
from finance_dashboard.schemas import PreferencesRead, PreferencesUpdate

router = APIRouter(prefix="/api/preferences", tags=["preferences"])


@router.get("", response_model=PreferencesRead)
async def get_preferences(
    user_id: CurrentUserId, service: PreferencesServiceDep
) -> PreferencesRead:
    return service.get(user_id)


@router.put("", response_model=PreferencesRead)
async def update_preferences(
    payload: PreferencesUpdate, user_id: CurrentUserId, service: PreferencesServiceDep
) -> PreferencesRead:
    """Merge into saved preferences; creates them from defaults on first write."""
    return service.update(user_id, payload)
