"""Preferences service: read, and create-or-merge on write."""
import logging

from finance_dashboard.db import MemoryStore, UserPreferences
from finance_dashboard.errors import RecordNotFoundError
from finance_dashboard.schemas import PreferencesRead, PreferencesUpdate

logger = logging.getLogger(__name__)


class PreferencesService:
    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    def get(self, user_id: int) -> PreferencesRead:
        """Raises RecordNotFoundError if the user has never saved preferences."""
        prefs = self._store.get_user_preferences(user_id)
        if prefs is None:
            raise RecordNotFoundError("User preferences")
        return PreferencesRead.model_validate(prefs.model_dump())

    def update(self, user_id: int, payload: PreferencesUpdate) -> PreferencesRead:
        """Merge payload into the user's record, creating it from defaults if absent."""
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        prefs = self._store.update_user_preferences(user_id, changes)
        if prefs is None:
            prefs = self._store.create_user_preferences(
                UserPreferences(user_id=user_id, **changes)
            )
            logger.info("Created preferences for user %s", user_id)
        else:
            logger.info("Updated preferences for user %s: %s", user_id, sorted(changes))
        return PreferencesRead.model_validate(prefs.model_dump())
