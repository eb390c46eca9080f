"""Loading and debounced saving of view preferences."""

import asyncio
from typing import Optional

from ..core.logging import get_logger
from .models import Preferences
from .storage import LocalStorage

logger = get_logger("client.preferences")

PREFERENCES_KEY = "quicknotes-preferences"


class PreferenceStore:
    """Persist ``Preferences`` under a single storage key.

    ``schedule_save`` waits ``debounce_seconds`` after the last change before
    writing. Without a running event loop the write happens immediately.
    """

    def __init__(self, storage: LocalStorage, debounce_seconds: float = 0.5):
        self.storage = storage
        self.debounce_seconds = debounce_seconds
        self._pending: Optional[Preferences] = None
        self._handle: Optional[asyncio.TimerHandle] = None

    def load(self) -> Preferences:
        return Preferences.from_json(self.storage.get_item(PREFERENCES_KEY))

    def save_now(self, preferences: Preferences) -> None:
        self.storage.set_item(PREFERENCES_KEY, preferences.to_json())
        logger.debug("Preferences saved", extra={"preferences": preferences.model_dump(by_alias=True)})

    def schedule_save(self, preferences: Preferences) -> None:
        self._pending = preferences
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.flush()
            return
        self._handle = loop.call_later(self.debounce_seconds, self.flush)

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def flush(self) -> None:
        """Write any pending preferences right away."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self._pending is None:
            return
        preferences, self._pending = self._pending, None
        self.save_now(preferences)
