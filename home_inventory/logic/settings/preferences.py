"""User preferences on top of the session's cached AppSettings."""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, List, Optional

from pydantic import ValidationError

from home_inventory.domain.AppSettings import AppSettings
from home_inventory.errors import StorageFailure, ValidationFailure
from home_inventory.utilities.validators import ReminderTimesInput

if TYPE_CHECKING:
    from home_inventory.session import InventorySession

logger = logging.getLogger(__name__)


class SettingsService:
    def __init__(self, session: "InventorySession"):
        self.session = session

    def current(self) -> AppSettings:
        return self.session.settings

    def _save(self, operation: str, settings: AppSettings) -> AppSettings:
        with self.session.transaction(operation) as tx:
            tx.settings.save(settings)
        return self.session.apply_settings(settings)

    def update(self, settings: AppSettings) -> AppSettings:
        """Persist new preferences.

        The shopping state and misc-item history belong to the shopping
        workflow and are carried over from the current settings.
        """
        with self.session.lock:
            current = self.session.settings
            merged = settings.copy(shopping_state=current.shopping_state,
                                   misc_item_history=current.misc_item_history)
            return self._save("update_settings", merged)

    def toggle_dark_mode(self) -> AppSettings:
        '''Flips dark mode immediately and rolls back if the write fails.'''
        with self.session.lock:
            previous = self.session.settings
            updated = previous.copy(is_dark_mode=not previous.is_dark_mode)
            self.session.apply_settings(updated)
            try:
                with self.session.transaction("toggle_dark_mode") as tx:
                    tx.settings.save(updated)
            except StorageFailure:
                logger.warning("Dark mode change reverted")
                self.session.apply_settings(previous)
                raise
            return updated

    def toggle_security(self) -> AppSettings:
        with self.session.lock:
            current = self.session.settings
            return self._save("toggle_security", current.copy(is_security_enabled=not current.is_security_enabled))

    def toggle_inventory_reminder(self) -> AppSettings:
        with self.session.lock:
            current = self.session.settings
            enabled = not current.is_inventory_reminder_enabled
            return self._save("toggle_inventory_reminder", current.copy(is_inventory_reminder_enabled=enabled))

    def update_reminder_times(self, time1: str, time2: Optional[str] = None) -> AppSettings:
        """Set reminder times ("HH:MM"); the second reminder is enabled iff time2 is given."""
        try:
            times = ReminderTimesInput(time1=time1, time2=time2)
        except ValidationError as e:
            raise ValidationFailure(f"Invalid reminder time: {e.errors()[0]['msg']}")
        with self.session.lock:
            changes = {
                "reminder_time1": times.time1,
                "is_second_reminder_enabled": times.time2 is not None,
            }
            if times.time2 is not None:
                changes["reminder_time2"] = times.time2
            return self._save("update_reminder_times", self.session.settings.copy(**changes))

    def misc_item_suggestions(self) -> List[str]:
        return self.session.settings.misc_item_suggestions()
