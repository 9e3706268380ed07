"""AppSettings: persisted preferences, the shopping workflow state and misc-item history."""
from enum import Enum
from typing import List, Optional

from home_inventory.utilities.constants import (
    DEFAULT_REMINDER_TIME_1, DEFAULT_REMINDER_TIME_2, MISC_HISTORY_LIMIT, MISC_SUGGESTION_LIMIT
)


class ShoppingState(Enum):
    EMPTY = "EMPTY"            # no shopping list
    GENERATING = "GENERATING"  # list is being built and can be edited
    LIST_READY = "LIST_READY"  # list finalized, read-only
    SHOPPING = "SHOPPING"      # trip in progress, checklist unlocked

    @staticmethod
    def from_string(value) -> "ShoppingState":
        try:
            return ShoppingState(str(value).upper())
        except ValueError:
            return ShoppingState.EMPTY


class AppSettings:
    def __init__(self, is_dark_mode: bool = False, is_security_enabled: bool = False,
                 is_inventory_reminder_enabled: bool = False, is_second_reminder_enabled: bool = False,
                 reminder_time1: str = DEFAULT_REMINDER_TIME_1, reminder_time2: str = DEFAULT_REMINDER_TIME_2,
                 shopping_state: ShoppingState = ShoppingState.EMPTY,
                 misc_item_history: Optional[List[str]] = None):
        self.is_dark_mode = is_dark_mode
        self.is_security_enabled = is_security_enabled
        self.is_inventory_reminder_enabled = is_inventory_reminder_enabled
        self.is_second_reminder_enabled = is_second_reminder_enabled
        self.reminder_time1 = reminder_time1
        self.reminder_time2 = reminder_time2
        self.shopping_state = shopping_state
        self.misc_item_history = misc_item_history[:] if misc_item_history else []

    def copy(self, **changes) -> "AppSettings":
        '''Returns a new AppSettings with the given fields replaced.'''
        data = self.to_dict()
        data.update(changes)
        if isinstance(data.get("shopping_state"), str):
            data["shopping_state"] = ShoppingState.from_string(data["shopping_state"])
        return AppSettings(**data)

    def add_misc_item_to_history(self, item: str) -> "AppSettings":
        """Record a misc item as the most recent entry.

        An existing entry is moved to the end rather than duplicated; when the
        history exceeds MISC_HISTORY_LIMIT the oldest entries are dropped.
        """
        history = [entry for entry in self.misc_item_history if entry != item]
        history.append(item)
        return self.copy(misc_item_history=history[-MISC_HISTORY_LIMIT:])

    def misc_item_suggestions(self) -> List[str]:
        suggestions: List[str] = []
        for entry in reversed(self.misc_item_history):
            if entry not in suggestions:
                suggestions.append(entry)
            if len(suggestions) == MISC_SUGGESTION_LIMIT:
                break
        return suggestions

    def __eq__(self, other) -> bool:
        if not isinstance(other, AppSettings):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"AppSettings(state={self.shopping_state.name}, dark_mode={self.is_dark_mode}, misc={len(self.misc_item_history)})"

    @staticmethod
    def from_dict(data):
        '''Creates AppSettings from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"is_dark_mode", "is_security_enabled", "is_inventory_reminder_enabled",
                   "is_second_reminder_enabled", "reminder_time1", "reminder_time2",
                   "shopping_state", "misc_item_history"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered["shopping_state"] = ShoppingState.from_string(filtered.get("shopping_state", "EMPTY"))
        filtered["misc_item_history"] = [str(x) for x in filtered.get("misc_item_history") or []]
        return AppSettings(**filtered)

    def to_dict(self):
        return {
            "is_dark_mode": self.is_dark_mode,
            "is_security_enabled": self.is_security_enabled,
            "is_inventory_reminder_enabled": self.is_inventory_reminder_enabled,
            "is_second_reminder_enabled": self.is_second_reminder_enabled,
            "reminder_time1": self.reminder_time1,
            "reminder_time2": self.reminder_time2,
            "shopping_state": self.shopping_state.value,
            "misc_item_history": list(self.misc_item_history),
        }
