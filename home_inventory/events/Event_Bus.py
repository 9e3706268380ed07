"""Simple Event Bus / Observer implementation for inventory state changes.

Event names used so far:
  inventory.changed -> payload {"items": [InventoryItem, ...]}
  shopping.changed  -> payload {"items": [ShoppingListItem, ...], "state": ShoppingState}
  settings.changed  -> payload {"settings": AppSettings}
  notes.changed     -> payload {"notes": [Note, ...]}
  app.error         -> payload {"operation": str, "message": str}

Each payload carries the full latest snapshot, so a subscriber that misses an
event still converges on the next one.

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
INVENTORY_CHANGED = "inventory.changed"
SHOPPING_CHANGED = "shopping.changed"
SETTINGS_CHANGED = "settings.changed"
NOTES_CHANGED = "notes.changed"
APP_ERROR = "app.error"

ALL_EVENTS = (INVENTORY_CHANGED, SHOPPING_CHANGED, SETTINGS_CHANGED, NOTES_CHANGED, APP_ERROR)

Subscriber = Callable[[str, Any], None]


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Subscriber):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)
		return callback

	def unsubscribe(self, event_name: str, callback: Subscriber):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def subscriber_count(self, event_name: str) -> int:
		return len(self._subscribers.get(event_name, []))

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception as e:
				logger.error(f"[EventBus] Error delivering {event_name} to {cb}: {e}")


__all__ = [
	"EventBus", "Subscriber", "ALL_EVENTS",
	"INVENTORY_CHANGED", "SHOPPING_CHANGED", "SETTINGS_CHANGED", "NOTES_CHANGED", "APP_ERROR"
]
