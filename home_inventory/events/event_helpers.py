"""Event helper utilities.

Thin wrappers that publish state snapshots on a session's event bus.

Quick import:
    from home_inventory.events.event_helpers import (
        publish_inventory, publish_shopping, publish_settings, publish_notes, publish_error
    )
"""
from __future__ import annotations
from typing import Iterable, Any
from .Event_Bus import (
    EventBus,
    INVENTORY_CHANGED, SHOPPING_CHANGED, SETTINGS_CHANGED, NOTES_CHANGED, APP_ERROR
)

__all__ = [
    'publish_inventory', 'publish_shopping', 'publish_settings', 'publish_notes', 'publish_error'
]


def publish_inventory(bus: EventBus, items: Iterable[Any]):
    """Publish an inventory.changed event with the full item list."""
    bus.publish(INVENTORY_CHANGED, {'items': list(items)})


def publish_shopping(bus: EventBus, items: Iterable[Any], state: Any):
    """Publish a shopping.changed event (list + current workflow state)."""
    bus.publish(SHOPPING_CHANGED, {'items': list(items), 'state': state})


def publish_settings(bus: EventBus, settings: Any):
    bus.publish(SETTINGS_CHANGED, {'settings': settings})


def publish_notes(bus: EventBus, notes: Iterable[Any]):
    bus.publish(NOTES_CHANGED, {'notes': list(notes)})


def publish_error(bus: EventBus, operation: str, message: str):
    """Publish a user-visible, non-fatal failure message."""
    bus.publish(APP_ERROR, {'operation': operation, 'message': message})
