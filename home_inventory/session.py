"""Session: the single owner of one household dataset.

A session wires the record store, the event bus and the services together and
holds the cached AppSettings (which carries the shopping workflow state). All
mutating service calls go through `transaction()`, which serialises them with
a re-entrant lock and commits their staged writes atomically.
"""
import logging
from contextlib import contextmanager
from pathlib import Path
from threading import RLock
from typing import Iterator, List, Optional

from home_inventory.domain.AppSettings import AppSettings, ShoppingState
from home_inventory.domain.InventoryItem import InventoryItem
from home_inventory.domain.Note import Note
from home_inventory.domain.ShoppingListItem import ShoppingListItem
from home_inventory.errors import StorageFailure
from home_inventory.events.Event_Bus import EventBus, Subscriber
from home_inventory.events.event_helpers import (
    publish_error, publish_inventory, publish_notes, publish_settings, publish_shopping
)
from home_inventory.infra.Json_Store import JsonStore, UnitOfWork
from home_inventory.logic.insights.service import InsightsService
from home_inventory.logic.inventory.manager import InventoryService
from home_inventory.logic.notes.notebook import NotesService
from home_inventory.logic.settings.preferences import SettingsService
from home_inventory.logic.shopping.workflow import ShoppingListEngine

logger = logging.getLogger(__name__)


class InventorySession:
    def __init__(self, store: Optional[JsonStore] = None, event_bus: Optional[EventBus] = None):
        self.store = store or JsonStore()
        self.events = event_bus or EventBus()
        self.lock = RLock()
        self.settings: AppSettings = self.store.view().settings.get()

        self.inventory = InventoryService(self)
        self.shopping = ShoppingListEngine(self)
        self.insights = InsightsService(self)
        self.notes = NotesService(self)
        self.preferences = SettingsService(self)

    # --- Transactions -------------------------------------------------------
    @contextmanager
    def transaction(self, operation: str) -> Iterator[UnitOfWork]:
        """Run one logical operation against a staged copy of the store.

        StorageFailure is logged, published as an app.error event and re-raised;
        cached state is left at its last-known-good value.
        """
        with self.lock:
            try:
                with self.store.transaction() as tx:
                    yield tx
            except StorageFailure as e:
                logger.error(f"{operation} failed: {e}")
                publish_error(self.events, operation, str(e))
                raise

    def apply_settings(self, settings: AppSettings) -> AppSettings:
        '''Replaces the cached settings and notifies subscribers.'''
        with self.lock:
            self.settings = settings
            publish_settings(self.events, settings)
        return settings

    # --- Pull-based snapshots -----------------------------------------------
    @property
    def shopping_state(self) -> ShoppingState:
        return self.settings.shopping_state

    def inventory_items(self) -> List[InventoryItem]:
        return self.store.view().inventory.get_all()

    def shopping_items(self) -> List[ShoppingListItem]:
        return self.store.view().shopping.get_all()

    def all_notes(self) -> List[Note]:
        return self.store.view().notes.get_all()

    # --- Push-based notifications -------------------------------------------
    def subscribe(self, event_name: str, callback: Subscriber) -> Subscriber:
        return self.events.subscribe(event_name, callback)

    def unsubscribe(self, event_name: str, callback: Subscriber) -> None:
        self.events.unsubscribe(event_name, callback)

    def publish_inventory(self):
        publish_inventory(self.events, self.inventory_items())

    def publish_shopping(self):
        publish_shopping(self.events, self.shopping_items(), self.shopping_state)

    def publish_notes(self):
        publish_notes(self.events, self.all_notes())


def open_session(path: Optional[Path] = None, event_bus: Optional[EventBus] = None) -> InventorySession:
    """Open a session backed by a JSON file (in-memory when path is None)."""
    session = InventorySession(JsonStore(path), event_bus)
    pruned = session.shopping.prune_dangling_items()
    if pruned:
        logger.warning(f"Removed {pruned} shopping items that referenced deleted inventory items")
    logger.info(f"Session opened ({path or 'in-memory'}), shopping state {session.shopping_state.name}")
    return session
