"""Shopping list workflow.

State machine (persisted in AppSettings.shopping_state):

    EMPTY --generate--> GENERATING --finalize--> LIST_READY --start_shopping--> SHOPPING
      ^                     |                        |                              |
      +------cancel---------+--------cancel----------+                              |
      +---------------------------complete_and_restore------------------------------+

Operations called from a state that does not allow them are logged and
ignored; they never write anything.
"""
from __future__ import annotations
import functools
import logging
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from home_inventory.domain.AppSettings import ShoppingState
from home_inventory.domain.ShoppingListItem import ShoppingListItem
from home_inventory.errors import InvalidStateTransition, ItemNotFound

if TYPE_CHECKING:
    from home_inventory.session import InventorySession

logger = logging.getLogger(__name__)

__all__ = ["ShoppingListEngine", "allowed_in"]


def allowed_in(*states: ShoppingState, default=False):
    """Restrict an engine operation to the given shopping states.

    Outside those states the call is a logged no-op returning `default`.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            with self.session.lock:
                try:
                    if self.state not in states:
                        raise InvalidStateTransition(func.__name__, self.state)
                    return func(self, *args, **kwargs)
                except InvalidStateTransition as e:
                    logger.warning(f"Ignored shopping operation: {e}")
                    return default
        return wrapper
    return decorator


class ShoppingListEngine:
    def __init__(self, session: "InventorySession"):
        self.session = session

    @property
    def state(self) -> ShoppingState:
        return self.session.shopping_state

    def items(self) -> List[ShoppingListItem]:
        return self.session.shopping_items()

    def _save_state(self, tx, state: ShoppingState):
        settings = self.session.settings.copy(shopping_state=state)
        tx.settings.save(settings)
        return settings

    def _finish(self, settings=None, shopping_changed: bool = True):
        if settings is not None:
            self.session.apply_settings(settings)
        if shopping_changed:
            self.session.publish_shopping()

    # --- Transitions --------------------------------------------------------
    @allowed_in(ShoppingState.EMPTY)
    def generate(self) -> bool:
        '''Builds the list from low-stock inventory, most depleted first.'''
        with self.session.transaction("generate") as tx:
            # Stale entries can survive an interrupted trip
            tx.shopping.delete_all()
            low_stock = sorted(tx.inventory.get_low_stock(), key=lambda item: item.quantity)
            entries = [ShoppingListItem.for_inventory_item(item) for item in low_stock]
            tx.shopping.insert_many(entries)
            settings = self._save_state(tx, ShoppingState.GENERATING)
        logger.info(f"Shopping list generated with {len(entries)} low-stock items")
        self._finish(settings)
        return True

    @allowed_in(ShoppingState.GENERATING)
    def finalize(self) -> bool:
        with self.session.transaction("finalize") as tx:
            settings = self._save_state(tx, ShoppingState.LIST_READY)
        logger.info("Shopping list finalized")
        self._finish(settings, shopping_changed=False)
        return True

    @allowed_in(ShoppingState.GENERATING, ShoppingState.LIST_READY)
    def cancel(self) -> bool:
        with self.session.transaction("cancel") as tx:
            tx.shopping.delete_all()
            settings = self._save_state(tx, ShoppingState.EMPTY)
        logger.info("Shopping list cancelled")
        self._finish(settings)
        return True

    @allowed_in(ShoppingState.LIST_READY)
    def start_shopping(self) -> bool:
        with self.session.transaction("start_shopping") as tx:
            settings = self._save_state(tx, ShoppingState.SHOPPING)
        logger.info("Shopping trip started")
        self._finish(settings, shopping_changed=False)
        return True

    @allowed_in(ShoppingState.SHOPPING)
    def complete_and_restore(self, now: Optional[datetime] = None) -> bool:
        """Restock every checked inventory-backed item, then clear the list.

        Temporary (misc) and unchecked entries are discarded without touching
        inventory.
        """
        stamp = now or datetime.now()
        restored = set()
        with self.session.transaction("complete_and_restore") as tx:
            for entry in tx.shopping.get_all():
                if not entry.is_checked or entry.is_temporary:
                    continue
                if entry.inventory_item_id in restored:
                    continue
                item = tx.inventory.get_by_id(entry.inventory_item_id)
                if item is None:
                    logger.warning(f"Checked item '{entry.name}' references a missing inventory item; skipped")
                    continue
                tx.inventory.update(item.restock_to_full(stamp))
                restored.add(item.id)
            tx.shopping.delete_all()
            settings = self._save_state(tx, ShoppingState.EMPTY)
        logger.info(f"Shopping trip completed, {len(restored)} items restocked")
        self._finish(settings)
        if restored:
            self.session.publish_inventory()
        return True

    # --- List editing -------------------------------------------------------
    @allowed_in(ShoppingState.GENERATING, default=None)
    def add_misc_item(self, name: str) -> Optional[ShoppingListItem]:
        '''Adds a temporary item with no inventory backing; blank names are ignored.'''
        trimmed = name.strip() if isinstance(name, str) else ""
        if not trimmed:
            return None
        entry = ShoppingListItem.misc(trimmed)
        with self.session.transaction("add_misc_item") as tx:
            tx.shopping.insert(entry)
            settings = self.session.settings.add_misc_item_to_history(trimmed)
            tx.settings.save(settings)
        self._finish(settings)
        return entry

    @allowed_in(ShoppingState.GENERATING, default=None)
    def add_inventory_item(self, item_id: str) -> Optional[ShoppingListItem]:
        '''Puts an inventory item on the list by hand; an existing entry for it is reused.'''
        view = self.session.store.view()
        item = view.inventory.get_by_id(item_id)
        if item is None:
            raise ItemNotFound("Inventory item", item_id)
        existing = view.shopping.get_for_inventory_item(item_id)
        if existing:
            return existing[0]
        with self.session.transaction("add_inventory_item") as tx:
            entry = tx.shopping.insert(ShoppingListItem.for_inventory_item(item))
        self._finish()
        return entry

    @allowed_in(ShoppingState.GENERATING)
    def remove_shopping_item(self, entry_id: str) -> bool:
        with self.session.transaction("remove_shopping_item") as tx:
            removed = tx.shopping.delete(entry_id)
        if removed:
            self._finish()
        return removed

    @allowed_in(ShoppingState.SHOPPING, default=None)
    def toggle_checked(self, entry_id: str) -> Optional[ShoppingListItem]:
        with self.session.transaction("toggle_checked") as tx:
            entry = tx.shopping.get_by_id(entry_id)
            if entry is None:
                raise ItemNotFound("Shopping item", entry_id)
            tx.shopping.update(entry.toggle())
        self._finish()
        return entry

    # --- Consistency --------------------------------------------------------
    def prune_dangling_items(self) -> int:
        """Delete inventory-backed entries whose inventory item no longer exists."""
        with self.session.lock:
            view = self.session.store.view()
            known = {item.id for item in view.inventory.get_all()}
            dangling = [e for e in view.shopping.get_all()
                        if not e.is_temporary and e.inventory_item_id not in known]
            if not dangling:
                return 0
            with self.session.transaction("prune_dangling_items") as tx:
                removed = tx.shopping.delete_where(
                    lambda e: not e.is_temporary and e.inventory_item_id not in known
                )
            self._finish()
            return removed
