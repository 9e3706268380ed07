"""Inventory management: item edits, cascading deletes and bulk data resets."""
from __future__ import annotations
import logging
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional, Union

from home_inventory.domain.AppSettings import AppSettings
from home_inventory.domain.InventoryItem import InventoryItem, clean_name
from home_inventory.domain.Taxonomy import InventoryCategory, InventorySubcategory
from home_inventory.errors import ItemNotFound, ValidationFailure
from home_inventory.utilities.constants import FULL_STOCK

if TYPE_CHECKING:
    from home_inventory.session import InventorySession

logger = logging.getLogger(__name__)


def _as_subcategory(value: Union[str, InventorySubcategory]) -> InventorySubcategory:
    if isinstance(value, InventorySubcategory):
        return value
    try:
        return InventorySubcategory.from_string(value)
    except (KeyError, AttributeError):
        raise ValidationFailure(f"Unknown subcategory: {value}")


def _as_category(value: Union[str, InventoryCategory]) -> InventoryCategory:
    if isinstance(value, InventoryCategory):
        return value
    try:
        return InventoryCategory.from_string(value)
    except (KeyError, AttributeError):
        raise ValidationFailure(f"Unknown category: {value}")


def sample_inventory(now: Optional[datetime] = None) -> List[InventoryItem]:
    '''Default items for every subcategory, fully stocked.'''
    stamp = now or datetime.now()
    return [
        InventoryItem(name=name, subcategory=sub, quantity=FULL_STOCK, last_updated=stamp)
        for sub in InventorySubcategory
        for name in sub.sample_items
    ]


class InventoryService:
    def __init__(self, session: "InventorySession"):
        self.session = session

    # --- Queries ------------------------------------------------------------
    def items(self) -> List[InventoryItem]:
        return self.session.inventory_items()

    def get_item(self, item_id: str) -> InventoryItem:
        item = self.session.store.view().inventory.get_by_id(item_id)
        if item is None:
            raise ItemNotFound("Inventory item", item_id)
        return item

    def items_for_category(self, category) -> List[InventoryItem]:
        return self.session.store.view().inventory.get_by_category(_as_category(category))

    def items_for_subcategory(self, subcategory) -> List[InventoryItem]:
        return self.session.store.view().inventory.get_by_subcategory(_as_subcategory(subcategory))

    # --- Item edits ---------------------------------------------------------
    def add_custom_item(self, name: str, subcategory) -> InventoryItem:
        """Add a user-defined item; it starts empty so it shows up as low stock."""
        item = InventoryItem(name=clean_name(name), subcategory=_as_subcategory(subcategory),
                             quantity=0.0, is_custom=True)
        with self.session.transaction("add_custom_item") as tx:
            tx.inventory.insert(item)
        logger.info(f"Added custom item '{item.name}' to {item.subcategory.display_name}")
        self.session.publish_inventory()
        return item

    def update_quantity(self, item_id: str, quantity: float) -> InventoryItem:
        with self.session.transaction("update_quantity") as tx:
            item = tx.inventory.get_by_id(item_id)
            if item is None:
                raise ItemNotFound("Inventory item", item_id)
            tx.inventory.update(item.update_quantity(quantity))
        self.session.publish_inventory()
        return item

    def rename_item(self, item_id: str, name: str) -> InventoryItem:
        '''Renames an item and every shopping list line linked to it.'''
        new_name = clean_name(name)
        with self.session.transaction("rename_item") as tx:
            item = tx.inventory.get_by_id(item_id)
            if item is None:
                raise ItemNotFound("Inventory item", item_id)
            tx.inventory.update(item.rename(new_name))
            linked = tx.shopping.get_for_inventory_item(item_id)
            for entry in linked:
                entry.name = new_name
                tx.shopping.update(entry)
        self.session.publish_inventory()
        if linked:
            self.session.publish_shopping()
        return item

    def restock_item(self, item_id: str) -> InventoryItem:
        with self.session.transaction("restock_item") as tx:
            item = tx.inventory.get_by_id(item_id)
            if item is None:
                raise ItemNotFound("Inventory item", item_id)
            tx.inventory.update(item.restock_to_full())
        self.session.publish_inventory()
        return item

    def remove_item(self, item_id: str) -> InventoryItem:
        """Delete an item together with the shopping list lines that reference it."""
        with self.session.transaction("remove_item") as tx:
            item = tx.inventory.get_by_id(item_id)
            if item is None:
                raise ItemNotFound("Inventory item", item_id)
            tx.inventory.delete(item_id)
            removed_lines = tx.shopping.delete_for_inventory_item(item_id)
        logger.info(f"Removed '{item.name}' ({removed_lines} shopping list lines)")
        self.session.publish_inventory()
        if removed_lines:
            self.session.publish_shopping()
        return item

    # --- Data management ----------------------------------------------------
    def _replace_all(self, operation: str, items: List[InventoryItem]) -> None:
        settings = AppSettings()
        with self.session.transaction(operation) as tx:
            tx.inventory.delete_all()
            tx.shopping.delete_all()
            tx.notes.delete_all()
            tx.inventory.insert_many(items)
            tx.settings.save(settings)
        self.session.apply_settings(settings)
        self.session.publish_inventory()
        self.session.publish_shopping()
        self.session.publish_notes()

    def clear_all_data(self) -> None:
        self._replace_all("clear_all_data", [])
        logger.info("All inventory, shopping and notes data cleared")

    def reset_to_defaults(self) -> List[InventoryItem]:
        items = sample_inventory()
        self._replace_all("reset_to_defaults", items)
        logger.info(f"Inventory reset to {len(items)} default items")
        return items
