"""Inventory item repository (store collaborator for InventoryItem records)."""
from typing import List

from home_inventory.domain.InventoryItem import InventoryItem
from home_inventory.domain.Taxonomy import InventoryCategory, InventorySubcategory
from home_inventory.infra.Record_Repository import RecordRepository


class InventoryRepository(RecordRepository[InventoryItem]):
    collection = "inventory_items"
    entity = InventoryItem
    kind = "Inventory item"

    def get_by_subcategory(self, subcategory: InventorySubcategory) -> List[InventoryItem]:
        return [item for item in self.get_all() if item.subcategory is subcategory]

    def get_by_category(self, category: InventoryCategory) -> List[InventoryItem]:
        return [item for item in self.get_all() if item.category is category]

    def get_low_stock(self) -> List[InventoryItem]:
        """Items at or below the restocking threshold, in store order."""
        return [item for item in self.get_all() if item.needs_restocking]
