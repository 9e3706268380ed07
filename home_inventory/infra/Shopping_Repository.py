"""Shopping list repository (store collaborator for ShoppingListItem records)."""
from typing import List

from home_inventory.domain.ShoppingListItem import ShoppingListItem
from home_inventory.infra.Record_Repository import RecordRepository


class ShoppingListRepository(RecordRepository[ShoppingListItem]):
    collection = "shopping_items"
    entity = ShoppingListItem
    kind = "Shopping item"

    def get_for_inventory_item(self, inventory_item_id: str) -> List[ShoppingListItem]:
        return [item for item in self.get_all() if item.inventory_item_id == inventory_item_id]

    def delete_for_inventory_item(self, inventory_item_id: str) -> int:
        return self.delete_where(lambda item: not item.is_temporary and item.inventory_item_id == inventory_item_id)
