"""ShoppingListItem domain entity: a line on the shopping list, linked to inventory or temporary (misc)."""
from typing import Optional
from uuid import uuid4


class ShoppingListItem:
    def __init__(self, name: str, is_checked: bool = False, is_temporary: bool = False,
                 inventory_item_id: Optional[str] = None, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.is_checked = is_checked
        self.is_temporary = is_temporary
        # Misc items carry no inventory backing
        self.inventory_item_id = None if is_temporary else inventory_item_id

    @classmethod
    def for_inventory_item(cls, item) -> "ShoppingListItem":
        return cls(name=item.name, inventory_item_id=item.id, is_temporary=False)

    @classmethod
    def misc(cls, name: str) -> "ShoppingListItem":
        return cls(name=name, is_temporary=True)

    def toggle(self):
        self.is_checked = not self.is_checked
        return self

    def __str__(self) -> str:
        mark = "x" if self.is_checked else " "
        kind = "misc" if self.is_temporary else "stock"
        return f"[{mark}] {self.name} ({kind})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingListItem(
            id=d.get("id"),
            name=d.get("name", ""),
            is_checked=bool(d.get("is_checked", False)),
            is_temporary=bool(d.get("is_temporary", False)),
            inventory_item_id=d.get("inventory_item_id"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "is_checked": self.is_checked,
            "is_temporary": self.is_temporary,
            "inventory_item_id": self.inventory_item_id,
        }
