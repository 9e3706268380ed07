"""JSON shapes returned by the API (stored fields plus derived values)."""
from typing import Any, Dict

from home_inventory.domain.InventoryItem import InventoryItem
from home_inventory.domain.Note import Note
from home_inventory.domain.ShoppingListItem import ShoppingListItem
from home_inventory.domain.Taxonomy import InventoryCategory


def item_payload(item: InventoryItem) -> Dict[str, Any]:
    data = item.to_dict()
    data.update({
        "category": item.category.name,
        "subcategory_display_name": item.subcategory.display_name,
        "quantity_percentage": item.quantity_percentage,
        "needs_restocking": item.needs_restocking,
    })
    return data


def shopping_payload(entry: ShoppingListItem) -> Dict[str, Any]:
    return entry.to_dict()


def note_payload(note: Note) -> Dict[str, Any]:
    return note.to_dict()


def taxonomy_payload():
    return [
        {
            "name": category.name,
            "display_name": category.display_name,
            "icon": category.icon,
            "color": category.color,
            "subcategories": [
                {"name": sub.name, "display_name": sub.display_name, "icon": sub.icon, "color": sub.color}
                for sub in category.subcategories
            ],
        }
        for category in InventoryCategory
    ]
