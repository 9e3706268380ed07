"""InventoryItem domain entity: name, stock fraction, subcategory, purchase history."""
import math
from datetime import datetime
from typing import List, Optional
from uuid import uuid4

from home_inventory.domain.Taxonomy import InventoryCategory, InventorySubcategory
from home_inventory.errors import ValidationFailure
from home_inventory.utilities.constants import FULL_STOCK, LOW_STOCK_THRESHOLD
from home_inventory.utilities.timestamps import format_timestamp, parse_timestamp, round_percent


def clamp_quantity(quantity: float) -> float:
    value = float(quantity)
    if math.isnan(value):
        raise ValidationFailure("Quantity must be a number")
    return min(max(value, 0.0), FULL_STOCK)


def clean_name(name) -> str:
    '''Trims a user supplied name; blank names are rejected.'''
    trimmed = name.strip() if isinstance(name, str) else ""
    if not trimmed:
        raise ValidationFailure("Name cannot be empty")
    return trimmed


class InventoryItem:
    def __init__(self, name: str, subcategory: InventorySubcategory, quantity: float = FULL_STOCK,
                 is_custom: bool = False, purchase_history: Optional[List[datetime]] = None,
                 last_updated: Optional[datetime] = None, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.quantity = clamp_quantity(quantity)
        self.subcategory = subcategory
        self.is_custom = is_custom
        # Avoid sharing the caller's list
        self.purchase_history = list(purchase_history) if purchase_history else []
        self.last_updated = last_updated or datetime.now()

    @property
    def category(self) -> InventoryCategory:
        return self.subcategory.category

    @property
    def quantity_percentage(self) -> int:
        return round_percent(self.quantity)

    @property
    def needs_restocking(self) -> bool:
        return self.quantity <= LOW_STOCK_THRESHOLD

    def update_quantity(self, new_quantity: float, now: Optional[datetime] = None):
        '''Sets the stock fraction, clamped to [0, 1].'''
        self.quantity = clamp_quantity(new_quantity)
        self.last_updated = now or datetime.now()
        return self

    def rename(self, new_name: str, now: Optional[datetime] = None):
        self.name = clean_name(new_name)
        self.last_updated = now or datetime.now()
        return self

    def restock_to_full(self, now: Optional[datetime] = None):
        '''Marks the item as fully replenished and logs one purchase event.'''
        stamp = now or datetime.now()
        # Never log a purchase earlier than the last recorded change
        if stamp < self.last_updated:
            stamp = self.last_updated
        self.quantity = FULL_STOCK
        self.purchase_history.append(stamp)
        self.last_updated = stamp
        return self

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity_percentage}% - {self.subcategory.display_name}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an InventoryItem from its stored dictionary form.'''
        d = dict(data) if isinstance(data, dict) else {}
        history = [parse_timestamp(ts) for ts in d.get("purchase_history") or []]
        return InventoryItem(
            id=d.get("id"),
            name=d.get("name", ""),
            subcategory=InventorySubcategory.from_string(d.get("subcategory", "")),
            quantity=d.get("quantity", 0.0),
            is_custom=bool(d.get("is_custom", False)),
            purchase_history=[ts for ts in history if ts is not None],
            last_updated=parse_timestamp(d.get("last_updated")),
        )

    def to_dict(self):
        '''Converts the InventoryItem to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "subcategory": self.subcategory.name,
            "is_custom": self.is_custom,
            "purchase_history": [format_timestamp(ts) for ts in self.purchase_history],
            "last_updated": format_timestamp(self.last_updated),
        }
