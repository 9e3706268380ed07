"""Item aging helpers.

An item "ages" from its last recorded change. Fridge items go stale after
FRIDGE_EXPIRY_DAYS, everything else after DEFAULT_EXPIRY_DAYS; the warning
window starts at NEAR_EXPIRY_RATIO of that threshold.
"""
from __future__ import annotations
from datetime import datetime, timedelta
from typing import List, Optional

from home_inventory.domain.InventoryItem import InventoryItem
from home_inventory.domain.Taxonomy import InventoryCategory
from home_inventory.utilities.constants import (
    CRITICAL_STOCK_THRESHOLD, DEFAULT_EXPIRY_DAYS, FRIDGE_EXPIRY_DAYS, NEAR_EXPIRY_RATIO
)

__all__ = [
    "days_since_last_update", "expiry_threshold", "warning_threshold", "is_expired", "is_near_expiry",
    "urgent_attention_items", "expired_items", "near_expiry_items",
    "critical_kitchen_items", "stale_other_items", "critical_stock_items",
]


def days_since_last_update(item: InventoryItem, now: Optional[datetime] = None) -> int:
    """Whole days elapsed since the item was last changed (floor)."""
    now = now or datetime.now()
    return (now - item.last_updated) // timedelta(days=1)


def expiry_threshold(item: InventoryItem) -> int:
    return FRIDGE_EXPIRY_DAYS if item.category is InventoryCategory.FRIDGE else DEFAULT_EXPIRY_DAYS


def warning_threshold(item: InventoryItem) -> int:
    return int(expiry_threshold(item) * NEAR_EXPIRY_RATIO)


def is_expired(item: InventoryItem, now: Optional[datetime] = None) -> bool:
    return days_since_last_update(item, now) >= expiry_threshold(item)


def is_near_expiry(item: InventoryItem, now: Optional[datetime] = None) -> bool:
    days = days_since_last_update(item, now)
    return warning_threshold(item) <= days < expiry_threshold(item)


def urgent_attention_items(items: List[InventoryItem], now: Optional[datetime] = None) -> List[InventoryItem]:
    """Items inside the warning window or already past it."""
    now = now or datetime.now()
    return [item for item in items if days_since_last_update(item, now) >= warning_threshold(item)]


def expired_items(items: List[InventoryItem], now: Optional[datetime] = None) -> List[InventoryItem]:
    now = now or datetime.now()
    return [item for item in items if is_expired(item, now)]


def near_expiry_items(items: List[InventoryItem], now: Optional[datetime] = None) -> List[InventoryItem]:
    now = now or datetime.now()
    return [item for item in items if is_near_expiry(item, now)]


def critical_kitchen_items(items: List[InventoryItem], now: Optional[datetime] = None) -> List[InventoryItem]:
    now = now or datetime.now()
    return [item for item in items
            if item.category is InventoryCategory.FRIDGE
            and days_since_last_update(item, now) >= FRIDGE_EXPIRY_DAYS]


def stale_other_items(items: List[InventoryItem], now: Optional[datetime] = None) -> List[InventoryItem]:
    now = now or datetime.now()
    return [item for item in items
            if item.category is not InventoryCategory.FRIDGE
            and days_since_last_update(item, now) >= DEFAULT_EXPIRY_DAYS]


def critical_stock_items(items: List[InventoryItem]) -> List[InventoryItem]:
    return [item for item in items if item.quantity <= CRITICAL_STOCK_THRESHOLD]
