"""Inventory statistics and summary analytics.

All functions are pure: they take the current item list (and `now` where
aging matters) and never touch the store.
"""
from __future__ import annotations
from datetime import timedelta
from typing import List, Optional

from home_inventory.domain.InventoryItem import InventoryItem
from home_inventory.domain.Recommendation import InventoryStats
from home_inventory.logic.insights.aging import critical_stock_items
from home_inventory.utilities.constants import BUSY_WEEK_LOW_STOCK_COUNT
from home_inventory.utilities.timestamps import round_percent

__all__ = [
    "average_stock_level", "estimated_shopping_frequency", "estimated_next_shopping_trip",
    "shopping_efficiency_tip", "compute_inventory_stats", "items_needing_attention",
    "active_categories_count", "most_frequently_restocked_item", "least_recently_updated_item",
]


def average_stock_level(items: List[InventoryItem]) -> int:
    if not items:
        return 0
    return round_percent(sum(item.quantity for item in items) / len(items))


def _average_purchase_gap(item: InventoryItem) -> int:
    '''Mean whole-day gap between consecutive purchases (integer division).'''
    history = sorted(item.purchase_history)
    total_days = 0
    for previous, current in zip(history, history[1:]):
        total_days += (current - previous) // timedelta(days=1)
    return total_days // (len(history) - 1)


def estimated_shopping_frequency(items: List[InventoryItem]) -> str:
    if sum(len(item.purchase_history) for item in items) == 0:
        return "No data yet"
    gaps = [_average_purchase_gap(item) for item in items if len(item.purchase_history) > 1]
    # Purchases exist but no item has been bought twice yet
    if not gaps:
        return "Weekly"
    average_days = int(sum(gaps) / len(gaps))
    if average_days <= 7:
        return "Weekly"
    if average_days <= 14:
        return "Bi-weekly"
    if average_days <= 30:
        return "Monthly"
    return "Rarely"


def estimated_next_shopping_trip(items: List[InventoryItem]) -> str:
    low_stock = [item for item in items if item.needs_restocking]
    if critical_stock_items(items):
        return "Now (critical items)"
    if len(low_stock) >= BUSY_WEEK_LOW_STOCK_COUNT:
        return "This week"
    if low_stock:
        return "Next week"
    return "No rush"


def shopping_efficiency_tip(items: List[InventoryItem]) -> str:
    groups = {}
    for item in items:
        if item.needs_restocking:
            groups.setdefault(item.category, []).append(item)
    if not groups:
        return "Spread across categories"
    # max() keeps the first category seen on ties
    category, members = max(groups.items(), key=lambda entry: len(entry[1]))
    if len(members) > 1:
        return f"Focus on {category.display_name} section"
    return "Spread across categories"


def compute_inventory_stats(items: List[InventoryItem]) -> InventoryStats:
    return InventoryStats(
        total_items=len(items),
        low_stock_items=sum(1 for item in items if item.needs_restocking),
        average_stock_level=average_stock_level(items),
        estimated_shopping_frequency=estimated_shopping_frequency(items),
        estimated_next_shopping_trip=estimated_next_shopping_trip(items),
        shopping_efficiency_tip=shopping_efficiency_tip(items),
    )


def items_needing_attention(items: List[InventoryItem]) -> List[InventoryItem]:
    """Low-stock items, most depleted first."""
    return sorted((item for item in items if item.needs_restocking), key=lambda item: item.quantity)


def active_categories_count(items: List[InventoryItem]) -> int:
    return len({item.category for item in items})


def most_frequently_restocked_item(items: List[InventoryItem]) -> Optional[InventoryItem]:
    '''Item with the longest purchase history; None until something has been restocked.'''
    bought = [item for item in items if item.purchase_history]
    if not bought:
        return None
    return max(bought, key=lambda item: len(item.purchase_history))


def least_recently_updated_item(items: List[InventoryItem]) -> Optional[InventoryItem]:
    if not items:
        return None
    return min(items, key=lambda item: item.last_updated)
