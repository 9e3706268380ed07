"""Smart recommendation rules.

Rules are evaluated in a fixed order and each contributes at most one
recommendation; HIGH priority entries are then moved to the front, keeping
the relative order of everything else.
"""
from __future__ import annotations
from datetime import datetime
from typing import List, Optional

from home_inventory.domain.InventoryItem import InventoryItem
from home_inventory.domain.Recommendation import RecommendationPriority, SmartRecommendation
from home_inventory.logic.insights.aging import (
    critical_kitchen_items, critical_stock_items, near_expiry_items, stale_other_items
)
from home_inventory.utilities.constants import SPARSE_CATEGORY_MIN_ITEMS

__all__ = ["generate_recommendations", "sparse_categories"]

RED = "#F44336"
ORANGE = "#FF9800"
YELLOW = "#FFEB3B"
BLUE = "#2196F3"
GREEN = "#4CAF50"


def sparse_categories(items: List[InventoryItem]):
    """Categories that hold at least one item but fewer than SPARSE_CATEGORY_MIN_ITEMS."""
    counts = {}
    for item in items:
        counts[item.category] = counts.get(item.category, 0) + 1
    return [category for category, count in counts.items() if count < SPARSE_CATEGORY_MIN_ITEMS]


def generate_recommendations(items: List[InventoryItem], now: Optional[datetime] = None) -> List[SmartRecommendation]:
    now = now or datetime.now()
    recs: List[SmartRecommendation] = []

    kitchen = critical_kitchen_items(items, now)
    if kitchen:
        recs.append(SmartRecommendation(
            title="🚨 URGENT: Kitchen Items Need Update",
            description=f"{len(kitchen)} kitchen items haven't been updated in 2+ weeks. Check for spoilage!",
            icon="warning",
            color=RED,
            priority=RecommendationPriority.HIGH,
        ))

    stale = stale_other_items(items, now)
    if stale:
        recs.append(SmartRecommendation(
            title="⚠️ Stale Items Alert",
            description=f"{len(stale)} items haven't been updated in 2+ months. Time to review!",
            icon="access_time",
            color=ORANGE,
            priority=RecommendationPriority.HIGH,
        ))

    near = near_expiry_items(items, now)
    if near:
        recs.append(SmartRecommendation(
            title="Items Need Attention Soon",
            description=f"{len(near)} items are approaching their update deadline. Check this week.",
            icon="update",
            color=YELLOW,
            priority=RecommendationPriority.MEDIUM,
        ))

    critical = critical_stock_items(items)
    if critical:
        recs.append(SmartRecommendation(
            title="Critical Stock Alert",
            description=f"{len(critical)} items are critically low (≤10%). Consider shopping soon.",
            icon="inventory_2",
            color=RED,
            priority=RecommendationPriority.HIGH,
        ))

    if sparse_categories(items):
        recs.append(SmartRecommendation(
            title="Expand Your Inventory",
            description="Some categories have very few items. Consider adding more for better tracking.",
            icon="add_circle",
            color=BLUE,
            priority=RecommendationPriority.LOW,
        ))

    if not recs:
        recs.append(SmartRecommendation(
            title="Great Job!",
            description="Your inventory is well-maintained. Keep tracking items for better insights.",
            icon="check_circle",
            color=GREEN,
            priority=RecommendationPriority.LOW,
        ))

    # sorted() is stable
    return sorted(recs, key=lambda rec: rec.priority is not RecommendationPriority.HIGH)
