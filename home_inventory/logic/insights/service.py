"""InsightsService: applies the insight rules to a session's current inventory."""
from __future__ import annotations
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from home_inventory.domain.InventoryItem import InventoryItem
from home_inventory.domain.Recommendation import InventoryStats, SmartRecommendation
from home_inventory.logic.insights import aging, stats
from home_inventory.logic.insights.recommendations import generate_recommendations

if TYPE_CHECKING:
    from home_inventory.session import InventorySession


def _summary(item: Optional[InventoryItem]) -> Optional[Dict[str, Any]]:
    if item is None:
        return None
    return {"id": item.id, "name": item.name, "quantity_percentage": item.quantity_percentage}


class InsightsService:
    def __init__(self, session: "InventorySession"):
        self.session = session

    def recommendations(self, now: Optional[datetime] = None) -> List[SmartRecommendation]:
        return generate_recommendations(self.session.inventory_items(), now)

    def stats(self) -> InventoryStats:
        return stats.compute_inventory_stats(self.session.inventory_items())

    def urgent_attention_items(self, now: Optional[datetime] = None) -> List[InventoryItem]:
        return aging.urgent_attention_items(self.session.inventory_items(), now)

    def expired_items(self, now: Optional[datetime] = None) -> List[InventoryItem]:
        return aging.expired_items(self.session.inventory_items(), now)

    def near_expiry_items(self, now: Optional[datetime] = None) -> List[InventoryItem]:
        return aging.near_expiry_items(self.session.inventory_items(), now)

    def items_needing_attention(self) -> List[InventoryItem]:
        return stats.items_needing_attention(self.session.inventory_items())

    def report(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Everything the insights screen needs, computed from one snapshot."""
        now = now or datetime.now()
        items = self.session.inventory_items()
        return {
            "stats": stats.compute_inventory_stats(items).to_dict(),
            "recommendations": [rec.to_dict() for rec in generate_recommendations(items, now)],
            "urgent_attention": [_summary(item) for item in aging.urgent_attention_items(items, now)],
            "expired": [_summary(item) for item in aging.expired_items(items, now)],
            "near_expiry": [_summary(item) for item in aging.near_expiry_items(items, now)],
            "critical_kitchen": [_summary(item) for item in aging.critical_kitchen_items(items, now)],
            "stale_other": [_summary(item) for item in aging.stale_other_items(items, now)],
            "needs_attention": [_summary(item) for item in stats.items_needing_attention(items)],
            "active_categories": stats.active_categories_count(items),
            "most_restocked": _summary(stats.most_frequently_restocked_item(items)),
            "least_recently_updated": _summary(stats.least_recently_updated_item(items)),
        }
