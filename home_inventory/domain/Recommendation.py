"""Computed insight value objects: smart recommendations and inventory statistics."""
from dataclasses import dataclass, asdict
from enum import Enum


class RecommendationPriority(Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass(frozen=True)
class SmartRecommendation:
    title: str
    description: str
    icon: str
    color: str
    priority: RecommendationPriority

    def to_dict(self):
        data = asdict(self)
        data["priority"] = self.priority.value
        return data


@dataclass(frozen=True)
class InventoryStats:
    total_items: int
    low_stock_items: int
    average_stock_level: int
    estimated_shopping_frequency: str
    estimated_next_shopping_trip: str
    shopping_efficiency_tip: str

    def to_dict(self):
        return asdict(self)
