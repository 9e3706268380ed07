"""Timestamp helpers shared by the domain entities (naive local time, ISO strings on disk)."""
import math
from datetime import datetime
from typing import Optional

from home_inventory.utilities.constants import TIMESTAMP_FORMAT


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value, default: Optional[datetime] = None) -> Optional[datetime]:
    '''Parses a stored timestamp; accepts datetime objects and ISO strings, falls back to default.'''
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return default
    return default


def round_percent(fraction: float) -> int:
    """Fraction -> whole percentage, rounding halves up (0.125 -> 13)."""
    return int(math.floor(fraction * 100 + 0.5))
