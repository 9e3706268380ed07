from typing import Final

TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%f"
REMINDER_TIME_PATTERN: Final[str] = r"^([01]\d|2[0-3]):[0-5]\d$"

# Stock levels are fractions of a full pack (0.0 - 1.0)
LOW_STOCK_THRESHOLD: Final[float] = 0.25
CRITICAL_STOCK_THRESHOLD: Final[float] = 0.1
FULL_STOCK: Final[float] = 1.0

# Aging: days without an update before an item is considered expired
FRIDGE_EXPIRY_DAYS: Final[int] = 14
DEFAULT_EXPIRY_DAYS: Final[int] = 60
NEAR_EXPIRY_RATIO: Final[float] = 0.8

SPARSE_CATEGORY_MIN_ITEMS: Final[int] = 2
BUSY_WEEK_LOW_STOCK_COUNT: Final[int] = 5

MISC_HISTORY_LIMIT: Final[int] = 20
MISC_SUGGESTION_LIMIT: Final[int] = 10
MAX_NOTES: Final[int] = 6

DEFAULT_REMINDER_TIME_1: Final[str] = "09:00"
DEFAULT_REMINDER_TIME_2: Final[str] = "18:00"
