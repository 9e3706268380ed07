"""
Input validation schemas using Pydantic.
"""
import math
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from home_inventory.utilities.constants import (
    DEFAULT_REMINDER_TIME_1, DEFAULT_REMINDER_TIME_2, REMINDER_TIME_PATTERN
)


class ItemInput(BaseModel):
    """Schema for a new custom inventory item."""
    name: str = Field(..., min_length=1, max_length=100)
    subcategory: str = Field(..., min_length=1)

    @field_validator('name', 'subcategory')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError('Value cannot be empty')
        return v

    @field_validator('subcategory')
    @classmethod
    def normalize_subcategory(cls, v):
        return v.upper()


class QuantityInput(BaseModel):
    """Stock fraction; values outside [0, 1] are clamped rather than rejected."""
    quantity: float

    @field_validator('quantity')
    @classmethod
    def clamp(cls, v):
        if math.isnan(v):
            raise ValueError("Quantity must be a number")
        return min(max(v, 0.0), 1.0)


class RenameInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()


class MiscItemInput(BaseModel):
    """Misc shopping item; a blank name is accepted and ignored by the engine."""
    name: str = Field('', max_length=100)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip()


class ShoppingEntryInput(BaseModel):
    inventory_item_id: str = Field(..., min_length=1)


class NoteInput(BaseModel):
    title: str = Field('', max_length=200)
    content: str = Field('', max_length=10000)

    @field_validator('title')
    @classmethod
    def strip_title(cls, v):
        return v.strip()


class ReminderTimesInput(BaseModel):
    """Reminder times as HH:MM; the second reminder is optional."""
    time1: str = Field(..., pattern=REMINDER_TIME_PATTERN)
    time2: Optional[str] = Field(None, pattern=REMINDER_TIME_PATTERN)


class SettingsInput(BaseModel):
    """Preference fields a client may overwrite in one call."""
    is_dark_mode: bool = False
    is_security_enabled: bool = False
    is_inventory_reminder_enabled: bool = False
    is_second_reminder_enabled: bool = False
    reminder_time1: str = Field(DEFAULT_REMINDER_TIME_1, pattern=REMINDER_TIME_PATTERN)
    reminder_time2: str = Field(DEFAULT_REMINDER_TIME_2, pattern=REMINDER_TIME_PATTERN)
