"""Core business logic layer.

Subpackages:
- shopping: shopping list workflow state machine
- insights: item aging, smart recommendations and inventory statistics
- inventory: item edits, cascading deletes, data resets
- notes: capped notebook
- settings: user preferences
"""
__all__ = ["shopping", "insights", "inventory", "notes", "settings"]
