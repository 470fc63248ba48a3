"""
Core Models Package

Immutable data models.

**DESIGN RATIONALE:**

SelectionList is a frozen dataclass backed by tuples. This ensures:
1. No operation can change a value another caller holds
2. Safe to share between threads without locking
3. Can be used as a dict key or in a set when its elements can
4. Every operation returns a new value, so old states stay valid
"""

from .selection_list import SelectionList, ShapeMismatchError

__all__ = [
    "SelectionList",
    "ShapeMismatchError",
]
