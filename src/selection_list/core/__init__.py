"""
Selection List Core Package

Data model and utilities for the immutable selection list.

**LAYOUT:**

1. **models** - SelectionList itself and its function forms
2. **schemas** - dict validation (basic checks, optional JSON schema)
3. **utils** - dict / JSON-string serialization
"""

from .models import SelectionList, ShapeMismatchError
from .models.selection_list import (
    and_map,
    from_list,
    from_sequence,
    goto,
    indexed_map,
    length,
    map2,
    map_items,
    select_next,
    select_previous,
    selected_index,
    selected_map,
    to_list,
    update_n,
    update_selected,
)
from .schemas import ValidationError

__all__ = [
    "SelectionList",
    "ShapeMismatchError",
    "ValidationError",
    "and_map",
    "from_list",
    "from_sequence",
    "goto",
    "indexed_map",
    "length",
    "map2",
    "map_items",
    "select_next",
    "select_previous",
    "selected_index",
    "selected_map",
    "to_list",
    "update_n",
    "update_selected",
]
