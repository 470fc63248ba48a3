"""
Utils Package

Serialization utilities.
"""

from .serialization import (
    serialize_selection_list,
    deserialize_selection_list,
    dumps_selection_list,
    loads_selection_list,
)

__all__ = [
    "serialize_selection_list",
    "deserialize_selection_list",
    "dumps_selection_list",
    "loads_selection_list",
]
