"""
Schemas Package

JSON schema definition and validation utilities.
"""

from .validator import (
    validate_selection_list,
    ValidationError,
    SELECTION_LIST_SCHEMA_VERSION,
)

__all__ = [
    "validate_selection_list",
    "ValidationError",
    "SELECTION_LIST_SCHEMA_VERSION",
]
