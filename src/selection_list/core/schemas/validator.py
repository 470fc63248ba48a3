"""
Schema Validation Utilities

Validates plain-dict SelectionList data before it is turned into a model.

Basic checks always run and fail fast on the first problem. Strict mode
additionally validates against ``selection_list.schema.json`` with
jsonschema.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema


SELECTION_LIST_SCHEMA_VERSION = 1

SCHEMA_DIR = Path(__file__).parent


@lru_cache(maxsize=None)
def _selection_list_schema() -> dict:
    """Read selection_list.schema.json once per process."""
    schema_path = SCHEMA_DIR / "selection_list.schema.json"
    return json.loads(schema_path.read_text(encoding="utf-8"))


class ValidationError(Exception):
    """
    Raised when selection list data is malformed.

    Attributes:
        path: Dotted location of the offending value ("" for the root)
        errors: Individual problems found, for display
    """

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = list(errors) if errors else []


def validate_selection_list(data: Any, *, strict: bool = False) -> None:
    """
    Validate selection list data.

    Args:
        data: Dictionary to validate
        strict: If True, also validate against the JSON schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Selection list data must be a dict, got {type(data).__name__}",
            path="",
        )

    if "selected" not in data:
        raise ValidationError(
            "Missing required fields: ['selected']",
            path="",
            errors=["Missing field: selected"],
        )

    # schema_version is optional, but must match when present
    version = data.get("schema_version", SELECTION_LIST_SCHEMA_VERSION)
    if version != SELECTION_LIST_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported selection list schema version: {version} "
            f"(expected {SELECTION_LIST_SCHEMA_VERSION})",
            path="schema_version",
        )

    for side in ("before", "after"):
        if side in data and not isinstance(data[side], list):
            raise ValidationError(
                f"{side} must be a list",
                path=side,
            )

    if strict:
        try:
            jsonschema.validate(data, _selection_list_schema())
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e
