"""
Serialization Utilities

Provides to/from dict and JSON-string utilities for SelectionList.

- `serialize_*` / `deserialize_*` work on plain dicts
- `dumps_*` / `loads_*` work on JSON strings
- Validation runs before deserialization unless disabled
- Nothing here reads or writes files
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..models.selection_list import SelectionList
from ..schemas.validator import (
    SELECTION_LIST_SCHEMA_VERSION,
    ValidationError,
    validate_selection_list,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Dict Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_selection_list(items: SelectionList[Any]) -> dict[str, Any]:
    """
    Serialize a SelectionList to a dictionary.

    The output passes validate_selection_list(strict=True) and can be
    written to JSON as long as the elements themselves can.

    Args:
        items: SelectionList to serialize

    Returns:
        Dictionary with schema_version, before, selected and after
    """
    data = {"schema_version": SELECTION_LIST_SCHEMA_VERSION}
    data.update(items.to_dict())
    return data


def deserialize_selection_list(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> SelectionList[Any]:
    """
    Deserialize a SelectionList from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate first
        strict: Use the JSON schema as well as the basic checks

    Returns:
        SelectionList instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_selection_list(data, strict=strict)
    else:
        logger.debug("Deserializing selection list without validation")

    return SelectionList.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# JSON String Utilities
# ─────────────────────────────────────────────────────────────────────────────

def dumps_selection_list(items: SelectionList[Any], **kwargs: Any) -> str:
    """
    Serialize a SelectionList to a JSON string.

    Args:
        items: SelectionList to serialize
        **kwargs: Passed through to json.dumps (e.g. indent)

    Returns:
        JSON text
    """
    kwargs.setdefault("ensure_ascii", False)
    return json.dumps(serialize_selection_list(items), **kwargs)


def loads_selection_list(text: str, *, strict: bool = False) -> SelectionList[Any]:
    """
    Deserialize a SelectionList from a JSON string.

    Raises:
        ValidationError: If text is not JSON or fails validation
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"Invalid JSON: {e}",
            path="",
            errors=[str(e)],
        ) from e
    return deserialize_selection_list(data, validate=True, strict=strict)
