"""
Unit Tests for Serialization Utilities

Tests for dict / JSON-string conversion and schema validation.
"""

import json
import tomllib
from pathlib import Path

import pytest

from selection_list import __version__
from selection_list.core.models.selection_list import SelectionList
from selection_list.core.schemas.validator import (
    SELECTION_LIST_SCHEMA_VERSION,
    ValidationError,
    validate_selection_list,
)
from selection_list.core.utils.serialization import (
    deserialize_selection_list,
    dumps_selection_list,
    loads_selection_list,
    serialize_selection_list,
)


class TestSelectionListSerialization:
    """Tests for serialize/deserialize."""

    def test_to_dict_when_before_populated_then_written_in_natural_order(self, middle_list):
        """before is written left to right, like to_list()."""
        assert middle_list.to_dict() == {
            "before": ["a", "b"],
            "selected": "c",
            "after": ["d", "e"],
        }

    def test_from_dict_when_natural_order_then_restores_storage_order(self):
        """from_dict reverses before back into nearest-first storage."""
        items = SelectionList.from_dict({"before": [1, 2], "selected": 3, "after": [4]})

        assert items.before == (2, 1)
        assert items.selected_index == 2

    def test_serialize_when_called_then_adds_schema_version(self, scenario_list):
        """serialize_selection_list should stamp the schema version."""
        result = serialize_selection_list(scenario_list)

        assert result["schema_version"] == SELECTION_LIST_SCHEMA_VERSION
        assert result["selected"] == 2

    def test_deserialize_when_serialized_then_equal(self, all_states):
        """Serialized data should load back to an equal value."""
        for items in all_states:
            data = serialize_selection_list(items)
            assert deserialize_selection_list(data, strict=True) == items

    def test_deserialize_when_missing_selected_then_raises_error(self):
        """selected is required."""
        with pytest.raises(ValidationError, match="Missing required fields") as exc_info:
            deserialize_selection_list({"before": [], "after": []})

        assert exc_info.value.errors == ["Missing field: selected"]

    def test_deserialize_when_validation_disabled_then_skips_checks(self):
        """validate=False goes straight to from_dict."""
        items = deserialize_selection_list({"selected": 1, "extra": True}, validate=False)

        assert items.to_list() == [1]

    def test_dumps_when_called_then_returns_json(self, middle_list):
        """dumps_selection_list should produce parseable JSON."""
        text = dumps_selection_list(middle_list, indent=2)

        assert json.loads(text)["after"] == ["d", "e"]
        assert loads_selection_list(text) == middle_list

    def test_loads_when_invalid_json_then_raises_validation_error(self):
        """Malformed JSON surfaces as ValidationError."""
        with pytest.raises(ValidationError, match="Invalid JSON"):
            loads_selection_list("{not json")


class TestSelectionListValidation:
    """Tests for validate_selection_list."""

    def test_validate_when_not_dict_then_raises_error(self):
        """Only dicts are accepted."""
        with pytest.raises(ValidationError, match="must be a dict"):
            validate_selection_list([1, 2, 3])

    def test_validate_when_wrong_version_then_raises_error(self):
        """Unknown schema versions are rejected."""
        with pytest.raises(ValidationError, match="Unsupported") as exc_info:
            validate_selection_list({"schema_version": 99, "selected": 1})

        assert exc_info.value.path == "schema_version"

    def test_validate_when_before_not_list_then_raises_error(self):
        """before and after must be lists."""
        with pytest.raises(ValidationError, match="before must be a list"):
            validate_selection_list({"selected": 1, "before": "abc"})

    def test_validate_when_version_absent_then_passes(self):
        """schema_version is optional for hand-written data."""
        validate_selection_list({"selected": 1})

    def test_validate_when_strict_and_extra_key_then_raises_error(self):
        """The JSON schema forbids unknown keys."""
        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_selection_list({"selected": 1, "cursor": 0}, strict=True)

    def test_validate_when_not_strict_and_extra_key_then_passes(self):
        """Basic checks ignore unknown keys."""
        validate_selection_list({"selected": 1, "cursor": 0})


class TestPackageMetadata:
    """Tests for package-level metadata."""

    def test_version_when_imported_then_is_string(self):
        """__version__ resolves to a non-empty string."""
        assert isinstance(__version__, str)
        assert __version__

    def test_version_when_source_checkout_then_matches_project_table(self):
        """__version__ comes from [project].version, not any 'version' line."""
        pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
        with pyproject.open("rb") as f:
            expected = tomllib.load(f)["project"]["version"]

        assert __version__ == expected
