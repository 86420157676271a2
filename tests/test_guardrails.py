"""Tests for schema guardrails."""

import logging

import pytest

from schema_forms.guardrails import (
    SchemaDefinitionError,
    check_schema,
    ensure_valid_schema,
    load_schema,
)
from schema_forms.guardrails.constants import (
    COL_SPAN_TOO_WIDE,
    DUPLICATE_LAYOUT_FIELD,
    DUPLICATE_OPTION_VALUE,
    FIELD_KEY_MISMATCH,
    INVALID_STRUCTURE,
    MISSING_OPTIONS,
    SELF_REFERENCE,
    SUSPICIOUS_FIELD_NAME,
    UNKNOWN_CONTROLLING_FIELD,
    UNKNOWN_LAYOUT_FIELD,
    UNKNOWN_RENDERER,
    UNPLACED_FIELD,
)
from schema_forms.models.schema import FormSchema


def _data(fields=None, layout=None):
    return {
        "id": "guarded",
        "fields": fields if fields is not None else {
            "name": {"id": "name", "renderer": "text"},
            "size": {"id": "size", "renderer": "select", "props": {"data": ["S", "M"]}},
        },
        "layout": layout or [],
    }


def _check(fields=None, layout=None):
    return check_schema(FormSchema.model_validate(_data(fields, layout)))


def _codes(issues):
    return [issue.code for issue in issues]


class TestCheckSchemaErrors:
    """Tests for blocking schema issues."""

    def test_valid_schema(self):
        """Test a clean schema passes."""
        result = _check()
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_key_mismatch(self):
        """Test a field id must match its key."""
        result = _check(fields={"name": {"id": "fullName", "renderer": "text"}})
        assert not result.is_valid
        assert _codes(result.errors) == [FIELD_KEY_MISMATCH]
        assert result.errors[0].path == "fields.name"

    def test_unknown_renderer(self):
        """Test unknown renderer tags are errors."""
        result = _check(fields={"stars": {"id": "stars", "renderer": "rating"}})
        assert _codes(result.errors) == [UNKNOWN_RENDERER]
        assert result.errors[0].path == "fields.stars.renderer"

    def test_unknown_controlling_field(self):
        """Test conditions must reference declared fields."""
        result = _check(fields={
            "county": {
                "id": "county",
                "renderer": "text",
                "visibleWhen": [{"field": "country", "value": "KE"}],
            },
        })
        assert _codes(result.errors) == [UNKNOWN_CONTROLLING_FIELD]
        assert result.errors[0].path == "fields.county.visibleWhen[0]"

    def test_unknown_layout_field(self):
        """Test layout nodes must reference declared fields."""
        result = _check(layout=[{
            "kind": "stack",
            "children": [
                {"kind": "field", "fieldId": "name"},
                {"kind": "field", "fieldId": "size"},
                {"kind": "field", "fieldId": "color"},
            ],
        }])
        assert _codes(result.errors) == [UNKNOWN_LAYOUT_FIELD]
        assert result.errors[0].path == "layout[0].children[2]"

    def test_missing_options(self):
        """Test choice renderers need options."""
        result = _check(fields={"size": {"id": "size", "renderer": "radio"}})
        assert _codes(result.errors) == [MISSING_OPTIONS]
        assert result.errors[0].path == "fields.size.props.options"


class TestCheckSchemaWarnings:
    """Tests for non-blocking schema issues."""

    def test_unplaced_field(self):
        """Test declared fields missing from a non-empty layout."""
        result = _check(layout=[{"kind": "field", "fieldId": "name"}])
        assert result.is_valid
        assert _codes(result.warnings) == [UNPLACED_FIELD]

    def test_duplicate_placement(self):
        """Test a field placed twice."""
        result = _check(layout=[
            {"kind": "field", "fieldId": "name"},
            {"kind": "field", "fieldId": "size"},
            {"kind": "field", "fieldId": "name"},
        ])
        assert _codes(result.warnings) == [DUPLICATE_LAYOUT_FIELD]

    def test_col_span_too_wide(self):
        """Test spans wider than their grid."""
        result = _check(layout=[{
            "kind": "grid",
            "cols": 2,
            "children": [
                {"kind": "field", "fieldId": "name", "colSpan": 3},
                {"kind": "field", "fieldId": "size"},
            ],
        }])
        assert _codes(result.warnings) == [COL_SPAN_TOO_WIDE]

    def test_suspicious_name(self):
        """Test field ids that are not plain identifiers."""
        result = _check(fields={"first name": {"id": "first name", "renderer": "text"}})
        assert result.is_valid
        assert _codes(result.warnings) == [SUSPICIOUS_FIELD_NAME]

    def test_self_reference(self):
        """Test a field conditioned on itself."""
        result = _check(fields={
            "toggle": {
                "id": "toggle",
                "renderer": "switch",
                "visibleWhen": {"field": "toggle", "value": True},
            },
        })
        assert _codes(result.warnings) == [SELF_REFERENCE]

    def test_duplicate_option_values(self):
        """Test repeated option values."""
        result = _check(fields={
            "size": {"id": "size", "renderer": "select", "props": {"data": ["S", "S"]}},
        })
        assert _codes(result.warnings) == [DUPLICATE_OPTION_VALUE]


class TestEnsureValidSchema:
    """Tests for ensure_valid_schema."""

    def test_strict_raises(self):
        """Test errors raise in strict mode."""
        schema = FormSchema.model_validate(_data(fields={"stars": {"id": "stars", "renderer": "rating"}}))
        with pytest.raises(SchemaDefinitionError) as exc_info:
            ensure_valid_schema(schema, strict=True)
        assert exc_info.value.form_id == "guarded"
        assert _codes(exc_info.value.issues) == [UNKNOWN_RENDERER]
        assert "fields.stars.renderer" in str(exc_info.value)

    def test_lenient_logs(self, caplog):
        """Test errors are logged when not strict."""
        schema = FormSchema.model_validate(_data(fields={"stars": {"id": "stars", "renderer": "rating"}}))
        with caplog.at_level(logging.ERROR, logger="schema-forms"):
            result = ensure_valid_schema(schema, strict=False)
        assert not result.is_valid
        assert "Unknown renderer 'rating'" in caplog.text

    def test_warnings_logged(self, caplog):
        """Test warnings are logged."""
        schema = FormSchema.model_validate(_data(layout=[{"kind": "field", "fieldId": "name"}]))
        with caplog.at_level(logging.WARNING, logger="schema-forms"):
            ensure_valid_schema(schema, strict=True)
        assert "not placed in the layout" in caplog.text

    def test_is_value_error(self):
        """Test schema errors are ValueErrors."""
        assert issubclass(SchemaDefinitionError, ValueError)


class TestLoadSchema:
    """Tests for load_schema."""

    def test_loads_dict(self):
        """Test loading a schema document."""
        schema = load_schema(_data())
        assert isinstance(schema, FormSchema)
        assert list(schema.fields) == ["name", "size"]

    def test_passes_through_model(self):
        """Test an already-built schema is checked and returned."""
        schema = FormSchema.model_validate(_data())
        assert load_schema(schema) is schema

    def test_structural_errors(self):
        """Test structural problems become SchemaDefinitionError."""
        with pytest.raises(SchemaDefinitionError) as exc_info:
            load_schema({"id": "broken", "fields": {"a": {"id": "a"}}})
        assert exc_info.value.form_id == "broken"
        assert _codes(exc_info.value.issues) == [INVALID_STRUCTURE]
        assert exc_info.value.issues[0].path == "fields.a.renderer"

    def test_in_condition_needs_collection(self):
        """Test an 'in' condition with a scalar cannot be loaded."""
        data = _data(fields={
            "country": {"id": "country", "renderer": "text"},
            "zip": {
                "id": "zip",
                "renderer": "text",
                "visibleWhen": {"field": "country", "op": "in", "value": "US"},
            },
        })
        with pytest.raises(SchemaDefinitionError) as exc_info:
            load_schema(data, strict=False)
        assert all(issue.code == INVALID_STRUCTURE for issue in exc_info.value.issues)

    def test_structural_errors_raise_when_lenient(self):
        """Test structural errors raise even when not strict."""
        with pytest.raises(SchemaDefinitionError):
            load_schema({"id": "broken"}, strict=False)
