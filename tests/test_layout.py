"""Tests for the layout composer."""

import logging

from schema_forms.engine.layout import (
    GridPlacement,
    LayoutComposer,
    RenderedField,
    RenderedGrid,
    RenderedSection,
    RenderedStack,
    place_grid_items,
)
from schema_forms.models.schema import FormSchema


def _schema(layout, extra_fields=None):
    fields = {
        "accountType": {
            "id": "accountType",
            "label": "Account Type",
            "renderer": "radio",
            "props": {"options": ["personal", "business"]},
        },
        "firstName": {"id": "firstName", "renderer": "text"},
        "lastName": {"id": "lastName", "renderer": "text"},
        "companyName": {
            "id": "companyName",
            "renderer": "text",
            "visibleWhen": {"field": "accountType", "value": "business"},
        },
        "taxId": {
            "id": "taxId",
            "renderer": "text",
            "visibleWhen": {"field": "accountType", "value": "business"},
        },
    }
    fields.update(extra_fields or {})
    return FormSchema.model_validate({"id": "layout-test", "fields": fields, "layout": layout})


def _field(field_id, col_span=1):
    return {"kind": "field", "fieldId": field_id, "colSpan": col_span}


def _ids(nodes):
    return [node.field_id for node in nodes]


class TestPlaceGridItems:
    """Tests for grid auto placement."""

    def test_row_major(self):
        """Test items fill rows left to right."""
        assert place_grid_items([1, 1, 1], 2) == [
            GridPlacement(row=0, column=0, span=1),
            GridPlacement(row=0, column=1, span=1),
            GridPlacement(row=1, column=0, span=1),
        ]

    def test_wrap_when_span_does_not_fit(self):
        """Test an item that does not fit starts the next row."""
        assert place_grid_items([1, 2, 1], 2) == [
            GridPlacement(row=0, column=0, span=1),
            GridPlacement(row=1, column=0, span=2),
            GridPlacement(row=2, column=0, span=1),
        ]

    def test_span_clamped(self):
        """Test spans wider than the grid are clamped."""
        assert place_grid_items([5], 3) == [GridPlacement(row=0, column=0, span=3)]

    def test_empty(self):
        """Test no items, no placements."""
        assert place_grid_items([], 3) == []


class TestCompose:
    """Tests for LayoutComposer.compose."""

    def test_stack_skips_hidden_fields(self):
        """Test hidden fields take no place in a stack."""
        schema = _schema([{
            "kind": "stack",
            "children": [_field("accountType"), _field("companyName"), _field("firstName")],
        }])
        (stack,) = LayoutComposer(schema).compose({"accountType": "personal"})
        assert isinstance(stack, RenderedStack)
        assert _ids(stack.children) == ["accountType", "firstName"]

        (stack,) = LayoutComposer(schema).compose({"accountType": "business"})
        assert _ids(stack.children) == ["accountType", "companyName", "firstName"]

    def test_grid_reflows_without_hidden_fields(self):
        """Test hidden grid children reserve no cells."""
        schema = _schema([{
            "kind": "grid",
            "cols": 2,
            "children": [
                _field("firstName"),
                _field("companyName"),
                _field("lastName"),
                _field("accountType", col_span=2),
            ],
        }])
        (grid,) = LayoutComposer(schema).compose({})
        assert isinstance(grid, RenderedGrid)
        assert _ids(grid.children) == ["firstName", "lastName", "accountType"]
        assert [child.placement for child in grid.children] == [
            GridPlacement(row=0, column=0, span=1),
            GridPlacement(row=0, column=1, span=1),
            GridPlacement(row=1, column=0, span=2),
        ]
        assert grid.rows == 2

    def test_section(self):
        """Test sections wrap their children."""
        schema = _schema([{
            "kind": "section",
            "title": "Account",
            "withDivider": True,
            "collapsible": True,
            "children": [_field("accountType")],
        }])
        (section,) = LayoutComposer(schema).compose({})
        assert isinstance(section, RenderedSection)
        assert section.title == "Account"
        assert section.with_divider
        assert section.collapsible
        assert _ids(section.children) == ["accountType"]

    def test_empty_container_still_emitted(self):
        """Test a container with only hidden children renders empty."""
        schema = _schema([
            {"kind": "section", "title": "Business", "children": [_field("companyName"), _field("taxId")]},
        ])
        (section,) = LayoutComposer(schema).compose({"accountType": "personal"})
        assert section.children == []

    def test_errors_attached(self):
        """Test field errors are carried to the rendered field."""
        schema = _schema([_field("firstName"), _field("lastName")])
        first, last = LayoutComposer(schema).compose({}, {"firstName": "Required"})
        assert first.error == "Required"
        assert last.error is None

    def test_default_layout(self):
        """Test an empty layout renders visible fields in declaration order."""
        schema = _schema([])
        (stack,) = LayoutComposer(schema).compose({"accountType": "business"})
        assert _ids(stack.children) == ["accountType", "firstName", "lastName", "companyName", "taxId"]

    def test_unknown_field_skipped(self, caplog):
        """Test a layout entry without a definition renders nothing."""
        schema = _schema([_field("firstName"), _field("nickname")])
        with caplog.at_level(logging.ERROR, logger="schema-forms"):
            nodes = LayoutComposer(schema).compose({})
        assert _ids(nodes) == ["firstName"]
        assert "nickname" in caplog.text

    def test_unsupported_renderer_skipped(self):
        """Test fields with an unknown renderer render nothing."""
        schema = _schema(
            [_field("firstName"), _field("stars")],
            extra_fields={"stars": {"id": "stars", "renderer": "rating"}},
        )
        nodes = LayoutComposer(schema).compose({})
        assert _ids(nodes) == ["firstName"]

    def test_tracker_registration(self, tracker):
        """Test rendered fields are registered and carry handles."""
        schema = _schema([_field("firstName"), _field("companyName")])
        (rendered,) = LayoutComposer(schema, tracker=tracker).compose({})
        assert isinstance(rendered, RenderedField)
        assert set(tracker.registered) == {"firstName"}
        rendered.handle.set("Ada")
        assert tracker.values == {"firstName": "Ada"}

    def test_without_tracker(self):
        """Test composing without a tracker gives no handles."""
        schema = _schema([_field("firstName")])
        (rendered,) = LayoutComposer(schema).compose({})
        assert rendered.handle is None

    def test_to_dict(self):
        """Test rendered nodes convert to plain data."""
        schema = _schema([{
            "kind": "grid",
            "cols": 2,
            "spacing": "md",
            "children": [_field("firstName"), _field("lastName")],
        }])
        (grid,) = LayoutComposer(schema).compose({}, {"lastName": "Required"})
        data = grid.to_dict()
        assert data["kind"] == "grid"
        assert data["cols"] == 2
        assert data["rows"] == 1
        assert data["spacing"] == "md"
        first, last = data["children"]
        assert first["fieldId"] == "firstName"
        assert first["control"]["control"] == "text"
        assert first["placement"] == {"row": 0, "column": 0, "span": 1}
        assert last["error"] == "Required"
