"""
Schema interpretation engine.

- visibility: which fields are shown for a set of values
- rules: compiles validation rule sets into validators
- renderers: maps renderer tags to control descriptions
- layout: composes the layout tree into rendered nodes
- tracking: the value-tracking surface the engine registers fields with
"""

from schema_forms.engine.layout import (
    GridPlacement,
    LayoutComposer,
    RenderedField,
    RenderedGrid,
    RenderedNode,
    RenderedSection,
    RenderedStack,
    place_grid_items,
)
from schema_forms.engine.renderers import (
    Renderer,
    is_boolean_renderer,
    normalize_value,
    register_control,
    resolve_control,
)
from schema_forms.engine.rules import Validator, compile_rules, is_empty
from schema_forms.engine.tracking import FieldHandle, ValueTracker
from schema_forms.engine.visibility import (
    build_dependency_index,
    evaluate_condition,
    is_visible,
    visible_field_ids,
)

__all__ = [
    "is_visible",
    "evaluate_condition",
    "visible_field_ids",
    "build_dependency_index",
    "compile_rules",
    "is_empty",
    "Validator",
    "Renderer",
    "resolve_control",
    "register_control",
    "normalize_value",
    "is_boolean_renderer",
    "LayoutComposer",
    "RenderedNode",
    "RenderedField",
    "RenderedStack",
    "RenderedGrid",
    "RenderedSection",
    "GridPlacement",
    "place_grid_items",
    "FieldHandle",
    "ValueTracker",
]
