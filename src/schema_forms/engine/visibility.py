"""
Visibility evaluator.

Decides, for a snapshot of form values, whether a field is shown.
Everything here is a pure function of (definition, values).
"""

from typing import Any, Mapping

from schema_forms.models.schema import FieldDefinition, FormSchema, VisibilityCondition


def values_equal(left: Any, right: Any) -> bool:
    """
    Strict equality between two scalar values.

    Booleans only equal booleans (``True`` is not ``1``). Ints and floats
    compare numerically. Everything else uses ``==``.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    return left == right


def evaluate_condition(condition: VisibilityCondition, values: Mapping[str, Any]) -> bool:
    """Evaluate one condition against the controlling field's current value."""
    if condition.field not in values:
        return False

    current = values[condition.field]
    if condition.op == "equals":
        return values_equal(current, condition.value)
    if condition.op == "in":
        return any(values_equal(current, member) for member in condition.value)
    return False


def is_visible(field: FieldDefinition, values: Mapping[str, Any]) -> bool:
    """A field is visible when it has no conditions or all of them hold."""
    return all(evaluate_condition(condition, values) for condition in field.conditions)


def visible_field_ids(schema: FormSchema, values: Mapping[str, Any]) -> list[str]:
    """Ids of the currently visible fields, in declaration order."""
    return [field_id for field_id, field in schema.fields.items() if is_visible(field, values)]


def build_dependency_index(fields: Mapping[str, FieldDefinition]) -> dict[str, list[str]]:
    """
    Map each controlling field id to the fields whose conditions reference it.

    Only declared edges are recorded; dependents of dependents are not
    folded in.
    """
    index: dict[str, list[str]] = {}
    for field_id, field in fields.items():
        for controlling in sorted(field.controlling_fields):
            dependents = index.setdefault(controlling, [])
            if field_id not in dependents:
                dependents.append(field_id)
    return index
