"""
Schema guardrails.

Checks a FormSchema for definition errors before a session uses it:
layout nodes pointing at unknown fields, unknown renderer tags,
conditions on fields that do not exist, choice controls without options.
Errors block loading in strict mode; warnings are only logged.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from schema_forms.config import get_config
from schema_forms.engine.renderers import Renderer
from schema_forms.engine.visibility import values_equal
from schema_forms.guardrails.constants import (
    CHOICE_RENDERER_PROPS,
    COL_SPAN_TOO_WIDE,
    DUPLICATE_LAYOUT_FIELD,
    DUPLICATE_OPTION_VALUE,
    FIELD_KEY_MISMATCH,
    INVALID_STRUCTURE,
    MAX_FIELD_NAME_LENGTH,
    MISSING_OPTIONS,
    SELF_REFERENCE,
    SUSPICIOUS_FIELD_NAME,
    UNKNOWN_CONTROLLING_FIELD,
    UNKNOWN_LAYOUT_FIELD,
    UNKNOWN_RENDERER,
    UNPLACED_FIELD,
    VALID_FIELD_NAME,
)
from schema_forms.models.control import normalize_options
from schema_forms.models.schema import FieldNode, FormSchema, GridNode, LayoutNode

logger = logging.getLogger("schema-forms")


class SchemaIssue(BaseModel):
    """One problem found in a schema."""

    code: str = Field(..., description="Machine-readable issue code")
    message: str = Field(..., description="Human-readable description")
    path: str = Field(..., description="Where in the schema the issue is, e.g. fields.county")


class SchemaCheckResult(BaseModel):
    """Result of schema definition checks."""

    is_valid: bool = Field(..., description="Whether the schema has no errors")
    errors: list[SchemaIssue] = Field(default_factory=list, description="Blocking issues")
    warnings: list[SchemaIssue] = Field(default_factory=list, description="Non-blocking issues")


class SchemaDefinitionError(ValueError):
    """A schema that cannot be used as declared."""

    def __init__(self, issues: list[SchemaIssue], form_id: str | None = None):
        self.issues = issues
        self.form_id = form_id
        summary = "; ".join(f"{issue.path}: {issue.message}" for issue in issues)
        prefix = f"Schema '{form_id}' is invalid" if form_id else "Schema is invalid"
        super().__init__(f"{prefix}: {summary}")


def _check_field_name(name: str) -> tuple[bool, str | None]:
    """Validate a field id."""
    if not name:
        return False, "Field id cannot be empty"
    if len(name) > MAX_FIELD_NAME_LENGTH:
        return False, "Field id too long"
    if not VALID_FIELD_NAME.match(name):
        return False, "Field id is not a plain identifier"
    return True, None


def _check_fields(schema: FormSchema, errors: list[SchemaIssue], warnings: list[SchemaIssue]) -> None:
    for key, field in schema.fields.items():
        path = f"fields.{key}"

        if field.id != key:
            errors.append(SchemaIssue(
                code=FIELD_KEY_MISMATCH,
                message=f"Field id '{field.id}' does not match its key '{key}'",
                path=path,
            ))

        ok, reason = _check_field_name(key)
        if not ok:
            warnings.append(SchemaIssue(code=SUSPICIOUS_FIELD_NAME, message=reason or "", path=path))

        if Renderer.parse(field.renderer) is None:
            errors.append(SchemaIssue(
                code=UNKNOWN_RENDERER,
                message=f"Unknown renderer '{field.renderer}'",
                path=f"{path}.renderer",
            ))

        for index, condition in enumerate(field.conditions):
            condition_path = f"{path}.visibleWhen[{index}]"
            if condition.field not in schema.fields:
                errors.append(SchemaIssue(
                    code=UNKNOWN_CONTROLLING_FIELD,
                    message=f"Condition references unknown field '{condition.field}'",
                    path=condition_path,
                ))
            elif condition.field == key:
                warnings.append(SchemaIssue(
                    code=SELF_REFERENCE,
                    message="Field visibility depends on its own value",
                    path=condition_path,
                ))

        options_prop = CHOICE_RENDERER_PROPS.get(field.renderer)
        if options_prop:
            options = normalize_options(field.props.get(options_prop))
            if not options:
                errors.append(SchemaIssue(
                    code=MISSING_OPTIONS,
                    message=f"Renderer '{field.renderer}' needs a non-empty '{options_prop}' prop",
                    path=f"{path}.props.{options_prop}",
                ))
            seen: list[Any] = []
            for option in options:
                if any(values_equal(option.value, other) for other in seen):
                    warnings.append(SchemaIssue(
                        code=DUPLICATE_OPTION_VALUE,
                        message=f"Option value {option.value!r} appears more than once",
                        path=f"{path}.props.{options_prop}",
                    ))
                seen.append(option.value)


def _check_layout(
    schema: FormSchema,
    nodes: list[LayoutNode],
    path: str,
    placed: dict[str, str],
    errors: list[SchemaIssue],
    warnings: list[SchemaIssue],
) -> None:
    for index, node in enumerate(nodes):
        node_path = f"{path}[{index}]"

        if isinstance(node, FieldNode):
            if node.field_id not in schema.fields:
                errors.append(SchemaIssue(
                    code=UNKNOWN_LAYOUT_FIELD,
                    message=f"Layout references unknown field '{node.field_id}'",
                    path=node_path,
                ))
            elif node.field_id in placed:
                warnings.append(SchemaIssue(
                    code=DUPLICATE_LAYOUT_FIELD,
                    message=f"Field '{node.field_id}' is already placed at {placed[node.field_id]}",
                    path=node_path,
                ))
            else:
                placed[node.field_id] = node_path
            continue

        if isinstance(node, GridNode):
            for child_index, child in enumerate(node.children):
                if child.col_span > node.cols:
                    warnings.append(SchemaIssue(
                        code=COL_SPAN_TOO_WIDE,
                        message=f"colSpan {child.col_span} exceeds grid of {node.cols} columns",
                        path=f"{node_path}.children[{child_index}]",
                    ))

        _check_layout(schema, node.children, f"{node_path}.children", placed, errors, warnings)


def check_schema(schema: FormSchema) -> SchemaCheckResult:
    """
    Check a schema for definition errors.

    Errors:
    1. Field id different from its key
    2. Unknown renderer tag
    3. Condition on an unknown field
    4. Layout node referencing an unknown field
    5. Choice renderer without options

    Warnings cover odd but usable schemas (fields placed twice or not at
    all, spans wider than the grid, duplicate option values, ...).
    """
    errors: list[SchemaIssue] = []
    warnings: list[SchemaIssue] = []

    _check_fields(schema, errors, warnings)

    placed: dict[str, str] = {}
    _check_layout(schema, list(schema.layout), "layout", placed, errors, warnings)
    if schema.layout:
        for key in schema.fields:
            if key not in placed:
                warnings.append(SchemaIssue(
                    code=UNPLACED_FIELD,
                    message=f"Field '{key}' is not placed in the layout and will not render",
                    path=f"fields.{key}",
                ))

    return SchemaCheckResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)


def ensure_valid_schema(schema: FormSchema, strict: bool | None = None) -> SchemaCheckResult:
    """
    Run check_schema and act on the result.

    Warnings are logged. Errors raise SchemaDefinitionError in strict mode
    and are logged otherwise, leaving the form to render fail-soft.
    """
    if strict is None:
        strict = get_config().strict_schema

    result = check_schema(schema)
    for issue in result.warnings:
        logger.warning(f"Schema '{schema.id}' {issue.path}: {issue.message}")

    if not result.is_valid:
        if strict:
            raise SchemaDefinitionError(result.errors, form_id=schema.id)
        for issue in result.errors:
            logger.error(f"Schema '{schema.id}' {issue.path}: {issue.message}")

    return result


def load_schema(data: FormSchema | dict[str, Any], strict: bool | None = None) -> FormSchema:
    """
    Build a FormSchema from an already-parsed document and check it.

    Structural problems (missing keys, unknown layout kinds, bad rule
    shapes) always raise SchemaDefinitionError since no schema can be
    built from them.
    """
    if isinstance(data, FormSchema):
        schema = data
    else:
        try:
            schema = FormSchema.model_validate(data)
        except ValidationError as e:
            issues = [
                SchemaIssue(
                    code=INVALID_STRUCTURE,
                    message=err["msg"],
                    path=".".join(str(part) for part in err["loc"]),
                )
                for err in e.errors()
            ]
            form_id = data.get("id") if isinstance(data, dict) else None
            raise SchemaDefinitionError(issues, form_id=form_id) from e

    ensure_valid_schema(schema, strict=strict)
    return schema
