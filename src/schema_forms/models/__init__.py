"""
Data models for schema-forms.

This module contains Pydantic models for:
- Form schemas (fields, rules, visibility conditions, layout)
- Control descriptions handed to the rendering layer
- Validation and submission results
"""

from schema_forms.models.control import (
    CheckboxControl,
    ControlSpec,
    DateControl,
    FileControl,
    MultiSelectControl,
    NumberControl,
    Option,
    RadioControl,
    SelectControl,
    SwitchControl,
    TextareaControl,
    TextControl,
    UnsupportedControl,
    normalize_options,
)
from schema_forms.models.schema import (
    BoundRule,
    FieldDefinition,
    FieldNode,
    FormMeta,
    FormSchema,
    GridNode,
    LayoutNode,
    PatternRule,
    SectionNode,
    StackNode,
    ValidationRuleSet,
    VisibilityCondition,
    iter_field_nodes,
)
from schema_forms.models.validation_result import (
    CheckResult,
    FieldValidationError,
    SubmitResult,
)

__all__ = [
    # Schema
    "FormSchema",
    "FormMeta",
    "FieldDefinition",
    "VisibilityCondition",
    "ValidationRuleSet",
    "BoundRule",
    "PatternRule",
    "LayoutNode",
    "FieldNode",
    "StackNode",
    "GridNode",
    "SectionNode",
    "iter_field_nodes",
    # Controls
    "ControlSpec",
    "Option",
    "TextControl",
    "TextareaControl",
    "DateControl",
    "NumberControl",
    "RadioControl",
    "CheckboxControl",
    "SelectControl",
    "MultiSelectControl",
    "SwitchControl",
    "FileControl",
    "UnsupportedControl",
    "normalize_options",
    # Validation
    "CheckResult",
    "FieldValidationError",
    "SubmitResult",
]
