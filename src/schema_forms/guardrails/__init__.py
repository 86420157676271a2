"""
Guardrails for schema-forms.

Definition checks run on schemas before a form session uses them.
"""

from schema_forms.guardrails.schema_guardrails import (
    SchemaCheckResult,
    SchemaDefinitionError,
    SchemaIssue,
    check_schema,
    ensure_valid_schema,
    load_schema,
)

__all__ = [
    "SchemaCheckResult",
    "SchemaDefinitionError",
    "SchemaIssue",
    "check_schema",
    "ensure_valid_schema",
    "load_schema",
]
