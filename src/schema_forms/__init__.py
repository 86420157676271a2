"""
Schema-Forms: Declarative Schema-Driven Forms.

Describe a form once as a schema (fields, validation rules, visibility
conditions and a layout tree) and let one generic engine decide which
controls to show, which fields are visible, and whether the entered
data may be submitted.

Simple Usage:
    from schema_forms import FormController

    controller = FormController({
        "id": "signup",
        "fields": {
            "email": {
                "id": "email",
                "label": "Email",
                "renderer": "text",
                "inputType": "email",
                "rules": {"required": "Email is required"},
            },
        },
    })

    controller.set_value("email", "ada@example.com")
    result = controller.submit()
    if result.is_valid:
        print(result.validated_data)

Conditional Fields:
    change = controller.set_value("country", "KE")
    change.shown           # fields that just became visible
    controller.errors      # read-only error map

Rendering:
    nodes = controller.render()          # rendered layout nodes
    payload = controller.to_form_config()  # plain dict for a client

Tracing:
    from schema_forms.tracing import setup_tracing

    # Enable console tracing
    setup_tracing(console=True, verbose=True)

    # Or write to file
    setup_tracing(console=False, file_path="traces.jsonl")
"""

from schema_forms.controller import (
    FieldChange,
    FormController,
)
from schema_forms.config import (
    FormEngineConfig,
    get_config,
    update_config,
)
from schema_forms.models.schema import (
    FieldDefinition,
    FormSchema,
    ValidationRuleSet,
    VisibilityCondition,
)
from schema_forms.models.validation_result import (
    CheckResult,
    FieldValidationError,
    SubmitResult,
)
from schema_forms.engine import (
    LayoutComposer,
    Renderer,
    compile_rules,
    is_visible,
    resolve_control,
)
from schema_forms.guardrails import (
    SchemaDefinitionError,
    check_schema,
    load_schema,
)
from schema_forms.tracing import (
    setup_tracing,
    disable_tracing,
    enable_tracing,
)

__all__ = [
    # Main interface
    "FormController",
    "FieldChange",
    # Configuration
    "FormEngineConfig",
    "get_config",
    "update_config",
    # Schema models
    "FormSchema",
    "FieldDefinition",
    "ValidationRuleSet",
    "VisibilityCondition",
    # Validation
    "CheckResult",
    "FieldValidationError",
    "SubmitResult",
    # Engine
    "LayoutComposer",
    "Renderer",
    "compile_rules",
    "is_visible",
    "resolve_control",
    # Guardrails
    "SchemaDefinitionError",
    "check_schema",
    "load_schema",
    # Tracing
    "setup_tracing",
    "disable_tracing",
    "enable_tracing",
]

__version__ = "0.1.0"
