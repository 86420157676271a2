"""
Form Controller.

This is the main entry point for schema-forms. A controller is one form
session: it owns the entered values and the error map, keeps visibility
and validation consistent after every change, and is the only place
where submission is gated.
"""

import logging
import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping

from schema_forms.config import FormEngineConfig, get_config
from schema_forms.engine.layout import LayoutComposer, RenderedNode
from schema_forms.engine.renderers import is_boolean_renderer, normalize_value, resolve_control
from schema_forms.engine.rules import Validator, compile_rules
from schema_forms.engine.tracking import ChangeCallback, FieldHandle
from schema_forms.engine.visibility import build_dependency_index, is_visible
from schema_forms.guardrails.schema_guardrails import ensure_valid_schema, load_schema
from schema_forms.models.control import UnsupportedControl
from schema_forms.models.schema import FieldDefinition, FormSchema
from schema_forms.models.validation_result import (
    CheckResult,
    FieldValidationError,
    SubmitResult,
)
from schema_forms.tracing import is_tracing_enabled, record_span, setup_tracing, traced

logger = logging.getLogger("schema-forms")


@dataclass
class FieldChange:
    """What a single value change did to the session."""

    field_id: str
    value: Any
    error: str | None = None
    shown: list[str] = field(default_factory=list)
    hidden: list[str] = field(default_factory=list)


class FormController:
    """
    One form session driven by a schema.

    Usage:
        controller = FormController(schema)

        change = controller.set_value("country", "KE")
        change.shown        # ["county"]

        nodes = controller.render()
        result = controller.submit()
        if result.is_valid:
            send(result.validated_data)

    The controller also implements the value-tracking surface
    (register / subscribe / get_error / get_value / set_value) that the
    renderer dispatcher binds fields to.
    """

    def __init__(
        self,
        schema: FormSchema | dict[str, Any],
        config: FormEngineConfig | None = None,
        session_id: str | None = None,
        strict: bool | None = None,
    ):
        """
        Initialize a form session.

        Args:
            schema: A FormSchema, or an already-parsed schema document.
            config: Engine configuration. Defaults to get_config().
            session_id: Identifier used in traces. Generated if omitted.
            strict: Raise on schema definition errors. Defaults to
                config.strict_schema.
        """
        self.config = config or get_config()
        if strict is None:
            strict = self.config.strict_schema

        if isinstance(schema, FormSchema):
            ensure_valid_schema(schema, strict=strict)
        else:
            schema = load_schema(schema, strict=strict)

        self.schema: FormSchema = schema
        self.session_id = session_id or uuid.uuid4().hex

        if self.config.enable_tracing and not is_tracing_enabled():
            setup_tracing(
                console=self.config.trace_file is None,
                verbose=self.config.trace_verbose,
                file_path=self.config.trace_file,
            )

        self._validators: dict[str, Validator] = {
            field_id: compile_rules(
                definition.rules,
                boolean=is_boolean_renderer(definition.renderer),
                fallback_message=self.config.custom_validator_fallback_message,
            )
            for field_id, definition in schema.fields.items()
        }
        self._dependents = build_dependency_index(schema.fields)
        # Fields that cannot be drawn are never validated
        self._undrawable = {
            field_id
            for field_id, definition in schema.fields.items()
            if isinstance(
                resolve_control(
                    definition, fallback_message=self.config.custom_validator_fallback_message
                ),
                UnsupportedControl,
            )
        }
        self._subscribers: dict[str, list[ChangeCallback]] = defaultdict(list)
        self._composer = LayoutComposer(
            schema,
            tracker=self,
            fallback_message=self.config.custom_validator_fallback_message,
        )

        # Fields whose custom validator may read other fields' values
        self._cross_checked = [
            field_id
            for field_id, definition in schema.fields.items()
            if definition.rules is not None and definition.rules.validator is not None
        ]

        self._values: dict[str, Any] = {}
        self._failures: dict[str, CheckResult] = {}
        self._visible: dict[str, bool] = {}
        self._start()

    @traced("session_start")
    def _start(self) -> None:
        self._init_state()
        logger.debug(f"Session {self.session_id} started for form '{self.schema.id}'")

    def _init_state(self) -> None:
        # Visibility reads entered values only; a default counts once seeded
        self._values = {}
        self._failures = {}
        if self.config.seed_defaults:
            self._values = {
                field_id: definition.default_value
                for field_id, definition in self.schema.fields.items()
                if definition.has_default
            }
        self._visible = {
            field_id: is_visible(definition, self._values)
            for field_id, definition in self.schema.fields.items()
        }

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def values(self) -> Mapping[str, Any]:
        """Read-only snapshot of the entered values."""
        return MappingProxyType(dict(self._values))

    def current_values(self) -> dict[str, Any]:
        """Entered values laid over the defaults of untouched fields."""
        current = {
            field_id: definition.default_value
            for field_id, definition in self.schema.fields.items()
            if definition.has_default
        }
        current.update(self._values)
        return current

    @property
    def errors(self) -> Mapping[str, str]:
        """Read-only snapshot of the error map."""
        return MappingProxyType(
            {field_id: failure.message or "" for field_id, failure in self._failures.items()}
        )

    def _definition(self, field_id: str) -> FieldDefinition:
        try:
            return self.schema.fields[field_id]
        except KeyError:
            raise KeyError(f"Form '{self.schema.id}' has no field '{field_id}'") from None

    def get_value(self, field_id: str) -> Any:
        """Current value of a field, falling back to its default while untouched."""
        definition = self._definition(field_id)
        if field_id in self._values:
            return self._values[field_id]
        return definition.default_value

    def get_error(self, field_id: str) -> str | None:
        self._definition(field_id)
        failure = self._failures.get(field_id)
        return failure.message if failure is not None else None

    def is_visible(self, field_id: str) -> bool:
        self._definition(field_id)
        return self._visible[field_id]

    def visible_fields(self) -> list[str]:
        """Ids of visible fields in declaration order."""
        return [field_id for field_id in self.schema.fields if self._visible[field_id]]

    # ------------------------------------------------------------------
    # Value-tracking surface
    # ------------------------------------------------------------------

    def register(self, field_id: str, validator: Validator) -> FieldHandle:
        """Register a field with its compiled validator and get a handle to it."""
        self._definition(field_id)
        self._validators[field_id] = validator
        return FieldHandle(self, field_id)

    def subscribe(self, field_id: str, callback: ChangeCallback) -> Callable[[], None]:
        """
        Call ``callback(field_id, value)`` after each change of a field.

        Returns a function that removes the subscription.
        """
        self._definition(field_id)
        self._subscribers[field_id].append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers[field_id]:
                self._subscribers[field_id].remove(callback)

        return unsubscribe

    # ------------------------------------------------------------------
    # Changes
    # ------------------------------------------------------------------

    @traced("value_change")
    def set_value(self, field_id: str, value: Any) -> FieldChange:
        """
        Record a new value and bring visibility and errors up to date.

        1. Store the value.
        2. Re-validate the field if it is visible.
        3. Re-evaluate visibility of the fields whose conditions name it.
        4. Newly hidden fields lose their error; newly shown fields are
           validated straight away.
        5. Re-validate other touched, visible fields that have a custom
           validator, against the new value.

        Subscribers are notified once all of that is done.
        """
        definition = self._definition(field_id)
        value = normalize_value(definition, value)
        self._values[field_id] = value

        if self.config.validate_on_change and self._visible[field_id]:
            self.validate_field(field_id)

        change = FieldChange(field_id=field_id, value=value)
        for dependent in self._dependents.get(field_id, []):
            was_visible = self._visible[dependent]
            now_visible = is_visible(self.schema.fields[dependent], self._values)
            if was_visible == now_visible:
                continue

            self._visible[dependent] = now_visible
            if now_visible:
                change.shown.append(dependent)
                if self.config.validate_on_change:
                    self.validate_field(dependent)
            else:
                change.hidden.append(dependent)
                self._failures.pop(dependent, None)

        if change.shown or change.hidden:
            record_span("visibility", {"shown": change.shown, "hidden": change.hidden})
            logger.debug(f"'{field_id}' change showed {change.shown}, hid {change.hidden}")

        if self.config.validate_on_change:
            for other in self._cross_checked:
                if other == field_id or other in change.shown or not self._visible[other]:
                    continue
                if other in self._values or other in self._failures:
                    self.validate_field(other)

        change.error = self.get_error(field_id)
        for callback in list(self._subscribers.get(field_id, [])):
            callback(field_id, value)
        return change

    def validate_field(self, field_id: str) -> str | None:
        """
        Recompute one field's error entry and return its message.

        Hidden fields are exempt: their entry is cleared and None returned.
        The same goes for fields whose renderer is unknown.
        """
        self._definition(field_id)
        if not self._visible[field_id] or field_id in self._undrawable:
            self._failures.pop(field_id, None)
            return None

        result = self._validators[field_id](self.get_value(field_id), self.current_values())
        if result.valid:
            self._failures.pop(field_id, None)
        else:
            self._failures[field_id] = result
        record_span("validate", {"field": field_id, "valid": result.valid, "rule": result.rule})
        return result.message

    def validate_all(self) -> dict[str, str]:
        """Validate every visible field. Returns the resulting error map."""
        for field_id in self.schema.fields:
            self.validate_field(field_id)
        return dict(self.errors)

    def refresh(self) -> dict[str, str]:
        """
        Recompute visibility of every field, then re-validate touched fields.

        Running it twice without a change in between gives the same result.
        """
        self._visible = {
            field_id: is_visible(definition, self._values)
            for field_id, definition in self.schema.fields.items()
        }
        for field_id in self.schema.fields:
            if not self._visible[field_id]:
                self._failures.pop(field_id, None)
            elif field_id in self._values or field_id in self._failures:
                self.validate_field(field_id)
        return dict(self.errors)

    @traced("reset")
    def reset(self) -> None:
        """Clear all values and errors, as the form's Clear button does."""
        self._init_state()

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def submission_data(self) -> dict[str, Any]:
        """
        Values to hand over on submit.

        Untouched fields contribute their default when they have one.
        With hidden_value_policy "exclude", hidden fields are left out.
        """
        data: dict[str, Any] = {}
        for field_id, definition in self.schema.fields.items():
            if self.config.hidden_value_policy == "exclude" and not self._visible[field_id]:
                continue
            if field_id in self._values:
                data[field_id] = self._values[field_id]
            elif definition.has_default:
                data[field_id] = definition.default_value
        return data

    @traced("submit")
    def submit(self) -> SubmitResult:
        """
        Validate every visible field and accept or reject the submission.

        Rejected when any visible field has an error; the error map is
        updated either way so the form can show what is wrong.
        """
        self.validate_all()

        errors = [
            FieldValidationError(
                field_name=field_id,
                error_type=failure.rule or "validate",
                message=failure.message or "",
                received=self._values.get(field_id),
            )
            for field_id, failure in self._failures.items()
            if self._visible[field_id]
        ]

        warnings = []
        if self.config.hidden_value_policy == "exclude":
            for field_id in self._values:
                if not self._visible[field_id]:
                    warnings.append(f"Hidden field '{field_id}' was left out of the submitted data")

        is_valid = not errors
        result = SubmitResult(
            is_valid=is_valid,
            errors=errors,
            validated_data=self.submission_data() if is_valid else None,
            warnings=warnings,
        )

        record_span("submit", {"is_valid": is_valid, "errors": result.error_count})
        if is_valid:
            logger.info(f"Form '{self.schema.id}' submitted (session {self.session_id})")
        else:
            logger.info(
                f"Form '{self.schema.id}' rejected with {result.error_count} error(s): "
                f"{', '.join(result.error_map())}"
            )
        return result

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def render(self) -> list[RenderedNode]:
        """Compose the layout for the current values and errors."""
        return self._composer.compose(self._values, self.errors)

    def to_form_config(self) -> dict[str, Any]:
        """Export the current session state for a rendering client."""
        return {
            "formId": self.schema.id,
            "sessionId": self.session_id,
            "meta": self.schema.meta.model_dump(),
            "layout": [node.to_dict() for node in self.render()],
            "values": dict(self._values),
            "errors": dict(self.errors),
            "visible": self.visible_fields(),
        }
