"""
Field renderer dispatcher.

Maps a field's renderer tag to the ControlSpec the rendering layer has to
draw. Dispatch is a static table with one handler per Renderer member.
A tag outside the table resolves to UnsupportedControl, which the layout
composer renders as nothing.
"""

import logging
from enum import Enum
from typing import Any, Callable

from pydantic import ValidationError

from schema_forms.engine.rules import DEFAULT_FALLBACK_MESSAGE, compile_rules
from schema_forms.engine.tracking import FieldHandle, ValueTracker
from schema_forms.models.control import (
    CheckboxControl,
    ControlSpec,
    DateControl,
    FileControl,
    MultiSelectControl,
    NumberControl,
    RadioControl,
    SelectControl,
    SwitchControl,
    TextareaControl,
    TextControl,
    UnsupportedControl,
    normalize_options,
)
from schema_forms.models.schema import FieldDefinition

logger = logging.getLogger("schema-forms")


class Renderer(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    DATE = "date"
    NUMBER = "number"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    SELECT = "select"
    MULTISELECT = "multiselect"
    SWITCH = "switch"
    FILE = "file"

    @classmethod
    def parse(cls, tag: str) -> "Renderer | None":
        try:
            return cls(tag)
        except ValueError:
            return None


BOOLEAN_RENDERERS = frozenset({Renderer.CHECKBOX, Renderer.SWITCH})


def is_boolean_renderer(tag: str) -> bool:
    """Checkbox and switch hold booleans; ``required`` means checked."""
    return Renderer.parse(tag) in BOOLEAN_RENDERERS


def _split_props(field: FieldDefinition, known: tuple[str, ...]) -> tuple[dict[str, Any], dict[str, Any]]:
    consumed = {key: value for key, value in field.props.items() if key in known}
    extras = {
        key: value
        for key, value in field.props.items()
        if key not in known and key != "placeholder"
    }
    return consumed, extras


def _text(field: FieldDefinition, base: dict[str, Any]) -> ControlSpec:
    _, extras = _split_props(field, ())
    return TextControl(**base, extras=extras, input_type=field.input_type or "text")


def _textarea(field: FieldDefinition, base: dict[str, Any]) -> ControlSpec:
    props, extras = _split_props(field, ("minRows", "maxRows"))
    return TextareaControl(
        **base,
        extras=extras,
        min_rows=props.get("minRows"),
        max_rows=props.get("maxRows"),
    )


def _date(field: FieldDefinition, base: dict[str, Any]) -> ControlSpec:
    props, extras = _split_props(field, ("minDate", "maxDate"))
    return DateControl(
        **base,
        extras=extras,
        min_date=props.get("minDate"),
        max_date=props.get("maxDate"),
    )


def _number(field: FieldDefinition, base: dict[str, Any]) -> ControlSpec:
    props, extras = _split_props(field, ("min", "max", "step", "precision"))
    return NumberControl(
        **base,
        extras=extras,
        minimum=props.get("min"),
        maximum=props.get("max"),
        step=props.get("step"),
        precision=props.get("precision"),
    )


def _radio(field: FieldDefinition, base: dict[str, Any]) -> ControlSpec:
    props, extras = _split_props(field, ("options",))
    return RadioControl(**base, extras=extras, options=normalize_options(props.get("options")))


def _checkbox(field: FieldDefinition, base: dict[str, Any]) -> ControlSpec:
    _, extras = _split_props(field, ())
    return CheckboxControl(**base, extras=extras)


def _select(field: FieldDefinition, base: dict[str, Any]) -> ControlSpec:
    props, extras = _split_props(field, ("data", "searchable"))
    return SelectControl(
        **base,
        extras=extras,
        options=normalize_options(props.get("data")),
        searchable=bool(props.get("searchable", False)),
    )


def _multiselect(field: FieldDefinition, base: dict[str, Any]) -> ControlSpec:
    props, extras = _split_props(field, ("data", "searchable", "maxValues"))
    return MultiSelectControl(
        **base,
        extras=extras,
        options=normalize_options(props.get("data")),
        searchable=bool(props.get("searchable", False)),
        max_values=props.get("maxValues"),
    )


def _switch(field: FieldDefinition, base: dict[str, Any]) -> ControlSpec:
    _, extras = _split_props(field, ())
    return SwitchControl(**base, extras=extras)


def _file(field: FieldDefinition, base: dict[str, Any]) -> ControlSpec:
    props, extras = _split_props(field, ("accept", "maxSize"))
    return FileControl(
        **base,
        extras=extras,
        accept=props.get("accept"),
        max_size=props.get("maxSize"),
    )


RENDERER_HANDLERS: dict[Renderer, Callable[[FieldDefinition, dict[str, Any]], ControlSpec]] = {
    Renderer.TEXT: _text,
    Renderer.TEXTAREA: _textarea,
    Renderer.DATE: _date,
    Renderer.NUMBER: _number,
    Renderer.RADIO: _radio,
    Renderer.CHECKBOX: _checkbox,
    Renderer.SELECT: _select,
    Renderer.MULTISELECT: _multiselect,
    Renderer.SWITCH: _switch,
    Renderer.FILE: _file,
}


def resolve_control(
    field: FieldDefinition,
    *,
    fallback_message: str = DEFAULT_FALLBACK_MESSAGE,
) -> ControlSpec:
    """
    Describe the control to draw for a field, with its compiled validator.

    Args:
        field: The field definition.
        fallback_message: Message for custom validators that fail without one.

    Returns:
        The ControlSpec variant for the field's renderer, or
        UnsupportedControl when the tag is unknown or its props do not
        fit the control.
    """
    base = {
        "field_id": field.id,
        "label": field.label,
        "placeholder": field.placeholder or field.props.get("placeholder"),
        "default_value": field.default_value,
        "required": field.is_required,
        "validator": compile_rules(
            field.rules,
            boolean=is_boolean_renderer(field.renderer),
            fallback_message=fallback_message,
        ),
    }

    renderer = Renderer.parse(field.renderer)
    if renderer is None:
        logger.error(f"Field '{field.id}' uses unknown renderer '{field.renderer}'; rendering nothing")
        return UnsupportedControl(**base, renderer=field.renderer)

    try:
        return RENDERER_HANDLERS[renderer](field, base)
    except ValidationError as e:
        logger.error(f"Field '{field.id}' has props the {renderer.value} control rejects; rendering nothing: {e}")
        return UnsupportedControl(**base, renderer=field.renderer)


def register_control(
    field: FieldDefinition,
    tracker: ValueTracker,
    *,
    fallback_message: str = DEFAULT_FALLBACK_MESSAGE,
) -> tuple[ControlSpec, FieldHandle | None]:
    """
    Resolve a field's control and register it with the value tracker.

    Unsupported controls are not registered and get no handle.
    """
    control = resolve_control(field, fallback_message=fallback_message)
    if isinstance(control, UnsupportedControl):
        return control, None
    handle = tracker.register(field.id, control.validator)
    return control, handle


def normalize_value(field: FieldDefinition, value: Any) -> Any:
    """Multiselect values become an ordered list without duplicates."""
    if Renderer.parse(field.renderer) is Renderer.MULTISELECT and value is not None:
        if isinstance(value, (str, bytes)):
            return [value]
        return list(dict.fromkeys(value))
    return value
