"""
Schema models for declarative forms.

A FormSchema describes a whole form: its fields, the validation rules
attached to them, the conditions under which they are shown, and a
layout tree that arranges them independently of declaration order.

Schema documents use camelCase keys (``fieldId``, ``visibleWhen``,
``minLength``...). Every model also accepts the snake_case attribute
names. Schemas are immutable once loaded.
"""

import re
from typing import Annotated, Any, Callable, Iterator, Literal, Mapping, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from schema_forms.models.control import normalize_options

DEFAULT_REQUIRED_MESSAGE = "This field is required"


class FormMeta(BaseModel):
    """Display strings for the form header."""

    title: str | None = Field(default=None, description="Form title")
    subtitle: str | None = Field(default=None, description="Form subtitle")

    model_config = {"frozen": True}


class VisibilityCondition(BaseModel):
    """Predicate on another field's current value."""

    field: str = Field(..., description="Id of the controlling field")
    op: Literal["equals", "in"] = Field(default="equals", description="Comparison operator")
    value: Any = Field(
        default=None,
        description="Scalar for 'equals', collection of acceptable scalars for 'in'",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_membership_value(self) -> "VisibilityCondition":
        if self.op == "in" and not isinstance(self.value, (list, tuple, set, frozenset)):
            raise ValueError(
                f"'in' condition on '{self.field}' needs a list of values, got {type(self.value).__name__}"
            )
        return self


class BoundRule(BaseModel):
    """Numeric bound with an optional message. Accepts a bare number."""

    value: int | float
    message: str | None = None

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_bound(cls, data: Any) -> Any:
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            return {"value": data}
        return data


class PatternRule(BaseModel):
    """Regular expression with an optional message. Accepts a bare pattern."""

    value: re.Pattern
    message: str | None = None

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_pattern(cls, data: Any) -> Any:
        if isinstance(data, (str, re.Pattern)):
            return {"value": data}
        return data


CustomValidator = Callable[[Any, Mapping[str, Any]], Any]


class ValidationRuleSet(BaseModel):
    """
    Declarative validation constraints for one field.

    ``validator`` (key ``validate`` in schema documents) is the only
    executable rule: a callable taking the field's value and a read-only
    view of all values, returning ``True`` or a failure message.
    """

    required: str | None = Field(default=None, description="Message shown when the value is absent")
    min_length: BoundRule | None = Field(default=None, alias="minLength")
    max_length: BoundRule | None = Field(default=None, alias="maxLength")
    minimum: BoundRule | None = Field(default=None, alias="min")
    maximum: BoundRule | None = Field(default=None, alias="max")
    pattern: PatternRule | None = Field(default=None)
    validator: CustomValidator | None = Field(default=None, alias="validate", exclude=True)

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("required", mode="before")
    @classmethod
    def _normalize_required(cls, value: Any) -> Any:
        if isinstance(value, dict):
            if not value.get("value", True):
                return None
            return value.get("message") or DEFAULT_REQUIRED_MESSAGE
        if value is True:
            return DEFAULT_REQUIRED_MESSAGE
        if value is False or value == "":
            return None
        return value

    @property
    def is_required(self) -> bool:
        return self.required is not None


class _LayoutNodeBase(BaseModel):
    col_span: int = Field(default=1, ge=1, alias="colSpan", description="Columns taken in a parent grid")

    model_config = {"populate_by_name": True, "frozen": True}


class FieldNode(_LayoutNodeBase):
    """Leaf node placing one field."""

    kind: Literal["field"] = "field"
    field_id: str = Field(..., alias="fieldId")


class StackNode(_LayoutNodeBase):
    """Vertical sequence of children."""

    kind: Literal["stack"] = "stack"
    spacing: str | None = None
    children: list["LayoutNode"] = Field(default_factory=list)


class GridNode(_LayoutNodeBase):
    """Children arranged in ``cols`` columns."""

    kind: Literal["grid"] = "grid"
    cols: int = Field(default=1, ge=1)
    spacing: str | None = None
    children: list["LayoutNode"] = Field(default_factory=list)


class SectionNode(_LayoutNodeBase):
    """Titled wrapper. ``collapsible`` is presentation only."""

    kind: Literal["section"] = "section"
    title: str | None = None
    with_divider: bool = Field(default=False, alias="withDivider")
    collapsible: bool = False
    children: list["LayoutNode"] = Field(default_factory=list)


LayoutNode = Annotated[
    Union[FieldNode, StackNode, GridNode, SectionNode],
    Field(discriminator="kind"),
]

StackNode.model_rebuild()
GridNode.model_rebuild()
SectionNode.model_rebuild()


def iter_field_nodes(nodes: list[LayoutNode]) -> Iterator[FieldNode]:
    """Yield every field leaf of a layout tree, depth-first, in order."""
    for node in nodes:
        if isinstance(node, FieldNode):
            yield node
        else:
            yield from iter_field_nodes(node.children)


class FieldDefinition(BaseModel):
    """A single named, typed piece of user input."""

    id: str = Field(..., description="Field id, equal to its key in FormSchema.fields")
    label: str | None = Field(default=None, description="Display label")
    renderer: str = Field(..., description="Renderer tag: text, select, checkbox, ...")
    input_type: str | None = Field(default=None, alias="inputType", description="Hint for text: email, tel, ...")
    placeholder: str | None = Field(default=None)
    default_value: Any = Field(default=None, alias="defaultValue")
    props: dict[str, Any] = Field(default_factory=dict, description="Renderer-specific configuration")
    rules: ValidationRuleSet | None = Field(default=None)
    visible_when: VisibilityCondition | list[VisibilityCondition] | None = Field(
        default=None,
        alias="visibleWhen",
        description="Condition, or list of conditions that must all hold",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def conditions(self) -> tuple[VisibilityCondition, ...]:
        """Visibility conditions as a tuple, empty when always visible."""
        if self.visible_when is None:
            return ()
        if isinstance(self.visible_when, VisibilityCondition):
            return (self.visible_when,)
        return tuple(self.visible_when)

    @property
    def controlling_fields(self) -> set[str]:
        return {condition.field for condition in self.conditions}

    @property
    def has_default(self) -> bool:
        return "default_value" in self.model_fields_set

    @property
    def is_required(self) -> bool:
        return self.rules is not None and self.rules.is_required


# Renderer tag -> JSON Schema type for to_json_schema()
_JSON_TYPES: dict[str, str] = {
    "text": "string",
    "textarea": "string",
    "date": "string",
    "number": "number",
    "checkbox": "boolean",
    "switch": "boolean",
    "multiselect": "array",
    "file": "string",
}

_TEXT_FORMATS: dict[str, str] = {
    "email": "email",
    "url": "uri",
    "password": "password",
}

_CHOICE_PROPS: dict[str, str] = {
    "radio": "options",
    "select": "data",
    "multiselect": "data",
}


def _choice_type(values: list[Any]) -> str | None:
    if values and all(isinstance(v, str) for v in values):
        return "string"
    if values and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in values):
        return "number"
    return None


class FormSchema(BaseModel):
    """Complete declarative description of a form."""

    id: str = Field(..., description="Form identifier")
    meta: FormMeta = Field(default_factory=FormMeta)
    fields: dict[str, FieldDefinition] = Field(..., description="Field definitions keyed by id")
    layout: list[LayoutNode] = Field(default_factory=list, description="Layout tree")

    model_config = {"frozen": True}

    def effective_layout(self) -> list[LayoutNode]:
        """The declared layout, or one stack over the fields in declaration order."""
        if self.layout:
            return list(self.layout)
        return [StackNode(children=[FieldNode(field_id=field_id) for field_id in self.fields])]

    def field_order(self) -> list[str]:
        """Field ids in layout order, then any unplaced fields in declaration order."""
        order: list[str] = []
        for node in iter_field_nodes(self.effective_layout()):
            if node.field_id in self.fields and node.field_id not in order:
                order.append(node.field_id)
        order.extend(field_id for field_id in self.fields if field_id not in order)
        return order

    def to_json_schema(self) -> dict[str, Any]:
        """
        Export as a JSON Schema dict.

        Only fields that are required and always visible end up in
        ``required``; conditional fields carry their conditions under
        ``x-visibleWhen`` instead.
        """
        properties: dict[str, Any] = {}
        required: list[str] = []

        for field_id in self.field_order():
            field = self.fields[field_id]
            prop: dict[str, Any] = {}
            if field.label:
                prop["title"] = field.label

            json_type = _JSON_TYPES.get(field.renderer)
            options_key = _CHOICE_PROPS.get(field.renderer)
            if options_key:
                values = [option.value for option in normalize_options(field.props.get(options_key))]
                choice_type = _choice_type(values)
                if field.renderer == "multiselect":
                    items: dict[str, Any] = {"enum": values}
                    if choice_type:
                        items["type"] = choice_type
                    prop["items"] = items
                    prop["uniqueItems"] = True
                else:
                    json_type = choice_type
                    prop["enum"] = values
            if json_type:
                prop["type"] = json_type

            if field.renderer == "date":
                prop["format"] = "date"
            elif field.renderer == "file":
                prop["format"] = "binary"
            elif field.renderer == "text" and field.input_type in _TEXT_FORMATS:
                prop["format"] = _TEXT_FORMATS[field.input_type]

            rules = field.rules
            if rules is not None:
                if rules.min_length is not None:
                    prop["minLength"] = rules.min_length.value
                if rules.max_length is not None:
                    prop["maxLength"] = rules.max_length.value
                if rules.minimum is not None:
                    prop["minimum"] = rules.minimum.value
                if rules.maximum is not None:
                    prop["maximum"] = rules.maximum.value
                if rules.pattern is not None:
                    prop["pattern"] = rules.pattern.value.pattern
            if field.has_default:
                prop["default"] = field.default_value
            if field.conditions:
                prop["x-visibleWhen"] = [c.model_dump(mode="json") for c in field.conditions]

            properties[field_id] = prop
            if field.is_required and not field.conditions:
                required.append(field_id)

        return {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "$id": self.id,
            "type": "object",
            "title": self.meta.title,
            "description": self.meta.subtitle,
            "properties": properties,
            "required": required,
        }

    def to_ui_schema(self) -> dict[str, Any]:
        """Export as UI Schema dict."""
        ui_schema: dict[str, Any] = {"ui:order": self.field_order()}

        for field_id, field in self.fields.items():
            field_ui: dict[str, Any] = {"ui:widget": field.renderer}
            if field.renderer == "text" and field.input_type:
                field_ui["ui:widget"] = field.input_type
            if field.placeholder:
                field_ui["ui:placeholder"] = field.placeholder
            ui_schema[field_id] = field_ui

        return ui_schema
