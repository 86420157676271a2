"""
Control descriptions produced by the field renderer dispatcher.

A ControlSpec tells the rendering collaborator which concrete control
to draw for a field and how it is configured. It never draws anything
itself. ``control`` is the discriminator of the union.
"""

from typing import Annotated, Any, Callable, Iterable, Literal, Union

from pydantic import BaseModel, Field


class Option(BaseModel):
    """A single choice of a radio, select or multiselect control."""

    label: str = Field(..., description="Displayed text")
    value: Any = Field(..., description="Value stored when this option is chosen")

    model_config = {"frozen": True}

    @classmethod
    def from_entry(cls, entry: Any) -> "Option":
        """
        Build an option from a schema entry.

        Bare scalars use the value as the label. Mapping entries fall back
        from one side to the other when ``label`` or ``value`` is missing.
        """
        if isinstance(entry, Option):
            return entry
        if isinstance(entry, dict):
            value = entry.get("value", entry.get("label"))
            label = entry.get("label", entry.get("value"))
            return cls(label=str(label), value=value)
        return cls(label=str(entry), value=entry)


def normalize_options(entries: Iterable[Any] | None) -> list[Option]:
    """Convert a list of scalars or ``{label, value}`` mappings to options."""
    if not entries:
        return []
    return [Option.from_entry(entry) for entry in entries]


class ControlBase(BaseModel):
    """Attributes shared by every control."""

    field_id: str = Field(..., description="Id of the field this control edits")
    label: str | None = Field(default=None, description="Field label")
    placeholder: str | None = Field(default=None, description="Placeholder text")
    default_value: Any = Field(default=None, description="Initial value to display")
    required: bool = Field(default=False, description="Whether to mark the control as required")
    extras: dict[str, Any] = Field(
        default_factory=dict,
        description="Renderer props the engine does not interpret (suffix, separators, ...)",
    )
    validator: Callable[..., Any] | None = Field(
        default=None,
        exclude=True,
        repr=False,
        description="Compiled validator for this field",
    )

    model_config = {"frozen": True}


class TextControl(ControlBase):
    control: Literal["text"] = "text"
    input_type: str = Field(default="text", description="email, tel, password, url, ...")


class TextareaControl(ControlBase):
    control: Literal["textarea"] = "textarea"
    min_rows: int | None = None
    max_rows: int | None = None


class DateControl(ControlBase):
    control: Literal["date"] = "date"
    min_date: Any = None
    max_date: Any = None


class NumberControl(ControlBase):
    control: Literal["number"] = "number"
    minimum: float | None = None
    maximum: float | None = None
    step: float | None = None
    precision: int | None = None


class RadioControl(ControlBase):
    control: Literal["radio"] = "radio"
    options: list[Option] = Field(default_factory=list)


class CheckboxControl(ControlBase):
    control: Literal["checkbox"] = "checkbox"


class SelectControl(ControlBase):
    control: Literal["select"] = "select"
    options: list[Option] = Field(default_factory=list)
    searchable: bool = False


class MultiSelectControl(ControlBase):
    control: Literal["multiselect"] = "multiselect"
    options: list[Option] = Field(default_factory=list)
    searchable: bool = False
    max_values: int | None = None


class SwitchControl(ControlBase):
    control: Literal["switch"] = "switch"


class FileControl(ControlBase):
    control: Literal["file"] = "file"
    accept: str | list[str] | None = None
    max_size: int | None = Field(default=None, description="Advisory size limit in bytes")


class UnsupportedControl(ControlBase):
    """Placeholder for a field the engine cannot draw. Renders as nothing."""

    control: Literal["unsupported"] = "unsupported"
    renderer: str = Field(..., description="The renderer tag that could not be drawn")


ControlSpec = Annotated[
    Union[
        TextControl,
        TextareaControl,
        DateControl,
        NumberControl,
        RadioControl,
        CheckboxControl,
        SelectControl,
        MultiSelectControl,
        SwitchControl,
        FileControl,
        UnsupportedControl,
    ],
    Field(discriminator="control"),
]
