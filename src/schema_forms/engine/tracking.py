"""
Value-tracking collaborator surface.

The engine needs very little from whatever tracks field values: register
a field with its compiled validator, read and write the value, hear
about changes, and ask for the current error. FormController implements
this surface itself; any other store can stand in for it.
"""

from typing import Any, Callable, Protocol

from schema_forms.engine.rules import Validator

ChangeCallback = Callable[[str, Any], None]


class ValueTracker(Protocol):
    def register(self, field_id: str, validator: Validator) -> "FieldHandle": ...

    def subscribe(self, field_id: str, callback: ChangeCallback) -> Callable[[], None]: ...

    def get_error(self, field_id: str) -> str | None: ...

    def get_value(self, field_id: str) -> Any: ...

    def set_value(self, field_id: str, value: Any) -> Any: ...


class FieldHandle:
    """Read/write access to one registered field."""

    def __init__(self, tracker: ValueTracker, field_id: str):
        self.tracker = tracker
        self.field_id = field_id

    def get(self) -> Any:
        return self.tracker.get_value(self.field_id)

    def set(self, value: Any) -> Any:
        return self.tracker.set_value(self.field_id, value)

    @property
    def error(self) -> str | None:
        return self.tracker.get_error(self.field_id)

    def __repr__(self) -> str:
        return f"FieldHandle({self.field_id!r})"
