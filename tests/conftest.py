"""Shared fixtures for schema-forms tests."""

import pytest

from schema_forms.engine.tracking import FieldHandle


class RecordingTracker:
    """Minimal value tracker that records registrations."""

    def __init__(self):
        self.values = {}
        self.registered = {}

    def register(self, field_id, validator):
        self.registered[field_id] = validator
        return FieldHandle(self, field_id)

    def subscribe(self, field_id, callback):
        return lambda: None

    def get_error(self, field_id):
        return None

    def get_value(self, field_id):
        return self.values.get(field_id)

    def set_value(self, field_id, value):
        self.values[field_id] = value
        return value


@pytest.fixture
def tracker():
    return RecordingTracker()
