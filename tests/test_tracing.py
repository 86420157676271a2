"""Tests for session tracing."""

import json

import pytest

from schema_forms.config import FormEngineConfig
from schema_forms.controller import FormController
from schema_forms.tracing import (
    FileTracingProcessor,
    TracingProcessor,
    add_processor,
    disable_tracing,
    enable_tracing,
    is_tracing_enabled,
    record_span,
    set_trace_processors,
    setup_tracing,
    traced_operation,
)


SCHEMA = {
    "id": "traced-form",
    "fields": {
        "plan": {"id": "plan", "renderer": "select", "props": {"data": ["free", "pro"]}},
        "company": {
            "id": "company",
            "renderer": "text",
            "visibleWhen": {"field": "plan", "value": "pro"},
            "rules": {"required": "Company is required"},
        },
    },
}


class CollectingProcessor(TracingProcessor):
    def __init__(self):
        self.traces = []
        self.spans = []

    def on_trace_start(self, trace):
        self.traces.append(trace.name)

    def on_trace_end(self, trace):
        pass

    def on_span_start(self, span):
        pass

    def on_span_end(self, span):
        self.spans.append(span.span_data.export())

    def shutdown(self):
        pass

    def force_flush(self):
        pass


def _custom(name, data):
    return {"type": "custom", "name": name, "data": data}


@pytest.fixture(autouse=True)
def reset_tracing():
    disable_tracing()
    yield
    set_trace_processors([])
    disable_tracing()


class TestTracingSwitches:
    """Tests for enabling and disabling tracing."""

    def test_disabled_by_default(self):
        """Test nothing is traced while tracing is off."""
        assert not is_tracing_enabled()
        with traced_operation("anything") as trace:
            assert trace is None

    def test_enable_and_disable(self):
        """Test the module switches."""
        enable_tracing()
        assert is_tracing_enabled()
        disable_tracing()
        assert not is_tracing_enabled()

    def test_setup_disabled(self):
        """Test setup_tracing(enabled=False)."""
        setup_tracing(enabled=False)
        assert not is_tracing_enabled()

    def test_record_span_outside_trace(self):
        """Test spans outside a trace are dropped."""
        processor = CollectingProcessor()
        set_trace_processors([processor])
        enable_tracing()
        record_span("orphan", {"orphan": True})
        assert processor.spans == []

    def test_manual_operation(self):
        """Test a traced operation with an extra processor and a custom span."""
        setup_tracing(console=False)
        processor = CollectingProcessor()
        add_processor(processor)

        with traced_operation("import", {"source": "csv"}) as trace:
            assert trace is not None
            assert trace.name == "import"
            record_span("step", {"rows": 3})

        assert processor.traces == ["import"]
        assert processor.spans == [_custom("step", {"rows": 3})]


class TestControllerTracing:
    """Tests for traces emitted by the controller."""

    def test_operations_traced(self):
        """Test each controller operation opens exactly one trace."""
        processor = CollectingProcessor()
        set_trace_processors([processor])
        enable_tracing()

        controller = FormController(SCHEMA, config=FormEngineConfig())
        controller.set_value("plan", "pro")
        controller.submit()
        controller.reset()

        assert processor.traces == ["session_start", "value_change", "submit", "reset"]
        assert _custom("visibility", {"shown": ["company"], "hidden": []}) in processor.spans
        assert _custom("submit", {"is_valid": False, "errors": 1}) in processor.spans

    def test_file_processor(self, tmp_path):
        """Test traces written as JSON Lines."""
        trace_file = tmp_path / "traces.jsonl"
        setup_tracing(console=False, file_path=str(trace_file))

        controller = FormController(SCHEMA, config=FormEngineConfig(), session_id="abc")
        controller.set_value("plan", "pro")

        records = [json.loads(line) for line in trace_file.read_text().splitlines()]
        assert [r["name"] for r in records] == ["session_start", "value_change"]
        change = records[1]
        assert change["group_id"] == "abc"
        assert change["metadata"] == {"form_id": "traced-form", "session_id": "abc"}
        spans = [{k: v for k, v in span.items() if k != "span_id"} for span in change["spans"]]
        assert _custom("validate", {"field": "company", "valid": False, "rule": "required"}) in spans

    def test_file_processor_ignores_unknown_trace(self, tmp_path):
        """Test a trace end without a start writes nothing."""
        trace_file = tmp_path / "traces.jsonl"
        processor = FileTracingProcessor(file_path=str(trace_file))

        class Stray:
            trace_id = "trace_unknown"
            name = "stray"

        processor.on_trace_end(Stray())
        assert not trace_file.exists()

    def test_config_enables_tracing(self, tmp_path):
        """Test tracing switched on through the engine config."""
        trace_file = tmp_path / "session.jsonl"
        config = FormEngineConfig(enable_tracing=True, trace_file=str(trace_file))
        FormController(SCHEMA, config=config)
        assert is_tracing_enabled()
        assert trace_file.exists()

    def test_console_processor(self, capsys):
        """Test console output."""
        setup_tracing(console=True, verbose=True)
        controller = FormController(SCHEMA, config=FormEngineConfig())
        controller.submit()
        out = capsys.readouterr().out
        assert "[TRACE START] submit" in out
        assert "[TRACE END] submit" in out
        assert "[SPAN END]" in out
