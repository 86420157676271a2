"""
Tracing configuration for schema-forms.

This module provides tracing for form sessions on top of the OpenAI
Agents SDK tracing primitives. A trace covers one controller operation
(session start, a value change, a reset, a submit); custom spans inside
it record what the operation did. Processors decide where traces go.
setup_tracing() replaces the SDK's default exporter with local
processors, so nothing leaves the process.
"""

import functools
import json
from contextlib import contextmanager
from typing import Any, Iterator

from agents import custom_span, set_tracing_disabled, trace
from agents.tracing import (
    Span,
    Trace,
    TracingProcessor,
    add_trace_processor,
    get_current_trace,
    set_trace_processors,
)

_enabled = False


class ConsoleTracingProcessor(TracingProcessor):
    """
    A simple tracing processor that prints traces to the console.

    Useful for development and debugging.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the console tracing processor.

        Args:
            verbose: If True, print detailed span information.
        """
        self.verbose = verbose

    def on_trace_start(self, trace: Trace) -> None:
        """Called when a trace starts."""
        print(f"\n[TRACE START] {trace.name} (ID: {trace.trace_id[:8]}...)")

    def on_trace_end(self, trace: Trace) -> None:
        """Called when a trace ends."""
        print(f"[TRACE END] {trace.name}")

    def on_span_start(self, span: Span[Any]) -> None:
        """Called when a span starts."""
        if self.verbose:
            print(f"  ├─ [SPAN START] {span.span_data.export()}")

    def on_span_end(self, span: Span[Any]) -> None:
        """Called when a span ends."""
        if self.verbose:
            print(f"  └─ [SPAN END] {span.span_data.export()}")

    def shutdown(self) -> None:
        """Called when the processor is shut down."""
        pass

    def force_flush(self) -> None:
        """Force flush any pending traces."""
        pass


class FileTracingProcessor(TracingProcessor):
    """
    A tracing processor that writes traces to a JSON Lines file.

    Useful for persistent logging and later analysis.
    """

    def __init__(self, file_path: str = "traces.jsonl"):
        """
        Initialize the file tracing processor.

        Args:
            file_path: Path to the output file (JSON Lines format).
        """
        self.file_path = file_path
        self._open: dict[str, dict[str, Any]] = {}

    def on_trace_start(self, trace: Trace) -> None:
        """Called when a trace starts."""
        exported = trace.export() or {}
        self._open[trace.trace_id] = {
            "trace_id": trace.trace_id,
            "name": trace.name,
            "group_id": exported.get("group_id"),
            "metadata": exported.get("metadata") or {},
            "spans": [],
        }

    def on_trace_end(self, trace: Trace) -> None:
        """Called when a trace ends."""
        record = self._open.pop(trace.trace_id, None)
        if record is None:
            return
        with open(self.file_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(record, default=str) + "\n")

    def on_span_start(self, span: Span[Any]) -> None:
        """Called when a span starts."""
        pass

    def on_span_end(self, span: Span[Any]) -> None:
        """Called when a span ends."""
        record = self._open.get(span.trace_id)
        if record is not None:
            record["spans"].append({"span_id": span.span_id, **span.span_data.export()})

    def shutdown(self) -> None:
        """Called when the processor is shut down."""
        pass

    def force_flush(self) -> None:
        """Force flush any pending traces."""
        pass


def setup_tracing(
    enabled: bool = True,
    console: bool = True,
    verbose: bool = False,
    file_path: str | None = None,
) -> None:
    """
    Configure tracing for form sessions.

    Args:
        enabled: Whether tracing is enabled.
        console: Whether to print traces to console.
        verbose: Whether to print detailed span information.
        file_path: Optional file path to write traces to.

    Example:
        >>> from schema_forms.tracing import setup_tracing
        >>> setup_tracing(console=True, verbose=True)
        >>> # Now every controller operation is traced
    """
    if not enabled:
        disable_tracing()
        return

    processors: list[TracingProcessor] = []

    if console:
        processors.append(ConsoleTracingProcessor(verbose=verbose))

    if file_path:
        processors.append(FileTracingProcessor(file_path=file_path))

    set_trace_processors(processors)
    enable_tracing()


def add_processor(processor: TracingProcessor) -> None:
    """Register one more processor next to the configured ones."""
    add_trace_processor(processor)


def disable_tracing() -> None:
    """Disable all tracing."""
    global _enabled
    _enabled = False
    set_tracing_disabled(True)


def enable_tracing() -> None:
    """Enable tracing with the registered processors."""
    global _enabled
    _enabled = True
    set_tracing_disabled(False)


def is_tracing_enabled() -> bool:
    return _enabled


@contextmanager
def traced_operation(
    name: str,
    metadata: dict[str, Any] | None = None,
    group_id: str | None = None,
) -> Iterator[Trace | None]:
    """
    Context manager for tracing a specific operation.

    Yields the Trace, or None when tracing is off.

    Example:
        >>> with traced_operation("submit", {"form_id": "contact-form"}):
        ...     result = controller.submit()
    """
    if not _enabled:
        yield None
        return

    with trace(name, group_id=group_id, metadata=dict(metadata or {})) as current:
        yield current


def record_span(name: str, data: dict[str, Any]) -> None:
    """Attach a custom span to the current trace. No-op outside a trace."""
    if not _enabled or get_current_trace() is None:
        return
    with custom_span(name, data=data):
        pass


def traced(name: str):
    """Decorator tracing every call of a controller method."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            metadata = {"form_id": self.schema.id, "session_id": self.session_id}
            with traced_operation(name, metadata, group_id=self.session_id):
                return func(self, *args, **kwargs)

        return wrapper

    return decorator
