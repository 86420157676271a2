"""
Layout composer.

Walks a layout tree depth-first and produces rendered nodes for the
rendering layer. Hidden fields take no slot: a stack skips them and a
grid does not reserve cells for them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from schema_forms.engine.renderers import register_control, resolve_control
from schema_forms.engine.rules import DEFAULT_FALLBACK_MESSAGE
from schema_forms.engine.tracking import FieldHandle, ValueTracker
from schema_forms.engine.visibility import is_visible
from schema_forms.models.control import ControlSpec, UnsupportedControl
from schema_forms.models.schema import (
    FieldNode,
    FormSchema,
    GridNode,
    LayoutNode,
    SectionNode,
    StackNode,
)

logger = logging.getLogger("schema-forms")


@dataclass(frozen=True)
class GridPlacement:
    """Cell of a grid child: zero-based row and column, and columns spanned."""

    row: int
    column: int
    span: int


@dataclass
class RenderedField:
    control: ControlSpec
    error: str | None = None
    col_span: int = 1
    handle: FieldHandle | None = None
    placement: GridPlacement | None = None

    @property
    def field_id(self) -> str:
        return self.control.field_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "field",
            "fieldId": self.field_id,
            "control": self.control.model_dump(mode="json"),
            "error": self.error,
            "colSpan": self.col_span,
            "placement": _placement_dict(self.placement),
        }


@dataclass
class RenderedStack:
    spacing: str | None = None
    children: list["RenderedNode"] = field(default_factory=list)
    col_span: int = 1
    placement: GridPlacement | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "stack",
            "spacing": self.spacing,
            "children": [child.to_dict() for child in self.children],
            "colSpan": self.col_span,
            "placement": _placement_dict(self.placement),
        }


@dataclass
class RenderedGrid:
    cols: int = 1
    spacing: str | None = None
    children: list["RenderedNode"] = field(default_factory=list)
    col_span: int = 1
    placement: GridPlacement | None = None

    @property
    def rows(self) -> int:
        placed = [child.placement for child in self.children if child.placement is not None]
        return max((p.row for p in placed), default=-1) + 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "grid",
            "cols": self.cols,
            "rows": self.rows,
            "spacing": self.spacing,
            "children": [child.to_dict() for child in self.children],
            "colSpan": self.col_span,
            "placement": _placement_dict(self.placement),
        }


@dataclass
class RenderedSection:
    title: str | None = None
    with_divider: bool = False
    collapsible: bool = False
    children: list["RenderedNode"] = field(default_factory=list)
    col_span: int = 1
    placement: GridPlacement | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "section",
            "title": self.title,
            "withDivider": self.with_divider,
            "collapsible": self.collapsible,
            "children": [child.to_dict() for child in self.children],
            "colSpan": self.col_span,
            "placement": _placement_dict(self.placement),
        }


RenderedNode = Union[RenderedField, RenderedStack, RenderedGrid, RenderedSection]


def _placement_dict(placement: GridPlacement | None) -> dict[str, int] | None:
    if placement is None:
        return None
    return {"row": placement.row, "column": placement.column, "span": placement.span}


def place_grid_items(spans: list[int], cols: int) -> list[GridPlacement]:
    """
    Row-major auto placement of grid items.

    Spans are clamped to ``1..cols``. An item that does not fit in what
    is left of the current row starts the next row.
    """
    placements: list[GridPlacement] = []
    row, column = 0, 0
    for span in spans:
        span = min(max(span, 1), cols)
        if column + span > cols:
            row += 1
            column = 0
        placements.append(GridPlacement(row=row, column=column, span=span))
        column += span
    return placements


class LayoutComposer:
    """
    Composes a schema's layout for a snapshot of values and errors.

    When a tracker is given, every rendered field is registered with it
    (with its compiled validator) and carries the returned handle.
    """

    def __init__(
        self,
        schema: FormSchema,
        tracker: ValueTracker | None = None,
        fallback_message: str = DEFAULT_FALLBACK_MESSAGE,
    ):
        self.schema = schema
        self.tracker = tracker
        self.fallback_message = fallback_message

    def compose(
        self,
        values: Mapping[str, Any],
        errors: Mapping[str, str] | None = None,
    ) -> list[RenderedNode]:
        errors = errors or {}
        return self._compose_children(self.schema.effective_layout(), values, errors)

    def _compose_children(
        self,
        nodes: list[LayoutNode],
        values: Mapping[str, Any],
        errors: Mapping[str, str],
    ) -> list[RenderedNode]:
        rendered = []
        for node in nodes:
            item = self._compose_node(node, values, errors)
            if item is not None:
                rendered.append(item)
        return rendered

    def _compose_node(
        self,
        node: LayoutNode,
        values: Mapping[str, Any],
        errors: Mapping[str, str],
    ) -> RenderedNode | None:
        if isinstance(node, FieldNode):
            return self._compose_field(node, values, errors)

        children = self._compose_children(node.children, values, errors)
        if isinstance(node, GridNode):
            placements = place_grid_items([child.col_span for child in children], node.cols)
            for child, placement in zip(children, placements):
                child.placement = placement
            return RenderedGrid(
                cols=node.cols,
                spacing=node.spacing,
                children=children,
                col_span=node.col_span,
            )
        if isinstance(node, SectionNode):
            return RenderedSection(
                title=node.title,
                with_divider=node.with_divider,
                collapsible=node.collapsible,
                children=children,
                col_span=node.col_span,
            )
        if isinstance(node, StackNode):
            return RenderedStack(spacing=node.spacing, children=children, col_span=node.col_span)

        logger.error(f"Unknown layout node: {node!r}")
        return None

    def _compose_field(
        self,
        node: FieldNode,
        values: Mapping[str, Any],
        errors: Mapping[str, str],
    ) -> RenderedField | None:
        definition = self.schema.fields.get(node.field_id)
        if definition is None:
            logger.error(f"Layout references unknown field '{node.field_id}'")
            return None
        if not is_visible(definition, values):
            return None

        handle = None
        if self.tracker is not None:
            control, handle = register_control(
                definition, self.tracker, fallback_message=self.fallback_message
            )
        else:
            control = resolve_control(definition, fallback_message=self.fallback_message)

        if isinstance(control, UnsupportedControl):
            return None

        return RenderedField(
            control=control,
            error=errors.get(node.field_id),
            col_span=node.col_span,
            handle=handle,
        )
