"""Dynamic port derivation — turns parsed variables into handles and node size."""

import logging
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict

from flowcanvas.engine.variables import VariableParse, parse_variables
from flowcanvas.errors import StaleHandleReference
from flowcanvas.nodes.base import Handle, input_handle

logger = logging.getLogger(__name__)

MIN_WIDTH, MAX_WIDTH = 200, 400
MIN_HEIGHT, MAX_HEIGHT = 80, 300
CHAR_WIDTH = 8
WIDTH_PADDING = 40
LINE_HEIGHT = 20
HEIGHT_PADDING = 60
HANDLE_ROOM = 20
WARNING_ROOM = 30


class Dimensions(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int
    height: int


class DerivedPorts(BaseModel):
    """Everything a content-driven node recomputes on each text edit."""
    model_config = ConfigDict(frozen=True)

    parse: VariableParse
    handles: tuple[Handle, ...]
    dimensions: Dimensions


def _clamp(low: int, high: int, value: int) -> int:
    return max(low, min(high, value))


def spread_positions(count: int) -> list[float]:
    """Evenly spaced fractions along an edge, never touching either end."""
    return [(i + 1) / (count + 1) for i in range(count)]


def derive_input_handles(candidates: Iterable[str]) -> list[Handle]:
    names = list(candidates)
    return [
        input_handle(name, position)
        for name, position in zip(names, spread_positions(len(names)))
    ]


def derive_dimensions(text: str, handle_count: int, has_invalid: bool) -> Dimensions:
    """Size a node from its text content.

    Only the base terms are clamped; the room added for handles and the
    warning banner is not capped.
    """
    if not isinstance(text, str):
        text = ""
    lines = text.split("\n")
    max_line_length = max(len(line) for line in lines)
    width = _clamp(MIN_WIDTH, MAX_WIDTH, max_line_length * CHAR_WIDTH + WIDTH_PADDING)
    height = _clamp(MIN_HEIGHT, MAX_HEIGHT, len(lines) * LINE_HEIGHT + HEIGHT_PADDING)
    height += HANDLE_ROOM * handle_count
    if has_invalid:
        height += WARNING_ROOM
    return Dimensions(width=width, height=height)


def derive_ports(text: str | None) -> DerivedPorts:
    """Recompute handles and dimensions for ``text`` from scratch."""
    parsed = parse_variables(text)
    handles = derive_input_handles(parsed.candidates)
    dimensions = derive_dimensions(text, len(handles), parsed.has_invalid)
    logger.debug(
        "derived %d input handle(s), %d invalid reference(s)",
        len(handles), len(parsed.invalid),
    )
    return DerivedPorts(parse=parsed, handles=tuple(handles), dimensions=dimensions)


def stale_handle_references(
    node_id: str,
    handles: Iterable[Handle],
    edges: Iterable[dict[str, Any]],
) -> list[StaleHandleReference]:
    """Find edges attached to ``node_id`` through handles it no longer has.

    Edges use the canvas shape ``{id, source, target, sourceHandle,
    targetHandle}``. Handle fields may carry either the bare handle id or the
    rendered anchor ``"{node_id}-{handle_id}"``.
    """
    current = {"input": set(), "output": set()}
    for handle in handles:
        current[handle.role].add(handle.id)

    stale: list[StaleHandleReference] = []
    for edge in edges:
        for end, handle_key, role in (
            ("target", "targetHandle", "input"),
            ("source", "sourceHandle", "output"),
        ):
            if edge.get(end) != node_id:
                continue
            handle_id = edge.get(handle_key)
            if handle_id is None:
                continue
            if not isinstance(handle_id, str):
                handle_id = str(handle_id)
            prefix = f"{node_id}-"
            if handle_id not in current[role] and handle_id.startswith(prefix):
                handle_id = handle_id[len(prefix):]
            if handle_id not in current[role]:
                stale.append(StaleHandleReference(
                    edge_id=None if edge.get("id") is None else str(edge["id"]),
                    node_id=node_id,
                    handle_id=handle_id,
                    role=role,
                ))
    return stale
