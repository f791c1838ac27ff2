"""Palette → canvas drag payload and node materialisation."""

import json
from typing import Any, Iterable

from flowcanvas.engine.hydrate import hydrate
from flowcanvas.engine.registry import NodeRegistry
from flowcanvas.errors import InvalidDragPayload
from flowcanvas.nodes.base import NodeInstance

DRAG_CONTENT_TYPE = "application/reactflow"


def encode_drag_payload(kind: str) -> str:
    return json.dumps({"nodeKind": kind})


def decode_drag_payload(raw: str | bytes | dict[str, Any]) -> str:
    """Return the node kind carried by a drag payload.

    Accepts the JSON text from the drag-data channel or an already decoded
    dict. The older ``nodeType`` key is read when ``nodeKind`` is absent.
    """
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except ValueError as exc:
            raise InvalidDragPayload(f"Drag payload is not JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise InvalidDragPayload("Drag payload must be a JSON object")
    kind = raw.get("nodeKind", raw.get("nodeType"))
    if not isinstance(kind, str) or not kind:
        raise InvalidDragPayload("Drag payload has no nodeKind")
    return kind


def new_node_id(kind: str, taken: Iterable[str] = ()) -> str:
    """``"{kind}-{n}"`` with the smallest n >= 1 not already in use."""
    used = set(taken)
    n = 1
    while f"{kind}-{n}" in used:
        n += 1
    return f"{kind}-{n}"


def materialize(
    raw: str | bytes | dict[str, Any],
    registry: NodeRegistry,
    taken: Iterable[str] = (),
) -> NodeInstance:
    """Create the NodeInstance for a dropped palette entry.

    Unknown kinds still produce a node; the registry resolves them to the
    generic node.
    """
    kind = decode_drag_payload(raw)
    node = registry.resolve(kind)()
    node_id = new_node_id(kind, taken)
    data = dict(hydrate(node.defaults(node_id), None))
    return NodeInstance(id=node_id, kind=kind, data=data)
