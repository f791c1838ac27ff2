"""Node kinds API — palette, node creation and node view rendering."""

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from flowcanvas.engine.dragdrop import materialize
from flowcanvas.engine.ports import derive_ports, stale_handle_references
from flowcanvas.engine.registry import NodeRegistry
from flowcanvas.engine.session import NodeSession
from flowcanvas.errors import InvalidDragPayload
from flowcanvas.nodes.base import NodeInstance
from flowcanvas.nodes.chrome import NodeChrome

router = APIRouter(prefix="/api/nodes", tags=["nodes"])

_registry: NodeRegistry | None = None


def get_registry() -> NodeRegistry:
    global _registry
    if _registry is None:
        _registry = NodeRegistry()
        _registry.discover()
    return _registry


class CreatePayload(BaseModel):
    payload: str | dict[str, Any]
    taken: list[str] = Field(default_factory=list)


class RenderPayload(NodeInstance):
    minimized: bool = False
    collapsed: list[str] = Field(default_factory=list)


class UpdatePayload(BaseModel):
    node: NodeInstance
    key: str
    value: Any = None


class VariablesPayload(BaseModel):
    text: str = ""


class StaleEdgesPayload(BaseModel):
    node: NodeInstance
    edges: list[dict[str, Any]] = Field(default_factory=list)


def _session(node: NodeInstance, minimized: bool = False,
             collapsed: list[str] | None = None) -> NodeSession:
    chrome = NodeChrome()
    chrome.minimized = minimized
    chrome.collapsed = set(collapsed or [])
    instance = NodeInstance(id=node.id, kind=node.kind, data=dict(node.data))
    return NodeSession(get_registry(), instance, chrome)


@router.get("")
def list_node_types():
    """Return descriptors for all available node kinds."""
    return get_registry().list_meta()


@router.get("/{kind}")
def describe_node_type(kind: str):
    """Descriptor for one kind; unknown kinds get the neutral default."""
    return get_registry().describe(kind).model_dump()


@router.post("/create")
def create_node(body: CreatePayload):
    """Materialise a node from a palette drag payload."""
    try:
        instance = materialize(body.payload, get_registry(), body.taken)
    except InvalidDragPayload as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return instance.model_dump()


@router.post("/render")
def render_node_view(body: RenderPayload):
    """Render a persisted node through the shared chrome."""
    return _session(body, body.minimized, body.collapsed).render().model_dump()


@router.post("/update")
def update_node(body: UpdatePayload):
    """Apply one edit and return the updated node with its new view."""
    session = _session(body.node)
    session.update(body.key, body.value)
    return {
        "node": session.instance.model_dump(),
        "view": session.render().model_dump(),
    }


@router.post("/variables")
def parse_text_variables(body: VariablesPayload):
    """Variables, derived input handles and size for a text body."""
    return derive_ports(body.text).model_dump()


@router.post("/stale-edges")
def find_stale_edges(body: StaleEdgesPayload):
    """Edges that reference handles the node no longer exposes."""
    session = _session(body.node)
    stale = stale_handle_references(session.instance.id, session.handles(), body.edges)
    return [ref.model_dump() for ref in stale]
