"""Node chrome — the uniform header, body and handle layout shared by every kind.

The chrome renders into a plain view model (``NodeView``) that a front end can
draw without knowing anything about the node kind that produced it.
"""

import logging
from typing import Any, Iterable, Literal, Mapping

from pydantic import BaseModel, Field, ValidationError

from flowcanvas.nodes.base import BaseNode, Handle, NodeInstance, Section

logger = logging.getLogger(__name__)

MINIMIZED_HEIGHT = 60
DEFAULT_WIDTH = 200
DEFAULT_HEIGHT = 80
DEFAULT_MIN_HEIGHT = 80


class HandleView(BaseModel):
    id: str
    anchor: str                                      # "{node_id}-{handle_id}"
    role: Literal["input", "output"]
    side: Literal["left", "right"]
    position: float


class NodeView(BaseModel):
    node_id: str
    kind: str | None = None
    title: str
    icon: str | None = None
    accent_color: str | None = None
    description: str | None = None
    minimized: bool = False
    controls: list[str] = Field(default_factory=list)
    sections: list[Section] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    inputs: list[HandleView] = Field(default_factory=list)
    outputs: list[HandleView] = Field(default_factory=list)
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT


def _coerce_handle(raw: Any, role: str) -> Handle | None:
    if isinstance(raw, Handle):
        return raw if raw.role == role else raw.model_copy(update={"role": role})
    if not isinstance(raw, Mapping):
        logger.debug("dropping malformed %s handle %r", role, raw)
        return None
    handle_id = raw.get("id")
    if not isinstance(handle_id, str) or not handle_id:
        logger.debug("dropping %s handle without an id: %r", role, raw)
        return None
    try:
        return Handle(id=handle_id, role=role,
                      relative_position=raw.get("relative_position", raw.get("relativePosition")))
    except ValidationError:
        # Unusable position; fall back to even spacing.
        return Handle(id=handle_id, role=role)


def _iter_handles(handles: Any) -> list[Any]:
    if handles is None or isinstance(handles, (str, bytes, Mapping)):
        return []
    try:
        return list(handles)
    except TypeError:
        logger.debug("ignoring non-iterable handle list %r", handles)
        return []


def layout_handles(node_id: str, handles: Iterable[Any] | None, role: str) -> list[HandleView]:
    """Place handles on their edge in declaration order.

    Explicit positions are kept, the rest are spread evenly. Anything that
    cannot be read as a handle is skipped.
    """
    coerced = [h for h in (_coerce_handle(raw, role) for raw in _iter_handles(handles)) if h]
    count = len(coerced)
    side = "left" if role == "input" else "right"
    views = []
    for index, handle in enumerate(coerced):
        position = handle.relative_position
        if position is None:
            position = (index + 1) / (count + 1)
        views.append(HandleView(
            id=handle.id,
            anchor=f"{node_id}-{handle.id}",
            role=role,
            side=side,
            position=position,
        ))
    return views


class NodeChrome:
    """Per-instance UI state of a rendered node.

    Starts expanded with every section open. Nothing here is persisted, so a
    recreated node always comes back expanded.
    """

    def __init__(self):
        self.minimized = False
        self.collapsed: set[str] = set()

    def toggle_minimize(self) -> bool:
        self.minimized = not self.minimized
        return self.minimized

    def toggle_section(self, section: Section) -> bool:
        """Fold or unfold a collapsible section; returns whether it is collapsed."""
        if not section.collapsible:
            return False
        if section.title in self.collapsed:
            self.collapsed.discard(section.title)
        else:
            self.collapsed.add(section.title)
        return section.title in self.collapsed

    def effective_height(self, height: int, min_height: int) -> int:
        if self.minimized:
            return MINIMIZED_HEIGHT
        return max(height, min_height)

    def controls(self, show_minimize: bool = True) -> list[str]:
        buttons = []
        if show_minimize:
            buttons.append("expand" if self.minimized else "minimize")
        buttons.extend(["settings", "close"])
        return buttons

    def render(
        self,
        node_id: str,
        title: str,
        description: str | None = None,
        icon: str | None = None,
        input_handles: Iterable[Any] | None = None,
        output_handles: Iterable[Any] | None = None,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        min_height: int = DEFAULT_MIN_HEIGHT,
        sections: Iterable[Section] | None = None,
        warnings: Iterable[str] | None = None,
        show_minimize: bool = True,
        kind: str | None = None,
        accent_color: str | None = None,
    ) -> NodeView:
        body: list[Section] = []
        if not self.minimized:
            for section in sections or []:
                folded = section.collapsible and section.title in self.collapsed
                body.append(section.model_copy(update={"collapsed": folded}))
        return NodeView(
            node_id=node_id,
            kind=kind,
            title=title,
            icon=icon,
            accent_color=accent_color,
            description=None if self.minimized else (description or None),
            minimized=self.minimized,
            controls=self.controls(show_minimize),
            sections=body,
            warnings=[] if self.minimized else list(warnings or []),
            inputs=layout_handles(node_id, input_handles, "input"),
            outputs=layout_handles(node_id, output_handles, "output"),
            width=width,
            height=self.effective_height(height, min_height),
        )


def render_node(
    node: BaseNode,
    instance: NodeInstance,
    state: Mapping[str, Any],
    chrome: NodeChrome | None = None,
) -> NodeView:
    """Render any node kind through the shared chrome."""
    chrome = chrome or NodeChrome()
    width, height, min_height = node.size(state)
    descriptor = node.descriptor
    return chrome.render(
        node_id=instance.id,
        kind=instance.kind,
        title=node.title(state),
        description=node.description(state),
        icon=descriptor.icon,
        accent_color=descriptor.accent_color,
        input_handles=node.input_handles(state),
        output_handles=node.output_handles(state),
        width=width,
        height=height,
        min_height=min_height,
        sections=node.sections(state),
        warnings=node.warnings(state),
        show_minimize=node.show_minimize,
    )
