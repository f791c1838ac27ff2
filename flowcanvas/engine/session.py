"""Node session — one placed node with its live state and chrome."""

from typing import Any

from flowcanvas.engine.hydrate import LiveState, NodeState
from flowcanvas.engine.registry import NodeRegistry
from flowcanvas.nodes.base import BaseNode, Handle, NodeInstance
from flowcanvas.nodes.chrome import NodeChrome, NodeView, render_node


class NodeSession:
    """Binds a NodeInstance to its kind, live state and UI chrome.

    Every edit goes through ``update``; handles and size are derived again on
    each ``render`` so they always reflect the current state.
    """

    def __init__(self, registry: NodeRegistry, instance: NodeInstance,
                 chrome: NodeChrome | None = None):
        self.instance = instance
        self.node: BaseNode = registry.resolve(instance.kind)()
        schema = {**self.node.loose_defaults(instance.data), **self.node.defaults(instance.id)}
        self.state = NodeState(schema, instance)
        self.chrome = chrome or NodeChrome()

    @property
    def live(self) -> LiveState:
        return self.state.state

    def update(self, key: str, value: Any) -> LiveState:
        key, value = self.node.edit(self.live, key, value)
        return self.state.update(key, value)

    def reset(self) -> LiveState:
        return self.state.reset()

    def toggle_minimize(self) -> bool:
        return self.chrome.toggle_minimize()

    def handles(self) -> list[Handle]:
        live = self.live
        return [*self.node.input_handles(live), *self.node.output_handles(live)]

    def render(self) -> NodeView:
        return render_node(self.node, self.instance, self.live, self.chrome)
