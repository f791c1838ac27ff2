"""Node kind registry with autodiscovery."""

import importlib
import logging
import pkgutil
from typing import Any

from flowcanvas.errors import UnknownNodeKind
from flowcanvas.nodes.base import BaseNode, Handle, NodeKind, NodeKindDescriptor, input_handle, output_handle

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTOR = NodeKindDescriptor(
    kind="default",
    label="Node",
    icon="circle",
    accent_color="#9ca3af",
    category="generic",
)


class GenericNode(BaseNode):
    """Stand-in for kinds the registry does not know; one input, one output, no form."""

    descriptor = DEFAULT_DESCRIPTOR

    def input_handles(self, state) -> list[Handle]:
        return [input_handle("input")]

    def output_handles(self, state) -> list[Handle]:
        return [output_handle("output")]


def _palette_rank(kind: str) -> int:
    try:
        return list(NodeKind).index(NodeKind(kind))
    except ValueError:
        return len(NodeKind)


class NodeRegistry:
    """Discovers and indexes all available node kinds.

    Read-only once ``discover()`` has run.
    """

    def __init__(self):
        self.node_types: dict[str, type[BaseNode]] = {}

    def discover(self):
        """Scan flowcanvas.nodes.* packages for BaseNode subclasses."""
        import flowcanvas.nodes.inputs as inputs_pkg
        import flowcanvas.nodes.compute as compute_pkg
        import flowcanvas.nodes.generic as generic_pkg
        import flowcanvas.nodes.outputs as outputs_pkg

        for pkg in [inputs_pkg, compute_pkg, generic_pkg, outputs_pkg]:
            for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
                mod = importlib.import_module(f"{pkg.__name__}.{modname}")
                for attr_name in dir(mod):
                    attr = getattr(mod, attr_name)
                    if (isinstance(attr, type)
                        and issubclass(attr, BaseNode)
                        and attr is not BaseNode
                        and hasattr(attr, 'descriptor')):
                        self.register(attr)
        logger.info("discovered %d node kind(s)", len(self.node_types))

    def register(self, node_cls: type[BaseNode]) -> type[BaseNode]:
        self.node_types[node_cls.descriptor.kind] = node_cls
        return node_cls

    def get(self, kind: str) -> type[BaseNode]:
        """Get a node class by kind. Raises UnknownNodeKind if not found."""
        try:
            return self.node_types[kind]
        except KeyError:
            raise UnknownNodeKind(kind) from None

    def resolve(self, kind: str) -> type[BaseNode]:
        """Like ``get`` but unknown kinds resolve to GenericNode."""
        node_cls = self.node_types.get(kind)
        if node_cls is None:
            logger.warning("unknown node kind %r, using generic node", kind)
            return GenericNode
        return node_cls

    def describe(self, kind: str) -> NodeKindDescriptor:
        """Descriptor for ``kind``, or the neutral default. Never raises."""
        node_cls = self.node_types.get(kind)
        if node_cls is None:
            logger.warning("unknown node kind %r, using default descriptor", kind)
            return DEFAULT_DESCRIPTOR
        return node_cls.descriptor

    def list_meta(self) -> list[dict[str, Any]]:
        """Return descriptors for all registered kinds (for the palette)."""
        ordered = sorted(self.node_types.values(),
                         key=lambda cls: _palette_rank(cls.descriptor.kind))
        return [cls.descriptor.model_dump() for cls in ordered]
