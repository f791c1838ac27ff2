"""Text node — a template whose {{variables}} become input handles."""

from typing import Any, Mapping

from flowcanvas.engine.ports import derive_ports
from flowcanvas.nodes.base import (
    BaseNode, Handle, NodeKind, NodeKindDescriptor, Section, form_field, output_handle,
)


class TextNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.TEXT.value,
        label="Text",
        icon="type",
        accent_color="#8b5cf6",
        category="input",
        description="Text template; {{name}} references become inputs",
    )
    schema = {"text": "{{input}}"}

    def description(self, state: Mapping[str, Any]) -> str | None:
        return None

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return list(derive_ports(state.get("text")).handles)

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("output")]

    def size(self, state: Mapping[str, Any]) -> tuple[int, int, int]:
        dims = derive_ports(state.get("text")).dimensions
        return dims.width, dims.height, self.min_height

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        ports = derive_ports(state.get("text"))
        notes = []
        if ports.handles:
            notes.append("Variables: " + ", ".join(ports.parse.candidates))
        return [Section(
            title="Text",
            fields=[form_field(state, "text", "Text", "textarea",
                               placeholder="Type text, use {{variable}} for inputs")],
            notes=notes,
        )]

    def warnings(self, state: Mapping[str, Any]) -> list[str]:
        warning = derive_ports(state.get("text")).parse.warning()
        return [warning.message] if warning else []
