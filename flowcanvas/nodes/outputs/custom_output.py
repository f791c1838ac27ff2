"""Output node — names a pipeline result."""

from typing import Any, Mapping

from flowcanvas.nodes.base import (
    BaseNode, Handle, NodeKind, NodeKindDescriptor, Section, form_field, input_handle,
)


class OutputNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.CUSTOM_OUTPUT.value,
        label="Output",
        icon="arrow-left",
        accent_color="#10b981",
        category="output",
    )
    schema = {"outputName": "output", "outputType": "Text"}

    def defaults(self, node_id: str) -> dict[str, Any]:
        return {**self.schema, "outputName": node_id.replace("customOutput-", "output_")}

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [input_handle("value")]

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        return [Section(title="Output", fields=[
            form_field(state, "outputName", "Name"),
            form_field(state, "outputType", "Type", "select",
                       [("Text", "Text"), ("File", "Image")]),
        ])]
