"""Transformer node — text transformations."""

from typing import Any, Mapping

from flowcanvas.nodes.base import (
    BaseNode, Handle, NodeKind, NodeKindDescriptor, Section, form_field,
    input_handle, output_handle,
)

_TRANSFORMS = [
    ("uppercase", "Uppercase"),
    ("lowercase", "Lowercase"),
    ("capitalize", "Capitalize"),
    ("trim", "Trim whitespace"),
    ("replace", "Replace pattern"),
    ("reverse", "Reverse text"),
]


class TransformerNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.TRANSFORMER.value,
        label="Transformer",
        icon="wand",
        accent_color="#06b6d4",
        category="compute",
    )
    schema = {"transformType": "uppercase", "customPattern": "", "replacement": ""}

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [input_handle("input")]

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("output")]

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        fields = [form_field(state, "transformType", "Transform Type", "select", _TRANSFORMS)]
        if state.get("transformType") == "replace":
            fields += [
                form_field(state, "customPattern", "Pattern",
                           placeholder="Enter regex pattern"),
                form_field(state, "replacement", "Replacement",
                           placeholder="Enter replacement text"),
            ]
        return [Section(title="Transform", fields=fields)]
