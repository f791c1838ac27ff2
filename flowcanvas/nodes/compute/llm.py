"""LLM node — system and prompt in, response out."""

from typing import Any, Mapping

from flowcanvas.nodes.base import (
    BaseNode, Handle, NodeKind, NodeKindDescriptor, Section, input_handle, output_handle,
)


class LLMNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.LLM.value,
        label="LLM",
        icon="brain",
        accent_color="#ec4899",
        category="compute",
    )

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [input_handle("system", 1 / 3), input_handle("prompt", 2 / 3)]

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("response")]

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        return [Section(title="LLM", notes=["This is a LLM."])]
