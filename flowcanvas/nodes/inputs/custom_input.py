"""Input node — passes a typed value into the pipeline."""

from typing import Any, Mapping

from flowcanvas.nodes.base import (
    BaseNode, Handle, NodeKind, NodeKindDescriptor, Section, form_field, output_handle,
)

_INPUT_TYPES = [(t, t) for t in ("Text", "Number", "File", "URL", "Email", "Date")]


class InputNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.CUSTOM_INPUT.value,
        label="Input",
        icon="text-cursor-input",
        accent_color="#3b82f6",
        category="input",
        description="Pass data of different types into your workflow",
    )
    schema = {
        "inputName": "input",
        "inputType": "Text",
        "placeholder": "",
        "required": False,
        "defaultValue": "",
    }
    width = 280

    def defaults(self, node_id: str) -> dict[str, Any]:
        # "customInput-3" -> "input_3"
        return {**self.schema, "inputName": node_id.replace("customInput-", "input_")}

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("value")]

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        return [
            Section(title="Basic Configuration", fields=[
                form_field(state, "inputName", "Input Name",
                           placeholder="Enter input name",
                           help_text="This will be the identifier for this input",
                           required=True),
                form_field(state, "inputType", "Type", "select", _INPUT_TYPES,
                           help_text="Select the data type for this input"),
            ]),
            Section(title="Advanced Options", collapsible=True, fields=[
                form_field(state, "placeholder", "Placeholder",
                           placeholder="Enter placeholder text",
                           help_text="Text shown when input is empty"),
                form_field(state, "defaultValue", "Default Value",
                           placeholder="Enter default value",
                           help_text="Initial value for this input"),
                form_field(state, "required", "Required field", "checkbox"),
            ]),
        ]
