"""Filter node — splits input into matched and unmatched values."""

from typing import Any, Mapping

from flowcanvas.nodes.base import (
    BaseNode, Handle, NodeKind, NodeKindDescriptor, Section, form_field,
    input_handle, output_handle,
)

_CONDITIONS = [
    ("contains", "Contains"),
    ("starts_with", "Starts with"),
    ("ends_with", "Ends with"),
    ("equals", "Equals"),
    ("regex", "Regex"),
]


class FilterNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.FILTER.value,
        label="Filter",
        icon="filter",
        accent_color="#f59e0b",
        category="compute",
    )
    schema = {"condition": "contains", "filterValue": "", "caseSensitive": False}

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [input_handle("input")]

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("matched"), output_handle("unmatched")]

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        return [Section(title="Filter", fields=[
            form_field(state, "condition", "Condition", "select", _CONDITIONS),
            form_field(state, "filterValue", "Filter Value"),
            form_field(state, "caseSensitive", "Case sensitive", "checkbox"),
        ])]
