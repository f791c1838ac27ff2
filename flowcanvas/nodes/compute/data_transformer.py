"""Data Transformer node — filter, map, sort or limit structured data."""

from typing import Any, Mapping

from flowcanvas.nodes.base import (
    BaseNode, Handle, NodeKind, NodeKindDescriptor, Section, form_field,
    input_handle, output_handle,
)

_OPERATIONS = {
    "filter": ("Filter", "Filter data based on conditions"),
    "map": ("Map/Transform", "Transform each item in the data"),
    "sort": ("Sort", "Sort data by specified field"),
    "limit": ("Limit", "Limit the number of results"),
    "group": ("Group", "Group data by specified field"),
    "aggregate": ("Aggregate", "Perform aggregation operations"),
}

_CONDITIONS = [
    ("equals", "Equals"),
    ("not_equals", "Not Equals"),
    ("greater_than", "Greater Than"),
    ("less_than", "Less Than"),
    ("contains", "Contains"),
    ("starts_with", "Starts With"),
    ("ends_with", "Ends With"),
]


class DataTransformerNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.DATA_TRANSFORMER.value,
        label="Data Transformer",
        icon="arrow-up-down",
        accent_color="#0ea5e9",
        category="compute",
    )
    schema = {
        "operation": "filter",
        "condition": "",
        "field": "",
        "value": "",
        "sortOrder": "asc",
        "limit": "100",
        "transformFunction": "",
        "errorHandling": "skip",
    }
    width = 320

    def description(self, state: Mapping[str, Any]) -> str | None:
        return _OPERATIONS.get(state.get("operation"), ("", None))[1]

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [input_handle("data")]

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("transformed"), output_handle("errors")]

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        operation = state.get("operation")
        sections = [Section(title="Transformation Type", fields=[
            form_field(state, "operation", "Operation", "select",
                       [(k, label) for k, (label, _) in _OPERATIONS.items()]),
        ])]
        if operation == "filter":
            sections.append(Section(title="Filter Conditions", fields=[
                form_field(state, "field", "Field"),
                form_field(state, "condition", "Condition", "select", _CONDITIONS),
                form_field(state, "value", "Value"),
            ]))
        elif operation == "map":
            sections.append(Section(title="Transform Function", fields=[
                form_field(state, "transformFunction", "Transform Function", "textarea"),
            ]))
        elif operation == "sort":
            sections.append(Section(title="Sort Configuration", fields=[
                form_field(state, "field", "Sort Field"),
                form_field(state, "sortOrder", "Sort Order", "select",
                           [("asc", "Ascending"), ("desc", "Descending")]),
            ]))
        elif operation == "limit":
            sections.append(Section(title="Limit Configuration", fields=[
                form_field(state, "limit", "Limit", "number"),
            ]))
        sections.append(Section(title="Advanced Options", collapsible=True, fields=[
            form_field(state, "errorHandling", "Error Handling", "select", [
                ("skip", "Skip Errors"),
                ("fail", "Fail on Error"),
                ("log", "Log and Continue"),
            ]),
        ]))
        return sections
