"""Flexible node — a form whose height grows with the fields it shows."""

import re
from typing import Any, Mapping

from flowcanvas.nodes.base import (
    BaseNode, FormField, Handle, NodeKind, NodeKindDescriptor, Section, form_field,
    input_handle, output_handle,
)

MAX_FIELDS = 50

_LOOSE_KEY = re.compile(r"field[1-9][0-9]*|extraField[12]")


def field_count(state: Mapping[str, Any]) -> int:
    """``fieldCount`` clamped to ``0..MAX_FIELDS``; unparsable values give 0."""
    try:
        return min(MAX_FIELDS, max(0, int(state.get("fieldCount"))))
    except (TypeError, ValueError, OverflowError):
        return 0


def _loose_field(state: Mapping[str, Any], key: str, label: str) -> FormField:
    return FormField(key=key, label=label, value=state.get(key, ""))


class FlexibleNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.FLEXIBLE.value,
        label="Flexible Node",
        icon="layout",
        accent_color="#14b8a6",
        category="generic",
    )
    schema = {
        "nodeType": "simple",
        "textContent": "This is a simple node",
        "showExtraFields": False,
        "fieldCount": 3,
    }
    min_height = 100

    def loose_defaults(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {key: "" for key in data if isinstance(key, str) and _LOOSE_KEY.fullmatch(key)}

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [input_handle("input")]

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("output")]

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        node_type = state.get("nodeType")
        fields = [
            form_field(state, "nodeType", "Node Type", "select", [
                ("simple", "Simple"),
                ("complex", "Complex"),
                ("dynamic", "Dynamic"),
            ]),
            form_field(state, "textContent", "Text Content"),
        ]
        notes = []
        if node_type == "complex":
            fields.append(form_field(state, "showExtraFields", "Show extra fields", "checkbox"))
            if state.get("showExtraFields"):
                fields += [
                    _loose_field(state, "extraField1", "Extra Field 1"),
                    _loose_field(state, "extraField2", "Extra Field 2"),
                ]
        elif node_type == "dynamic":
            count = field_count(state)
            fields.append(form_field(state, "fieldCount", "Field Count", "number"))
            notes.append(f"Dynamic fields ({count}):")
            fields += [_loose_field(state, f"field{i + 1}", f"Field {i + 1}") for i in range(count)]
        notes.append("This node demonstrates flexible height - it grows with content!")
        return [Section(title="Flexible", fields=fields, notes=notes)]
