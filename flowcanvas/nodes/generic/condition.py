"""Condition node — a single comparison with true/false branches."""

from typing import Any, Mapping

from flowcanvas.nodes.base import (
    BaseNode, Handle, NodeKind, NodeKindDescriptor, Section, form_field,
    input_handle, output_handle,
)

_CONDITION_TYPES = [
    ("equals", "Equals"),
    ("not_equals", "Not equals"),
    ("greater_than", "Greater than"),
    ("less_than", "Less than"),
    ("contains", "Contains"),
    ("empty", "Is empty"),
    ("custom", "Custom expression"),
]


class ConditionNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.CONDITION.value,
        label="Condition",
        icon="split",
        accent_color="#f97316",
        category="generic",
    )
    schema = {"conditionType": "equals", "compareValue": "", "customExpression": ""}

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [input_handle("input")]

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("true", 0.3), output_handle("false", 0.7)]

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        condition_type = state.get("conditionType")
        fields = [form_field(state, "conditionType", "Condition Type", "select", _CONDITION_TYPES)]
        if condition_type not in ("empty", "custom"):
            fields.append(form_field(state, "compareValue", "Compare Value"))
        if condition_type == "custom":
            fields.append(form_field(state, "customExpression", "Expression",
                                     placeholder="e.g., value > 10 && value < 100"))
        return [Section(title="Condition", fields=fields, notes=["True → False"])]
