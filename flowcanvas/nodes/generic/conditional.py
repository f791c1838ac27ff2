"""Conditional node — simple, multi-condition or custom-expression branching."""

from typing import Any, Mapping

from flowcanvas.nodes.base import (
    BaseNode, FormField, Handle, NodeKind, NodeKindDescriptor, Option, Section,
    form_field, input_handle, output_handle,
)

_OPERATORS = [
    ("equals", "Equals"),
    ("not_equals", "Not Equals"),
    ("greater_than", "Greater Than"),
    ("less_than", "Less Than"),
    ("greater_equal", "Greater or Equal"),
    ("less_equal", "Less or Equal"),
    ("contains", "Contains"),
    ("not_contains", "Not Contains"),
    ("is_empty", "Is Empty"),
    ("is_not_empty", "Is Not Empty"),
]

_SHORT_OPERATORS = [
    ("equals", "="),
    ("not_equals", "≠"),
    ("greater_than", ">"),
    ("less_than", "<"),
]


def condition_list(value: Any) -> list[dict[str, Any]]:
    """Persisted conditions, skipping entries that are not mappings."""
    if not isinstance(value, (list, tuple)):
        return []
    return [dict(c) for c in value if isinstance(c, Mapping)]


def add_condition(conditions: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Return a new condition list with an empty row appended."""
    ids = [c.get("id") for c in conditions if isinstance(c.get("id"), int)]
    next_id = max(ids, default=0) + 1
    return [*conditions, {"id": next_id, "field": "", "operator": "equals", "value": ""}]


def update_condition(conditions: list[dict[str, Any]], condition_id: int,
                     key: str, value: Any) -> list[dict[str, Any]]:
    return [{**c, key: value} if c.get("id") == condition_id else c for c in conditions]


def remove_condition(conditions: list[dict[str, Any]], condition_id: int) -> list[dict[str, Any]]:
    return [c for c in conditions if c.get("id") != condition_id]


class ConditionalNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.CONDITIONAL.value,
        label="Conditional",
        icon="git-branch",
        accent_color="#eab308",
        category="generic",
        description="Create conditional logic and branching",
    )
    schema = {
        "conditionType": "simple",
        "field": "",
        "operator": "equals",
        "value": "",
        "logicalOperator": "AND",
        "conditions": [],
        "customExpression": "",
        "trueOutput": "true",
        "falseOutput": "false",
    }
    width = 350

    def edit(self, state: Mapping[str, Any], key: str, value: Any) -> tuple[str, Any]:
        # Row edits arrive as "conditions.add", "conditions.<id>.remove" or
        # "conditions.<id>.<field>" and are folded into the "conditions" list.
        parts = key.split(".")
        if parts[0] != "conditions" or len(parts) == 1:
            return key, value
        conditions = condition_list(state.get("conditions"))
        if parts[1:] == ["add"]:
            return "conditions", add_condition(conditions)
        if len(parts) != 3 or not (parts[1].isascii() and parts[1].isdigit()):
            return key, value
        condition_id = int(parts[1])
        if parts[2] == "remove":
            return "conditions", remove_condition(conditions, condition_id)
        return "conditions", update_condition(conditions, condition_id, parts[2], value)

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [input_handle("data")]

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("true", 0.25), output_handle("false", 0.75)]

    def _condition_rows(self, conditions: list[dict[str, Any]]) -> list[FormField]:
        rows = []
        for index, condition in enumerate(conditions, start=1):
            prefix = f"conditions.{condition.get('id')}"
            rows += [
                FormField(key=f"{prefix}.field", label=f"Condition {index} Field",
                          value=condition.get("field"), placeholder="field"),
                FormField(key=f"{prefix}.operator", label="Op", control="select",
                          value=condition.get("operator"),
                          options=[Option(value=v, label=lbl) for v, lbl in _SHORT_OPERATORS]),
                FormField(key=f"{prefix}.value", label="Value",
                          value=condition.get("value"), placeholder="value"),
            ]
        return rows

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        condition_type = state.get("conditionType")
        sections = [Section(title="Condition Type", fields=[
            form_field(state, "conditionType", "Type", "select", [
                ("simple", "Simple Condition"),
                ("complex", "Multiple Conditions"),
                ("custom", "Custom Expression"),
            ], help_text="Choose the type of condition"),
        ])]
        if condition_type == "simple":
            sections.append(Section(title="Simple Condition", fields=[
                form_field(state, "field", "Field",
                           placeholder="e.g., status, age, category",
                           help_text="Field to evaluate"),
                form_field(state, "operator", "Operator", "select", _OPERATORS),
                form_field(state, "value", "Value",
                           placeholder="Enter comparison value",
                           help_text="Value to compare against"),
            ]))
        elif condition_type == "complex":
            conditions = condition_list(state.get("conditions"))
            sections.append(Section(
                title="Multiple Conditions",
                fields=[
                    form_field(state, "logicalOperator", "Logical Operator", "select", [
                        ("AND", "AND (All conditions must be true)"),
                        ("OR", "OR (Any condition can be true)"),
                    ]),
                    *self._condition_rows(conditions),
                ],
                notes=[f"{len(conditions)} condition(s)"],
            ))
        elif condition_type == "custom":
            sections.append(Section(title="Custom Expression", fields=[
                form_field(state, "customExpression", "JavaScript Expression", "textarea",
                           placeholder="data.status === 'active' && data.age > 18",
                           help_text="Write a JavaScript expression that returns true/false"),
            ]))
        sections.append(Section(title="Output Configuration", fields=[
            form_field(state, "trueOutput", "True Output", placeholder="true",
                       help_text="Output when condition is true"),
            form_field(state, "falseOutput", "False Output", placeholder="false",
                       help_text="Output when condition is false"),
        ]))
        return sections
