"""Aggregator node — combines a configurable number of inputs."""

from typing import Any, Mapping

from flowcanvas.engine.ports import spread_positions
from flowcanvas.nodes.base import (
    BaseNode, Handle, NodeKind, NodeKindDescriptor, Section, form_field,
    input_handle, output_handle,
)

_AGGREGATIONS = [
    ("concat", "Concatenate"),
    ("sum", "Sum (numbers)"),
    ("average", "Average"),
    ("join", "Join with separator"),
    ("merge", "Merge objects"),
]

MAX_INPUTS = 50


def input_count(state: Mapping[str, Any]) -> int:
    """``maxInputs`` clamped to ``0..MAX_INPUTS``; unparsable values give 0."""
    try:
        return min(MAX_INPUTS, max(0, int(state.get("maxInputs"))))
    except (TypeError, ValueError, OverflowError):
        return 0


class AggregatorNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.AGGREGATOR.value,
        label="Aggregator",
        icon="combine",
        accent_color="#6366f1",
        category="compute",
    )
    schema = {"aggregationType": "concat", "separator": ", ", "maxInputs": 5}

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        count = input_count(state)
        return [
            input_handle(f"input{i + 1}", position)
            for i, position in enumerate(spread_positions(count))
        ]

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("result")]

    def size(self, state: Mapping[str, Any]) -> tuple[int, int, int]:
        return self.width, self.height, max(80, 60 + input_count(state) * 10)

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        fields = [form_field(state, "aggregationType", "Aggregation Type", "select", _AGGREGATIONS)]
        if state.get("aggregationType") in ("concat", "join"):
            fields.append(form_field(state, "separator", "Separator"))
        fields.append(form_field(state, "maxInputs", "Max Inputs", "number"))
        return [Section(
            title="Aggregation",
            fields=fields,
            notes=[f"{input_count(state)} input handles"],
        )]
