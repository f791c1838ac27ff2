"""Configuration hydration — merges a kind's defaults with persisted node data."""

import copy
from types import MappingProxyType
from typing import Any, Mapping

from flowcanvas.nodes.base import NodeInstance


class _Missing:
    """Sentinel for a persisted key that is explicitly absent."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

LiveState = Mapping[str, Any]


def hydrate(schema: Mapping[str, Any], data: Mapping[str, Any] | None) -> LiveState:
    """Return live state covering exactly the keys of ``schema``.

    A persisted value wins when the key is present and not ``MISSING``;
    ``None`` counts as a value. Keys in ``data`` that the schema does not
    declare are ignored. Defaults are copied so mutable defaults are never
    shared between nodes.
    """
    merged: dict[str, Any] = {}
    for key, default in schema.items():
        value = MISSING
        if data is not None:
            value = data.get(key, MISSING)
        merged[key] = copy.deepcopy(default) if value is MISSING else value
    return MappingProxyType(merged)


class NodeState:
    """Live, editable configuration of one node instance.

    Every mutation produces a new read-only snapshot and writes the changed
    key through to ``instance.data``; earlier snapshots are left untouched.
    """

    def __init__(self, schema: Mapping[str, Any], instance: NodeInstance):
        self.schema = MappingProxyType(dict(schema))
        self.instance = instance
        self._state: LiveState = hydrate(self.schema, instance.data)

    @property
    def state(self) -> LiveState:
        return self._state

    def __getitem__(self, key: str) -> Any:
        return self._state[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self._state.get(key, default)

    def update(self, key: str, value: Any) -> LiveState:
        """Replace one key, keeping all others (shallow merge)."""
        merged = dict(self._state)
        merged[key] = value
        self.instance.data[key] = value
        self._state = MappingProxyType(merged)
        return self._state

    def reset(self) -> LiveState:
        """Restore every declared key to its default."""
        for key, default in self.schema.items():
            self.instance.data[key] = copy.deepcopy(default)
        self._state = hydrate(self.schema, None)
        return self._state
