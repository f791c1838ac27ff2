"""Tests for configuration hydration and the live state cell."""

import pytest

from flowcanvas.engine.hydrate import MISSING, NodeState, hydrate
from flowcanvas.nodes.base import NodeInstance

SCHEMA = {"name": "input", "count": 3, "flag": False, "items": []}


# ---------------------------------------------------------------------------
# hydrate()
# ---------------------------------------------------------------------------

class TestHydrate:
    def test_defaults_only(self):
        assert hydrate(SCHEMA, None) == SCHEMA

    def test_persisted_values_win(self):
        state = hydrate(SCHEMA, {"name": "prompt", "count": 7})
        assert state["name"] == "prompt"
        assert state["count"] == 7
        assert state["flag"] is False

    def test_keys_match_schema(self):
        state = hydrate(SCHEMA, {"name": "x", "extra": 1})
        assert set(state) == set(SCHEMA)
        assert "extra" not in state

    def test_falsy_values_are_kept(self):
        state = hydrate(SCHEMA, {"count": 0, "name": "", "flag": True})
        assert state["count"] == 0
        assert state["name"] == ""
        assert state["flag"] is True

    def test_none_is_a_value(self):
        assert hydrate(SCHEMA, {"name": None})["name"] is None

    def test_missing_sentinel_falls_back(self):
        assert hydrate(SCHEMA, {"name": MISSING})["name"] == "input"

    def test_idempotent(self):
        data = {"name": "a", "count": MISSING, "other": 2}
        once = hydrate(SCHEMA, data)
        assert hydrate(SCHEMA, once) == once

    def test_result_is_read_only(self):
        state = hydrate(SCHEMA, None)
        with pytest.raises(TypeError):
            state["name"] = "changed"

    def test_mutable_defaults_not_shared(self):
        first = hydrate(SCHEMA, None)
        first["items"].append("x")
        assert hydrate(SCHEMA, None)["items"] == []
        assert SCHEMA["items"] == []

    def test_empty_schema(self):
        assert dict(hydrate({}, {"a": 1})) == {}


# ---------------------------------------------------------------------------
# NodeState
# ---------------------------------------------------------------------------

class TestNodeState:
    def _state(self, data=None):
        instance = NodeInstance(id="n-1", kind="test", data=data or {})
        return NodeState(SCHEMA, instance), instance

    def test_initial_state_is_hydrated(self):
        cell, _ = self._state({"count": 9})
        assert cell["count"] == 9
        assert cell["name"] == "input"

    def test_update_replaces_one_key(self):
        cell, instance = self._state({"count": 9})
        before = cell.state
        after = cell.update("name", "renamed")
        assert after["name"] == "renamed"
        assert after["count"] == 9
        assert before["name"] == "input"
        assert instance.data["name"] == "renamed"

    def test_update_is_shallow(self):
        cell, _ = self._state()
        cell.update("items", [{"id": 1}])
        cell.update("items", [{"id": 2}])
        assert cell["items"] == [{"id": 2}]

    def test_last_write_wins(self):
        cell, _ = self._state()
        cell.update("count", 1)
        cell.update("count", 2)
        assert cell["count"] == 2

    def test_update_key_outside_schema(self):
        cell, instance = self._state()
        cell.update("field1", "hello")
        assert cell.get("field1") == "hello"
        assert instance.data["field1"] == "hello"
        assert set(SCHEMA) <= set(cell.state)

    def test_reset(self):
        cell, instance = self._state({"name": "x", "count": 1})
        state = cell.reset()
        assert state == SCHEMA
        assert instance.data["name"] == "input"

    def test_rehydrate_after_update(self):
        cell, instance = self._state()
        cell.update("count", 42)
        again = NodeState(SCHEMA, instance)
        assert again["count"] == 42
