"""Tests for the palette drag payload and node materialisation."""

import json

import pytest

from flowcanvas.engine.dragdrop import (
    DRAG_CONTENT_TYPE, decode_drag_payload, encode_drag_payload, materialize, new_node_id,
)
from flowcanvas.errors import InvalidDragPayload


def test_content_type():
    assert DRAG_CONTENT_TYPE == "application/reactflow"


def test_encode_payload():
    assert json.loads(encode_drag_payload("llm")) == {"nodeKind": "llm"}


def test_decode_roundtrip_and_dict():
    assert decode_drag_payload(encode_drag_payload("filter")) == "filter"
    assert decode_drag_payload({"nodeKind": "text"}) == "text"
    assert decode_drag_payload(b'{"nodeKind": "text"}') == "text"


def test_decode_legacy_key():
    assert decode_drag_payload('{"nodeType": "customInput"}') == "customInput"


@pytest.mark.parametrize("raw", ["not json", "[1, 2]", "{}", '{"nodeKind": ""}', '{"nodeKind": 3}', 5])
def test_decode_rejects_malformed(raw):
    with pytest.raises(InvalidDragPayload):
        decode_drag_payload(raw)


def test_invalid_payload_is_value_error():
    with pytest.raises(ValueError):
        decode_drag_payload("nope")


def test_new_node_id():
    assert new_node_id("llm") == "llm-1"
    assert new_node_id("llm", ["llm-1", "llm-2", "text-3"]) == "llm-3"
    assert new_node_id("llm", ["llm-2"]) == "llm-1"


def test_materialize_known_kind(registry):
    instance = materialize(encode_drag_payload("customInput"), registry, ["customInput-1"])
    assert instance.id == "customInput-2"
    assert instance.kind == "customInput"
    assert instance.data["inputName"] == "input_2"
    assert instance.data["inputType"] == "Text"


def test_materialize_unknown_kind_still_creates(registry):
    instance = materialize({"nodeKind": "mystery"}, registry)
    assert instance.id == "mystery-1"
    assert instance.kind == "mystery"
    assert instance.data == {}


def test_node_id_is_immutable(registry):
    instance = materialize({"nodeKind": "text"}, registry)
    with pytest.raises(AttributeError):
        instance.id = "other"
