"""Tests for the Text node: variables become input handles as the text changes."""

import pytest

from flowcanvas.engine.dragdrop import encode_drag_payload, materialize
from flowcanvas.engine.session import NodeSession
from flowcanvas.nodes.base import NodeInstance
from flowcanvas.nodes.inputs.text import TextNode


def _session(registry, text=None):
    data = {} if text is None else {"text": text}
    return NodeSession(registry, NodeInstance(id="text-1", kind="text", data=data))


def test_default_text_has_one_input(registry):
    view = _session(registry).render()
    assert view.title == "Text"
    assert [h.id for h in view.inputs] == ["input"]
    assert view.inputs[0].position == 0.5
    assert view.inputs[0].anchor == "text-1-input"
    assert [h.id for h in view.outputs] == ["output"]
    # base 80 + one handle
    assert view.height == 100
    assert view.width == 200


def test_editing_text_rederives_handles(registry):
    session = _session(registry)
    session.update("text", "{{a}} {{b}} {{c}}")
    view = session.render()
    assert [h.id for h in view.inputs] == ["a", "b", "c"]
    assert [h.position for h in view.inputs] == [0.25, 0.5, 0.75]

    session.update("text", "{{c}}")
    view = session.render()
    assert [h.id for h in view.inputs] == ["c"]
    assert session.instance.data["text"] == "{{c}}"


def test_invalid_variables_warn_but_keep_valid_handles(registry):
    view = _session(registry, "{{ok}} {{2bad}}").render()
    assert [h.id for h in view.inputs] == ["ok"]
    assert len(view.warnings) == 1
    assert "2bad" in view.warnings[0]
    # base 80 + one handle + warning banner
    assert view.height == 130


def test_text_grows_with_content(registry):
    text = "\n".join(["{{v%d}}" % i for i in range(12)])
    view = _session(registry, text).render()
    # 12 lines -> 300 base, plus twelve handles, no cap on the additions
    assert view.height == 300 + 12 * 20
    assert len(view.inputs) == 12


def test_minimized_text_node(registry):
    session = _session(registry, "{{ok}} {{2bad}}")
    session.toggle_minimize()
    view = session.render()
    assert view.height == 60
    assert view.warnings == []
    assert view.sections == []
    assert [h.id for h in view.inputs] == ["ok"]


def test_section_lists_variables(registry):
    view = _session(registry, "{{first}} {{second}}").render()
    section = view.sections[0]
    assert section.fields[0].key == "text"
    assert section.fields[0].control == "textarea"
    assert section.notes == ["Variables: first, second"]


def test_dropped_text_node(registry):
    instance = materialize(encode_drag_payload("text"), registry)
    assert instance.id == "text-1"
    assert instance.data == {"text": "{{input}}"}


def test_text_node_is_pure():
    node = TextNode()
    state = {"text": "{{x}}"}
    assert node.input_handles(state) == node.input_handles(state)
    assert state == {"text": "{{x}}"}


@pytest.mark.parametrize("text", [123, ["a"], {"text": "{{a}}"}])
def test_wrongly_typed_text_renders_without_handles(registry, text):
    view = _session(registry, text).render()
    assert view.inputs == []
    assert [h.id for h in view.outputs] == ["output"]
    assert view.warnings == []
    assert (view.width, view.height) == (200, 80)
