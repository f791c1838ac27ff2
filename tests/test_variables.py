"""Tests for {{variable}} extraction."""

import pytest

from flowcanvas.engine.variables import is_identifier, parse_variables


class TestParseVariables:
    def test_dedup_keeps_first_occurrence(self):
        parsed = parse_variables("{{a}}{{b}}{{a}}")
        assert parsed.candidates == ("a", "b")
        assert parsed.invalid == ()
        assert [t.name for t in parsed.tokens] == ["a", "b", "a"]

    def test_invalid_grammar(self):
        parsed = parse_variables("{{1bad}} {{ok_1}} {{}}")
        assert parsed.candidates == ("ok_1",)
        assert parsed.invalid == ("1bad", "")
        assert parsed.has_invalid

    def test_invalid_keeps_duplicates(self):
        parsed = parse_variables("{{9}} {{9}} {{x}}")
        assert parsed.invalid == ("9", "9")
        assert parsed.candidates == ("x",)

    def test_dollar_and_underscore(self):
        parsed = parse_variables("{{$price}} {{_tmp2}} {{a$b}}")
        assert parsed.candidates == ("$price", "_tmp2", "a$b")

    def test_whitespace_payload_is_invalid(self):
        parsed = parse_variables("Hello {{ name }}")
        assert parsed.candidates == ()
        assert parsed.invalid == (" name ",)

    def test_nested_braces_use_nearest_opening(self):
        assert parse_variables("{{{a}}").candidates == ("a",)
        assert parse_variables("{{a{{b}}").candidates == ("b",)

    def test_unbalanced_markers_are_ignored(self):
        parsed = parse_variables("{{open and {{close}")
        assert parsed.tokens == ()

    def test_single_braces_are_text(self):
        assert parse_variables("{a} {b}").tokens == ()

    def test_multiline_text(self):
        parsed = parse_variables("Dear {{name}},\nyour order {{order_id}} shipped.\n{{name}}")
        assert parsed.candidates == ("name", "order_id")

    @pytest.mark.parametrize("text", ["", None, "no variables here", 123, ["{{a}}"], {"t": 1}])
    def test_empty_results(self, text):
        parsed = parse_variables(text)
        assert parsed.candidates == ()
        assert parsed.invalid == ()
        assert parsed.warning() is None

    def test_warning_lists_offending_names(self):
        warning = parse_variables("{{1x}} {{a-b}}").warning()
        assert warning.names == ("1x", "a-b")
        assert "'1x'" in warning.message
        assert "'a-b'" in warning.message

    def test_same_text_reuses_result(self):
        assert parse_variables("{{cached}}") is parse_variables("{{cached}}")

    def test_result_is_frozen(self):
        parsed = parse_variables("{{a}}")
        with pytest.raises(Exception):
            parsed.candidates = ("b",)


@pytest.mark.parametrize("name, expected", [
    ("a", True),
    ("_", True),
    ("$", True),
    ("camelCase1", True),
    ("1abc", False),
    ("", False),
    ("has space", False),
    ("dash-ed", False),
    ("dot.ted", False),
    ("é", False),
])
def test_is_identifier(name, expected):
    assert is_identifier(name) is expected
