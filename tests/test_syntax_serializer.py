"""Tests for syntax.serializer: compact and indented output, limits."""

from __future__ import annotations

import sys

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from jsondescent.diagnostics import (
    DepthLimitExceededError,
    DiagnosticCode,
    JsonSerializationError,
)
from jsondescent.syntax import JsonSerializer, parse, serialize
from jsondescent.syntax.values import (
    JsonArray,
    JsonFalse,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonTrue,
    JsonValue,
)
from tests.strategies import json_value_trees


class TestCompactOutput:
    """Test serialize() without indentation."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (JsonNull(), "null"),
            (JsonTrue(), "true"),
            (JsonFalse(), "false"),
            (JsonNumber(123456), "123456"),
            (JsonString("hello world"), '"hello world"'),
            (JsonString(""), '""'),
        ],
    )
    def test_scalars(self, value: JsonValue, expected: str) -> None:
        assert serialize(value) == expected

    def test_array(self) -> None:
        value = JsonArray((JsonNull(), JsonTrue(), JsonFalse()))

        assert serialize(value) == "[null,true,false]"

    def test_object_in_member_order(self) -> None:
        value = parse('{ "a" : { "b" : true } , "c" : false }')

        assert serialize(value) == '{"a":{"b":true},"c":false}'

    def test_backslash_written_verbatim(self) -> None:
        assert serialize(JsonString("a\\n")) == '"a\\n"'


class TestIndentedOutput:
    """Test serialize() with indentation."""

    def test_nested_layout(self) -> None:
        value = parse('{"a": [1, 2], "b": null}')

        assert serialize(value, indent=2) == (
            '{\n  "a": [\n    1,\n    2\n  ],\n  "b": null\n}'
        )

    def test_scalar_unaffected(self) -> None:
        assert serialize(JsonNumber(5), indent=4) == "5"

    def test_indent_zero_breaks_lines_only(self) -> None:
        assert serialize(parse("[1,2]"), indent=0) == "[\n1,\n2\n]"

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValueError, match="indent must be >= 0"):
            JsonSerializer(indent=-1)

    def test_indent_property(self) -> None:
        assert JsonSerializer(indent=3).indent == 3
        assert JsonSerializer().indent is None


class TestSerializationErrors:
    """Test values the serializer refuses."""

    def test_quote_in_string_rejected(self) -> None:
        with pytest.raises(JsonSerializationError) as exc_info:
            serialize(JsonString('say "hi"'))

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SERIALIZATION_UNREPRESENTABLE

    def test_quote_in_key_rejected(self) -> None:
        with pytest.raises(JsonSerializationError):
            serialize(JsonObject({'k"': JsonNull()}))

    def test_depth_limit(self) -> None:
        value: JsonValue = JsonNumber(1)
        for _ in range(4):
            value = JsonArray((value,))

        assert JsonSerializer(max_depth=4).serialize(value) == "[[[[1]]]]"
        with pytest.raises(DepthLimitExceededError):
            JsonSerializer(max_depth=3).serialize(value)

    def test_huge_max_depth_clamped_before_stack_overflow(self) -> None:
        """A deep tree hits the clamped limit, not RecursionError."""
        depth = sys.getrecursionlimit()
        value: JsonValue = JsonNumber(1)
        for _ in range(depth):
            value = JsonArray((value,))
        serializer = JsonSerializer(max_depth=depth * 5)

        with pytest.raises(DepthLimitExceededError):
            serializer.serialize(value)

    def test_non_node_rejected(self) -> None:
        with pytest.raises(TypeError, match="Not a JSON value node"):
            serialize([1])  # type: ignore[arg-type]


class TestRoundtrip:
    """Property: serialize then parse reproduces the tree."""

    @given(json_value_trees(), st.one_of(st.none(), st.integers(min_value=0, max_value=4)))
    def test_parse_serialize_roundtrip(self, tree: JsonValue, indent: int | None) -> None:
        event(f"indent={indent}")
        text = serialize(tree, indent=indent)

        assert parse(text) == tree

    @given(json_value_trees())
    def test_compact_output_is_stable(self, tree: JsonValue) -> None:
        """Serializing the reparsed tree reproduces the same text."""
        text = serialize(tree)

        assert serialize(parse(text)) == text
