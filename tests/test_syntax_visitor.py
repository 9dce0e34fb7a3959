"""Tests for JsonVisitor traversal and to_python conversion."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given

from strictjson import (
    DepthLimitExceededError,
    JsonArray,
    JsonInteger,
    JsonNull,
    JsonObject,
    JsonParser,
    JsonString,
    JsonValue,
    JsonVisitor,
    parse,
    to_python,
)
from tests.strategies import json_pathological_nesting


class _Collector(JsonVisitor):
    """Records visited integer values."""

    def __init__(self) -> None:
        super().__init__()
        self.seen: list[int] = []

    def visit_JsonInteger(self, node: JsonInteger) -> JsonValue:
        self.seen.append(node.value)
        return node


class TestJsonVisitor:
    """Test dispatch and generic traversal."""

    def test_generic_visit_reaches_nested_values(self) -> None:
        """Array items and object values are traversed in order."""
        visitor = _Collector()
        visitor.visit(parse('{"a": [1, {"b": 2}], "c": 3}'))

        assert visitor.seen == [1, 2, 3]

    def test_generic_visit_returns_node(self) -> None:
        """Without overrides the visitor is the identity."""
        tree = parse("[null]")

        assert _Collector().visit(tree) is tree

    def test_unknown_node_type_raises(self) -> None:
        """Non-JSON objects are rejected."""
        with pytest.raises(TypeError, match="not a JSON value node"):
            _Collector().visit({"a": 1})  # type: ignore[arg-type]

    def test_depth_guard(self) -> None:
        """Traversal depth is limited independently of the parser."""
        tree: JsonValue = JsonNull()
        for _ in range(10):
            tree = JsonArray((tree,))

        visitor = JsonVisitor(max_depth=5)
        with pytest.raises(DepthLimitExceededError):
            visitor.visit(tree)

    def test_dispatch_table_per_subclass(self) -> None:
        """visit_* methods are discovered when the subclass is defined."""
        assert _Collector._class_visit_methods["JsonInteger"] == "visit_JsonInteger"


class TestToPython:
    """Test native conversion."""

    def test_demo_document(self) -> None:
        """Every kind maps to its Python counterpart."""
        source = (
            '{"name":"Henrick","alive":true,"score":12.5,'
            '"tags":["dev","ios"],"nil":null,"big":1e400,"count":3}'
        )

        assert to_python(parse(source)) == {
            "name": "Henrick",
            "alive": True,
            "score": Decimal("12.5"),
            "tags": ["dev", "ios"],
            "nil": None,
            "big": float("inf"),
            "count": 3,
        }

    def test_key_order_preserved(self) -> None:
        """Dict keys follow document order."""
        result = to_python(parse('{"z": 1, "a": 2}'))

        assert isinstance(result, dict)
        assert list(result) == ["z", "a"]

    def test_hand_built_tree(self) -> None:
        """Trees built without the parser convert too."""
        tree = JsonObject({"k": JsonArray((JsonString("v"),))})

        assert to_python(tree) == {"k": ["v"]}

    def test_max_depth(self) -> None:
        """to_python honours max_depth."""
        with pytest.raises(DepthLimitExceededError):
            to_python(parse("[[[[1]]]]"), max_depth=3)

    def test_deeper_parser_limit_passed_through(self) -> None:
        """A tree past the default depth converts once the parser limit is passed on."""
        parser = JsonParser(max_nesting_depth=300)
        tree = parser.parse("[" * 250 + "]" * 250)

        with pytest.raises(DepthLimitExceededError):
            to_python(tree)

        result = to_python(tree, max_depth=parser.max_nesting_depth)
        for _ in range(249):
            assert isinstance(result, list)
            result = result[0]
        assert result == []

    @given(json_pathological_nesting())
    def test_nested_documents_convert(self, case: tuple[str, int]) -> None:
        """Nesting within the default limit converts without error."""
        source, depth = case
        result = to_python(parse(source))

        for _ in range(depth):
            assert isinstance(result, (list, dict))
            result = result[0] if isinstance(result, list) else result["k"]
        assert result is None
