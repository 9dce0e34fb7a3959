"""Visitor pattern for value tree traversal.

Enables tools to walk JSON value trees without modifying node classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name (snake_case),
e.g. ``visit_JsonObject``.

Type Parameters:
- JsonVisitor[T] is generic over return type T
- JsonVisitor (no type param) defaults to T=JsonValue

Python 3.13+.
"""

from collections.abc import Callable
from typing import ClassVar

from strictjson.constants import MAX_DEPTH
from strictjson.core.depth_guard import DepthGuard

from .values import (
    JsonArray,
    JsonBool,
    JsonDecimal,
    JsonFloat,
    JsonInteger,
    JsonNull,
    JsonObject,
    JsonString,
    JsonValue,
)

__all__ = ["JsonVisitor", "to_python"]

_NODE_TYPES: frozenset[type] = frozenset(
    {JsonNull, JsonBool, JsonInteger, JsonDecimal, JsonFloat, JsonString, JsonArray, JsonObject}
)


class JsonVisitor[T = JsonValue]:
    """Base visitor for traversing JSON value trees.

    Follows stdlib ast.NodeVisitor convention: generic_visit() automatically
    traverses array items and object member values. Override visit_NodeType
    methods to add custom behavior.

    Uses class-level dispatch table built once per class definition via
    __init_subclass__, plus an instance-level cache of bound methods.

    Example:
        >>> from strictjson import parse
        >>> class CountStrings(JsonVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_JsonString(self, node):
        ...         self.count += 1
        ...         return node
        ...
        >>> visitor = CountStrings()
        >>> _ = visitor.visit(parse('{"a": ["x", "y"], "b": "z"}'))
        >>> visitor.count
        3
    """

    __slots__ = ("_depth_guard", "_instance_dispatch_cache")

    # Class-level dispatch table (method names only, not bound methods)
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit":
                cls._class_visit_methods[name[6:]] = name

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with depth guard and dispatch cache.

        Subclasses MUST call super().__init__().

        Args:
            max_depth: Maximum traversal depth (default: MAX_DEPTH from constants).
        """
        effective_max_depth = max_depth if max_depth is not None else MAX_DEPTH
        self._depth_guard = DepthGuard(max_depth=effective_max_depth)
        self._instance_dispatch_cache: dict[type, Callable[[JsonValue], T]] = {}

    def visit(self, node: JsonValue) -> T:
        """Visit a node (dispatcher with class-level + instance-level caching).

        Args:
            node: Value tree node to visit

        Returns:
            Result of visiting the node

        Raises:
            TypeError: If node is not one of the JSON value types
        """
        node_type = type(node)

        if node_type in self._instance_dispatch_cache:
            return self._instance_dispatch_cache[node_type](node)

        if node_type not in _NODE_TYPES:
            msg = f"Cannot visit {node_type.__name__}: not a JSON value node"
            raise TypeError(msg)

        node_type_name = node_type.__name__
        if node_type_name in self._class_visit_methods:
            method = getattr(self, self._class_visit_methods[node_type_name])
        else:
            method = self.generic_visit

        self._instance_dispatch_cache[node_type] = method
        return method(node)  # type: ignore[no-any-return]  # getattr returns Any

    def generic_visit(self, node: JsonValue) -> T:
        """Default visitor (traverses children with depth protection).

        Raises:
            DepthLimitExceededError: If traversal depth exceeds max_depth
        """
        match node:
            case JsonArray(items=items):
                with self._depth_guard:
                    for item in items:
                        self.visit(item)
            case JsonObject():
                with self._depth_guard:
                    for value in node.members.values():
                        self.visit(value)
        return node  # type: ignore[return-value]  # T defaults to JsonValue


class _PythonConverter(JsonVisitor[object]):
    """Builds plain Python objects from a value tree."""

    __slots__ = ()

    def visit_JsonNull(self, node: JsonNull) -> object:
        return None

    def visit_JsonBool(self, node: JsonBool) -> object:
        return node.value

    def visit_JsonInteger(self, node: JsonInteger) -> object:
        return node.value

    def visit_JsonDecimal(self, node: JsonDecimal) -> object:
        return node.value

    def visit_JsonFloat(self, node: JsonFloat) -> object:
        return node.value

    def visit_JsonString(self, node: JsonString) -> object:
        return node.value

    def visit_JsonArray(self, node: JsonArray) -> object:
        with self._depth_guard:
            return [self.visit(item) for item in node.items]

    def visit_JsonObject(self, node: JsonObject) -> object:
        with self._depth_guard:
            return {key: self.visit(value) for key, value in node.members.items()}


def to_python(value: JsonValue, *, max_depth: int | None = None) -> object:
    """Convert a value tree to plain Python objects.

    Mapping: null -> None, bool -> bool, integer -> int, decimal -> Decimal,
    float -> float, string -> str, array -> list, object -> dict (key order
    preserved).

    Args:
        value: Root of the tree
        max_depth: Maximum container nesting (default: MAX_DEPTH). Trees from
            a JsonParser with a larger max_nesting_depth need that value here.

    Returns:
        The equivalent Python object

    Raises:
        TypeError: If the tree contains a non-JSON node
        DepthLimitExceededError: If nesting exceeds max_depth

    Example:
        >>> from strictjson import parse
        >>> to_python(parse('{"a": [1, 2.5, null, true]}'))
        {'a': [1, Decimal('2.5'), None, True]}
    """
    return _PythonConverter(max_depth=max_depth).visit(value)
