"""Tree Visitor Example - Analyse documents with JsonVisitor.

Builds two small tools on top of the visitor base class:

1. A statistics collector (counts per value kind, maximum depth)
2. A key-path lister for objects

Python 3.13+.
"""

from __future__ import annotations

from collections import Counter

from strictjson import JsonArray, JsonObject, JsonValue, JsonVisitor, parse

SAMPLE = """
{
  "service": "billing",
  "replicas": 3,
  "limits": {"cpu": 0.5, "memory": "512Mi"},
  "endpoints": [
    {"path": "/invoices", "methods": ["GET", "POST"]},
    {"path": "/health", "methods": ["GET"]}
  ]
}
"""


class StatsVisitor(JsonVisitor):
    """Counts values by kind and tracks the deepest container."""

    def __init__(self) -> None:
        super().__init__()
        self.kinds: Counter[str] = Counter()
        self.max_depth = 0

    def visit(self, node: JsonValue) -> JsonValue:
        self.kinds[node.kind] += 1
        self.max_depth = max(self.max_depth, self._depth_guard.current_depth)
        return super().visit(node)


class KeyPathVisitor(JsonVisitor):
    """Collects dotted key paths to every leaf value."""

    def __init__(self) -> None:
        super().__init__()
        self.paths: list[str] = []
        self._prefix: list[str] = []

    def visit_JsonObject(self, node: JsonObject) -> JsonValue:
        with self._depth_guard:
            for key, value in node.items():
                self._prefix.append(key)
                self._visit_child(value)
                self._prefix.pop()
        return node

    def visit_JsonArray(self, node: JsonArray) -> JsonValue:
        with self._depth_guard:
            for index, item in enumerate(node):
                self._prefix.append(f"[{index}]")
                self._visit_child(item)
                self._prefix.pop()
        return node

    def _visit_child(self, value: JsonValue) -> None:
        if isinstance(value, (JsonObject, JsonArray)):
            self.visit(value)
        else:
            self.paths.append(".".join(self._prefix).replace(".[", "["))


def main() -> None:
    document = parse(SAMPLE)

    stats = StatsVisitor()
    stats.visit(document)
    print("Value kinds:")
    for kind, count in sorted(stats.kinds.items()):
        print(f"  {kind:8} {count}")
    print(f"Deepest container level: {stats.max_depth}")
    print()

    paths = KeyPathVisitor()
    paths.visit(document)
    print("Leaf paths:")
    for path in paths.paths:
        print(f"  {path}")


if __name__ == "__main__":
    main()
