"""strictjson - strict RFC 8259 JSON parsing into a typed value tree.

Parses JSON text with exact positional diagnostics and a three-tier numeric
model (64-bit integer, exact decimal, binary float). No extensions: no
comments, no trailing commas, no NaN/Infinity.

Public API:
    parse - Parse JSON text, raising JsonSyntaxError on malformed input
    try_parse - Parse JSON text, returning ParseError as a value
    JsonParser - Configured parser (limits, duplicate keys, surrogates)
    to_python - Convert a value tree to plain Python objects
    JsonValue - Type alias for the eight value node types

Exceptions:
    JsonError - Base exception class
    JsonSyntaxError - Grammar violations
    DepthLimitExceededError - Traversal depth exceeded

Submodules:
    strictjson.syntax.values - Value node types (JsonObject, JsonArray, etc.)
    strictjson.syntax.visitor - JsonVisitor traversal base class
    strictjson.diagnostics - Diagnostic codes, templates and formatters
"""

# Essential Public API - Minimal exports for clean namespace
from .core.depth_guard import DepthLimitExceededError
from .diagnostics import JsonError, JsonSyntaxError
from .enums import DuplicateKeyPolicy, JsonKind
from .syntax import (
    JsonArray,
    JsonBool,
    JsonDecimal,
    JsonFloat,
    JsonInteger,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonParser,
    JsonString,
    JsonValue,
    JsonVisitor,
    ParseError,
    parse,
    to_python,
    try_parse,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("strictjson")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Grammar conformance
__rfc__ = "8259"
__rfc_url__ = "https://www.rfc-editor.org/rfc/rfc8259"

__all__ = [
    "DepthLimitExceededError",
    "DuplicateKeyPolicy",
    "JsonArray",
    "JsonBool",
    "JsonDecimal",
    "JsonError",
    "JsonFloat",
    "JsonInteger",
    "JsonKind",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonParser",
    "JsonString",
    "JsonSyntaxError",
    "JsonValue",
    "JsonVisitor",
    "ParseError",
    "__rfc__",
    "__rfc_url__",
    "__version__",
    "parse",
    "to_python",
    "try_parse",
]
