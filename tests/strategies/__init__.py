"""Hypothesis strategies for strictjson property-based testing.

Usage:
    from tests.strategies import json_documents, json_number_literals
"""

from .documents import (
    INT64_MAX,
    INT64_MIN,
    JSON_WHITESPACE,
    SHORT_ESCAPES,
    escaped_json_strings,
    json_documents,
    json_number_literals,
    json_pathological_nesting,
    json_scalars,
    json_text_strings,
    json_whitespace,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "JSON_WHITESPACE",
    "SHORT_ESCAPES",
    "escaped_json_strings",
    "json_documents",
    "json_number_literals",
    "json_pathological_nesting",
    "json_scalars",
    "json_text_strings",
    "json_whitespace",
]
