"""Fixtures and result metadata for the parser benchmarks."""

from __future__ import annotations

import pytest

from strictjson import __version__
from strictjson.constants import MAX_DEPTH, MAX_SOURCE_SIZE


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Record the package version and parser limits next to the timings."""
    output_json["strictjson"] = {
        "version": __version__,
        "max_depth": MAX_DEPTH,
        "max_source_size": MAX_SOURCE_SIZE,
    }


@pytest.fixture(scope="session")
def large_document() -> str:
    """Array of 1000 small records."""
    records = [
        f'{{"id": {i}, "name": "item-{i}", "price": {i}.25, "tags": ["a", "b"], "ok": true}}'
        for i in range(1000)
    ]
    return "[" + ",\n".join(records) + "]"
