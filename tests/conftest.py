"""Shared pytest setup: Hypothesis profiles and the fuzz marker.

Profile selection: HYPOTHESIS_PROFILE (dev, ci, verbose), else "ci" when
CI=true, else "dev". Tests marked ``fuzz`` only run under ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import HealthCheck, Verbosity, settings

_PROFILES = ("dev", "ci", "verbose")

# Deeply nested documents make single examples slow; no deadline anywhere.
settings.register_profile("dev", max_examples=300, deadline=None)
settings.register_profile(
    "ci",
    max_examples=50,
    deadline=None,
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile(
    "verbose", max_examples=100, deadline=None, verbosity=Verbosity.verbose
)


def _selected_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_selected_profile())


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "fuzz: long-running parser property tests (run with -m fuzz)"
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz tests unless the marker expression selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="parser fuzz test; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
