"""Tests for the top-level strictjson namespace."""

from __future__ import annotations

from decimal import Decimal

import strictjson


class TestPublicNamespace:
    """Exports and metadata."""

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ is importable from the package."""
        for name in strictjson.__all__:
            assert hasattr(strictjson, name), name

    def test_version_is_string(self) -> None:
        """__version__ is populated (metadata or development fallback)."""
        assert isinstance(strictjson.__version__, str)
        assert strictjson.__version__

    def test_rfc_metadata(self) -> None:
        assert strictjson.__rfc__ == "8259"
        assert strictjson.__rfc_url__.endswith("rfc8259")


class TestConvenienceFunctions:
    """parse / try_parse / to_python from the package root."""

    def test_parse_and_convert(self) -> None:
        value = strictjson.parse('{"n": 1, "d": 0.5, "s": "x"}')

        assert strictjson.to_python(value) == {"n": 1, "d": Decimal("0.5"), "s": "x"}

    def test_try_parse_returns_error_value(self) -> None:
        result = strictjson.try_parse("[1,]")

        assert isinstance(result, strictjson.ParseError)

    def test_syntax_error_is_json_error(self) -> None:
        """JsonSyntaxError is catchable through the JsonError base."""
        try:
            strictjson.parse("truex")
        except strictjson.JsonError as exc:
            assert isinstance(exc, strictjson.JsonSyntaxError)
            assert exc.message == "Trailing characters after valid JSON value"
        else:
            raise AssertionError("expected JsonSyntaxError")
