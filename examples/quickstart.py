"""Quickstart - Parse a JSON document and read typed values.

Demonstrates:

1. Parsing text into a typed value tree
2. Pattern matching on value kinds
3. Converting to plain Python objects
4. Handling syntax errors with positions and context
5. Opt-in strictness (duplicate keys, surrogate pairs, depth)

Python 3.13+.
"""

from __future__ import annotations

DEMO_DOCUMENT = '{"name":"Henrick","alive":true,"score":12.5,"tags":["dev","ios"],"nil":null}'


def example_1_typed_tree() -> None:
    """Parse and walk the value tree."""
    from strictjson import JsonBool, JsonDecimal, JsonObject, JsonString, parse

    print("=" * 60)
    print("Example 1: Typed Value Tree")
    print("=" * 60)

    document = parse(DEMO_DOCUMENT)
    assert isinstance(document, JsonObject)

    for key, value in document.items():
        match value:
            case JsonString(value=text):
                print(f"  {key}: string {text!r}")
            case JsonBool(value=flag):
                print(f"  {key}: bool {flag}")
            case JsonDecimal(value=number):
                print(f"  {key}: decimal {number}")
            case _:
                print(f"  {key}: {value.kind}")

    print()


def example_2_native_objects() -> None:
    """Convert to dict/list/Decimal for quick scripting."""
    from strictjson import parse, to_python

    print("=" * 60)
    print("Example 2: Native Python Objects")
    print("=" * 60)

    data = to_python(parse(DEMO_DOCUMENT))
    assert isinstance(data, dict)

    print(data["name"])
    print(data["alive"])
    print(data["score"])
    print(data["tags"][0])
    print()


def example_3_errors() -> None:
    """Show the three error renderings."""
    from strictjson import JsonSyntaxError, parse, try_parse
    from strictjson.diagnostics import DiagnosticFormatter, OutputFormat

    print("=" * 60)
    print("Example 3: Syntax Errors")
    print("=" * 60)

    source = '{\n  "id": 01,\n  "ok": true\n}'

    try:
        parse(source)
    except JsonSyntaxError as e:
        print(f"Exception: {e}")

    error = try_parse(source)
    print(error.format_with_context(context_lines=1))  # type: ignore[union-attr]
    print()
    print(DiagnosticFormatter().format(error.to_diagnostic()))  # type: ignore[union-attr]
    print()
    print(
        DiagnosticFormatter(output_format=OutputFormat.JSON).format(
            error.to_diagnostic()  # type: ignore[union-attr]
        )
    )
    print()


def example_4_options() -> None:
    """Stricter and more permissive decoding options."""
    from strictjson import DuplicateKeyPolicy, JsonParser, ParseError, parse

    print("=" * 60)
    print("Example 4: Parser Options")
    print("=" * 60)

    print(parse('{"a": 1, "a": 2}'))
    strict = JsonParser(duplicate_keys=DuplicateKeyPolicy.REJECT)
    result = strict.try_parse('{"a": 1, "a": 2}')
    if isinstance(result, ParseError):
        print(result.format_error())

    units = parse('"\\ud83d\\ude00"')
    scalar = parse('"\\ud83d\\ude00"', combine_surrogates=True)
    print(f"code units: {len(units.value)}, combined: {len(scalar.value)}")  # type: ignore[union-attr]

    shallow = JsonParser(max_nesting_depth=2).try_parse("[[[]]]")
    if isinstance(shallow, ParseError):
        print(shallow.format_error())

    print()


if __name__ == "__main__":
    example_1_typed_tree()
    example_2_native_objects()
    example_3_errors()
    example_4_options()
