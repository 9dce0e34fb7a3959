"""JSON parser module.

This module provides the main JsonParser class and related parsing
utilities organized into focused submodules.

Module Organization:
- core.py: Main JsonParser class with parse() and try_parse()
- primitives.py: Basic parsers (strings, escapes, numbers, keyword literals)
- whitespace.py: Insignificant whitespace handling
- rules.py: Grammar rules (value dispatch, objects, arrays)

Public API:
    JsonParser: Main parser class
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from strictjson.syntax.parser.core import JsonParser
from strictjson.syntax.parser.rules import ParseContext

__all__ = ["JsonParser", "ParseContext"]
