"""Whitespace handling utilities for the JSON parser.

RFC 8259 section 2:
    ws = *( %x20 / %x09 / %x0A / %x0D )

Nothing else counts: form feed, vertical tab, NBSP and the other Unicode
spaces are errors between tokens.
"""

from strictjson.syntax.cursor import Cursor

__all__ = ["skip_whitespace"]


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Skip insignificant whitespace between tokens.

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-whitespace character (or EOF)

    Design:
        Immutable cursor ensures termination: the returned cursor is never
        behind the input cursor.
    """
    return cursor.skip_whitespace()
