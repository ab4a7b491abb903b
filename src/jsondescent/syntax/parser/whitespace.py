"""Whitespace handling for the JSON parser.

Insignificant whitespace may appear before and after any value and around
the structural characters `[ ] { } : ,`.
"""

from jsondescent.constants import WHITESPACE_CHARS
from jsondescent.syntax.cursor import Cursor

__all__ = ["is_whitespace", "skip_whitespace"]


def is_whitespace(ch: str) -> bool:
    """Check if character is insignificant whitespace (space, tab, LF, CR)."""
    return ch in WHITESPACE_CHARS


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Skip space (U+0020), tab (U+0009), LF (U+000A) and CR (U+000D).

    Terminates on any other character or at EOF. Idempotent: a second call
    returns a cursor at the same position.

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-whitespace character (or EOF)

    Example:
        >>> skip_whitespace(Cursor(" \\t\\r\\n null", 0)).pos
        5
    """
    while not cursor.is_eof and cursor.current in WHITESPACE_CHARS:
        cursor = cursor.advance()
    return cursor
