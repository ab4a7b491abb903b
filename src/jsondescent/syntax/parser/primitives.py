"""Primitive parsers for the JSON grammar.

Leaf-level recognizers for literals, numbers and strings. Each consumes
characters from the cursor and returns either a ParseResult holding the
new value node or a ParseError. None of them recurse.
"""

from jsondescent.constants import ASCII_DIGITS
from jsondescent.diagnostics import ErrorTemplate
from jsondescent.syntax.cursor import Cursor, ParseError, ParseResult
from jsondescent.syntax.values import JsonFalse, JsonNull, JsonNumber, JsonString, JsonTrue

__all__ = [
    "is_digit",
    "parse_literal",
    "parse_number",
    "parse_string",
]

_LITERAL_NODES: dict[str, JsonNull | JsonTrue | JsonFalse] = {
    "null": JsonNull(),
    "true": JsonTrue(),
    "false": JsonFalse(),
}


def is_digit(ch: str) -> bool:
    """Check if character is an ASCII digit 0-9.

    Unicode digits like '²' or '٣' are rejected.
    """
    return len(ch) == 1 and ch in ASCII_DIGITS


def parse_literal(
    cursor: Cursor, spelling: str
) -> ParseResult[JsonNull | JsonTrue | JsonFalse] | ParseError:
    """Parse one of the literals: null, true, false.

    Compares the input against the expected spelling one character at a
    time. Consumes exactly len(spelling) characters on success.

    Examples:
        null -> JsonNull()
        nul  -> INVALID_LITERAL (EOF inside literal)
        trve -> INVALID_LITERAL

    Args:
        cursor: Position of the literal's first character
        spelling: "null", "true" or "false"

    Returns:
        ParseResult(node, new_cursor) on success
        ParseError(INVALID_LITERAL) on mismatch or premature EOF
    """
    node = _LITERAL_NODES.get(spelling)
    if node is None:
        msg = f"Unknown literal spelling: {spelling!r}"
        raise ValueError(msg)

    for expected_ch in spelling:
        if cursor.is_eof or cursor.current != expected_ch:
            return ParseError(
                ErrorTemplate.invalid_literal(spelling, cursor.peek()), cursor
            )
        cursor = cursor.advance()

    return ParseResult(node, cursor)


def parse_number(cursor: Cursor) -> ParseResult[JsonNumber] | ParseError:
    """Parse number: [0-9]+

    Consumes the maximal run of ASCII digits and accumulates
    value = value * 10 + digit. A sign, decimal point or exponent simply
    ends the run and is left for the enclosing rule.

    Examples:
        123456 -> JsonNumber(123456)
        007    -> JsonNumber(7)
        12.5   -> JsonNumber(12), cursor at '.'

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(JsonNumber, new_cursor) on success
        ParseError(INVALID_VALUE) if no digit under the cursor
    """
    if cursor.is_eof or not is_digit(cursor.current):
        return ParseError(ErrorTemplate.invalid_value(cursor.peek()), cursor)

    value = 0
    while not cursor.is_eof and is_digit(cursor.current):
        value = value * 10 + ASCII_DIGITS.index(cursor.current)
        cursor = cursor.advance()

    return ParseResult(JsonNumber(value), cursor)


def parse_string(cursor: Cursor) -> ParseResult[JsonString] | ParseError:
    """Parse string: '"' [^"]* '"'

    Characters between the quotes are copied verbatim. There are no escape
    sequences: a backslash is an ordinary character and cannot hide a quote.

    Examples:
        ""          -> JsonString("")
        "abc"       -> JsonString("abc")
        "a\\nb"      -> JsonString("a\\\\nb")  (backslash kept)
        "abc        -> INVALID_VALUE (unterminated)

    Args:
        cursor: Position of the opening quote

    Returns:
        ParseResult(JsonString, cursor after closing quote) on success
        ParseError(INVALID_VALUE) if not at a quote or no closing quote
    """
    if cursor.is_eof or cursor.current != '"':
        return ParseError(ErrorTemplate.invalid_value(cursor.peek()), cursor)

    cursor = cursor.advance()  # Skip opening "
    start = cursor

    while not cursor.is_eof:
        if cursor.current == '"':
            text = start.slice_to(cursor.pos)
            return ParseResult(JsonString(text), cursor.advance())
        cursor = cursor.advance()

    # EOF without closing quote
    return ParseError(ErrorTemplate.unterminated_string(), cursor)
