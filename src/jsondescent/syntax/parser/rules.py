"""Grammar rules for the JSON parser.

This module provides the recursive rules of the grammar:
- Value dispatch (the single decision point of the parser)
- Array parsing
- Object parsing
- Document parsing (root value plus surrounding whitespace)

The rules are co-located in a single module because they are mutually
recursive: arrays and objects call back into parse_value for their
elements.

Lookahead:
    One character of lookahead decides every branch:
    - `n`, `t`, `f` start a literal
    - `"` starts a string
    - `[` starts an array
    - `{` starts an object
    - an ASCII digit starts a number

Error Propagation:
    Every rule returns ParseResult on success or ParseError on failure.
    A ParseError from a nested rule is returned unchanged; nothing is
    recovered and no partial array/object escapes a failed rule.

Security:
    Includes configurable nesting depth limit to prevent stack exhaustion
    via deeply nested input (e.g., [[[[ ... ]]]]).
"""

from dataclasses import dataclass

from jsondescent.constants import LITERAL_SPELLINGS, MAX_DEPTH
from jsondescent.diagnostics import ErrorTemplate
from jsondescent.syntax.cursor import Cursor, ParseError, ParseResult
from jsondescent.syntax.parser.primitives import (
    is_digit,
    parse_literal,
    parse_number,
    parse_string,
)
from jsondescent.syntax.parser.whitespace import skip_whitespace
from jsondescent.syntax.values import JsonArray, JsonObject, JsonValue

__all__ = [
    "ParseContext",
    "parse_array",
    "parse_document",
    "parse_object",
    "parse_value",
]


@dataclass(slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Passed down the descent instead of thread-local state, so one parser
    can be used from several threads.

    Attributes:
        max_nesting_depth: Maximum allowed array/object nesting depth
        current_depth: Current nesting depth (0 = top level)
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0

    def is_depth_exceeded(self) -> bool:
        """Check if entering one more array/object would exceed the limit."""
        return self.current_depth >= self.max_nesting_depth

    def enter_nesting(self) -> "ParseContext":
        """Create new context with incremented depth for an array/object body."""
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
        )


def parse_value(cursor: Cursor, context: ParseContext) -> ParseResult[JsonValue] | ParseError:
    """Parse any value by dispatching on the lookahead character.

    The lookahead is examined, not consumed; the chosen sub-parser consumes
    the initiating character itself.

    Args:
        cursor: Position of the value's first character
        context: Nesting depth tracking

    Returns:
        ParseResult(value, new_cursor) on success
        ParseError(EXPECT_VALUE) at EOF
        ParseError(INVALID_VALUE) for a character that starts no value
        Any ParseError produced by the chosen sub-parser
    """
    if cursor.is_eof:
        return ParseError(ErrorTemplate.expect_value(), cursor)

    ch = cursor.current

    spelling = LITERAL_SPELLINGS.get(ch)
    if spelling is not None:
        return parse_literal(cursor, spelling)
    if ch == '"':
        return parse_string(cursor)
    if ch == "[":
        return parse_array(cursor, context)
    if ch == "{":
        return parse_object(cursor, context)
    if is_digit(ch):
        return parse_number(cursor)

    return ParseError(ErrorTemplate.invalid_value(ch), cursor)


def parse_array(cursor: Cursor, context: ParseContext) -> ParseResult[JsonArray] | ParseError:
    """Parse array: '[' ws value ws (',' ws value ws)* ']'

    At least one element is always attempted, so `[]` fails on the `]`
    with INVALID_VALUE.

    Examples:
        [1]                  -> JsonArray((JsonNumber(1),))
        [ null , true ]      -> JsonArray((JsonNull(), JsonTrue()))
        [1, 2                -> INVALID_ARRAY (EOF after element)
        [1 2]                -> INVALID_ARRAY

    Args:
        cursor: Position of '['
        context: Nesting depth tracking

    Returns:
        ParseResult(JsonArray, cursor after ']') on success
        ParseError on failure
    """
    if context.is_depth_exceeded():
        return ParseError(
            ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth), cursor
        )
    nested = context.enter_nesting()

    cursor = cursor.advance()  # Skip [
    elements: list[JsonValue] = []

    while True:
        cursor = skip_whitespace(cursor)
        result = parse_value(cursor, nested)
        if isinstance(result, ParseError):
            return result
        elements.append(result.value)

        cursor = skip_whitespace(result.cursor)
        if cursor.is_eof:
            return ParseError(ErrorTemplate.invalid_array(None), cursor)
        if cursor.current == "]":
            return ParseResult(JsonArray(tuple(elements)), cursor.advance())
        if cursor.current != ",":
            return ParseError(ErrorTemplate.invalid_array(cursor.current), cursor)
        cursor = cursor.advance()  # Skip ,


def parse_object(cursor: Cursor, context: ParseContext) -> ParseResult[JsonObject] | ParseError:
    """Parse object: '{' ws string ws ':' ws value ws (',' ...)* '}'

    Duplicate keys overwrite: the last member with a given key wins.
    At least one member is always attempted, so `{}` fails on the `}`
    with INVALID_OBJECT_KEY.

    Examples:
        { "a" : true }        -> JsonObject({"a": JsonTrue()})
        {"a" 1}               -> INVALID_OBJECT (missing ':')
        {1: 2}                -> INVALID_OBJECT_KEY
        {"a": 1 "b": 2}       -> INVALID_OBJECT (missing ',')

    Args:
        cursor: Position of '{'
        context: Nesting depth tracking

    Returns:
        ParseResult(JsonObject, cursor after '}') on success
        ParseError on failure
    """
    if context.is_depth_exceeded():
        return ParseError(
            ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth), cursor
        )
    nested = context.enter_nesting()

    cursor = cursor.advance()  # Skip {
    members: dict[str, JsonValue] = {}

    while True:
        # Key
        cursor = skip_whitespace(cursor)
        if cursor.is_eof or cursor.current != '"':
            return ParseError(ErrorTemplate.invalid_object_key(cursor.peek()), cursor)
        key_result = parse_string(cursor)
        if isinstance(key_result, ParseError):
            return key_result
        key = key_result.value.value

        # Colon
        cursor = skip_whitespace(key_result.cursor)
        if cursor.is_eof or cursor.current != ":":
            return ParseError(
                ErrorTemplate.object_missing_colon(key, cursor.peek()), cursor
            )
        cursor = skip_whitespace(cursor.advance())

        # Value
        value_result = parse_value(cursor, nested)
        if isinstance(value_result, ParseError):
            return value_result
        members[key] = value_result.value

        # Separator or terminator
        cursor = skip_whitespace(value_result.cursor)
        if cursor.is_eof:
            return ParseError(ErrorTemplate.invalid_object(None), cursor)
        if cursor.current == "}":
            return ParseResult(JsonObject(members), cursor.advance())
        if cursor.current != ",":
            return ParseError(ErrorTemplate.invalid_object(cursor.current), cursor)
        cursor = cursor.advance()  # Skip ,


def parse_document(
    cursor: Cursor,
    context: ParseContext,
    *,
    allow_trailing_content: bool = False,
) -> ParseResult[JsonValue] | ParseError:
    """Parse a whole document: ws value ws EOF

    Args:
        cursor: Start of source
        context: Nesting depth tracking
        allow_trailing_content: When True, return the root value as soon as
            it is complete and ignore whatever follows it. When False,
            anything but whitespace after the root is ROOT_NOT_SINGULAR.

    Returns:
        ParseResult(root value, cursor) on success. With trailing content
        allowed the cursor sits right after the root value; otherwise it
        is at EOF.
        ParseError on failure
    """
    cursor = skip_whitespace(cursor)
    result = parse_value(cursor, context)
    if isinstance(result, ParseError) or allow_trailing_content:
        return result

    cursor = skip_whitespace(result.cursor)
    if not cursor.is_eof:
        return ParseError(ErrorTemplate.root_not_singular(cursor.current), cursor)
    return ParseResult(result.value, cursor)
