"""JSON syntax package.

Provides the cursor, value tree definitions, parser and serializer.

Python 3.13+.
"""

from .cursor import Cursor, ParseError, ParseResult
from .parser import JsonParser
from .serializer import JsonSerializer, serialize
from .values import (
    JsonArray,
    JsonFalse,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonTrue,
    JsonValue,
    PythonValue,
    from_python,
    to_python,
)

__all__ = [
    "Cursor",
    "JsonArray",
    "JsonFalse",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonParser",
    "JsonSerializer",
    "JsonString",
    "JsonTrue",
    "JsonValue",
    "ParseError",
    "ParseResult",
    "PythonValue",
    "from_python",
    "parse",
    "serialize",
    "to_python",
]


def parse(source: str) -> JsonValue:
    """Parse JSON source into a value tree.

    Convenience function for JsonParser.parse().

    Args:
        source: JSON text

    Returns:
        The root value node

    Raises:
        JsonSyntaxError: On the first syntax error

    Example:
        >>> from jsondescent.syntax import parse
        >>> parse('{ "a" : { "b" : true } }')["a"]["b"]
        JsonTrue()
    """
    parser = JsonParser()
    return parser.parse(source)
