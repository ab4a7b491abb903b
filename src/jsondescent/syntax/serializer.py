"""Serialize value trees back to JSON text.

Converts value nodes to source text the parser accepts. Useful for:
- Debug printing of parse results
- Property-based testing (roundtrip: parse -> serialize -> parse)

Strings are written verbatim between quotes, mirroring the parser, which
copies string contents without escape decoding.

Python 3.13+.
"""

from jsondescent.constants import FRAMES_PER_NESTING_LEVEL, MAX_DEPTH
from jsondescent.core.depth_guard import DepthGuard
from jsondescent.diagnostics import ErrorTemplate, JsonSerializationError

from .values import (
    JsonArray,
    JsonFalse,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonTrue,
    JsonValue,
)

__all__ = ["JsonSerializer", "serialize"]


class JsonSerializer:
    """Converts a value tree to JSON text.

    Thread-safe serializer with no mutable instance state.
    All serialization state is local to the serialize() call.

    Usage:
        >>> from jsondescent.syntax import parse
        >>> serializer = JsonSerializer(indent=2)
        >>> print(serializer.serialize(parse('{"a": [1, 2]}')))
        {
          "a": [
            1,
            2
          ]
        }
    """

    __slots__ = ("_indent", "_max_depth")

    def __init__(self, *, indent: int | None = None, max_depth: int | None = None) -> None:
        """Initialize serializer.

        Args:
            indent: Spaces per nesting level. None writes compact output on a
                single line.
            max_depth: Maximum nesting depth (default: MAX_DEPTH)

        Raises:
            ValueError: If indent is negative
        """
        if indent is not None and indent < 0:
            msg = f"indent must be >= 0, got {indent}"
            raise ValueError(msg)
        self._indent = indent
        self._max_depth = max_depth if max_depth is not None else MAX_DEPTH

    @property
    def indent(self) -> int | None:
        """Spaces per nesting level (None for compact output)."""
        return self._indent

    def serialize(self, value: JsonValue) -> str:
        """Serialize a value tree to JSON text.

        Pure function - builds output locally without mutating instance state.

        Args:
            value: Root value node

        Returns:
            JSON text

        Raises:
            JsonSerializationError: If a string contains '"'
            DepthLimitExceededError: If nesting exceeds max_depth
        """
        output: list[str] = []
        guard = DepthGuard(
            max_depth=self._max_depth, frames_per_level=FRAMES_PER_NESTING_LEVEL
        )
        self._serialize_value(value, output, guard)
        return "".join(output)

    def _serialize_value(self, value: JsonValue, output: list[str], guard: DepthGuard) -> None:
        """Serialize any value node."""
        match value:
            case JsonNull():
                output.append("null")
            case JsonTrue():
                output.append("true")
            case JsonFalse():
                output.append("false")
            case JsonNumber():
                output.append(str(value.value))
            case JsonString():
                self._serialize_string(value.value, output)
            case JsonArray():
                with guard:
                    self._serialize_array(value, output, guard)
            case JsonObject():
                with guard:
                    self._serialize_object(value, output, guard)
            case _:
                msg = f"Not a JSON value node: {type(value).__name__}"
                raise TypeError(msg)

    def _serialize_string(self, text: str, output: list[str]) -> None:
        """Serialize string contents verbatim between quotes."""
        if '"' in text:
            raise JsonSerializationError(ErrorTemplate.string_not_representable(text))
        output.append(f'"{text}"')

    def _serialize_array(self, node: JsonArray, output: list[str], guard: DepthGuard) -> None:
        """Serialize JsonArray."""
        output.append("[")
        for i, element in enumerate(node.elements):
            if i > 0:
                output.append(",")
            output.append(self._newline(guard.depth))
            self._serialize_value(element, output, guard)
        output.append(self._newline(guard.depth - 1))
        output.append("]")

    def _serialize_object(self, node: JsonObject, output: list[str], guard: DepthGuard) -> None:
        """Serialize JsonObject in the mapping's iteration order."""
        output.append("{")
        key_separator = ":" if self._indent is None else ": "
        for i, (key, member) in enumerate(node.members.items()):
            if i > 0:
                output.append(",")
            output.append(self._newline(guard.depth))
            self._serialize_string(key, output)
            output.append(key_separator)
            self._serialize_value(member, output, guard)
        output.append(self._newline(guard.depth - 1))
        output.append("}")

    def _newline(self, depth: int) -> str:
        """Line break plus indentation for depth (empty in compact mode)."""
        if self._indent is None:
            return ""
        return "\n" + " " * (self._indent * depth)


def serialize(value: JsonValue, *, indent: int | None = None) -> str:
    """Serialize a value tree to JSON text.

    Convenience function for JsonSerializer.serialize().

    Args:
        value: Root value node
        indent: Spaces per nesting level; None for compact output

    Returns:
        JSON text

    Raises:
        JsonSerializationError: If a string contains '"'
        DepthLimitExceededError: If nesting exceeds MAX_DEPTH

    Example:
        >>> from jsondescent.syntax import parse, serialize
        >>> serialize(parse('{ "a" : [ 1 , 2 ] }'))
        '{"a":[1,2]}'
    """
    serializer = JsonSerializer(indent=indent)
    return serializer.serialize(value)
