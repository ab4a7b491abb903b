"""Core JSON parser implementation.

This module provides the JsonParser class that drives the grammar rules in
:mod:`jsondescent.syntax.parser.rules` over a source string and produces
value trees defined in :mod:`jsondescent.syntax.values`.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~jsondescent.syntax.cursor.Cursor`)
    to traverse source text. Lexing and parsing are fused: each rule reads
    one character of lookahead and there is no token stream. Every rule
    returns either a :class:`~jsondescent.syntax.cursor.ParseResult` with
    the parsed node and updated cursor, or a
    :class:`~jsondescent.syntax.cursor.ParseError`.

Security:
    Includes configurable input size and nesting depth limits to prevent
    DoS via huge or deeply nested documents.

See Also:
    - :mod:`jsondescent.syntax.values` - Value node definitions
    - :mod:`jsondescent.syntax.cursor` - Cursor, ParseResult, ParseError
"""

import logging

from jsondescent.constants import FRAMES_PER_NESTING_LEVEL, MAX_DEPTH, MAX_SOURCE_SIZE
from jsondescent.core.depth_guard import depth_clamp
from jsondescent.diagnostics import ErrorTemplate, JsonSyntaxError
from jsondescent.syntax.cursor import Cursor, ParseError, ParseResult
from jsondescent.syntax.parser.rules import ParseContext, parse_document
from jsondescent.syntax.values import JsonValue

__all__ = ["JsonParser"]

logger = logging.getLogger(__name__)


class JsonParser:
    """JSON parser using immutable cursor pattern.

    Design:
    - Holds configuration only; every parse builds its own cursor and
      context, so one instance can be shared between threads
    - Failures are values inside the descent and an exception at the API
    - Error messages include line:column with source context

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Configurable max_nesting_depth prevents stack exhaustion via deeply
      nested arrays/objects; it is clamped against sys.getrecursionlimit()

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MiB)
        max_nesting_depth: Maximum allowed array/object nesting (default: 100)
        allow_trailing_content: Ignore characters after the root value
    """

    __slots__ = ("_allow_trailing_content", "_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
        allow_trailing_content: bool = False,
    ) -> None:
        """Initialize parser with optional limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable size limit (not recommended).
            max_nesting_depth: Maximum array/object nesting depth (default: 100).
                              Prevents stack exhaustion via [[[[ ... ]]]].
            allow_trailing_content: When True, characters after a complete
                root value are ignored instead of rejected.

        Raises:
            ValueError: If max_source_size is negative or max_nesting_depth < 1
        """
        if max_source_size is not None and max_source_size < 0:
            msg = f"max_source_size must be >= 0, got {max_source_size}"
            raise ValueError(msg)
        if max_nesting_depth is not None and max_nesting_depth < 1:
            msg = f"max_nesting_depth must be >= 1, got {max_nesting_depth}"
            raise ValueError(msg)

        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = depth_clamp(
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH,
            frames_per_level=FRAMES_PER_NESTING_LEVEL,
        )
        self._allow_trailing_content = allow_trailing_content

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Effective maximum array/object nesting depth."""
        return self._max_nesting_depth

    @property
    def allow_trailing_content(self) -> bool:
        """Whether characters after the root value are ignored."""
        return self._allow_trailing_content

    def parse_result(self, source: str) -> ParseResult[JsonValue] | ParseError:
        """Parse source and return the error channel value without raising.

        Exactly one of value or error is produced, never both.

        Args:
            source: JSON text (decoded str, not bytes)

        Returns:
            ParseResult whose value is the root node, or the first
            ParseError met during the descent

        Raises:
            TypeError: If source is not a str
        """
        if not isinstance(source, str):
            msg = f"source must be str, got {type(source).__name__}"
            raise TypeError(msg)

        cursor = Cursor(source, 0)

        # Validate input size (DoS prevention)
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            return ParseError(
                ErrorTemplate.source_too_large(len(source), self._max_source_size),
                cursor,
            )

        logger.debug("Parsing %d characters", len(source))
        context = ParseContext(max_nesting_depth=self._max_nesting_depth)
        result = parse_document(
            cursor, context, allow_trailing_content=self._allow_trailing_content
        )
        if isinstance(result, ParseError):
            logger.debug(
                "Parse failed with %s at offset %d", result.code.name, result.offset
            )
        return result

    def parse(self, source: str) -> JsonValue:
        """Parse JSON source into a value tree.

        Args:
            source: JSON text (decoded str, not bytes)

        Returns:
            The root value node

        Raises:
            JsonSyntaxError: On the first syntax error; carries the
                ParseError and a Diagnostic with line/column
            TypeError: If source is not a str

        Example:
            >>> parser = JsonParser()
            >>> parser.parse('[ null , true , false ]')
            JsonArray(elements=(JsonNull(), JsonTrue(), JsonFalse()))
        """
        result = self.parse_result(source)
        if isinstance(result, ParseError):
            raise JsonSyntaxError(result.to_diagnostic(), parse_error=result)
        return result.value
