"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for single-character lookahead.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value of current
    - peek() is the optional view of the lookahead: a character or None
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (O(n) only for errors)

Line Ending Support:
    LF and CRLF are counted as one line break (\\n is the line delimiter).
    CR-only input produces line 1 for every position.
"""

from dataclasses import dataclass, replace

from jsondescent.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate, SourceSpan

__all__ = ["Cursor", "ParseError", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("null", 0)
        >>> cursor.current
        'n'
        >>> cursor.advance().current
        'u'
        >>> cursor.current  # Original unchanged (immutability)
        'n'
        >>> Cursor("hi", 2).peek() is None
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Note: This is the preferred way to check for EOF.
              Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current (lookahead) character.

        Raises:
            EOFError: If at end of input

        Type safety: callers check is_eof first, so current is always str.
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Advancing at EOF is a no-op; the position is clamped to the source
        length.

        Example:
            >>> cursor = Cursor("true", 0)
            >>> cursor.advance(4).is_eof
            True
            >>> cursor.advance(10).pos
            4
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Store the start cursor and slice once the end is known:

            >>> cursor = Cursor('"abc"', 1)
            >>> start = cursor
            >>> while cursor.current != '"':
            ...     cursor = cursor.advance()
            >>> start.slice_to(cursor.pos)
            'abc'
        """
        return self.source[self.pos : end_pos]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position
            Only call for error reporting, not during normal parsing!

        Example:
            >>> Cursor('[1,\\n 2', 5).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Pattern:
        Every sub-parser has signature:
            def parse_foo(cursor: Cursor) -> ParseResult[Foo] | ParseError:
                ...
                return ParseResult(parsed_value, new_cursor)

    Example:
        >>> result = ParseResult('n', Cursor("null", 0).advance())
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse failure with reason and location.

    Returned (never raised) by every sub-parser. The first ParseError
    produced anywhere in the descent is handed back unchanged to the
    caller of parse_value.

    Attributes:
        diagnostic: Span-less diagnostic from ErrorTemplate (code, message,
            hint, expected tokens)
        cursor: Cursor at the failure point

    Example:
        >>> error = ParseError(ErrorTemplate.invalid_array(None), Cursor("[1", 2))
        >>> error.code
        <DiagnosticCode.INVALID_ARRAY: 3004>
        >>> error.format_error()
        "1:3: Expected ',' or ']' after array element, found end of input"
    """

    diagnostic: Diagnostic
    cursor: Cursor

    @property
    def code(self) -> DiagnosticCode:
        """Error kind."""
        return self.diagnostic.code

    @property
    def message(self) -> str:
        """Human-readable reason."""
        return self.diagnostic.message

    @property
    def expected(self) -> tuple[str, ...]:
        """Tokens that would have been accepted at the failure point."""
        return self.diagnostic.expected

    @property
    def offset(self) -> int:
        """Character offset of the failure point."""
        return self.cursor.pos

    @property
    def line_col(self) -> tuple[int, int]:
        """1-indexed (line, column) of the failure point."""
        return self.cursor.compute_line_col()

    def to_diagnostic(self) -> Diagnostic:
        """Return the diagnostic with its source span filled in."""
        line, col = self.line_col
        span = SourceSpan(start=self.offset, end=self.offset, line=line, column=col)
        return replace(self.diagnostic, span=span)

    def format_error(self) -> str:
        """Format error with line:column.

        Example:
            >>> error = ParseError(ErrorTemplate.expect_value(), Cursor("[\\n", 2))
            >>> error.format_error()
            '2:1: Expected a value but reached end of input'
        """
        line, col = self.line_col
        return f"{line}:{col}: {self.message}"

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and pointer.

        Shows the problematic line and a caret pointing to the error location.

        Args:
            context_lines: Number of lines to show before/after error

        Returns:
            Multi-line formatted error with context

        Example:
            >>> source = '{\\n  "a" 1\\n}'
            >>> error = ParseError(ErrorTemplate.object_missing_colon("a", "1"), Cursor(source, 8))
            >>> print(error.format_with_context())
            2:7: Expected ':' after object key 'a', found '1'
            <BLANKLINE>
               1 | {
               2 |   "a" 1
                 |       ^
               3 | }
        """
        return f"{self.format_error()}\n\n{self.format_source_excerpt(context_lines)}"

    def format_source_excerpt(self, context_lines: int = 2) -> str:
        """Numbered source lines around the failure point with a caret.

        Args:
            context_lines: Number of lines to show before/after error
        """
        line, col = self.line_col
        lines = self.cursor.source.split("\n")

        result_lines: list[str] = []

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])

            if i == line:
                pointer = " " * (len(line_num_str) - 2) + "| " + " " * (col - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)
