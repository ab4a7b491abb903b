"""jsondescent exception hierarchy with structured diagnostics.

All exceptions can store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from jsondescent.syntax.cursor import ParseError


class JsonError(Exception):
    """Base exception for all jsondescent errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize JsonError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class JsonSyntaxError(JsonError):
    """Input text does not match the grammar.

    Raised by JsonParser.parse() when the descent returns a ParseError.
    The first error met aborts the whole parse; there is no recovery.

    Attributes:
        parse_error: The ParseError returned by the descent (None when the
            exception was built directly from a message)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        parse_error: "ParseError | None" = None,
    ) -> None:
        super().__init__(message)
        self.parse_error = parse_error


class JsonSerializationError(JsonError):
    """A value tree cannot be written as grammar-conforming text.

    Example: a string containing '"' (the grammar has no escapes).
    """


class DepthLimitExceededError(JsonError):
    """Raised when a recursive walk exceeds its configured depth.

    Used by the serializer and other tree walkers. The parser reports
    excessive nesting as a ParseError instead of raising.
    """
