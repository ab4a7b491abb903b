"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


def _describe(found: str | None) -> str:
    """Render a lookahead character for an error message."""
    if found is None:
        return "end of input"
    return repr(found)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases

    Templates return span-less diagnostics. The parser attaches the location
    through ParseError.to_diagnostic().
    """

    # =========================================================================
    # SYNTAX ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check is_eof before reading current",
        )

    @staticmethod
    def expect_value() -> Diagnostic:
        """Input ended where a value was required."""
        return Diagnostic(
            code=DiagnosticCode.EXPECT_VALUE,
            message="Expected a value but reached end of input",
            hint="Input is empty or ends after a separator",
            expected=("null", "true", "false", "number", "string", "[", "{"),
        )

    @staticmethod
    def invalid_value(found: str | None) -> Diagnostic:
        """Lookahead character does not start any value.

        Args:
            found: The offending lookahead character
        """
        msg = f"Unexpected {_describe(found)}, expected a value"
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE,
            message=msg,
            hint="Values start with n, t, f, '\"', '[', '{' or a digit",
            expected=("null", "true", "false", "number", "string", "[", "{"),
        )

    @staticmethod
    def unterminated_string() -> Diagnostic:
        """End of input before the closing quote of a string."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE,
            message="Unterminated string",
            hint="Add the closing '\"'",
            expected=('"',),
        )

    @staticmethod
    def invalid_literal(spelling: str, found: str | None) -> Diagnostic:
        """Literal spelling mismatched partway through.

        Args:
            spelling: The literal being matched ("null", "true", "false")
            found: The character that broke the match
        """
        msg = f"Invalid literal: expected '{spelling}', found {_describe(found)}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LITERAL,
            message=msg,
            hint="Literals are lowercase: null, true, false",
            expected=(spelling,),
        )

    @staticmethod
    def invalid_array(found: str | None) -> Diagnostic:
        """Malformed separator or terminator after an array element.

        Args:
            found: The lookahead after the element
        """
        msg = f"Expected ',' or ']' after array element, found {_describe(found)}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARRAY,
            message=msg,
            hint="Separate array elements with ',' and close the array with ']'",
            expected=(",", "]"),
        )

    @staticmethod
    def object_missing_colon(key: str, found: str | None) -> Diagnostic:
        """Object key not followed by a colon.

        Args:
            key: The member key just parsed
            found: The lookahead after the key
        """
        msg = f"Expected ':' after object key '{key}', found {_describe(found)}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_OBJECT,
            message=msg,
            hint="Write members as \"key\": value",
            expected=(":",),
        )

    @staticmethod
    def invalid_object(found: str | None) -> Diagnostic:
        """Malformed separator or terminator after an object member.

        Args:
            found: The lookahead after the member value
        """
        msg = f"Expected ',' or '}}' after object member, found {_describe(found)}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_OBJECT,
            message=msg,
            hint="Separate object members with ',' and close the object with '}'",
            expected=(",", "}"),
        )

    @staticmethod
    def invalid_object_key(found: str | None) -> Diagnostic:
        """Object member does not start with a string key.

        Args:
            found: The lookahead where the key should start
        """
        msg = f"Expected string key in object, found {_describe(found)}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_OBJECT_KEY,
            message=msg,
            hint="Object keys must be double-quoted strings",
            expected=('"',),
        )

    @staticmethod
    def root_not_singular(found: str) -> Diagnostic:
        """Non-whitespace content after the root value.

        Args:
            found: First character after the root value
        """
        msg = f"Unexpected {_describe(found)} after the root value"
        return Diagnostic(
            code=DiagnosticCode.ROOT_NOT_SINGULAR,
            message=msg,
            hint="A document holds exactly one value; wrap several values in an array",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """Array/object nesting deeper than the configured limit.

        Args:
            max_depth: The configured maximum depth
        """
        msg = f"Nesting depth exceeds maximum of {max_depth}"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the document or raise max_nesting_depth",
        )

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Source text larger than max_source_size.

        Args:
            size: Source length in characters
            max_size: Configured maximum
        """
        msg = f"Source size ({size:,} characters) exceeds maximum ({max_size:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Configure max_source_size in JsonParser constructor to increase limit",
        )

    # =========================================================================
    # SERIALIZATION ERRORS (6000-6999)
    # =========================================================================

    @staticmethod
    def serialization_depth_exceeded(max_depth: int) -> Diagnostic:
        """Value tree deeper than the serializer's limit."""
        msg = f"Value nesting exceeds maximum serialization depth of {max_depth}"
        return Diagnostic(
            code=DiagnosticCode.SERIALIZATION_DEPTH_EXCEEDED,
            message=msg,
            hint="Raise max_depth on JsonSerializer",
        )

    @staticmethod
    def string_not_representable(value: str) -> Diagnostic:
        """String holding a double quote, which the grammar cannot express.

        Args:
            value: The offending string value
        """
        msg = f"String {value!r} contains '\"' and cannot be written without escapes"
        return Diagnostic(
            code=DiagnosticCode.SERIALIZATION_UNREPRESENTABLE,
            message=msg,
            hint="The grammar copies string contents verbatim and has no escapes",
        )
