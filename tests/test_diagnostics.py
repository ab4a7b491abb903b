"""Tests for the diagnostics package: codes, templates, formatter, errors."""

from __future__ import annotations

import json

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from jsondescent.diagnostics import (
    DepthLimitExceededError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    JsonError,
    JsonSerializationError,
    JsonSyntaxError,
    OutputFormat,
    SourceSpan,
)

# ============================================================================
# CODES AND SPANS
# ============================================================================


class TestDiagnosticCode:
    """Test DiagnosticCode ranges."""

    def test_syntax_codes_in_3000_range(self) -> None:
        for code in (
            DiagnosticCode.EXPECT_VALUE,
            DiagnosticCode.INVALID_VALUE,
            DiagnosticCode.INVALID_LITERAL,
            DiagnosticCode.INVALID_ARRAY,
            DiagnosticCode.INVALID_OBJECT,
            DiagnosticCode.INVALID_OBJECT_KEY,
        ):
            assert 3000 <= code.value < 4000

    def test_codes_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))


class TestSourceSpan:
    """Test SourceSpan validation."""

    def test_valid_span(self) -> None:
        span = SourceSpan(start=3, end=3, line=1, column=4)

        assert span.column == 4

    @pytest.mark.parametrize(
        ("start", "end", "line", "column", "match"),
        [
            (-1, 0, 1, 1, "start"),
            (5, 4, 1, 1, "end"),
            (0, 0, 0, 1, "line"),
            (0, 0, 1, 0, "column"),
        ],
    )
    def test_invalid_span(self, start: int, end: int, line: int, column: int, match: str) -> None:
        with pytest.raises(ValueError, match=match):
            SourceSpan(start=start, end=end, line=line, column=column)


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Test message templates."""

    def test_invalid_value_describes_character(self) -> None:
        diagnostic = ErrorTemplate.invalid_value("x")

        assert diagnostic.code is DiagnosticCode.INVALID_VALUE
        assert diagnostic.message == "Unexpected 'x', expected a value"

    def test_eof_described_in_words(self) -> None:
        assert ErrorTemplate.invalid_object_key(None).message == (
            "Expected string key in object, found end of input"
        )

    def test_invalid_object_message(self) -> None:
        assert ErrorTemplate.invalid_object("]").message == (
            "Expected ',' or '}' after object member, found ']'"
        )

    def test_missing_colon_is_invalid_object(self) -> None:
        diagnostic = ErrorTemplate.object_missing_colon("a", "1")

        assert diagnostic.code is DiagnosticCode.INVALID_OBJECT
        assert diagnostic.expected == (":",)

    def test_source_too_large_formats_sizes(self) -> None:
        message = ErrorTemplate.source_too_large(12345, 1000).message

        assert "12,345" in message
        assert "1,000" in message

    def test_templates_have_no_span(self) -> None:
        assert ErrorTemplate.expect_value().span is None


# ============================================================================
# FORMATTER
# ============================================================================


_SPANNED = Diagnostic(
    code=DiagnosticCode.INVALID_ARRAY,
    message="Expected ',' or ']' after array element, found end of input",
    span=SourceSpan(start=5, end=5, line=1, column=6),
    hint="Separate array elements with ',' and close the array with ']'",
    expected=(",", "]"),
)


class TestDiagnosticFormatter:
    """Test the three output formats."""

    def test_rust_format(self) -> None:
        output = DiagnosticFormatter().format(_SPANNED)

        assert output.split("\n") == [
            "error[INVALID_ARRAY]: Expected ',' or ']' after array element, found end of input",
            "  --> line 1, column 6",
            "  = expected: ',', ']'",
            "  = help: Separate array elements with ',' and close the array with ']'",
        ]

    def test_rust_format_color(self) -> None:
        output = DiagnosticFormatter(color=True).format(_SPANNED)

        assert output.startswith("\033[1;31merror\033[0m[INVALID_ARRAY]")

    def test_simple_format(self) -> None:
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(_SPANNED)

        assert output == (
            "1:6: INVALID_ARRAY: Expected ',' or ']' after array element, found end of input"
        )

    def test_simple_format_without_span(self) -> None:
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(
            ErrorTemplate.expect_value()
        )

        assert output == "EXPECT_VALUE: Expected a value but reached end of input"

    def test_json_format(self) -> None:
        output = DiagnosticFormatter(output_format=OutputFormat.JSON).format(_SPANNED)
        data = json.loads(output)

        assert data["code"] == "INVALID_ARRAY"
        assert data["code_value"] == DiagnosticCode.INVALID_ARRAY.value
        assert (data["line"], data["column"]) == (1, 6)
        assert data["expected"] == [",", "]"]

    def test_control_characters_escaped(self) -> None:
        diagnostic = ErrorTemplate.invalid_value("\n")
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic)

        assert "\n" not in output
        assert "\\n" in output

    def test_sanitize_truncates(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_VALUE, message="x" * 50)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )

        assert formatter.format(diagnostic) == "INVALID_VALUE: " + "x" * 10 + "..."

    def test_format_all_separates_with_blank_line(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all([ErrorTemplate.expect_value(), ErrorTemplate.expect_value()])

        assert output.count("\n\n") == 1

    @given(st.sampled_from(list(OutputFormat)), st.text(max_size=20))
    def test_output_is_single_line_except_rust(self, output_format: OutputFormat, found: str) -> None:
        """PROPERTY: SIMPLE and JSON never emit raw newlines."""
        event(f"format={output_format}")
        output = DiagnosticFormatter(output_format=output_format).format(
            ErrorTemplate.invalid_value(found)
        )

        if output_format is not OutputFormat.RUST:
            assert "\n" not in output


# ============================================================================
# ERRORS
# ============================================================================


class TestErrors:
    """Test the exception hierarchy."""

    def test_hierarchy(self) -> None:
        assert issubclass(JsonSyntaxError, JsonError)
        assert issubclass(JsonSerializationError, JsonError)
        assert issubclass(DepthLimitExceededError, JsonError)

    def test_plain_message(self) -> None:
        error = JsonError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message_uses_rust_format(self) -> None:
        error = JsonSyntaxError(_SPANNED)

        assert error.diagnostic is _SPANNED
        assert str(error).startswith("error[INVALID_ARRAY]")
        assert error.parse_error is None

    def test_diagnostic_str_is_message(self) -> None:
        assert str(_SPANNED) == _SPANNED.message
