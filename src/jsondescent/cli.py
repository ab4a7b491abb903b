"""Command-line entry point.

Commands:
    parse - Parse a file (or stdin) and print the serialized value tree
    demo  - Parse a fixed set of sample documents and print each result
"""

import logging
import sys
from pathlib import Path

import typer

from jsondescent.diagnostics import (
    DiagnosticFormatter,
    JsonError,
    OutputFormat,
)
from jsondescent.syntax import JsonParser, JsonSerializer
from jsondescent.syntax.cursor import ParseError

__all__ = ["DEMO_SAMPLES", "app", "main"]

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)

DEMO_SAMPLES: tuple[str, ...] = (
    "null",
    "true",
    "false",
    '"hello world"',
    "[ null , true , false ]",
    '{ "a" : { "b" : true } , "c" : false }',
    "123456",
)

_DEFAULT_INDENT = 2


def _configure_logging(verbose: bool) -> None:
    """Route jsondescent debug logs to stderr when --verbose is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _read_source(path: Path) -> str:
    if str(path) == "-":
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"cannot read {path}: {exc}") from exc


def _render_error(error: ParseError, output_format: OutputFormat) -> str:
    """Format a parse failure for stderr.

    Rust style gets the numbered source excerpt under the diagnostic.
    """
    formatter = DiagnosticFormatter(output_format=output_format)
    rendered = formatter.format(error.to_diagnostic())
    if output_format is OutputFormat.RUST:
        rendered = f"{rendered}\n{error.format_source_excerpt()}"
    return rendered


@app.command("parse")
def parse_command(
    path: Path = typer.Argument(Path("-"), help="JSON file to parse ('-' for stdin)."),
    indent: int = typer.Option(_DEFAULT_INDENT, "--indent", min=0, help="Spaces per level."),
    compact: bool = typer.Option(False, "--compact", help="Print on a single line."),
    allow_trailing: bool = typer.Option(
        False,
        "--allow-trailing",
        help="Ignore characters after the root value.",
    ),
    max_depth: int | None = typer.Option(
        None, "--max-depth", min=1, help="Maximum array/object nesting."
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.RUST, "--format", help="Error output style."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parser activity."),
) -> None:
    """Parse a JSON document and print the value tree."""
    _configure_logging(verbose)
    source = _read_source(path)

    parser = JsonParser(
        max_nesting_depth=max_depth,
        allow_trailing_content=allow_trailing,
    )
    result = parser.parse_result(source)
    if isinstance(result, ParseError):
        typer.echo(_render_error(result, output_format), err=True)
        raise typer.Exit(code=1)

    serializer = JsonSerializer(
        indent=None if compact else indent, max_depth=parser.max_nesting_depth
    )
    try:
        typer.echo(serializer.serialize(result.value))
    except JsonError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


@app.command("demo")
def demo_command(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parser activity."),
) -> None:
    """Parse the built-in sample documents and print each result."""
    _configure_logging(verbose)
    parser = JsonParser()
    serializer = JsonSerializer(indent=_DEFAULT_INDENT)
    failures = 0
    for sample in DEMO_SAMPLES:
        typer.echo(f"input: {sample}")
        result = parser.parse_result(sample)
        if isinstance(result, ParseError):
            failures += 1
            typer.echo(result.format_with_context(), err=True)
        else:
            typer.echo(serializer.serialize(result.value))
        typer.echo("")
    logger.debug("Demo finished with %d failure(s)", failures)
    if failures:
        raise typer.Exit(code=1)


def main() -> None:
    app()
