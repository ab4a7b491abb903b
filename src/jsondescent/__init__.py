"""jsondescent - recursive-descent parser for a minimal JSON dialect.

Parses null, true, false, non-negative integers, unescaped strings, arrays
and objects into an immutable value tree, reporting the first error with a
category code and its line and column.

Public API:
    parse - Parse JSON source to a value tree
    serialize - Serialize a value tree to JSON source
    JsonParser - Configurable parser (limits, trailing content)
    to_python / from_python - Conversions to and from native Python data

Exceptions:
    JsonError - Base exception class
    JsonSyntaxError - Parse errors
    JsonSerializationError - Value trees that cannot be written
    DepthLimitExceededError - Nesting too deep to serialize

Submodules:
    jsondescent.syntax.values - Value node types (JsonNull, JsonArray, ...)
    jsondescent.syntax.cursor - Cursor, ParseResult, ParseError
    jsondescent.diagnostics - Codes, templates and formatting
"""

from .diagnostics import (
    DepthLimitExceededError,
    DiagnosticCode,
    JsonError,
    JsonSerializationError,
    JsonSyntaxError,
)
from .syntax import (
    JsonArray,
    JsonFalse,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonParser,
    JsonString,
    JsonTrue,
    JsonValue,
    from_python,
    parse,
    serialize,
    to_python,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("jsondescent")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DepthLimitExceededError",
    "DiagnosticCode",
    "JsonArray",
    "JsonError",
    "JsonFalse",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonParser",
    "JsonSerializationError",
    "JsonString",
    "JsonSyntaxError",
    "JsonTrue",
    "JsonValue",
    "__version__",
    "from_python",
    "parse",
    "serialize",
    "to_python",
]
