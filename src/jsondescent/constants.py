"""Shared constants for jsondescent.

This module provides centralized configuration constants used across
the syntax and serialization layers. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing and serialization
- Input limits: DoS prevention via size constraints
- Grammar: Character classes recognized by the parser

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "FRAMES_PER_NESTING_LEVEL",
    "RECURSION_RESERVE_FRAMES",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Grammar
    "WHITESPACE_CHARS",
    "ASCII_DIGITS",
    "LITERAL_SPELLINGS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# The parser recurses once per array/object nesting level, and so does the
# serializer. A single MAX_DEPTH bounds both, so a tree the parser accepts can
# always be written back out with the default serializer.
#
# 100 levels is far beyond hand-written documents and well inside the default
# Python recursion limit of 1000.
#
# ============================================================================

# Unified maximum nesting depth (parser and serializer).
MAX_DEPTH: int = 100

# Python frames consumed per nesting level by the parser and the serializer:
# parse_value -> parse_array/parse_object -> parse_value -> ...
# _serialize_value -> _serialize_array/_serialize_object -> _serialize_value
FRAMES_PER_NESTING_LEVEL: int = 2

# Frames left free for the caller's own stack when clamping a requested
# depth against sys.getrecursionlimit().
RECURSION_RESERVE_FRAMES: int = 200

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
# Set max_source_size=0 on JsonParser to disable.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# GRAMMAR
# ============================================================================

# Insignificant whitespace between tokens: space, tab, LF, CR.
WHITESPACE_CHARS: frozenset[str] = frozenset(" \t\n\r")

# ASCII digits only. str.isdigit() accepts Unicode digits such as "²",
# which are not part of the number grammar.
ASCII_DIGITS: str = "0123456789"

# Lookahead character -> full literal spelling.
LITERAL_SPELLINGS: dict[str, str] = {
    "n": "null",
    "t": "true",
    "f": "false",
}
