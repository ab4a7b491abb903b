"""Hypothesis strategies for jsondescent property-based testing.

Usage:
    from tests.strategies import json_documents, json_value_trees
"""

from .documents import (
    WHITESPACE_ALPHABET,
    json_documents,
    json_leaves,
    json_value_trees,
    nested_arrays,
    string_contents,
    whitespace,
)

__all__ = [
    "WHITESPACE_ALPHABET",
    "json_documents",
    "json_leaves",
    "json_value_trees",
    "nested_arrays",
    "string_contents",
    "whitespace",
]
