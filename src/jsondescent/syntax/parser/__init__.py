"""JSON parser module.

Module Organization:
- core.py: Main JsonParser class
- primitives.py: Leaf parsers (literals, numbers, strings)
- whitespace.py: Whitespace skipping
- rules.py: Recursive rules (value dispatch, arrays, objects, document)

Public API:
    JsonParser: Main parser class
    ParseContext: Parse context for depth tracking (advanced usage)
    parse_value: Value dispatch over a Cursor (advanced usage)
    skip_whitespace: Whitespace skipping over a Cursor (advanced usage)
"""

from jsondescent.syntax.parser.core import JsonParser
from jsondescent.syntax.parser.rules import ParseContext, parse_value
from jsondescent.syntax.parser.whitespace import skip_whitespace

__all__ = ["JsonParser", "ParseContext", "parse_value", "skip_whitespace"]
