"""JSON value tree node definitions.

A parsed document is a closed, recursive union of immutable nodes.
Composite nodes own their children exclusively: arrays hold tuples of
nodes, objects hold read-only mappings, and nothing is shared or mutated
after construction.

Includes type guards as static methods and conversions to and from native
Python data.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Literals
    "JsonNull",
    "JsonTrue",
    "JsonFalse",
    # Scalars
    "JsonNumber",
    "JsonString",
    # Composites
    "JsonArray",
    "JsonObject",
    # Type aliases
    "JsonValue",
    "PythonValue",
    # Conversions
    "from_python",
    "to_python",
]

# ============================================================================
# LITERALS
# ============================================================================


@dataclass(frozen=True, slots=True)
class JsonNull:
    """The `null` literal."""

    @staticmethod
    def guard(value: object) -> TypeIs["JsonNull"]:
        """Type guard for JsonNull."""
        return isinstance(value, JsonNull)


@dataclass(frozen=True, slots=True)
class JsonTrue:
    """The `true` literal."""

    @staticmethod
    def guard(value: object) -> TypeIs["JsonTrue"]:
        """Type guard for JsonTrue."""
        return isinstance(value, JsonTrue)


@dataclass(frozen=True, slots=True)
class JsonFalse:
    """The `false` literal."""

    @staticmethod
    def guard(value: object) -> TypeIs["JsonFalse"]:
        """Type guard for JsonFalse."""
        return isinstance(value, JsonFalse)


# ============================================================================
# SCALARS
# ============================================================================


@dataclass(frozen=True, slots=True)
class JsonNumber:
    """Non-negative integer.

    The grammar has no sign, fraction or exponent. Python integers are
    unbounded, so long digit runs never overflow.

    Example:
        123 -> JsonNumber(value=123)
    """

    value: int

    def __post_init__(self) -> None:
        """Validate number invariants."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            msg = f"JsonNumber value must be int, got {type(self.value).__name__}"
            raise TypeError(msg)
        if self.value < 0:
            msg = f"JsonNumber value must be >= 0, got {self.value}"
            raise ValueError(msg)

    @staticmethod
    def guard(value: object) -> TypeIs["JsonNumber"]:
        """Type guard for JsonNumber."""
        return isinstance(value, JsonNumber)


@dataclass(frozen=True, slots=True)
class JsonString:
    """Characters between double quotes, copied verbatim.

    No escape decoding: `"a\\nb"` holds a backslash followed by `n`.
    """

    value: str

    @staticmethod
    def guard(value: object) -> TypeIs["JsonString"]:
        """Type guard for JsonString."""
        return isinstance(value, JsonString)


# ============================================================================
# COMPOSITES
# ============================================================================


@dataclass(frozen=True, slots=True)
class JsonArray:
    """Ordered sequence of values.

    Example:
        [ null , true ] -> JsonArray(elements=(JsonNull(), JsonTrue()))
    """

    elements: tuple["JsonValue", ...]

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> "JsonValue":
        return self.elements[index]

    @staticmethod
    def guard(value: object) -> TypeIs["JsonArray"]:
        """Type guard for JsonArray."""
        return isinstance(value, JsonArray)


@dataclass(frozen=True, slots=True)
class JsonObject:
    """Mapping from string keys to values.

    Keys are unique; when a document repeats a key the later member wins.
    The members mapping is wrapped read-only at construction, so a caller
    holding the original dict cannot change the node.

    Example:
        { "a" : true } -> JsonObject(members={"a": JsonTrue()})
    """

    members: Mapping[str, "JsonValue"] = field(hash=False)

    def __post_init__(self) -> None:
        """Freeze the members mapping."""
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    def __len__(self) -> int:
        return len(self.members)

    def __getitem__(self, key: str) -> "JsonValue":
        return self.members[key]

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return dict(self.members) == dict(other.members)

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))

    def keys(self) -> frozenset[str]:
        """Member keys (unordered)."""
        return frozenset(self.members)

    @staticmethod
    def guard(value: object) -> TypeIs["JsonObject"]:
        """Type guard for JsonObject."""
        return isinstance(value, JsonObject)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type JsonValue = JsonNull | JsonTrue | JsonFalse | JsonNumber | JsonString | JsonArray | JsonObject

type PythonValue = None | bool | int | str | list["PythonValue"] | dict[str, "PythonValue"]


# ============================================================================
# CONVERSIONS
# ============================================================================


def to_python(value: JsonValue) -> PythonValue:
    """Convert a value tree into native Python data.

    Example:
        >>> to_python(JsonArray((JsonNull(), JsonNumber(1))))
        [None, 1]
    """
    match value:
        case JsonNull():
            return None
        case JsonTrue():
            return True
        case JsonFalse():
            return False
        case JsonNumber(value=number):
            return number
        case JsonString(value=text):
            return text
        case JsonArray(elements=elements):
            return [to_python(element) for element in elements]
        case JsonObject(members=members):
            return {key: to_python(member) for key, member in members.items()}
    msg = f"Not a JSON value node: {type(value).__name__}"
    raise TypeError(msg)


def from_python(obj: object) -> JsonValue:
    """Build a value tree from native Python data.

    Only data the grammar can express is accepted.

    Raises:
        TypeError: Unsupported type (float, tuple, non-str key, ...)
        ValueError: Negative int, empty list or empty dict

    Example:
        >>> from_python({"a": [True, None]})
        JsonObject(members=mappingproxy({'a': JsonArray(elements=(JsonTrue(), JsonNull()))}))
    """
    match obj:
        case None:
            return JsonNull()
        case True:
            return JsonTrue()
        case False:
            return JsonFalse()
        case int():
            return JsonNumber(obj)
        case str():
            return JsonString(obj)
        case list():
            if not obj:
                msg = "Empty arrays are not part of the grammar"
                raise ValueError(msg)
            return JsonArray(tuple(from_python(item) for item in obj))
        case dict():
            if not obj:
                msg = "Empty objects are not part of the grammar"
                raise ValueError(msg)
            members: dict[str, JsonValue] = {}
            for key, item in obj.items():
                if not isinstance(key, str):
                    msg = f"Object keys must be str, got {type(key).__name__}"
                    raise TypeError(msg)
                members[key] = from_python(item)
            return JsonObject(members)
    msg = f"Cannot convert {type(obj).__name__} to a JSON value"
    raise TypeError(msg)
