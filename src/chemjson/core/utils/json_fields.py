"""Typed access to fields of a parsed JSON document."""

from __future__ import annotations
import math
from typing import Any, Dict, List, NamedTuple

from ..exceptions import SchemaError

# JSON kinds understood by get_field.
OBJECT = "object"
ARRAY = "array"
STRING = "string"
NUMBER = "number"

_KIND_CHECKS = {
    OBJECT: lambda v: isinstance(v, dict),
    ARRAY: lambda v: isinstance(v, list),
    STRING: lambda v: isinstance(v, str),
    NUMBER: lambda v: is_number(v),
}


class Field(NamedTuple):
    """Result of looking up a key: whether it is present, and its value."""

    present: bool
    value: Any = None


ABSENT = Field(False)


def is_number(x: Any) -> bool:
    """True for JSON numbers; booleans are not numbers."""
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def json_kind(x: Any) -> str:
    """Name of the JSON kind of a parsed value."""
    if x is None:
        return "null"
    if isinstance(x, bool):
        return "boolean"
    if is_number(x):
        return NUMBER
    if isinstance(x, str):
        return STRING
    if isinstance(x, list):
        return ARRAY
    if isinstance(x, dict):
        return OBJECT
    return type(x).__name__


def get_field(obj: Dict[str, Any], key: str, kind: str, ctx: str) -> Field:
    """
    Look up a key and check the JSON kind of its value.

    A missing key or a null value is reported as absent. A present value
    of another kind raises SchemaError.

    Args:
        obj: Parsed JSON object
        key: Key to look up
        kind: One of OBJECT, ARRAY, STRING, NUMBER
        ctx: Dotted path of the field, used in messages

    Returns:
        Field(present, value)
    """
    value = obj.get(key)
    if value is None:
        return ABSENT
    if not _KIND_CHECKS[kind](value):
        raise SchemaError(f'Error: "{ctx}" is not of type {kind}')
    return Field(True, value)


def require_field(obj: Dict[str, Any], key: str, kind: str, ctx: str) -> Any:
    """Like get_field, but a missing key raises SchemaError."""
    field = get_field(obj, key, kind, ctx)
    if not field.present:
        raise SchemaError(f'Error: no "{ctx}" key found')
    return field.value


def finite_float(x: Any, ctx: str) -> float:
    """
    Convert a JSON number to a finite float.

    Raises:
        SchemaError: If the value is not a number, or does not fit in a finite double
    """
    if not is_number(x):
        raise SchemaError(f'Error: "{ctx}" is not of type number, got {json_kind(x)}')
    try:
        value = float(x)
    except OverflowError:
        value = math.inf
    if not math.isfinite(value):
        raise SchemaError(f'Error: "{ctx}" is out of range for a double: {x!r:.40}')
    return value


def number_list(values: List[Any], ctx: str) -> List[float]:
    """Convert an array of JSON numbers to finite floats, raising SchemaError on any other entry."""
    return [finite_float(v, f"{ctx}[{i}]") for i, v in enumerate(values)]


def to_uint8(x: Any, default: int = 0) -> int:
    """
    Coerce a JSON value to an unsigned 8-bit integer.

    Numbers are truncated toward zero and wrapped modulo 256, booleans map
    to 0/1, null maps to the default and anything else maps to 0.
    """
    if x is None:
        return default
    if isinstance(x, bool):
        return int(x)
    if isinstance(x, (int, float)):
        if not math.isfinite(x):
            return 0
        return int(x) & 0xFF
    return 0
