"""Kinds of values a configuration may hold and the coercions typed accessors apply to them.

A configuration value is one of a closed set of kinds::

    NULL      None
    BOOL      bool
    INT       int (never bool)
    FLOAT     float
    STRING    str
    SEQUENCE  list or tuple of values
    MAPPING   ConfigStore or any other Mapping with str keys

Integer coercions accept both INT and FLOAT kinds. Floats are truncated toward zero, so ``3.9`` becomes ``3`` and
``-3.9`` becomes ``-3``; the result must fit the requested width.
"""

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, List, TypeVar

from confstore.exceptions import TypeMismatch

T = TypeVar("T")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1


class ValueKind(str, Enum):
    """Kinds of configuration values."""

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def kind_of(value: Any) -> ValueKind:
    """Classify a Python object as one of the configuration value kinds.

    Raises:
        TypeMismatch: If the object is not a configuration value.
    """
    if value is None:
        return ValueKind.NULL
    # bool must be tested before int, it is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    raise TypeMismatch(f"{type(value).__name__} is not a configuration value")


def describe(value: Any) -> str:
    """Name the kind of a value for error messages, falling back to the Python type name."""
    try:
        return kind_of(value).value
    except TypeMismatch:
        return type(value).__name__


def mismatch(key: str, expected: str, value: Any) -> TypeMismatch:
    return TypeMismatch(f"Configuration parameter {key} is {describe(value)}, expected {expected}")


def to_string(value: Any, key: str) -> str:
    if isinstance(value, str):
        return value
    raise mismatch(key, "string", value)


def _to_integer(value: Any, key: str, expected: str, lower: int, upper: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise mismatch(key, expected, value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise TypeMismatch(f"Configuration parameter {key} is {value}, expected {expected}")
        value = math.trunc(value)
    if not lower <= value <= upper:
        raise TypeMismatch(f"Configuration parameter {key} value {value} is out of range for {expected}")
    return value


def to_int64(value: Any, key: str) -> int:
    return _to_integer(value, key, "int64", INT64_MIN, INT64_MAX)


def to_uint64(value: Any, key: str) -> int:
    return _to_integer(value, key, "uint64", 0, UINT64_MAX)


def to_slice(value: Any, key: str, element: Callable[[Any, str], T]) -> List[T]:
    """Coerce a sequence element by element; the first failing element fails the whole conversion."""
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise mismatch(key, "sequence", value)
    return [element(item, f"{key}[{index}]") for index, item in enumerate(value)]


def is_kind(value: Any, kind: ValueKind) -> bool:
    """Whether value is a configuration value of the given kind; unsupported objects are of no kind."""
    try:
        return kind_of(value) is kind
    except TypeMismatch:
        return False
