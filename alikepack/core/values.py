"""Classification of arbitrary Python values into comparable kinds."""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
import cmath
import dataclasses
from decimal import Decimal
import enum
import functools
import inspect
import math
import numbers
import re
from typing import Any

from alikepack.core.types import MAX_SAFE_INTEGER, ValueKind


class _Undefined:
    """Marker for an absent value, distinct from ``None``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


def classify_value(value: Any) -> ValueKind:
    """Map a value onto the closed set of kinds the comparator and renderer know."""
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    # IntEnum and StrEnum members are also ints and strs.
    if isinstance(value, enum.Enum):
        return "symbol"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "bigint" if abs(value) > MAX_SAFE_INTEGER else "number"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return "bytes"
    if inspect.isroutine(value) or inspect.isclass(value) or isinstance(value, functools.partial):
        return "function"
    if isinstance(value, re.Pattern):
        return "regexp"
    if isinstance(value, BaseException):
        return "error"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, Sequence):
        return "array"
    if isinstance(value, Set):
        return "set"
    return "object"


def is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, complex):
        return cmath.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def own_properties(value: Any) -> list[tuple[Any, Any]]:
    """Return the key/value pairs that make up an object's observable state.

    Mappings expose their items, dataclasses their fields, and other instances
    their ``__dict__`` followed by any populated ``__slots__``. Exceptions also
    expose ``args`` ahead of their attributes.
    """
    if isinstance(value, Mapping):
        return list(value.items())

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [
            (field.name, getattr(value, field.name, UNDEFINED))
            for field in dataclasses.fields(value)
        ]

    properties: list[tuple[Any, Any]] = []
    if isinstance(value, BaseException):
        properties.append(("args", value.args))

    seen: set[str] = set()
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        for key, item in instance_dict.items():
            seen.add(key)
            properties.append((key, item))

    for klass in type(value).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in seen or name in ("__dict__", "__weakref__"):
                continue
            try:
                item = getattr(value, name)
            except AttributeError:
                continue
            seen.add(name)
            properties.append((name, item))
    return properties


def is_opaque_value(value: Any) -> bool:
    """Return True for value objects whose state is only reachable through ``==``.

    ``datetime.date``, ``uuid.UUID`` and similar types keep their state in C
    fields or private storage, so they expose no own properties but define
    their own equality.
    """
    if isinstance(value, Mapping) or classify_value(value) != "object":
        return False
    if type(value).__eq__ is object.__eq__:
        return False
    return not own_properties(value)
