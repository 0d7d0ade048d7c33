"""Sort runtime values into the closed set of printable categories.

Every probe goes through ``type(value)`` rather than ``isinstance`` so an
object that lies about its ``__class__`` cannot derail classification.
"""
from __future__ import annotations

import enum
import functools
import inspect
import numbers
from collections.abc import Mapping, Sequence, Set
from datetime import date
from typing import Any

from refprint.symbol import Symbol


class Category(enum.Enum):
    PRIMITIVE = "primitive"
    SYMBOL = "symbol"
    OBJECT = "object"
    ARRAY = "array"
    ARGUMENTS = "arguments"
    MAP = "map"
    SET = "set"
    DATE = "date"
    FUNCTION = "function"
    ERROR = "error"
    INSTANCE = "instance"


PRIMITIVE_TYPES = (str, bytes, bytearray, range, numbers.Number, enum.Enum)


def is_primitive(value: Any) -> bool:
    return value is None or issubclass(type(value), PRIMITIVE_TYPES)


def is_property_key(key: Any) -> bool:
    return issubclass(type(key), (str, Symbol))


def is_namedtuple(value: Any) -> bool:
    cls = type(value)
    return issubclass(cls, tuple) and isinstance(getattr(cls, "_fields", None), tuple)


def is_callable_value(value: Any) -> bool:
    return (
        issubclass(type(value), (type, functools.partial))
        or inspect.isroutine(value)
    )


def classify(value: Any) -> Category:
    cls = type(value)
    if is_primitive(value):
        return Category.PRIMITIVE
    if issubclass(cls, Symbol):
        return Category.SYMBOL
    if issubclass(cls, BaseException):
        return Category.ERROR
    if issubclass(cls, date):
        return Category.DATE
    if is_callable_value(value):
        return Category.FUNCTION
    if issubclass(cls, inspect.BoundArguments):
        return Category.ARGUMENTS
    if issubclass(cls, dict) and all(is_property_key(k) for k in value):
        return Category.OBJECT
    if issubclass(cls, Mapping):
        return Category.MAP
    if is_namedtuple(value):
        return Category.INSTANCE
    if issubclass(cls, Sequence):
        return Category.ARRAY
    if issubclass(cls, Set):
        return Category.SET
    return Category.INSTANCE


def type_name(value: Any) -> str:
    """Class name of ``value``, or '' when it cannot be resolved."""
    name = getattr(type(value), "__name__", "")
    return name if isinstance(name, str) else ""
