"""
Shape predicates for error-detail values.

A detail value is one of three shapes (plus a terminal fallback):

    ["This field is required."]                  -> STRING_ARRAY
    {"title": ["Title is missing"]}              -> OBJECT
    [{}, {}, {"answer": ["required"]}]           -> OBJECT_ARRAY
    42, True, None, "plain string"               -> TERMINAL

Strings are sequences in Python but never count as one here.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

# list and tuple are the only sequences a decoded JSON payload can contain
_SEQUENCE_TYPES = (list, tuple)


class DetailShape(str, Enum):
    STRING_ARRAY = "string_array"
    OBJECT_ARRAY = "object_array"
    OBJECT = "object"
    TERMINAL = "terminal"


def is_array_of_strings(x: Any) -> bool:
    # [] and [""] are both arrays of strings; only element types matter
    return isinstance(x, _SEQUENCE_TYPES) and all(isinstance(item, str) for item in x)


def is_array_of_objects(x: Any) -> bool:
    return isinstance(x, _SEQUENCE_TYPES) and all(isinstance(item, Mapping) for item in x)


def is_object_empty(x: Any) -> bool:
    return isinstance(x, Mapping) and len(x) == 0


def classify_detail_value(x: Any) -> DetailShape:
    """
    Tag a detail value with its shape. An empty list is a STRING_ARRAY.
    """
    if is_array_of_strings(x):
        return DetailShape.STRING_ARRAY
    if is_array_of_objects(x):
        return DetailShape.OBJECT_ARRAY
    if isinstance(x, Mapping):
        return DetailShape.OBJECT
    return DetailShape.TERMINAL


def create_map_from_object(obj: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Return a new dict holding the mapping's own entries in insertion order.
    """
    if obj is None:
        return {}
    return {key: value for key, value in obj.items()}


__all__ = [
    "DetailShape",
    "is_array_of_strings",
    "is_array_of_objects",
    "is_object_empty",
    "classify_detail_value",
    "create_map_from_object",
]
