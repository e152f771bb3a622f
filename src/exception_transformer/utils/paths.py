"""
Dotted-path helpers over error details.

    get_value_from_path({"message": {"attachment": ["x"]}}, "message.attachment")  -> ["x"]

Paths address mapping keys only: a list anywhere along the path stops resolution,
there is no numeric indexing into repeated sub-errors.
"""

import logging
from collections.abc import Iterable, Mapping
from functools import reduce
from typing import Any

from ..exceptions.base import InvalidArgumentError

logger = logging.getLogger(__name__)


def _split_path(path: str) -> list[str]:
    if not isinstance(path, str):
        raise InvalidArgumentError(f"Path must be a string, got {type(path).__name__}")
    return path.split(".")


def get_value_from_path(detail: Mapping[str, Any], path: str) -> Any:
    """
    Return the value stored at `path`, or None when any segment is missing
    or resolves to something that is not a mapping.
    """
    value: Any = detail
    for segment in _split_path(path):
        if not isinstance(value, Mapping):
            return None
        value = value.get(segment)
    return value


def delete_property(detail: Mapping[str, Any], path: str) -> dict[str, Any]:
    """
    Return a copy of `detail` without the key at `path`.

    Every mapping between the root and the deleted key is copied, so the caller's
    detail (nested mappings included) is left untouched. A missing or non-mapping
    intermediate segment turns the deletion into a no-op.
    """
    segments = _split_path(path)
    filtered = dict(detail)

    parent = filtered
    for segment in segments[:-1]:
        child = parent.get(segment)
        if not isinstance(child, Mapping):
            logger.debug("paths.delete_skipped", extra={"path": path, "segment": segment})
            return filtered
        child = dict(child)
        parent[segment] = child
        parent = child

    parent.pop(segments[-1], None)
    return filtered


def remove_known_keys_from_error_detail(
    detail: Mapping[str, Any],
    known_keys: Iterable[str] | None,
) -> Mapping[str, Any]:
    """
    Drop every path in `known_keys` from `detail`, in order.
    """
    known_keys = list(known_keys or [])
    if not known_keys:
        return detail
    return reduce(delete_property, known_keys, detail)


__all__ = [
    "get_value_from_path",
    "delete_property",
    "remove_known_keys_from_error_detail",
]
