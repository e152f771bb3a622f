"""
Data shapes for API-reported errors.

An API error arrives as:

    {
        "type": "ValidationError",
        "detail": {"email": ["Enter a valid email address."]},
        "fallback_message": "Please check the form."
    }

`detail` is a recursive structure: every field maps to a list of strings, a nested
detail mapping or a list of nested detail mappings (one per row of a repeated form).
It is kept exactly as received; nothing in this package copies it up front or writes to it.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Union

from pydantic import BaseModel, ConfigDict

from ..exceptions.base import InvalidArgumentError

ExceptionDetail = Mapping[str, Any]
ExceptionDetailValue = Union[Sequence[str], ExceptionDetail, Sequence[ExceptionDetail]]
ExceptionMap = dict[str, Any]


class ApiException(BaseModel):
    """
    One error reported by the API.

    Fields are stored as received, without type checks: a payload with a numeric `type`
    or a malformed `fallback_message` still has a usable `detail`. Only `detail` drives
    resolution; a non-string `fallback_message` is never returned as a message.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    type: Any = None
    detail: Any = None
    fallback_message: Any = None

    @classmethod
    def coerce(cls, value: Any) -> ApiException | None:
        """
        Accept an ApiException, a raw mapping (as decoded from JSON) or None.
        """
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        raise InvalidArgumentError(
            f"Exception payload must be a mapping, got {type(value).__name__}"
        )


# Every custom transformer receives the exception and returns an ExceptionMap.
CustomTransformer = Callable[[ApiException], Mapping[str, Any]]
CustomTransformers = Mapping[str, CustomTransformer]


__all__ = [
    "ApiException",
    "CustomTransformer",
    "CustomTransformers",
    "ExceptionDetail",
    "ExceptionDetailValue",
    "ExceptionMap",
]
