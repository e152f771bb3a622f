from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class UnexpectedExceptionType(str, Enum):
    NO_ERROR_DETAIL = "NO_ERROR_DETAIL"
    FELL_TO_FALLBACK = "FELL_TO_FALLBACK"
    CAUGHT_ERROR_WHEN_GENERATING_FIELD_ERROR_MESSAGE = "CAUGHT_ERROR_WHEN_GENERATING_FIELD_ERROR_MESSAGE"
    CAUGHT_ERROR_WHEN_GENERATING_ERROR_MESSAGE = "CAUGHT_ERROR_WHEN_GENERATING_ERROR_MESSAGE"


class UnexpectedExceptionEvent(BaseModel):
    """
    Record handed to the `on_unexpected_exception` callback.

    - type: what happened
    - error: the caught error, or None for fallbacks that did not involve one
    - error_info: the exception payload exactly as the caller passed it
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: UnexpectedExceptionType
    error: BaseException | None = None
    error_info: Any = None


OnUnexpectedException = Callable[[UnexpectedExceptionEvent], None]
