"""
exception_transformer: turn structured API error payloads into maps, field errors
and a single printable message.

    from exception_transformer import ExceptionTransformer

    transformer = ExceptionTransformer("Something went wrong.")
    transformer.generate_error_message(
        {"type": "ValidationError", "detail": {"email": ["Enter a valid email address."]}}
    )
    # -> "email: Enter a valid email address."
"""

from .transformer import ExceptionTransformer, FieldErrorAccessor
from .models import (
    ApiException,
    ExceptionMap,
    KeyOptions,
    MessageOptions,
    UnexpectedExceptionEvent,
    UnexpectedExceptionType,
)
from .exceptions import ExceptionTransformerError, InvalidArgumentError, UnexpectedShapeError

__all__ = [
    "ExceptionTransformer",
    "FieldErrorAccessor",
    "ApiException",
    "ExceptionMap",
    "KeyOptions",
    "MessageOptions",
    "UnexpectedExceptionEvent",
    "UnexpectedExceptionType",
    "ExceptionTransformerError",
    "InvalidArgumentError",
    "UnexpectedShapeError",
]
