r"""
Centralized access to the data shapes used by the transformer.

    from exception_transformer.models import ApiException, MessageOptions, UnexpectedExceptionEvent
"""

from .exception import (
    ApiException,
    CustomTransformer,
    CustomTransformers,
    ExceptionDetail,
    ExceptionDetailValue,
    ExceptionMap,
)
from .options import KeyOptions, MessageOptions
from .events import UnexpectedExceptionType, UnexpectedExceptionEvent, OnUnexpectedException

__all__ = [
    "ApiException",
    "CustomTransformer",
    "CustomTransformers",
    "ExceptionDetail",
    "ExceptionDetailValue",
    "ExceptionMap",
    "KeyOptions",
    "MessageOptions",
    "UnexpectedExceptionType",
    "UnexpectedExceptionEvent",
    "OnUnexpectedException",
]
