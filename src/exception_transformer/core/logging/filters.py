"""
Logging filters

Exception-type filter and helpers for logging.

The transformer records the `type` of the API exception it is working on in a
context variable for the duration of each call. `ExceptionTypeFilter` copies it
onto every LogRecord as `record.exception_type`, so log lines emitted anywhere
below the transformer (path helpers, message resolution) can be correlated with
the payload that produced them. Formatters referencing `%(exception_type)s`
never KeyError: records outside a transformer call get the sentinel "-".

`RedactFilter` masks `extra` values whose key looks sensitive. Error payloads
echo user input back (a `password` field error, an `authorization` header),
so any of that reaching a log `extra` is replaced before formatting.
"""

import contextvars
import logging
from contextlib import contextmanager
from logging import LogRecord
from typing import Iterator

_exception_type_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "exception_type", default=None
)


def set_exception_type(exception_type: str | None) -> contextvars.Token:
    """
    Set the exception type in the current context and return the token to allow reset.
    """
    return _exception_type_ctx.set(exception_type)


def reset_exception_type(token: contextvars.Token) -> None:
    _exception_type_ctx.reset(token)


def get_exception_type() -> str | None:
    return _exception_type_ctx.get()


@contextmanager
def exception_type_context(exception_type: str | None) -> Iterator[None]:
    """
    Usage:
        with exception_type_context(exception.type):
            ... everything logged here carries exception_type ...
    """
    token = set_exception_type(exception_type)
    try:
        yield
    finally:
        reset_exception_type(token)


class ExceptionTypeFilter(logging.Filter):
    """
    Guarantees every LogRecord has an `exception_type` attribute.

    Precedence: an explicit `extra={"exception_type": ...}`, then the context
    variable, then "-".
    """

    def filter(self, record: LogRecord) -> bool:
        record.exception_type = (
            getattr(record, "exception_type", None) or get_exception_type() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    SENSITIVE = {
        "password",
        "new_password",
        "old_password",
        "secret",
        "token",
        "access_token",
        "refresh_token",
        "authorization",
        "ssn",
    }
    MASK = "***REDACTED***"

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
        return True


__all__ = [
    "set_exception_type",
    "reset_exception_type",
    "get_exception_type",
    "exception_type_context",
    "ExceptionTypeFilter",
    "RedactFilter",
]
