"""
ExceptionTransformer: the public entry point.

    transformer = ExceptionTransformer(
        "Something went wrong.",
        custom_transformers={
            "ProfileCredentialError": lambda exception: {"email": "You shall not pass."},
        },
        on_unexpected_exception=report_to_sentry,
    )

    transformer.generate_exception_map(exception)                 -> {"email": [...], "fallback_message": "..."}
    transformer.generate_specific_field_error(exception)("email") -> ["Enter a valid email address."]
    transformer.generate_error_message(exception)                 -> "email: Enter a valid email address."

`generate_exception_map` lets failures of custom transformers propagate: they are
the caller's own code. The field-error accessor and `generate_error_message`
recover locally, log, and report through `on_unexpected_exception` instead.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .config.settings import Settings, get_settings
from .core.logging.filters import exception_type_context
from .exceptions.base import ExceptionTransformerError, InvalidArgumentError
from .models.events import OnUnexpectedException, UnexpectedExceptionEvent, UnexpectedExceptionType
from .models.exception import ApiException, CustomTransformers, ExceptionMap
from .models.options import MessageOptions
from .utils.data_structures import create_map_from_object
from .utils.messages import generate_field_error_from_error_detail, get_error_detail, get_string_message
from .utils.paths import remove_known_keys_from_error_detail

logger = logging.getLogger(__name__)

FieldErrorAccessor = Callable[[str], list[str] | None]


def _no_field_error(field_name: str) -> None:
    return None


def _type_label(exception: ApiException | None) -> str | None:
    if exception is None or exception.type is None:
        return None
    return str(exception.type)


def _failure_extra(exc: BaseException, **extra: Any) -> dict[str, Any]:
    # library errors carry a structured payload for log sinks
    if isinstance(exc, ExceptionTransformerError):
        extra["error"] = exc.to_payload()
    return extra


class ExceptionTransformer:
    """
    Turns API exceptions into an exception map, per-field errors and a printable message.

    Args:
        generic_error_message: last-resort message; defaults to Settings.GENERIC_ERROR_MESSAGE
        custom_transformers: exception type -> callable(ApiException) returning the exception map
        on_unexpected_exception: called with an UnexpectedExceptionEvent whenever a fallback
            or a recovered failure happens; its own failures are logged and ignored
        settings: Settings instance, defaults to get_settings()
    """

    def __init__(
        self,
        generic_error_message: str | None = None,
        custom_transformers: CustomTransformers | None = None,
        on_unexpected_exception: OnUnexpectedException | None = None,
        settings: Settings | None = None,
    ):
        if generic_error_message is None:
            generic_error_message = (settings or get_settings()).GENERIC_ERROR_MESSAGE
        self._validate_message(generic_error_message)

        self._generic_error_message = generic_error_message
        self._custom_transformers: dict[str, Callable[[ApiException], Mapping[str, Any]]] = dict(
            custom_transformers or {}
        )
        self._on_unexpected_exception = on_unexpected_exception

    @property
    def generic_error_message(self) -> str:
        return self._generic_error_message

    # =================================================================================================================
    # Exception map
    # =================================================================================================================

    def generate_exception_map(self, exception: ApiException | Mapping[str, Any]) -> ExceptionMap:
        """
        Build a map from the exception's detail, or from the custom transformer registered
        for its type. The result always carries `fallback_message`.
        """
        exception = ApiException.coerce(exception)
        if exception is None:
            raise InvalidArgumentError("Exception payload is required")

        exception_type = _type_label(exception)
        custom_transformer = (
            self._custom_transformers.get(exception.type) if isinstance(exception.type, str) else None
        )

        with exception_type_context(exception_type):
            if custom_transformer is not None:
                logger.debug("transformer.custom_map", extra={"exception_type": exception_type})
                exception_map = dict(custom_transformer(exception))
            else:
                exception_map = create_map_from_object(get_error_detail(exception))

        if not exception_map.get("fallback_message"):
            exception_map["fallback_message"] = exception.fallback_message

        return exception_map

    # =================================================================================================================
    # Field errors
    # =================================================================================================================

    def generate_specific_field_error(self, error_info: ApiException | Mapping[str, Any] | None) -> FieldErrorAccessor:
        """
        Return `field_name -> list[str] | None` bound to the payload's detail.

            get_field_error = transformer.generate_specific_field_error(exception)
            get_field_error("additional_info.name")  -> ["This field is required."]
        """
        try:
            exception = ApiException.coerce(error_info)
        except Exception as exc:
            logger.warning("transformer.field_error_payload_invalid", extra=_failure_extra(exc), exc_info=True)
            self._notify(UnexpectedExceptionType.CAUGHT_ERROR_WHEN_GENERATING_FIELD_ERROR_MESSAGE, exc, error_info)
            return _no_field_error

        exception_type = _type_label(exception)
        detail = get_error_detail(exception)
        if detail is None:
            if exception is not None:
                logger.info("transformer.no_error_detail", extra={"exception_type": exception_type})
                self._notify(UnexpectedExceptionType.NO_ERROR_DETAIL, None, error_info)
            return _no_field_error

        def get_field_error(field_name: str) -> list[str] | None:
            with exception_type_context(exception_type):
                try:
                    return generate_field_error_from_error_detail(field_name, detail)
                except Exception as exc:
                    logger.warning(
                        "transformer.field_error_failed",
                        extra=_failure_extra(exc, field_name=repr(field_name)),
                        exc_info=True,
                    )
                    self._notify(
                        UnexpectedExceptionType.CAUGHT_ERROR_WHEN_GENERATING_FIELD_ERROR_MESSAGE, exc, error_info
                    )
                    return None

        return get_field_error

    # =================================================================================================================
    # Message
    # =================================================================================================================

    def generate_error_message(
        self,
        error_info: ApiException | Mapping[str, Any] | None,
        options: MessageOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """
        Resolve the payload into one printable message.

        - exception type listed in `skip_types`: "" (silent, no callback)
        - no usable detail: the payload's fallback_message, else the generic message
        - otherwise: the most relevant message of the detail once `known_error_keys` are removed
        - any failure: the generic message
        """
        try:
            options = MessageOptions.coerce(options)
            exception = ApiException.coerce(error_info)
            exception_type = _type_label(exception)

            if exception is not None and exception.type is not None and exception.type in options.skip_types:
                return ""

            with exception_type_context(exception_type):
                detail = get_error_detail(exception)
                if not detail:
                    fallback_message = exception.fallback_message if exception is not None else None
                    if not isinstance(fallback_message, str):
                        fallback_message = None
                    logger.info(
                        "transformer.fell_to_fallback",
                        extra={"exception_type": exception_type, "has_fallback_message": bool(fallback_message)},
                    )
                    self._notify(UnexpectedExceptionType.FELL_TO_FALLBACK, None, error_info)
                    return fallback_message or self._generic_error_message

                detail = remove_known_keys_from_error_detail(detail, options.known_error_keys)
                return get_string_message(detail, options)
        except Exception as exc:
            logger.warning("transformer.error_message_failed", extra=_failure_extra(exc), exc_info=True)
            self._notify(UnexpectedExceptionType.CAUGHT_ERROR_WHEN_GENERATING_ERROR_MESSAGE, exc, error_info)
            return self._generic_error_message

    def change_generic_error_message(self, new_message: str) -> None:
        """
        Replace the generic message for all later calls. Not synchronized: hosts that
        call this from several threads must lock around it.
        """
        self._validate_message(new_message)
        logger.debug("transformer.generic_message_changed")
        self._generic_error_message = new_message

    # =================================================================================================================
    # Helpers
    # =================================================================================================================

    @staticmethod
    def _validate_message(message: Any) -> None:
        if not isinstance(message, str):
            raise InvalidArgumentError(f"Generic error message must be a string, got {type(message).__name__}")

    def _notify(self, event_type: UnexpectedExceptionType, error: BaseException | None, error_info: Any) -> None:
        if self._on_unexpected_exception is None:
            return

        event = UnexpectedExceptionEvent(type=event_type, error=error, error_info=error_info)
        try:
            self._on_unexpected_exception(event)
        except Exception:
            # A failing observer must not change what the caller gets back.
            logger.exception("transformer.callback_failed", extra={"event_type": event_type.value})


__all__ = ["ExceptionTransformer", "FieldErrorAccessor"]
