"""
Message resolution over error details.

`get_string_message` walks a detail and picks the single most relevant message:

    {"title": ["Title is missing"], "questions": [{}, {"answer": ["required"]}]}
        -> "title: Title is missing"            (first key wins)

    {"title": ["Title is missing"], "non_field_errors": ["Body must be provided."]}
        -> "Body must be provided."             (non_field_errors wins, never labelled by its own name)

    [{}, {}, {"phone_number": ["bad"]}]
        -> "phone_number: bad"                  (first non-empty row)

At each level the value's DetailShape decides what happens:
  - STRING_ARRAY: first string, prefixed with the rendered key of the enclosing field
  - OBJECT_ARRAY: recurse into the first non-empty mapping, key context unchanged
  - OBJECT:       recurse into `non_field_errors` (key context "") or the first key
  - TERMINAL:     JSON representation of the value
"""

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ..exceptions.base import InvalidArgumentError, UnexpectedShapeError
from ..models.options import KeyOptions
from .data_structures import DetailShape, classify_detail_value, is_array_of_strings, is_object_empty
from .paths import get_value_from_path
from .strings import convert_snake_case_to_title_case

logger = logging.getLogger(__name__)

NON_FIELD_ERRORS_KEY = "non_field_errors"

_DEFAULT_KEY_OPTIONS = KeyOptions()


def get_error_detail(error_info: Any) -> Mapping[str, Any] | None:
    """
    Return the payload's detail when it is a mapping, None otherwise.
    Accepts an ApiException, a raw mapping or None.
    """
    if error_info is None:
        return None
    if isinstance(error_info, Mapping):
        detail = error_info.get("detail")
    else:
        detail = getattr(error_info, "detail", None)
    return detail if isinstance(detail, Mapping) else None


def generate_message_from_string_array(array: Sequence[str], key: str | None = None) -> str | None:
    """
    First string of `array` (None when empty), prefixed with "<key>: " for a non-empty key.
    """
    if not array:
        return None
    message = array[0]
    return f"{key}: {message}" if key else message


def render_error_key(key: str | None, key_options: KeyOptions | None = None) -> str | None:
    """
    Decide which label (if any) goes in front of a message for the field `key`.

    `key` is None at the top level, "" under `non_field_errors` and the field
    name everywhere else. The "" entry of `field_label_map` is therefore the only
    way to label a `non_field_errors` message.
    """
    key_options = key_options or _DEFAULT_KEY_OPTIONS

    if key_options.should_hide_error_key or key is None:
        return None

    if key in key_options.field_label_map:
        rendered = key_options.field_label_map[key]
    else:
        rendered = key

    if rendered and key_options.should_capitalize_error_key:
        rendered = convert_snake_case_to_title_case(rendered)

    return rendered or None


def get_string_message(value: Any, key_options: KeyOptions | None = None, key: str | None = None) -> str:
    """
    Resolve a detail value into one printable message ("" when there is nothing to show).

    Args:
        value: a detail value of any shape
        key_options: how to render the field name in front of the message
        key: field name of the enclosing mapping entry (internal, carried by recursion)

    Raises:
        UnexpectedShapeError: a terminal value is not JSON-serializable.
    """
    shape = classify_detail_value(value)

    if shape is DetailShape.STRING_ARRAY:
        message = generate_message_from_string_array(value, render_error_key(key, key_options))
        return message if message is not None else ""

    if shape is DetailShape.OBJECT_ARRAY:
        first_non_empty = next((item for item in value if not is_object_empty(item)), None)
        if first_non_empty is None:
            return ""
        return get_string_message(first_non_empty, key_options, key)

    if shape is DetailShape.OBJECT:
        keys = list(value.keys())
        if not keys:
            return ""
        # `non_field_errors` has priority
        if NON_FIELD_ERRORS_KEY in value and value[NON_FIELD_ERRORS_KEY]:
            return get_string_message(value[NON_FIELD_ERRORS_KEY], key_options, "")
        first_key = keys[0]
        return get_string_message(value[first_key], key_options, first_key)

    try:
        return json.dumps(value)
    except (TypeError, ValueError) as exc:
        raise UnexpectedShapeError(
            f"Cannot render detail value of type {type(value).__name__}", path=key or None
        ) from exc


def generate_field_error_from_error_detail(field_name: str, detail: Mapping[str, Any]) -> list[str] | None:
    """
    Errors for one field, addressed by a dotted path ("additional_info.name").

    A string array is returned as-is; any other shape is resolved to a single
    message and wrapped in a one-element list. None when the field has no error.
    """
    if not isinstance(field_name, str):
        raise InvalidArgumentError("fieldName can be string only")

    value = get_value_from_path(detail, field_name)
    if value is None:
        return None

    if is_array_of_strings(value):
        return value

    message = get_string_message(value)
    logger.debug("messages.field_error_resolved", extra={"field_name": field_name, "resolved": bool(message)})
    return [message] if message else None


__all__ = [
    "NON_FIELD_ERRORS_KEY",
    "get_error_detail",
    "generate_message_from_string_array",
    "render_error_key",
    "get_string_message",
    "generate_field_error_from_error_detail",
]
