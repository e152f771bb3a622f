from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions.base import InvalidArgumentError


class KeyOptions(BaseModel):
    """
    How the field name in front of a message is rendered.

    - should_hide_error_key: drop the "<key>: " prefix entirely
    - should_capitalize_error_key: "phone_number" -> "Phone Number"
    - field_label_map: display label per field name; the "" entry labels `non_field_errors`

    Unknown keys are rejected so a misspelled option fails instead of being dropped.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    should_hide_error_key: bool = False
    should_capitalize_error_key: bool = False
    field_label_map: dict[str, str] = Field(default_factory=dict)


class MessageOptions(KeyOptions):
    """
    Options for ExceptionTransformer.generate_error_message().

    - known_error_keys: dotted paths removed from the detail before a message is picked
    - skip_types: exception types that resolve to "" without any fallback
    """

    known_error_keys: list[str] | None = None
    skip_types: list[str] = Field(default_factory=list)

    @classmethod
    def coerce(cls, value: Any) -> MessageOptions:
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        raise InvalidArgumentError(
            f"Message options must be a mapping, got {type(value).__name__}"
        )
