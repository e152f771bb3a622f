from .data_structures import (
    DetailShape,
    classify_detail_value,
    create_map_from_object,
    is_array_of_objects,
    is_array_of_strings,
    is_object_empty,
)
from .paths import delete_property, get_value_from_path, remove_known_keys_from_error_detail
from .messages import (
    generate_field_error_from_error_detail,
    generate_message_from_string_array,
    get_error_detail,
    get_string_message,
    render_error_key,
)
from .strings import convert_snake_case_to_title_case

__all__ = [
    "DetailShape",
    "classify_detail_value",
    "create_map_from_object",
    "is_array_of_objects",
    "is_array_of_strings",
    "is_object_empty",
    "delete_property",
    "get_value_from_path",
    "remove_known_keys_from_error_detail",
    "generate_field_error_from_error_detail",
    "generate_message_from_string_array",
    "get_error_detail",
    "get_string_message",
    "render_error_key",
    "convert_snake_case_to_title_case",
]
