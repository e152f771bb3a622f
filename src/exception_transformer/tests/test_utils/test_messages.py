# src/exception_transformer/tests/test_utils/test_messages.py
import copy

import pytest

from exception_transformer.exceptions.base import InvalidArgumentError, UnexpectedShapeError
from exception_transformer.models.exception import ApiException
from exception_transformer.models.options import KeyOptions
from exception_transformer.utils.messages import (
    generate_field_error_from_error_detail,
    generate_message_from_string_array,
    get_error_detail,
    get_string_message,
    render_error_key,
)
from exception_transformer.utils.strings import convert_snake_case_to_title_case

PHONE_ROWS = [{}, {}, {"phone_number": ["bad"]}]


class TestGenerateMessageFromStringArray:

    def test_empty_array_gives_none(self):
        assert generate_message_from_string_array([]) is None

    def test_first_element_without_key(self):
        assert generate_message_from_string_array(["name", "password", "email"]) == "name"

    def test_empty_first_element(self):
        assert generate_message_from_string_array(["", "second item"]) == ""

    def test_empty_key_gives_no_prefix(self):
        assert generate_message_from_string_array(["name", "password"], "") == "name"

    def test_key_prefix(self):
        assert generate_message_from_string_array(["first string"], "key") == "key: first string"

    def test_key_prefix_with_empty_first_element(self):
        assert generate_message_from_string_array(["", "second item"], "key") == "key: "

    def test_generated_messages(self, fake):
        messages = [fake.sentence() for _ in range(3)]

        assert generate_message_from_string_array(messages) == messages[0]
        assert generate_message_from_string_array(messages, "k") == f"k: {messages[0]}"


class TestRenderErrorKey:

    def test_plain_key(self):
        assert render_error_key("phone_number") == "phone_number"

    def test_no_key_context(self):
        assert render_error_key(None, KeyOptions(field_label_map={"": "General"})) is None

    def test_hidden(self):
        assert render_error_key("phone_number", KeyOptions(should_hide_error_key=True)) is None

    def test_capitalized(self):
        assert render_error_key("phone_number", KeyOptions(should_capitalize_error_key=True)) == "Phone Number"

    def test_label_then_capitalize(self):
        options = KeyOptions(should_capitalize_error_key=True, field_label_map={"phone_number": "tel_no"})

        assert render_error_key("phone_number", options) == "Tel No"

    def test_empty_key_only_labelled_through_label_map(self):
        assert render_error_key("") is None
        assert render_error_key("", KeyOptions(field_label_map={"": "General"})) == "General"


class TestGetStringMessage:

    def test_first_key_wins_over_nested_array(self):
        detail = {"title": ["Title is missing"], "questions": [{}, {}, {"answer": ["required"]}]}

        assert get_string_message(detail) == "title: Title is missing"

    def test_non_field_errors_has_priority(self):
        detail = {"title": ["Title is missing"], "non_field_errors": ["Attachments or body must be provided."]}

        assert get_string_message(detail) == "Attachments or body must be provided."

    def test_falsy_non_field_errors_is_ignored(self):
        detail = {"title": ["Title is missing"], "non_field_errors": []}

        assert get_string_message(detail) == "title: Title is missing"

    def test_array_of_objects(self):
        assert get_string_message(PHONE_ROWS) == "phone_number: bad"

    def test_array_of_objects_capitalized(self):
        assert get_string_message(PHONE_ROWS, KeyOptions(should_capitalize_error_key=True)) == "Phone Number: bad"

    def test_array_of_objects_hidden_key(self):
        assert get_string_message(PHONE_ROWS, KeyOptions(should_hide_error_key=True)) == "bad"

    def test_array_of_objects_label_and_capitalize(self):
        options = KeyOptions(should_capitalize_error_key=True, field_label_map={"phone_number": "tel_no"})

        assert get_string_message(PHONE_ROWS, options) == "Tel No: bad"

    def test_array_of_only_empty_objects(self):
        assert get_string_message([{}, {}]) == ""

    def test_empty_object(self):
        assert get_string_message({}) == ""

    def test_top_level_string_array_has_no_prefix(self):
        assert get_string_message(["Just a message"]) == "Just a message"

    def test_empty_string_array(self):
        assert get_string_message({"title": []}) == ""

    def test_nested_object_uses_innermost_key(self):
        detail = {"additional_info": {"name": ["This field is required."]}}

        assert get_string_message(detail) == "name: This field is required."

    def test_non_field_errors_rows(self):
        detail = {"non_field_errors": [{}, {"address": ["The address entered is not valid."]}]}

        assert get_string_message(detail) == "address: The address entered is not valid."

    def test_non_field_errors_label_from_empty_key(self):
        detail = {"non_field_errors": ["Attachments or body must be provided."]}
        options = KeyOptions(field_label_map={"": "general_error"}, should_capitalize_error_key=True)

        assert get_string_message(detail, options) == "General Error: Attachments or body must be provided."

    def test_empty_key_label_does_not_apply_elsewhere(self):
        options = KeyOptions(field_label_map={"": "General"})

        assert get_string_message(["top level"], options) == "top level"
        assert get_string_message({"title": ["t"]}, options) == "title: t"

    @pytest.mark.parametrize(
        "value, expected",
        [(42, "42"), (True, "true"), (None, "null"), ("plain", '"plain"'), (1.5, "1.5")],
    )
    def test_terminal_values_are_json(self, value, expected):
        assert get_string_message(value) == expected

    def test_terminal_value_inside_a_field(self):
        assert get_string_message({"count": 3}) == "3"

    def test_unserializable_terminal_value(self):
        with pytest.raises(UnexpectedShapeError):
            get_string_message({"when": object()})

    def test_does_not_mutate_input(self):
        detail = {"message": {"title": ["t"], "non_field_errors": ["n"]}, "rows": [{}, {"a": ["b"]}]}
        original = copy.deepcopy(detail)

        get_string_message(detail, KeyOptions(should_capitalize_error_key=True))

        assert detail == original


class TestGenerateFieldErrorFromErrorDetail:

    def test_nested_string_array(self):
        detail = {"additional_info": {"name": ["required"]}}

        assert generate_field_error_from_error_detail("additional_info.name", detail) == ["required"]

    def test_string_array_returned_verbatim(self):
        errors = ["first", "second"]

        assert generate_field_error_from_error_detail("email", {"email": errors}) is errors

    def test_nested_object_is_resolved_to_one_message(self):
        detail = {"additional_info": {"name": ["required"]}}

        assert generate_field_error_from_error_detail("additional_info", detail) == ["name: required"]

    def test_rows_are_resolved_to_one_message(self):
        detail = {"questions": [{}, {"answer": ["required"]}]}

        assert generate_field_error_from_error_detail("questions", detail) == ["answer: required"]

    def test_missing_field(self):
        assert generate_field_error_from_error_detail("email", {"password": ["x"]}) is None

    def test_empty_resolution(self):
        assert generate_field_error_from_error_detail("questions", {"questions": [{}, {}]}) is None

    def test_non_string_field_name(self):
        with pytest.raises(InvalidArgumentError):
            generate_field_error_from_error_detail(["email"], {"email": ["x"]})


class TestGetErrorDetail:

    def test_none(self):
        assert get_error_detail(None) is None

    def test_empty_detail(self):
        assert get_error_detail({"type": "ValidationError", "detail": {}, "fallback_message": ""}) == {}

    def test_mapping_payload(self, validation_error):
        assert get_error_detail(validation_error) is validation_error["detail"]

    def test_model_payload(self, nested_validation_error):
        exception = ApiException.coerce(nested_validation_error)

        assert get_error_detail(exception) is nested_validation_error["detail"]

    @pytest.mark.parametrize("detail", [None, "Not found.", ["a"], 3])
    def test_non_mapping_detail(self, detail):
        assert get_error_detail({"type": "NotFound", "detail": detail}) is None


class TestConvertSnakeCaseToTitleCase:

    @pytest.mark.parametrize(
        "value, expected",
        [("phone_number", "Phone Number"), ("email", "Email"), ("tel_no", "Tel No"), ("a__b", "A  B")],
    )
    def test_conversion(self, value, expected):
        assert convert_snake_case_to_title_case(value) == expected
