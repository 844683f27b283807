# tests/test_models.py

import pytest
from pydantic import ValidationError

from app.models.users import UserIn, describe_error, validation_message


def _message_for(payload):
    with pytest.raises(ValidationError) as exc_info:
        UserIn.model_validate(payload)
    return validation_message(exc_info.value)


def test_valid_name_is_accepted():
    assert UserIn.model_validate({"name": "Ana"}).name == "Ana"


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"name": "Al"}, '"name" length must be at least 3 characters long'),
        ({"name": ""}, '"name" length must be at least 3 characters long'),
        ({}, '"name" is required'),
        ({"name": None}, '"name" must be a string'),
        ({"name": 123}, '"name" must be a string'),
        (None, "request body must be a JSON object"),
        ("Alice", "request body must be a JSON object"),
    ],
)
def test_rejections_carry_a_readable_message(payload, expected):
    assert _message_for(payload) == expected


def test_malformed_json_error_names_no_field():
    error = {"loc": (1,), "type": "json_invalid", "msg": "JSON decode error"}
    assert describe_error(error) == "request body must be valid JSON"
