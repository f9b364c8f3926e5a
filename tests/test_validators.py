from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from registration_api.schemas import CreateAccountRequest, CreateRegistrationRequest
from registration_api.validators import (
    run_rules,
    validate_account_request,
    validate_registration_request,
)


def _valid_account(**overrides) -> CreateAccountRequest:
    fields = {
        "firstName": "Grace",
        "lastName": "Hopper",
        "email": "grace.hopper@example.com",
        "phone": "+1-555-0100",
        "address": "1 Harbor Way",
    }
    fields.update(overrides)
    return CreateAccountRequest.model_validate(fields)


def test_valid_account_has_no_errors():
    assert validate_account_request(_valid_account()) == {}


def test_blank_names_are_required():
    errors = validate_account_request(_valid_account(firstName="   ", lastName=""))
    assert errors == {
        "firstName": ["First name is required."],
        "lastName": ["Last name is required."],
    }


def test_length_limits():
    errors = validate_account_request(
        _valid_account(firstName="x" * 101, phone="9" * 31, address="a" * 501)
    )
    assert errors["firstName"] == ["First name must not exceed 100 characters."]
    assert errors["phone"] == ["Phone must not exceed 30 characters."]
    assert errors["address"] == ["Address must not exceed 500 characters."]


def test_email_rules():
    assert validate_account_request(_valid_account(email=""))["email"] == ["Email is required."]
    assert validate_account_request(_valid_account(email="not-an-email"))["email"] == [
        "A valid email address is required."
    ]
    long_email = "a" * 250 + "@example.com"
    assert "Email must not exceed 256 characters." in validate_account_request(
        _valid_account(email=long_email)
    )["email"]


def test_null_text_fields_are_treated_as_empty():
    payload = CreateAccountRequest.model_validate(
        {"firstName": None, "lastName": "Hopper", "email": "grace@example.com", "phone": None}
    )
    assert payload.phone == ""
    assert validate_account_request(payload) == {"firstName": ["First name is required."]}


def test_registration_rules():
    payload = CreateRegistrationRequest.model_validate(
        {
            "accountId": "",
            "eventOrCourseName": "y" * 201,
            "amount": -5,
            "details": "z" * 1001,
        }
    )
    assert validate_registration_request(payload) == {
        "accountId": ["AccountId is required."],
        "eventOrCourseName": ["Event or course name must not exceed 200 characters."],
        "amount": ["Amount must be zero or a positive value."],
        "details": ["Details must not exceed 1000 characters."],
    }


def test_zero_and_missing_amounts_are_allowed():
    for amount in (None, 0, "0.00"):
        payload = CreateRegistrationRequest.model_validate(
            {"accountId": "acc", "eventOrCourseName": "Course", "amount": amount}
        )
        assert validate_registration_request(payload) == {}
    assert CreateRegistrationRequest.model_validate(
        {"accountId": "acc", "eventOrCourseName": "Course", "amount": "0.00"}
    ).amount == Decimal("0.00")


def test_run_rules_collects_every_failure_in_order():
    rules = [
        ("a", lambda p: False, "first"),
        ("b", lambda p: True, "never"),
        ("a", lambda p: False, "second"),
    ]
    assert run_rules(rules, object()) == {"a": ["first", "second"]}


def test_amount_limited_to_fifteen_significant_digits():
    def _errors(amount):
        payload = CreateRegistrationRequest.model_validate(
            {"accountId": "acc", "eventOrCourseName": "Course", "amount": amount}
        )
        return validate_registration_request(payload)

    assert _errors("123456789012.345") == {}
    assert _errors("1000000000000000000") == {}
    assert _errors("12345678901234567.89") == {
        "amount": ["Amount must not exceed 15 significant digits."]
    }


@pytest.mark.parametrize(
    ("model", "fields", "message"),
    [
        (
            CreateAccountRequest,
            {"firstName": "Grace", "status": "Retired"},
            "Status must be Active, Inactive, or Suspended.",
        ),
        (
            CreateRegistrationRequest,
            {"accountId": "acc", "status": None},
            "Status must be Pending, Confirmed, Cancelled, or Completed.",
        ),
    ],
)
def test_unknown_status_reports_allowed_values(model, fields, message):
    with pytest.raises(ValidationError) as excinfo:
        model.model_validate(fields)
    [error] = excinfo.value.errors()
    assert error["loc"] == ("status",)
    assert error["msg"] == message
