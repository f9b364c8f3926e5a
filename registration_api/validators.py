"""Field-level validation rules for request payloads.

Each rule is a ``(field, check, message)`` triple. ``field`` is the camelCase
name the client sent, ``check`` returns ``True`` when the payload passes, and
``message`` is reported under ``field`` when it does not. Rules run in order
and every failure is collected, so one field can report several messages.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from email_validator import EmailNotValidError, validate_email

from .schemas.account import AccountRequest
from .schemas.registration import CreateRegistrationRequest

Check = Callable[[Any], bool]
Rule = tuple[str, Check, str]
ValidationErrors = dict[str, list[str]]

MAX_AMOUNT_DIGITS = 15


def run_rules(rules: Sequence[Rule], payload: Any) -> ValidationErrors:
    errors: ValidationErrors = {}
    for field, check, message in rules:
        if not check(payload):
            errors.setdefault(field, []).append(message)
    return errors


def _required(attr: str) -> Check:
    return lambda payload: bool((getattr(payload, attr) or "").strip())


def _max_length(attr: str, limit: int) -> Check:
    return lambda payload: len(getattr(payload, attr) or "") <= limit


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _valid_email_if_present(payload: AccountRequest) -> bool:
    return not payload.email.strip() or _is_email(payload.email.strip())


def _non_negative_amount(payload: CreateRegistrationRequest) -> bool:
    return payload.amount is None or payload.amount >= 0


def _representable_amount(payload: CreateRegistrationRequest) -> bool:
    # amounts go out as JSON numbers; 15 digits survive a float exactly
    if payload.amount is None:
        return True
    return len(payload.amount.normalize().as_tuple().digits) <= MAX_AMOUNT_DIGITS


ACCOUNT_RULES: list[Rule] = [
    ("firstName", _required("first_name"), "First name is required."),
    ("firstName", _max_length("first_name", 100), "First name must not exceed 100 characters."),
    ("lastName", _required("last_name"), "Last name is required."),
    ("lastName", _max_length("last_name", 100), "Last name must not exceed 100 characters."),
    ("email", _required("email"), "Email is required."),
    ("email", _valid_email_if_present, "A valid email address is required."),
    ("email", _max_length("email", 256), "Email must not exceed 256 characters."),
    ("phone", _max_length("phone", 30), "Phone must not exceed 30 characters."),
    ("address", _max_length("address", 500), "Address must not exceed 500 characters."),
]

REGISTRATION_RULES: list[Rule] = [
    ("accountId", _required("account_id"), "AccountId is required."),
    ("eventOrCourseName", _required("event_or_course_name"), "Event or course name is required."),
    (
        "eventOrCourseName",
        _max_length("event_or_course_name", 200),
        "Event or course name must not exceed 200 characters.",
    ),
    ("amount", _non_negative_amount, "Amount must be zero or a positive value."),
    ("amount", _representable_amount, "Amount must not exceed 15 significant digits."),
    ("details", _max_length("details", 1000), "Details must not exceed 1000 characters."),
]


def validate_account_request(payload: AccountRequest) -> ValidationErrors:
    """Validate a create or update account payload."""
    return run_rules(ACCOUNT_RULES, payload)


def validate_registration_request(payload: CreateRegistrationRequest) -> ValidationErrors:
    return run_rules(REGISTRATION_RULES, payload)
