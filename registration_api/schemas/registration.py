"""Registration request and response DTOs."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import ValidationError, ValidatorFunctionWrapHandler, field_validator
from pydantic_core import PydanticCustomError

from .base import CamelModel
from ..domain.contracts import CreateRegistrationInput
from ..domain.registration import Registration, RegistrationStatus


class CreateRegistrationRequest(CamelModel):
    """Payload for registering an existing account for an event or course."""

    account_id: str = ""
    status: RegistrationStatus = RegistrationStatus.pending
    event_or_course_name: str = ""
    amount: Decimal | None = None
    details: str = ""

    @field_validator("account_id", "event_or_course_name", "details", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("status", mode="wrap")
    @classmethod
    def _known_status(cls, value: object, handler: ValidatorFunctionWrapHandler) -> RegistrationStatus:
        try:
            return handler(value)
        except ValidationError:
            raise PydanticCustomError(
                "status", "Status must be Pending, Confirmed, Cancelled, or Completed."
            ) from None

    def to_input(self) -> CreateRegistrationInput:
        return CreateRegistrationInput(
            account_id=self.account_id.strip(),
            event_or_course_name=self.event_or_course_name,
            status=self.status,
            amount=self.amount,
            details=self.details,
        )


class RegistrationResponse(CamelModel):
    """Registration data returned by API endpoints."""

    id: str
    account_id: str
    registration_date: datetime
    status: RegistrationStatus
    event_or_course_name: str
    amount: float | None = None
    details: str = ""

    @classmethod
    def from_domain(cls, registration: Registration) -> "RegistrationResponse":
        return cls(
            id=registration.id,
            account_id=registration.account_id,
            registration_date=registration.registration_date,
            status=registration.status,
            event_or_course_name=registration.event_or_course_name,
            amount=float(registration.amount) if registration.amount is not None else None,
            details=registration.details,
        )
