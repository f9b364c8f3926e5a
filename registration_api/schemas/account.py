"""Account request and response DTOs."""

from __future__ import annotations

from datetime import datetime

from pydantic import ValidationError, ValidatorFunctionWrapHandler, field_validator
from pydantic_core import PydanticCustomError

from .base import CamelModel
from .registration import RegistrationResponse
from ..domain.account import Account, AccountStatus
from ..domain.contracts import AccountInput
from ..domain.service import AccountDetail


class AccountRequest(CamelModel):
    """Client-supplied account fields; server-assigned fields are never read."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    status: AccountStatus = AccountStatus.active

    @field_validator("first_name", "last_name", "email", "phone", "address", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("status", mode="wrap")
    @classmethod
    def _known_status(cls, value: object, handler: ValidatorFunctionWrapHandler) -> AccountStatus:
        try:
            return handler(value)
        except ValidationError:
            raise PydanticCustomError("status", "Status must be Active, Inactive, or Suspended.") from None

    def to_input(self) -> AccountInput:
        return AccountInput(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            status=self.status,
        )


class CreateAccountRequest(AccountRequest):
    """Payload accepted when creating an account."""


class UpdateAccountRequest(AccountRequest):
    """Payload accepted when replacing an account's mutable fields."""


class AccountResponse(CamelModel):
    """Serialised representation of an `Account` aggregate."""

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    status: AccountStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, account: Account) -> "AccountResponse":
        """Build a response model from the domain aggregate."""
        return cls(
            id=account.id,
            first_name=account.first_name,
            last_name=account.last_name,
            email=account.email,
            phone=account.phone,
            address=account.address,
            status=account.status,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class AccountDetailResponse(AccountResponse):
    """Account view returned by the single-account endpoint, with its registrations."""

    registrations: list[RegistrationResponse] = []

    @classmethod
    def from_detail(cls, detail: AccountDetail) -> "AccountDetailResponse":
        base = AccountResponse.from_domain(detail.account)
        return cls(
            **base.model_dump(),
            registrations=[RegistrationResponse.from_domain(r) for r in detail.registrations],
        )
