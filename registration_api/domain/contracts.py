"""Domain-level request contracts shared by multiple layers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .account import AccountStatus
from .registration import RegistrationStatus


@dataclass(slots=True)
class AccountInput:
    """Validated, client-supplied account fields used for create and full replace."""

    first_name: str
    last_name: str
    email: str
    phone: str = ""
    address: str = ""
    status: AccountStatus = AccountStatus.active


@dataclass(slots=True)
class CreateRegistrationInput:
    """Validated inputs required to register an account for an event or course."""

    account_id: str
    event_or_course_name: str
    status: RegistrationStatus = RegistrationStatus.pending
    amount: Decimal | None = None
    details: str = ""
