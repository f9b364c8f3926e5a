from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class RegistrationStatus(str, Enum):
    pending = "Pending"
    confirmed = "Confirmed"
    cancelled = "Cancelled"
    completed = "Completed"

    @classmethod
    def _missing_(cls, value: object) -> RegistrationStatus | None:
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None

    @classmethod
    def parse(cls, value: str | None) -> RegistrationStatus | None:
        """Return the matching status, or ``None`` when ``value`` names none of them."""
        if value is None or not value.strip():
            return None
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(slots=True, frozen=True)
class Registration:
    """An event, course or subscription registration owned by an account."""

    id: str
    account_id: str
    registration_date: datetime
    status: RegistrationStatus
    event_or_course_name: str
    amount: Decimal | None = None
    details: str = ""
