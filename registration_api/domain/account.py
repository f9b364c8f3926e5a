from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AccountStatus(str, Enum):
    active = "Active"
    inactive = "Inactive"
    suspended = "Suspended"

    @classmethod
    def _missing_(cls, value: object) -> AccountStatus | None:
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None


@dataclass(slots=True, frozen=True)
class Account:
    """Aggregate root for a user or organization account."""

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    status: AccountStatus
    created_at: datetime
    updated_at: datetime
