"""Startup loading of the static account and registration collections."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

from pydantic import TypeAdapter

from .domain.account import Account, AccountStatus
from .domain.registration import Registration, RegistrationStatus
from .repository import InMemoryDataStore
from .schemas.base import CamelModel

logger = logging.getLogger(__name__)

ACCOUNTS_FILE = "accounts.json"
REGISTRATIONS_FILE = "registrations.json"


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class AccountSeed(CamelModel):
    """Projection of one entry in ``accounts.json``."""

    id: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    status: AccountStatus = AccountStatus.active
    created_at: datetime
    updated_at: datetime | None = None

    def to_domain(self) -> Account:
        created_at = _as_utc(self.created_at)
        updated_at = _as_utc(self.updated_at) if self.updated_at else created_at
        return Account(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            status=self.status,
            created_at=created_at,
            updated_at=max(updated_at, created_at),
        )


class RegistrationSeed(CamelModel):
    """Projection of one entry in ``registrations.json``."""

    id: str
    account_id: str
    registration_date: datetime
    status: RegistrationStatus = RegistrationStatus.pending
    event_or_course_name: str = ""
    amount: Decimal | None = None
    details: str = ""

    def to_domain(self) -> Registration:
        return Registration(
            id=self.id,
            account_id=self.account_id,
            registration_date=_as_utc(self.registration_date),
            status=self.status,
            event_or_course_name=self.event_or_course_name,
            amount=self.amount,
            details=self.details,
        )


_accounts_adapter = TypeAdapter(list[AccountSeed])
_registrations_adapter = TypeAdapter(list[RegistrationSeed])


def _read(path: Path, adapter: TypeAdapter) -> list:
    if not path.is_file():
        logger.warning("seed file %s not found, starting with an empty collection", path)
        return []
    return adapter.validate_json(path.read_bytes())


def load_seed_data(store: InMemoryDataStore, data_dir: str | Path) -> tuple[int, int]:
    """Populate ``store`` from the seed directory and return (accounts, registrations) loaded.

    Missing files leave the matching collection empty. Entries whose id is
    already stored are skipped. Malformed files raise ``pydantic.ValidationError``.
    """
    data_dir = Path(data_dir)

    accounts = 0
    for seed in _read(data_dir / ACCOUNTS_FILE, _accounts_adapter):
        if store.accounts.put(seed.to_domain()):
            accounts += 1

    registrations = 0
    for seed in _read(data_dir / REGISTRATIONS_FILE, _registrations_adapter):
        if store.registrations.put(seed.to_domain()):
            registrations += 1

    logger.info("seeded %d account(s) and %d registration(s) from %s", accounts, registrations, data_dir)
    return accounts, registrations
