"""Account and registration workflows over the in-memory store."""

from __future__ import annotations

import dataclasses
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from .account import Account
from .contracts import AccountInput, CreateRegistrationInput
from .pagination import Page, paginate
from .registration import Registration, RegistrationStatus
from .. import metrics
from ..repository import InMemoryDataStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class AccountDetail:
    """An account together with its registrations, newest first."""

    account: Account
    registrations: list[Registration] = field(default_factory=list)


def _registrations_for(store: InMemoryDataStore, account_id: str) -> list[Registration]:
    matches = [r for r in store.registrations.values() if r.account_id == account_id]
    matches.sort(key=lambda r: r.registration_date, reverse=True)
    return matches


class AccountService:
    """Account workflows backed by the in-memory store."""

    def __init__(self, store: InMemoryDataStore, clock: Clock = utcnow) -> None:
        """Store dependencies used to query and mutate accounts."""
        self._store = store
        self._clock = clock

    def list_accounts(
        self,
        page: int | None = None,
        page_size: int | None = None,
        search: str | None = None,
    ) -> Page[Account]:
        """Return one page of accounts ordered by last name, then first name.

        Parameters
        ----------
        page:
            1-based page number; values below 1 are treated as 1.
        page_size:
            Items per page, capped at 100; values below 1 fall back to 10.
        search:
            Optional case-insensitive substring matched against first name,
            last name and email. Blank terms disable the filter.
        """
        accounts = self._store.accounts.values()

        term = (search or "").strip().lower()
        if term:
            accounts = [
                a
                for a in accounts
                if term in a.first_name.lower()
                or term in a.last_name.lower()
                or term in a.email.lower()
            ]

        accounts.sort(key=lambda a: (a.last_name.casefold(), a.first_name.casefold()))
        return paginate(accounts, page, page_size)

    def get_account(self, account_id: str) -> AccountDetail | None:
        """Retrieve an account and its registrations, or ``None`` when absent."""
        account = self._store.accounts.get(account_id)
        if account is None:
            return None
        return AccountDetail(account=account, registrations=_registrations_for(self._store, account_id))

    def exists(self, account_id: str) -> bool:
        return account_id in self._store.accounts

    def create_account(self, payload: AccountInput) -> Account:
        """Create an account with a fresh id and matching created/updated timestamps."""
        now = self._clock()
        account = Account(
            id=str(uuid.uuid4()),
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            phone=payload.phone,
            address=payload.address,
            status=payload.status,
            created_at=now,
            updated_at=now,
        )
        self._store.accounts.put(account)
        metrics.ACCOUNTS_CREATED.inc()
        logger.info("account %s created", account.id)
        return account

    def update_account(self, account_id: str, payload: AccountInput) -> Account | None:
        """Replace every mutable field of an existing account.

        Returns ``None`` when the account does not exist; a missing id is
        never created.
        """
        now = self._clock()

        def _apply(existing: Account) -> Account:
            return dataclasses.replace(
                existing,
                first_name=payload.first_name,
                last_name=payload.last_name,
                email=payload.email,
                phone=payload.phone,
                address=payload.address,
                status=payload.status,
                updated_at=max(now, existing.created_at),
            )

        updated = self._store.accounts.replace_in_place(account_id, _apply)
        if updated is not None:
            logger.info("account %s updated", account_id)
        return updated

    def delete_account(self, account_id: str) -> bool:
        """Delete an account and cascade to its registrations.

        The account goes first, then all of its registrations in one pass
        over the registration map. The two removals are not one transaction.
        """
        if not self._store.accounts.remove(account_id):
            return False
        removed = self._store.registrations.remove_where(lambda r: r.account_id == account_id)
        metrics.ACCOUNTS_DELETED.inc()
        metrics.REGISTRATIONS_CASCADED.inc(removed)
        logger.info("account %s deleted with %d registration(s)", account_id, removed)
        return True


class RegistrationService:
    """Registration workflows backed by the in-memory store."""

    def __init__(self, store: InMemoryDataStore, clock: Clock = utcnow) -> None:
        self._store = store
        self._clock = clock

    def list_registrations(
        self,
        page: int | None = None,
        page_size: int | None = None,
        account_id: str | None = None,
        status: str | None = None,
    ) -> Page[Registration]:
        """Return one page of registrations, newest first.

        An unrecognised ``status`` is ignored rather than rejected, so the
        result matches an unfiltered query.
        """
        registrations = self._store.registrations.values()

        if account_id:
            registrations = [r for r in registrations if r.account_id == account_id]

        parsed_status = RegistrationStatus.parse(status)
        if parsed_status is not None:
            registrations = [r for r in registrations if r.status is parsed_status]
        elif status and status.strip():
            logger.debug("ignoring unknown registration status filter %r", status)

        registrations.sort(key=lambda r: r.registration_date, reverse=True)
        return paginate(registrations, page, page_size)

    def list_for_account(self, account_id: str) -> list[Registration]:
        """Return every registration of one account, newest first."""
        return _registrations_for(self._store, account_id)

    def create_registration(self, payload: CreateRegistrationInput) -> Registration | None:
        """Create a registration for an existing account.

        Returns ``None`` and leaves the store untouched when ``account_id``
        does not refer to a stored account.
        """
        if payload.account_id not in self._store.accounts:
            return None

        registration = Registration(
            id=str(uuid.uuid4()),
            account_id=payload.account_id,
            registration_date=self._clock(),
            status=payload.status,
            event_or_course_name=payload.event_or_course_name,
            amount=payload.amount,
            details=payload.details,
        )
        self._store.registrations.put(registration)
        metrics.REGISTRATIONS_CREATED.inc()
        logger.info("registration %s created for account %s", registration.id, registration.account_id)
        return registration
