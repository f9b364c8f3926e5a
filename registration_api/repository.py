"""In-memory storage for account and registration records."""

from __future__ import annotations

from threading import Lock
from typing import Callable, Generic, Protocol, TypeVar

from .domain.account import Account
from .domain.registration import Registration


class _Identified(Protocol):
    @property
    def id(self) -> str: ...


R = TypeVar("R", bound=_Identified)


class RecordMap(Generic[R]):
    """Thread-safe mapping of record id to record.

    Every operation holds the lock only for its own duration, so operations
    on a single id are linearizable while no caller blocks another for longer
    than one dictionary access.
    """

    def __init__(self) -> None:
        self._records: dict[str, R] = {}
        self._lock = Lock()

    def get(self, record_id: str) -> R | None:
        with self._lock:
            return self._records.get(record_id)

    def put(self, record: R) -> bool:
        """Insert ``record`` unless its id is already taken; return ``True`` when inserted."""
        with self._lock:
            if record.id in self._records:
                return False
            self._records[record.id] = record
            return True

    def replace_in_place(self, record_id: str, mutator: Callable[[R], R]) -> R | None:
        """Swap the stored record for ``mutator(record)`` and return the new record.

        Returns ``None`` without calling ``mutator`` when ``record_id`` is absent.
        """
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            updated = mutator(current)
            self._records[record_id] = updated
            return updated

    def remove(self, record_id: str) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def remove_where(self, predicate: Callable[[R], bool]) -> int:
        """Remove every record matching ``predicate`` and return how many went."""
        with self._lock:
            doomed = [key for key, record in self._records.items() if predicate(record)]
            for key in doomed:
                del self._records[key]
            return len(doomed)

    def values(self) -> list[R]:
        """Return a snapshot of the stored records in insertion order."""
        with self._lock:
            return list(self._records.values())

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class InMemoryDataStore:
    """Process-wide holder for the account and registration collections."""

    def __init__(self) -> None:
        self.accounts: RecordMap[Account] = RecordMap()
        self.registrations: RecordMap[Registration] = RecordMap()
