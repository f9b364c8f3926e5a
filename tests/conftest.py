from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from registration_api.repository import InMemoryDataStore

SMITH_ID = "00000000-0000-4000-8000-000000000001"
JONES_ID = "00000000-0000-4000-8000-000000000002"

SEED_ACCOUNTS = [
    {
        "id": SMITH_ID,
        "firstName": "Anna",
        "lastName": "Smith",
        "email": "anna.smith@example.com",
        "phone": "+1-555-0001",
        "address": "1 First St",
        "status": "Active",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-02T00:00:00Z",
    },
    {
        "id": JONES_ID,
        "firstName": "Bob",
        "lastName": "Jones",
        "email": "bob.jones@example.com",
        "phone": "+1-555-0002",
        "address": "2 Second St",
        "status": "Inactive",
        "createdAt": "2024-01-03T00:00:00Z",
        "updatedAt": "2024-01-03T00:00:00Z",
    },
]

SEED_REGISTRATIONS = [
    {
        "id": "10000000-0000-4000-8000-000000000001",
        "accountId": SMITH_ID,
        "registrationDate": "2024-02-01T00:00:00Z",
        "status": "Pending",
        "eventOrCourseName": "Intro Workshop",
        "amount": 50.0,
        "details": "",
    },
    {
        "id": "10000000-0000-4000-8000-000000000002",
        "accountId": SMITH_ID,
        "registrationDate": "2024-03-01T00:00:00Z",
        "status": "Confirmed",
        "eventOrCourseName": "Advanced Workshop",
        "amount": 150.0,
        "details": "second seat",
    },
    {
        "id": "10000000-0000-4000-8000-000000000003",
        "accountId": JONES_ID,
        "registrationDate": "2024-02-15T00:00:00Z",
        "status": "Completed",
        "eventOrCourseName": "Evening Course",
        "amount": None,
        "details": "",
    },
]


@pytest.fixture
def seed_dir(tmp_path: Path) -> Path:
    """Write a small, known seed set and return its directory."""
    (tmp_path / "accounts.json").write_text(json.dumps(SEED_ACCOUNTS), encoding="utf-8")
    (tmp_path / "registrations.json").write_text(json.dumps(SEED_REGISTRATIONS), encoding="utf-8")
    return tmp_path


class TickingClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def store() -> InMemoryDataStore:
    return InMemoryDataStore()
