"""Tests for the lock-guarded in-memory record maps."""

from __future__ import annotations

import dataclasses
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from registration_api.domain.account import Account, AccountStatus
from registration_api.repository import RecordMap

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _account(account_id: str, last_name: str = "Doe") -> Account:
    return Account(
        id=account_id,
        first_name="Jane",
        last_name=last_name,
        email=f"{account_id}@example.com",
        phone="",
        address="",
        status=AccountStatus.active,
        created_at=NOW,
        updated_at=NOW,
    )


def test_put_never_overwrites_existing_id():
    records: RecordMap[Account] = RecordMap()
    assert records.put(_account("a", "First"))
    assert not records.put(_account("a", "Second"))
    assert records.get("a").last_name == "First"
    assert len(records) == 1


def test_replace_in_place_is_visible_to_later_reads():
    records: RecordMap[Account] = RecordMap()
    records.put(_account("a"))

    updated = records.replace_in_place("a", lambda acc: dataclasses.replace(acc, last_name="Roe"))

    assert updated.last_name == "Roe"
    assert records.get("a").last_name == "Roe"


def test_replace_in_place_skips_missing_ids():
    records: RecordMap[Account] = RecordMap()
    calls = []

    result = records.replace_in_place("missing", lambda acc: calls.append(acc) or acc)

    assert result is None
    assert calls == []
    assert "missing" not in records


def test_remove_reports_presence():
    records: RecordMap[Account] = RecordMap()
    records.put(_account("a"))
    assert records.remove("a") is True
    assert records.remove("a") is False
    assert records.get("a") is None


def test_remove_where_drops_matching_records():
    records: RecordMap[Account] = RecordMap()
    for key, last in [("a", "Doe"), ("b", "Roe"), ("c", "Doe")]:
        records.put(_account(key, last))

    assert records.remove_where(lambda acc: acc.last_name == "Doe") == 2
    assert [acc.id for acc in records.values()] == ["b"]


def test_values_is_a_snapshot():
    records: RecordMap[Account] = RecordMap()
    records.put(_account("a"))
    snapshot = records.values()

    records.put(_account("b"))
    records.remove("a")

    assert [acc.id for acc in snapshot] == ["a"]
    assert [acc.id for acc in records.values()] == ["b"]


def test_concurrent_writers_and_readers():
    records: RecordMap[Account] = RecordMap()

    def _write(index: int) -> None:
        records.put(_account(f"acc-{index}"))
        records.replace_in_place(f"acc-{index}", lambda acc: dataclasses.replace(acc, last_name="Done"))
        records.values()

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(_write, range(400)))

    assert len(records) == 400
    assert all(acc.last_name == "Done" for acc in records.values())
