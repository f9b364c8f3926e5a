"""Prometheus counters for store mutations."""

from __future__ import annotations

from prometheus_client import Counter

ACCOUNTS_CREATED = Counter("accounts_created_total", "Accounts created through the API")
ACCOUNTS_DELETED = Counter("accounts_deleted_total", "Accounts deleted through the API")
REGISTRATIONS_CREATED = Counter("registrations_created_total", "Registrations created through the API")
REGISTRATIONS_CASCADED = Counter(
    "registrations_cascade_deleted_total",
    "Registrations removed because their account was deleted",
)
