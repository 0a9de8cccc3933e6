"""
Shared fixtures.

No real sleeps and no wall clock: every service is built with zero latency
and a FakeClock the tests advance by hand.
"""

from typing import Optional

import pytest

from invoice_desk.api import create_local_api
from invoice_desk.audit import AuditLogger
from invoice_desk.services.storage import (
    CollectionRepository,
    InMemoryStorage,
    StoragePort,
    SubstrateUnavailableError,
    TTLStoreGuard,
)


TTL_MS = 10 * 60 * 1000
START_MS = 1_700_000_000_000


class FakeClock:
    """Epoch-milliseconds clock that only moves when told to."""

    def __init__(self, now: int = START_MS):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class UnavailableStorage(StoragePort):
    """A substrate that fails every operation."""

    def read(self, key: str) -> Optional[str]:
        raise SubstrateUnavailableError("storage disabled")

    def write(self, key: str, value: str) -> None:
        raise SubstrateUnavailableError("storage disabled")

    def remove(self, key: str) -> None:
        raise SubstrateUnavailableError("storage disabled")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def audit_logger() -> AuditLogger:
    return AuditLogger("invoice_desk.tests")


@pytest.fixture
def guard(storage, clock, audit_logger) -> TTLStoreGuard:
    return TTLStoreGuard(storage, ttl_ms=TTL_MS, clock=clock, audit_logger=audit_logger)


@pytest.fixture
def repository(storage, guard, audit_logger) -> CollectionRepository:
    return CollectionRepository(storage, guard, audit_logger=audit_logger)


@pytest.fixture
def api(storage, clock, audit_logger):
    return create_local_api(
        storage=storage,
        ttl_ms=TTL_MS,
        latency_seconds=0,
        clock=clock,
        audit_logger=audit_logger,
    )


@pytest.fixture
def client_data() -> dict:
    return {
        "userId": "user-1",
        "name": "Acme Ltd",
        "email": "billing@acme.test",
        "phone": "555-0100",
        "address": "1 Main St",
    }


@pytest.fixture
def invoice_data() -> dict:
    return {
        "userId": "user-1",
        "clientId": "client-1",
        "invoiceNumber": "INV-000123",
        "date": "2024-12-01",
        "dueDate": "2024-12-08",
        "items": [
            {"id": "1", "description": "Design", "quantity": 2, "price": 50},
            {"id": "2", "description": "Hosting", "quantity": 1, "price": 25},
        ],
        "totalAmount": 137.5,
        "status": "sent",
        "taxRate": 10,
    }


@pytest.fixture
def unavailable_storage() -> UnavailableStorage:
    return UnavailableStorage()
