"""Services package."""

from invoice_desk.services.auth import (
    AuthError,
    AuthService,
    InvalidCredentialsError,
)
from invoice_desk.services.base import (
    DEFAULT_LATENCY_SECONDS,
    CollectionService,
    SimulatedLatencyService,
)
from invoice_desk.services.clients import ClientService
from invoice_desk.services.invoices import InvoiceService
from invoice_desk.services.session import SessionState
from invoice_desk.services.storage import (
    CollectionRepository,
    InMemoryStorage,
    JsonFileStorage,
    InvalidRecordError,
    NotFoundError,
    StorageError,
    StoragePort,
    SubstrateUnavailableError,
    TTLStoreGuard,
)

__all__ = [
    # Domain services
    "AuthService",
    "ClientService",
    "CollectionService",
    "InvoiceService",
    "SessionState",
    "SimulatedLatencyService",
    "DEFAULT_LATENCY_SECONDS",
    # Storage
    "CollectionRepository",
    "InMemoryStorage",
    "JsonFileStorage",
    "StoragePort",
    "TTLStoreGuard",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "InvalidRecordError",
    "NotFoundError",
    "StorageError",
    "SubstrateUnavailableError",
]
