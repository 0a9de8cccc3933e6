"""
Storage Services Package

Provides the key/value storage port, its in-memory and JSON-file
implementations, the TTL guard and the collection repository built on them.
"""

from invoice_desk.services.storage.interface import (
    CLIENTS_KEY,
    INVOICES_KEY,
    SESSION_KEY,
    TIMESTAMP_KEY,
    TTL_COLLECTIONS,
    InvalidRecordError,
    NotFoundError,
    StorageError,
    StoragePort,
    SubstrateUnavailableError,
)
from invoice_desk.services.storage.memory import InMemoryStorage
from invoice_desk.services.storage.file_store import JsonFileStorage
from invoice_desk.services.storage.ttl_guard import (
    DEFAULT_TTL_MS,
    TTLStoreGuard,
    epoch_millis,
)
from invoice_desk.services.storage.repository import CollectionRepository

__all__ = [
    # Keys
    "CLIENTS_KEY",
    "INVOICES_KEY",
    "SESSION_KEY",
    "TIMESTAMP_KEY",
    "TTL_COLLECTIONS",
    # Interface
    "StoragePort",
    # Exceptions
    "InvalidRecordError",
    "NotFoundError",
    "StorageError",
    "SubstrateUnavailableError",
    # Implementations
    "InMemoryStorage",
    "JsonFileStorage",
    # TTL + repository
    "DEFAULT_TTL_MS",
    "TTLStoreGuard",
    "epoch_millis",
    "CollectionRepository",
]
