"""
Abstract Storage Interface

DESIGN DECISION: The key/value substrate is an injected port rather than a
process-wide singleton. This allows us to:
1. Use in-memory storage for testing
2. Use a JSON file as a single local "profile"
3. Swap in a real backend later without touching domain logic

The interface is intentionally tiny: string keys, string values. JSON
encoding and TTL policy live above it.
"""

from abc import ABC, abstractmethod
from typing import Optional


# Logical keys in the shared substrate
SESSION_KEY = "session"
CLIENTS_KEY = "clients"
INVOICES_KEY = "invoices"
TIMESTAMP_KEY = "data_timestamp"

# Collections bound by the TTL window
TTL_COLLECTIONS = (CLIENTS_KEY, INVOICES_KEY)


class StoragePort(ABC):
    """
    Abstract interface for a key/value substrate.

    Implementations must raise SubstrateUnavailableError when the
    underlying medium cannot be read or written.
    """

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """
        Read the raw value stored under a key.

        Returns:
            The stored string, or None if the key is absent

        Raises:
            SubstrateUnavailableError: If the medium cannot be read
        """
        pass

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """
        Store a raw value under a key, replacing any previous value.

        Raises:
            SubstrateUnavailableError: If the medium cannot be written
        """
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """
        Remove a key. Removing an absent key is not an error.

        Raises:
            SubstrateUnavailableError: If the medium cannot be written
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Entity not found in storage."""
    pass


class SubstrateUnavailableError(StorageError):
    """The key/value medium could not be read or written."""
    pass


class InvalidRecordError(StorageError):
    """A payload, or the record it would produce, does not fit the entity schema."""
    pass
