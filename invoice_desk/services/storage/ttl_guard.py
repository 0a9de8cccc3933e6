"""
TTL Store Guard

Bounds the lifetime of the client and invoice collections to a rolling
inactivity window. A single last-activity timestamp lives next to the
data under `data_timestamp`:

- Before every collection read, check_and_reset() wipes both collections
  if the timestamp is missing or older than the TTL, then starts a new window.
- After every collection write, touch() moves the timestamp to now, so the
  window slides with activity.

The session key is deliberately outside this policy.
"""

import time
from typing import Callable, Optional

from invoice_desk.audit import AuditLogger
from invoice_desk.models.audit import AuditEventBuilder
from invoice_desk.services.storage.interface import (
    TIMESTAMP_KEY,
    TTL_COLLECTIONS,
    StoragePort,
)


DEFAULT_TTL_MS = 10 * 60 * 1000


def epoch_millis() -> int:
    """Wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class TTLStoreGuard:
    """Decides on each access whether the stored collections have expired."""

    def __init__(
        self,
        storage: StoragePort,
        ttl_ms: int = DEFAULT_TTL_MS,
        clock: Callable[[], int] = epoch_millis,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._storage = storage
        self._ttl_ms = ttl_ms
        self._clock = clock
        self._audit_logger = audit_logger

    @property
    def ttl_ms(self) -> int:
        return self._ttl_ms

    def last_activity(self) -> Optional[int]:
        """Stored last-activity time, or None if absent or unparseable."""
        raw = self._storage.read(TIMESTAMP_KEY)
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            return None

    def is_expired(self, now: Optional[int] = None) -> bool:
        last = self.last_activity()
        if last is None:
            return True
        now = self._clock() if now is None else now
        return now - last > self._ttl_ms

    def check_and_reset(self) -> bool:
        """
        Wipe the TTL-bound collections if the window has lapsed.

        Returns:
            True if a reset happened (callers must treat the data as empty)

        Raises:
            SubstrateUnavailableError: If the substrate cannot be accessed
        """
        now = self._clock()
        last = self.last_activity()
        if last is not None and now - last <= self._ttl_ms:
            return False

        for key in TTL_COLLECTIONS:
            self._storage.remove(key)
        self._storage.write(TIMESTAMP_KEY, str(now))

        if self._audit_logger:
            self._audit_logger.log(
                AuditEventBuilder.store_reset(list(TTL_COLLECTIONS), last)
            )
        return True

    def touch(self) -> None:
        """Record activity now, extending the window."""
        self._storage.write(TIMESTAMP_KEY, str(self._clock()))
