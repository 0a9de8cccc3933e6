"""
Collection Repository

Full-collection get/put over the key/value substrate. Every read is gated
by the TTL Store Guard; every write refreshes the activity window.

There is no partial or merge semantics here: callers read the whole
collection, change it, and write the whole collection back. Merge logic
belongs to the domain services.
"""

import json
from typing import Optional, TypeVar

from pydantic import ValidationError

from invoice_desk.audit import AuditLogger
from invoice_desk.models.audit import AuditEventBuilder
from invoice_desk.models.entities import StoreModel
from invoice_desk.services.storage.interface import (
    TTL_COLLECTIONS,
    StoragePort,
    SubstrateUnavailableError,
)
from invoice_desk.services.storage.ttl_guard import TTLStoreGuard


ModelT = TypeVar("ModelT", bound=StoreModel)


class CollectionRepository:
    """Typed read/write of the named collections (`clients`, `invoices`)."""

    def __init__(
        self,
        storage: StoragePort,
        guard: TTLStoreGuard,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._storage = storage
        self._guard = guard
        self._audit_logger = audit_logger

    @staticmethod
    def _check_collection(collection: str) -> None:
        if collection not in TTL_COLLECTIONS:
            raise ValueError(
                f"Unknown collection: {collection!r}. Expected one of {TTL_COLLECTIONS}"
            )

    def read(self, collection: str) -> list[dict]:
        """
        Read a whole collection as raw dicts.

        Returns an empty list if the window just expired, nothing is stored,
        the payload is corrupt, or the substrate is unavailable.
        """
        self._check_collection(collection)
        try:
            if self._guard.check_and_reset():
                return []
            raw = self._storage.read(collection)
        except SubstrateUnavailableError as e:
            if self._audit_logger:
                self._audit_logger.log(
                    AuditEventBuilder.substrate_unavailable("read", collection, str(e))
                )
            return []

        if not raw:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            if self._audit_logger:
                self._audit_logger.log(AuditEventBuilder.payload_corrupt(collection, str(e)))
            return []

        if not isinstance(data, list):
            if self._audit_logger:
                self._audit_logger.log(
                    AuditEventBuilder.payload_corrupt(collection, "payload is not a list")
                )
            return []
        return data

    def write(self, collection: str, items: list[dict]) -> None:
        """
        Replace a whole collection, then refresh the activity timestamp.

        Raises:
            SubstrateUnavailableError: If the substrate cannot be written
        """
        self._check_collection(collection)
        try:
            self._storage.write(collection, json.dumps(items))
            self._guard.touch()
        except SubstrateUnavailableError as e:
            if self._audit_logger:
                self._audit_logger.log(
                    AuditEventBuilder.substrate_unavailable("write", collection, str(e))
                )
            raise

    def read_models(self, collection: str, model: type[ModelT]) -> list[ModelT]:
        """
        Read a collection and parse every record into `model`.

        Records that do not fit the model are skipped and logged as corrupt.
        The next write of the collection drops them.
        """
        records = []
        for index, item in enumerate(self.read(collection)):
            try:
                records.append(model.model_validate(item))
            except ValidationError as e:
                if self._audit_logger:
                    self._audit_logger.log(
                        AuditEventBuilder.payload_corrupt(
                            collection, f"record {index}: {e.error_count()} field error(s)"
                        )
                    )
        return records

    def write_models(self, collection: str, models: list[StoreModel]) -> None:
        """Serialize models with their persisted (camelCase) keys and write them."""
        self.write(collection, [m.to_store_dict() for m in models])
