"""
Shared plumbing for the domain services.

Every service call awaits one fixed simulated latency before touching the
substrate. After that the call is synchronous read-modify-write with no
locking: two overlapping calls can both read the same snapshot and the later
write wins.
"""

import asyncio
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import ValidationError

from invoice_desk.audit import AuditLogger
from invoice_desk.models.audit import AuditEventBuilder
from invoice_desk.models.entities import StoreModel
from invoice_desk.services.storage import (
    CollectionRepository,
    InvalidRecordError,
    NotFoundError,
)


DEFAULT_LATENCY_SECONDS = 0.5

EntityT = TypeVar("EntityT", bound=StoreModel)
UpdateT = TypeVar("UpdateT", bound=StoreModel)


class SimulatedLatencyService:
    """Base for services that emulate a remote backend's response time."""

    def __init__(
        self,
        latency_seconds: float = DEFAULT_LATENCY_SECONDS,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._latency_seconds = latency_seconds
        self._audit_logger = audit_logger

    async def _delay(self) -> None:
        await asyncio.sleep(self._latency_seconds)

    def _audit(self, event) -> None:
        if self._audit_logger:
            self._audit_logger.log(event)


class CollectionService(SimulatedLatencyService, Generic[EntityT, UpdateT]):
    """
    List/update/delete over one TTL-bound collection.

    Subclasses set the collection name, the stored model and the update
    payload model, and implement create().
    """

    collection: str
    entity_type: str
    model: type[EntityT]
    update_model: type[UpdateT]

    def __init__(
        self,
        repository: CollectionRepository,
        latency_seconds: float = DEFAULT_LATENCY_SECONDS,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(latency_seconds=latency_seconds, audit_logger=audit_logger)
        self._repository = repository

    def _validate(self, model: type[StoreModel], data: Any) -> StoreModel:
        """
        Parse `data` into `model`.

        Raises:
            InvalidRecordError: If the data does not fit the model
        """
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise InvalidRecordError(
                f"Invalid {self.entity_type}: {e.error_count()} field error(s)"
            ) from e

    def _load(self) -> list[EntityT]:
        return self._repository.read_models(self.collection, self.model)

    def _save(self, records: list[EntityT]) -> None:
        self._repository.write_models(self.collection, records)

    async def list(self, user_id: str) -> list[EntityT]:
        """All records owned by `user_id`, in insertion order."""
        await self._delay()
        return [record for record in self._load() if record.user_id == user_id]

    async def update(self, entity_id: str, data: Union[UpdateT, dict]) -> EntityT:
        """
        Shallow-merge the explicitly supplied fields over a stored record.

        Explicit None clears an optional field. Required fields cannot be
        cleared.

        Raises:
            NotFoundError: If no record has this id
            InvalidRecordError: If the payload or the merged record does not
                fit the entity schema
        """
        await self._delay()
        if not isinstance(data, self.update_model):
            data = self._validate(self.update_model, data)
        changes = data.model_dump(exclude_unset=True)

        records = self._load()
        for index, record in enumerate(records):
            if record.id == entity_id:
                merged = self._validate(self.model, {**record.model_dump(), **changes})
                records[index] = merged
                self._save(records)
                self._audit(
                    AuditEventBuilder.entity_updated(self.entity_type, entity_id, sorted(changes))
                )
                return merged

        self._audit(AuditEventBuilder.entity_not_found(self.entity_type, entity_id, "update"))
        raise NotFoundError(f"{self.entity_type.capitalize()} not found: {entity_id}")

    async def delete(self, entity_id: str) -> None:
        """Remove a record by id. Unknown ids are ignored."""
        await self._delay()
        records = self._load()
        remaining = [record for record in records if record.id != entity_id]
        self._save(remaining)
        self._audit(
            AuditEventBuilder.entity_deleted(
                self.entity_type, entity_id, existed=len(remaining) != len(records)
            )
        )
