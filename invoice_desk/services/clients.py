"""Client domain service."""

from datetime import datetime, timezone
from typing import Union
from uuid import uuid4

from invoice_desk.models.audit import AuditEventBuilder
from invoice_desk.models.entities import Client, ClientCreate, ClientUpdate
from invoice_desk.services.base import CollectionService
from invoice_desk.services.storage import CLIENTS_KEY


class ClientService(CollectionService[Client, ClientUpdate]):
    """CRUD over the `clients` collection, scoped by owner."""

    collection = CLIENTS_KEY
    entity_type = "client"
    model = Client
    update_model = ClientUpdate

    async def create(self, data: Union[ClientCreate, dict]) -> Client:
        """
        Create a client with a fresh id and creation timestamp.

        Any id/createdAt present in the payload is ignored.

        Raises:
            InvalidRecordError: If a required field is missing or malformed
        """
        await self._delay()
        if isinstance(data, ClientCreate):
            data = data.model_dump()
        fields = self._validate(ClientCreate, data).model_dump()

        clients = self._load()
        client = Client(
            **fields,
            id=str(uuid4()),
            created_at=datetime.now(timezone.utc),
        )
        self._save([*clients, client])
        self._audit(AuditEventBuilder.entity_created(self.entity_type, client.id, client.user_id))
        return client
