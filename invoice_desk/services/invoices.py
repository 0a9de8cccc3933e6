"""
Invoice domain service.

totalAmount is a snapshot: callers compute it (see invoice_desk.billing)
before create/update, and this service stores it untouched.
"""

from typing import Optional, Union
from uuid import uuid4

from invoice_desk.models.audit import AuditEventBuilder
from invoice_desk.models.entities import Invoice, InvoiceCreate, InvoiceUpdate
from invoice_desk.services.base import CollectionService
from invoice_desk.services.storage import INVOICES_KEY


class InvoiceService(CollectionService[Invoice, InvoiceUpdate]):
    """CRUD over the `invoices` collection, scoped by owner."""

    collection = INVOICES_KEY
    entity_type = "invoice"
    model = Invoice
    update_model = InvoiceUpdate

    async def get(self, invoice_id: str) -> Optional[Invoice]:
        """Return one invoice by id, or None if it does not exist."""
        await self._delay()
        for invoice in self._load():
            if invoice.id == invoice_id:
                return invoice
        return None

    async def create(self, data: Union[InvoiceCreate, dict]) -> Invoice:
        """Store a new invoice under a fresh id. Any supplied id is ignored."""
        await self._delay()
        if isinstance(data, InvoiceCreate):
            data = data.model_dump()
        fields = self._validate(InvoiceCreate, data).model_dump()

        invoices = self._load()
        invoice = Invoice(**fields, id=str(uuid4()))
        self._save([*invoices, invoice])
        self._audit(
            AuditEventBuilder.entity_created(self.entity_type, invoice.id, invoice.user_id)
        )
        return invoice
