"""
Core Data Models for Invoice Desk

These models define the schemas for everything persisted by the local
data-service layer. They are designed to:
1. Round-trip through JSON with the camelCase keys used by the store
2. Separate "what the caller supplies" (Create/Update payloads) from
   "what the service owns" (id, createdAt)
3. Keep totalAmount as a caller-supplied snapshot, never derived here

DESIGN DECISION: Python attributes are snake_case, persisted keys are
camelCase. Every model accepts either spelling on input.
"""

import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StoreModel(BaseModel):
    """Base for all persisted models: camelCase aliases on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_store_dict(self) -> dict:
        """JSON-ready dict using persisted key names, omitting unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# =============================================================================
# ENUMS
# =============================================================================

class InvoiceStatus(str, Enum):
    """Lifecycle status of an invoice."""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


# =============================================================================
# USER / SESSION
# =============================================================================

class User(StoreModel):
    """
    The signed-in user.

    Lives only under the `session` key. Not part of the TTL-bound
    collections.
    """

    id: str
    email: str
    name: str
    business_name: Optional[str] = None
    business_address: Optional[str] = None
    logo_url: Optional[str] = None
    theme_color: Optional[str] = None


class AuthResult(BaseModel):
    """Returned by login/register."""

    user: User
    session: str


# =============================================================================
# CLIENTS
# =============================================================================

class ClientCreate(StoreModel):
    """Fields a caller supplies when creating a client."""

    user_id: str = Field(
        ...,
        description="Owner of this client (filter key, not a foreign key)"
    )
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None


class Client(ClientCreate):
    """A stored client. `id` and `created_at` are assigned by the service."""

    id: str
    created_at: dt.datetime


class ClientUpdate(StoreModel):
    """
    Partial update for a client.

    Only fields explicitly set are merged. `id` and `created_at` are not
    updatable.
    """

    user_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


# =============================================================================
# INVOICES
# =============================================================================

class InvoiceItem(StoreModel):
    """
    A single line on an invoice.

    `id` is assigned by the caller and only identifies the row for display.
    """

    id: str
    description: str = ""
    quantity: float = 1
    price: float = 0


class InvoiceCreate(StoreModel):
    """Fields a caller supplies when creating an invoice."""

    user_id: str
    client_id: str = Field(
        ...,
        description="Soft reference to a Client; existence is not checked"
    )
    invoice_number: str
    date: dt.date
    due_date: dt.date
    items: list[InvoiceItem] = Field(default_factory=list)
    total_amount: float = Field(
        ...,
        description="Snapshot computed by the caller at save time"
    )
    status: InvoiceStatus = InvoiceStatus.DRAFT
    notes: Optional[str] = None
    tax_rate: Optional[float] = Field(
        default=None,
        description="Tax percentage; absent means 0"
    )


class Invoice(InvoiceCreate):
    """A stored invoice. `id` is assigned by the service."""

    id: str


class InvoiceUpdate(StoreModel):
    """
    Partial update for an invoice.

    totalAmount is NOT re-derived when items or taxRate change; callers
    that edit items must send a fresh totalAmount themselves.
    """

    user_id: Optional[str] = None
    client_id: Optional[str] = None
    invoice_number: Optional[str] = None
    date: Optional[dt.date] = None
    due_date: Optional[dt.date] = None
    items: Optional[list[InvoiceItem]] = None
    total_amount: Optional[float] = None
    status: Optional[InvoiceStatus] = None
    notes: Optional[str] = None
    tax_rate: Optional[float] = None
