"""
Data Models Package

This package contains all Pydantic models used by the Invoice Desk
data-service layer. Everything written to the store conforms to these schemas.
"""

from invoice_desk.models.entities import (
    AuthResult,
    Client,
    ClientCreate,
    ClientUpdate,
    Invoice,
    InvoiceCreate,
    InvoiceItem,
    InvoiceStatus,
    InvoiceUpdate,
    StoreModel,
    User,
)
from invoice_desk.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Entity models
    "AuthResult",
    "Client",
    "ClientCreate",
    "ClientUpdate",
    "Invoice",
    "InvoiceCreate",
    "InvoiceItem",
    "InvoiceStatus",
    "InvoiceUpdate",
    "StoreModel",
    "User",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
