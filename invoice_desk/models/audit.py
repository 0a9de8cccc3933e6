"""
Audit Models for Invoice Desk

Every state change in the data-service layer produces an audit event:
entity writes, store resets, session changes, and failures surfaced to
callers. Events go to the structured log only; they are not persisted
in the key/value store.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Store lifecycle
    STORE_RESET = "store_reset"
    SUBSTRATE_UNAVAILABLE = "substrate_unavailable"
    STORE_PAYLOAD_CORRUPT = "store_payload_corrupt"

    # Clients
    CLIENT_CREATED = "client_created"
    CLIENT_UPDATED = "client_updated"
    CLIENT_DELETED = "client_deleted"

    # Invoices
    INVOICE_CREATED = "invoice_created"
    INVOICE_UPDATED = "invoice_updated"
    INVOICE_DELETED = "invoice_deleted"

    # Session
    USER_LOGGED_IN = "user_logged_in"
    USER_REGISTERED = "user_registered"
    USER_LOGGED_OUT = "user_logged_out"
    LOGIN_FAILED = "login_failed"

    # Failures surfaced to callers
    ENTITY_NOT_FOUND = "entity_not_found"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    """

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType
    severity: AuditSeverity = AuditSeverity.INFO

    # What entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'client', 'invoice', 'session')"
    )
    entity_id: Optional[str] = None

    description: str = Field(..., max_length=500)
    details: dict[str, Any] = Field(default_factory=dict)

    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.entity_created("client", client.id, user_id)
        event = AuditEventBuilder.login_failed(email)
    """

    _CREATED = {
        "client": AuditEventType.CLIENT_CREATED,
        "invoice": AuditEventType.INVOICE_CREATED,
    }
    _UPDATED = {
        "client": AuditEventType.CLIENT_UPDATED,
        "invoice": AuditEventType.INVOICE_UPDATED,
    }
    _DELETED = {
        "client": AuditEventType.CLIENT_DELETED,
        "invoice": AuditEventType.INVOICE_DELETED,
    }

    @staticmethod
    def store_reset(collections: list[str], last_activity_ms: Optional[int]) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORE_RESET,
            entity_type="store",
            description="Stored collections expired and were cleared",
            details={
                "collections": collections,
                "last_activity_ms": last_activity_ms,
            },
        )

    @staticmethod
    def substrate_unavailable(operation: str, key: str, error: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SUBSTRATE_UNAVAILABLE,
            severity=AuditSeverity.ERROR,
            entity_type="store",
            entity_id=key,
            description=f"Storage substrate unavailable during {operation}",
            details={"operation": operation},
            error_message=error,
        )

    @staticmethod
    def payload_corrupt(key: str, error: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORE_PAYLOAD_CORRUPT,
            severity=AuditSeverity.WARNING,
            entity_type="store",
            entity_id=key,
            description=f"Stored payload under '{key}' could not be decoded",
            error_message=error,
        )

    @classmethod
    def entity_created(cls, entity_type: str, entity_id: str, user_id: str) -> AuditEvent:
        return AuditEvent(
            event_type=cls._CREATED[entity_type],
            entity_type=entity_type,
            entity_id=entity_id,
            description=f"{entity_type.capitalize()} created",
            details={"user_id": user_id},
        )

    @classmethod
    def entity_updated(cls, entity_type: str, entity_id: str, fields: list[str]) -> AuditEvent:
        return AuditEvent(
            event_type=cls._UPDATED[entity_type],
            entity_type=entity_type,
            entity_id=entity_id,
            description=f"{entity_type.capitalize()} updated",
            details={"fields": fields},
        )

    @classmethod
    def entity_deleted(cls, entity_type: str, entity_id: str, existed: bool) -> AuditEvent:
        return AuditEvent(
            event_type=cls._DELETED[entity_type],
            entity_type=entity_type,
            entity_id=entity_id,
            description=(
                f"{entity_type.capitalize()} deleted"
                if existed
                else f"{entity_type.capitalize()} delete requested for unknown id"
            ),
            details={"existed": existed},
        )

    @staticmethod
    def entity_not_found(entity_type: str, entity_id: str, operation: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ENTITY_NOT_FOUND,
            severity=AuditSeverity.WARNING,
            entity_type=entity_type,
            entity_id=entity_id,
            description=f"{entity_type.capitalize()} not found for {operation}",
            details={"operation": operation},
        )

    @staticmethod
    def user_logged_in(user_id: str, email: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.USER_LOGGED_IN,
            entity_type="session",
            entity_id=user_id,
            description="User logged in",
            details={"email": email},
        )

    @staticmethod
    def user_registered(user_id: str, email: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.USER_REGISTERED,
            entity_type="session",
            entity_id=user_id,
            description="User registered",
            details={"email": email},
        )

    @staticmethod
    def user_logged_out() -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.USER_LOGGED_OUT,
            entity_type="session",
            description="Session cleared",
        )

    @staticmethod
    def login_failed(email: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOGIN_FAILED,
            severity=AuditSeverity.WARNING,
            entity_type="session",
            description="Login rejected: invalid credentials",
            details={"email": email},
        )
