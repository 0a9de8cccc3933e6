"""
Tests for Invoice Desk

Test strategy:
1. Unit tests for models, TTL guard, repository and computation
2. Service tests against an in-memory store with a fake clock
3. No real sleeps (latency is set to 0)
"""

import json
from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from invoice_desk.models.entities import (
    Client,
    ClientCreate,
    ClientUpdate,
    Invoice,
    InvoiceCreate,
    InvoiceItem,
    InvoiceStatus,
    InvoiceUpdate,
    User,
)
from invoice_desk.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)


class TestEntityModels:
    """Tests for the persisted entity models."""

    def test_client_create_accepts_camel_case(self):
        """Test ClientCreate parses the persisted key names."""
        data = ClientCreate.model_validate(
            {"userId": "user-1", "name": "Acme", "email": "a@acme.test"}
        )
        assert data.user_id == "user-1"
        assert data.phone is None

    def test_client_create_accepts_snake_case(self):
        """Test ClientCreate also accepts Python attribute names."""
        data = ClientCreate(user_id="user-1", name="Acme", email="a@acme.test")
        assert data.user_id == "user-1"

    def test_client_strings_kept_verbatim(self):
        """Test that surrounding whitespace and empty names are stored as given."""
        data = ClientCreate(user_id="user-1", name="  Acme  ", email=" a@acme.test\n")
        assert data.name == "  Acme  "
        assert data.email == " a@acme.test\n"
        assert ClientCreate(user_id="user-1", name="", email="").name == ""

    def test_client_requires_owner(self):
        """Test that a missing userId is rejected."""
        with pytest.raises(ValidationError):
            ClientCreate(name="Acme", email="a@acme.test")

    def test_client_store_dict_uses_camel_case_and_omits_none(self):
        """Test serialization to the stored JSON shape."""
        client = Client(
            id="c-1",
            user_id="user-1",
            name="Acme",
            email="a@acme.test",
            created_at=datetime(2024, 12, 1, 9, 30, tzinfo=timezone.utc),
        )
        stored = client.to_store_dict()
        assert stored["userId"] == "user-1"
        assert "createdAt" in stored
        assert "phone" not in stored
        json.dumps(stored)

    def test_client_round_trips_through_store_dict(self):
        """Test a stored client parses back to an equal model."""
        client = Client(
            id="c-1",
            user_id="user-1",
            name="Acme",
            email="a@acme.test",
            phone="555",
            created_at=datetime(2024, 12, 1, 9, 30, tzinfo=timezone.utc),
        )
        assert Client.model_validate(client.to_store_dict()) == client

    def test_invoice_parses_dates_and_items(self, invoice_data):
        """Test InvoiceCreate parses ISO dates and nested items."""
        invoice = InvoiceCreate.model_validate(invoice_data)
        assert invoice.date == date(2024, 12, 1)
        assert invoice.due_date == date(2024, 12, 8)
        assert invoice.items[0] == InvoiceItem(id="1", description="Design", quantity=2, price=50)
        assert invoice.status == InvoiceStatus.SENT

    def test_invoice_store_dict_keeps_iso_dates(self, invoice_data):
        """Test dates are written back as ISO strings."""
        invoice = Invoice(**InvoiceCreate.model_validate(invoice_data).model_dump(), id="i-1")
        stored = invoice.to_store_dict()
        assert stored["date"] == "2024-12-01"
        assert stored["dueDate"] == "2024-12-08"
        assert stored["totalAmount"] == 137.5
        assert stored["taxRate"] == 10

    def test_invoice_defaults(self):
        """Test status defaults to draft and items to empty."""
        invoice = InvoiceCreate(
            user_id="user-1",
            client_id="c-1",
            invoice_number="INV-1",
            date=date(2024, 1, 1),
            due_date=date(2024, 1, 8),
            total_amount=0,
        )
        assert invoice.status == InvoiceStatus.DRAFT
        assert invoice.items == []
        assert invoice.tax_rate is None

    def test_invoice_rejects_unknown_status(self, invoice_data):
        """Test status must be one of draft/sent/paid/overdue."""
        invoice_data["status"] = "cancelled"
        with pytest.raises(ValidationError):
            InvoiceCreate.model_validate(invoice_data)

    def test_item_quantity_may_be_fractional(self):
        """Test fractional quantities are kept as floats."""
        item = InvoiceItem(id="1", description="Consulting", quantity=1.5, price=80)
        assert item.quantity == 1.5

    def test_update_tracks_only_supplied_fields(self):
        """Test exclude_unset shows only the fields the caller sent."""
        update = ClientUpdate.model_validate({"name": "X"})
        assert update.model_dump(exclude_unset=True) == {"name": "X"}

    def test_update_ignores_id(self):
        """Test an update payload cannot carry a new id."""
        update = InvoiceUpdate.model_validate({"id": "other", "notes": "hi"})
        assert update.model_dump(exclude_unset=True) == {"notes": "hi"}

    def test_user_optional_profile_fields(self):
        """Test User business-profile fields are optional."""
        user = User(id="user-1", email="demo@example.com", name="Demo User")
        assert user.business_name is None
        assert user.to_store_dict() == {
            "id": "user-1",
            "email": "demo@example.com",
            "name": "Demo User",
        }


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.CLIENT_CREATED,
            description="Client created",
        )
        assert event.event_type == AuditEventType.CLIENT_CREATED
        assert event.severity == AuditSeverity.INFO

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEventBuilder.entity_created("invoice", "i-1", "user-1")
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "invoice_created"
        assert log_dict["entity_id"] == "i-1"
        assert log_dict["details"]["user_id"] == "user-1"

    def test_store_reset_event(self):
        """Test AuditEventBuilder.store_reset."""
        event = AuditEventBuilder.store_reset(["clients", "invoices"], None)
        assert event.event_type == AuditEventType.STORE_RESET
        assert event.details["collections"] == ["clients", "invoices"]

    def test_login_failed_is_warning(self):
        """Test AuditEventBuilder.login_failed severity."""
        event = AuditEventBuilder.login_failed("x@example.com")
        assert event.event_type == AuditEventType.LOGIN_FAILED
        assert event.severity == AuditSeverity.WARNING

    def test_delete_of_unknown_id(self):
        """Test delete events record whether anything was removed."""
        event = AuditEventBuilder.entity_deleted("client", "missing", existed=False)
        assert event.event_type == AuditEventType.CLIENT_DELETED
        assert event.details == {"existed": False}


class TestInvoiceStatus:
    """Tests for the invoice status enum."""

    def test_all_statuses_exist(self):
        """Test that expected statuses exist."""
        for status in ["draft", "sent", "paid", "overdue"]:
            assert InvoiceStatus(status) is not None

    def test_status_values(self):
        """Test status string values."""
        assert InvoiceStatus.PAID.value == "paid"
        assert InvoiceStatus.OVERDUE.value == "overdue"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
