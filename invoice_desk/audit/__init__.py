"""Audit logging package."""

from invoice_desk.audit.logger import AuditLogger, configure_logging

__all__ = ["AuditLogger", "configure_logging"]
