"""
Audit Logger

Every state change in the store and every failure surfaced to a caller is
logged as a structured event. This gives:
1. Traceability of what happened to the demo data (including TTL resets)
2. Debugging capability when a read silently degrades to "no data"

The audit logger never raises: logging must not change the outcome of the
store operation that triggered it.
"""

import logging
from typing import Optional

import structlog

from invoice_desk.models.audit import AuditEvent, AuditSeverity


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog (JSON lines over stdlib logging)."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, log_level), force=True)
    logging.getLogger("invoice_desk").setLevel(getattr(logging, log_level))
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()


class AuditLogger:
    """
    Central audit logging service.

    Emits each AuditEvent to the structured local log at the level
    matching its severity.
    """

    def __init__(self, logger_name: str = "invoice_desk.audit"):
        self._logger = structlog.get_logger(logger_name)
        self._last_event: Optional[AuditEvent] = None

    @property
    def last_event(self) -> Optional[AuditEvent]:
        """Most recent event logged through this instance."""
        return self._last_event

    def log(self, event: AuditEvent) -> None:
        """Log an audit event."""
        self._last_event = event
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)
