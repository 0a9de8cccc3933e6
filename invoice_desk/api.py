"""
Local API

The single object UI collaborators talk to. It groups the three services
the way a remote backend client would:

    api.auth.login / register / logout / get_current_user
    api.clients.list / create / update / delete
    api.invoices.list / get / create / update / delete

All of them share one storage port; clients and invoices also share one
TTL guard, so activity on either collection keeps both alive.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from invoice_desk.audit import AuditLogger, configure_logging
from invoice_desk.config import get_settings
from invoice_desk.models.audit import AuditEventBuilder
from invoice_desk.services.auth import AuthService
from invoice_desk.services.clients import ClientService
from invoice_desk.services.invoices import InvoiceService
from invoice_desk.services.storage import (
    CollectionRepository,
    InMemoryStorage,
    JsonFileStorage,
    TIMESTAMP_KEY,
    StoragePort,
    SubstrateUnavailableError,
    TTLStoreGuard,
    epoch_millis,
)


@dataclass
class LocalApi:
    """The service boundary (auth, clients, invoices) plus its guard and store."""

    auth: AuthService
    clients: ClientService
    invoices: InvoiceService
    guard: TTLStoreGuard
    storage: StoragePort


def create_storage(backend: str, file_path: Optional[str] = None) -> StoragePort:
    """Build the configured substrate."""
    if backend == "memory":
        return InMemoryStorage()
    if backend == "file":
        if not file_path:
            raise ValueError("The 'file' backend needs a file path")
        return JsonFileStorage(file_path)
    raise ValueError(f"Unknown storage backend: {backend}")


def create_local_api(
    storage: Optional[StoragePort] = None,
    ttl_ms: Optional[int] = None,
    latency_seconds: Optional[float] = None,
    clock: Callable[[], int] = epoch_millis,
    audit_logger: Optional[AuditLogger] = None,
) -> LocalApi:
    """
    Factory function to create all service components.

    Anything not passed explicitly comes from settings (environment / .env).

    Args:
        storage: Substrate to use. Defaults to the configured backend.
        ttl_ms: Inactivity window for clients/invoices.
        latency_seconds: Simulated latency per call (0 disables it).
        clock: Epoch-milliseconds clock for the TTL guard.
        audit_logger: Audit sink. Defaults to a structlog-backed logger.

    Returns:
        LocalApi with auth, clients and invoices wired to one store
    """
    settings = get_settings()
    store_settings = settings.store

    if audit_logger is None:
        configure_logging(settings.app.log_level)
        audit_logger = AuditLogger()
    if storage is None:
        storage = create_storage(store_settings.backend, store_settings.file_path)
    if ttl_ms is None:
        ttl_ms = store_settings.ttl_ms
    if latency_seconds is None:
        latency_seconds = store_settings.latency_seconds

    guard = TTLStoreGuard(storage, ttl_ms=ttl_ms, clock=clock, audit_logger=audit_logger)
    # Open the first window at startup; stale data from a previous run is dropped here.
    try:
        guard.check_and_reset()
    except SubstrateUnavailableError as e:
        audit_logger.log(AuditEventBuilder.substrate_unavailable("startup", TIMESTAMP_KEY, str(e)))

    repository = CollectionRepository(storage, guard, audit_logger=audit_logger)
    auth_settings = settings.auth

    return LocalApi(
        auth=AuthService(
            storage,
            demo_email=auth_settings.demo_email,
            demo_password=auth_settings.demo_password,
            session_token=auth_settings.session_token,
            latency_seconds=latency_seconds,
            audit_logger=audit_logger,
        ),
        clients=ClientService(
            repository, latency_seconds=latency_seconds, audit_logger=audit_logger
        ),
        invoices=InvoiceService(
            repository, latency_seconds=latency_seconds, audit_logger=audit_logger
        ),
        guard=guard,
        storage=storage,
    )
