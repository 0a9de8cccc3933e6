"""
Auth / Session Service

This is a stub, not a credential system: login accepts exactly one demo
credential pair and register always succeeds. The signed-in user is kept
under the `session` key.

DESIGN DECISION: the session is NOT governed by the TTL Store Guard. It
lives until logout even after the clients/invoices window has lapsed, so
the session and the collections are two independently-lifecycled stores
behind the same storage port.
"""

import json
from typing import Optional

from pydantic import ValidationError

from invoice_desk.audit import AuditLogger
from invoice_desk.models.audit import AuditEventBuilder
from invoice_desk.models.entities import AuthResult, User
from invoice_desk.services.base import DEFAULT_LATENCY_SECONDS, SimulatedLatencyService
from invoice_desk.services.storage import (
    SESSION_KEY,
    StoragePort,
    SubstrateUnavailableError,
)


DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "password"
DEMO_USER_ID = "user-1"
SESSION_TOKEN = "mock-session-token"


class AuthError(Exception):
    """Base exception for auth operations."""
    pass


class InvalidCredentialsError(AuthError):
    """Login attempted with a non-matching email/password pair."""
    pass


class AuthService(SimulatedLatencyService):
    """Login/register/logout against the demo credential pair."""

    def __init__(
        self,
        storage: StoragePort,
        demo_email: str = DEMO_EMAIL,
        demo_password: str = DEMO_PASSWORD,
        session_token: str = SESSION_TOKEN,
        latency_seconds: float = DEFAULT_LATENCY_SECONDS,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(latency_seconds=latency_seconds, audit_logger=audit_logger)
        self._storage = storage
        self._demo_email = demo_email
        self._demo_password = demo_password
        self._session_token = session_token

    def _persist_session(self, user: User) -> AuthResult:
        self._storage.write(SESSION_KEY, json.dumps(user.to_store_dict()))
        return AuthResult(user=user, session=self._session_token)

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Sign in with the demo credentials.

        Raises:
            InvalidCredentialsError: For any other email/password pair
        """
        await self._delay()
        if email != self._demo_email or password != self._demo_password:
            self._audit(AuditEventBuilder.login_failed(email))
            raise InvalidCredentialsError("Invalid credentials")

        user = User(
            id=DEMO_USER_ID,
            email=email,
            name="Demo User",
            business_name="My Freelance Biz",
            theme_color="blue",
        )
        result = self._persist_session(user)
        self._audit(AuditEventBuilder.user_logged_in(user.id, email))
        return result

    async def register(self, email: str, password: str, name: str) -> AuthResult:
        """
        Create a session for a new user.

        Always succeeds; there is no account registry to check against.
        """
        await self._delay()
        user = User(
            id=DEMO_USER_ID,
            email=email,
            name=name,
            business_name="New Business",
            theme_color="blue",
        )
        result = self._persist_session(user)
        self._audit(AuditEventBuilder.user_registered(user.id, email))
        return result

    async def logout(self) -> None:
        """Clear the session."""
        await self._delay()
        self._storage.remove(SESSION_KEY)
        self._audit(AuditEventBuilder.user_logged_out())

    async def get_current_user(self) -> Optional[User]:
        """The signed-in user, or None if there is no (readable) session."""
        await self._delay()
        try:
            raw = self._storage.read(SESSION_KEY)
        except SubstrateUnavailableError as e:
            self._audit(AuditEventBuilder.substrate_unavailable("read", SESSION_KEY, str(e)))
            return None
        if not raw:
            return None
        try:
            return User.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            self._audit(AuditEventBuilder.payload_corrupt(SESSION_KEY, str(e)))
            return None
