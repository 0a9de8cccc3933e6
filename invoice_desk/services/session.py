"""Client-side view of the auth session."""

from typing import Optional

from invoice_desk.models.entities import User
from invoice_desk.services.auth import AuthService


class SessionState:
    """
    Tracks who is signed in for a UI collaborator.

    Wraps AuthService calls and keeps `user`, `is_authenticated` and
    `is_loading` in step with them. `is_loading` starts True until the first
    check_session() and is always cleared after a call finishes, even when
    login fails.
    """

    def __init__(self, auth: AuthService):
        self._auth = auth
        self.user: Optional[User] = None
        self.is_authenticated = False
        self.is_loading = True

    def _set_user(self, user: Optional[User]) -> None:
        self.user = user
        self.is_authenticated = user is not None

    async def login(self, email: str, password: str) -> None:
        self.is_loading = True
        try:
            result = await self._auth.login(email, password)
            self._set_user(result.user)
        finally:
            self.is_loading = False

    async def register(self, email: str, password: str, name: str) -> None:
        self.is_loading = True
        try:
            result = await self._auth.register(email, password, name)
            self._set_user(result.user)
        finally:
            self.is_loading = False

    async def logout(self) -> None:
        self.is_loading = True
        try:
            await self._auth.logout()
            self._set_user(None)
        finally:
            self.is_loading = False

    async def check_session(self) -> None:
        """Restore state from the persisted session, if any."""
        self.is_loading = True
        try:
            self._set_user(await self._auth.get_current_user())
        finally:
            self.is_loading = False
