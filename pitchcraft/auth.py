"""
Authentication for PitchCraft.

Sessions are owned by Supabase auth. This module only:

    • signs users in, up, and out
    • dispatches password-reset emails
    • resolves the current session into an explicit AuthContext
    • persists session tokens between CLI invocations (SessionStore)

AuthContext is resolved once per command or request and then passed to
every operation that needs the current user or the admin flag.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from supabase import AuthError, AuthRetryableError

from pitchcraft.config import Settings
from pitchcraft.types import SupabaseClientInterface
from pitchcraft.errors import AccessDenied, AuthFailure, SupabaseError

logger = logging.getLogger(__name__)

SIGN_IN_FAILED = (
    "Account not found or password incorrect. If you don't have an account, "
    "please create one using sign up."
)


# ---------------------------------------------------------------------------
# AuthContext
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AuthContext:
    """The authenticated user as seen by one command or request."""

    user_id: str
    email: Optional[str]
    is_admin: bool = False

    @property
    def display_name(self) -> str:
        if not self.email:
            return "User"
        return self.email.split("@")[0] or "User"


# ---------------------------------------------------------------------------
# SessionStore
# ---------------------------------------------------------------------------
class SessionStore:
    """
    JSON file holding the access and refresh tokens of the last sign-in.

    The file is written with user-only permissions.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Optional[Dict[str, str]]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable session file %s", self.path)
            return None
        if not data.get("access_token") or not data.get("refresh_token"):
            return None
        return data

    def save(self, session: Any) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "access_token": session.access_token,
            "refresh_token": session.refresh_token,
        }
        self.path.write_text(json.dumps(payload), encoding="utf-8")
        self.path.chmod(0o600)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


# ---------------------------------------------------------------------------
# AuthService
# ---------------------------------------------------------------------------
class AuthService:
    """
    Wrapper over `client.auth` of a Supabase SDK client (or test double).

    Parameters
    ----------
    client : Any
        The raw Supabase client; None means auth is unavailable and every
        call raises SupabaseError.
    settings : Settings
        Used for the admin email.
    store : SessionStore | None
        Where tokens persist between invocations. None keeps the session
        in memory only (the HTTP app and tests).
    """

    def __init__(
        self,
        client: Optional[SupabaseClientInterface],
        settings: Settings,
        store: Optional[SessionStore] = None,
    ) -> None:
        self.client = client
        self.settings = settings
        self.store = store

    def _auth(self) -> Any:
        if self.client is None:
            raise SupabaseError("Supabase client is not configured")
        return self.client.auth

    def _context(self, user: Any) -> AuthContext:
        email = getattr(user, "email", None)
        return AuthContext(
            user_id=str(user.id),
            email=email.lower() if email else None,
            is_admin=self.settings.is_admin(email),
        )

    # ------------------------------------------------------------------
    # Sign in / up / out
    # ------------------------------------------------------------------
    def sign_in(self, email: str, password: str) -> AuthContext:
        """
        Sign in with email and password.

        Raises
        ------
        AuthFailure
            If the credentials are rejected.
        """
        auth = self._auth()
        try:
            resp = auth.sign_in_with_password({"email": email.strip(), "password": password})
        except AuthError as exc:
            raise AuthFailure(SIGN_IN_FAILED) from exc

        if resp is None or resp.user is None:
            raise AuthFailure(SIGN_IN_FAILED)

        if self.store is not None and resp.session is not None:
            self.store.save(resp.session)
        return self._context(resp.user)

    def sign_up(self, email: str, password: str) -> Optional[AuthContext]:
        """
        Create an account.

        Returns the new AuthContext, or None when the project requires email
        confirmation before a session is issued.
        """
        auth = self._auth()
        try:
            resp = auth.sign_up({"email": email.strip(), "password": password})
        except AuthError as exc:
            raise AuthFailure(str(exc)) from exc

        if resp is None or resp.session is None or resp.user is None:
            return None

        if self.store is not None:
            self.store.save(resp.session)
        return self._context(resp.user)

    def sign_out(self) -> None:
        auth = self._auth()
        try:
            auth.sign_out()
        except AuthError as exc:
            raise AuthFailure(str(exc)) from exc
        finally:
            if self.store is not None:
                self.store.clear()

    def send_password_reset(self, email: str) -> None:
        """Ask Supabase to email a password-reset link."""
        if not email.strip():
            raise AuthFailure("Email is required to reset a password.")
        auth = self._auth()
        try:
            auth.reset_password_for_email(email.strip())
        except AuthError as exc:
            raise AuthFailure(str(exc)) from exc

    # ------------------------------------------------------------------
    # Session resolution
    # ------------------------------------------------------------------
    def current_context(self) -> Optional[AuthContext]:
        """
        Resolve the current session, restoring stored tokens first.

        Returns None when nobody is signed in. Stored tokens that Supabase
        no longer accepts, including a refresh that fails while the session
        is read, are discarded.

        Raises
        ------
        SupabaseError
            If the auth server cannot be reached; the stored session is kept.
        """
        auth = self._auth()

        tokens = self.store.load() if self.store is not None else None
        try:
            if tokens is not None:
                auth.set_session(tokens["access_token"], tokens["refresh_token"])
            session = auth.get_session()
        except AuthRetryableError as exc:
            raise SupabaseError(f"Supabase auth unreachable: {exc}") from exc
        except AuthError as exc:
            logger.warning("Stored session rejected, signing out: %s", exc)
            if self.store is not None:
                self.store.clear()
            return None

        if session is None or getattr(session, "user", None) is None:
            return None

        if self.store is not None:
            # Refreshed tokens replace the stored ones.
            self.store.save(session)
        return self._context(session.user)

    def context_for_token(self, access_token: str) -> Optional[AuthContext]:
        """
        Resolve a bearer token (HTTP requests) without touching the stored session.

        Returns None for a token Supabase rejects. Network failures are not a
        rejection and raise SupabaseError instead.
        """
        auth = self._auth()
        try:
            resp = auth.get_user(access_token)
        except AuthRetryableError as exc:
            raise SupabaseError(f"Supabase auth unreachable: {exc}") from exc
        except AuthError as exc:
            logger.info("Rejected access token: %s", exc)
            return None
        user = getattr(resp, "user", None) if resp is not None else None
        return self._context(user) if user is not None else None

    def require_context(self) -> AuthContext:
        context = self.current_context()
        if context is None:
            raise AccessDenied("Please log in first.")
        return context

    def require_admin(self) -> AuthContext:
        context = self.require_context()
        if not context.is_admin:
            raise AccessDenied("This action is restricted to the admin account.")
        return context

    def on_change(self, callback: Callable[[str, Optional[AuthContext]], None]) -> Any:
        """
        Subscribe to session changes.

        `callback` receives the event name and the new AuthContext (None on
        sign-out). Returns the SDK subscription; call `.unsubscribe()` on it.
        """
        auth = self._auth()

        def _listener(event: Any, session: Any) -> None:
            user = getattr(session, "user", None) if session is not None else None
            callback(str(event), self._context(user) if user is not None else None)

        return auth.on_auth_state_change(_listener)
