"""
Session store: who is signed in, and whether they are an administrator.

State machine::

    UNINITIALIZED -> LOADING -> AUTHENTICATED | ANONYMOUS
    AUTHENTICATED -> ANONYMOUS   (sign-out or any 401)

The only way into AUTHENTICATED is a full `complete_auth` cycle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Protocol

from .api_client import ApiClient, ApiError

logger = logging.getLogger(__name__)

LANDING_ROUTE = "home"
ADMIN_ROUTE = "admin"


class TokenStore(Protocol):
    def read_token(self) -> Optional[str]: ...

    def read_profile(self) -> Optional[Dict[str, Any]]: ...

    def save_token(self, token: str) -> None: ...

    def save_profile(self, profile: Dict[str, Any]) -> None: ...

    def clear(self) -> None: ...


class AuthState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


@dataclass(frozen=True, slots=True)
class Session:
    """Authenticated identity for the current browser session."""

    user_id: str
    email: str
    display_name: str
    role: str
    auth_token: str
    avatar_url: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @classmethod
    def from_profile(cls, profile: Dict[str, Any], token: str) -> "Session":
        user_id = profile.get("id")
        if not user_id:
            raise ValueError("Profile has no id.")
        email = str(profile.get("email") or "")
        return cls(
            user_id=str(user_id),
            email=email,
            display_name=str(profile.get("fullName") or profile.get("full_name") or email),
            role="admin" if profile.get("role") == "admin" else "member",
            auth_token=token,
            avatar_url=profile.get("avatarUrl") or profile.get("avatar_url"),
        )


class SessionStore:
    """Holds the current `Session` and drives sign-in, sign-out and eviction."""

    def __init__(self, *, client: ApiClient, token_store: TokenStore) -> None:
        self._client = client
        self._token_store = token_store
        self._redirect: Optional[str] = None
        self._session: Optional[Session] = None
        self._state = AuthState.UNINITIALIZED
        client.add_unauthorized_listener(self.evict)

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state in (AuthState.UNINITIALIZED, AuthState.LOADING)

    @property
    def is_admin(self) -> bool:
        return self._session is not None and self._session.is_admin

    def take_redirect(self) -> Optional[str]:
        """Route the UI must move to after a sign-out or eviction, at most once."""
        route, self._redirect = self._redirect, None
        return route

    def boot(self) -> None:
        """Rehydrate from the persisted token. Runs once; later calls are no-ops."""
        if self._state is not AuthState.UNINITIALIZED:
            return
        self._state = AuthState.LOADING
        token = self._token_store.read_token()
        if token:
            logger.info("Persisted token found; rehydrating session.")
            self.complete_auth(token)
        else:
            self._state = AuthState.ANONYMOUS

    def sign_in(self) -> str:
        """Return the external login URL; the session is set on the callback."""
        return self._client.login_url()

    def complete_auth(self, token: str) -> bool:
        self._state = AuthState.LOADING
        self._token_store.save_token(token)
        try:
            profile = self._client.get_profile()
            session = Session.from_profile(profile, token)
        except (ApiError, ValueError) as exc:
            logger.error("Error fetching user profile: %s", exc)
            self._token_store.clear()
            self._session = None
            self._state = AuthState.ANONYMOUS
            return False

        self._token_store.save_profile(profile)
        self._session = session
        self._state = AuthState.AUTHENTICATED
        logger.info("Signed in as %s (%s)", session.email, session.role)
        return True

    def sign_out(self) -> None:
        try:
            self._client.logout()
        except ApiError as exc:
            logger.warning("Error during logout: %s", exc)
        finally:
            self._clear()
            self._go(LANDING_ROUTE)

    def evict(self) -> None:
        """Drop the session after a 401 from any call."""
        if self._session is not None:
            logger.info("Evicting session for %s", self._session.email)
        self._clear()
        self._go(LANDING_ROUTE)

    def _clear(self) -> None:
        self._token_store.clear()
        self._session = None
        self._state = AuthState.ANONYMOUS

    def _go(self, route: str) -> None:
        # may run on a dashboard worker thread; the UI applies it on the next render
        self._redirect = route
