"""
HTTP adapter for the lab backend REST API.

Every outgoing request goes through `ApiClient`, which attaches the bearer token
read from the token store and maps failures onto a small exception taxonomy.
A 401 from any endpoint notifies the registered listeners (the session store
evicts the session) before `AuthExpired` is raised to the caller.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3001/api"


class ApiError(RuntimeError):
    """Base class for failed backend calls."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, payload: Any | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class AuthExpired(ApiError):
    """The backend answered 401; the session has already been evicted."""


class ValidationRejected(ApiError):
    """The request was refused (4xx other than 401). The message is user-facing."""


class TransportFailure(ApiError):
    """Network error or 5xx answer. The caller should offer a retry."""


class SecondaryEffectFailure(ApiError):
    """A best-effort follow-up write failed. The primary write still stands."""


@dataclass(slots=True)
class ApiConfig:
    """Connection details for the backend."""

    base_url: str = DEFAULT_API_URL
    request_timeout: int = 30
    user_agent: str = "LabPortal/0.1"

    @classmethod
    def from_env(cls) -> "ApiConfig":
        return cls(
            base_url=os.getenv("LAB_PORTAL_API_URL", DEFAULT_API_URL),
            request_timeout=int(os.getenv("LAB_PORTAL_TIMEOUT", "30")),
        )


class ApiClient:
    """
    Thin JSON client for the backend.

    The token is looked up through `token_provider` on every request so that a
    sign-out or eviction is visible to the very next call.
    """

    def __init__(
        self,
        *,
        config: ApiConfig,
        token_provider: Callable[[], Optional[str]],
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._timeout = config.request_timeout
        self._token_provider = token_provider
        self._unauthorized_listeners: List[Callable[[], None]] = []
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "Content-Type": "application/json",
                "User-Agent": config.user_agent,
            }
        )
        logger.info("Initialising ApiClient for %s", self._base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    def add_unauthorized_listener(self, listener: Callable[[], None]) -> None:
        self._unauthorized_listeners.append(listener)

    def endpoint(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def login_url(self) -> str:
        return self.endpoint("auth/google")

    # ------------------------------------------------------------------
    # Auth endpoints
    # ------------------------------------------------------------------
    def get_profile(self) -> Dict[str, Any]:
        data = self.get("auth/profile")
        if not isinstance(data, dict):
            raise ValidationRejected("Profile response was not an object.", payload=data)
        return data

    def logout(self) -> None:
        self.post("auth/logout")

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------
    def get(self, path: str) -> Any:
        return self._request("GET", path)

    def post(self, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("POST", path, payload=payload)

    def patch(self, path: str, payload: Dict[str, Any]) -> Any:
        return self._request("PATCH", path, payload=payload)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        url = self.endpoint(path)
        headers: Dict[str, str] = {}
        token = self._token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        logger.debug("%s %s payload=%s", method, url, payload)
        try:
            response = self._session.request(
                method,
                url,
                json=payload,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.exceptions.RequestException as exc:
            logger.exception("%s %s failed: %s", method, url, exc)
            raise TransportFailure(f"Could not reach the server: {exc}") from exc

        logger.info("%s %s -> %s", method, url, response.status_code)
        if response.status_code == 401:
            self._notify_unauthorized()
            raise AuthExpired("Your session has expired. Please sign in again.", status_code=401)
        if response.status_code >= 500:
            logger.error("Server error on %s %s: %s", method, url, response.text)
            raise TransportFailure(
                "The server could not complete the request. Please try again.",
                status_code=response.status_code,
            )
        if response.status_code >= 400:
            body = self._decode(response)
            message = self._error_message(body) or f"Request rejected ({response.status_code})."
            logger.warning("%s %s rejected: %s", method, url, message)
            raise ValidationRejected(message, status_code=response.status_code, payload=body)

        return self._decode(response)

    def _notify_unauthorized(self) -> None:
        logger.warning("Backend answered 401; evicting session.")
        for listener in list(self._unauthorized_listeners):
            listener()

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.debug("Non-JSON response body: %s", response.text)
            return None

    @staticmethod
    def _error_message(body: Any) -> Optional[str]:
        if not isinstance(body, dict):
            return None
        message = body.get("message") or body.get("error")
        if isinstance(message, list):
            return "; ".join(str(item) for item in message if item)
        return str(message) if message else None
