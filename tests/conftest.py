"""Shared pytest fixtures for the test suite.

The real `ApiClient` runs end to end against `FakeBackend`, an in-memory
transport adapter mounted on the `requests.Session`, so no test touches the
network.

Fixture overview
----------------
backend        - in-memory REST backend (four collections plus auth endpoints)
config         - `ApiConfig` pointing at the fake backend
token_store    - empty in-memory token store
container      - fully wired `PortalContainer` for one browser session
admin          - the same container after a successful admin sign-in
"""

from __future__ import annotations

import pytest
import requests

from portal import PortalContainer
from portal.api_client import ApiConfig
from portal.token_store import MemoryTokenStore
from tests.helpers import ADMIN_TOKEN, BACKEND_ROOT, FakeBackend

# ── Backend and wiring ───────────────────────────────────────────────────────


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def http_session(backend: FakeBackend) -> requests.Session:
    session = requests.Session()
    session.mount(BACKEND_ROOT, backend)
    return session


@pytest.fixture
def config() -> ApiConfig:
    return ApiConfig(base_url=f"{BACKEND_ROOT}/api", request_timeout=5)


@pytest.fixture
def token_store() -> MemoryTokenStore:
    return MemoryTokenStore()


@pytest.fixture
def container(config: ApiConfig, token_store: MemoryTokenStore, http_session: requests.Session) -> PortalContainer:
    return PortalContainer.build(config, token_store=token_store, http_session=http_session)


@pytest.fixture
def admin(container: PortalContainer) -> PortalContainer:
    """Container whose session store has completed an admin sign-in."""
    assert container.session_store.complete_auth(ADMIN_TOKEN)
    return container
