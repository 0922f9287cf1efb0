"""
Unit tests for the HTTP adapter: auth header, error taxonomy, configuration.
"""

from __future__ import annotations

import pytest

from portal.api_client import (
    DEFAULT_API_URL,
    ApiConfig,
    AuthExpired,
    TransportFailure,
    ValidationRejected,
)
from tests.helpers import ADMIN_PROFILE, ADMIN_TOKEN


class TestRequests:
    def test_bearer_token_attached_when_stored(self, container, backend, token_store) -> None:
        token_store.save_token(ADMIN_TOKEN)
        container.client.get("projects")

        request = backend.sent("GET", "projects")[-1]
        assert request.headers["Authorization"] == f"Bearer {ADMIN_TOKEN}"

    def test_no_authorization_header_when_anonymous(self, container, backend) -> None:
        container.client.get("projects")

        assert "Authorization" not in backend.sent("GET", "projects")[-1].headers

    def test_token_read_on_every_request(self, container, backend, token_store) -> None:
        token_store.save_token(ADMIN_TOKEN)
        container.client.get("events")
        token_store.clear()
        container.client.get("events")

        first, second = backend.sent("GET", "events")
        assert "Authorization" in first.headers
        assert "Authorization" not in second.headers

    def test_login_url_points_at_google_auth(self, container) -> None:
        assert container.client.login_url() == "http://backend.test/api/auth/google"

    def test_endpoint_joins_without_double_slash(self, container) -> None:
        assert container.client.endpoint("/projects/") == "http://backend.test/api/projects/"

    def test_get_profile_returns_backend_object(self, container, token_store) -> None:
        token_store.save_token(ADMIN_TOKEN)
        assert container.client.get_profile() == ADMIN_PROFILE

    def test_profile_that_is_not_an_object_is_rejected(self, container, backend) -> None:
        backend.respond_next("GET", "auth/profile", 200, ["not", "a", "profile"])
        with pytest.raises(ValidationRejected):
            container.client.get_profile()

    def test_empty_body_decodes_to_none(self, admin, backend) -> None:
        record = backend.seed("events", title="Seminar", date="2025-07-01")
        assert admin.client.delete(f"events/{record['id']}") is None


class TestErrorMapping:
    def test_401_notifies_listeners_then_raises(self, container, backend) -> None:
        calls = []
        container.client.add_unauthorized_listener(lambda: calls.append("evicted"))
        backend.respond_next("GET", "projects", 401, {"message": "Unauthorized"})

        with pytest.raises(AuthExpired) as excinfo:
            container.client.get("projects")

        assert calls == ["evicted"]
        assert excinfo.value.status_code == 401

    def test_4xx_list_message_is_joined(self, container, backend) -> None:
        backend.respond_next(
            "POST", "projects", 400, {"message": ["name should not be empty", "status must be valid"]}
        )
        with pytest.raises(ValidationRejected) as excinfo:
            container.client.post("projects", {})

        assert excinfo.value.message == "name should not be empty; status must be valid"
        assert excinfo.value.status_code == 400

    def test_4xx_without_body_gets_generic_message(self, container, backend) -> None:
        backend.respond_next("PATCH", "projects/p-1", 409)
        with pytest.raises(ValidationRejected, match=r"Request rejected \(409\)"):
            container.client.patch("projects/p-1", {"name": "x"})

    def test_404_is_a_rejection(self, container) -> None:
        with pytest.raises(ValidationRejected, match="Not found"):
            container.client.get("projects/missing")

    def test_5xx_is_a_transport_failure(self, container, backend) -> None:
        backend.respond_next("GET", "events", 503, {"message": "down for maintenance"})
        with pytest.raises(TransportFailure) as excinfo:
            container.client.get("events")
        assert excinfo.value.status_code == 503

    def test_network_error_is_a_transport_failure(self, container, backend) -> None:
        backend.offline = True
        with pytest.raises(TransportFailure, match="Could not reach the server"):
            container.client.get("events")


class TestApiConfig:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LAB_PORTAL_API_URL", raising=False)
        monkeypatch.delenv("LAB_PORTAL_TIMEOUT", raising=False)
        config = ApiConfig.from_env()

        assert config.base_url == DEFAULT_API_URL
        assert config.request_timeout == 30

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LAB_PORTAL_API_URL", "https://lab.example.org/api")
        monkeypatch.setenv("LAB_PORTAL_TIMEOUT", "7")
        config = ApiConfig.from_env()

        assert config.base_url == "https://lab.example.org/api"
        assert config.request_timeout == 7
