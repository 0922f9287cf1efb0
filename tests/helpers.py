"""In-memory stand-in for the lab REST API, mounted as a `requests` adapter."""

from __future__ import annotations

import itertools
import json
from datetime import datetime, timedelta, timezone
from http import HTTPStatus
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlsplit

import requests
from requests.adapters import BaseAdapter
from requests.models import PreparedRequest, Response

BACKEND_ROOT = "http://backend.test"
API_PREFIX = "/api/"

ADMIN_TOKEN = "admin-token"
MEMBER_TOKEN = "member-token"

ADMIN_PROFILE = {"id": "u-1", "email": "ada@lab.test", "fullName": "Ada Admin", "role": "admin"}
MEMBER_PROFILE = {"id": "u-2", "email": "max@lab.test", "fullName": "Max Member", "role": "member"}

COLLECTIONS = ("team-members", "projects", "announcements", "events")

_BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


class FakeBackend(BaseAdapter):
    """
    Minimal stand-in for the lab REST API.

    GETs on collections are public, writes and `auth/*` need a known bearer
    token. Every request is recorded in `requests` for header assertions.
    """

    def __init__(self) -> None:
        super().__init__()
        self.collections: Dict[str, List[Dict[str, Any]]] = {name: [] for name in COLLECTIONS}
        self.tokens: Dict[str, Dict[str, Any]] = {ADMIN_TOKEN: ADMIN_PROFILE, MEMBER_TOKEN: MEMBER_PROFILE}
        self.requests: List[PreparedRequest] = []
        self.offline = False
        self._canned: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self._ids = itertools.count(1)

    # -- test controls -------------------------------------------------
    def seed(self, collection: str, **record: Any) -> Dict[str, Any]:
        n = next(self._ids)
        record.setdefault("id", f"{collection}-{n}")
        record.setdefault("createdAt", _stamp(n))
        self.collections[collection].append(record)
        return record

    def respond_next(self, method: str, path: str, status: int, body: Any = None) -> None:
        """Answer the next `method path` with a canned status and body."""
        self._canned[(method.upper(), path.strip("/"))] = (status, body)

    def revoke(self, token: str) -> None:
        self.tokens.pop(token, None)

    def sent(self, method: Optional[str] = None, path: Optional[str] = None) -> List[PreparedRequest]:
        return [
            r
            for r in self.requests
            if (method is None or r.method == method) and (path is None or _path(r) == path.strip("/"))
        ]

    # -- adapter -------------------------------------------------------
    def send(self, request: PreparedRequest, **kwargs: Any) -> Response:
        self.requests.append(request)
        if self.offline:
            raise requests.exceptions.ConnectionError("backend unreachable")
        path = _path(request)
        canned = self._canned.pop((request.method, path), None)
        if canned is not None:
            return _respond(request, *canned)
        return _respond(request, *self._route(request, path))

    def close(self) -> None:
        pass

    def _route(self, request: PreparedRequest, path: str) -> Tuple[int, Any]:
        method = request.method
        profile = self.tokens.get(_bearer(request) or "")

        if path == "auth/profile" and method == "GET":
            return (200, dict(profile)) if profile else (401, {"message": "Unauthorized"})
        if path == "auth/logout" and method == "POST":
            return (200, {"message": "Logged out"}) if profile else (401, {"message": "Unauthorized"})

        name, _, entity_id = path.partition("/")
        if name not in self.collections:
            return 404, {"message": f"Cannot {method} /{path}"}
        if method != "GET" and profile is None:
            return 401, {"message": "Unauthorized"}

        items = self.collections[name]
        if method == "GET" and not entity_id:
            return 200, [dict(item) for item in items]
        if method == "POST" and not entity_id:
            return 201, self.seed(name, **_json(request))

        record = next((item for item in items if item["id"] == entity_id), None)
        if record is None:
            return 404, {"message": "Not found"}
        if method == "GET":
            return 200, dict(record)
        if method == "PATCH":
            record.update(_json(request))
            return 200, dict(record)
        if method == "DELETE":
            items.remove(record)
            return 204, None
        return 405, {"message": "Method not allowed"}


def _stamp(n: int) -> str:
    return (_BASE_TIME + timedelta(minutes=n)).isoformat().replace("+00:00", "Z")


def _path(request: PreparedRequest) -> str:
    path = urlsplit(request.url).path
    return path[len(API_PREFIX):].strip("/") if path.startswith(API_PREFIX) else path.strip("/")


def _bearer(request: PreparedRequest) -> Optional[str]:
    header = request.headers.get("Authorization", "")
    return header[len("Bearer "):] if header.startswith("Bearer ") else None


def _json(request: PreparedRequest) -> Dict[str, Any]:
    if not request.body:
        return {}
    return json.loads(request.body)


def _respond(request: PreparedRequest, status: int, body: Any) -> Response:
    response = Response()
    response.status_code = status
    response.reason = HTTPStatus(status).phrase
    response.request = request
    response.url = request.url
    response.encoding = "utf-8"
    if body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    return response
