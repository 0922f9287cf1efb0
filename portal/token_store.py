"""Durable client-side copy of the bearer token and the last profile snapshot."""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_SESSION_DIR = ".lab_portal/sessions"
_VISITOR_ID = re.compile(r"^[A-Za-z0-9_-]{8,64}$")


class MemoryTokenStore:
    """Keeps the token and profile in process memory."""

    def __init__(self, token: Optional[str] = None, profile: Optional[Dict[str, Any]] = None) -> None:
        self._token = token
        self._profile = profile

    def read_token(self) -> Optional[str]:
        return self._token

    def read_profile(self) -> Optional[Dict[str, Any]]:
        return dict(self._profile) if self._profile else None

    def save_token(self, token: str) -> None:
        self._token = token

    def save_profile(self, profile: Dict[str, Any]) -> None:
        self._profile = dict(profile)

    def clear(self) -> None:
        self._token = None
        self._profile = None


class FileTokenStore:
    """
    One JSON file per visitor holding `auth_token` and `user`.

    `visitor_id` names the file inside `directory`; two visitors never share a
    file. Both keys are always removed together. A missing or corrupt file
    reads as an empty store.
    """

    def __init__(self, visitor_id: str, directory: Optional[Path] = None) -> None:
        if not _VISITOR_ID.match(visitor_id or ""):
            raise ValueError(f"Invalid visitor id: {visitor_id!r}")
        root = Path(directory or os.getenv("LAB_PORTAL_SESSION_DIR", DEFAULT_SESSION_DIR))
        self._path = root / f"{visitor_id}.json"

    @property
    def path(self) -> Path:
        return self._path

    def read_token(self) -> Optional[str]:
        token = self._load().get("auth_token")
        return token if isinstance(token, str) and token else None

    def read_profile(self) -> Optional[Dict[str, Any]]:
        profile = self._load().get("user")
        return profile if isinstance(profile, dict) else None

    def save_token(self, token: str) -> None:
        data = self._load()
        data["auth_token"] = token
        self._write(data)

    def save_profile(self, profile: Dict[str, Any]) -> None:
        data = self._load()
        data["user"] = profile
        self._write(data)

    def clear(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:  # pragma: no cover - filesystem issues
            logger.warning("Unable to remove session file %s: %s", self._path, exc)
            self._write({})

    def _load(self) -> Dict[str, Any]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:  # pragma: no cover - filesystem issues
            logger.warning("Unable to read session file %s: %s", self._path, exc)
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupt session file %s", self._path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
