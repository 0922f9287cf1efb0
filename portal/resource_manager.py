"""
Generic list / search / create / update / delete unit for one resource.

Writes are never applied locally: after a successful write the manager
refetches the whole collection, so the list on screen is always a fresh read.
Failures never escape into rendering; `list()` degrades to an empty collection
with a notice and mutations return a `MutationOutcome`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from admin_state_manager import FormMode, FormState
from domain.listing import filter_records, newest_first

from .api_client import ApiClient, ApiError, AuthExpired, TransportFailure, ValidationRejected
from .resources import ResourceSpec
from .signals import CommandDispatcher, OpenAddForm

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MutationOutcome:
    ok: bool
    error_kind: Optional[str] = None
    message: Optional[str] = None
    entity: Any = None
    warnings: List[str] = field(default_factory=list)
    cancelled: bool = False


class ResourceManager:
    """Admin-facing manager for one `ResourceSpec`."""

    def __init__(self, spec: ResourceSpec, client: ApiClient, *, dispatcher: Optional[CommandDispatcher] = None) -> None:
        self.spec = spec
        self._client = client
        self.items: List[Any] = []
        self.loading = False
        self.loaded = False
        self.notice: Optional[str] = None
        self.form = FormState()
        if dispatcher is not None:
            dispatcher.subscribe(OpenAddForm, self._on_open_add_form, section=spec.section)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list(self) -> List[Any]:
        self.loading = True
        try:
            data = self._client.get(self.spec.endpoint)
        except ApiError as exc:
            logger.error("Error fetching %s: %s", self.spec.endpoint, exc)
            self.items = []
            self.notice = exc.message
            return []
        finally:
            self.loading = False
            self.loaded = True

        self.items = newest_first(self._parse_many(data))
        self.notice = None
        return list(self.items)

    def get(self, entity_id: str) -> Optional[Any]:
        try:
            data = self._client.get(f"{self.spec.endpoint}/{entity_id}")
        except ApiError as exc:
            logger.error("Error fetching %s/%s: %s", self.spec.endpoint, entity_id, exc)
            self.notice = exc.message
            return None
        if not isinstance(data, dict):
            return None
        return self.spec.parse(data)

    def filter(self, query: str = "", facet_key: Optional[str] = None) -> List[Any]:
        facet = self.spec.facets.get(facet_key) if facet_key else None
        return filter_records(self.items, self.spec.search_fields, query, facet)

    # ------------------------------------------------------------------
    # Form state
    # ------------------------------------------------------------------
    def open_add_form(self) -> None:
        self.form.open_add(self.spec.blank_values())

    def start_edit(self, entity: Any) -> None:
        self.form.open_edit(entity.id, self.spec.values_from(entity))

    def cancel_form(self) -> None:
        self.form.reset()

    def _on_open_add_form(self, command: OpenAddForm) -> None:
        logger.debug("Opening add form for %s on request", self.spec.endpoint)
        self.open_add_form()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def save(self, values: Dict[str, Any]) -> MutationOutcome:
        """Submit the open form: update when editing, create otherwise."""
        if self.form.mode is FormMode.EDIT and self.form.editing_id:
            return self.update(self.form.editing_id, values)
        return self.create(values)

    def create(self, values: Dict[str, Any]) -> MutationOutcome:
        payload = self._validate(values)
        if isinstance(payload, MutationOutcome):
            return payload
        try:
            created = self._client.post(self.spec.endpoint, payload)
        except ApiError as exc:
            return self._failed("create", exc, values)

        warnings = self._run_after_create(created if isinstance(created, dict) else payload)
        return self._succeeded(created, warnings)

    def update(self, entity_id: str, values: Dict[str, Any]) -> MutationOutcome:
        payload = self._validate(values)
        if isinstance(payload, MutationOutcome):
            return payload
        try:
            updated = self._client.patch(f"{self.spec.endpoint}/{entity_id}", payload)
        except ApiError as exc:
            return self._failed("update", exc, values)
        return self._succeeded(updated)

    def delete(self, entity_id: str, *, confirmed: bool) -> MutationOutcome:
        if not confirmed:
            logger.info("Delete of %s/%s not confirmed; nothing sent", self.spec.endpoint, entity_id)
            return MutationOutcome(ok=False, cancelled=True)
        try:
            self._client.delete(f"{self.spec.endpoint}/{entity_id}")
        except ApiError as exc:
            kind = _error_kind(exc)
            logger.error("Error deleting %s/%s: %s", self.spec.endpoint, entity_id, exc)
            return MutationOutcome(ok=False, error_kind=kind, message=exc.message)
        self.list()
        return MutationOutcome(ok=True)

    def request_delete(self, entity_id: str) -> None:
        self.form.pending_delete_id = entity_id

    def cancel_delete(self) -> MutationOutcome:
        self.form.pending_delete_id = None
        return MutationOutcome(ok=False, cancelled=True)

    def confirm_delete(self) -> MutationOutcome:
        entity_id = self.form.pending_delete_id
        self.form.pending_delete_id = None
        if not entity_id:
            return MutationOutcome(ok=False, cancelled=True)
        return self.delete(entity_id, confirmed=True)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _validate(self, values: Dict[str, Any]) -> Dict[str, Any] | MutationOutcome:
        try:
            draft = self.spec.draft_cls.model_validate(values)
        except ValidationError as exc:
            message = _validation_message(exc)
            logger.info("Rejected %s draft before sending: %s", self.spec.endpoint, message)
            self.form.fail("validation", message, values)
            return MutationOutcome(ok=False, error_kind="validation", message=message)
        return draft.to_payload()

    def _failed(self, action: str, exc: ApiError, values: Dict[str, Any]) -> MutationOutcome:
        kind = _error_kind(exc)
        logger.error("Error during %s of %s: %s", action, self.spec.endpoint, exc)
        self.form.fail(kind, exc.message, values)
        return MutationOutcome(ok=False, error_kind=kind, message=exc.message)

    def _succeeded(self, data: Any, warnings: Optional[List[str]] = None) -> MutationOutcome:
        entity = self.spec.parse(data) if isinstance(data, dict) else None
        self.list()
        self.form.reset()
        return MutationOutcome(ok=True, entity=entity, warnings=warnings or [])

    def _run_after_create(self, created: Dict[str, Any]) -> List[str]:
        hook = self.spec.after_create
        if hook is None:
            return []
        try:
            hook(self._client, created)
        except ApiError as exc:
            logger.warning("Secondary write after %s create failed: %s", self.spec.endpoint, exc)
            return [exc.message]
        return []

    def _parse_many(self, data: Any) -> List[Any]:
        if not data:
            return []
        if not isinstance(data, list):
            logger.warning("Expected a list from %s, got %s", self.spec.endpoint, type(data).__name__)
            return []
        return [self.spec.parse(item) for item in data if isinstance(item, dict)]


def _error_kind(exc: ApiError) -> str:
    if isinstance(exc, AuthExpired):
        return "auth"
    if isinstance(exc, ValidationRejected):
        return "validation"
    if isinstance(exc, TransportFailure):
        return "transport"
    return "error"


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)
