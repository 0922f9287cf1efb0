"""
State models supporting the admin forms.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class FormMode(str, Enum):
    CLOSED = "closed"
    ADD = "add"
    EDIT = "edit"


@dataclass(slots=True)
class FormState:
    """Add/edit form of one resource manager, plus a pending delete confirmation."""

    mode: FormMode = FormMode.CLOSED
    editing_id: Optional[str] = None
    values: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None
    error_kind: Optional[str] = None
    pending_delete_id: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.mode is not FormMode.CLOSED

    def open_add(self, values: Optional[Dict[str, Any]] = None) -> None:
        self.mode = FormMode.ADD
        self.editing_id = None
        self.values = dict(values or {})
        self.error = None
        self.error_kind = None

    def open_edit(self, entity_id: str, values: Dict[str, Any]) -> None:
        self.mode = FormMode.EDIT
        self.editing_id = entity_id
        self.values = dict(values)
        self.error = None
        self.error_kind = None

    def fail(self, kind: str, message: str, values: Optional[Dict[str, Any]] = None) -> None:
        """Record a failed submit; the entered values stay for a retry."""
        self.error_kind = kind
        self.error = message
        if values is not None:
            self.values = dict(values)

    def reset(self) -> None:
        self.mode = FormMode.CLOSED
        self.editing_id = None
        self.values = {}
        self.error = None
        self.error_kind = None
