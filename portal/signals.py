"""
Typed UI commands used to deep-link into the admin console.

Commands carry no authoritative data. A command published before anyone
subscribes to its type is kept (latest wins) and handed to the first
subscriber, so a manager can receive "open add form" before its first fetch.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Type, Union

logger = logging.getLogger(__name__)


class AdminSection(str, Enum):
    OVERVIEW = "overview"
    TEAM = "team"
    PROJECTS = "projects"
    ANNOUNCEMENTS = "announcements"
    EVENTS = "events"


class AdminIntent(str, Enum):
    VIEW = "view"
    ADD = "add"


@dataclass(frozen=True, slots=True)
class AdminActionRequested:
    section: AdminSection
    intent: AdminIntent = AdminIntent.VIEW


@dataclass(frozen=True, slots=True)
class OpenAddForm:
    section: AdminSection


Command = Union[AdminActionRequested, OpenAddForm]
Handler = Callable[[Any], None]


class CommandDispatcher:
    """Synchronous publish/subscribe keyed by command type (and section for OpenAddForm)."""

    def __init__(self) -> None:
        self._handlers: Dict[Any, List[Handler]] = defaultdict(list)
        self._pending: Dict[Any, Command] = {}

    def subscribe(self, command_type: Type[Any], handler: Handler, *, section: AdminSection | None = None) -> None:
        key = self._key(command_type, section)
        if handler not in self._handlers[key]:
            self._handlers[key].append(handler)
        pending = self._pending.pop(key, None)
        if pending is not None:
            logger.debug("Delivering pending %s to new subscriber", pending)
            handler(pending)

    def unsubscribe(self, command_type: Type[Any], handler: Handler, *, section: AdminSection | None = None) -> None:
        key = self._key(command_type, section)
        if handler in self._handlers.get(key, []):
            self._handlers[key].remove(handler)

    def publish(self, command: Command) -> None:
        section = command.section if isinstance(command, OpenAddForm) else None
        key = self._key(type(command), section)
        handlers = list(self._handlers.get(key, []))
        if not handlers:
            logger.debug("No subscriber for %s yet; keeping it pending", command)
            self._pending[key] = command
            return
        for handler in handlers:
            handler(command)

    @staticmethod
    def _key(command_type: Type[Any], section: AdminSection | None) -> Any:
        return (command_type, section)
