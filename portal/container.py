"""Wires one browser session's worth of portal objects together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import requests

from .api_client import ApiClient, ApiConfig
from .dashboard import AggregateDashboard
from .resource_manager import ResourceManager
from .resources import RESOURCES, ResourceKind
from .session_store import SessionStore, TokenStore
from .signals import CommandDispatcher
from .token_store import MemoryTokenStore

logger = logging.getLogger(__name__)


@dataclass
class PortalContainer:
    """Explicit context handed to every view instead of module-level globals."""

    config: ApiConfig
    client: ApiClient
    token_store: TokenStore
    session_store: SessionStore
    dispatcher: CommandDispatcher
    managers: Dict[ResourceKind, ResourceManager]
    dashboard: AggregateDashboard

    @classmethod
    def build(
        cls,
        config: Optional[ApiConfig] = None,
        *,
        token_store: Optional[TokenStore] = None,
        http_session: Optional[requests.Session] = None,
    ) -> "PortalContainer":
        config = config or ApiConfig.from_env()
        token_store = token_store or MemoryTokenStore()
        client = ApiClient(config=config, token_provider=token_store.read_token, session=http_session)
        session_store = SessionStore(client=client, token_store=token_store)
        dispatcher = CommandDispatcher()
        managers = {
            kind: ResourceManager(spec, client, dispatcher=dispatcher) for kind, spec in RESOURCES.items()
        }
        logger.info("Portal container ready for %s", config.base_url)
        return cls(
            config=config,
            client=client,
            token_store=token_store,
            session_store=session_store,
            dispatcher=dispatcher,
            managers=managers,
            dashboard=AggregateDashboard(managers),
        )

    def manager(self, kind: ResourceKind) -> ResourceManager:
        return self.managers[kind]
