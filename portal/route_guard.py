"""Access decisions for protected views."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .session_store import ADMIN_ROUTE, LANDING_ROUTE, Session


class GuardOutcome(str, Enum):
    WAIT = "wait"
    ALLOW = "allow"
    REDIRECT = "redirect"


@dataclass(frozen=True, slots=True)
class GuardDecision:
    outcome: GuardOutcome
    redirect_to: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.outcome is GuardOutcome.ALLOW


def evaluate_guard(*, loading: bool, session: Optional[Session], require_admin: bool = False) -> GuardDecision:
    """Decide whether a protected view may render. Never redirects while loading."""
    if loading:
        return GuardDecision(GuardOutcome.WAIT)
    if session is None:
        return GuardDecision(GuardOutcome.REDIRECT, LANDING_ROUTE)
    if require_admin and not session.is_admin:
        return GuardDecision(GuardOutcome.REDIRECT, LANDING_ROUTE)
    return GuardDecision(GuardOutcome.ALLOW)


def post_login_route(session: Optional[Session]) -> str:
    """Where the auth callback sends the user once the session has resolved."""
    if session is not None and session.is_admin:
        return ADMIN_ROUTE
    return LANDING_ROUTE
