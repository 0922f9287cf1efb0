"""
Unit tests for the access decisions of protected views.
"""

from __future__ import annotations

import pytest

from portal.route_guard import GuardDecision, GuardOutcome, evaluate_guard, post_login_route
from portal.session_store import Session

ADMIN = Session(user_id="u-1", email="ada@lab.test", display_name="Ada", role="admin", auth_token="a")
MEMBER = Session(user_id="u-2", email="max@lab.test", display_name="Max", role="member", auth_token="m")


class TestEvaluateGuard:
    @pytest.mark.parametrize("session", [None, MEMBER, ADMIN])
    @pytest.mark.parametrize("require_admin", [False, True])
    def test_loading_always_waits(self, session, require_admin) -> None:
        decision = evaluate_guard(loading=True, session=session, require_admin=require_admin)

        assert decision == GuardDecision(GuardOutcome.WAIT)
        assert not decision.allowed

    def test_anonymous_is_redirected_to_landing(self) -> None:
        decision = evaluate_guard(loading=False, session=None)
        assert decision.outcome is GuardOutcome.REDIRECT
        assert decision.redirect_to == "home"

    def test_member_denied_admin_view(self) -> None:
        decision = evaluate_guard(loading=False, session=MEMBER, require_admin=True)
        assert decision.outcome is GuardOutcome.REDIRECT
        assert decision.redirect_to == "home"

    def test_member_allowed_signed_in_view(self) -> None:
        assert evaluate_guard(loading=False, session=MEMBER).allowed

    def test_admin_allowed_admin_view(self) -> None:
        assert evaluate_guard(loading=False, session=ADMIN, require_admin=True).allowed

    def test_idempotent(self) -> None:
        first = evaluate_guard(loading=False, session=MEMBER, require_admin=True)
        second = evaluate_guard(loading=False, session=MEMBER, require_admin=True)
        assert first == second
        assert MEMBER.role == "member"


class TestPostLoginRoute:
    def test_routes(self) -> None:
        assert post_login_route(ADMIN) == "admin"
        assert post_login_route(MEMBER) == "home"
        assert post_login_route(None) == "home"
