"""
Streamlit entry point for the Research Lab website.

Public pages (home, team, projects, announcements, calendar) are open to every
visitor; the admin console is gated by the route guard. One `PortalContainer`
is kept per browser session in `st.session_state`.
"""

from __future__ import annotations

import logging
import os
from uuid import uuid4

import streamlit as st
from dotenv import load_dotenv

from portal import PortalContainer
from portal.route_guard import GuardOutcome, evaluate_guard, post_login_route
from portal.token_store import FileTokenStore
from views.admin import render_admin_console
from views.common import go_to, t
from views.i18n import LANGUAGES
from views.public import (
    render_announcements,
    render_calendar,
    render_home,
    render_member,
    render_project,
    render_projects,
    render_team,
)

# Ensure environment variables from .env are loaded before building the client.
load_dotenv()

logging.basicConfig(
    level=os.getenv("LAB_PORTAL_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
LOGGER = logging.getLogger(__name__)

NAV_PAGES = ("home", "team", "projects", "announcements", "calendar")


def _init_session_state() -> None:
    """Initialize keys stored in st.session_state."""
    if "page" not in st.session_state:
        st.session_state.page = "home"
        st.session_state.selected_id = None
    if "lang" not in st.session_state:
        default_lang = os.getenv("LAB_PORTAL_LANGUAGE", "es")
        st.session_state.lang = default_lang if default_lang in LANGUAGES else "es"
    if "container" not in st.session_state:
        # token file is keyed by this browser session, never shared between visitors
        st.session_state.visitor_id = uuid4().hex
        st.session_state.container = PortalContainer.build(
            token_store=FileTokenStore(st.session_state.visitor_id),
        )


def _handle_auth_callback(container: PortalContainer) -> None:
    """Complete sign-in when the backend redirected back with ?token=..."""
    token = st.query_params.get("token")
    if not token:
        return
    with st.spinner(t("auth.completing")):
        container.session_store.complete_auth(token)
    del st.query_params["token"]
    go_to(post_login_route(container.session_store.session))
    st.rerun()


def _apply_redirect(container: PortalContainer) -> None:
    route = container.session_store.take_redirect()
    if route:
        LOGGER.info("Session ended; moving to %s", route)
        go_to(route)


def _render_sidebar(container: PortalContainer) -> None:
    """Navigation, language toggle and sign-in / sign-out."""
    store = container.session_store
    with st.sidebar:
        st.header(t("app.title"))
        for page in NAV_PAGES:
            if st.button(t(f"nav.{page}"), key=f"nav-{page}"):
                go_to(page)
                st.rerun()
        if store.is_admin and st.button(t("nav.admin"), key="nav-admin"):
            go_to("admin")
            st.rerun()

        st.divider()
        st.radio(
            "Language",
            options=list(LANGUAGES),
            format_func=str.upper,
            horizontal=True,
            key="lang",
        )

        st.divider()
        session = store.session
        if session is None:
            st.link_button(t("auth.sign_in"), store.sign_in())
        else:
            st.caption(f"{session.display_name} · {session.role}")
            if st.button(t("auth.sign_out"), key="sign-out"):
                store.sign_out()
                st.rerun()


def _render_page(container: PortalContainer) -> None:
    page = st.session_state.page
    selected_id = st.session_state.get("selected_id")

    if page == "admin":
        store = container.session_store
        decision = evaluate_guard(loading=store.loading, session=store.session, require_admin=True)
        if decision.outcome is GuardOutcome.WAIT:
            with st.spinner(t("auth.verifying")):
                st.empty()
            return
        if decision.outcome is GuardOutcome.REDIRECT:
            LOGGER.info("Admin access denied; redirecting to %s", decision.redirect_to)
            st.info(t("auth.denied"))
            go_to(decision.redirect_to or "home")
            page = st.session_state.page
        else:
            render_admin_console(container)
            return

    if page == "team":
        render_team(container)
    elif page == "member" and selected_id:
        render_member(container, selected_id)
    elif page == "projects":
        render_projects(container)
    elif page == "project" and selected_id:
        render_project(container, selected_id)
    elif page == "announcements":
        render_announcements(container)
    elif page == "calendar":
        render_calendar(container)
    else:
        render_home(container)


def main() -> None:
    st.set_page_config(
        page_title="Research Lab",
        layout="wide",
    )

    _init_session_state()
    container: PortalContainer = st.session_state.container

    try:
        container.session_store.boot()
    except Exception as exc:  # pragma: no cover - surfaced to UI
        LOGGER.exception("Session bootstrap failed: %s", exc)
        st.error(f"{t('common.load_failed')}: {exc}")

    _apply_redirect(container)
    _handle_auth_callback(container)
    _render_sidebar(container)
    _render_page(container)


if __name__ == "__main__":
    main()
