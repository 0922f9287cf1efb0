"""Small Streamlit helpers shared by the public and admin pages."""

from __future__ import annotations

from typing import Iterable, Optional

import streamlit as st

from domain.events import EventType
from domain.projects import ProjectStatus

from .i18n import translate

STATUS_ICONS = {
    ProjectStatus.ACTIVE: "🟢",
    ProjectStatus.COMPLETED: "🔵",
    ProjectStatus.ON_HOLD: "🟡",
}

EVENT_ICONS = {
    EventType.MEETING: "👥",
    EventType.DEADLINE: "⏰",
    EventType.CONFERENCE: "🎤",
    EventType.OTHER: "📅",
}


def lang() -> str:
    return st.session_state.get("lang", "es")


def t(key: str, **kwargs: str) -> str:
    return translate(key, lang(), **kwargs)


def go_to(page: str, selected_id: Optional[str] = None) -> None:
    st.session_state.page = page
    st.session_state.selected_id = selected_id


def status_badge(status: str) -> str:
    bucket = ProjectStatus.bucket(status)
    if bucket is None:
        return f"⚪ {t('status.unknown')}"
    return f"{STATUS_ICONS[bucket]} {t('status.' + bucket.value)}"


def event_badge(event_type: str) -> str:
    bucket = EventType.bucket(event_type)
    return f"{EVENT_ICONS[bucket]} {t('type.' + bucket.value)}"


def show_notices(notices: Iterable[Optional[str]]) -> None:
    """Surface failed reads; pages still render with what they have."""
    messages = [notice for notice in notices if notice]
    if messages:
        st.warning(f"{t('common.load_failed')}: " + " ".join(messages))


def link_list(urls: Iterable[str]) -> None:
    for url in urls:
        st.markdown(f"- [{url}]({url})")
