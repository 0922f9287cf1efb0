"""
Admin console: overview plus one generic manager view per resource.

The whole console sits behind `evaluate_guard(require_admin=True)`; the
caller renders it only when the decision allows.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Any, Dict, List

import streamlit as st

from domain.listing import parse_date
from domain.team_members import member_options
from portal.container import PortalContainer
from portal.resource_manager import MutationOutcome, ResourceManager
from portal.resources import FormField, ResourceKind
from portal.signals import AdminActionRequested, AdminIntent, AdminSection, OpenAddForm

from .common import event_badge, status_badge, t

LOGGER = logging.getLogger(__name__)

SECTION_LABELS = {
    AdminSection.OVERVIEW: "admin.overview",
    AdminSection.TEAM: "admin.team",
    AdminSection.PROJECTS: "admin.projects",
    AdminSection.ANNOUNCEMENTS: "admin.announcements",
    AdminSection.EVENTS: "admin.events",
}

SECTION_RESOURCES = {
    AdminSection.TEAM: ResourceKind.TEAM_MEMBERS,
    AdminSection.PROJECTS: ResourceKind.PROJECTS,
    AdminSection.ANNOUNCEMENTS: ResourceKind.ANNOUNCEMENTS,
    AdminSection.EVENTS: ResourceKind.EVENTS,
}


def render_admin_console(container: PortalContainer) -> None:
    _subscribe_console(container)
    session = container.session_store.session
    st.title(t("admin.dashboard"))
    if session is not None:
        st.caption(t("admin.welcome", name=session.display_name or session.email))

    _show_flash()
    st.session_state.setdefault("admin_section", AdminSection.OVERVIEW.value)
    section_value = st.radio(
        t("admin.dashboard"),
        options=[section.value for section in AdminSection],
        format_func=lambda value: t(SECTION_LABELS[AdminSection(value)]),
        horizontal=True,
        label_visibility="collapsed",
        key="admin_section",
    )
    section = AdminSection(section_value)
    if section is AdminSection.OVERVIEW:
        render_overview(container)
    else:
        render_manager(container, container.manager(SECTION_RESOURCES[section]))


def _subscribe_console(container: PortalContainer) -> None:
    if st.session_state.get("admin_console_subscribed"):
        return

    def on_admin_action(command: AdminActionRequested) -> None:
        st.session_state.admin_section = command.section.value
        if command.intent is AdminIntent.ADD:
            container.dispatcher.publish(OpenAddForm(command.section))

    container.dispatcher.subscribe(AdminActionRequested, on_admin_action)
    st.session_state.admin_console_subscribed = True


# ----------------------------------------------------------------------
# Overview
# ----------------------------------------------------------------------
def render_overview(container: PortalContainer) -> None:
    with st.spinner(t("common.loading")):
        stats = container.dashboard.refresh()
    _rerun_if_evicted(container)
    if stats.failures:
        st.warning(f"{t('common.load_failed')}: " + "; ".join(stats.failures))

    cards = st.columns(4)
    cards[0].metric(t("admin.total_members"), stats.total_members)
    cards[1].metric(t("admin.active_projects"), stats.active_projects)
    cards[2].metric(t("admin.total_announcements"), stats.total_announcements)
    cards[3].metric(t("admin.upcoming_events"), stats.upcoming_events)

    st.subheader(t("admin.quick_actions"))
    actions = st.columns(4)
    for column, section in zip(actions, SECTION_RESOURCES):
        column.button(
            f"+ {t(SECTION_LABELS[section])}",
            key=f"quick-{section.value}",
            on_click=container.dispatcher.publish,
            args=(AdminActionRequested(section, AdminIntent.ADD),),
        )

    st.subheader(t("admin.recent_activity"))
    if not stats.recent_activity:
        st.caption(t("common.none"))
    for item in stats.recent_activity:
        stamp = (item.timestamp or "")[:10]
        st.markdown(f"- {t('activity.' + item.kind, title=item.title)} · {stamp}")


# ----------------------------------------------------------------------
# Generic manager
# ----------------------------------------------------------------------
def render_manager(container: PortalContainer, manager: ResourceManager) -> None:
    kind = manager.spec.kind.value
    if not manager.loaded:
        with st.spinner(t("common.loading")):
            manager.list()
        _rerun_if_evicted(container)
    if manager.notice:
        st.warning(manager.notice)

    toolbar = st.columns([3, 2, 1])
    query = toolbar[0].text_input(t("admin.search"), key=f"{kind}-search")
    facet_key = None
    if manager.spec.facets:
        facet_key = toolbar[1].selectbox(
            t("admin.filter"),
            options=["all", *manager.spec.facets],
            format_func=_facet_label,
            key=f"{kind}-facet",
        )
    if toolbar[2].button(t("admin.add"), key=f"{kind}-add"):
        manager.open_add_form()

    if manager.form.is_open:
        _render_form(container, manager)
    if manager.form.pending_delete_id:
        _render_delete_confirmation(manager)

    rows = manager.filter(query, None if facet_key in (None, "all") else facet_key)
    if not rows:
        st.caption(t("common.none"))
    for entity in rows:
        with st.container(border=True):
            body, edit_col, delete_col = st.columns([6, 1, 1])
            body.markdown(_summary(entity))
            if edit_col.button(t("admin.edit"), key=f"{kind}-edit-{entity.id}"):
                manager.start_edit(entity)
                st.rerun()
            if delete_col.button(t("admin.delete"), key=f"{kind}-delete-{entity.id}"):
                manager.request_delete(entity.id)
                st.rerun()


def _render_form(container: PortalContainer, manager: ResourceManager) -> None:
    form = manager.form
    kind = manager.spec.kind.value
    form_key = f"{kind}-{form.mode.value}-{form.editing_id or 'new'}"
    title = t("admin.edit") if form.editing_id else t("admin.add")
    with st.form(form_key):
        st.subheader(title)
        values: Dict[str, Any] = {}
        for form_field in manager.spec.form_fields:
            values[form_field.name] = _input(container, form_field, form.values.get(form_field.name), form_key)
        if form.error:
            st.error(_error_text(form.error_kind, form.error))
        save_col, cancel_col = st.columns(2)
        submitted = save_col.form_submit_button(t("admin.save"))
        cancelled = cancel_col.form_submit_button(t("admin.cancel"))

    if cancelled:
        manager.cancel_form()
        st.rerun()
    if submitted:
        with st.spinner(t("common.loading")):
            outcome = manager.save(values)
        _after_mutation(outcome, t("admin.saved"))


def _render_delete_confirmation(manager: ResourceManager) -> None:
    kind = manager.spec.kind.value
    with st.container(border=True):
        st.warning(t("admin.confirm_delete"))
        confirm_col, cancel_col = st.columns(2)
        if confirm_col.button(t("admin.delete"), key=f"{kind}-confirm-delete", type="primary"):
            with st.spinner(t("common.loading")):
                outcome = manager.confirm_delete()
            _after_mutation(outcome, t("admin.deleted"))
        if cancel_col.button(t("admin.cancel"), key=f"{kind}-cancel-delete"):
            manager.cancel_delete()
            st.rerun()


def _rerun_if_evicted(container: PortalContainer) -> None:
    """A read hit 401: stop drawing the console and let the next run redirect."""
    if container.session_store.session is None:
        LOGGER.info("Session evicted during an admin read; rerunning")
        st.rerun()


def _after_mutation(outcome: MutationOutcome, success_text: str) -> None:
    if outcome.ok:
        st.session_state.admin_flash = [("success", success_text)] + [("warning", w) for w in outcome.warnings]
        st.rerun()
    if outcome.error_kind == "auth":
        # the session store has already evicted the session and moved to landing
        st.rerun()
    if outcome.error_kind and not outcome.cancelled:
        st.error(_error_text(outcome.error_kind, outcome.message or ""))


def _show_flash() -> None:
    for level, message in st.session_state.pop("admin_flash", []):
        getattr(st, level)(message)


def _input(container: PortalContainer, form_field: FormField, value: Any, form_key: str) -> Any:
    label = t(form_field.label) + (" *" if form_field.required else "")
    key = f"{form_key}-{form_field.name}"
    widget = form_field.widget
    if widget == "textarea":
        return st.text_area(label, value=value or "", key=key)
    if widget == "checkbox":
        return st.checkbox(label, value=bool(value), key=key)
    if widget == "list":
        return st.text_input(label, value=_joined(value, ", "), key=key)
    if widget == "lines":
        return st.text_area(label, value=_joined(value, "\n"), key=key)
    if widget == "select":
        options: List[str] = list(form_field.options)
        index = options.index(value) if value in options else 0
        return st.selectbox(label, options=options, index=index, format_func=_facet_label, key=key)
    if widget == "date":
        return st.date_input(label, value=parse_date(value) or date.today(), key=key)
    if widget == "time":
        return st.time_input(label, value=_parse_time(value), key=key)
    if widget == "members":
        members = container.manager(ResourceKind.TEAM_MEMBERS)
        if not members.loaded:
            members.list()
            _rerun_if_evicted(container)
        names = member_options(value or [], members.items)
        return st.multiselect(
            label,
            options=list(names),
            default=list(dict.fromkeys(value or [])),
            format_func=lambda member_id: names.get(member_id, member_id),
            key=key,
        )
    return st.text_input(label, value=value or "", key=key)


def _joined(value: Any, separator: str) -> str:
    if isinstance(value, str):
        return value
    return separator.join(value or [])


def _parse_time(value: Any) -> time:
    if isinstance(value, time):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value[:5], "%H:%M").time()
        except ValueError:
            LOGGER.debug("Unreadable time %r; using default", value)
    return time(9, 0)


def _facet_label(value: str) -> str:
    if value == "all":
        return t("admin.all")
    if value in ("active", "inactive"):
        return t("admin." + value)
    for prefix in ("status.", "type."):
        label = t(prefix + value)
        if label != prefix + value:
            return label
    return value


def _error_text(kind: str | None, message: str) -> str:
    if kind in ("transport", "auth"):
        return t(f"admin.error.{kind}")
    if kind == "validation":
        return t("admin.error.validation", message=message)
    return t("admin.error.error", message=message)


def _summary(entity: Any) -> str:
    lines = [f"**{entity.label}**"]
    if hasattr(entity, "status"):
        lines.append(status_badge(entity.status))
    if hasattr(entity, "type") and hasattr(entity, "time"):
        lines.append(f"{event_badge(entity.type)} · {(entity.date or '')[:10]} {entity.time}")
    if hasattr(entity, "role"):
        state = t("admin.active") if entity.is_active else t("admin.inactive")
        lines.append(f"{entity.role} · {entity.email or ''} · {state}")
    if hasattr(entity, "content") and hasattr(entity, "links"):
        lines.append((entity.date or "")[:10])
    return "  \n".join(lines)
