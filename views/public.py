"""
Read-only pages for anonymous visitors.

Every page reads through the container's resource managers, shows a spinner
while the request is in flight and a warning (never an exception) when a read
fails.
"""

from __future__ import annotations

from datetime import date

import streamlit as st

from domain.events import upcoming_events
from domain.projects import featured_projects, projects_of_member
from domain.team_members import members_of_project
from portal.container import PortalContainer
from portal.dashboard import fetch_concurrently
from portal.resources import ResourceKind

from .common import event_badge, go_to, link_list, show_notices, status_badge, t


def render_home(container: PortalContainer) -> None:
    st.title(t("app.title"))
    st.caption(t("home.subtitle"))

    projects = container.manager(ResourceKind.PROJECTS)
    members = container.manager(ResourceKind.TEAM_MEMBERS)
    with st.spinner(t("common.loading")):
        fetch_concurrently([projects, members])
    show_notices([projects.notice, members.notice])

    left, right = st.columns(2)
    left.metric(t("home.projects"), len(projects.items))
    right.metric(t("home.members"), len(members.items))

    st.subheader(t("home.featured"))
    featured = featured_projects(projects.items)
    if not featured:
        st.caption(t("common.none"))
    for project in featured:
        _project_card(project, key_prefix="home")


def render_team(container: PortalContainer) -> None:
    st.title(t("team.title"))
    members = container.manager(ResourceKind.TEAM_MEMBERS)
    with st.spinner(t("common.loading")):
        members.list()
    show_notices([members.notice])

    columns = st.columns(3)
    for idx, member in enumerate(members.items):
        with columns[idx % 3].container(border=True):
            if member.avatar_url:
                st.image(member.avatar_url, width=96)
            st.markdown(f"**{member.name}**  \n{member.role}")
            if member.research_areas:
                st.caption(", ".join(member.research_areas))
            if st.button(t("common.view"), key=f"team-{member.id}"):
                go_to("member", member.id)
                st.rerun()


def render_member(container: PortalContainer, member_id: str) -> None:
    if st.button(f"← {t('common.back')}", key="member-back"):
        go_to("team")
        st.rerun()

    members = container.manager(ResourceKind.TEAM_MEMBERS)
    projects = container.manager(ResourceKind.PROJECTS)
    with st.spinner(t("common.loading")):
        member = members.get(member_id)
        projects.list()
    if member is None:
        show_notices([members.notice])
        st.info(t("team.not_found"))
        return
    show_notices([projects.notice])

    st.title(member.name)
    st.subheader(member.role)
    if member.avatar_url:
        st.image(member.avatar_url, width=160)
    if member.bio:
        st.write(member.bio)
    if member.research_areas:
        st.markdown(f"**{t('team.research_areas')}:** " + ", ".join(member.research_areas))
    contact = [url for url in (member.github_url, member.linkedin_url) if url]
    if member.email:
        contact.append(f"mailto:{member.email}")
    link_list(contact)

    st.subheader(t("team.projects"))
    own = projects_of_member(member.id, projects.items)
    if not own:
        st.caption(t("common.none"))
    for project in own:
        _project_card(project, key_prefix="member")


def render_projects(container: PortalContainer) -> None:
    st.title(t("projects.title"))
    projects = container.manager(ResourceKind.PROJECTS)
    with st.spinner(t("common.loading")):
        projects.list()
    show_notices([projects.notice])
    if not projects.items:
        st.caption(t("common.none"))
    for project in projects.items:
        _project_card(project, key_prefix="projects")


def render_project(container: PortalContainer, project_id: str) -> None:
    if st.button(f"← {t('common.back')}", key="project-back"):
        go_to("projects")
        st.rerun()

    projects = container.manager(ResourceKind.PROJECTS)
    members = container.manager(ResourceKind.TEAM_MEMBERS)
    with st.spinner(t("common.loading")):
        project = projects.get(project_id)
        members.list()
    if project is None:
        show_notices([projects.notice])
        st.info(t("projects.not_found"))
        return
    show_notices([members.notice])

    st.title(project.name)
    st.caption(status_badge(project.status))
    st.write(project.description)
    if project.content:
        st.markdown(project.content)
    if project.images:
        st.subheader(t("projects.images"))
        st.image(project.images, width=240)
    if project.files:
        st.subheader(t("projects.files"))
        link_list(project.files)

    st.subheader(t("projects.team"))
    team = members_of_project(project.team_members, members.items)
    if not team:
        st.caption(t("common.none"))
    for member in team:
        st.markdown(f"- **{member.name}**, {member.role}")


def render_announcements(container: PortalContainer) -> None:
    st.title(t("announcements.title"))
    announcements = container.manager(ResourceKind.ANNOUNCEMENTS)
    with st.spinner(t("common.loading")):
        announcements.list()
    show_notices([announcements.notice])
    if not announcements.items:
        st.caption(t("common.none"))
    for item in announcements.items:
        with st.container(border=True):
            st.markdown(f"### {item.title}")
            if item.date:
                st.caption(item.date[:10])
            st.write(item.content)
            link_list(item.links)


def render_calendar(container: PortalContainer, today: date | None = None) -> None:
    st.title(t("calendar.title"))
    events = container.manager(ResourceKind.EVENTS)
    with st.spinner(t("common.loading")):
        events.list()
    show_notices([events.notice])

    upcoming = upcoming_events(events.items, today or date.today())
    if not upcoming:
        st.caption(t("common.none"))
    for event in upcoming:
        with st.container(border=True):
            st.markdown(f"**{event.title}**  \n{event_badge(event.type)}")
            when = f"{event.day.isoformat()} {event.time}".strip()
            st.caption(f"{when} · {event.location}" if event.location else when)
            if event.description:
                st.write(event.description)


def _project_card(project, *, key_prefix: str) -> None:
    with st.container(border=True):
        st.markdown(f"**{project.name}**  \n{status_badge(project.status)}")
        st.write(project.description)
        if st.button(t("common.view"), key=f"{key_prefix}-project-{project.id}"):
            go_to("project", project.id)
            st.rerun()
