"""
Catalogue of the four managed resources.

A `ResourceSpec` is everything the generic manager and the admin views need to
know about one entity type: endpoint, entity and draft classes, searchable
fields, facet options and form layout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Type

from domain.announcements import Announcement, derived_event_payload
from domain.events import Event, EventType
from domain.listing import Facet
from domain.projects import Project, ProjectStatus
from domain.team_members import TeamMember
from schemas.drafts import AnnouncementDraft, Draft, EventDraft, ProjectDraft, TeamMemberDraft

from .api_client import ApiClient, ApiError, SecondaryEffectFailure
from .signals import AdminSection

logger = logging.getLogger(__name__)


class ResourceKind(str, Enum):
    TEAM_MEMBERS = "team-members"
    PROJECTS = "projects"
    ANNOUNCEMENTS = "announcements"
    EVENTS = "events"


@dataclass(frozen=True, slots=True)
class FormField:
    """One input of the add/edit form. `widget` picks the Streamlit control."""

    name: str
    label: str
    widget: str = "text"
    required: bool = False
    options: Tuple[str, ...] = ()


AfterCreate = Callable[[ApiClient, Dict[str, Any]], None]


@dataclass(frozen=True, slots=True)
class ResourceSpec:
    kind: ResourceKind
    section: AdminSection
    entity_cls: Type[Any]
    draft_cls: Type[Draft]
    search_fields: Tuple[str, ...]
    form_fields: Tuple[FormField, ...]
    facets: Dict[str, Facet] = field(default_factory=dict)
    after_create: Optional[AfterCreate] = None

    @property
    def endpoint(self) -> str:
        return self.kind.value

    def parse(self, data: Dict[str, Any]) -> Any:
        return self.entity_cls.from_api(data)

    def blank_values(self) -> Dict[str, Any]:
        return {f.name: _blank(f) for f in self.form_fields}

    def values_from(self, entity: Any) -> Dict[str, Any]:
        """Prefill the edit form from an entity."""
        return {f.name: getattr(entity, f.name, _blank(f)) for f in self.form_fields}


def _blank(form_field: FormField) -> Any:
    if form_field.widget == "checkbox":
        return True
    if form_field.widget in ("list", "lines", "members"):
        return []
    if form_field.widget == "select" and form_field.options:
        return form_field.options[0]
    return None if form_field.widget in ("date", "time") else ""


def create_derived_event(client: ApiClient, announcement: Dict[str, Any]) -> None:
    """Mirror a new announcement into the calendar."""
    payload = derived_event_payload(announcement)
    logger.info("Creating calendar event for announcement '%s'", announcement.get("title"))
    try:
        client.post(ResourceKind.EVENTS.value, payload)
    except ApiError as exc:
        raise SecondaryEffectFailure(
            f"The announcement was saved, but its calendar event could not be created: {exc.message}",
            status_code=exc.status_code,
        ) from exc


TEAM_MEMBERS = ResourceSpec(
    kind=ResourceKind.TEAM_MEMBERS,
    section=AdminSection.TEAM,
    entity_cls=TeamMember,
    draft_cls=TeamMemberDraft,
    search_fields=("name", "role", "email"),
    facets={
        "active": Facet("is_active", True),
        "inactive": Facet("is_active", False),
    },
    form_fields=(
        FormField("name", "field.name", required=True),
        FormField("role", "field.role", required=True),
        FormField("email", "field.email"),
        FormField("avatar_url", "field.avatar_url"),
        FormField("github_url", "field.github_url"),
        FormField("linkedin_url", "field.linkedin_url"),
        FormField("research_areas", "field.research_areas", widget="list"),
        FormField("bio", "field.bio", widget="textarea"),
        FormField("is_active", "field.is_active", widget="checkbox"),
    ),
)

PROJECTS = ResourceSpec(
    kind=ResourceKind.PROJECTS,
    section=AdminSection.PROJECTS,
    entity_cls=Project,
    draft_cls=ProjectDraft,
    search_fields=("name", "description"),
    facets={status.value: Facet("status", status.value) for status in ProjectStatus},
    form_fields=(
        FormField("name", "field.name", required=True),
        FormField("description", "field.description", widget="textarea", required=True),
        FormField("content", "field.content", widget="textarea"),
        FormField("images", "field.images", widget="lines"),
        FormField("files", "field.files", widget="lines"),
        FormField("team_members", "field.team_members", widget="members"),
        FormField("status", "field.status", widget="select", options=tuple(s.value for s in ProjectStatus)),
    ),
)

ANNOUNCEMENTS = ResourceSpec(
    kind=ResourceKind.ANNOUNCEMENTS,
    section=AdminSection.ANNOUNCEMENTS,
    entity_cls=Announcement,
    draft_cls=AnnouncementDraft,
    search_fields=("title", "content"),
    form_fields=(
        FormField("title", "field.title", required=True),
        FormField("date", "field.date", widget="date"),
        FormField("content", "field.content", widget="textarea", required=True),
        FormField("links", "field.links", widget="lines"),
    ),
    after_create=create_derived_event,
)

EVENTS = ResourceSpec(
    kind=ResourceKind.EVENTS,
    section=AdminSection.EVENTS,
    entity_cls=Event,
    draft_cls=EventDraft,
    search_fields=("title", "description", "location"),
    facets={event_type.value: Facet("type", event_type.value) for event_type in EventType},
    form_fields=(
        FormField("title", "field.title", required=True),
        FormField("description", "field.description", widget="textarea"),
        FormField("date", "field.date", widget="date"),
        FormField("time", "field.time", widget="time"),
        FormField("location", "field.location"),
        FormField("type", "field.type", widget="select", options=tuple(t.value for t in EventType)),
    ),
)

RESOURCES: Dict[ResourceKind, ResourceSpec] = {
    spec.kind: spec for spec in (TEAM_MEMBERS, PROJECTS, ANNOUNCEMENTS, EVENTS)
}
