"""
Form drafts sent to the backend on create/update.

Each draft validates the admin form input before any request goes out and
serialises to the backend's camelCase field names.
"""

from __future__ import annotations

import datetime as dt
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from domain.events import EventType
from domain.projects import ProjectStatus


def split_csv(value: Any) -> List[str]:
    """Accept either a list or a comma separated string ("a, b,, c")."""
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return [str(item).strip() for item in value if str(item).strip()]


def split_lines(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [line.strip() for line in value.splitlines() if line.strip()]
    return split_csv(value)


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


CsvList = Annotated[List[str], BeforeValidator(split_csv)]
LineList = Annotated[List[str], BeforeValidator(split_lines)]
OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]


class Draft(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class TeamMemberDraft(Draft):
    name: str = Field(min_length=1)
    role: str = Field(min_length=1)
    bio: str = ""
    avatar_url: OptionalText = Field(None, alias="avatarUrl")
    research_areas: CsvList = Field(default_factory=list, alias="researchAreas")
    github_url: OptionalText = Field(None, alias="githubUrl")
    linkedin_url: OptionalText = Field(None, alias="linkedinUrl")
    email: OptionalText = None
    is_active: bool = Field(True, alias="isActive")


class ProjectDraft(Draft):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    content: str = ""
    images: LineList = Field(default_factory=list)
    files: LineList = Field(default_factory=list)
    team_members: CsvList = Field(default_factory=list, alias="teamMembers")
    status: ProjectStatus = ProjectStatus.ACTIVE


class AnnouncementDraft(Draft):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    date: dt.date = Field(default_factory=dt.date.today)
    links: LineList = Field(default_factory=list)


class EventDraft(Draft):
    title: str = Field(min_length=1)
    description: str = ""
    date: dt.date = Field(default_factory=dt.date.today)
    time: str = Field("09:00", pattern=r"^\d{2}:\d{2}$")
    location: OptionalText = None
    type: EventType = EventType.MEETING

    @field_validator("time", mode="before")
    @classmethod
    def _trim_seconds(cls, value: Any) -> Any:
        # st.time_input yields datetime.time; the backend stores HH:MM.
        if isinstance(value, dt.time):
            return value.strftime("%H:%M")
        if isinstance(value, str) and len(value) == 8 and value.count(":") == 2:
            return value[:5]
        return value
