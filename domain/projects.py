from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from .listing import as_str_list, newest_first


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"

    @classmethod
    def bucket(cls, value: Any) -> Optional["ProjectStatus"]:
        """Known status or None; None renders with the neutral style."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass
class Project:
    id: str
    name: str
    description: str = ""
    content: str = ""
    images: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    team_members: List[str] = field(default_factory=list)
    status: str = ProjectStatus.ACTIVE.value
    created_at: Optional[str] = None
    creator: Optional[Dict[str, Any]] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Project":
        creator = data.get("creator")
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or "",
            description=data.get("description") or "",
            content=data.get("content") or "",
            images=as_str_list(data.get("images")),
            files=as_str_list(data.get("files")),
            team_members=as_str_list(data.get("teamMembers")),
            status=data.get("status") or ProjectStatus.ACTIVE.value,
            created_at=data.get("createdAt") or data.get("created_at"),
            creator=creator if isinstance(creator, dict) else None,
        )

    @property
    def label(self) -> str:
        return self.name


def featured_projects(projects: Iterable[Project], limit: int = 3) -> List[Project]:
    return newest_first(projects)[:limit]


def projects_of_member(member_id: str, projects: Iterable[Project]) -> List[Project]:
    return [p for p in projects if member_id in p.team_members]
