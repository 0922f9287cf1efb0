from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .listing import as_str_list


@dataclass
class TeamMember:
    id: str
    name: str
    role: str
    bio: str = ""
    avatar_url: Optional[str] = None
    research_areas: List[str] = field(default_factory=list)
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    email: Optional[str] = None
    is_active: bool = True
    created_at: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TeamMember":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or "",
            role=data.get("role") or "",
            bio=data.get("bio") or "",
            avatar_url=data.get("avatarUrl") or None,
            research_areas=as_str_list(data.get("researchAreas")),
            github_url=data.get("githubUrl") or None,
            linkedin_url=data.get("linkedinUrl") or None,
            email=data.get("email") or None,
            is_active=bool(data.get("isActive", True)),
            created_at=data.get("createdAt") or data.get("created_at"),
        )

    @property
    def label(self) -> str:
        return self.name


def members_of_project(member_ids: Iterable[str], members: Iterable[TeamMember]) -> List[TeamMember]:
    """Resolve project membership ids; unknown ids simply have no match."""
    wanted = set(member_ids or ())
    return [m for m in members if m.id in wanted]


def member_options(selected_ids: Iterable[str], members: Iterable[TeamMember]) -> Dict[str, str]:
    """Id -> label for the project members picker.

    Known members come first. Selected ids that do not resolve (deleted member,
    failed read) stay as options labelled by their raw id, so saving the form
    never drops them.
    """
    options = {m.id: m.name for m in members}
    for member_id in selected_ids or ():
        options.setdefault(member_id, member_id)
    return options
