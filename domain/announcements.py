from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .events import EventType

DERIVED_EVENT_PREFIX = "Announcement: "
DERIVED_EVENT_TIME = "09:00"
DERIVED_EVENT_LOCATION = "Web Portal"


@dataclass
class Announcement:
    id: str
    title: str
    content: str = ""
    date: Optional[str] = None
    links: List[str] = field(default_factory=list)
    created_at: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Announcement":
        links = data.get("links") or []
        return cls(
            id=str(data.get("id", "")),
            title=data.get("title") or "",
            content=data.get("content") or "",
            date=data.get("date"),
            links=[str(link) for link in links if link],
            created_at=data.get("createdAt") or data.get("created_at"),
        )

    @property
    def label(self) -> str:
        return self.title


def derived_event_payload(announcement: Dict[str, Any]) -> Dict[str, Any]:
    """Calendar entry created alongside a new announcement."""
    return {
        "title": f"{DERIVED_EVENT_PREFIX}{announcement.get('title', '')}",
        "description": announcement.get("content", ""),
        "date": announcement.get("date"),
        "time": DERIVED_EVENT_TIME,
        "location": DERIVED_EVENT_LOCATION,
        "type": EventType.OTHER.value,
    }
