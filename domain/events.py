from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from .listing import parse_date


class EventType(str, Enum):
    MEETING = "meeting"
    DEADLINE = "deadline"
    CONFERENCE = "conference"
    OTHER = "other"

    @classmethod
    def bucket(cls, value: Any) -> "EventType":
        """Unknown types are displayed as OTHER."""
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


@dataclass
class Event:
    id: str
    title: str
    description: str = ""
    date: Optional[str] = None
    time: str = "09:00"
    location: Optional[str] = None
    type: str = EventType.OTHER.value
    created_at: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Event":
        return cls(
            id=str(data.get("id", "")),
            title=data.get("title") or "",
            description=data.get("description") or "",
            date=data.get("date"),
            time=data.get("time") or "",
            location=data.get("location") or None,
            type=data.get("type") or EventType.OTHER.value,
            created_at=data.get("createdAt") or data.get("created_at"),
        )

    @property
    def label(self) -> str:
        return self.title

    @property
    def day(self) -> Optional[date]:
        return parse_date(self.date)


def upcoming_events(events: Iterable[Event], today: date, *, inclusive: bool = False) -> List[Event]:
    """Events after `today`, soonest first.

    The public calendar uses strictly-after; the admin overview counts today
    as upcoming (`inclusive=True`). Events without a readable date are dropped.
    """
    out = []
    for event in events:
        day = event.day
        if day is None:
            continue
        if day > today or (inclusive and day == today):
            out.append(event)
    return sorted(out, key=lambda e: (e.day, e.time or ""))
