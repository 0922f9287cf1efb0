"""Admin overview: counts and a merged recent-activity feed across resources."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence

from domain.announcements import Announcement
from domain.events import Event, upcoming_events
from domain.listing import newest_first, parse_timestamp
from domain.projects import Project, ProjectStatus
from domain.team_members import TeamMember

from .resource_manager import ResourceManager
from .resources import ResourceKind

logger = logging.getLogger(__name__)

RECENT_PER_SOURCE = 3
RECENT_LIMIT = 5


@dataclass(frozen=True, slots=True)
class ActivityItem:
    entity_id: str
    kind: str
    title: str
    timestamp: Optional[str]


@dataclass(slots=True)
class DashboardStats:
    total_members: int = 0
    total_projects: int = 0
    active_projects: int = 0
    total_announcements: int = 0
    total_events: int = 0
    upcoming_events: int = 0
    recent_activity: List[ActivityItem] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)


def fetch_concurrently(managers: Sequence[ResourceManager], *, max_workers: int = 4) -> None:
    """Run `list()` on every manager in parallel and wait for all of them.

    `list()` never raises, so one failing source cannot cancel the others.
    """
    if not managers:
        return
    with ThreadPoolExecutor(max_workers=min(max_workers, len(managers))) as executor:
        futures = [executor.submit(manager.list) for manager in managers]
        for manager, future in zip(managers, futures):
            future.result()
            logger.debug("Loaded %s (%d items)", manager.spec.endpoint, len(manager.items))


def compute_stats(
    members: Sequence[TeamMember],
    projects: Sequence[Project],
    announcements: Sequence[Announcement],
    events: Sequence[Event],
    *,
    today: date,
    per_source: int = RECENT_PER_SOURCE,
    limit: int = RECENT_LIMIT,
) -> DashboardStats:
    """Derive the overview from the four lists. Pure; owns no state."""
    recent = [
        ActivityItem(p.id, "project", p.name, p.created_at) for p in newest_first(projects)[:per_source]
    ] + [
        ActivityItem(a.id, "announcement", a.title, a.created_at) for a in newest_first(announcements)[:per_source]
    ]
    recent.sort(key=lambda item: parse_timestamp(item.timestamp), reverse=True)

    return DashboardStats(
        total_members=len(members),
        total_projects=len(projects),
        active_projects=sum(1 for p in projects if p.status == ProjectStatus.ACTIVE.value),
        total_announcements=len(announcements),
        total_events=len(events),
        upcoming_events=len(upcoming_events(events, today, inclusive=True)),
        recent_activity=recent[:limit],
    )


class AggregateDashboard:
    """Refreshes the four managers concurrently and recomputes the stats."""

    def __init__(self, managers: Dict[ResourceKind, ResourceManager], *, max_workers: int = 4) -> None:
        self._managers = managers
        self._max_workers = max_workers

    def refresh(self, *, today: Optional[date] = None) -> DashboardStats:
        fetch_concurrently(list(self._managers.values()), max_workers=self._max_workers)
        return self.stats(today=today)

    def stats(self, *, today: Optional[date] = None) -> DashboardStats:
        stats = compute_stats(
            self._items(ResourceKind.TEAM_MEMBERS),
            self._items(ResourceKind.PROJECTS),
            self._items(ResourceKind.ANNOUNCEMENTS),
            self._items(ResourceKind.EVENTS),
            today=today or date.today(),
        )
        stats.failures = [
            f"{kind.value}: {manager.notice}" for kind, manager in self._managers.items() if manager.notice
        ]
        return stats

    def _items(self, kind: ResourceKind) -> list:
        manager = self._managers.get(kind)
        return manager.items if manager is not None else []
