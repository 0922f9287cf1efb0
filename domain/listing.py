from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True, slots=True)
class Facet:
    """Exact-match constraint on one attribute, e.g. status == "active"."""

    field: str
    value: Any


def filter_records(records: Sequence[T], fields: Sequence[str], query: str = "", facet: Optional[Facet] = None) -> List[T]:
    """Case-insensitive substring search over `fields`, intersected with `facet`.

    Pure: the result depends only on the arguments. An empty query keeps every
    record; missing or None fields never match.
    """
    needle = (query or "").lower()
    out = []
    for record in records:
        if needle and not any(needle in _text(getattr(record, name, None)) for name in fields):
            continue
        if facet is not None and getattr(record, facet.field, None) != facet.value:
            continue
        out.append(record)
    return out


def newest_first(records: Iterable[T], attr: str = "created_at") -> List[T]:
    return sorted(records, key=lambda r: parse_timestamp(getattr(r, attr, None)), reverse=True)


def parse_timestamp(value: Any) -> datetime:
    """ISO-8601 string to an aware datetime; anything unparseable maps to the earliest instant."""
    if not value or not isinstance(value, str):
        return _EPOCH
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return _EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def as_str_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value if item]


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value).lower()
    return str(value).lower()
