"""
Unit tests for client-side search, facets and ordering.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from domain.listing import Facet, filter_records, newest_first, parse_date, parse_timestamp
from domain.team_members import TeamMember

FIELDS = ("name", "role", "email")


@pytest.fixture
def members() -> list:
    return [
        TeamMember(id="1", name="Ana García", role="PhD Student", email="ana@lab.test", bio="graph theory"),
        TeamMember(id="2", name="Bruno Díaz", role="Postdoc", email=None, is_active=False),
        TeamMember(id="3", name="Carla Ruiz", role="Principal Investigator", email="carla@lab.test"),
    ]


class TestFilterRecords:
    def test_empty_query_returns_list_unchanged(self, members) -> None:
        assert filter_records(members, FIELDS, "") == members

    def test_case_insensitive_substring(self, members) -> None:
        assert [m.id for m in filter_records(members, FIELDS, "POST")] == ["2"]
        assert [m.id for m in filter_records(members, FIELDS, "lab.TEST")] == ["1", "3"]

    @pytest.mark.parametrize("query", ["an", "STUDENT", "ruiz", "@", "zzz", "d"])
    def test_matches_exactly_designated_fields(self, members, query) -> None:
        expected = [
            m for m in members if any(query.lower() in (getattr(m, f) or "").lower() for f in FIELDS)
        ]
        assert filter_records(members, FIELDS, query) == expected

    def test_non_search_fields_are_ignored(self, members) -> None:
        assert filter_records(members, FIELDS, "graph") == []

    def test_none_fields_never_match(self, members) -> None:
        assert filter_records(members, ("email",), "none") == []

    def test_facet_intersects_query(self, members) -> None:
        inactive = Facet("is_active", False)
        assert [m.id for m in filter_records(members, FIELDS, "", inactive)] == ["2"]
        assert filter_records(members, FIELDS, "ana", inactive) == []

    def test_pure(self, members) -> None:
        snapshot = list(members)
        first = filter_records(members, FIELDS, "a")
        second = filter_records(members, FIELDS, "a")

        assert first == second
        assert members == snapshot


class TestOrdering:
    def test_newest_first_with_unparseable_last(self) -> None:
        rows = [
            TeamMember(id="old", name="", role="", created_at="2024-01-01T00:00:00Z"),
            TeamMember(id="bad", name="", role="", created_at="yesterday"),
            TeamMember(id="new", name="", role="", created_at="2025-03-01T10:00:00.000Z"),
        ]
        assert [m.id for m in newest_first(rows)] == ["new", "old", "bad"]

    def test_parse_timestamp_is_aware(self) -> None:
        assert parse_timestamp("2025-06-01T12:00:00") == datetime(2025, 6, 1, 12, tzinfo=timezone.utc)
        assert parse_timestamp(None) < parse_timestamp("1970-01-01T00:00:00Z")

    def test_parse_date_variants(self) -> None:
        assert parse_date("2025-06-15T00:00:00.000Z") == date(2025, 6, 15)
        assert parse_date(datetime(2025, 6, 15, 8)) == date(2025, 6, 15)
        assert parse_date(date(2025, 6, 15)) == date(2025, 6, 15)
        assert parse_date("not a date") is None
        assert parse_date("") is None
