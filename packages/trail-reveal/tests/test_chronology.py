"""Tests for visit date parsing and first-visit ordering."""
from __future__ import annotations

from datetime import date, datetime, timezone

from trail_reveal.chronology import apply_first_visits, chronological_order, parse_visit_date
from trailmap.models import Marker, Visit


class TestParseVisitDate:
    def test_date_only_is_utc_midnight(self) -> None:
        assert parse_visit_date("2021-05-01") == datetime(2021, 5, 1, tzinfo=timezone.utc)

    def test_naive_datetime_is_utc(self) -> None:
        assert parse_visit_date("2021-05-01T10:30:00") == datetime(
            2021, 5, 1, 10, 30, tzinfo=timezone.utc
        )

    def test_zulu_suffix(self) -> None:
        assert parse_visit_date("2021-05-01T10:30:00Z") == datetime(
            2021, 5, 1, 10, 30, tzinfo=timezone.utc
        )

    def test_offset_converted_to_utc(self) -> None:
        assert parse_visit_date("2021-05-01T02:00:00+02:00") == datetime(
            2021, 5, 1, 0, 0, tzinfo=timezone.utc
        )

    def test_malformed(self) -> None:
        assert parse_visit_date("not a date") is None
        assert parse_visit_date("2021-13-45") is None
        assert parse_visit_date("") is None


class TestChronologicalOrder:
    def test_first_visit_wins(self) -> None:
        visits = [
            Visit("A", "2021-05-01"),
            Visit("B", "2020-01-01"),
            Visit("A", "2022-01-01"),
        ]
        order = chronological_order(visits)
        assert order.marker_ids == ["B", "A"]
        assert order.first_visits["A"] == datetime(2021, 5, 1, tzinfo=timezone.utc)
        assert len(order) == 2

    def test_ties_keep_input_order(self) -> None:
        visits = [
            Visit("C", "2020-01-01"),
            Visit("A", "2020-01-01"),
            Visit("B", "2020-01-01"),
        ]
        assert chronological_order(visits).marker_ids == ["C", "A", "B"]

    def test_mixed_date_and_datetime(self) -> None:
        visits = [
            Visit("late", "2020-01-01T12:00:00"),
            Visit("early", "2020-01-01"),
        ]
        assert chronological_order(visits).marker_ids == ["early", "late"]

    def test_malformed_dates_rejected_not_raised(self) -> None:
        bad = Visit("X", "someday")
        order = chronological_order([bad, Visit("Y", "2020-01-01")])
        assert order.marker_ids == ["Y"]
        assert order.rejected == [bad]

    def test_malformed_repeat_does_not_hide_good_visit(self) -> None:
        order = chronological_order([Visit("X", "??"), Visit("X", "2019-02-03")])
        assert order.marker_ids == ["X"]

    def test_empty(self) -> None:
        order = chronological_order([])
        assert order.marker_ids == []
        assert order.rejected == []


class TestApplyFirstVisits:
    def test_sets_dates_and_clears_unvisited(self) -> None:
        a = Marker(id="A", lon=0.0, lat=0.0)
        b = Marker(id="B", lon=0.0, lat=0.0, first_visit=date(1999, 1, 1))
        order = chronological_order([Visit("A", "2021-05-01T23:00:00")])
        apply_first_visits([a, b], order)
        assert a.first_visit == date(2021, 5, 1)
        assert b.first_visit is None
