"""Tests for circle overlap detection and collision relaxation."""
from __future__ import annotations

import math

import pytest
from trail_layout.collision import circle_overlap, distance, max_overlap
from trail_layout.layout import layout_markers, relax
from trailmap.config import MapConfig
from trailmap.models import Marker


# ── circle_overlap ────────────────────────────────────────────────


class TestCircleOverlap:
    def test_no_overlap(self) -> None:
        assert circle_overlap((0.0, 0.0), 1.0, (3.0, 0.0), 1.0) is None

    def test_touching_is_no_collision(self) -> None:
        assert circle_overlap((0.0, 0.0), 1.0, (2.0, 0.0), 1.0) is None

    def test_padding_turns_touch_into_overlap(self) -> None:
        result = circle_overlap((0.0, 0.0), 1.0, (2.0, 0.0), 1.0, padding=0.5)
        assert result is not None
        _, depth = result
        assert math.isclose(depth, 0.5)

    def test_overlapping(self) -> None:
        result = circle_overlap((0.0, 0.0), 1.0, (0.0, 1.5), 1.0)
        assert result is not None
        normal, depth = result
        assert math.isclose(depth, 0.5)
        assert math.isclose(normal[0], 0.0)
        assert math.isclose(normal[1], 1.0)

    def test_coincident_centers_use_x_axis(self) -> None:
        result = circle_overlap((5.0, 5.0), 1.0, (5.0, 5.0), 2.0)
        assert result == ((1.0, 0.0), 3.0)

    def test_max_overlap(self) -> None:
        positions = [(0.0, 0.0), (1.0, 0.0), (10.0, 0.0)]
        assert math.isclose(max_overlap(positions, [1.0, 1.0, 1.0]), 1.0)
        assert max_overlap([(0.0, 0.0), (5.0, 0.0)], [1.0, 1.0]) == 0.0

    def test_distance(self) -> None:
        assert distance((0.0, 0.0), (3.0, 4.0)) == 5.0


# ── relax ─────────────────────────────────────────────────────────


class TestRelax:
    def test_zero_passes_returns_anchors(self) -> None:
        anchors = [(1.0, 2.0), (1.0, 2.0), (3.5, -4.25)]
        assert relax(anchors, [5.0, 5.0, 5.0], 0) == anchors

    def test_empty_input(self) -> None:
        assert relax([], [], 5) == []

    def test_clear_markers_stay_on_anchor(self) -> None:
        anchors = [(0.0, 0.0), (100.0, 0.0), (0.0, 100.0)]
        assert relax(anchors, [10.0, 10.0, 10.0], 5) == anchors

    def test_coincident_pair_separates_along_x(self) -> None:
        out = relax([(50.0, 50.0), (50.0, 50.0)], [16.0, 16.0], 1, padding=2.0)
        (ax, ay), (bx, by) = out
        assert math.isclose(ax, 33.0)
        assert math.isclose(bx, 67.0)
        assert ay == 50.0 and by == 50.0

    def test_pair_split_equally_along_center_line(self) -> None:
        out = relax([(0.0, 0.0), (10.0, 0.0)], [8.0, 8.0], 1)
        assert math.isclose(out[0][0], -3.0)
        assert math.isclose(out[1][0], 13.0)

    def test_pair_stays_separated_over_more_passes(self) -> None:
        for passes in (1, 2, 5, 20):
            out = relax([(0.0, 0.0), (0.0, 0.0)], [16.0, 10.0], passes, padding=2.0)
            assert distance(out[0], out[1]) >= 26.0 - 1e-9

    def test_separation_ratio_shifts_push(self) -> None:
        out = relax([(0.0, 0.0), (10.0, 0.0)], [8.0, 8.0], 1, separation_ratio=0.0)
        assert out[0] == (0.0, 0.0)
        assert math.isclose(out[1][0], 16.0)

    def test_markers_stay_close_to_anchor(self) -> None:
        anchors = [(0.0, 0.0), (4.0, 0.0), (2.0, 3.0)]
        out = relax(anchors, [5.0, 5.0, 5.0], 5)
        for (ax, ay), p in zip(anchors, out):
            assert distance((ax, ay), p) < 20.0

    def test_deterministic(self) -> None:
        anchors = [(float(i % 4), float(i // 4)) for i in range(12)]
        radii = [16.0 if i % 3 else 10.0 for i in range(12)]
        first = relax(anchors, radii, 5, padding=2.0)
        second = relax(anchors, radii, 5, padding=2.0)
        assert first == second

    def test_mismatched_lengths(self) -> None:
        with pytest.raises(ValueError):
            relax([(0.0, 0.0)], [], 1)

    def test_negative_passes(self) -> None:
        with pytest.raises(ValueError):
            relax([(0.0, 0.0)], [1.0], -1)


class TestLayoutMarkers:
    def test_writes_positions_and_keeps_anchor(self) -> None:
        cfg = MapConfig(relaxation_passes=1, collision_padding=2.0)
        a = Marker(id="a", lon=0.0, lat=0.0, radius=16.0, anchor=(50.0, 50.0), x=50.0, y=50.0)
        b = Marker(id="b", lon=0.0, lat=0.0, radius=16.0, anchor=(50.0, 50.0), x=50.0, y=50.0)
        layout_markers([a, b], cfg)
        assert math.isclose(a.x, 33.0)
        assert math.isclose(b.x, 67.0)
        assert a.anchor == (50.0, 50.0)
        assert b.anchor == (50.0, 50.0)

    def test_unanchored_marker_rejected(self) -> None:
        with pytest.raises(ValueError, match="zion"):
            layout_markers([Marker(id="zion", lon=0.0, lat=0.0, radius=1.0)], MapConfig())
