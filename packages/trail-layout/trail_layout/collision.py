"""Pure circle overlap detection on the plane."""
from __future__ import annotations

import math

from trailmap.types import Point


def distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def circle_overlap(
    pos_a: Point,
    radius_a: float,
    pos_b: Point,
    radius_b: float,
    padding: float = 0.0,
) -> tuple[Point, float] | None:
    """Detect disc overlap. Returns (unit normal A→B, depth) or None.

    ``padding`` widens the required gap; touching discs do not collide.
    """
    dx = pos_b[0] - pos_a[0]
    dy = pos_b[1] - pos_a[1]
    dist_sq = dx * dx + dy * dy
    r_sum = radius_a + radius_b + padding
    if dist_sq >= r_sum * r_sum:
        return None
    dist = math.sqrt(dist_sq)
    if dist == 0.0:
        # Coincident centers separate along +x.
        return (1.0, 0.0), r_sum
    return (dx / dist, dy / dist), r_sum - dist


def max_overlap(positions: list[Point], radii: list[float]) -> float:
    """Largest pairwise overlap (0.0 when every disc is clear)."""
    worst = 0.0
    for i in range(len(positions)):
        for j in range(i + 1, len(positions)):
            hit = circle_overlap(positions[i], radii[i], positions[j], radii[j])
            if hit is not None and hit[1] > worst:
                worst = hit[1]
    return worst
