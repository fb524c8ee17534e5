"""Collision relaxation: nudge overlapping markers apart, pull them home."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from trail_layout.collision import circle_overlap
from trailmap.types import Point

if TYPE_CHECKING:
    from trailmap.config import MapConfig
    from trailmap.models import Marker

log = logging.getLogger(__name__)


@dataclass
class LayoutNode:
    """Working state of one disc during relaxation."""

    anchor: Point
    radius: float
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0


def relax(
    anchors: Sequence[Point],
    radii: Sequence[float],
    passes: int,
    *,
    padding: float = 0.0,
    anchor_strength: float = 1.0,
    separation_ratio: float = 0.5,
    velocity_decay: float = 0.4,
) -> list[Point]:
    """Return one adjusted position per anchor, in input order.

    Each pass pulls every disc toward its anchor, then separates every
    overlapping pair along the line between their predicted centres, then
    integrates. Velocity updates are applied in place so later pairs see
    earlier pushes. No randomness: identical input gives identical output.
    """
    if len(anchors) != len(radii):
        raise ValueError(
            f"anchors and radii differ in length ({len(anchors)} != {len(radii)})"
        )
    if passes < 0:
        raise ValueError(f"passes must be >= 0, got {passes}")

    nodes = [
        LayoutNode(anchor=(ax, ay), radius=r, x=ax, y=ay)
        for (ax, ay), r in zip(anchors, radii)
    ]
    keep = 1.0 - velocity_decay
    push_b = 1.0 - separation_ratio

    for _ in range(passes):
        for node in nodes:
            node.vx += (node.anchor[0] - node.x) * anchor_strength
            node.vy += (node.anchor[1] - node.y) * anchor_strength

        for i in range(len(nodes)):
            a = nodes[i]
            for j in range(i + 1, len(nodes)):
                b = nodes[j]
                hit = circle_overlap(
                    (a.x + a.vx, a.y + a.vy),
                    a.radius,
                    (b.x + b.vx, b.y + b.vy),
                    b.radius,
                    padding,
                )
                if hit is None:
                    continue
                (nx, ny), depth = hit
                a.vx -= nx * depth * separation_ratio
                a.vy -= ny * depth * separation_ratio
                b.vx += nx * depth * push_b
                b.vy += ny * depth * push_b

        for node in nodes:
            node.x += node.vx
            node.y += node.vy
            node.vx *= keep
            node.vy *= keep

    return [(node.x, node.y) for node in nodes]


def layout_markers(markers: Sequence[Marker], config: MapConfig) -> None:
    """Write relaxed positions onto already-anchored markers."""
    anchors: list[Point] = []
    for m in markers:
        if m.anchor is None:
            raise ValueError(f"Marker '{m.id}' has no anchor; project it first")
        anchors.append(m.anchor)
    positions = relax(
        anchors,
        [m.radius for m in markers],
        config.relaxation_passes,
        padding=config.collision_padding,
        anchor_strength=config.anchor_strength,
        separation_ratio=config.separation_ratio,
        velocity_decay=config.velocity_decay,
    )
    for m, (x, y) in zip(markers, positions):
        m.x = x
        m.y = y
    log.debug("Relaxed %d markers over %d passes", len(markers), config.relaxation_passes)
