"""Viewport-aware tooltip placement. Pure functions, no state."""
from __future__ import annotations

from dataclasses import dataclass

from trailmap.types import Point


@dataclass(frozen=True)
class Viewport:
    """Visible area. ``offset`` is the visual viewport's scroll/zoom origin."""

    width: float
    height: float
    offset_x: float = 0.0
    offset_y: float = 0.0

    @classmethod
    def resolve(
        cls,
        window_size: tuple[float, float],
        visual: Viewport | None = None,
    ) -> Viewport:
        """Prefer the zoom-aware visual viewport, else the window size."""
        if visual is not None:
            return visual
        return cls(window_size[0], window_size[1])


@dataclass(frozen=True)
class Placement:
    anchor: Point
    flip_x: bool
    flip_y: bool


def place_tooltip(
    anchor: Point,
    size: tuple[float, float],
    viewport: Viewport,
    padding: float = 0.0,
) -> Placement:
    """Flip an axis when the tooltip's far edge would pass the viewport edge."""
    x, y = anchor
    width, height = size
    rel_x = x - viewport.offset_x
    rel_y = y - viewport.offset_y
    flip_x = rel_x + width > viewport.width - padding
    flip_y = rel_y + height > viewport.height - padding
    return Placement(anchor=anchor, flip_x=flip_x, flip_y=flip_y)


def tooltip_origin(placement: Placement, size: tuple[float, float]) -> Point:
    """Top-left corner the tooltip is drawn at after flipping."""
    x, y = placement.anchor
    if placement.flip_x:
        x -= size[0]
    if placement.flip_y:
        y -= size[1]
    return (x, y)
