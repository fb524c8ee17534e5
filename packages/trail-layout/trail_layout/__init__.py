"""trail-layout - Projection and collision layout for map markers."""
from __future__ import annotations

from trail_layout.collision import circle_overlap, distance, max_overlap
from trail_layout.layout import LayoutNode, layout_markers, relax
from trail_layout.projection import AlbersProjector, place_markers, project

__all__ = [
    "AlbersProjector",
    "LayoutNode",
    "circle_overlap",
    "distance",
    "layout_markers",
    "max_overlap",
    "place_markers",
    "project",
    "relax",
]
