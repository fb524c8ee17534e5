"""trail-touch - Hover/tap interaction and tooltip placement."""
from __future__ import annotations

from trail_touch.controller import InteractionController
from trail_touch.placement import Placement, Viewport, place_tooltip, tooltip_origin
from trail_touch.state import HoverState, TouchMode, TouchState, shorten_name, tooltip_label

__all__ = [
    "HoverState",
    "InteractionController",
    "Placement",
    "TouchMode",
    "TouchState",
    "Viewport",
    "place_tooltip",
    "shorten_name",
    "tooltip_label",
    "tooltip_origin",
]
