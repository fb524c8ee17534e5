"""Interaction state records."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from trailmap.models import Marker


class HoverState(Enum):
    IDLE = "idle"
    HOVERING = "hovering"


class TouchMode(Enum):
    IDLE = "touch_idle"
    SELECTED = "touch_selected"


@dataclass
class TouchState:
    """``active`` runs from touch-start until two frames after touch-end."""

    active: bool = False
    current_target_id: str | None = None

    @property
    def mode(self) -> TouchMode:
        if self.current_target_id is None:
            return TouchMode.IDLE
        return TouchMode.SELECTED


_PARK_SUFFIX = re.compile(r"\s+National Park(?:\s+&\s+Preserve)?$", re.IGNORECASE)
_STATE_PARKS_SUFFIX = re.compile(r"\s+National\s+and\s+State\s+Parks$", re.IGNORECASE)


def shorten_name(name: str) -> str:
    """Drop a trailing "National Park" style designation."""
    return _STATE_PARKS_SUFFIX.sub("", _PARK_SUFFIX.sub("", name))


def tooltip_label(marker: Marker) -> str:
    label = shorten_name(marker.display_name or marker.id)
    if marker.region:
        return f"{label}, {marker.region}"
    return label
