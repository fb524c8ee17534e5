"""Marker and Visit records."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from trailmap.types import Point


@dataclass
class Marker:
    """One point of interest.

    ``anchor`` is the undisplaced projected point and is set once by the
    projection adapter. ``x``/``y`` are written once by the layout.
    """

    id: str
    lon: float
    lat: float
    category: str = ""
    display_name: str = ""
    region: str = ""
    radius: float = 0.0
    anchor: Point | None = None
    x: float = 0.0
    y: float = 0.0
    first_visit: date | None = None

    @property
    def position(self) -> Point:
        return (self.x, self.y)


@dataclass(frozen=True)
class Visit:
    """A dated visit to a marker. ``extra`` holds gallery-only fields."""

    marker_id: str
    date: str
    extra: dict[str, Any] = field(default_factory=dict)
