"""Shared type aliases and errors for trailmap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

MarkerId = str
Point = tuple[float, float]

# Called with the frame timestamp in milliseconds.
FrameCallback = Callable[[float], None]

# (lon, lat) -> planar point, or None when outside the projection's domain.
Projector = Callable[[float, float], "Point | None"]


@dataclass(frozen=True, slots=True)
class ScaleAbout:
    """Uniform scale centred on (cx, cy). Handed to the rendering surface."""

    cx: float
    cy: float
    scale: float

    def to_svg(self) -> str:
        return (
            f"translate({self.cx}, {self.cy}) scale({self.scale}) "
            f"translate({-self.cx}, {-self.cy})"
        )


class UnknownMarkerError(KeyError):
    """Raised when an operation names a marker that was never registered."""

    def __init__(self, marker_id: str, message: str) -> None:
        self.marker_id = marker_id
        super().__init__(message)
