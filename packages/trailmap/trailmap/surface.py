"""Rendering, counter and tooltip protocols, plus an in-memory surface."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Protocol

from trailmap.types import ScaleAbout

if TYPE_CHECKING:
    from trailmap.models import Marker
    from trailmap.types import Point


class RenderingSurface(Protocol):
    def place(self, marker_id: str, x: float, y: float, radius: float) -> None: ...
    def set_visual_treatment(self, marker_id: str, treatment: str) -> None: ...
    def set_transform(self, marker_id: str, transform: ScaleAbout | None) -> None: ...
    def on_image_settled(self, marker_id: str, callback: Callable[[], None]) -> None: ...


class CounterSink(Protocol):
    def set_count(self, n: int) -> None: ...
    def mark_complete(self) -> None: ...


class TooltipView(Protocol):
    def show(self, marker: Marker) -> None: ...
    def hide(self) -> None: ...
    def is_visible(self) -> bool: ...
    def size(self) -> tuple[float, float]: ...
    def move_to(self, anchor: Point, flip_x: bool, flip_y: bool) -> None: ...


@dataclass
class PlacedMarker:
    x: float
    y: float
    radius: float
    treatment: str | None = None
    transform: ScaleAbout | None = None


class RecordingSurface:
    """RenderingSurface that keeps everything in memory.

    Images settle only when :meth:`settle` is called, unless
    ``auto_settle`` is set.
    """

    def __init__(self, auto_settle: bool = False) -> None:
        self.markers: dict[str, PlacedMarker] = {}
        self.treatment_log: list[tuple[str, str]] = []
        self.transform_log: list[tuple[str, ScaleAbout | None]] = []
        self._auto_settle = auto_settle
        self._settled: set[str] = set()
        self._waiting: dict[str, list[Callable[[], None]]] = {}

    def place(self, marker_id: str, x: float, y: float, radius: float) -> None:
        self.markers[marker_id] = PlacedMarker(x, y, radius)

    def set_visual_treatment(self, marker_id: str, treatment: str) -> None:
        self.markers[marker_id].treatment = treatment
        self.treatment_log.append((marker_id, treatment))

    def set_transform(self, marker_id: str, transform: ScaleAbout | None) -> None:
        self.markers[marker_id].transform = transform
        self.transform_log.append((marker_id, transform))

    def on_image_settled(self, marker_id: str, callback: Callable[[], None]) -> None:
        if self._auto_settle or marker_id in self._settled:
            callback()
            return
        self._waiting.setdefault(marker_id, []).append(callback)

    def settle(self, marker_id: str) -> None:
        """Mark an image as loaded (or failed) and fire its waiters."""
        self._settled.add(marker_id)
        for callback in self._waiting.pop(marker_id, []):
            callback()

    def treatment_of(self, marker_id: str) -> str | None:
        return self.markers[marker_id].treatment

    def transform_of(self, marker_id: str) -> ScaleAbout | None:
        return self.markers[marker_id].transform


@dataclass
class RecordingCounter:
    counts: list[int] = field(default_factory=list)
    completed: int = 0

    @property
    def value(self) -> int | None:
        return self.counts[-1] if self.counts else None

    def set_count(self, n: int) -> None:
        self.counts.append(n)

    def mark_complete(self) -> None:
        self.completed += 1


class RecordingTooltip:
    """TooltipView with a fixed rendered size."""

    def __init__(self, width: float = 200.0, height: float = 80.0) -> None:
        self.width = width
        self.height = height
        self.marker: Marker | None = None
        self.visible = False
        self.anchor: Point | None = None
        self.flip_x = False
        self.flip_y = False
        self.moves = 0

    def show(self, marker: Marker) -> None:
        self.marker = marker
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def is_visible(self) -> bool:
        return self.visible

    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def move_to(self, anchor: Point, flip_x: bool, flip_y: bool) -> None:
        self.anchor = anchor
        self.flip_x = flip_x
        self.flip_y = flip_y
        self.moves += 1
