"""MapView - start-up wiring from raw records to an interactive reveal.

Sequence: project -> relax -> place (dormant) -> wait for every image to
settle -> pause ``reveal_start_delay`` -> chronological reveal. Interaction
is attached as soon as markers are placed and does not depend on reveal
progress.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Sequence

from trail_layout import AlbersProjector, layout_markers, place_markers
from trail_reveal import (
    ChronologicalOrder,
    RevealSequencer,
    SettleBarrier,
    apply_first_visits,
    chronological_order,
    wait_for_images,
)
from trail_touch import InteractionController, Viewport
from trail_tween import AnimationScheduler
from trailmap.config import MapConfig

if TYPE_CHECKING:
    from trailmap.frames import FrameLoop
    from trailmap.models import Marker, Visit
    from trailmap.surface import CounterSink, RenderingSurface, TooltipView
    from trailmap.types import Projector

log = logging.getLogger(__name__)


class MapView:
    def __init__(
        self,
        surface: RenderingSurface,
        counter: CounterSink,
        tooltip: TooltipView,
        frames: FrameLoop,
        config: MapConfig | None = None,
        projector: Projector | None = None,
        viewport: Callable[[], Viewport] | None = None,
        on_finished: Callable[[], None] | None = None,
    ) -> None:
        self.config = config if config is not None else MapConfig()
        self.surface = surface
        self.counter = counter
        self.tooltip = tooltip
        self.frames = frames
        self._projector = projector
        self._viewport = viewport or self._plane_viewport
        self.scheduler = AnimationScheduler(frames)
        self.sequencer = RevealSequencer(
            self.scheduler, surface, counter, self.config, on_finished=on_finished
        )
        self.markers: list[Marker] = []
        self.order = ChronologicalOrder()
        self.controller: InteractionController | None = None
        self.barrier: SettleBarrier | None = None

    def _plane_viewport(self) -> Viewport:
        return Viewport(self.config.width, self.config.height)

    @property
    def markers_by_id(self) -> dict[str, Marker]:
        return {m.id: m for m in self.markers}

    def build(self, markers: Sequence[Marker], visits: Sequence[Visit]) -> list[Marker]:
        """Place markers and arm the reveal. Returns the placed markers."""
        if self.barrier is not None:
            raise ValueError("MapView has already been built")

        projector = self._projector or AlbersProjector.for_config(self.config)
        self.markers = place_markers(markers, projector, self.config)
        layout_markers(self.markers, self.config)
        for m in self.markers:
            self.surface.place(m.id, m.x, m.y, m.radius)
            self.surface.set_visual_treatment(m.id, self.config.dormant_treatment)

        self.order = chronological_order(visits)
        for visit in self.order.rejected:
            log.warning(
                "Skipping visit to '%s': malformed date %r", visit.marker_id, visit.date
            )
        apply_first_visits(self.markers, self.order)
        log.info(
            "Placed %d of %d markers, %d visited",
            len(self.markers), len(markers), len(self.order),
        )

        self.controller = InteractionController(
            self.markers,
            self.surface,
            self.tooltip,
            self.frames,
            self.config,
            self._viewport,
        )
        self.barrier = wait_for_images(
            self.surface, [m.id for m in self.markers], self._images_settled
        )
        return self.markers

    def _images_settled(self) -> None:
        log.debug("Images settled; reveal in %.0f ms", self.config.reveal_start_delay)
        self.frames.call_later(self.config.reveal_start_delay, self._start_reveal)

    def _start_reveal(self, now: float) -> None:
        self.sequencer.start(self.order.marker_ids, self.markers_by_id)
