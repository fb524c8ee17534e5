"""RevealSequencer - chronological reveal synchronized with a counter."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Mapping, Sequence

from trail_tween import AnimationScheduler, AnimationTask, get_easing
from trailmap.types import ScaleAbout

if TYPE_CHECKING:
    from trailmap.config import MapConfig
    from trailmap.models import Marker
    from trailmap.surface import CounterSink, RenderingSurface

log = logging.getLogger(__name__)

TIMELINE_KEY = "reveal:timeline"
COUNTER_KEY = "reveal:counter"


@dataclass
class RevealTimeline:
    """Playback state for one reveal."""

    order: list[str]
    duration: float
    last_revealed_index: int = 0
    start: float | None = None
    finished: bool = False
    revealed: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.order)


class RevealSequencer:
    """Reveals markers in first-visit order over ``config.reveal_duration``.

    The outer timeline is itself a scheduler task: each frame it maps eased
    progress to a target index, reveals everything up to it and schedules
    one pop-in per newly revealed marker. Pop-ins start on the next frame.
    At completion a finalization pass force-reveals anything left and pins
    the counter to the exact total.
    """

    def __init__(
        self,
        scheduler: AnimationScheduler,
        surface: RenderingSurface,
        counter: CounterSink,
        config: MapConfig,
        on_finished: Callable[[], None] | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._surface = surface
        self._counter = counter
        self._config = config
        self._on_finished = on_finished
        self._markers: Mapping[str, Marker] = {}
        self._timeline: RevealTimeline | None = None
        self._timeline_task: AnimationTask | None = None
        self._count: int | None = None

    @property
    def timeline(self) -> RevealTimeline | None:
        return self._timeline

    @property
    def count(self) -> int:
        return self._count or 0

    def is_finished(self) -> bool:
        return self._timeline is not None and self._timeline.finished

    def start(self, order: Sequence[str], markers: Mapping[str, Marker]) -> None:
        """Begin playback. ``order`` lists unique marker ids, oldest first.

        Ids without a rendered marker still count toward the total.
        """
        if self._timeline is not None:
            raise ValueError("Reveal has already been started")
        self._markers = markers
        self._timeline = RevealTimeline(
            order=list(order), duration=self._config.reveal_duration
        )
        self._set_count(0)

        if not self._timeline.order:
            self._finish()
            return

        log.info("Revealing %d markers over %.0f ms", self._timeline.total,
                 self._timeline.duration)
        self._timeline_task = AnimationTask(
            key=TIMELINE_KEY,
            duration=self._timeline.duration,
            update=self._advance,
            complete=self._finalize,
            easing=get_easing(self._config.reveal_easing),
        )
        self._scheduler.schedule(self._timeline_task)
        if self._config.counter_mode == "independent":
            self._scheduler.schedule(
                AnimationTask(
                    key=COUNTER_KEY,
                    duration=self._timeline.duration,
                    update=self._count_up,
                    complete=self._count_done,
                    easing=get_easing(self._config.reveal_easing),
                )
            )

    # --- Outer timeline ---

    def _advance(self, eased: float) -> None:
        tl = self._timeline
        assert tl is not None
        if tl.start is None and self._timeline_task is not None:
            tl.start = self._timeline_task.start
        target = math.floor(eased * tl.total)
        target = min(max(target, tl.last_revealed_index), tl.total)
        for i in range(tl.last_revealed_index, target):
            self._reveal(tl.order[i], animate=True)
        tl.last_revealed_index = target
        if self._config.counter_mode == "live":
            self._set_count(target)

    def _finalize(self) -> None:
        tl = self._timeline
        assert tl is not None
        for i in range(tl.last_revealed_index, tl.total):
            self._reveal(tl.order[i], animate=False)
        tl.last_revealed_index = tl.total
        self._finish()

    def _finish(self) -> None:
        tl = self._timeline
        assert tl is not None
        if tl.finished:
            return
        tl.finished = True
        self._set_count(tl.total)
        self._counter.mark_complete()
        log.info("Reveal finished: %d markers", tl.total)
        if self._on_finished is not None:
            self._on_finished()

    # --- Independent counter ---

    def _count_up(self, eased: float) -> None:
        tl = self._timeline
        assert tl is not None
        if not tl.finished:
            self._set_count(min(math.floor(eased * tl.total), tl.total))

    def _count_done(self) -> None:
        tl = self._timeline
        assert tl is not None
        self._set_count(tl.total)

    def _set_count(self, n: int) -> None:
        if n != self._count:
            self._counter.set_count(n)
        self._count = n

    # --- Per marker ---

    def _reveal(self, marker_id: str, animate: bool) -> None:
        tl = self._timeline
        assert tl is not None
        tl.revealed.append(marker_id)
        marker = self._markers.get(marker_id)
        if marker is None:
            return
        self._surface.set_visual_treatment(marker_id, self._config.revealed_treatment)
        if not animate:
            self._surface.set_transform(marker_id, None)
            return
        self._scheduler.schedule(self._pop_in(marker))

    def _pop_in(self, marker: Marker) -> AnimationTask:
        surface = self._surface
        peak = self._config.pop_in_scale
        marker_id = marker.id
        cx, cy = marker.x, marker.y

        def update(eased: float) -> None:
            scale = peak - (peak - 1.0) * eased
            surface.set_transform(marker_id, ScaleAbout(cx, cy, scale))

        def complete() -> None:
            surface.set_transform(marker_id, None)

        return AnimationTask(
            key=marker_id,
            duration=self._config.pop_in_duration,
            update=update,
            complete=complete,
            easing=get_easing(self._config.pop_in_easing),
        )
