"""AnimationTask record."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from trail_tween.easing import Easing, linear


def _noop() -> None:
    pass


@dataclass
class AnimationTask:
    """One in-flight, time-bounded effect.

    ``start`` is a frame timestamp in ms; ``None`` stamps the task with the
    time of the first frame that ticks it. ``update`` receives eased
    progress; ``complete`` runs exactly once when local progress hits 1.
    """

    key: str
    duration: float
    update: Callable[[float], None]
    complete: Callable[[], None] = _noop
    easing: Easing = linear
    start: float | None = None
    done: bool = field(default=False, init=False)

    def progress(self, now: float) -> float:
        """Local progress clamped to [0, 1]. Zero-length tasks are always done."""
        if self.start is None:
            return 0.0
        if self.duration <= 0:
            return 1.0
        t = (now - self.start) / self.duration
        return min(max(t, 0.0), 1.0)
