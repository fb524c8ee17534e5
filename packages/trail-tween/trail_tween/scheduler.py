"""AnimationScheduler - one frame loop driving many time-bounded tasks."""
from __future__ import annotations

from typing import Protocol

from trail_tween.task import AnimationTask
from trailmap.types import FrameCallback


class FrameHost(Protocol):
    def request_frame(self, callback: FrameCallback) -> None: ...


class AnimationScheduler:
    """Arena of in-flight AnimationTasks, compacted once per frame.

    The scheduler only holds a frame request while tasks remain; when the
    last task completes the loop stops until the next :meth:`schedule`.
    At most one in-flight task per key.
    """

    def __init__(self, frames: FrameHost) -> None:
        self._frames = frames
        self._tasks: list[AnimationTask] = []
        self._running = False
        self._completed = 0

    # --- Registration ---

    def schedule(self, task: AnimationTask) -> None:
        """Register a task; starts the frame loop if it was idle."""
        if task.done:
            raise ValueError(f"Task for '{task.key}' has already completed")
        if self.is_animating(task.key):
            raise ValueError(f"'{task.key}' already has an animation in flight")
        self._tasks.append(task)
        if not self._running:
            self._running = True
            self._frames.request_frame(self.tick)

    # --- Queries ---

    def is_active(self) -> bool:
        return bool(self._tasks)

    def is_running(self) -> bool:
        """True while a frame request is outstanding."""
        return self._running

    def is_animating(self, key: str) -> bool:
        return any(t.key == key and not t.done for t in self._tasks)

    def active_keys(self) -> list[str]:
        return [t.key for t in self._tasks if not t.done]

    @property
    def completed_count(self) -> int:
        return self._completed

    # --- Frame ---

    def tick(self, now: float) -> None:
        """Advance every task registered before this frame began.

        A raising callback propagates, but the arena is still compacted and
        the loop re-armed so later frames keep running.
        """
        batch = list(self._tasks)
        try:
            for task in batch:
                if task.start is None:
                    task.start = now
                local = task.progress(now)
                if local >= 1.0:
                    if task.duration > 0:
                        task.update(task.easing(1.0))
                    task.done = True
                    self._completed += 1
                    task.complete()
                else:
                    task.update(task.easing(local))
        finally:
            self._tasks = [t for t in self._tasks if not t.done]
            if self._tasks:
                self._frames.request_frame(self.tick)
            else:
                self._running = False
