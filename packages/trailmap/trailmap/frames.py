"""FrameLoop - per-frame callback host and real-time pacing."""

import time
from typing import Callable

from trailmap.types import FrameCallback


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class FrameLoop:
    """Runs requested callbacks once per frame, like ``requestAnimationFrame``.

    A callback requested while a frame is running is deferred to the next
    frame. Timestamps are milliseconds.
    """

    def __init__(self, fps: int = 60, clock: Callable[[], float] | None = None) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._interval = 1000.0 / fps
        self._clock = clock if clock is not None else _monotonic_ms
        self._pending: list[FrameCallback] = []
        self._frame_number = 0
        self._last_time: float | None = None

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def last_time(self) -> float | None:
        return self._last_time

    @property
    def pending(self) -> int:
        return len(self._pending)

    def now(self) -> float:
        return self._clock()

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    def call_later(self, delay: float, callback: FrameCallback) -> None:
        """Run ``callback`` on the first frame at least ``delay`` ms after the next one."""
        due: list[float] = []

        def _wait(now: float) -> None:
            if not due:
                due.append(now + delay)
            if now >= due[0]:
                callback(now)
            else:
                self.request_frame(_wait)

        self.request_frame(_wait)

    def is_idle(self) -> bool:
        return not self._pending

    def step(self, now: float | None = None) -> float:
        """Run one frame. Returns the timestamp handed to callbacks."""
        if now is None:
            now = self._clock()
        self._frame_number += 1
        self._last_time = now
        batch = self._pending
        self._pending = []
        for callback in batch:
            callback(now)
        return now

    def run_until_idle(self, max_frames: int | None = None) -> int:
        """Pace frames in real time until nothing is pending. Returns frames run."""
        frames = 0
        while self._pending:
            if max_frames is not None and frames >= max_frames:
                break
            start = self._clock()
            self.step(start)
            frames += 1
            elapsed = self._clock() - start
            sleep_ms = self._interval - elapsed
            if sleep_ms > 0:
                time.sleep(sleep_ms / 1000.0)
        return frames
