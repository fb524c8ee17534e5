"""trail-tween - Frame-driven, time-bounded animation tasks."""
from __future__ import annotations

from trail_tween.easing import EASINGS, Easing, get_easing
from trail_tween.scheduler import AnimationScheduler, FrameHost
from trail_tween.task import AnimationTask

__all__ = [
    "AnimationScheduler",
    "AnimationTask",
    "EASINGS",
    "Easing",
    "FrameHost",
    "get_easing",
]
