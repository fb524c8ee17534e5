"""Tests for SettleBarrier."""
from __future__ import annotations

from trail_reveal.settle import SettleBarrier, wait_for_images
from trailmap.surface import RecordingSurface


def _surface(*ids: str, auto_settle: bool = False) -> RecordingSurface:
    surface = RecordingSurface(auto_settle=auto_settle)
    for marker_id in ids:
        surface.place(marker_id, 0.0, 0.0, 1.0)
    return surface


class TestSettleBarrier:
    def test_fires_after_every_image(self) -> None:
        fired: list[bool] = []
        surface = _surface("a", "b")
        barrier = wait_for_images(surface, ["a", "b"], lambda: fired.append(True))
        surface.settle("a")
        assert fired == []
        assert barrier.remaining == 1
        surface.settle("b")
        assert fired == [True]
        assert barrier.fired

    def test_fires_once(self) -> None:
        fired: list[bool] = []
        barrier = SettleBarrier(["a"], lambda: fired.append(True))
        barrier.settle("a")
        barrier.settle("a")
        assert fired == [True]

    def test_empty_fires_immediately(self) -> None:
        fired: list[bool] = []
        wait_for_images(_surface(), [], lambda: fired.append(True))
        assert fired == [True]

    def test_already_loaded_images_settle_synchronously(self) -> None:
        fired: list[bool] = []
        surface = _surface("a", "b", auto_settle=True)
        wait_for_images(surface, ["a", "b"], lambda: fired.append(True))
        assert fired == [True]

    def test_unknown_ids_ignored(self) -> None:
        fired: list[bool] = []
        barrier = SettleBarrier(["a"], lambda: fired.append(True))
        barrier.settle("zzz")
        assert fired == []

    def test_unsettled_image_blocks(self) -> None:
        fired: list[bool] = []
        surface = _surface("a", "b")
        barrier = wait_for_images(surface, ["a", "b"], lambda: fired.append(True))
        surface.settle("a")
        assert not barrier.fired
