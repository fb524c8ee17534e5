"""SettleBarrier - fire once when every watched image has settled."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:
    from trailmap.surface import RenderingSurface


class SettleBarrier:
    """Counts distinct settled ids; load failures count the same as loads.

    An image that never settles blocks the barrier forever.
    """

    def __init__(self, marker_ids: Iterable[str], on_settled: Callable[[], None]) -> None:
        self._expected = set(marker_ids)
        self._settled: set[str] = set()
        self._on_settled = on_settled
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def remaining(self) -> int:
        return len(self._expected - self._settled)

    def settle(self, marker_id: str) -> None:
        if marker_id not in self._expected:
            return
        self._settled.add(marker_id)
        self._maybe_fire()

    def _maybe_fire(self) -> None:
        if self._fired or self._settled != self._expected:
            return
        self._fired = True
        self._on_settled()

    def watch(self, surface: RenderingSurface) -> None:
        """Subscribe to every expected id on the surface."""
        for marker_id in sorted(self._expected):
            surface.on_image_settled(marker_id, _bind(self.settle, marker_id))
        self._maybe_fire()


def _bind(fn: Callable[[str], None], marker_id: str) -> Callable[[], None]:
    def _settled() -> None:
        fn(marker_id)

    return _settled


def wait_for_images(
    surface: RenderingSurface, marker_ids: Iterable[str], on_settled: Callable[[], None]
) -> SettleBarrier:
    barrier = SettleBarrier(marker_ids, on_settled)
    barrier.watch(surface)
    return barrier
