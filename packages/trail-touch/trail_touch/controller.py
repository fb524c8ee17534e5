"""InteractionController - hover and tap arbitration for marker tooltips."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable

from trail_touch.placement import Viewport, place_tooltip
from trail_touch.state import HoverState, TouchMode, TouchState
from trailmap.types import Point, ScaleAbout, UnknownMarkerError

if TYPE_CHECKING:
    from trail_tween import FrameHost
    from trailmap.config import MapConfig
    from trailmap.models import Marker
    from trailmap.surface import RenderingSurface, TooltipView


class InteractionController:
    """Owns the tooltip and the tap-selected marker.

    Mouse handlers are ignored while ``touch.active`` is set. Touch input
    clears that flag two frames after touch-end, after the browser-style
    synthetic mouse events that follow a tap have been delivered.
    """

    def __init__(
        self,
        markers: Iterable[Marker],
        surface: RenderingSurface,
        tooltip: TooltipView,
        frames: FrameHost,
        config: MapConfig,
        viewport: Callable[[], Viewport],
    ) -> None:
        self._markers: dict[str, Marker] = {m.id: m for m in markers}
        self._order = list(self._markers)
        self._surface = surface
        self._tooltip = tooltip
        self._frames = frames
        self._config = config
        self._viewport = viewport
        self.touch = TouchState()
        self._hover_state = HoverState.IDLE
        self._hovered_id: str | None = None
        self._gesture = 0

    # --- Queries ---

    @property
    def hover_state(self) -> HoverState:
        return self._hover_state

    @property
    def hovered_id(self) -> str | None:
        return self._hovered_id

    @property
    def touch_mode(self) -> TouchMode:
        return self.touch.mode

    @property
    def selected_id(self) -> str | None:
        return self.touch.current_target_id

    def hit_test(self, point: Point) -> str | None:
        """Topmost marker whose disc contains ``point`` (last drawn wins)."""
        px, py = point
        for marker_id in reversed(self._order):
            m = self._markers[marker_id]
            dx = px - m.x
            dy = py - m.y
            if dx * dx + dy * dy <= m.radius * m.radius:
                return marker_id
        return None

    # --- Mouse ---

    def mouse_over(self, marker_id: str) -> None:
        if self.touch.active:
            return
        marker = self._marker(marker_id)
        self._hover_state = HoverState.HOVERING
        self._hovered_id = marker_id
        self._tooltip.show(marker)

    def mouse_move(self, point: Point) -> None:
        if self.touch.active or self._hover_state is not HoverState.HOVERING:
            return
        self._position(point, self._config.mouse_tooltip_padding)

    def mouse_out(self) -> None:
        if self.touch.active:
            return
        self._hover_state = HoverState.IDLE
        self._hovered_id = None
        self._tooltip.hide()

    # --- Touch ---

    def touch_start(self, marker_id: str | None, point: Point) -> None:
        """Tap on a marker, or outside every marker when ``marker_id`` is None.

        Every tap sets ``touch.active``; only :meth:`touch_end` clears it.
        """
        marker = self._marker(marker_id) if marker_id is not None else None
        self.touch.active = True
        self._gesture += 1
        self._hover_state = HoverState.IDLE
        self._hovered_id = None

        if marker is None:
            self._release()
            return

        if self.touch.current_target_id == marker_id:
            self._release()
            return

        if self.touch.current_target_id is not None:
            self._surface.set_transform(self.touch.current_target_id, None)

        self.touch.current_target_id = marker_id
        self._surface.set_transform(
            marker_id, ScaleAbout(marker.x, marker.y, self._config.touch_scale)
        )
        self._tooltip.show(marker)
        self._position(point, self._config.touch_tooltip_padding)

    def touch_end(self) -> None:
        """Clear ``touch.active`` two frames from now unless another tap starts."""
        gesture = self._gesture

        def _settle(now: float) -> None:
            if gesture == self._gesture:
                self.touch.active = False

        def _second(now: float) -> None:
            self._frames.request_frame(_settle)

        self._frames.request_frame(_second)

    def _release(self) -> None:
        self._tooltip.hide()
        if self.touch.current_target_id is not None:
            self._surface.set_transform(self.touch.current_target_id, None)
        self.touch.current_target_id = None

    # --- Helpers ---

    def _marker(self, marker_id: str) -> Marker:
        try:
            return self._markers[marker_id]
        except KeyError:
            raise UnknownMarkerError(
                marker_id, f"Marker '{marker_id}' is not attached to this controller"
            ) from None

    def _position(self, point: Point, padding: float) -> None:
        placement = place_tooltip(point, self._tooltip.size(), self._viewport(), padding)
        self._tooltip.move_to(placement.anchor, placement.flip_x, placement.flip_y)
