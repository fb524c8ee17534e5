"""Map configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field

from trail_tween.easing import EASINGS

# Alaska, Hawaii, American Samoa and Virgin Islands parks are drawn smaller.
DEFAULT_SMALL_RADIUS_IDS = frozenset({
    "dena", "gaar", "glba", "katm", "npsa", "hale",
    "havo", "kefj", "lacl", "wrst", "kova", "viis",
})


@dataclass(frozen=True)
class MapConfig:
    """Immutable configuration shared by layout, reveal and interaction.

    Attributes:
        width: Plane width in surface units.
        height: Plane height in surface units.
        relaxation_passes: Collision relaxation passes run by the layout.
        default_radius: Radius of "standard" markers.
        small_radius: Radius of markers listed in ``small_radius_ids``.
        small_radius_ids: Marker ids drawn with ``small_radius``.
        collision_padding: Extra gap added to every radius sum.
        anchor_strength: Fraction of the anchor offset restored per pass.
        separation_ratio: Share of an overlap pushed onto the first marker.
        velocity_decay: Fraction of velocity dropped after each pass.
        reveal_duration: Outer reveal timeline length (ms).
        reveal_start_delay: Pause between images settling and the reveal (ms).
        reveal_easing: Easing name mapping timeline progress to an index.
        pop_in_duration: Per-marker pop-in length (ms).
        pop_in_easing: Easing name used by the pop-in.
        pop_in_scale: Starting scale of the pop-in, shrinking to 1.0.
        counter_mode: ``"live"`` tracks the revealed index, ``"independent"``
            counts up on its own task over the same duration.
        dormant_treatment: Treatment applied before a marker is revealed.
        revealed_treatment: Treatment applied on reveal.
        touch_scale: Enlargement applied to a tap-selected marker.
        mouse_tooltip_padding: Viewport padding used for hover placement.
        touch_tooltip_padding: Viewport padding used for tap placement.
        fps: Frame rate paced by the real-time frame loop.
    """

    width: float = 900.0
    height: float = 500.0
    relaxation_passes: int = 5
    default_radius: float = 16.0
    small_radius: float = 10.0
    small_radius_ids: frozenset[str] = field(default=DEFAULT_SMALL_RADIUS_IDS)
    collision_padding: float = 2.0
    anchor_strength: float = 1.0
    separation_ratio: float = 0.5
    velocity_decay: float = 0.4
    reveal_duration: float = 1500.0
    reveal_start_delay: float = 300.0
    reveal_easing: str = "ease_in"
    pop_in_duration: float = 200.0
    pop_in_easing: str = "ease_out"
    pop_in_scale: float = 1.2
    counter_mode: str = "live"
    dormant_treatment: str = "inset-shadow"
    revealed_treatment: str = "drop-shadow"
    touch_scale: float = 1.15
    mouse_tooltip_padding: float = 0.0
    touch_tooltip_padding: float = 10.0
    fps: int = 60

    def __post_init__(self) -> None:
        if self.default_radius <= 0 or self.small_radius <= 0:
            raise ValueError("radii must be positive")
        if self.relaxation_passes < 0:
            raise ValueError(
                f"relaxation_passes must be >= 0, got {self.relaxation_passes}"
            )
        if not 0.0 <= self.separation_ratio <= 1.0:
            raise ValueError(
                f"separation_ratio must be in [0, 1], got {self.separation_ratio}"
            )
        if not 0.0 <= self.velocity_decay <= 1.0:
            raise ValueError(
                f"velocity_decay must be in [0, 1], got {self.velocity_decay}"
            )
        if self.counter_mode not in ("live", "independent"):
            raise ValueError(f"Unknown counter_mode: '{self.counter_mode}'")
        for name in (self.reveal_easing, self.pop_in_easing):
            if name not in EASINGS:
                raise ValueError(f"Unknown easing: '{name}'")
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        # Accept any iterable of ids, store a frozenset.
        object.__setattr__(self, "small_radius_ids", frozenset(self.small_radius_ids))

    def radius_for(self, marker_id: str) -> float:
        """Size class lookup: small if listed, standard otherwise."""
        if marker_id in self.small_radius_ids:
            return self.small_radius
        return self.default_radius
