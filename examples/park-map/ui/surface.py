"""Pygame implementations of the rendering surface, counter and tooltip."""
from __future__ import annotations

from typing import Callable

import pygame

from trail_touch import Placement, tooltip_label, tooltip_origin
from trailmap import Marker, Point, ScaleAbout

from ui.constants import (
    DORMANT_FILL,
    DORMANT_INSET,
    MAP_H,
    REVEALED_FILL,
    REVEALED_RIM,
    SHADOW_COLOR,
    SHADOW_OFFSET,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
    TOOLTIP_BG,
    TOOLTIP_H,
    TOOLTIP_PAD,
    TOOLTIP_TEXT,
)


class _Disc:
    def __init__(self, x: float, y: float, radius: float) -> None:
        self.x = x
        self.y = y
        self.radius = radius
        self.treatment = ""
        self.transform: ScaleAbout | None = None


class PygameSurface:
    """Draws markers as discs. Disc images are generated on the first frame
    after placement, at which point their settle callbacks fire."""

    def __init__(self, dormant: str, revealed: str) -> None:
        self._dormant = dormant
        self._revealed = revealed
        self.discs: dict[str, _Disc] = {}
        self._loaded: set[str] = set()
        self._waiting: dict[str, list[Callable[[], None]]] = {}

    def place(self, marker_id: str, x: float, y: float, radius: float) -> None:
        self.discs[marker_id] = _Disc(x, y, radius)

    def set_visual_treatment(self, marker_id: str, treatment: str) -> None:
        self.discs[marker_id].treatment = treatment

    def set_transform(self, marker_id: str, transform: ScaleAbout | None) -> None:
        self.discs[marker_id].transform = transform

    def on_image_settled(self, marker_id: str, callback: Callable[[], None]) -> None:
        if marker_id in self._loaded:
            callback()
            return
        self._waiting.setdefault(marker_id, []).append(callback)

    def load_pending(self) -> None:
        """Finish "loading" every placed disc and fire waiting callbacks."""
        for marker_id in self.discs:
            if marker_id in self._loaded:
                continue
            self._loaded.add(marker_id)
            for callback in self._waiting.pop(marker_id, []):
                callback()

    def draw(self, screen: pygame.Surface) -> None:
        for marker_id, disc in self.discs.items():
            if marker_id not in self._loaded:
                continue
            x, y, r = disc.x, disc.y, disc.radius
            if disc.transform is not None:
                t = disc.transform
                x = t.cx + (x - t.cx) * t.scale
                y = t.cy + (y - t.cy) * t.scale
                r *= t.scale
            center = (round(x), round(y))
            if disc.treatment == self._revealed:
                shadow = (center[0] + SHADOW_OFFSET, center[1] + SHADOW_OFFSET)
                pygame.draw.circle(screen, SHADOW_COLOR, shadow, round(r))
                pygame.draw.circle(screen, REVEALED_FILL, center, round(r))
                pygame.draw.circle(screen, REVEALED_RIM, center, round(r), 2)
            else:
                pygame.draw.circle(screen, DORMANT_FILL, center, round(r))
                pygame.draw.circle(screen, DORMANT_INSET, center, round(r), 3)


class CounterLabel:
    """Status bar counter: "N parks visited"."""

    def __init__(self) -> None:
        self.value: int | None = None
        self.complete = False

    def set_count(self, n: int) -> None:
        self.value = n

    def mark_complete(self) -> None:
        self.complete = True

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        w = screen.get_width()
        pygame.draw.rect(screen, STATUS_BG, (0, MAP_H, w, STATUS_H))
        if self.value is None:
            text, color = "Loading...", TEXT_DIM
        else:
            text, color = f"{self.value} parks visited", TEXT_COLOR
        screen.blit(font.render(text, True, color), (12, MAP_H + 10))
        hint = font.render("Hover or tap a park  |  Esc quit", True, TEXT_DIM)
        screen.blit(hint, (w - hint.get_width() - 12, MAP_H + 10))


class TooltipBox:
    """Single-line label box positioned by the interaction controller."""

    def __init__(self, font: pygame.font.Font) -> None:
        self._font = font
        self._label: pygame.Surface | None = None
        self._visible = False
        self._placement = Placement(anchor=(0.0, 0.0), flip_x=False, flip_y=False)

    def show(self, marker: Marker) -> None:
        self._label = self._font.render(tooltip_label(marker), True, TOOLTIP_TEXT)
        self._visible = True

    def hide(self) -> None:
        self._visible = False

    def is_visible(self) -> bool:
        return self._visible

    def size(self) -> tuple[float, float]:
        width = self._label.get_width() if self._label is not None else 0
        return (float(width + 2 * TOOLTIP_PAD), float(TOOLTIP_H))

    def move_to(self, anchor: Point, flip_x: bool, flip_y: bool) -> None:
        self._placement = Placement(anchor=anchor, flip_x=flip_x, flip_y=flip_y)

    def draw(self, screen: pygame.Surface) -> None:
        if not self._visible or self._label is None:
            return
        w, h = self.size()
        x, y = tooltip_origin(self._placement, (w, h))
        pygame.draw.rect(screen, TOOLTIP_BG, (x, y, w, h), border_radius=4)
        screen.blit(self._label, (x + TOOLTIP_PAD, y + (h - self._label.get_height()) / 2))
