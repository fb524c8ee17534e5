"""Park Map - Chronological reveal of visited national parks.

Exercises trailmap, trail-layout, trail-tween, trail-reveal, trail-touch
and trail-view.

Controls:
  Mouse   Hover a park for its name
  Touch   Tap a park to enlarge it, tap again or elsewhere to dismiss
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

from trail_touch import Viewport
from trail_view import MapView
from trailmap import FrameLoop, MapConfig, load_markers, load_visits
from ui.constants import BG_COLOR, FPS, LAND_COLOR, MAP_H, MAP_W, SCREEN_H, SCREEN_W
from ui.surface import CounterLabel, PygameSurface, TooltipBox

DATA_DIR = Path(__file__).parent / "data"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Park Map - trailmap visual demo")
    p.add_argument("--parks", type=Path, default=DATA_DIR / "parks.json",
                   help="Marker records (JSON array)")
    p.add_argument("--visits", type=Path, default=DATA_DIR / "visits.json",
                   help="Visit records (JSON array)")
    p.add_argument("--duration", type=float, default=1500.0,
                   help="Reveal duration in ms (default: 1500)")
    p.add_argument("--counter", choices=("live", "independent"), default="live",
                   help="Counter mode (default: live)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = MapConfig(
        width=MAP_W,
        height=MAP_H,
        reveal_duration=args.duration,
        counter_mode=args.counter,
        fps=FPS,
    )
    markers = load_markers(args.parks)
    visits = load_visits(args.visits)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Park Map - trailmap demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    surface = PygameSurface(config.dormant_treatment, config.revealed_treatment)
    counter = CounterLabel()
    tooltip = TooltipBox(font)
    frames = FrameLoop(fps=FPS, clock=lambda: float(pygame.time.get_ticks()))
    view = MapView(
        surface,
        counter,
        tooltip,
        frames,
        config=config,
        viewport=lambda: Viewport.resolve(screen.get_size()),
    )
    view.build(markers, visits)
    controller = view.controller
    assert controller is not None

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

            elif event.type == pygame.MOUSEMOTION:
                pos = (float(event.pos[0]), float(event.pos[1]))
                hit = controller.hit_test(pos)
                if hit != controller.hovered_id:
                    if controller.hovered_id is not None:
                        controller.mouse_out()
                    if hit is not None:
                        controller.mouse_over(hit)
                controller.mouse_move(pos)

            elif event.type == pygame.FINGERDOWN:
                pos = (event.x * SCREEN_W, event.y * SCREEN_H)
                controller.touch_start(controller.hit_test(pos), pos)

            elif event.type == pygame.FINGERUP:
                controller.touch_end()

        # --- Frame ---
        surface.load_pending()
        if not frames.is_idle():
            frames.step()

        # --- Render ---
        screen.fill(BG_COLOR)
        pygame.draw.rect(screen, LAND_COLOR, (0, 0, MAP_W, MAP_H))
        surface.draw(screen)
        tooltip.draw(screen)
        counter.draw(screen, font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
