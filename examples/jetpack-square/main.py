"""
jetpack-square
A square bouncing around an 800x600 window with gravity, wall friction and
an overheating jetpack.

Controls:
  Left/Right  Accelerate sideways
  Up          Jetpack boost (drains the meter; empty meter overheats)
  Down        Dive (arcade profiles)
  +/-         Grow / shrink the square (jetpack profile)
  Esc         Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from jetpack import FrameClock, KeyTracker, PhysicsState, get_profile, profile_names
from jetpack.profiles import DEFAULT_PROFILE

from game.controls import handle_key_event
from ui.constants import FPS, TITLE, UPS
from ui.renderer import draw_hud, draw_scene

logger = logging.getLogger("jetpack-square")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="jetpack-square - bouncing square demo")
    p.add_argument("--profile", choices=profile_names(), default=DEFAULT_PROFILE,
                   help=f"Physics profile (default: {DEFAULT_PROFILE})")
    p.add_argument("--ups", type=int, default=UPS,
                   help=f"Physics updates per second (default: {UPS})")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging verbosity (default: WARNING)")
    args = p.parse_args()
    args.ups = max(1, args.ups)
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    profile = get_profile(args.profile)
    logger.info("profile %s, %d updates/s", profile.name, args.ups)

    pygame.init()
    try:
        screen = pygame.display.set_mode(profile.viewport)
    except pygame.error as exc:
        logger.error("could not open window: %s", exc)
        pygame.quit()
        sys.exit(1)
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    state = PhysicsState.initial(profile)
    keys = KeyTracker()
    clock = FrameClock(ups=args.ups)
    running = True

    while running:
        elapsed = pg_clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                handle_key_event(keys, event)
            elif event.type == pygame.WINDOWFOCUSLOST:
                keys.clear()

        # --- Update ---
        held = keys.snapshot()
        for dt in clock.advance(elapsed):
            state.update(held, dt)

        # --- Draw ---
        draw_scene(screen, state.render_params())
        draw_hud(screen, font, state, pg_clock.get_fps())
        pygame.display.flip()

    logger.info("quit after %d updates", clock.updates)
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
