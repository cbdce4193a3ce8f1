"""Scene and HUD drawing."""
from __future__ import annotations

import pygame

from jetpack import PhysicsState, RenderParams
from jetpack.render import BAR_HEIGHT
from ui.constants import BAR_COLORS, BAR_OUTLINE, BG_COLOR, HUD_COLOR, SQUARE_COLOR


def draw_scene(surface: pygame.Surface, params: RenderParams) -> None:
    """Clear the frame, then draw the square and the heat bar."""
    surface.fill(BG_COLOR)

    square = pygame.Rect(
        int(params.square_x),
        int(params.square_y),
        int(params.square_size),
        int(params.square_size),
    )
    pygame.draw.rect(surface, SQUARE_COLOR, square)

    # Bar grows downward from its anchor as heat builds.
    if params.bar_fill > 0.0:
        fill = pygame.Rect(
            int(params.bar_x),
            int(params.bar_y),
            int(params.bar_width),
            max(1, int(params.bar_fill)),
        )
        pygame.draw.rect(surface, BAR_COLORS[params.bar_color], fill)
    outline = pygame.Rect(
        int(params.bar_x), int(params.bar_y), int(params.bar_width), int(BAR_HEIGHT)
    )
    pygame.draw.rect(surface, BAR_OUTLINE, outline, 1)


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font,
    state: PhysicsState,
    fps: float,
) -> None:
    meter = state.meter
    lines = [
        f"Profile: {state.profile.name}   Meter: {meter.level * 100:.0f}%   "
        f"Heat: {meter.heat.value}   FPS: {fps:.0f}",
        "Arrows=Move/Boost  +/-=Size  Esc=Quit",
    ]
    for i, line in enumerate(lines):
        surf = font.render(line, True, HUD_COLOR)
        surface.blit(surf, (60, 8 + i * 18))
