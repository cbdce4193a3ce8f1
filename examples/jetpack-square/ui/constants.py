"""Window, timing and colour constants."""

from jetpack.render import BarColor

# Window
TITLE = "jetpack-square"

# Timing
FPS = 60
UPS = 120

# Colors
BG_COLOR = (255, 255, 255)
SQUARE_COLOR = (0, 0, 255)
BAR_OUTLINE = (60, 60, 60)
HUD_COLOR = (40, 40, 40)

BAR_COLORS: dict[BarColor, tuple[int, int, int]] = {
    BarColor.HEALTHY: (0, 200, 0),
    BarColor.LOW: (255, 160, 0),
    BarColor.OVERHEATED: (255, 0, 0),
}
