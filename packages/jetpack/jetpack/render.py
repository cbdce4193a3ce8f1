"""Render parameters derived from simulation state. Drawing happens elsewhere."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

from jetpack.meter import BoostMeter

if TYPE_CHECKING:
    from jetpack.state import PhysicsState

BAR_X = 10.0
BAR_Y = 60.0
BAR_WIDTH = 30.0
BAR_HEIGHT = 50.0
LOW_THRESHOLD = 0.5


class BarColor(enum.Enum):
    """Colour category for the meter bar. The renderer picks actual RGB values."""

    HEALTHY = "healthy"
    LOW = "low"
    OVERHEATED = "overheated"


@dataclass(frozen=True, slots=True)
class RenderParams:
    square_x: float
    square_y: float
    square_size: float
    bar_x: float
    bar_y: float
    bar_width: float
    bar_fill: float
    bar_color: BarColor


def bar_color_for(meter: BoostMeter) -> BarColor:
    if meter.overheated:
        return BarColor.OVERHEATED
    if meter.level >= LOW_THRESHOLD:
        return BarColor.HEALTHY
    return BarColor.LOW


def derive_render_params(state: PhysicsState) -> RenderParams:
    """Square geometry plus a heat bar that fills as the meter drains."""
    x, y = state.position
    return RenderParams(
        square_x=x,
        square_y=y,
        square_size=state.size,
        bar_x=BAR_X,
        bar_y=BAR_Y,
        bar_width=BAR_WIDTH,
        bar_fill=(1.0 - state.meter.level) * BAR_HEIGHT,
        bar_color=bar_color_for(state.meter),
    )
