"""Tests for render parameter derivation."""
from __future__ import annotations

import dataclasses
import math

import pytest

from jetpack import BarColor, PhysicsState, RenderParams, derive_render_params
from jetpack.meter import BoostMeter, HeatState
from jetpack.profiles import JETPACK
from jetpack.render import BAR_HEIGHT, BAR_WIDTH, BAR_X, BAR_Y, bar_color_for


class TestBarColor:
    def test_full_is_healthy(self) -> None:
        assert bar_color_for(BoostMeter(level=1.0)) is BarColor.HEALTHY

    def test_half_is_healthy(self) -> None:
        assert bar_color_for(BoostMeter(level=0.5)) is BarColor.HEALTHY

    def test_below_half_is_low(self) -> None:
        assert bar_color_for(BoostMeter(level=0.49)) is BarColor.LOW

    @pytest.mark.parametrize("level", [0.0, 0.3, 0.5, 0.99])
    def test_overheat_overrides_level(self, level: float) -> None:
        meter = BoostMeter(level=level, heat=HeatState.OVERHEATED)
        assert bar_color_for(meter) is BarColor.OVERHEATED


class TestDeriveRenderParams:
    def test_full_meter_empty_bar(self) -> None:
        params = derive_render_params(PhysicsState.initial(JETPACK))
        assert params.bar_fill == 0.0
        assert params.bar_color is BarColor.HEALTHY

    def test_bar_anchor_fixed(self) -> None:
        params = derive_render_params(PhysicsState.initial(JETPACK))
        assert (params.bar_x, params.bar_y, params.bar_width) == (BAR_X, BAR_Y, BAR_WIDTH)

    def test_empty_meter_full_bar(self) -> None:
        state = PhysicsState.initial(JETPACK)
        state.meter = BoostMeter(level=0.0, heat=HeatState.OVERHEATED)
        params = derive_render_params(state)
        assert params.bar_fill == BAR_HEIGHT
        assert params.bar_color is BarColor.OVERHEATED

    def test_fill_proportional_to_spent(self) -> None:
        state = PhysicsState.initial(JETPACK)
        state.meter = BoostMeter(level=0.4)
        params = derive_render_params(state)
        assert math.isclose(params.bar_fill, 0.6 * BAR_HEIGHT)
        assert params.bar_color is BarColor.LOW

    def test_square_geometry(self) -> None:
        state = PhysicsState.initial(JETPACK)
        state.position = (12.5, 40.0)
        state.size = 64.0
        params = derive_render_params(state)
        assert (params.square_x, params.square_y, params.square_size) == (12.5, 40.0, 64.0)

    def test_params_immutable(self) -> None:
        params = derive_render_params(PhysicsState.initial(JETPACK))
        assert isinstance(params, RenderParams)
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.square_x = 0.0  # type: ignore[misc]
