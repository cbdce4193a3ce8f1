"""Tests for FrameClock."""
from __future__ import annotations

import math

import pytest

from jetpack import FrameClock


class TestFrameClock:
    def test_defaults(self) -> None:
        clock = FrameClock()
        assert clock.ups == 120
        assert math.isclose(clock.dt, 1 / 120)
        assert clock.updates == 0

    def test_invalid_ups(self) -> None:
        with pytest.raises(ValueError):
            FrameClock(ups=0)

    def test_invalid_max_steps(self) -> None:
        with pytest.raises(ValueError):
            FrameClock(max_steps=0)

    def test_negative_elapsed(self) -> None:
        with pytest.raises(ValueError):
            FrameClock().advance(-0.1)

    def test_short_frame_owes_nothing(self) -> None:
        clock = FrameClock(ups=10)
        assert clock.advance(0.05) == []

    def test_fixed_steps(self) -> None:
        clock = FrameClock(ups=10)
        steps = clock.advance(0.25)
        assert len(steps) == 2
        assert all(math.isclose(dt, 0.1) for dt in steps)
        assert clock.updates == 2

    def test_remainder_carries(self) -> None:
        clock = FrameClock(ups=10)
        assert len(clock.advance(0.25)) == 2
        # 0.05 left over + 0.06 crosses one more tick.
        assert len(clock.advance(0.06)) == 1
        assert clock.updates == 3

    def test_stall_capped(self) -> None:
        clock = FrameClock(ups=10, max_steps=4)
        assert len(clock.advance(5.0)) == 4
        # Surplus was dropped rather than carried.
        assert clock.advance(0.05) == []

    def test_zero_elapsed(self) -> None:
        clock = FrameClock(ups=10)
        assert clock.advance(0.0) == []

    def test_reset(self) -> None:
        clock = FrameClock(ups=10)
        clock.advance(0.35)
        clock.reset()
        assert clock.updates == 0
        assert clock.advance(0.05) == []
