"""Boost meter with overheat lockout."""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

FULL = 1.0


class HeatState(enum.Enum):
    """NORMAL -> OVERHEATED when a thrust would exhaust the meter.
    OVERHEATED -> NORMAL when the meter refills to FULL."""

    NORMAL = "normal"
    OVERHEATED = "overheated"


@dataclass
class BoostMeter:
    """Jetpack fuel in [0, 1]. Drained by thrust, refilled over time."""

    level: float = FULL
    heat: HeatState = HeatState.NORMAL
    # Set on the frame the lockout trips; that frame never releases it.
    tripped: bool = False

    @property
    def overheated(self) -> bool:
        return self.heat is HeatState.OVERHEATED

    def try_spend(self, cost: float) -> bool:
        """Spend ``cost`` if it leaves fuel in the tank.

        A request that would empty the meter trips the overheat lockout
        instead of draining it. Requests while overheated do nothing.
        """
        if self.overheated:
            return False
        if self.level - cost > 0.0:
            self.level -= cost
            return True
        self.tripped = True
        self._transition(HeatState.OVERHEATED)
        return False

    def regenerate(self, dt: float, rate: float, overheat_rate: float) -> None:
        if self.level < FULL:
            step = overheat_rate if self.overheated else rate
            self.level = min(FULL, self.level + dt * step)
        if self.overheated and self.level >= FULL and not self.tripped:
            self._transition(HeatState.NORMAL)
        self.tripped = False

    def _transition(self, target: HeatState) -> None:
        logger.debug("meter %s -> %s at level %.3f", self.heat.value, target.value, self.level)
        self.heat = target
