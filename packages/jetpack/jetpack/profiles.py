"""Named physics profiles.

Each profile is one complete set of simulation constants. The variants
disagree about gravity, friction and ceilings, so they are kept side by
side and selected by name rather than merged into one model.
"""
from __future__ import annotations

from dataclasses import dataclass

from jetpack.types import UnknownProfileError, Vec

DEFAULT_PROFILE = "jetpack"


@dataclass(frozen=True)
class PhysicsProfile:
    """Immutable simulation constants. Velocities are in pixels per frame."""

    name: str
    viewport: tuple[int, int] = (800, 600)
    gravity: float = 9.8
    bounce_factor: float = 0.5
    friction: float = 0.005
    contact_margin: float = 0.0
    ceiling: bool = False
    move_step: float = 0.1
    dive_step: float = 0.0
    thrust_impulse: float = 0.15
    thrust_cost_rate: float = 1.5
    regen_rate: float = 0.4
    overheat_regen_rate: float = 0.2
    initial_velocity: Vec = (3.0, 3.0)
    initial_size: float = 50.0
    resizable: bool = False
    min_size: float = 20.0
    max_size: float = 100.0
    baseline_size: float = 50.0
    size_step: float = 1.0
    weight_coefficient: float = 0.01

    def __post_init__(self) -> None:
        width, height = self.viewport
        if width <= 0 or height <= 0:
            raise ValueError(f"viewport must be positive, got {self.viewport}")
        if not 0.0 < self.bounce_factor < 1.0:
            raise ValueError(f"bounce_factor must be in (0, 1), got {self.bounce_factor}")
        for field_name in (
            "friction",
            "contact_margin",
            "move_step",
            "dive_step",
            "thrust_impulse",
            "thrust_cost_rate",
            "regen_rate",
            "overheat_regen_rate",
            "size_step",
            "weight_coefficient",
        ):
            if getattr(self, field_name) < 0.0:
                raise ValueError(f"{field_name} must be non-negative")
        if self.min_size > self.max_size:
            raise ValueError("min_size must not exceed max_size")
        for field_name in ("initial_size", "baseline_size"):
            size = getattr(self, field_name)
            if not self.min_size <= size <= self.max_size:
                raise ValueError(
                    f"{field_name} {size} outside [{self.min_size}, {self.max_size}]"
                )
        if self.max_size >= min(width, height):
            raise ValueError("max_size must fit inside the viewport")
        if self.weight_multiplier(self.max_size) < 0.0:
            raise ValueError("weight_coefficient makes thrust negative at max_size")

    def weight_multiplier(self, size: float) -> float:
        """Thrust scale for a square of ``size``. Smaller squares are lighter."""
        return 1.0 + (self.baseline_size - size) * self.weight_coefficient


_PROFILES: dict[str, PhysicsProfile] = {}


def register_profile(profile: PhysicsProfile) -> None:
    """Register a profile under its name. Overwrites if already registered."""
    _PROFILES[profile.name] = profile


def get_profile(name: str) -> PhysicsProfile:
    """Look up a profile by name. Raises UnknownProfileError if missing."""
    try:
        return _PROFILES[name]
    except KeyError:
        raise UnknownProfileError(name, profile_names()) from None


def profile_names() -> list[str]:
    return sorted(_PROFILES)


# Gravity, wall friction, overheating jetpack and adjustable size.
JETPACK = PhysicsProfile(
    name="jetpack",
    contact_margin=1.0,
    resizable=True,
)

# Gravity and friction with a fixed-size square.
CLASSIC = PhysicsProfile(name="classic")

# No gravity, frictionless, every edge reflects. Down dives.
ARCADE = PhysicsProfile(
    name="arcade",
    gravity=0.0,
    bounce_factor=0.9,
    friction=0.0,
    ceiling=True,
    dive_step=0.1,
)

# No gravity, but edges grip.
ARCADE_FRICTION = PhysicsProfile(
    name="arcade-friction",
    gravity=0.0,
    bounce_factor=0.9,
    friction=0.01,
    contact_margin=1.0,
    ceiling=True,
    dive_step=0.1,
)

for _profile in (JETPACK, CLASSIC, ARCADE, ARCADE_FRICTION):
    register_profile(_profile)
